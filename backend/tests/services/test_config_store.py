"""Config store tests — defaults overlay, validation, and no-op detection."""

import pytest

from ulogger.core.errors import InvalidInputError
from ulogger.services.config_store import DEFAULTS, read_config, update_config


async def test_defaults_when_nothing_stored(test_db):
    assert await read_config(test_db) == DEFAULTS


async def test_update_persists_values(test_db):
    changed, config = await update_config(test_db, {"units": "imperial", "interval_seconds": 30})

    assert changed is True
    assert config["units"] == "imperial"
    assert config["interval_seconds"] == "30"
    stored = await read_config(test_db)
    assert stored["units"] == "imperial"


async def test_update_with_current_values_is_noop(test_db):
    await update_config(test_db, {"units": "imperial"})

    changed, config = await update_config(test_db, {"units": "imperial", "lang": "en"})

    assert changed is False
    assert config["units"] == "imperial"


async def test_unknown_option_rejected(test_db):
    with pytest.raises(InvalidInputError) as exc_info:
        await update_config(test_db, {"theme": "dark"})
    assert exc_info.value.field == "theme"


@pytest.mark.parametrize("value", ["#zzz", "", "blue"])
async def test_invalid_color_rejected(test_db, value):
    with pytest.raises(InvalidInputError):
        await update_config(test_db, {"color_start": value})


async def test_null_value_rejected(test_db):
    with pytest.raises(InvalidInputError):
        await update_config(test_db, {"lang": None})
