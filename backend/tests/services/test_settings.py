"""Settings — environment-driven configuration validation."""

import pytest
from pydantic import ValidationError

from ulogger.config import Settings


def test_postgres_url_uses_asyncpg():
    settings = Settings(database_url="postgresql://u:p@host/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host/db"


@pytest.mark.parametrize("field", ["speed_color_start", "speed_color_stop"])
@pytest.mark.parametrize("color", ["#zzzzzz", "", "blue"])
def test_scale_colors_must_be_hex(field, color):
    with pytest.raises(ValidationError):
        Settings(**{field: color})


def test_shorthand_scale_color_accepted():
    settings = Settings(speed_color_start="#f00", speed_color_stop="#00ff00")
    assert settings.speed_color_start == "#f00"
