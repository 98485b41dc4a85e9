"""Config Store — runtime key/value settings layered over built-in defaults.

Invariants:
    - Only names present in DEFAULTS are accepted; values are stored as strings
    - Color entries must parse as hex (no NaN channels)
    - An update whose values all equal the current config writes nothing
      (checked with is_deep_equal(changes, current): extra current keys are ignored)
"""

import logging
import math
from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ulogger.core.coercion import get_string
from ulogger.core.colors import hex_to_channels
from ulogger.core.equality import is_deep_equal
from ulogger.core.errors import InvalidInputError
from ulogger.models.config_entry import ConfigEntry

logger = logging.getLogger(__name__)

DEFAULTS: dict[str, str] = {
    "map_api": "openlayers",
    "latitude": "52.23",
    "longitude": "21.01",
    "require_auth": "1",
    "public_tracks": "0",
    "pass_lenmin": "10",
    "pass_strength": "2",
    "interval_seconds": "10",
    "lang": "en",
    "units": "metric",
    "stroke_weight": "2",
    "stroke_color": "#ff0000",
    "stroke_opacity": "100",
    "color_normal": "#ffffff",
    "color_start": "#55b500",
    "color_stop": "#ff6a00",
    "color_extra": "#ccccff",
    "color_hilite": "#feff6a",
    "upload_maxsize": "0",
}

_COLOR_KEYS = frozenset(k for k in DEFAULTS if k.startswith("color_") or k == "stroke_color")


def _normalize(changes: Mapping[str, Any]) -> dict[str, str]:
    normalized = {}
    for name, raw in changes.items():
        if name not in DEFAULTS:
            raise InvalidInputError(f"Unknown config option: {name}", field=name)
        value = get_string(raw, field=name)
        if name in _COLOR_KEYS and any(math.isnan(c) for c in hex_to_channels(value)):
            raise InvalidInputError(f"Invalid color: {value}", field=name)
        normalized[name] = value
    return normalized


async def read_config(db: AsyncSession) -> dict[str, str]:
    result = await db.execute(select(ConfigEntry))
    config = dict(DEFAULTS)
    config.update({entry.name: entry.value for entry in result.scalars().all()})
    return config


async def update_config(
    db: AsyncSession, changes: Mapping[str, Any],
) -> tuple[bool, dict[str, str]]:
    """Apply changes; returns (changed, resulting config)."""
    normalized = _normalize(changes)
    current = await read_config(db)
    if is_deep_equal(normalized, current):
        return False, current

    for name, value in normalized.items():
        await db.merge(ConfigEntry(name=name, value=value))
    await db.commit()
    logger.info(f"Config updated: {', '.join(sorted(normalized))}")
    current.update(normalized)
    return True, current
