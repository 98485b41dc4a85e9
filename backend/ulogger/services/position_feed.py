"""Position Feed — turns stored positions into display payloads and form posts into rows.

Invariants:
    - Every payload carries date/time/zone strings from one LocaleProvider
    - Speed color is the configured scale at speed / speed_scale_max, clamped to [0, 1];
      positions without speed get no color
    - Form fields pass through core.coercion before reaching the ORM:
      lat/lon required, sensor fields nullable, time in unix seconds (default: now)
    - Stored coordinates and sensor readings are finite (no Infinity rows)

Design Decisions:
    - Scale endpoints parsed from hex once per request, not per position
    - Labels built with sprintf so a placeholder/argument mismatch fails loudly
"""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any
from zoneinfo import ZoneInfo

from ulogger.config import Settings
from ulogger.core.coercion import (
    MISSING, get_float, get_integer, get_string, round_half_up,
)
from ulogger.core.colors import hex_to_channels, scale_color
from ulogger.core.errors import InvalidInputError
from ulogger.core.format_strings import sprintf
from ulogger.core.time_strings import (
    LocaleProvider, SystemLocale, ZoneLocale, split_date_time,
)
from ulogger.models.position import Position
from ulogger.models.track import Track


MS_TO_KMH = 3.6


@dataclass(frozen=True)
class SpeedScale:
    """Color ramp for speed, from start (standing) to stop (max_speed and above)."""
    start: list[float]
    stop: list[float]
    max_speed: float

    @classmethod
    def from_settings(cls, settings: Settings) -> "SpeedScale":
        return cls(
            start=hex_to_channels(settings.speed_color_start),
            stop=hex_to_channels(settings.speed_color_stop),
            max_speed=settings.speed_scale_max,
        )

    def color_for(self, speed: float | None) -> str | None:
        if speed is None:
            return None
        intensity = 0.0
        if self.max_speed > 0:
            intensity = min(max(speed / self.max_speed, 0.0), 1.0)
        return scale_color(self.start, self.stop, intensity)


def locale_from_settings(settings: Settings) -> LocaleProvider:
    if settings.display_timezone:
        return ZoneLocale(ZoneInfo(settings.display_timezone))
    return SystemLocale()


def position_label(position: Position) -> str:
    parts = []
    if position.speed is not None:
        parts.append(sprintf("%d km/h", int(round_half_up(position.speed * MS_TO_KMH))))
    if position.altitude is not None:
        parts.append(sprintf("%d m", int(round_half_up(position.altitude))))
    if position.accuracy is not None:
        parts.append(sprintf("±%d m", position.accuracy))
    return ", ".join(parts)


def build_position_payload(
    position: Position, locale: LocaleProvider, scale: SpeedScale,
) -> dict:
    breakdown = split_date_time(position.time, locale)
    return {
        "id": position.id,
        "track_id": position.track_id,
        "latitude": position.latitude,
        "longitude": position.longitude,
        "altitude": position.altitude,
        "speed": position.speed,
        "bearing": position.bearing,
        "accuracy": position.accuracy,
        "provider": position.provider,
        "comment": position.comment,
        "image": position.image,
        "timestamp": int(_as_utc(position.time).timestamp()),
        **breakdown.to_dict(),
        "color": scale.color_for(position.speed),
        "label": position_label(position),
    }


def build_feed(
    positions: Sequence[Position], locale: LocaleProvider, scale: SpeedScale,
) -> list[dict]:
    return [build_position_payload(p, locale, scale) for p in positions]


def position_from_form(form: Mapping[str, Any], track: Track) -> Position:
    """Build a Position for track from raw form fields; raises InvalidInputError."""
    raw_time = form.get("time")
    if raw_time is None:
        when = datetime.now(timezone.utc)
    else:
        seconds = get_integer(raw_time, field="time")
        try:
            when = datetime.fromtimestamp(seconds, timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidInputError("Invalid value", field="time") from e
    return Position(
        track_id=track.id,
        user_id=track.user_id,
        time=when,
        latitude=_finite_float(form, "lat"),
        longitude=_finite_float(form, "lon"),
        altitude=_finite_float(form, "altitude", nullable=True),
        speed=_finite_float(form, "speed", nullable=True),
        bearing=_finite_float(form, "bearing", nullable=True),
        accuracy=get_integer(form.get("accuracy"), nullable=True, field="accuracy"),
        provider=get_string(form.get("provider"), nullable=True, field="provider"),
        comment=get_string(form.get("comment"), nullable=True, field="comment"),
    )


def _finite_float(
    form: Mapping[str, Any], name: str, nullable: bool = False,
) -> float | None:
    value = get_float(form.get(name, None if nullable else MISSING), nullable, field=name)
    if value is not None and not math.isfinite(value):
        raise InvalidInputError("Invalid value", field=name)
    return value


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
