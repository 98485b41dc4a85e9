"""Time Strings — split an instant into date, time and a simplified zone label.

Invariants:
    - date is the wall-clock calendar date, zero padded (YYYY-MM-DD)
    - zone is "GMT" plus the UTC offset with a leading hundreds zero and a
      trailing "00" minutes suffix removed (GMT+0200 -> GMT+2, GMT+0530 kept),
      followed by the uppercase-letter runs of the zone name when it has any
      ("Central European Summer Time" -> "CEST")
    - zone is empty when the wall clock carries no UTC offset
    - Naive instants are read as UTC (the store keeps UTC)

Design Decisions:
    - Ambient locale/timezone injected as a LocaleProvider: the host zone is a
      default, never a hidden dependency, so tests pin ZoneLocale(ZoneInfo(...))
    - Best-effort display label, not calendar arithmetic: no i18n beyond strftime
"""

import re
from dataclasses import dataclass, asdict
from datetime import datetime, timezone, tzinfo
from typing import Protocol

_REDUNDANT_OFFSET_ZEROS = re.compile(r"0(?=[1-9]00)|00\b")
_UPPERCASE_RUN = re.compile(r"\b[A-Z]+")


@dataclass(frozen=True)
class TimeBreakdown:
    """Display strings for one instant."""
    date: str
    time: str
    zone: str

    def to_dict(self) -> dict:
        return asdict(self)


class LocaleProvider(Protocol):
    """Converts instants to a wall clock and renders it."""
    def localize(self, instant: datetime) -> datetime: ...
    def format_time(self, wall: datetime) -> str: ...
    def zone_name(self, wall: datetime) -> str | None: ...


def _as_aware(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant


class SystemLocale:
    """Host timezone, 24-hour clock."""

    time_format = "%H:%M:%S"

    def localize(self, instant: datetime) -> datetime:
        return _as_aware(instant).astimezone()

    def format_time(self, wall: datetime) -> str:
        return wall.strftime(self.time_format)

    def zone_name(self, wall: datetime) -> str | None:
        return wall.tzname()


class ZoneLocale(SystemLocale):
    """Fixed timezone, e.g. ZoneLocale(ZoneInfo("Europe/Warsaw"))."""

    def __init__(self, zone: tzinfo, time_format: str = "%H:%M:%S"):
        self.zone = zone
        self.time_format = time_format

    def localize(self, instant: datetime) -> datetime:
        return _as_aware(instant).astimezone(self.zone)


def simplify_zone(offset: str, name: str | None) -> str:
    """Build the short zone label from a ±HHMM offset and the zone's name."""
    label = _REDUNDANT_OFFSET_ZEROS.sub("", f"GMT{offset}")
    if name and re.search(r"[A-Z]", name):
        label += " " + "".join(_UPPERCASE_RUN.findall(name))
    return label


def split_date_time(
    instant: datetime, locale: LocaleProvider | None = None,
) -> TimeBreakdown:
    """Render instant as date, time and zone strings in the locale's wall clock."""
    locale = locale or SystemLocale()
    wall = locale.localize(instant)
    date_str = f"{wall.year:04d}-{wall.month:02d}-{wall.day:02d}"
    time_str = locale.format_time(wall)
    zone = ""
    if wall.utcoffset() is not None:
        zone = simplify_zone(wall.strftime("%z"), locale.zone_name(wall))
    return TimeBreakdown(date=date_str, time=time_str, zone=zone)
