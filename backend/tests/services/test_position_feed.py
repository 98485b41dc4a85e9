"""Position feed tests — payload assembly and form coercion (no database).

Tests cover:
    - Speed colors clamp to the configured scale; no speed → no color
    - Payloads carry date/time/zone from the injected locale
    - Form posts: required lat/lon, nullable sensors, unix-seconds time
"""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from ulogger.config import Settings
from ulogger.core.errors import InvalidInputError
from ulogger.core.time_strings import SystemLocale, ZoneLocale
from ulogger.models.position import Position
from ulogger.models.track import Track
from ulogger.services.position_feed import (
    SpeedScale, build_position_payload, locale_from_settings, position_from_form,
    position_label,
)

WARSAW = ZoneLocale(ZoneInfo("Europe/Warsaw"))
GRAYSCALE = SpeedScale(start=[0, 0, 0], stop=[255, 255, 255], max_speed=20.0)


def _track() -> Track:
    return Track(id=7, user_id=3, name="t")


# --- Speed scale -------------------------------------------------------------

def test_no_speed_has_no_color():
    assert GRAYSCALE.color_for(None) is None


def test_speed_colors_clamp_to_scale():
    assert GRAYSCALE.color_for(0) == "rgb(0,0,0)"
    assert GRAYSCALE.color_for(10) == "rgb(128,128,128)"
    assert GRAYSCALE.color_for(50) == "rgb(255,255,255)"
    assert GRAYSCALE.color_for(-3) == "rgb(0,0,0)"


def test_zero_max_speed_uses_start_color():
    scale = SpeedScale(start=[10, 20, 30], stop=[255, 255, 255], max_speed=0)
    assert scale.color_for(12) == "rgb(10,20,30)"


def test_scale_from_settings_parses_hex():
    scale = SpeedScale.from_settings(Settings(
        speed_color_start="#f00", speed_color_stop="#0000ff", speed_scale_max=10,
    ))
    assert scale.start == [255, 0, 0]
    assert scale.stop == [0, 0, 255]


# --- Locale selection --------------------------------------------------------

def test_locale_from_settings():
    assert isinstance(locale_from_settings(Settings(display_timezone="")), SystemLocale)
    zoned = locale_from_settings(Settings(display_timezone="Europe/Warsaw"))
    assert isinstance(zoned, ZoneLocale)


# --- Payloads ----------------------------------------------------------------

def test_payload_has_display_strings():
    position = Position(
        id=1, track_id=7, user_id=3,
        time=datetime(2017, 6, 14, 9, 42, 19, tzinfo=timezone.utc),
        latitude=52.23, longitude=21.01, speed=10.0, altitude=120.4, accuracy=5,
    )

    payload = build_position_payload(position, WARSAW, GRAYSCALE)

    assert payload["date"] == "2017-06-14"
    assert payload["time"] == "11:42:19"
    assert payload["zone"] == "GMT+2 CEST"
    assert payload["color"] == "rgb(128,128,128)"
    assert payload["label"] == "36 km/h, 120 m, ±5 m"
    assert payload["timestamp"] == 1497433339


def test_label_empty_without_sensor_values():
    position = Position(latitude=0.0, longitude=0.0)
    assert position_label(position) == ""


@pytest.mark.parametrize("altitude, expected", [(0.5, "1 m"), (2.5, "3 m"), (-2.5, "-2 m")])
def test_label_rounds_half_up(altitude, expected):
    position = Position(latitude=0.0, longitude=0.0, altitude=altitude)
    assert position_label(position) == expected


# --- Form coercion -----------------------------------------------------------

def test_form_with_all_fields():
    position = position_from_form({
        "lat": "52.2297", "lon": "21.0122", "time": "1497433339",
        "altitude": "101.5", "speed": "3.2", "bearing": "270",
        "accuracy": "5.6", "provider": "gps", "comment": "bridge",
    }, _track())

    assert position.track_id == 7
    assert position.user_id == 3
    assert position.latitude == 52.2297
    assert position.longitude == 21.0122
    assert position.time == datetime(2017, 6, 14, 9, 42, 19, tzinfo=timezone.utc)
    assert position.accuracy == 6
    assert position.provider == "gps"


def test_form_optional_fields_default_to_none():
    position = position_from_form({"lat": "1", "lon": "2"}, _track())

    assert position.altitude is None
    assert position.speed is None
    assert position.comment is None
    assert position.time.tzinfo is not None


@pytest.mark.parametrize("form, field", [
    ({"lon": "2"}, "lat"),
    ({"lat": "1"}, "lon"),
    ({"lat": "north", "lon": "2"}, "lat"),
    ({"lat": "1", "lon": "2", "altitude": "high"}, "altitude"),
    ({"lat": "1", "lon": "2", "time": "yesterday"}, "time"),
    ({"lat": "1", "lon": "2", "time": "1e30"}, "time"),
    ({"lat": "Infinity", "lon": "2"}, "lat"),
    ({"lat": "1", "lon": "-Infinity"}, "lon"),
    ({"lat": "1", "lon": "2", "speed": "Infinity"}, "speed"),
    ({"lat": "1", "lon": "2", "bearing": "1e400"}, "bearing"),
])
def test_form_rejects_invalid_fields(form, field):
    with pytest.raises(InvalidInputError) as exc_info:
        position_from_form(form, _track())
    assert exc_info.value.field == field
