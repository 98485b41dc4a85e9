"""Color engine tests — hex parsing and scale interpolation."""

import pytest

from ulogger.core.colors import hex_to_channels, hex_to_rgba, scale_color
from ulogger.core.errors import ColorRangeError


def test_full_hex_with_opacity():
    assert hex_to_rgba("#ff0000", 0.5) == "rgba(255,0,0,0.5)"


def test_shorthand_hex_doubles_digits():
    assert hex_to_rgba("#f00") == "rgba(255,0,0,1)"
    assert hex_to_rgba("#abc") == "rgba(170,187,204,1)"


def test_hash_prefix_is_optional():
    assert hex_to_rgba("00ff00") == "rgba(0,255,0,1)"


def test_malformed_hex_renders_nan_channels():
    assert hex_to_rgba("#zzzzzz") == "rgba(NaN,NaN,NaN,1)"


def test_hex_to_channels():
    assert hex_to_channels("#5300ff") == [83, 0, 255]


def test_scale_midpoint_rounds_half_up():
    assert scale_color([0, 0, 0], [255, 255, 255], 0.5) == "rgb(128,128,128)"


def test_scale_endpoints():
    assert scale_color([10, 20, 30], [200, 100, 0], 0) == "rgb(10,20,30)"
    assert scale_color([10, 20, 30], [200, 100, 0], 1) == "rgb(200,100,0)"


def test_scale_descending_channels():
    assert scale_color([255, 0, 0], [0, 0, 255], 0.25) == "rgb(191,0,64)"


@pytest.mark.parametrize("intensity", [1.5, -0.1, float("nan")])
def test_scale_rejects_intensity_out_of_range(intensity):
    with pytest.raises(ColorRangeError):
        scale_color([0, 0, 0], [255, 255, 255], intensity)


@pytest.mark.parametrize("start, end", [
    ([0, 0, 256], [255, 255, 255]),
    ([0, 0, 0], [255, -1, 255]),
])
def test_scale_rejects_channels_out_of_range(start, end):
    with pytest.raises(ColorRangeError):
        scale_color(start, end, 0.5)
