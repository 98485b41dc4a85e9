"""Color Engine — hex to rgba conversion and linear scale-color interpolation.

Invariants:
    - hex_to_rgba splits the digits into 3 equal groups; shorthand (odd length)
      doubles each digit ("f00" == "ff0000")
    - Malformed hex is not rejected: an unparseable group renders as NaN
      and the caller owns validating its palette
    - scale_color rejects intensity outside [0, 1] and channels outside [0, 255]
    - Scale channels are rounded half up, so 127.5 becomes 128

Design Decisions:
    - Output strings carry no spaces: they are embedded in style attributes
      and compared verbatim in tests
"""

import math
import re
from collections.abc import Sequence

from ulogger.core.coercion import round_half_up
from ulogger.core.errors import ColorRangeError

RGB = Sequence[float]

_HEX_PREFIX = re.compile(r"[0-9a-fA-F]+")


def _parse_hex(group: str) -> float:
    """Parse leading hex digits of group; NaN when there are none."""
    match = _HEX_PREFIX.match(group.strip())
    if not match:
        return math.nan
    return int(match.group(0), 16)


def _number_text(value: float) -> str:
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
    return str(value)


def hex_to_channels(hex_color: str) -> list[float]:
    """Convert '#rgb' / '#rrggbb' to three channel values."""
    digits = hex_color.replace("#", "", 1)
    size = len(digits) // 3
    groups = [digits[i * size:(i + 1) * size] for i in range(3)]
    if len(digits) % 2:
        groups = [g + g for g in groups]
    return [_parse_hex(g) for g in groups]


def hex_to_rgba(hex_color: str, opacity: float = 1) -> str:
    """Convert a hex color and opacity to an rgba() string."""
    parts = [_number_text(c) for c in hex_to_channels(hex_color)]
    parts.append(_number_text(opacity))
    return f"rgba({','.join(parts)})"


def scale_color(start: RGB, end: RGB, intensity: float) -> str:
    """Interpolate between start and end colors; intensity 0 is start, 1 is end."""
    if not 0 <= intensity <= 1:
        raise ColorRangeError()
    rgb = []
    for i in range(3):
        if not (0 <= start[i] <= 255 and 0 <= end[i] <= 255):
            raise ColorRangeError()
        rgb.append(int(round_half_up((end[i] - start[i]) * intensity + start[i])))
    return f"rgb({rgb[0]},{rgb[1]},{rgb[2]})"
