"""String Formatting — strict %s/%d interpolation and fixed-rule HTML escaping.

Invariants:
    - Tokens scanned left to right: %%, %s, %d (first match wins at each position)
    - %% emits "%" and consumes no argument
    - Argument count must match exactly: missing or unused arguments raise FormatError
    - %d requires a numeric argument but substitutes it verbatim (no padding, no rounding)

Design Decisions:
    - Not a templating engine: only the three tokens, no width/precision flags
    - Integral floats render without ".0" so counts read naturally in labels
"""

import math
import re
from typing import Any

from ulogger.core.coercion import NUMBER_PATTERN
from ulogger.core.errors import FormatError

_TOKEN = re.compile(r"%%|%s|%d")


def _is_numeric(value: Any) -> bool:
    if isinstance(value, bool) or value is None:
        return False
    if isinstance(value, (int, float)):
        return not math.isnan(value)
    if isinstance(value, str):
        return NUMBER_PATTERN.fullmatch(value.strip()) is not None
    return False


def _to_text(value: Any) -> str:
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)


def sprintf(template: str, *args: Any) -> str:
    """Interpolate args into template's %s/%d tokens."""
    consumed = 0

    def substitute(match: re.Match) -> str:
        nonlocal consumed
        token = match.group(0)
        if token == "%%":
            return "%"
        if consumed >= len(args):
            raise FormatError(f"Missing argument for format specifier {token}")
        value = args[consumed]
        if token == "%d" and not _is_numeric(value):
            raise FormatError(f"Wrong format specifier {token} for {value} argument")
        consumed += 1
        return _to_text(value)

    result = _TOKEN.sub(substitute, template)
    if consumed < len(args):
        raise FormatError(f"Unused argument for format specifier {template}")
    return result


def html_encode(text: str) -> str:
    """Escape &, quotes and angle brackets for HTML text and attributes."""
    return (
        text.replace("&", "&amp;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )
