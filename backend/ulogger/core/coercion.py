"""Input Coercion — strict conversion of untyped external values to float/int/str.

Invariants:
    - MISSING always fails; None fails unless nullable (then returns None untouched)
    - Numeric results are never NaN; integer results are never infinite
    - Integers are parsed as floats first, then rounded half up (never truncated)
    - Numeric parsing accepts the longest leading number prefix ("12.5km" -> 12.5),
      matching what browser clients send for form fields
    - Pure: no side effects, no logging

Design Decisions:
    - MISSING sentinel separate from None: "field absent" and "field explicitly null"
      are different inputs, and only the latter can be accepted
    - Annotated pydantic types reuse the same rules so route signatures and
      hand-written form parsing cannot drift apart
"""

import math
import re
from enum import Enum
from typing import Annotated, Any

from pydantic import BeforeValidator

from ulogger.core.errors import InvalidInputError


class CoercionKind(str, Enum):
    """Target type of a coercion."""
    FLOAT = "float"
    INT = "int"
    STRING = "string"


class _Missing:
    """Marker for a value that was never provided."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()

NUMBER_PATTERN = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
)


def parse_float_prefix(value: Any) -> float:
    """Parse the leading decimal number of value's text; NaN when there is none."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    match = NUMBER_PATTERN.match(str(value).lstrip())
    if not match:
        return math.nan
    text = match.group(0)
    if text.endswith("Infinity"):
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def round_half_up(value: float) -> float:
    """Round to the nearest integer, ties toward +infinity."""
    return math.floor(value + 0.5)


def coerce(
    value: Any,
    kind: CoercionKind | str,
    nullable: bool = False,
    field: str | None = None,
) -> float | int | str | None:
    """Coerce value to kind or raise InvalidInputError.

    Raises ValueError for an unknown kind (programming error, not bad input).
    """
    kind = CoercionKind(kind)
    if nullable and value is None:
        return None
    if value is MISSING or value is None:
        raise InvalidInputError("Invalid value", field=field)

    if kind is CoercionKind.STRING:
        return str(value)

    parsed = parse_float_prefix(value)
    if math.isnan(parsed):
        raise InvalidInputError("Invalid value", field=field)
    if kind is CoercionKind.FLOAT:
        return parsed
    if math.isinf(parsed):
        raise InvalidInputError("Invalid value", field=field)
    return int(round_half_up(parsed))


def get_float(value: Any, nullable: bool = False, field: str | None = None) -> float | None:
    return coerce(value, CoercionKind.FLOAT, nullable, field)


def get_integer(value: Any, nullable: bool = False, field: str | None = None) -> int | None:
    return coerce(value, CoercionKind.INT, nullable, field)


def get_string(value: Any, nullable: bool = False, field: str | None = None) -> str | None:
    return coerce(value, CoercionKind.STRING, nullable, field)


# ─── Pydantic integration ───────────────────────────────────────

def _validator(kind: CoercionKind, nullable: bool):
    """Build a BeforeValidator callable; pydantic reports ValueError as a field error."""
    def validate(value: Any) -> Any:
        try:
            return coerce(value, kind, nullable)
        except InvalidInputError as e:
            raise ValueError(e.message) from e
    return validate


CoercedFloat = Annotated[float, BeforeValidator(_validator(CoercionKind.FLOAT, False))]
CoercedInt = Annotated[int, BeforeValidator(_validator(CoercionKind.INT, False))]
OptionalFloat = Annotated[
    float | None, BeforeValidator(_validator(CoercionKind.FLOAT, True)),
]
OptionalInt = Annotated[
    int | None, BeforeValidator(_validator(CoercionKind.INT, True)),
]
