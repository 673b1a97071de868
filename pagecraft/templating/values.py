"""Value coercions shared by the filter library and the resolver."""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_json(value: Any) -> str:
    """Compact JSON rendering; unknown objects fall back to ``str``."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def stringify(value: Any) -> str:
    """Coerce ``value`` to display text.

    Booleans render as ``true``/``false``, integral floats drop their
    fractional part and sequences join their items with commas.
    """

    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        return ",".join(stringify(item) for item in value)
    if isinstance(value, Mapping):
        return to_json(dict(value))
    return str(value)


def round_half_up(value: float, digits: int) -> Decimal:
    """Round ``value`` to ``digits`` decimals, halves away from zero."""

    try:
        exact = Decimal(repr(float(value)))
    except (InvalidOperation, TypeError, ValueError):
        return Decimal(0)
    try:
        return exact.quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return exact


__all__ = ["is_number", "to_json", "stringify", "round_half_up"]
