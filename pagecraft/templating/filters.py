"""Filter library for template expressions.

Filters are pure and total: every filter returns a value for any input
and never raises.  Zero-argument filters are looked up by name
(case-insensitively); parameterized filters are written ``name:param``.
An unknown filter name passes the value through unchanged and logs a
warning.

Values that are ``None`` pass through every filter except ``default``.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence

from .values import is_number, round_half_up, stringify, to_json

logger = logging.getLogger(__name__)

_INTEGER_PREFIX_RE = re.compile(r"^\s*[+-]?\d+")
_FLOAT_PREFIX_RE = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INVALID_DATE = "Invalid Date"


def _parse_int(text: str) -> Optional[int]:
    match = _INTEGER_PREFIX_RE.match(text)
    return int(match.group(0)) if match else None


def _to_number(value: Any) -> Any:
    if isinstance(value, bool):
        return int(value)
    if is_number(value):
        return value
    text = stringify(value).strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return math.nan


def _to_integer(value: Any) -> Any:
    if is_number(value) and math.isfinite(value):
        return int(value)
    parsed = _parse_int(stringify(value))
    return parsed if parsed is not None else math.nan


def _to_float(value: Any) -> Any:
    if is_number(value):
        return float(value)
    match = _FLOAT_PREFIX_RE.match(stringify(value))
    return float(match.group(0)) if match else math.nan


def _truthy(value: Any) -> bool:
    if isinstance(value, str):
        return value != ""
    if is_number(value):
        return value != 0 and not math.isnan(value)
    return bool(value) if isinstance(value, bool) else True


def _to_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if is_number(value) and math.isfinite(value):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    return None


def _format_date(moment: datetime) -> str:
    return f"{moment.month}/{moment.day}/{moment.year}"


def _format_time(moment: datetime) -> str:
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d}:{moment.second:02d} {suffix}"


def _date_filter(formatter: Callable[[datetime], str]) -> Callable[[Any], Any]:
    def _apply(value: Any) -> Any:
        moment = _to_datetime(value)
        if moment is None:
            return _INVALID_DATE
        return formatter(moment)

    return _apply


def _currency(value: Any) -> Any:
    if not is_number(value) or not math.isfinite(value):
        return value
    amount = round_half_up(value, 2)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def _percent(value: Any) -> Any:
    if not is_number(value) or not math.isfinite(value):
        return value
    return f"{round_half_up(value * 100, 0):,.0f}%"


def _length(value: Any) -> int:
    if isinstance(value, (list, tuple, Mapping)):
        return len(value)
    return len(stringify(value))


def _first(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def _last(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return value[-1] if value else None
    return value


def _reverse(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return list(reversed(value))
    return stringify(value)[::-1]


def _sort(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return sorted(value, key=stringify)
    return value


def _unique(value: Any) -> Any:
    if not isinstance(value, (list, tuple)):
        return value
    result: List[Any] = []
    for item in value:
        if item not in result:
            result.append(item)
    return result


def _keys(value: Any) -> List[Any]:
    if isinstance(value, Mapping):
        return list(value.keys())
    if isinstance(value, (list, tuple)):
        return [str(index) for index in range(len(value))]
    return []


def _values(value: Any) -> List[Any]:
    if isinstance(value, Mapping):
        return list(value.values())
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _capitalize(value: Any) -> str:
    text = stringify(value)
    return text[:1].upper() + text[1:]


_ZERO_ARG_FILTERS: Dict[str, Callable[[Any], Any]] = {
    "uppercase": lambda value: stringify(value).upper(),
    "lowercase": lambda value: stringify(value).lower(),
    "capitalize": _capitalize,
    "trim": lambda value: stringify(value).strip(),
    "number": _to_number,
    "integer": _to_integer,
    "float": _to_float,
    "boolean": _truthy,
    "string": stringify,
    "json": to_json,
    "date": _date_filter(_format_date),
    "datetime": _date_filter(lambda moment: f"{_format_date(moment)}, {_format_time(moment)}"),
    "time": _date_filter(_format_time),
    "currency": _currency,
    "percent": _percent,
    "length": _length,
    "first": _first,
    "last": _last,
    "reverse": _reverse,
    "sort": _sort,
    "unique": _unique,
    "keys": _keys,
    "values": _values,
    "default": lambda value: value,
}


def _default(value: Any, param: str) -> Any:
    if value is None or value == "":
        return param
    return value


def _truncate(value: Any, param: str) -> Any:
    limit = _parse_int(param)
    if limit is None:
        return value
    text = stringify(value)
    return text[:max(limit, 0)] + "..." if len(text) > limit else text


def _round(value: Any, param: str) -> Any:
    if not is_number(value) or not math.isfinite(value):
        return value
    decimals = _parse_int(param) or 0
    rounded = round_half_up(value, max(decimals, 0))
    return int(rounded) if decimals <= 0 else float(rounded)


def _pad(value: Any, param: str) -> Any:
    width = _parse_int(param)
    text = stringify(value)
    if width is None:
        return text
    return text.rjust(width, "0")


def _slice(value: Any, param: str) -> Any:
    bounds = [_parse_int(part) for part in param.split(",")]
    start = bounds[0] if bounds else None
    end = bounds[1] if len(bounds) > 1 else None
    if isinstance(value, (list, tuple)):
        return list(value[start:end])
    return stringify(value)[start:end]


def _replace(value: Any, param: str) -> Any:
    search, _, replacement = param.partition(",")
    search = search.strip()
    replacement = replacement.strip()
    text = stringify(value)
    if not search:
        return text
    try:
        return re.sub(search, lambda _match: replacement, text)
    except re.error:
        return text.replace(search, replacement)


def _split(value: Any, param: str) -> Any:
    text = stringify(value)
    if param == "":
        return list(text)
    return text.split(param)


def _join(value: Any, param: str) -> Any:
    if isinstance(value, (list, tuple)):
        return param.join(stringify(item) for item in value)
    return value


def _format(value: Any, param: str) -> Any:
    if not is_number(value) or not math.isfinite(value):
        return value
    digits = _parse_int(param) or 2
    digits = max(digits, 0)
    text = f"{round_half_up(value, digits):,.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text in {"-0", ""} else text


_PARAMETERIZED_FILTERS: Dict[str, Callable[[Any, str], Any]] = {
    "default": _default,
    "truncate": _truncate,
    "round": _round,
    "pad": _pad,
    "slice": _slice,
    "replace": _replace,
    "split": _split,
    "join": _join,
    "format": _format,
}


def available_filters() -> List[str]:
    """Names of every known filter, zero-argument and parameterized."""
    return sorted(set(_ZERO_ARG_FILTERS) | set(_PARAMETERIZED_FILTERS))


def apply_filter(value: Any, spec: str) -> Any:
    """Apply a single filter spec such as ``uppercase`` or ``truncate:20``."""

    name, separator, param = spec.partition(":")
    name = name.strip().lower()
    if not separator:
        handler = _ZERO_ARG_FILTERS.get(name)
        if handler is None:
            logger.warning("Unknown filter: %s", spec, extra={"pagecraft_event": "filter_warning"})
            return value
        if value is None:
            return value
        return handler(value)

    parameterized = _PARAMETERIZED_FILTERS.get(name)
    if parameterized is None:
        logger.warning(
            "Unknown parameterized filter: %s", name, extra={"pagecraft_event": "filter_warning"}
        )
        return value
    if value is None and name != "default":
        return value
    return parameterized(value, param.strip())


def apply_filters(value: Any, specs: Sequence[str]) -> Any:
    """Apply filter specs left to right."""

    for spec in specs:
        value = apply_filter(value, spec)
    return value


__all__ = ["apply_filter", "apply_filters", "available_filters"]
