"""Resolve template expressions against a :class:`DataContext`.

Resolution never raises for missing data: an unresolved variable renders
as an empty string.  The only error that can escape is
:class:`~pagecraft.errors.MalformedPathError` from :func:`resolve_template`,
and it is confined to the single field being resolved.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Sequence

from ..errors import MalformedPathError
from .context import DataContext
from .filters import apply_filters
from .nodes import TextNode
from .parser import parse_template
from .values import stringify, to_json

logger = logging.getLogger(__name__)


def _step(current: Any, segment: str) -> Any:
    if isinstance(current, Mapping):
        return current.get(segment)
    if isinstance(current, (list, tuple)):
        # Only ASCII decimal segments index; "²".isdigit() is true too.
        if segment.isascii() and segment.isdigit():
            position = int(segment)
            return current[position] if position < len(current) else None
        if segment == "length":
            return len(current)
        return None
    if isinstance(current, (str, bytes, int, float, bool)):
        return None
    if segment.startswith("_"):
        return None
    return getattr(current, segment, None)


def get_value_by_path(obj: Any, path: Sequence[str]) -> Any:
    """Walk ``path`` through ``obj``; any missing step yields ``None``."""

    current = obj
    for segment in path:
        if current is None:
            return None
        current = _step(current, segment)
    return current


def _is_object(value: Any) -> bool:
    return value is not None and not isinstance(value, (str, bytes, int, float, bool))


def _lookup(root: Any, rest: Sequence[str]) -> Any:
    return get_value_by_path(root, rest) if rest else root


def resolve_variable(path: Sequence[str], filters: Sequence[str], context: DataContext) -> Any:
    """Resolve a parsed variable path and apply its filters left to right."""

    if not path:
        return apply_filters(None, filters)

    root_key, rest = path[0], list(path[1:])
    if root_key == "item":
        value = _lookup(context.item, rest)
    elif root_key == "index":
        value = context.index
    elif root_key == "user":
        value = _lookup(context.user, rest)
    elif root_key == "shared":
        value = _lookup(context.shared_data, rest)
    elif root_key in context.data_sources:
        value = _lookup(context.data_sources[root_key], rest)
    elif _is_object(context.item):
        value = get_value_by_path(context.item, path)
    else:
        value = None
        for layer in (context.data_sources, context.shared_data, context.item):
            candidate = get_value_by_path(layer, path)
            if candidate is not None:
                value = candidate
                break

    return apply_filters(value, filters)


def _render_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (Mapping, list, tuple)):
        return to_json(value if not isinstance(value, Mapping) else dict(value))
    return stringify(value)


def resolve_template(template: Any, context: Optional[DataContext] = None) -> str:
    """Resolve every ``{{...}}`` in ``template`` and return the joined text.

    Raises:
        MalformedPathError: if an expression contains an unterminated ``[``.
    """

    if not isinstance(template, str):
        return stringify(template)
    context = context or DataContext()
    parts: List[str] = []
    for node in parse_template(template):
        if isinstance(node, TextNode):
            parts.append(node.value)
        else:
            parts.append(_render_value(resolve_variable(node.path, node.filters, context)))
    return "".join(parts)


def safe_resolve_template(template: Any, context: Optional[DataContext] = None, *, field: str = "") -> Any:
    """Resolve one field, leaving its raw text in place when it cannot be parsed."""

    try:
        return resolve_template(template, context)
    except MalformedPathError as exc:
        logger.warning(
            "Skipping field %s: %s",
            field or "<template>",
            exc.message,
            extra={"pagecraft_event": "malformed_path", "pagecraft_data": {"field": field}},
        )
        return template


def _resolve_item(value: Any, context: DataContext, field: str) -> Any:
    if isinstance(value, str):
        return safe_resolve_template(value, context, field=field) if "{{" in value else value
    if isinstance(value, Mapping):
        return resolve_template_variables(value, context, _prefix=f"{field}.")
    if isinstance(value, (list, tuple)):
        return [_resolve_item(item, context, f"{field}[{index}]") for index, item in enumerate(value)]
    return value


def resolve_template_variables(
    props: Mapping[str, Any],
    context: Optional[DataContext] = None,
    *,
    _prefix: str = "",
) -> Dict[str, Any]:
    """Return a resolved deep copy of ``props``; the input is never mutated."""

    context = context or DataContext()
    return {key: _resolve_item(value, context, f"{_prefix}{key}") for key, value in props.items()}


__all__ = [
    "get_value_by_path",
    "resolve_variable",
    "resolve_template",
    "safe_resolve_template",
    "resolve_template_variables",
]
