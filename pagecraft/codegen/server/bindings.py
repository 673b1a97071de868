"""Rewrite ``{{path | filter}}`` bindings into server-side ``${...}`` expressions.

This is a syntactic rewrite: the generated template engine evaluates the
expression at request time.  A value that is exactly one binding becomes
``${path}``; text mixed with bindings becomes a literal substitution
``|Hello ${user.name}!|``.  Filters with a direct server equivalent are
translated; the rest are dropped with a warning.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence

from ...model import ComponentInstance
from ...templating.parser import has_template_variables, split_filter_chain, tokenize_template

logger = logging.getLogger(__name__)


def _string_literal(text: str) -> str:
    return "'" + text.replace("'", "\\'") + "'"


_FILTER_REWRITES: Dict[str, Callable[[str, str], str]] = {
    "uppercase": lambda expr, _param: f"#strings.toUpperCase({expr})",
    "lowercase": lambda expr, _param: f"#strings.toLowerCase({expr})",
    "capitalize": lambda expr, _param: f"#strings.capitalize({expr})",
    "trim": lambda expr, _param: f"#strings.trim({expr})",
    "default": lambda expr, param: f"({expr} ?: {_string_literal(param)})",
    "truncate": lambda expr, param: f"#strings.abbreviate({expr}, {int(param) + 3})" if param.isdigit() else expr,
    "join": lambda expr, param: f"#strings.listJoin({expr}, {_string_literal(param)})",
}


def _apply_filter_rewrites(expression: str, filters: Sequence[str]) -> str:
    for spec in filters:
        name, _, param = spec.partition(":")
        rewrite = _FILTER_REWRITES.get(name.strip().lower())
        if rewrite is None:
            logger.warning(
                "Filter '%s' has no server-side equivalent and was dropped",
                name.strip(),
                extra={"pagecraft_event": "filter_warning"},
            )
            continue
        expression = rewrite(expression, param.strip())
    return expression


def convert_expression(body: str) -> str:
    """Turn one binding body (``user.name | uppercase``) into an expression without ``${}``."""

    parts = split_filter_chain(body)
    return _apply_filter_rewrites(parts[0], [part for part in parts[1:] if part])


def to_server_expression(text: str) -> str:
    """Rewrite ``text`` containing ``{{...}}`` bindings into a server expression."""

    tokens = tokenize_template(text)
    if len(tokens) == 1 and tokens[0].is_expression:
        return "${" + convert_expression(tokens[0].value) + "}"

    pieces: List[str] = []
    for token in tokens:
        if token.is_expression:
            pieces.append("${" + convert_expression(token.value) + "}")
        else:
            pieces.append(token.value.replace("|", "\\|"))
    return "|" + "".join(pieces) + "|"


def binding_for(component: ComponentInstance, prop: str) -> Optional[str]:
    """Server expression bound to ``prop``, or ``None`` when the prop is static.

    An explicit ``template_bindings`` entry wins over ``{{...}}`` text in
    the prop value.  A binding written as a bare path (``product.name``)
    is treated as a single variable.
    """

    explicit = component.template_bindings.get(prop)
    if explicit:
        if has_template_variables(explicit):
            return to_server_expression(explicit)
        return "${" + convert_expression(explicit) + "}"
    value = component.props.get(prop)
    if isinstance(value, str) and has_template_variables(value):
        return to_server_expression(value)
    return None


__all__ = ["convert_expression", "to_server_expression", "binding_for"]
