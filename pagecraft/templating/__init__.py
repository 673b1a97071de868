"""The ``{{path | filter:arg}}`` expression language.

Used for live preview (resolving bindings against a :class:`DataContext`)
and by the server-template generator, which rewrites the same syntax
into the target engine's ``${...}`` form.
"""

from .context import DataContext
from .filters import apply_filter, apply_filters, available_filters
from .nodes import TemplateNode, TextNode, VariableNode
from .parser import (
    extract_variables,
    get_all_variable_paths,
    has_template_variables,
    parse_template,
    parse_variable_expression,
    parse_variable_path,
    tokenize_template,
)
from .resolver import (
    get_value_by_path,
    resolve_template,
    resolve_template_variables,
    resolve_variable,
    safe_resolve_template,
)

__all__ = [
    "DataContext",
    "TemplateNode",
    "TextNode",
    "VariableNode",
    "apply_filter",
    "apply_filters",
    "available_filters",
    "extract_variables",
    "get_all_variable_paths",
    "get_value_by_path",
    "has_template_variables",
    "parse_template",
    "parse_variable_expression",
    "parse_variable_path",
    "resolve_template",
    "resolve_template_variables",
    "resolve_variable",
    "safe_resolve_template",
    "tokenize_template",
]
