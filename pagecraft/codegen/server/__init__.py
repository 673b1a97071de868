"""Server-rendered (``th:`` attribute) template target and project scaffold."""

from .bindings import binding_for, to_server_expression
from .components import BUILTIN_EMITTERS, ServerRenderer
from .page import generate_page_template
from .project import (
    build_server_project,
    export_server_project,
    method_name_for,
    template_name_for,
    write_server_project,
)

__all__ = [
    "BUILTIN_EMITTERS",
    "ServerRenderer",
    "binding_for",
    "build_server_project",
    "export_server_project",
    "generate_page_template",
    "method_name_for",
    "template_name_for",
    "to_server_expression",
    "write_server_project",
]
