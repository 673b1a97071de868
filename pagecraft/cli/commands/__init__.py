"""Subcommand implementations for the pagecraft CLI."""

from .export import cmd_export_server, cmd_export_static
from .templating import cmd_resolve, cmd_variables

__all__ = ["cmd_export_server", "cmd_export_static", "cmd_resolve", "cmd_variables"]
