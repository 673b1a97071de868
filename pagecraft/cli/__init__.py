"""Command line interface for pagecraft.

Usage::

    pagecraft export static home.json about.json --out dist/site.zip
    pagecraft export static home.json --single --out home.html
    pagecraft export server home.json --group-id com.acme --artifact-id shop
    pagecraft resolve "Hello {{user.name | uppercase}}" --context ctx.json
    pagecraft variables home.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .. import __version__
from ..config import load_workspace_config
from ..errors import PageCraftError
from .commands import cmd_export_server, cmd_export_static, cmd_resolve, cmd_variables
from .errors import CLIError, format_cli_error

logger = logging.getLogger(__name__)


def _configure_logging(args: argparse.Namespace) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("pagecraft").setLevel(level)


def _add_export_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("pages", nargs="+", help="Page definition JSON files")
    parser.add_argument("--out", help="Output file (defaults under the configured output directory)")
    parser.add_argument("--workers", type=int, default=None, help="Pages rendered in parallel")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagecraft",
        description="Compile page definitions into static sites or server-rendered projects",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="Path to a pagecraft.toml or .pagecraftrc file")
    parser.add_argument("--workspace", default=None, help="Workspace root (defaults to the current directory)")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Debug logging and full tracebacks")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Only log warnings and errors")

    subparsers = parser.add_subparsers(dest="command")

    export_parser = subparsers.add_parser("export", help="Export pages")
    export_targets = export_parser.add_subparsers(dest="target")

    static_parser = export_targets.add_parser("static", help="Static HTML/CSS/JS site")
    _add_export_common(static_parser)
    static_parser.add_argument("--single", action="store_true", help="Export one self-contained HTML file")
    static_parser.add_argument("--inline", action="store_true", help="Inline CSS and JS into every page")
    static_parser.add_argument("--minify", action="store_true", help="Collapse whitespace between tags")
    static_parser.add_argument("--site-name", default=None, help="Site name used in the archive README")
    static_parser.set_defaults(func=cmd_export_static)

    server_parser = export_targets.add_parser("server", help="Server-rendered project scaffold")
    _add_export_common(server_parser)
    server_parser.add_argument("--project-name", default=None)
    server_parser.add_argument("--group-id", default=None)
    server_parser.add_argument("--artifact-id", default=None)
    server_parser.set_defaults(func=cmd_export_server)

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a template string against a data context")
    resolve_parser.add_argument("template", help="Template text, e.g. 'Hi {{user.name}}'")
    resolve_parser.add_argument("--context", help="JSON file with dataSources/item/index/sharedData/user")
    resolve_parser.set_defaults(func=cmd_resolve)

    variables_parser = subparsers.add_parser("variables", help="List variable paths used in a JSON file")
    variables_parser.add_argument("file")
    variables_parser.set_defaults(func=cmd_variables)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the process exit code."""

    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help(sys.stderr)
        return 1

    _configure_logging(args)
    try:
        workspace = Path(args.workspace) if args.workspace else Path.cwd()
        config_path = Path(args.config) if args.config else None
        args.workspace_config = load_workspace_config(workspace, config_path)
        return args.func(args)
    except (PageCraftError, CLIError) as exc:
        print(format_cli_error(exc, verbose=args.verbose), file=sys.stderr)
        return 1


__all__ = ["build_parser", "main"]
