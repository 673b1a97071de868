"""``pagecraft export static|server`` implementations."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ...codegen.server import write_server_project
from ...codegen.static import export_single_page, write_site_archive
from ...config import SINGLE_PAGE_OPTIONS, WorkspaceConfig, apply_overrides
from ...errors import ExportIOError
from ...export import ExportTemplateRegistry, register_core_export_templates
from ..errors import CLIValidationError
from ..loading import load_pages

logger = logging.getLogger(__name__)


def build_registry(config: WorkspaceConfig) -> ExportTemplateRegistry:
    """Registry holding the core templates plus the ones declared in configuration."""

    registry = ExportTemplateRegistry()
    register_core_export_templates(registry)
    configured = config.register_plugins(registry)
    if configured:
        logger.info("Registered %d export template(s) from configuration", configured)
    return registry


def _workers(args: argparse.Namespace, config: WorkspaceConfig) -> int:
    return args.workers if args.workers is not None else config.export.max_workers


def cmd_export_static(args: argparse.Namespace) -> int:
    config: WorkspaceConfig = args.workspace_config
    pages = load_pages(args.pages)
    registry = build_registry(config)

    if args.single:
        if len(pages) != 1:
            raise CLIValidationError(
                "--single exports exactly one page",
                hint="Drop --single to export a whole site archive.",
            )
        options = apply_overrides(SINGLE_PAGE_OPTIONS, minify=args.minify or None)
        html = export_single_page(pages[0].definition, registry=registry, options=options)
        if args.out:
            out = Path(args.out)
            try:
                out.parent.mkdir(parents=True, exist_ok=True)
                out.write_text(html, encoding="utf-8")
            except OSError as exc:
                raise ExportIOError(f"Failed to write {out}: {exc}", filename=str(out)) from exc
            print(f"Wrote {out}")
        else:
            sys.stdout.write(html + "\n")
        return 0

    options = apply_overrides(
        config.static,
        include_css=False if args.inline else None,
        include_js=False if args.inline else None,
        minify=args.minify or None,
        site_name=args.site_name,
    )
    out = Path(args.out) if args.out else config.export.output_dir / "site.zip"
    target = write_site_archive(
        out,
        pages,
        registry=registry,
        options=options,
        max_workers=_workers(args, config),
    )
    print(f"Wrote {target} ({len(pages)} page(s))")
    return 0


def cmd_export_server(args: argparse.Namespace) -> int:
    config: WorkspaceConfig = args.workspace_config
    pages = load_pages(args.pages)
    registry = build_registry(config)

    options = apply_overrides(
        config.server,
        project_name=args.project_name,
        group_id=args.group_id,
        artifact_id=args.artifact_id,
    )
    out = Path(args.out) if args.out else config.export.output_dir / f"{options.artifact_id}.zip"
    target = write_server_project(
        out,
        pages,
        registry=registry,
        options=options,
        max_workers=_workers(args, config),
    )
    print(f"Wrote {target} ({len(pages)} page(s))")
    return 0


__all__ = ["build_registry", "cmd_export_static", "cmd_export_server"]
