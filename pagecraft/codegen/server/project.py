"""Server project export: page templates plus a runnable project scaffold."""

from __future__ import annotations

import json
import re
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Set, Union

from ...config import ServerProjectOptions
from ...export import ArchiveBuilder, ExportTemplateRegistry
from ...model import SitePage
from ...observability import log_export_event
from ..pipeline import render_pages
from .assets import BASE_CSS, BASE_JS
from .components import ServerRenderer
from .page import generate_page_template
from .scaffolding import RouteSpec, scaffold_files

RESOURCES = "src/main/resources"

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")

JAVA_RESERVED = frozenset(
    """
    abstract assert boolean break byte case catch char class const continue default do double
    else enum extends final finally float for goto if implements import instanceof int interface
    long native new package private protected public return short static strictfp super switch
    synchronized this throw throws transient try void volatile while true false null var record
    yield
    """.split()
)


def template_name_for(page_name: str) -> str:
    """``"About Us"`` -> ``"about-us"``: lowercase, every other character becomes ``-``."""
    return _NON_ALNUM_RE.sub("-", page_name.lower())


def java_identifier(raw: str, *, fallback: str) -> str:
    """Lowercase alphanumeric identifier that is legal in Java source."""

    name = _NON_ALNUM_RE.sub("", raw.lower()) or fallback
    if name[0].isdigit():
        name = f"page{name}"
    if name in JAVA_RESERVED:
        name = f"{name}Page"
    return name


def method_name_for(page_name: str) -> str:
    return java_identifier(page_name, fallback="home")


def java_package(options: ServerProjectOptions) -> str:
    segments = [java_identifier(part, fallback="app") for part in options.group_id.split(".") if part]
    segments.append(java_identifier(options.artifact_id, fallback="site"))
    return ".".join(segments)


def _unique(base: str, used: Set[str], separator: str = "") -> str:
    name = base
    suffix = 2
    while name in used:
        name = f"{base}{separator}{suffix}"
        suffix += 1
    used.add(name)
    return name


def build_routes(pages: Sequence[SitePage]) -> List[RouteSpec]:
    """One route per page; handler and template names get numeric suffixes on collision."""

    methods: Set[str] = set()
    templates: Set[str] = set()
    routes: List[RouteSpec] = []
    for page in pages:
        routes.append(
            RouteSpec(
                page_name=page.page_name,
                path=page.route_path or "/",
                template_name=_unique(template_name_for(page.page_name), templates, "-"),
                method_name=_unique(method_name_for(page.page_name), methods),
            )
        )
    return routes


def page_data_descriptor(page: SitePage) -> Dict[str, Any]:
    """Metadata the runtime loads per request, with the declared data sources."""

    data_context = page.definition.data_context
    return {
        "pageName": page.page_name,
        "title": page.title,
        "description": page.description,
        "path": page.route_path,
        "dataSources": dict(data_context.data_sources) if data_context else {},
    }


def build_server_project(
    pages: Sequence[SitePage],
    *,
    registry: Optional[ExportTemplateRegistry] = None,
    options: ServerProjectOptions = ServerProjectOptions(),
    max_workers: int = 1,
    cancel_event: Optional[threading.Event] = None,
) -> ArchiveBuilder:
    """Collect every project file; commit-only like the static site export."""

    renderer = ServerRenderer(registry)

    def _render(page: SitePage) -> str:
        page.definition.validate()
        return generate_page_template(page.definition, renderer=renderer, title=page.title)

    templates = render_pages(
        pages,
        _render,
        max_workers=max_workers,
        cancel_event=cancel_event,
        target="server",
    )

    routes = build_routes(pages)
    package_name = java_package(options)
    context = {
        "options": options,
        "routes": routes,
        "package_name": package_name,
        "package_path": package_name.replace(".", "/"),
    }

    archive = ArchiveBuilder()
    for path, content in scaffold_files(context):
        archive.add(path, content)
    for page, route, template in zip(pages, routes, templates):
        archive.add(f"{RESOURCES}/templates/{route.template_name}.html", template)
        archive.add(
            f"{RESOURCES}/pages/{route.template_name}.json",
            json.dumps(page_data_descriptor(page), indent=2, ensure_ascii=False, default=str),
        )
    archive.add(f"{RESOURCES}/static/css/styles.css", BASE_CSS)
    archive.add(f"{RESOURCES}/static/js/main.js", BASE_JS)
    return archive


def export_server_project(pages: Sequence[SitePage], **kwargs) -> bytes:
    """Zip bytes for the server project.  Accepts :func:`build_server_project` keywords."""

    archive = build_server_project(pages, **kwargs)
    payload = archive.to_bytes()
    log_export_event("archive_built", target="server", pages=len(pages), files=len(archive), bytes=len(payload))
    return payload


def write_server_project(path: Union[str, Path], pages: Sequence[SitePage], **kwargs) -> Path:
    archive = build_server_project(pages, **kwargs)
    target = archive.write(path)
    log_export_event("archive_written", target="server", path=str(target), files=len(archive))
    return target


__all__ = [
    "template_name_for",
    "method_name_for",
    "java_identifier",
    "java_package",
    "build_routes",
    "page_data_descriptor",
    "build_server_project",
    "export_server_project",
    "write_server_project",
]
