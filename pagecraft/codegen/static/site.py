"""Static page documents and whole-site archives."""

from __future__ import annotations

import re
import threading
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from ...config import SINGLE_PAGE_OPTIONS, StaticExportOptions
from ...export import ArchiveBuilder, ExportTemplateRegistry
from ...model import PageDefinition, SitePage
from ...observability import log_export_event
from ..pipeline import render_pages
from ..styles import css_variables_block, escape_html
from .assets import BASE_CSS, BASE_JS
from .components import StaticRenderer

CSS_PATH = "css/styles.css"
JS_PATH = "js/main.js"

_INTER_TAG_SPACE_RE = re.compile(r">\s+<")


def _head_style_block(definition: PageDefinition) -> str:
    parts: List[str] = []
    variables = css_variables_block(definition.global_styles.css_variables)
    if variables:
        parts.append(variables)
    if definition.global_styles.custom_css:
        parts.append(definition.global_styles.custom_css)
    if not parts:
        return ""
    return "\n<style>\n" + "\n".join(parts) + "\n</style>"


def generate_page_html(
    definition: PageDefinition,
    *,
    options: StaticExportOptions = StaticExportOptions(),
    renderer: Optional[StaticRenderer] = None,
    title: Optional[str] = None,
) -> str:
    """Assemble one complete HTML document for ``definition``."""

    renderer = renderer or StaticRenderer()
    components_html = "\n\n".join(renderer.render(component) for component in definition.components)

    css_include = (
        f'<link rel="stylesheet" href="{CSS_PATH}">' if options.include_css else f"<style>\n{BASE_CSS}\n</style>"
    )
    js_include = (
        f'<script src="{JS_PATH}" defer></script>' if options.include_js else f"<script>\n{BASE_JS}\n</script>"
    )

    html_parts = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '  <meta charset="UTF-8">',
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f"  <title>{escape_html(title or definition.page_name)}</title>",
        f"  {css_include}{_head_style_block(definition)}",
        "</head>",
        "<body>",
        '  <main class="page-content">',
        components_html,
        "  </main>",
        f"  {js_include}",
        "</body>",
        "</html>",
    ]
    document = "\n".join(html_parts)
    if options.minify:
        document = _INTER_TAG_SPACE_RE.sub("><", document).strip()
    return document


def export_single_page(
    definition: PageDefinition,
    *,
    registry: Optional[ExportTemplateRegistry] = None,
    options: StaticExportOptions = SINGLE_PAGE_OPTIONS,
) -> str:
    """Self-contained HTML for one page; assets are inlined by default."""

    definition.validate()
    html = generate_page_html(definition, options=options, renderer=StaticRenderer(registry))
    log_export_event("page_exported", target="static", page=definition.page_name, bytes=len(html))
    return html


def _readme(site_name: str, pages: Iterable[SitePage]) -> str:
    lines = [
        f"# {site_name}",
        "",
        "This site was exported by pagecraft.",
        "",
        "## Files",
        *(f"- {page.file_name} - {page.page_name}" for page in pages),
        "",
        "## Deployment",
        "Upload all files to your web server or static hosting service.",
        "",
        "### Quick Deploy Options:",
        "1. **Netlify Drop**: Drag and drop this folder to netlify.com/drop",
        "2. **GitHub Pages**: Push to a GitHub repository and enable Pages",
        "3. **Vercel**: Import to vercel.com",
        "4. **Any Web Server**: Upload via FTP/SFTP",
        "",
    ]
    return "\n".join(lines)


def build_static_site(
    pages: Sequence[SitePage],
    *,
    registry: Optional[ExportTemplateRegistry] = None,
    options: StaticExportOptions = StaticExportOptions(),
    max_workers: int = 1,
    cancel_event: Optional[threading.Event] = None,
) -> ArchiveBuilder:
    """Render every page and collect the site files.

    Nothing is returned unless every page rendered; see
    :func:`pagecraft.codegen.pipeline.render_pages`.
    """

    renderer = StaticRenderer(registry)

    def _render(page: SitePage) -> str:
        page.definition.validate()
        return generate_page_html(page.definition, options=options, renderer=renderer, title=page.title)

    documents = render_pages(
        pages,
        _render,
        max_workers=max_workers,
        cancel_event=cancel_event,
        target="static",
    )

    archive = ArchiveBuilder()
    if options.include_css:
        archive.add(CSS_PATH, BASE_CSS)
    if options.include_js:
        archive.add(JS_PATH, BASE_JS)
    for page, document in zip(pages, documents):
        archive.add(page.file_name, document)
    archive.add("README.md", _readme(options.site_name, pages))
    return archive


def export_site_archive(pages: Sequence[SitePage], **kwargs) -> bytes:
    """Zip bytes for a whole static site.  Accepts :func:`build_static_site` keywords."""

    archive = build_static_site(pages, **kwargs)
    payload = archive.to_bytes()
    log_export_event("archive_built", target="static", pages=len(pages), files=len(archive), bytes=len(payload))
    return payload


def write_site_archive(path: Union[str, Path], pages: Sequence[SitePage], **kwargs) -> Path:
    archive = build_static_site(pages, **kwargs)
    target = archive.write(path)
    log_export_event("archive_written", target="static", path=str(target), files=len(archive))
    return target


__all__ = [
    "CSS_PATH",
    "JS_PATH",
    "generate_page_html",
    "export_single_page",
    "build_static_site",
    "export_site_archive",
    "write_site_archive",
]
