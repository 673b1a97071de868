"""Server-rendered page template documents."""

from __future__ import annotations

from typing import List, Optional

from ...model import PageDefinition
from ..styles import css_variables_block, escape_html
from .components import ServerRenderer

THYMELEAF_NAMESPACE = "http://www.thymeleaf.org"


def _inline_css(definition: PageDefinition) -> str:
    parts: List[str] = []
    variables = css_variables_block(definition.global_styles.css_variables)
    if variables:
        parts.append(variables)
    if definition.global_styles.custom_css:
        parts.append(definition.global_styles.custom_css)
    if not parts:
        return ""
    return '\n    <style th:inline="css">\n' + "\n".join(parts) + "\n    </style>"


def generate_page_template(
    definition: PageDefinition,
    *,
    renderer: Optional[ServerRenderer] = None,
    title: Optional[str] = None,
) -> str:
    """Full template document; the title and description come from the ``page`` model attribute."""

    renderer = renderer or ServerRenderer()
    components_html = "\n\n".join(renderer.render(component, 2) for component in definition.components)

    html_parts = [
        "<!DOCTYPE html>",
        f'<html xmlns:th="{THYMELEAF_NAMESPACE}" lang="en">',
        "<head>",
        '    <meta charset="UTF-8">',
        '    <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f'    <title th:text="${{page.title}}">{escape_html(title or definition.page_name)}</title>',
        '    <meta th:if="${page.description}" name="description" th:content="${page.description}">',
        f'    <link rel="stylesheet" th:href="@{{/css/styles.css}}">{_inline_css(definition)}',
        "</head>",
        "<body>",
        '    <main class="page-content">',
        components_html,
        "    </main>",
        '    <script th:src="@{/js/main.js}" defer></script>',
        "</body>",
        "</html>",
    ]
    return "\n".join(html_parts)


__all__ = ["THYMELEAF_NAMESPACE", "generate_page_template"]
