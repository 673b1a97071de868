"""Static HTML emission for component trees.

Prop values are baked in exactly as stored: ``{{...}}`` text inside a
prop is emitted as plain text.  Registered export templates take
precedence over the built-in emitters, which in turn take precedence
over the generic wrapper.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping, Optional

from ...export import ExportTemplateRegistry, RenderMode, render_export_template
from ...model import ComponentInstance
from ..common import (
    LABEL_TAGS,
    NAVBAR_COMPONENTS,
    PLACEHOLDER_IMAGE_URL,
    element_id,
    nav_items,
    text_prop,
)
from ..styles import escape_attr, escape_html, style_attr

Emitter = Callable[["StaticRenderer", ComponentInstance], str]


def _class_name(component: ComponentInstance) -> str:
    return f"component component-{component.component_id.lower()}"


def _emit_label(renderer: "StaticRenderer", component: ComponentInstance) -> str:
    tag = LABEL_TAGS.get(text_prop(component, "variant"), "span")
    return (
        f'<{tag} id="{element_id(component)}" class="{_class_name(component)}"'
        f'{style_attr(component.styles)}>{escape_html(text_prop(component, "text"))}</{tag}>'
    )


def _emit_button(renderer: "StaticRenderer", component: ComponentInstance) -> str:
    variant = text_prop(component, "variant", default="primary")
    size = text_prop(component, "size", default="medium")
    classes = f"{_class_name(component)} btn btn-{variant} btn-{size}"
    disabled = " disabled" if component.props.get("disabled") else ""
    url = component.navigation_url()
    onclick = f" onclick=\"window.location.href='{escape_attr(url)}'\"" if url else ""
    label = escape_html(text_prop(component, "text", default="Click Me"))
    return (
        f'<button id="{element_id(component)}" class="{classes}"'
        f"{style_attr(component.styles)}{disabled}{onclick}>{label}</button>"
    )


def _emit_image(renderer: "StaticRenderer", component: ComponentInstance) -> str:
    src = text_prop(component, "src", "url", default=PLACEHOLDER_IMAGE_URL)
    alt = text_prop(component, "alt")
    return (
        f'<img id="{element_id(component)}" class="{_class_name(component)}" '
        f'src="{escape_attr(src)}" alt="{escape_html(alt)}"{style_attr(component.styles)} />'
    )


def _emit_textbox(renderer: "StaticRenderer", component: ComponentInstance) -> str:
    # Textbox content is authored rich text and is emitted unescaped.
    content = text_prop(component, "content", "text")
    return (
        f'<div id="{element_id(component)}" class="{_class_name(component)} textbox"'
        f"{style_attr(component.styles)}>{content}</div>"
    )


def _emit_container(renderer: "StaticRenderer", component: ComponentInstance) -> str:
    classes = _class_name(component)
    if component.component_id == "ScrollableContainer":
        classes = f"{classes} scrollable-container"
    return (
        f'<div id="{element_id(component)}" class="{classes}"{style_attr(component.styles)}>\n'
        f"{renderer.render_children(component)}\n</div>"
    )


def _emit_navbar(renderer: "StaticRenderer", component: ComponentInstance) -> str:
    brand = text_prop(component, "brandName", "brand", default="Brand")
    variant = text_prop(component, "variant", default="default")
    raw_items = component.props.get("navItems") or component.props.get("items") or []

    item_lines = []
    for item in nav_items(raw_items):
        active = " active" if item.get("active") else ""
        href = escape_attr(item.get("href") or "#")
        label = escape_html(item.get("label") or item.get("text") or "")
        item_lines.append(f'      <li class="nav-item{active}"><a class="nav-link" href="{href}">{label}</a></li>')

    lines = [
        f'<nav id="{element_id(component)}" class="{_class_name(component)} navbar navbar-{variant}"'
        f"{style_attr(component.styles)}>",
        '  <div class="navbar-container">',
        f'    <a class="navbar-brand" href="/">{escape_html(brand)}</a>',
        '    <button class="navbar-toggle" aria-label="Toggle navigation">',
        '      <span class="navbar-toggle-icon"></span>',
        "    </button>",
        '    <ul class="navbar-nav">',
        *item_lines,
        "    </ul>",
        "  </div>",
        "</nav>",
    ]
    return "\n".join(lines)


def emit_generic(renderer: "StaticRenderer", component: ComponentInstance) -> str:
    """Fallback for unknown components: wrap children, else show escaped text."""

    opening = f'<div id="{element_id(component)}" class="{_class_name(component)}"{style_attr(component.styles)}>'
    if component.children:
        return f"{opening}\n{renderer.render_children(component)}\n</div>"
    text = text_prop(component, "text", "content", default=component.component_id)
    return f"{opening}{escape_html(text)}</div>"


BUILTIN_EMITTERS: Mapping[str, Emitter] = MappingProxyType(
    {
        "Label": _emit_label,
        "Button": _emit_button,
        "Image": _emit_image,
        "Textbox": _emit_textbox,
        "Container": _emit_container,
        "ScrollableContainer": _emit_container,
        **{name: _emit_navbar for name in NAVBAR_COMPONENTS},
    }
)


class StaticRenderer:
    """Render component trees to static HTML using ``registry`` first."""

    def __init__(self, registry: Optional[ExportTemplateRegistry] = None) -> None:
        self.registry = registry if registry is not None else ExportTemplateRegistry()

    def render(self, component: ComponentInstance) -> str:
        template = self.registry.get(component.component_id, component.plugin_id)
        if template is not None:
            return render_export_template(
                template,
                component,
                self.render_children(component),
                RenderMode.STATIC,
            )
        emitter = BUILTIN_EMITTERS.get(component.component_id, emit_generic)
        return emitter(self, component)

    def render_children(self, component: ComponentInstance) -> str:
        return "\n".join(self.render(child) for child in component.children)


__all__ = ["BUILTIN_EMITTERS", "StaticRenderer", "emit_generic"]
