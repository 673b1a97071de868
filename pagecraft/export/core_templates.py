"""Templates registered for core components and for plugin manifests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping, Optional

from .registry import ExportTemplateRegistry
from .templates import CustomContent, ExportTemplate

if TYPE_CHECKING:
    from ..model import ComponentInstance

logger = logging.getLogger(__name__)

HORIZONTAL_ROW_PLUGIN_ID = "horizontal-row-plugin"

_JUSTIFY = {"left": "flex-start", "right": "flex-end", "center": "center"}


def _text(mapping: Mapping[str, Any], key: str, default: str) -> str:
    value = mapping.get(key)
    return str(value) if value else default


def render_horizontal_row(component: "ComponentInstance", children_html: str = "") -> str:
    props = component.props
    styles = component.styles

    thickness = _text(props, "thickness", "2px")
    line_style = _text(props, "lineStyle", "solid")
    width = _text(props, "width", "100%")
    alignment = _text(props, "alignment", "center")
    color = _text(styles, "color", "#e0e0e0")
    margin_top = _text(styles, "marginTop", "16px")
    margin_bottom = _text(styles, "marginBottom", "16px")

    container_style = "; ".join(
        [
            "width: 100%",
            "display: flex",
            f"justify-content: {_JUSTIFY.get(alignment, 'center')}",
            "align-items: center",
            "box-sizing: border-box",
            f"margin-top: {margin_top}",
            f"margin-bottom: {margin_bottom}",
        ]
    )
    rule_style = "; ".join(
        [
            f"width: {width}",
            "height: 0",
            "border: none",
            f"border-top: {thickness} {line_style} {color}",
            "margin: 0",
        ]
    )
    return (
        f'<div style="{container_style}" class="horizontal-row-container">'
        f'<hr style="{rule_style}" /></div>'
    )


HORIZONTAL_ROW_TEMPLATE = ExportTemplate(
    supports_children=False,
    strategy=CustomContent(render_horizontal_row),
)


def register_core_export_templates(registry: ExportTemplateRegistry) -> None:
    """Register templates for components that have no built-in emitter."""

    registry.register("HorizontalRow", HORIZONTAL_ROW_TEMPLATE, HORIZONTAL_ROW_PLUGIN_ID)
    registry.register("HorizontalRow", HORIZONTAL_ROW_TEMPLATE)
    logger.info("Registered core export templates: %s", ", ".join(registry.registered_keys()))


def register_plugin_export_template(
    registry: ExportTemplateRegistry,
    component_id: str,
    plugin_id: str,
    static_template: Optional[str] = None,
    server_template: Optional[str] = None,
    export_metadata: Optional[Mapping[str, Any]] = None,
) -> bool:
    """Register the export template declared by a plugin manifest.

    Returns ``False`` (and registers nothing) when the manifest provides
    neither template string.
    """

    if not static_template and not server_template:
        logger.debug("No export template provided for %s:%s", plugin_id, component_id)
        return False

    metadata = export_metadata or {}
    css_classes = metadata.get("cssClasses") or metadata.get("css_classes") or ()
    if isinstance(css_classes, str):
        css_classes = css_classes.split()
    template = ExportTemplate(
        static_template=static_template or "",
        server_template=server_template or None,
        supports_children=bool(metadata.get("supportsChildren", metadata.get("supports_children", False))),
        wrapper_tag=metadata.get("wrapperTag") or metadata.get("wrapper_tag"),
        css_classes=tuple(str(name) for name in css_classes),
    )
    registry.register(component_id, template, plugin_id)
    logger.info("Registered export template for %s:%s", plugin_id, component_id)
    return True


__all__ = [
    "HORIZONTAL_ROW_PLUGIN_ID",
    "HORIZONTAL_ROW_TEMPLATE",
    "render_horizontal_row",
    "register_core_export_templates",
    "register_plugin_export_template",
]
