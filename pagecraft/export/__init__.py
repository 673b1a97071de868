"""Export template registry, core templates and archive assembly."""

from .archive import ArchiveBuilder
from .core_templates import (
    HORIZONTAL_ROW_PLUGIN_ID,
    register_core_export_templates,
    register_plugin_export_template,
)
from .registry import ExportTemplateRegistry, normalize_component_id, render_export_template
from .templates import (
    ContentStrategy,
    CustomContent,
    CustomStyles,
    ExportTemplate,
    Placeholders,
    RenderMode,
)

__all__ = [
    "ArchiveBuilder",
    "ContentStrategy",
    "CustomContent",
    "CustomStyles",
    "ExportTemplate",
    "ExportTemplateRegistry",
    "HORIZONTAL_ROW_PLUGIN_ID",
    "Placeholders",
    "RenderMode",
    "normalize_component_id",
    "register_core_export_templates",
    "register_plugin_export_template",
    "render_export_template",
]
