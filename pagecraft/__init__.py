"""
pagecraft: export visual page definitions to deployable sites.

A page definition is a tree of component instances authored in a visual
builder and stored as JSON.  This package turns those trees into
artefacts that run without the builder:

* ``model`` - dataclasses for component trees and page definitions, plus
  the pydantic schemas that load them from JSON.
* ``templating`` - the ``{{path | filter:arg}}`` expression language used
  for live preview and rewritten for server templates.
* ``export`` - the export template registry that plugins use to supply
  their own markup, and the zip archive builder.
* ``codegen`` - the static HTML generator and the server-rendered
  project generator.
* ``cli`` - the ``pagecraft`` command line interface.
"""

from .errors import (
    ConfigError,
    ExportCancelledError,
    ExportIOError,
    MalformedPathError,
    PageCraftError,
    PageDefinitionError,
    PageExportError,
)
from .model import (
    ComponentInstance,
    PageDefinition,
    SitePage,
    load_page_definition,
    load_site_page,
    load_site_page_file,
)
from .templating import DataContext, resolve_template, resolve_template_variables
from .export import (
    ExportTemplate,
    ExportTemplateRegistry,
    register_core_export_templates,
    register_plugin_export_template,
)
from .codegen.static import export_single_page, export_site_archive, write_site_archive
from .codegen.server import export_server_project, write_server_project

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ComponentInstance",
    "ConfigError",
    "DataContext",
    "ExportCancelledError",
    "ExportIOError",
    "ExportTemplate",
    "ExportTemplateRegistry",
    "MalformedPathError",
    "PageCraftError",
    "PageDefinition",
    "PageDefinitionError",
    "PageExportError",
    "SitePage",
    "export_server_project",
    "export_single_page",
    "export_site_archive",
    "load_page_definition",
    "load_site_page",
    "load_site_page_file",
    "register_core_export_templates",
    "register_plugin_export_template",
    "resolve_template",
    "resolve_template_variables",
    "write_server_project",
    "write_site_archive",
]
