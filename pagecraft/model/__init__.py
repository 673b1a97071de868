"""Page model: component trees, page definitions and their JSON loaders."""

from .components import (
    ComponentEvent,
    ComponentInstance,
    DataContextDefinition,
    GlobalStyles,
    IteratorConfig,
    PageDefinition,
    SitePage,
    slugify_page_name,
)
from .schema import load_page_definition, load_site_page, load_site_page_file

__all__ = [
    "ComponentEvent",
    "ComponentInstance",
    "DataContextDefinition",
    "GlobalStyles",
    "IteratorConfig",
    "PageDefinition",
    "SitePage",
    "slugify_page_name",
    "load_page_definition",
    "load_site_page",
    "load_site_page_file",
]
