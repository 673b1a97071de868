"""Static HTML/CSS/JS target."""

from .components import BUILTIN_EMITTERS, StaticRenderer
from .site import (
    build_static_site,
    export_single_page,
    export_site_archive,
    generate_page_html,
    write_site_archive,
)

__all__ = [
    "BUILTIN_EMITTERS",
    "StaticRenderer",
    "build_static_site",
    "export_single_page",
    "export_site_archive",
    "generate_page_html",
    "write_site_archive",
]
