"""Helpers shared by the static and server built-in emitters."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Mapping

from ..model import ComponentInstance

logger = logging.getLogger(__name__)

LABEL_TAGS: Dict[str, str] = {
    "h1": "h1",
    "h2": "h2",
    "h3": "h3",
    "h4": "h4",
    "h5": "h5",
    "h6": "h6",
    "paragraph": "p",
}

NAVBAR_COMPONENTS = frozenset(
    {
        "Navbar",
        "NavbarDefault",
        "NavbarCentered",
        "NavbarMinimal",
        "NavbarDark",
        "NavbarGlass",
        "NavbarSticky",
    }
)

CONTAINER_COMPONENTS = frozenset({"Container", "ScrollableContainer"})

PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/300x200"


def element_id(component: ComponentInstance) -> str:
    return f"component-{component.instance_id}"


def text_prop(component: ComponentInstance, *keys: str, default: str = "") -> str:
    """First non-empty prop among ``keys`` as text."""
    for key in keys:
        value = component.props.get(key)
        if value is not None and value != "":
            return str(value)
    return default


def nav_items(raw: Any) -> List[Mapping[str, Any]]:
    """Navigation items from a list or a JSON-encoded list; anything else is empty."""

    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except ValueError:
            logger.warning("Ignoring navItems that are not valid JSON")
            return []
    if not isinstance(raw, list):
        return []
    return [item for item in raw if isinstance(item, Mapping)]


def indent_for(depth: int) -> str:
    return "    " * depth


__all__ = [
    "LABEL_TAGS",
    "NAVBAR_COMPONENTS",
    "CONTAINER_COMPONENTS",
    "PLACEHOLDER_IMAGE_URL",
    "element_id",
    "text_prop",
    "nav_items",
    "indent_for",
]
