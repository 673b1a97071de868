"""In-memory page model consumed by the code generators.

Every object here is treated as read-only input.  Generators walk the
tree but never mutate props, styles or children.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Set

from ..errors import PageDefinitionError

_WHITESPACE_RE = re.compile(r"\s+")

NAVIGATE_ACTION = "navigate"
CLICK_EVENT = "onClick"


@dataclass
class ComponentEvent:
    """An event handler attached to a component (``onClick`` -> navigate)."""

    event_type: str
    action_type: str = ""
    config: Dict[str, Any] = field(default_factory=dict)

    @property
    def url(self) -> Optional[str]:
        value = self.config.get("url")
        return str(value) if value else None


@dataclass
class IteratorConfig:
    item_alias: str = "item"
    index_alias: str = "index"
    data_path: str = ""


@dataclass
class ComponentInstance:
    """One placed component and its exclusively owned children."""

    instance_id: str
    component_id: str
    plugin_id: Optional[str] = None
    props: Dict[str, Any] = field(default_factory=dict)
    styles: Dict[str, Any] = field(default_factory=dict)
    children: List["ComponentInstance"] = field(default_factory=list)
    template_bindings: Dict[str, str] = field(default_factory=dict)
    events: List[ComponentEvent] = field(default_factory=list)
    data_source_ref: Optional[str] = None
    iterator_config: Optional[IteratorConfig] = None

    def walk(self) -> Iterator["ComponentInstance"]:
        """Yield this component and every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def navigation_url(self) -> Optional[str]:
        """URL of an ``onClick`` navigation handler, if one is configured.

        Structured events win; the legacy ``props.events.onClick`` shape
        written by older builders is consulted second.
        """
        for event in self.events:
            if event.event_type == CLICK_EVENT and event.action_type == NAVIGATE_ACTION and event.url:
                return event.url

        legacy = self.props.get("events")
        if not isinstance(legacy, Mapping):
            return None
        click = legacy.get(CLICK_EVENT)
        action = click.get("action") if isinstance(click, Mapping) else None
        if not isinstance(action, Mapping):
            return None
        config = action.get("config")
        if isinstance(config, Mapping) and config.get("url"):
            return str(config["url"])
        return None


@dataclass
class GlobalStyles:
    css_variables: Dict[str, str] = field(default_factory=dict)
    custom_css: str = ""


@dataclass
class DataContextDefinition:
    """Declared data sources keyed by name; values are opaque configs."""

    data_sources: Dict[str, Any] = field(default_factory=dict)


@dataclass
class PageDefinition:
    page_name: str
    components: List[ComponentInstance] = field(default_factory=list)
    grid: Optional[Dict[str, Any]] = None
    global_styles: GlobalStyles = field(default_factory=GlobalStyles)
    data_context: Optional[DataContextDefinition] = None

    def iter_components(self) -> Iterator[ComponentInstance]:
        for component in self.components:
            yield from component.walk()

    @property
    def data_source_names(self) -> List[str]:
        if self.data_context is None:
            return []
        return list(self.data_context.data_sources)

    def validate(self) -> "PageDefinition":
        """Check that instance ids are unique and no node is shared.

        Raises:
            PageDefinitionError: if either tree invariant is violated.
        """
        seen_ids: Set[str] = set()
        seen_nodes: Set[int] = set()
        stack = list(reversed(self.components))
        while stack:
            component = stack.pop()
            if id(component) in seen_nodes:
                raise PageDefinitionError(
                    f"Component '{component.instance_id}' appears more than once in the tree",
                    path=self.page_name,
                )
            seen_nodes.add(id(component))
            if component.instance_id in seen_ids:
                raise PageDefinitionError(
                    f"Duplicate instance id '{component.instance_id}'",
                    path=self.page_name,
                    hint="Instance ids must be unique within a page.",
                )
            seen_ids.add(component.instance_id)
            stack.extend(reversed(component.children))
        return self


def slugify_page_name(name: str) -> str:
    return _WHITESPACE_RE.sub("-", name.strip().lower())


@dataclass
class SitePage:
    """Page metadata plus its definition, as exported within a site."""

    page_name: str
    definition: PageDefinition
    slug: str = ""
    route_path: str = "/"
    title: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        if not self.slug:
            self.slug = slugify_page_name(self.page_name)
        if not self.title:
            self.title = self.definition.page_name or self.page_name

    @property
    def is_root(self) -> bool:
        return self.route_path == "/"

    @property
    def file_name(self) -> str:
        """Static output file: ``index.html`` for the root route, else ``<slug>.html``."""
        return "index.html" if self.is_root else f"{self.slug}.html"

    @classmethod
    def from_definition(cls, definition: PageDefinition, route_path: str = "/") -> "SitePage":
        return cls(page_name=definition.page_name, definition=definition, route_path=route_path)


__all__ = [
    "ComponentEvent",
    "IteratorConfig",
    "ComponentInstance",
    "GlobalStyles",
    "DataContextDefinition",
    "PageDefinition",
    "SitePage",
    "slugify_page_name",
]
