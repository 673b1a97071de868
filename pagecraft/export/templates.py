"""Per-component export templates and their content strategies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional, Tuple, Union

if TYPE_CHECKING:
    from ..model import ComponentInstance


class RenderMode(str, Enum):
    """Which template string a render call selects."""

    STATIC = "static"
    SERVER = "server"


@dataclass(frozen=True)
class Placeholders:
    """Default strategy: flat ``{{placeholder}}`` substitution."""


@dataclass(frozen=True)
class CustomStyles:
    """Placeholder substitution with ``{{styleString}}`` computed by ``generate``."""

    generate: Callable[["ComponentInstance"], str]


@dataclass(frozen=True)
class CustomContent:
    """Full override: ``generate(component, children_html)`` returns the markup."""

    generate: Callable[["ComponentInstance", str], str]


ContentStrategy = Union[Placeholders, CustomStyles, CustomContent]


@dataclass(frozen=True)
class ExportTemplate:
    """Emission templates registered for one component type.

    ``server_template`` falls back to ``static_template`` when it is not
    given.  ``wrapper_tag`` and ``supports_children`` shape the element
    emitted for a template whose selected string is empty.
    """

    static_template: str = ""
    server_template: Optional[str] = None
    supports_children: bool = False
    wrapper_tag: Optional[str] = None
    css_classes: Tuple[str, ...] = ()
    strategy: ContentStrategy = field(default_factory=Placeholders)

    def template_for(self, mode: RenderMode) -> str:
        if mode is RenderMode.SERVER:
            return self.server_template or self.static_template
        return self.static_template


__all__ = [
    "RenderMode",
    "Placeholders",
    "CustomStyles",
    "CustomContent",
    "ContentStrategy",
    "ExportTemplate",
]
