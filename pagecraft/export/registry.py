"""Plugin-extensible registry of component export templates.

Lookups are keyed by a normalized component id, optionally scoped by
plugin id (``"<plugin>:<Component>"``).  A plugin-scoped entry wins over
the generic entry for the same component; a miss returns ``None`` and is
never an error.
"""

from __future__ import annotations

import logging
import re
import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional

from ..codegen.styles import style_string
from ..templating.parser import tokenize_template
from ..templating.values import stringify
from .templates import CustomContent, CustomStyles, ExportTemplate, Placeholders, RenderMode

if TYPE_CHECKING:
    from ..model import ComponentInstance

logger = logging.getLogger(__name__)

_SEPARATOR_RE = re.compile(r"[-_]")
STYLE_PREFIX = "styles."


def normalize_component_id(component_id: str) -> str:
    """Fold ``horizontal-row`` / ``horizontal_row`` / ``horizontalRow`` into ``HorizontalRow``."""

    if "-" in component_id or "_" in component_id:
        return "".join(part[:1].upper() + part[1:].lower() for part in _SEPARATOR_RE.split(component_id))
    return component_id[:1].upper() + component_id[1:]


def build_key(component_id: str, plugin_id: Optional[str] = None) -> str:
    normalized = normalize_component_id(component_id)
    return f"{plugin_id}:{normalized}" if plugin_id else normalized


class _ReadWriteLock:
    """Many concurrent readers or one writer."""

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._condition:
            while self._writing:
                self._condition.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._condition:
                self._readers -= 1
                if not self._readers:
                    self._condition.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._condition:
            while self._writing or self._readers:
                self._condition.wait()
            self._writing = True
        try:
            yield
        finally:
            with self._condition:
                self._writing = False
                self._condition.notify_all()


class ExportTemplateRegistry:
    """Owned, injectable registry of :class:`ExportTemplate` entries.

    Construct one per application (or per test) and pass it to the
    generators and to plugin-loading code.  Registration is an idempotent
    overwrite; concurrent writers resolve last-write-wins.
    """

    def __init__(self) -> None:
        self._templates: Dict[str, ExportTemplate] = {}
        self._lock = _ReadWriteLock()

    def register(self, component_id: str, template: ExportTemplate, plugin_id: Optional[str] = None) -> None:
        key = build_key(component_id, plugin_id)
        with self._lock.write():
            self._templates[key] = template
        logger.debug("Registered export template %s", key, extra={"pagecraft_event": "template_registered"})

    def unregister(self, component_id: str, plugin_id: Optional[str] = None) -> None:
        key = build_key(component_id, plugin_id)
        with self._lock.write():
            removed = self._templates.pop(key, None)
        if removed is not None:
            logger.debug("Unregistered export template %s", key, extra={"pagecraft_event": "template_unregistered"})

    def get(self, component_id: str, plugin_id: Optional[str] = None) -> Optional[ExportTemplate]:
        """Plugin-specific entry, else the generic entry, else ``None``."""

        with self._lock.read():
            if plugin_id:
                template = self._templates.get(build_key(component_id, plugin_id))
                if template is not None:
                    return template
            return self._templates.get(build_key(component_id))

    def has(self, component_id: str, plugin_id: Optional[str] = None) -> bool:
        return self.get(component_id, plugin_id) is not None

    def clear(self) -> None:
        with self._lock.write():
            self._templates.clear()

    def registered_keys(self) -> List[str]:
        with self._lock.read():
            return list(self._templates)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._templates)

    def render(
        self,
        component: "ComponentInstance",
        children_html: str = "",
        mode: RenderMode = RenderMode.STATIC,
    ) -> Optional[str]:
        """Render ``component`` with its registered template, or ``None`` on a miss."""

        template = self.get(component.component_id, component.plugin_id)
        if template is None:
            return None
        return render_export_template(template, component, children_html, mode)


def class_names_for(template: ExportTemplate, component: "ComponentInstance") -> str:
    names = [f"component-{component.component_id.lower()}", *template.css_classes]
    extra = component.props.get("className")
    if extra:
        names.append(str(extra))
    return " ".join(names)


def _placeholder_value(
    key: str,
    component: "ComponentInstance",
    specials: Dict[str, str],
) -> str:
    if key in specials:
        return specials[key]
    if key in component.props:
        return stringify(component.props[key])
    if key.startswith(STYLE_PREFIX):
        style_key = key[len(STYLE_PREFIX):]
        if style_key in component.styles:
            return stringify(component.styles[style_key])
    return ""


def _wrapper_markup(
    template: ExportTemplate,
    component: "ComponentInstance",
    specials: Dict[str, str],
) -> str:
    tag = template.wrapper_tag or "div"
    style = specials["styleString"]
    style_attr = f' style="{style}"' if style else ""
    inner = specials["children"] if template.supports_children else ""
    return f'<{tag} id="component-{component.instance_id}" class="{specials["className"]}"{style_attr}>{inner}</{tag}>'


def render_export_template(
    template: ExportTemplate,
    component: "ComponentInstance",
    children_html: str = "",
    mode: RenderMode = RenderMode.STATIC,
) -> str:
    """Render one component through ``template``.

    Placeholders are substituted in a single pass over the parsed template:
    substituted values are never scanned again, and any placeholder with
    no value is dropped.
    """

    strategy = template.strategy
    if isinstance(strategy, CustomContent):
        return strategy.generate(component, children_html)
    if isinstance(strategy, CustomStyles):
        styles = strategy.generate(component)
    elif isinstance(strategy, Placeholders):
        styles = style_string(component.styles)
    else:
        raise TypeError(f"Unsupported content strategy: {type(strategy).__name__}")

    specials = {
        "styleString": styles,
        "className": class_names_for(template, component),
        "children": children_html,
        "componentId": component.component_id,
        "id": component.instance_id,
    }

    source = template.template_for(mode)
    if not source:
        return _wrapper_markup(template, component, specials)

    parts: List[str] = []
    for token in tokenize_template(source):
        if token.is_expression:
            parts.append(_placeholder_value(token.value.strip(), component, specials))
        else:
            parts.append(token.value)
    return "".join(parts)


__all__ = [
    "ExportTemplateRegistry",
    "normalize_component_id",
    "build_key",
    "class_names_for",
    "render_export_template",
]
