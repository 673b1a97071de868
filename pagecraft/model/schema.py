"""Pydantic input schema for page definitions written by the builder.

The builder stores pages as camelCase JSON.  These models validate that
payload and convert it into the plain dataclasses in
:mod:`pagecraft.model.components`, which is what the generators consume.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..errors import PageDefinitionError
from .components import (
    ComponentEvent,
    ComponentInstance,
    DataContextDefinition,
    GlobalStyles,
    IteratorConfig,
    PageDefinition,
    SitePage,
)


class _InputModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )


def _none_to_dict(value: Any) -> Any:
    return {} if value is None else value


class ComponentEventSchema(_InputModel):
    event_type: str = Field("", alias="eventType")
    action: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("action", mode="before")
    @classmethod
    def _default_action(cls, value: Any) -> Any:
        return _none_to_dict(value)

    def to_model(self) -> ComponentEvent:
        config = self.action.get("config") or {}
        return ComponentEvent(
            event_type=self.event_type,
            action_type=str(self.action.get("type") or ""),
            config=dict(config) if isinstance(config, Mapping) else {},
        )


class IteratorConfigSchema(_InputModel):
    item_alias: str = Field("item", alias="itemAlias")
    index_alias: str = Field("index", alias="indexAlias")
    data_path: str = Field("", alias="dataPath")

    def to_model(self) -> IteratorConfig:
        return IteratorConfig(
            item_alias=self.item_alias or "item",
            index_alias=self.index_alias or "index",
            data_path=self.data_path or "",
        )


class ComponentSchema(_InputModel):
    instance_id: str = Field(..., alias="instanceId")
    component_id: str = Field(..., alias="componentId", min_length=1)
    plugin_id: Optional[str] = Field(None, alias="pluginId")
    props: Dict[str, Any] = Field(default_factory=dict)
    styles: Dict[str, Any] = Field(default_factory=dict)
    children: List["ComponentSchema"] = Field(default_factory=list)
    template_bindings: Dict[str, Any] = Field(default_factory=dict, alias="templateBindings")
    events: List[ComponentEventSchema] = Field(default_factory=list)
    data_source_ref: Optional[str] = Field(None, alias="dataSourceRef")
    iterator_config: Optional[IteratorConfigSchema] = Field(None, alias="iteratorConfig")

    @field_validator("instance_id", mode="before")
    @classmethod
    def _coerce_instance_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("props", "styles", "template_bindings", mode="before")
    @classmethod
    def _default_maps(cls, value: Any) -> Any:
        return _none_to_dict(value)

    @field_validator("children", "events", mode="before")
    @classmethod
    def _default_lists(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_model(self) -> ComponentInstance:
        return ComponentInstance(
            instance_id=self.instance_id,
            component_id=self.component_id,
            plugin_id=self.plugin_id or None,
            props=dict(self.props),
            styles=dict(self.styles),
            children=[child.to_model() for child in self.children],
            template_bindings={key: str(value) for key, value in self.template_bindings.items() if value},
            events=[event.to_model() for event in self.events],
            data_source_ref=self.data_source_ref or None,
            iterator_config=self.iterator_config.to_model() if self.iterator_config else None,
        )


ComponentSchema.model_rebuild()


class GlobalStylesSchema(_InputModel):
    css_variables: Dict[str, Any] = Field(default_factory=dict, alias="cssVariables")
    custom_css: str = Field("", alias="customCSS")

    @field_validator("css_variables", mode="before")
    @classmethod
    def _default_variables(cls, value: Any) -> Any:
        return _none_to_dict(value)

    @field_validator("custom_css", mode="before")
    @classmethod
    def _default_css(cls, value: Any) -> Any:
        return "" if value is None else value


class DataContextSchema(_InputModel):
    data_sources: Dict[str, Any] = Field(default_factory=dict, alias="dataSources")

    @field_validator("data_sources", mode="before")
    @classmethod
    def _default_sources(cls, value: Any) -> Any:
        return _none_to_dict(value)


class PageDefinitionSchema(_InputModel):
    page_name: str = Field("Untitled", alias="pageName")
    components: List[ComponentSchema] = Field(default_factory=list)
    grid: Optional[Dict[str, Any]] = None
    global_styles: GlobalStylesSchema = Field(default_factory=GlobalStylesSchema, alias="globalStyles")
    data_context: Optional[DataContextSchema] = Field(None, alias="dataContext")

    @field_validator("global_styles", mode="before")
    @classmethod
    def _default_styles(cls, value: Any) -> Any:
        return _none_to_dict(value)

    def to_model(self) -> PageDefinition:
        data_context = None
        if self.data_context is not None:
            data_context = DataContextDefinition(data_sources=dict(self.data_context.data_sources))
        return PageDefinition(
            page_name=self.page_name,
            components=[component.to_model() for component in self.components],
            grid=self.grid,
            global_styles=GlobalStyles(
                css_variables={key: str(value) for key, value in self.global_styles.css_variables.items()},
                custom_css=self.global_styles.custom_css,
            ),
            data_context=data_context,
        )


class PageMetaSchema(_InputModel):
    page_name: Optional[str] = Field(None, alias="pageName")
    page_slug: Optional[str] = Field(None, alias="pageSlug")
    route_path: str = Field("/", alias="routePath")
    title: str = ""
    description: str = ""

    @field_validator("route_path", mode="before")
    @classmethod
    def _accept_path_alias(cls, value: Any) -> Any:
        return value or "/"


def _format_validation_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        problems.append(f"{location or '<root>'}: {error.get('msg')}")
    return "; ".join(problems)


def load_page_definition(payload: Mapping[str, Any], *, source: Optional[str] = None) -> PageDefinition:
    """Validate a camelCase page payload and build a :class:`PageDefinition`.

    Raises:
        PageDefinitionError: if the payload does not match the schema.
    """

    try:
        schema = PageDefinitionSchema.model_validate(payload)
    except ValidationError as exc:
        raise PageDefinitionError(
            f"Invalid page definition: {_format_validation_error(exc)}",
            path=source,
        ) from exc
    return schema.to_model().validate()


def load_site_page(payload: Mapping[str, Any], *, source: Optional[str] = None) -> SitePage:
    """Build a :class:`SitePage` from either a bare definition or ``{page, definition}``."""

    if not isinstance(payload, Mapping):
        raise PageDefinitionError("Page payload must be a JSON object", path=source)

    if "definition" in payload:
        meta_payload = payload.get("page") or {}
        definition_payload = payload["definition"] or {}
    else:
        meta_payload = {key: payload[key] for key in ("routePath", "path", "pageSlug", "description") if key in payload}
        definition_payload = payload

    if "path" in meta_payload and "routePath" not in meta_payload:
        meta_payload = {**meta_payload, "routePath": meta_payload["path"]}

    try:
        meta = PageMetaSchema.model_validate(meta_payload)
    except ValidationError as exc:
        raise PageDefinitionError(
            f"Invalid page metadata: {_format_validation_error(exc)}",
            path=source,
        ) from exc

    definition = load_page_definition(definition_payload, source=source)
    return SitePage(
        page_name=meta.page_name or definition.page_name,
        definition=definition,
        slug=meta.page_slug or "",
        route_path=meta.route_path,
        title=meta.title,
        description=meta.description,
    )


def load_site_page_file(path: Union[str, Path]) -> SitePage:
    """Read one JSON page file from disk."""

    file_path = Path(path)
    try:
        payload = json.loads(file_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise PageDefinitionError(f"Cannot read page file: {exc}", path=str(file_path)) from exc
    except json.JSONDecodeError as exc:
        raise PageDefinitionError(
            f"Page file is not valid JSON: {exc.msg} (line {exc.lineno})",
            path=str(file_path),
        ) from exc
    return load_site_page(payload, source=str(file_path))


__all__ = [
    "ComponentSchema",
    "PageDefinitionSchema",
    "PageMetaSchema",
    "load_page_definition",
    "load_site_page",
    "load_site_page_file",
]
