"""Shared pytest fixtures for pagecraft tests."""

from __future__ import annotations

import io
import json
import zipfile
from pathlib import Path
from typing import Any, Dict

import pytest

from pagecraft.export import ExportTemplateRegistry, register_core_export_templates
from pagecraft.model import ComponentInstance, load_page_definition, load_site_page


@pytest.fixture
def registry():
    """A fresh, empty registry per test."""
    return ExportTemplateRegistry()


@pytest.fixture
def core_registry():
    """Registry with the core templates registered."""
    registry = ExportTemplateRegistry()
    register_core_export_templates(registry)
    return registry


@pytest.fixture
def make_component():
    """Factory for component instances with sensible defaults."""

    def _make(component_id: str = "Label", instance_id: str = "c1", **kwargs: Any) -> ComponentInstance:
        return ComponentInstance(instance_id=instance_id, component_id=component_id, **kwargs)

    return _make


@pytest.fixture
def home_payload() -> Dict[str, Any]:
    return {
        "pageName": "Home",
        "globalStyles": {"cssVariables": {"primary": "#336699"}, "customCSS": ".hero { padding: 0; }"},
        "dataContext": {"dataSources": {"products": {"type": "api", "url": "/api/products"}}},
        "components": [
            {
                "instanceId": "title",
                "componentId": "Label",
                "props": {"text": "Welcome", "variant": "h1"},
                "styles": {"fontSize": "32px", "textAlign": "center"},
            },
            {
                "instanceId": "main",
                "componentId": "Container",
                "children": [
                    {"instanceId": "first", "componentId": "Label", "props": {"text": "First"}},
                    {"instanceId": "second", "componentId": "Label", "props": {"text": "Second"}},
                ],
            },
            {
                "instanceId": "list",
                "componentId": "Repeater",
                "dataSourceRef": "products",
                "iteratorConfig": {"itemAlias": "p", "indexAlias": "i", "dataPath": ""},
                "props": {"emptyMessage": "Nothing here"},
                "children": [
                    {
                        "instanceId": "name",
                        "componentId": "Label",
                        "props": {"text": "{{p.name}}"},
                    }
                ],
            },
        ],
    }


@pytest.fixture
def about_payload() -> Dict[str, Any]:
    return {
        "page": {"pageName": "About Us", "routePath": "/about", "title": "About", "description": "Who we are"},
        "definition": {
            "pageName": "About Us",
            "components": [
                {"instanceId": "intro", "componentId": "Label", "props": {"text": "Hi {{user.name}}"}},
                {
                    "instanceId": "go",
                    "componentId": "Button",
                    "props": {"text": "Back"},
                    "events": [{"eventType": "onClick", "action": {"type": "navigate", "config": {"url": "/"}}}],
                },
            ],
        },
    }


@pytest.fixture
def home_definition(home_payload):
    return load_page_definition(home_payload)


@pytest.fixture
def site_pages(home_payload, about_payload):
    return [load_site_page(home_payload), load_site_page(about_payload)]


@pytest.fixture
def write_json(tmp_path):
    """Write ``payload`` to ``tmp_path / name`` and return the path."""

    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


def open_zip(payload: bytes) -> zipfile.ZipFile:
    return zipfile.ZipFile(io.BytesIO(payload))


@pytest.fixture
def read_zip():
    """Return ``{name: text}`` for every entry of zip bytes."""

    def _read(payload: bytes) -> Dict[str, str]:
        with open_zip(payload) as archive:
            return {name: archive.read(name).decode("utf-8") for name in archive.namelist()}

    return _read
