"""Tests for loading page definitions from builder JSON."""

import pytest

from pagecraft.errors import PageDefinitionError
from pagecraft.model import (
    ComponentInstance,
    PageDefinition,
    SitePage,
    load_page_definition,
    load_site_page,
    load_site_page_file,
    slugify_page_name,
)


class TestLoadPageDefinition:
    """camelCase payloads become plain dataclasses."""

    def test_tree_and_styles(self, home_definition):
        assert home_definition.page_name == "Home"
        assert [component.instance_id for component in home_definition.components] == ["title", "main", "list"]
        assert home_definition.global_styles.css_variables == {"primary": "#336699"}
        assert home_definition.data_source_names == ["products"]

        container = home_definition.components[1]
        assert [child.props["text"] for child in container.children] == ["First", "Second"]

        repeater = home_definition.components[2]
        assert repeater.data_source_ref == "products"
        assert repeater.iterator_config.item_alias == "p"
        assert repeater.iterator_config.index_alias == "i"

    def test_events_and_nulls(self):
        definition = load_page_definition(
            {
                "pageName": "Events",
                "components": [
                    {
                        "instanceId": 7,
                        "componentId": "Button",
                        "props": None,
                        "children": None,
                        "events": [{"eventType": "onClick", "action": {"type": "navigate", "config": {"url": "/x"}}}],
                    }
                ],
            }
        )
        button = definition.components[0]
        assert button.instance_id == "7"
        assert button.props == {}
        assert button.children == []
        assert button.navigation_url() == "/x"

    def test_defaults(self):
        definition = load_page_definition({})
        assert definition.page_name == "Untitled"
        assert definition.components == []
        assert definition.data_context is None

    def test_missing_component_id_is_reported(self):
        with pytest.raises(PageDefinitionError) as exc_info:
            load_page_definition({"components": [{"instanceId": "a"}]}, source="page.json")
        assert "componentId" in exc_info.value.message
        assert exc_info.value.path == "page.json"
        assert exc_info.value.code == "INPUT_INVALID"

    def test_duplicate_instance_ids_are_rejected(self):
        payload = {
            "components": [
                {"instanceId": "same", "componentId": "Label"},
                {"instanceId": "x", "componentId": "Container", "children": [{"instanceId": "same", "componentId": "Label"}]},
            ]
        }
        with pytest.raises(PageDefinitionError) as exc_info:
            load_page_definition(payload)
        assert "Duplicate instance id 'same'" in exc_info.value.message


class TestSitePages:
    def test_wrapped_payload(self, about_payload):
        page = load_site_page(about_payload)
        assert page.page_name == "About Us"
        assert page.slug == "about-us"
        assert page.route_path == "/about"
        assert page.file_name == "about-us.html"
        assert page.title == "About"
        assert page.description == "Who we are"

    def test_bare_payload_is_root(self, home_payload):
        page = load_site_page(home_payload)
        assert page.is_root
        assert page.file_name == "index.html"
        assert page.title == "Home"

    def test_path_alias(self, home_payload):
        page = load_site_page({"page": {"path": "/shop", "pageSlug": "store"}, "definition": home_payload})
        assert page.route_path == "/shop"
        assert page.file_name == "store.html"

    def test_non_object_payload(self):
        with pytest.raises(PageDefinitionError):
            load_site_page(["not", "a", "page"])

    def test_load_from_file(self, write_json, home_payload):
        page = load_site_page_file(write_json("home.json", home_payload))
        assert page.page_name == "Home"

    def test_invalid_json_file(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(PageDefinitionError) as exc_info:
            load_site_page_file(path)
        assert exc_info.value.path == str(path)

    def test_slugify(self):
        assert slugify_page_name("  Our   Team ") == "our-team"


class TestTreeHelpers:
    def test_walk_is_depth_first(self):
        leaf = ComponentInstance(instance_id="leaf", component_id="Label")
        middle = ComponentInstance(instance_id="middle", component_id="Container", children=[leaf])
        other = ComponentInstance(instance_id="other", component_id="Label")
        definition = PageDefinition(page_name="P", components=[middle, other])
        assert [component.instance_id for component in definition.iter_components()] == ["middle", "leaf", "other"]

    def test_from_definition(self):
        page = SitePage.from_definition(PageDefinition(page_name="Pricing Plans"), route_path="/pricing")
        assert page.slug == "pricing-plans"
        assert page.title == "Pricing Plans"
        assert page.file_name == "pricing-plans.html"
