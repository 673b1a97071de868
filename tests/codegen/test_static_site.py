"""Tests for the static HTML generator."""

import logging
import threading

import pytest

from pagecraft.codegen.static import (
    StaticRenderer,
    build_static_site,
    export_single_page,
    export_site_archive,
    generate_page_html,
    write_site_archive,
)
from pagecraft.config import StaticExportOptions
from pagecraft.errors import ExportCancelledError, PageDefinitionError, PageExportError
from pagecraft.export import CustomContent, ExportTemplate
from pagecraft.model import ComponentEvent, ComponentInstance, PageDefinition, SitePage


class TestBuiltinEmitters:
    """Per-type static emitters."""

    def test_label_variant_tag_and_inline_style(self, make_component):
        component = make_component("Label", props={"text": "Title", "variant": "h2"}, styles={"fontSize": "20px"})
        assert StaticRenderer().render(component) == (
            '<h2 id="component-c1" class="component component-label" style="font-size: 20px">Title</h2>'
        )

    def test_label_defaults_to_span_and_escapes(self, make_component):
        html = StaticRenderer().render(make_component("Label", props={"text": "<b>&'"}))
        assert html.startswith("<span ")
        assert "&lt;b&gt;&amp;&#x27;" in html

    def test_bindings_are_baked_in_verbatim(self, make_component):
        html = StaticRenderer().render(make_component("Label", props={"text": "Hi {{user.name}}"}))
        assert ">Hi {{user.name}}</span>" in html

    def test_button_navigation_and_classes(self, make_component):
        component = make_component(
            "Button",
            props={"text": "Go", "variant": "secondary", "size": "large", "disabled": True},
            events=[ComponentEvent("onClick", "navigate", {"url": "/about"})],
        )
        html = StaticRenderer().render(component)
        assert 'class="component component-button btn btn-secondary btn-large"' in html
        assert " disabled" in html
        assert "onclick=\"window.location.href='/about'\"" in html
        assert html.endswith(">Go</button>")

    def test_button_legacy_event_shape(self, make_component):
        component = make_component(
            "Button",
            props={"events": {"onClick": {"action": {"type": "navigate", "config": {"url": "/legacy"}}}}},
        )
        html = StaticRenderer().render(component)
        assert "window.location.href='/legacy'" in html
        assert ">Click Me</button>" in html

    def test_image_placeholder(self, make_component):
        html = StaticRenderer().render(make_component("Image", props={"alt": "Logo"}))
        assert 'src="https://via.placeholder.com/300x200"' in html
        assert 'alt="Logo"' in html

    def test_textbox_content_is_raw(self, make_component):
        html = StaticRenderer().render(make_component("Textbox", props={"content": "<em>rich</em>"}))
        assert "><em>rich</em></div>" in html

    def test_container_children_in_order_once(self, make_component):
        container = make_component(
            "Container",
            instance_id="box",
            children=[
                make_component("Label", instance_id="a", props={"text": "Alpha"}),
                make_component("Label", instance_id="b", props={"text": "Beta"}),
            ],
        )
        html = StaticRenderer().render(container)
        assert html.count("Alpha") == 1
        assert html.count("Beta") == 1
        assert html.index("Alpha") < html.index("Beta")
        assert html.startswith('<div id="component-box" class="component component-container">\n')
        assert html.endswith("\n</div>")

    def test_scrollable_container_class(self, make_component):
        html = StaticRenderer().render(make_component("ScrollableContainer"))
        assert "scrollable-container" in html

    def test_navbar_items_from_json_string(self, make_component):
        component = make_component(
            "NavbarDark",
            props={
                "brandName": "Shop",
                "navItems": '[{"label": "Home", "href": "/", "active": true}, {"label": "About", "href": "/about"}]',
            },
        )
        html = StaticRenderer().render(component)
        assert '<a class="navbar-brand" href="/">Shop</a>' in html
        assert '<li class="nav-item active"><a class="nav-link" href="/">Home</a></li>' in html
        assert '<li class="nav-item"><a class="nav-link" href="/about">About</a></li>' in html
        assert "navbar-toggle" in html

    def test_navbar_bad_json_renders_no_items(self, make_component, caplog):
        with caplog.at_level(logging.WARNING):
            html = StaticRenderer().render(make_component("Navbar", props={"navItems": "[oops"}))
        assert "nav-item" not in html
        assert "not valid JSON" in caplog.text

    def test_generic_fallback_escapes_text(self, make_component):
        html = StaticRenderer().render(make_component("Mystery", props={"text": 'a "quote"'}))
        assert html == '<div id="component-c1" class="component component-mystery">a &quot;quote&quot;</div>'

    def test_generic_fallback_uses_component_id(self, make_component):
        html = StaticRenderer().render(make_component("Mystery"))
        assert html.endswith(">Mystery</div>")


class TestRegistryPrecedence:
    def test_registered_template_beats_builtin(self, registry, make_component):
        registry.register("Label", ExportTemplate(static_template="<label>{{text}}</label>"))
        html = StaticRenderer(registry).render(make_component("Label", props={"text": "Mine"}))
        assert html == "<label>Mine</label>"

    def test_registered_container_receives_children(self, registry, make_component):
        registry.register(
            "Card",
            ExportTemplate(static_template="<article>{{children}}</article>", supports_children=True),
        )
        card = make_component(
            "Card",
            children=[
                make_component("Label", instance_id="one", props={"text": "One"}),
                make_component("Label", instance_id="two", props={"text": "Two"}),
            ],
        )
        html = StaticRenderer(registry).render(card)
        assert html.startswith("<article><span")
        assert html.index("One") < html.index("Two")

    def test_core_horizontal_row(self, core_registry, make_component):
        html = StaticRenderer(core_registry).render(make_component("HorizontalRow"))
        assert "<hr " in html


class TestPageDocument:
    def test_single_page_inlines_assets(self, home_definition):
        html = export_single_page(home_definition)
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Home</title>" in html
        assert "<style>\n/* Base styles generated by pagecraft */" in html
        assert 'href="css/styles.css"' not in html
        assert '<script src="js/main.js"' not in html
        assert ":root {\n  --primary: #336699;\n}" in html
        assert ".hero { padding: 0; }" in html
        assert '<main class="page-content">' in html

    def test_linked_assets(self, home_definition):
        html = generate_page_html(home_definition, options=StaticExportOptions())
        assert '<link rel="stylesheet" href="css/styles.css">' in html
        assert '<script src="js/main.js" defer></script>' in html

    def test_minify_collapses_whitespace_between_tags(self, home_definition):
        html = generate_page_html(home_definition, options=StaticExportOptions(minify=True))
        assert ">\n<" not in html
        assert "> <" not in html

    def test_export_single_page_validates(self):
        shared = ComponentInstance(instance_id="x", component_id="Label")
        definition = PageDefinition(page_name="Broken", components=[shared, shared])
        with pytest.raises(PageDefinitionError):
            export_single_page(definition)

    def test_export_is_deterministic(self, home_definition):
        assert export_single_page(home_definition) == export_single_page(home_definition)


class TestSiteArchive:
    """Whole-site archive assembly."""

    def test_archive_layout(self, site_pages, core_registry, read_zip):
        files = read_zip(export_site_archive(site_pages, registry=core_registry))
        assert set(files) == {"css/styles.css", "js/main.js", "index.html", "about-us.html", "README.md"}
        assert "<title>About</title>" in files["about-us.html"]
        assert "- index.html - Home" in files["README.md"]
        assert "- about-us.html - About Us" in files["README.md"]

    def test_inline_options_skip_asset_files(self, site_pages, read_zip):
        options = StaticExportOptions(include_css=False, include_js=False, site_name="Shop")
        files = read_zip(export_site_archive(site_pages, options=options))
        assert "css/styles.css" not in files
        assert "js/main.js" not in files
        assert files["README.md"].startswith("# Shop\n")

    def test_parallel_matches_sequential(self, site_pages):
        sequential = export_site_archive(site_pages, max_workers=1)
        parallel = export_site_archive(site_pages, max_workers=4)
        assert sequential == parallel

    def test_write_site_archive(self, site_pages, tmp_path):
        target = write_site_archive(tmp_path / "dist" / "site.zip", site_pages)
        assert target.exists()

    def test_cancelled_before_start_produces_nothing(self, site_pages):
        cancel = threading.Event()
        cancel.set()
        with pytest.raises(ExportCancelledError) as exc_info:
            build_static_site(site_pages, cancel_event=cancel)
        assert exc_info.value.completed == []
        assert exc_info.value.code == "EXPORT_CANCELLED"

    def test_cancelled_mid_export(self, registry, make_component):
        cancel = threading.Event()

        def _cancel_after_render(component, children):
            cancel.set()
            return "<p>rendered</p>"

        registry.register("Trigger", ExportTemplate(strategy=CustomContent(_cancel_after_render)))
        first = SitePage.from_definition(
            PageDefinition(page_name="One", components=[make_component("Trigger")])
        )
        second = SitePage.from_definition(PageDefinition(page_name="Two"), route_path="/two")
        with pytest.raises(ExportCancelledError) as exc_info:
            build_static_site([first, second], registry=registry, cancel_event=cancel)
        assert exc_info.value.completed == ["One"]

    def test_page_failure_names_the_page(self, registry, make_component):
        def _explode(component, children):
            raise RuntimeError("boom")

        registry.register("Bomb", ExportTemplate(strategy=CustomContent(_explode)))
        page = SitePage.from_definition(PageDefinition(page_name="Fragile", components=[make_component("Bomb")]))
        with pytest.raises(PageExportError) as exc_info:
            export_site_archive([page], registry=registry)
        assert exc_info.value.page_name == "Fragile"
        assert "boom" in exc_info.value.message
