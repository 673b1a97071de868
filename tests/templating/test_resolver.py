"""Tests for resolving template expressions against a data context."""

import copy
import logging
from types import SimpleNamespace

import pytest

from pagecraft.errors import MalformedPathError
from pagecraft.templating import (
    DataContext,
    get_value_by_path,
    resolve_template,
    resolve_template_variables,
    resolve_variable,
    safe_resolve_template,
)


class TestGetValueByPath:
    def test_nested_mapping_and_list_index(self):
        data = {"items": [{"title": "A"}, {"title": "B"}]}
        assert get_value_by_path(data, ["items", "1", "title"]) == "B"

    def test_missing_steps_short_circuit(self):
        assert get_value_by_path({"a": None}, ["a", "b", "c"]) is None
        assert get_value_by_path({"items": []}, ["items", "3"]) is None
        assert get_value_by_path("text", ["length"]) is None

    def test_non_ascii_digit_segment_is_not_an_index(self):
        assert get_value_by_path({"items": ["a", "b"]}, ["items", "²"]) is None
        ctx = DataContext(data_sources={"items": ["a", "b"]})
        assert resolve_template("[{{items[²]}}]", ctx) == "[]"

    def test_sequence_length(self):
        assert get_value_by_path({"items": ["a", "b", "c"]}, ["items", "length"]) == 3
        ctx = DataContext(data_sources={"items": ["a", "b"]})
        assert resolve_template("{{items.length}} items", ctx) == "2 items"

    def test_object_attributes(self):
        assert get_value_by_path(SimpleNamespace(name="Ada"), ["name"]) == "Ada"

    def test_private_attributes_are_hidden(self):
        assert get_value_by_path(SimpleNamespace(_secret=1), ["_secret"]) is None


class TestResolveVariable:
    """Root-segment dispatch."""

    def test_item_index_user_shared(self):
        ctx = DataContext(
            item={"name": "Widget"},
            index=2,
            user={"name": "Ada"},
            shared_data={"theme": "dark"},
        )
        assert resolve_variable(["item", "name"], [], ctx) == "Widget"
        assert resolve_variable(["index", "ignored"], [], ctx) == 2
        assert resolve_variable(["user", "name"], [], ctx) == "Ada"
        assert resolve_variable(["shared", "theme"], [], ctx) == "dark"

    def test_named_data_source_first(self):
        ctx = DataContext(data_sources={"products": [{"name": "Lamp"}]}, item={"products": "shadowed"})
        assert resolve_variable(["products", "0", "name"], [], ctx) == "Lamp"

    def test_full_path_against_item_inside_iteration(self):
        ctx = DataContext(item={"price": 3})
        assert resolve_variable(["price"], [], ctx) == 3

    def test_fallback_through_shared_data(self):
        ctx = DataContext(shared_data={"siteName": "Shop"})
        assert resolve_variable(["siteName"], [], ctx) == "Shop"

    def test_filters_after_resolution(self):
        ctx = DataContext(user={"name": "ada"})
        assert resolve_variable(["user", "name"], ["uppercase"], ctx) == "ADA"


class TestResolveTemplate:
    def test_currency_on_item(self):
        ctx = DataContext(item={"price": 9.5})
        assert resolve_template("{{item.price | currency}}", ctx) == "$9.50"

    def test_missing_path_is_empty(self):
        assert resolve_template("{{missing.path}}", DataContext()) == ""

    def test_default_filter_on_data_source(self):
        assert resolve_template("{{x | default:N/A}}", DataContext(data_sources={"x": ""})) == "N/A"
        assert resolve_template("{{x | default:N/A}}", DataContext(data_sources={"x": "Y"})) == "Y"

    @pytest.mark.parametrize("source", ["plain text", "unterminated {{ oops", "}} {{", ""])
    def test_strings_without_bindings_are_unchanged(self, source):
        assert resolve_template(source, DataContext()) == source

    def test_objects_render_as_json(self):
        ctx = DataContext(data_sources={"cfg": {"a": 1}, "tags": ["x", "y"]})
        assert resolve_template("{{cfg}} {{tags}}", ctx) == '{"a":1} ["x","y"]'

    def test_scalars_are_stringified(self):
        ctx = DataContext(data_sources={"on": True, "n": 2.0, "empty": None})
        assert resolve_template("{{on}}/{{n}}/{{empty}}", ctx) == "true/2/"

    def test_without_context(self):
        assert resolve_template("Hi {{user.name}}") == "Hi "

    def test_malformed_path_raises_for_the_field(self):
        with pytest.raises(MalformedPathError):
            resolve_template("{{items[0}}", DataContext())


class TestSafeResolve:
    def test_malformed_field_keeps_raw_text_and_logs(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pagecraft.templating.resolver"):
            result = safe_resolve_template("{{items[0}}", DataContext(), field="title")
        assert result == "{{items[0}}"
        assert "Skipping field title" in caplog.text


class TestResolveTemplateVariables:
    """Deep resolution of a props mapping."""

    def test_resolves_nested_strings(self):
        ctx = DataContext(user={"name": "Ada"}, data_sources={"count": 3})
        props = {
            "text": "Hello {{user.name}}",
            "count": 5,
            "list": ["{{count}}", {"label": "{{user.name | uppercase}}"}, 7],
            "nested": {"title": "n={{count}}"},
            "plain": "no braces",
        }
        assert resolve_template_variables(props, ctx) == {
            "text": "Hello Ada",
            "count": 5,
            "list": ["3", {"label": "ADA"}, 7],
            "nested": {"title": "n=3"},
            "plain": "no braces",
        }

    def test_never_mutates_input(self):
        props = {"text": "{{user.name}}", "items": [{"a": "{{user.name}}"}], "style": {"x": 1}}
        before = copy.deepcopy(props)
        resolve_template_variables(props, DataContext(user={"name": "Ada"}))
        assert props == before

    def test_malformed_field_does_not_abort_siblings(self):
        props = {"bad": "{{rows[1}}", "good": "{{user.name}}"}
        result = resolve_template_variables(props, DataContext(user={"name": "Ada"}))
        assert result == {"bad": "{{rows[1}}", "good": "Ada"}


class TestDataContext:
    def test_from_dict_accepts_camel_case(self):
        ctx = DataContext.from_dict(
            {"dataSources": {"a": 1}, "sharedData": {"b": 2}, "user": {"id": 9}, "index": 1}
        )
        assert ctx.data_sources == {"a": 1}
        assert ctx.shared_data == {"b": 2}
        assert ctx.user == {"id": 9}
        assert ctx.index == 1

    def test_for_item_returns_new_context(self):
        base = DataContext(data_sources={"a": 1})
        scoped = base.for_item({"x": 1}, 0)
        assert base.item is None
        assert scoped.item == {"x": 1}
        assert scoped.data_sources is base.data_sources
