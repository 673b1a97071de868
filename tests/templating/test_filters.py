"""Tests for the template filter library."""

import logging
import math

import pytest

from pagecraft.templating import apply_filter, apply_filters, available_filters


class TestStringFilters:
    @pytest.mark.parametrize(
        "spec, value, expected",
        [
            ("uppercase", "hello", "HELLO"),
            ("UPPERCASE", "hello", "HELLO"),
            ("lowercase", "HeLLo", "hello"),
            ("capitalize", "hello world", "Hello world"),
            ("trim", "  padded  ", "padded"),
            ("string", 12, "12"),
            ("string", True, "true"),
            ("reverse", "abc", "cba"),
            ("length", "four", 4),
        ],
    )
    def test_zero_arg(self, spec, value, expected):
        assert apply_filter(value, spec) == expected

    def test_truncate_adds_ellipsis_only_when_longer(self):
        assert apply_filter("Hello world", "truncate:5") == "Hello..."
        assert apply_filter("Hi", "truncate:5") == "Hi"

    def test_pad_left_pads_with_zeros(self):
        assert apply_filter(7, "pad:3") == "007"
        assert apply_filter("1234", "pad:3") == "1234"

    def test_replace_and_split(self):
        assert apply_filter("a-b-c", "replace:-,+") == "a+b+c"
        assert apply_filter("a,b,c", "split:,") == ["a", "b", "c"]

    def test_slice_strings_and_lists(self):
        assert apply_filter("abcdef", "slice:1,3") == "bc"
        assert apply_filter([1, 2, 3, 4], "slice:2") == [3, 4]


class TestNumberFilters:
    """Numeric conversion and formatting."""

    def test_currency(self):
        assert apply_filter(9.5, "currency") == "$9.50"
        assert apply_filter(1234.567, "currency") == "$1,234.57"

    def test_currency_passes_non_numbers_through(self):
        assert apply_filter("n/a", "currency") == "n/a"

    def test_percent(self):
        assert apply_filter(0.5, "percent") == "50%"

    def test_round(self):
        assert apply_filter(2.345, "round:2") == 2.35
        assert apply_filter(2.5, "round:0") == 3
        assert apply_filter("abc", "round:2") == "abc"

    def test_format_strips_trailing_zeros(self):
        assert apply_filter(3.14159, "format:2") == "3.14"
        assert apply_filter(2.0, "format:2") == "2"
        assert apply_filter(1234.5, "format:1") == "1,234.5"

    def test_number_integer_float(self):
        assert apply_filter("42", "number") == 42
        assert apply_filter("3.5", "number") == 3.5
        assert apply_filter("12px", "integer") == 12
        assert apply_filter("2.5em", "float") == 2.5
        assert math.isnan(apply_filter("abc", "integer"))

    def test_boolean(self):
        assert apply_filter("", "boolean") is False
        assert apply_filter(0, "boolean") is False
        assert apply_filter("x", "boolean") is True


class TestCollectionFilters:
    def test_first_last_length(self):
        assert apply_filter([1, 2, 3], "first") == 1
        assert apply_filter([1, 2, 3], "last") == 3
        assert apply_filter([], "first") is None
        assert apply_filter({"a": 1, "b": 2}, "length") == 2

    def test_sort_unique_join(self):
        assert apply_filter(["b", "a", "c"], "sort") == ["a", "b", "c"]
        assert apply_filter([1, 1, 2], "unique") == [1, 2]
        assert apply_filter(["a", "b"], "join: / ") == "a/b"
        assert apply_filter(["a", "b"], "join:-") == "a-b"

    def test_keys_values(self):
        assert apply_filter({"a": 1, "b": 2}, "keys") == ["a", "b"]
        assert apply_filter({"a": 1, "b": 2}, "values") == [1, 2]

    def test_json(self):
        assert apply_filter({"a": [1, 2]}, "json") == '{"a":[1,2]}'


class TestDateFilters:
    def test_date_from_iso_string(self):
        assert apply_filter("2024-03-05T14:07:09", "date") == "3/5/2024"
        assert apply_filter("2024-03-05T14:07:09", "time") == "2:07:09 PM"

    def test_invalid_date(self):
        assert apply_filter("not a date", "date") == "Invalid Date"


class TestDefaultAndNone:
    """``default`` substitutes; everything else passes ``None`` through."""

    def test_default_replaces_empty_values(self):
        assert apply_filter("", "default:N/A") == "N/A"
        assert apply_filter(None, "default:N/A") == "N/A"
        assert apply_filter("Y", "default:N/A") == "Y"
        assert apply_filter(0, "default:N/A") == 0

    def test_default_param_keeps_later_colons(self):
        assert apply_filter(None, "default:10:30") == "10:30"

    def test_none_passes_through_other_filters(self):
        assert apply_filter(None, "uppercase") is None
        assert apply_filter(None, "truncate:3") is None

    def test_chain_applies_left_to_right(self):
        assert apply_filters(" hello ", ["trim", "uppercase", "truncate:3"]) == "HEL..."


class TestUnknownFilters:
    def test_unknown_filter_passes_value_through(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pagecraft.templating.filters"):
            assert apply_filter("value", "sparkle") == "value"
        assert "Unknown filter: sparkle" in caplog.text
        assert caplog.records[-1].pagecraft_event == "filter_warning"

    def test_unknown_parameterized_filter_passes_value_through(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pagecraft.templating.filters"):
            assert apply_filter(5, "sparkle:3") == 5
        assert "Unknown parameterized filter: sparkle" in caplog.text

    def test_available_filters_lists_both_tables(self):
        names = available_filters()
        assert "currency" in names
        assert "truncate" in names
        assert names == sorted(names)
