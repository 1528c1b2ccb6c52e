"""Tests for values_table.py -- flattening values and joining descriptions."""

import pytest

from helm_docs.models import ValueDescription, ValueRow
from helm_docs.values_table import (
    build_value_rows,
    flatten_values,
    format_default,
    value_type,
)


class TestValueType:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, "bool"),
            (3, "int"),
            (1.5, "float"),
            ("x", "string"),
            ([1], "list"),
            ({}, "object"),
            (None, "null"),
        ],
    )
    def test_types(self, value, expected):
        assert value_type(value) == expected


class TestFormatDefault:
    def test_string_is_quoted(self):
        assert format_default("stable") == '"stable"'

    def test_compact_json(self):
        assert format_default({"a": [1, 2]}) == '{"a":[1,2]}'

    def test_null(self):
        assert format_default(None) == "null"


class TestFlattenValues:
    def test_nested_keys_are_dotted(self):
        values = {"image": {"repository": "nginx", "tag": "stable"}, "replicas": 1}
        assert flatten_values(values) == [
            ("image.repository", "nginx"),
            ("image.tag", "stable"),
            ("replicas", 1),
        ]

    def test_empty_mapping_is_leaf(self):
        assert flatten_values({"resources": {}}) == [("resources", {})]

    def test_documented_mapping_is_leaf(self):
        values = {"podLabels": {"app": "web"}}
        assert flatten_values(values, documented=frozenset({"podLabels"})) == [
            ("podLabels", {"app": "web"}),
        ]

    def test_non_string_keys(self):
        assert flatten_values({1: "a"}) == [("1", "a")]


class TestBuildValueRows:
    def test_joins_descriptions(self):
        values = {"image": {"tag": "stable"}, "replicaCount": 3}
        descriptions = {
            "replicaCount": ValueDescription("Number of replicas"),
            "image.tag": ValueDescription("The image tag", '"latest"'),
        }
        assert build_value_rows(values, descriptions) == [
            ValueRow("image.tag", "string", '"latest"', "The image tag"),
            ValueRow("replicaCount", "int", "3", "Number of replicas"),
        ]

    def test_undocumented_keys_have_empty_description(self):
        rows = build_value_rows({"enabled": False}, {})
        assert rows == [ValueRow("enabled", "bool", "false", "")]

    def test_descriptions_for_absent_keys_ignored(self):
        rows = build_value_rows({"a": 1}, {"missing": ValueDescription("gone")})
        assert [r.key for r in rows] == ["a"]

    def test_sorted_by_key(self):
        rows = build_value_rows({"b": 1, "a": {"z": 1, "c": 2}}, {})
        assert [r.key for r in rows] == ["a.c", "a.z", "b"]
