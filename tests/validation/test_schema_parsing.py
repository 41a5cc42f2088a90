# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for turning raw schemas into node trees."""

import copy
import re

import pytest

from shapecheck import Validator
from shapecheck.exceptions import InvalidSchemaError
from shapecheck.validation.schema import (
    ArrayNode,
    ObjectNode,
    RuleNode,
    compile_pattern,
    parse_node,
    parse_schema,
)


def test_shorthand_expands_to_type_mapping():
    node = parse_node("number")
    assert isinstance(node, RuleNode)
    assert node.type == "number"
    assert node.definition == {"type": "number"}
    assert node.optional is False


def test_mapping_node_keeps_caller_definition():
    raw = {"type": "string", "min": 5, "optional": True}
    node = parse_node(raw)
    assert node.definition is raw
    assert node.optional is True


def test_object_and_array_nodes():
    node = parse_node({
        "type": "object",
        "props": {"tags": {"type": "array", "items": "string"}},
    })
    assert isinstance(node, ObjectNode)
    [(name, tags)] = node.props
    assert name == "tags"
    assert isinstance(tags, ArrayNode)
    assert isinstance(tags.items, RuleNode)
    assert tags.items.type == "string"


def test_field_order_is_preserved():
    parsed = parse_schema({"z": "string", "a": "number", "m": "boolean"})
    assert [name for name, _ in parsed.fields] == ["z", "a", "m"]
    assert parsed.is_array_root is False


def test_root_array_schema():
    parsed = parse_schema([{"type": "array", "items": "number"}])
    assert parsed.is_array_root is True
    assert isinstance(parsed.node, ArrayNode)


@pytest.mark.parametrize("schema", [[], [{"type": "number"}, {"type": "string"}], ()])
def test_root_array_must_have_exactly_one_element(schema):
    with pytest.raises(InvalidSchemaError, match="exactly one element"):
        parse_schema(schema)


@pytest.mark.parametrize("schema", [None, "string", 42])
def test_root_must_be_mapping_or_list(schema):
    with pytest.raises(InvalidSchemaError):
        parse_schema(schema)


def test_node_without_type_is_rejected():
    with pytest.raises(InvalidSchemaError, match="'address.zip' is missing a 'type'"):
        parse_schema({"address": {"type": "object", "props": {"zip": {"min": 3}}}})


def test_props_must_be_a_mapping():
    with pytest.raises(InvalidSchemaError, match="'props'"):
        parse_node({"type": "object", "props": ["a", "b"]}, "address")


def test_parsing_never_mutates_the_schema():
    schema = {
        "id": "number",
        "address": {"type": "object", "props": {"zip": {"type": "number", "min": 100}}},
        "tags": {"type": "array", "items": "string"},
    }
    snapshot = copy.deepcopy(schema)
    parse_schema(schema)
    assert schema == snapshot


def test_node_with_non_string_type_names_the_bad_value():
    with pytest.raises(InvalidSchemaError, match="'age' is missing a 'type' name, got 5"):
        parse_schema({"age": {"type": 5}})


def test_field_names_must_be_strings():
    with pytest.raises(InvalidSchemaError, match="Field names must be strings, got 0"):
        parse_schema({0: "string"})


def test_invalid_regex_pattern_is_rejected_at_compile_time():
    with pytest.raises(InvalidSchemaError, match=r"Invalid regex pattern '\(' in schema node 'name'"):
        Validator().compile({"name": {"type": "string", "pattern": "("}})


def test_pattern_must_be_string_or_compiled_regex():
    with pytest.raises(InvalidSchemaError, match="'pattern' of schema node 'name'"):
        parse_schema({"name": {"type": "string", "pattern": 42}})


@pytest.mark.parametrize(
    "node",
    [
        {"type": "string", "min": "5"},
        {"type": "string", "length": True},
        {"type": "number", "max": "10"},
        {"type": "number", "notEqual": [1]},
        {"type": "array", "min": "2"},
    ],
)
def test_non_numeric_bounds_are_rejected_at_compile_time(node):
    with pytest.raises(InvalidSchemaError, match="of schema node 'field' must be a number"):
        Validator().compile({"field": node})


def test_custom_rule_types_keep_free_form_constraints():
    node = parse_node({"type": "slug", "min": "a", "pattern": 3}, "field")
    assert node.definition["min"] == "a"


def test_compiled_pattern_is_cached():
    assert compile_pattern(r"^\d+$") is compile_pattern(r"^\d+$")
    precompiled = re.compile(r"x")
    assert compile_pattern(precompiled) is precompiled
