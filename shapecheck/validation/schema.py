# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Schema node model.

Raw schemas are plain Python data: a field mapping, or a one-element list
describing a top-level array. :func:`parse_schema` turns them into a tree of
frozen nodes without touching the caller's objects:

- :class:`RuleNode` for leaves (``string``, ``number``, custom rules ...),
- :class:`ObjectNode` for ``object`` with ordered ``props``,
- :class:`ArrayNode` for ``array`` with an optional ``items`` node.

Every node keeps its ``definition`` mapping, which is what rule functions
receive. A shorthand type string becomes a fresh ``{"type": name}`` dict.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple, Union

from ..exceptions import InvalidSchemaError
from .paths import compose_path


@dataclass(frozen=True)
class RuleNode:
    type: str
    definition: Mapping[str, Any]
    optional: bool


@dataclass(frozen=True)
class ObjectNode(RuleNode):
    props: Tuple[Tuple[str, "SchemaNode"], ...]


@dataclass(frozen=True)
class ArrayNode(RuleNode):
    items: Optional["SchemaNode"]


SchemaNode = Union[RuleNode, ObjectNode, ArrayNode]
Fields = Tuple[Tuple[str, SchemaNode], ...]


@dataclass(frozen=True)
class ParsedSchema:
    """A parsed root: either ``fields`` (mapping root) or ``node`` (array root)."""

    fields: Optional[Fields] = None
    node: Optional[SchemaNode] = None

    @property
    def is_array_root(self) -> bool:
        return self.node is not None


def _label(path: str) -> str:
    return path or "<root>"


# Built-in rule types whose size/bound constraints must be numbers.
_NUMERIC_CONSTRAINTS = {
    "string": ("min", "max", "length"),
    "number": ("min", "max", "equal", "notEqual"),
    "array": ("min", "max", "length"),
}


@functools.lru_cache(maxsize=256)
def compile_pattern(pattern: Union[str, "re.Pattern[str]"]) -> "re.Pattern[str]":
    """Compile a ``pattern`` constraint once; compiled patterns pass through."""

    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


def _check_constraints(rule_type: str, definition: Mapping[str, Any], path: str) -> None:
    for key in _NUMERIC_CONSTRAINTS.get(rule_type, ()):
        bound = definition.get(key)
        if bound is None:
            continue
        if isinstance(bound, bool) or not isinstance(bound, (int, float)):
            raise InvalidSchemaError(
                f"'{key}' of schema node '{_label(path)}' must be a number, got {bound!r}"
            )

    if rule_type == "string" and definition.get("pattern") is not None:
        pattern = definition["pattern"]
        if not isinstance(pattern, (str, re.Pattern)):
            raise InvalidSchemaError(
                f"'pattern' of schema node '{_label(path)}' must be a string or compiled regex"
            )
        try:
            compile_pattern(pattern)
        except re.error as exc:
            raise InvalidSchemaError(
                f"Invalid regex pattern {pattern!r} in schema node '{_label(path)}': {exc}"
            ) from exc


def parse_node(raw: Any, path: str = "") -> SchemaNode:
    """Parse one schema node found at *path* (used in error messages)."""

    if isinstance(raw, str):
        definition: Mapping[str, Any] = {"type": raw}
    elif isinstance(raw, Mapping):
        definition = raw
    else:
        raise InvalidSchemaError(
            f"Schema node '{_label(path)}' must be a type name or a mapping, got {type(raw).__name__}"
        )

    rule_type = definition.get("type")
    if not isinstance(rule_type, str) or not rule_type:
        raise InvalidSchemaError(
            f"Schema node '{_label(path)}' is missing a 'type' name, got {rule_type!r}"
        )

    _check_constraints(rule_type, definition, path)
    optional = bool(definition.get("optional", False))

    if rule_type == "object":
        props = definition.get("props")
        if props is None:
            return ObjectNode(type=rule_type, definition=definition, optional=optional, props=())
        if not isinstance(props, Mapping):
            raise InvalidSchemaError(f"'props' of schema node '{_label(path)}' must be a mapping")
        return ObjectNode(
            type=rule_type,
            definition=definition,
            optional=optional,
            props=parse_fields(props, path),
        )

    if rule_type == "array":
        items = definition.get("items")
        return ArrayNode(
            type=rule_type,
            definition=definition,
            optional=optional,
            items=None if items is None else parse_node(items, f"{path}[]"),
        )

    return RuleNode(type=rule_type, definition=definition, optional=optional)


def parse_fields(fields: Mapping[str, Any], path: str = "") -> Fields:
    """Parse a field mapping, keeping declaration order."""

    for name in fields:
        if not isinstance(name, str):
            raise InvalidSchemaError(
                f"Field names must be strings, got {name!r} in schema node '{_label(path)}'"
            )
    return tuple((name, parse_node(raw, compose_path(path, name))) for name, raw in fields.items())


def parse_schema(schema: Any) -> ParsedSchema:
    """Parse a root schema: a field mapping or a one-element list/tuple."""

    if isinstance(schema, Mapping):
        return ParsedSchema(fields=parse_fields(schema))

    if isinstance(schema, (list, tuple)):
        if len(schema) != 1:
            raise InvalidSchemaError(
                f"Root array schema must contain exactly one element, got {len(schema)}"
            )
        return ParsedSchema(node=parse_node(schema[0]))

    raise InvalidSchemaError(
        f"Schema must be a mapping of fields or a one-element list, got {type(schema).__name__}"
    )


__all__ = [
    "ArrayNode",
    "Fields",
    "ObjectNode",
    "ParsedSchema",
    "RuleNode",
    "SchemaNode",
    "compile_pattern",
    "parse_fields",
    "parse_node",
    "parse_schema",
]
