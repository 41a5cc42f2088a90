# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Schema compiler.

The schema tree is walked once. Every node is bound to the rule function
resolved at compile time, and nested ``object``/``array`` nodes get their own
bound sub-checkers, so a compiled checker never looks at the raw schema
again.

Checking a field:

1. ``None`` or a missing key is "absent". Absent required fields report
   ``required``; absent optional fields and absent ``forbidden`` fields are
   skipped. Nothing else runs for an absent value.
2. The rule runs on the present value and its failures become violations.
3. ``object`` nodes then check each declared prop (all props count as absent
   when the value is not a mapping). ``array`` nodes check each element
   against ``items`` when the value is a list or tuple.

Paths are composed while descending, so every violation carries its full
path and a message rendered with that path.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Mapping, Union

from ..exceptions import UnknownRuleError
from .base import RuleFailure, Violation
from .messages import MessageResolver
from .paths import compose_path
from .schema import ArrayNode, Fields, ObjectNode, SchemaNode, parse_schema

logger = logging.getLogger(__name__)

CheckResult = Union[bool, List[Violation]]
CompiledChecker = Callable[[Any], CheckResult]

# (value, path, violations) -> None; appends to violations
_NodeChecker = Callable[[Any, str, List[Violation]], None]

_NO_PROPS: Mapping[str, Any] = {}


def _as_failure(item: Any, rule_type: str) -> RuleFailure:
    if isinstance(item, RuleFailure):
        return item
    if isinstance(item, Mapping) and "type" in item:
        return RuleFailure(type=item["type"], args=tuple(item.get("args", ())))
    return RuleFailure(type=rule_type)


def iter_failures(outcome: Any, rule_type: str) -> Iterable[RuleFailure]:
    """Normalize a rule's return value into failures. ``True`` yields nothing."""

    if outcome is True:
        return ()
    if isinstance(outcome, (list, tuple)):
        return [_as_failure(item, rule_type) for item in outcome]
    return (_as_failure(outcome, rule_type),)


class SchemaCompiler:
    """Compile schemas against a rule table and a message resolver.

    Rules are looked up once per node while compiling; the returned checker
    keeps references to those functions. Messages are rendered on demand from
    the resolver's template table.
    """

    def __init__(self, rules: Mapping[str, Callable[..., Any]], messages: MessageResolver):
        self._rules = rules
        self._messages = messages

    def compile(self, schema: Any) -> CompiledChecker:
        parsed = parse_schema(schema)

        if parsed.is_array_root:
            check_root = self._compile_node(parsed.node, "")
            logger.debug("Compiled root array schema of type '%s'", parsed.node.type)

            def check(candidate: Any) -> CheckResult:
                violations: List[Violation] = []
                check_root(candidate, "", violations)
                return violations or True

            return check

        check_fields = self._compile_fields(parsed.fields, "")
        logger.debug("Compiled object schema with %d field(s)", len(parsed.fields))

        def check(candidate: Any) -> CheckResult:
            violations: List[Violation] = []
            check_fields(candidate, "", violations)
            return violations or True

        return check

    def _violation(self, rule_type: str, path: str, args: Iterable[Any] = ()) -> Violation:
        args = list(args)
        return Violation(
            type=rule_type,
            field=path,
            message=self._messages.resolve(rule_type, path, args),
            args=args,
        )

    def _resolve_rule(self, node: SchemaNode, path: str) -> Callable[..., Any]:
        rule = self._rules.get(node.type)
        if rule is None:
            logger.error("Schema field '%s' references unknown rule type '%s'", path or "<root>", node.type)
            raise UnknownRuleError(node.type, field=path)
        return rule

    def _compile_node(self, node: SchemaNode, path: str) -> _NodeChecker:
        rule = self._resolve_rule(node, path)
        rule_type = node.type
        definition = node.definition
        optional = node.optional
        skip_absent = optional or rule_type == "forbidden"

        nested = None
        if isinstance(node, ObjectNode) and node.props:
            nested = self._compile_fields(node.props, path)
        elif isinstance(node, ArrayNode) and node.items is not None:
            nested = self._compile_items(node.items, path)

        def check_node(value: Any, field_path: str, violations: List[Violation]) -> None:
            if value is None:
                if not skip_absent:
                    violations.append(self._violation("required", field_path))
                return

            outcome = rule(value, definition, field_path)
            for failure in iter_failures(outcome, rule_type):
                violations.append(self._violation(failure.type, field_path, failure.args))

            if nested is not None:
                nested(value, field_path, violations)

        return check_node

    def _compile_fields(self, fields: Fields, path: str) -> _NodeChecker:
        bound = tuple(
            (name, self._compile_node(node, compose_path(path, name)))
            for name, node in fields
        )

        def check_fields(value: Any, field_path: str, violations: List[Violation]) -> None:
            source = value if isinstance(value, Mapping) else _NO_PROPS
            for name, check_field in bound:
                check_field(source.get(name), compose_path(field_path, name), violations)

        return check_fields

    def _compile_items(self, items: SchemaNode, path: str) -> _NodeChecker:
        check_item = self._compile_node(items, f"{path}[]")

        def check_items(value: Any, field_path: str, violations: List[Violation]) -> None:
            if not isinstance(value, (list, tuple)):
                return
            for index, item in enumerate(value):
                check_item(item, compose_path(field_path, index), violations)

        return check_items


__all__ = [
    "CheckResult",
    "CompiledChecker",
    "SchemaCompiler",
    "iter_failures",
]
