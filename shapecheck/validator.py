# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""The ``Validator`` facade: rule registry + message table + compiler."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Mapping, Optional, Sequence

from .exceptions import SchemaError
from .rules import RuleFunction, RuleRegistry
from .telemetry import record_compile_metrics, record_validation_metrics, start_span
from .validation import CheckResult, CompiledChecker, MessageResolver, SchemaCompiler

logger = logging.getLogger(__name__)


class Validator:
    """Compile schemas into reusable checkers and validate values against them.

    Each instance owns its rule registry and message table, so custom rules
    and messages never leak between validators. Finish configuring an
    instance (``add``, message edits) before sharing it across threads.

    Example:
        ```python
        v = Validator(messages={"numberMin": "{name} is too small"})
        check = v.compile({
            "id": {"type": "number", "positive": True},
            "name": {"type": "string", "min": 3},
            "tags": {"type": "array", "items": "string", "optional": True},
        })
        assert check({"id": 1, "name": "John"}) is True
        ```

    :param messages: Optional rule-type -> template overrides, shallow-merged
                     over the default templates.
    """

    def __init__(self, messages: Optional[Mapping[str, str]] = None):
        self._resolver = MessageResolver(messages)
        self.rules = RuleRegistry.with_defaults()

    @property
    def messages(self) -> Dict[str, str]:
        """The live template table used by this validator and its checkers."""

        return self._resolver.messages

    def add(self, type_tag: str, fn: RuleFunction) -> None:
        """Register (or override) the rule used for schema nodes of *type_tag*."""

        self.rules.add(type_tag, fn)

    def compile(self, schema: Any) -> CompiledChecker:
        """Compile *schema* into a checker returning ``True`` or a list of violations.

        Raises:
            UnknownRuleError: a node references an unregistered type
            InvalidSchemaError: the root or a node is malformed
        """
        started_at = time.perf_counter()
        with start_span("shapecheck.compile"):
            try:
                checker = SchemaCompiler(self.rules, self._resolver).compile(schema)
            except SchemaError as exc:
                logger.error("Schema compilation failed: %s", exc)
                record_compile_metrics(schema, "error", started_at)
                raise

        record_compile_metrics(schema, "ok", started_at)
        return checker

    def validate(self, candidate: Any, schema: Any) -> CheckResult:
        """Compile *schema* and check *candidate* once.

        Nothing is cached: compile once and reuse the checker when validating
        many values against the same schema.
        """
        result = self.compile(schema)(candidate)
        if result is not True:
            logger.debug("Validation reported %d violation(s)", len(result))
        record_validation_metrics(result)
        return result

    def resolve_message(self, rule_type: str, field_path: str, args: Sequence[Any] = ()) -> Optional[str]:
        """Render the template for *rule_type*; ``None`` when no template exists."""

        return self._resolver.resolve(rule_type, field_path, args)


__all__ = ["Validator"]
