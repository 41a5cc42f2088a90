"""Validation package - schema parsing, compilation and message rendering.

Compiled checkers are pure: they return ``True`` or a list of violations and
never raise for bad data.
"""

from .base import RuleFailure, Violation, fail
from .compiler import CheckResult, CompiledChecker, SchemaCompiler
from .messages import DEFAULT_MESSAGES, MessageResolver, resolve_template
from .paths import compose_path
from .schema import ArrayNode, ObjectNode, RuleNode, parse_schema

__all__ = [
    "ArrayNode",
    "CheckResult",
    "CompiledChecker",
    "DEFAULT_MESSAGES",
    "MessageResolver",
    "ObjectNode",
    "RuleFailure",
    "RuleNode",
    "SchemaCompiler",
    "Violation",
    "compose_path",
    "fail",
    "parse_schema",
    "resolve_template",
]
