# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Process-wide default validator and module-level shortcuts."""

from __future__ import annotations

from typing import Any, Final

from ..validation import CheckResult, CompiledChecker
from ..validator import Validator


_VALIDATOR: Final[Validator] = Validator()


def get_default_validator() -> Validator:
    """Return the process-wide validator instance."""

    return _VALIDATOR


def compile_schema(schema: Any) -> CompiledChecker:
    """Compile *schema* with the default validator."""

    return _VALIDATOR.compile(schema)


def validate(candidate: Any, schema: Any) -> CheckResult:
    """Validate *candidate* against *schema* with the default validator."""

    return _VALIDATOR.validate(candidate, schema)


def format_violations(violations: Any, header: str = "Validation failed:") -> str:
    """Produce a human-readable multi-line report for a checker result."""

    if violations is True:
        return ""

    lines = [header]
    for violation in violations:
        lines.append(f" - {violation.message or violation.type} ({violation.field})")
    return "\n".join(lines)


__all__ = [
    "compile_schema",
    "format_violations",
    "get_default_validator",
    "validate",
]
