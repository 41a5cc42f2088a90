# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for shapecheck.

Only authoring mistakes are raised. Data that fails validation is reported
through the returned violation list, never as an exception.
"""

from __future__ import annotations

from typing import Any, Optional


class ShapeCheckError(Exception):
    """Base exception for all shapecheck errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(ShapeCheckError):
    """Raised when a validator is set up with invalid options."""


class SchemaError(ConfigurationError):
    """Raised when a schema cannot be compiled."""


class UnknownRuleError(SchemaError):
    """Raised when a schema references a rule type that is not registered."""

    def __init__(self, rule_type: Any, field: Optional[str] = None):
        self.rule_type = rule_type
        self.field = field
        super().__init__(f"Invalid '{rule_type}' type in validator schema!")


class InvalidSchemaError(SchemaError):
    """Raised for a structurally malformed schema (bad root, node or substructure)."""


__all__ = [
    "ShapeCheckError",
    "ConfigurationError",
    "SchemaError",
    "UnknownRuleError",
    "InvalidSchemaError",
]
