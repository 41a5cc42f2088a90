# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""shapecheck - compile declarative schemas into fast, reusable checkers.

.. code-block:: python

    from shapecheck import Validator

    v = Validator()
    check = v.compile({
        "id": {"type": "number", "positive": True},
        "address": {"type": "object", "props": {"zip": {"type": "number", "min": 100}}},
    })
    check({"id": 0, "address": {"zip": 55}})
    # [Violation(type='numberPositive', field='id', ...),
    #  Violation(type='numberMin', field='address.zip', ...)]
"""

from ._version import __version__
from .exceptions import (
    ConfigurationError,
    InvalidSchemaError,
    SchemaError,
    ShapeCheckError,
    UnknownRuleError,
)
from .rules import BUILTIN_RULES, RuleRegistry
from .runtime import compile_schema, format_violations, get_default_validator, validate
from .validation import DEFAULT_MESSAGES, RuleFailure, Violation, compose_path, fail
from .validator import Validator

__all__ = [
    "__version__",
    "BUILTIN_RULES",
    "ConfigurationError",
    "DEFAULT_MESSAGES",
    "InvalidSchemaError",
    "RuleFailure",
    "RuleRegistry",
    "SchemaError",
    "ShapeCheckError",
    "UnknownRuleError",
    "Validator",
    "Violation",
    "compile_schema",
    "compose_path",
    "fail",
    "format_violations",
    "get_default_validator",
    "validate",
]
