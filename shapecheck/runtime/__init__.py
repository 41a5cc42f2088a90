"""Runtime helpers - the shared default validator."""

from .default_validator import compile_schema, format_violations, get_default_validator, validate

__all__ = [
    "compile_schema",
    "format_violations",
    "get_default_validator",
    "validate",
]
