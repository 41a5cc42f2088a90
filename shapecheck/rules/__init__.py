"""Rules package - the registry and the built-in rule functions."""

from .registry import BUILTIN_RULES, RuleFunction, RuleRegistry

__all__ = [
    "BUILTIN_RULES",
    "RuleFunction",
    "RuleRegistry",
]
