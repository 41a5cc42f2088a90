# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Core result types shared by rules, the compiler and the facade."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class RuleFailure:
    """A failure descriptor returned by a rule function.

    ``type`` is the message key (``"stringMin"``, ``"number"`` ...) and
    ``args`` are the values substituted into the message template.
    """

    type: str
    args: Tuple[Any, ...] = ()


def fail(rule_type: str, *args: Any) -> RuleFailure:
    """Shorthand used by rules: ``return fail("stringMin", expected, actual)``."""

    return RuleFailure(type=rule_type, args=tuple(args))


@dataclass(frozen=True)
class Violation:
    """One reported constraint failure."""

    type: str
    field: str
    message: Optional[str]
    args: List[Any] = field(default_factory=list)

    # args is a list, so violations are unhashable.
    __hash__ = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "field": self.field,
            "message": self.message,
            "args": list(self.args),
        }


__all__ = ["RuleFailure", "Violation", "fail"]
