# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Rule registry: maps a schema ``type`` tag to a rule function.

A rule function has the signature ``fn(value, definition, field_path)`` and
returns ``True`` on success. Anything else is a failure:

- a :class:`~shapecheck.validation.base.RuleFailure` (usually built with ``fail()``),
- a list/tuple of failures (an empty one counts as success),
- any other value, reported under the rule's own tag.

Built-in rules are ordinary entries and can be overridden like any custom
rule.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, Mapping, Optional

from .array import check_array
from .boolean import check_boolean
from .forbidden import check_forbidden
from .misc import check_any, check_date, check_email, check_function, check_url
from .number import check_number
from .object import check_object
from .string import check_string

logger = logging.getLogger(__name__)

RuleFunction = Callable[[Any, Mapping[str, Any], str], Any]

BUILTIN_RULES: Mapping[str, RuleFunction] = MappingProxyType({
    "any": check_any,
    "array": check_array,
    "boolean": check_boolean,
    "date": check_date,
    "email": check_email,
    "forbidden": check_forbidden,
    "function": check_function,
    "number": check_number,
    "object": check_object,
    "string": check_string,
    "url": check_url,
})


class RuleRegistry(MutableMapping):
    """Mutable mapping of rule tag to rule function."""

    def __init__(self, rules: Optional[Mapping[str, RuleFunction]] = None):
        self._rules: Dict[str, RuleFunction] = dict(rules or {})

    @classmethod
    def with_defaults(cls) -> "RuleRegistry":
        """Return a registry seeded with every built-in rule."""

        return cls(BUILTIN_RULES)

    def add(self, name: str, fn: RuleFunction) -> None:
        """Register *fn* under *name*, replacing any existing rule."""

        if name in self._rules:
            logger.debug("Overriding rule '%s'", name)
        else:
            logger.debug("Registering rule '%s'", name)
        self._rules[name] = fn

    def __getitem__(self, name: str) -> RuleFunction:
        return self._rules[name]

    def __setitem__(self, name: str, fn: RuleFunction) -> None:
        self.add(name, fn)

    def __delitem__(self, name: str) -> None:
        del self._rules[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleRegistry({sorted(self._rules)!r})"


__all__ = ["BUILTIN_RULES", "RuleFunction", "RuleRegistry"]
