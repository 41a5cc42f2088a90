# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Message templates and placeholder substitution.

Templates use two kinds of placeholders:

- ``{name}`` is replaced with the field path.
- ``{0}``, ``{1}``, ... are replaced with the stringified argument at that
  index. A placeholder whose index is beyond the argument list is kept as-is
  in the output, so a template/argument mismatch stays visible.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


DEFAULT_MESSAGES: Mapping[str, str] = MappingProxyType({
    "required": "The '{name}' field is required!",

    "string": "The '{name}' field must be a string!",
    "stringEmpty": "The '{name}' field must not be empty!",
    "stringMin": "The '{name}' field length must be larger than or equal to {0} characters long!",
    "stringMax": "The '{name}' field length must be less than or equal to {0} characters long!",
    "stringLength": "The '{name}' field length must be {0} characters long!",
    "stringPattern": "The '{name}' field fails to match the required pattern!",
    "stringContains": "The '{name}' field must contain the '{0}' text!",
    "stringEnum": "The '{name}' field does not match any of the allowed values!",

    "number": "The '{name}' field must be a number!",
    "numberMin": "The '{name}' field must be larger than or equal to {0}!",
    "numberMax": "The '{name}' field must be less than or equal to {0}!",
    "numberEqual": "The '{name}' field must be equal with {0}!",
    "numberNotEqual": "The '{name}' field can't be equal with {0}!",
    "numberInteger": "The '{name}' field must be an integer!",
    "numberPositive": "The '{name}' field must be a positive number!",
    "numberNegative": "The '{name}' field must be a negative number!",

    "array": "The '{name}' field must be an array!",
    "arrayEmpty": "The '{name}' field must not be an empty array!",
    "arrayMin": "The '{name}' field must contain at least {0} items!",
    "arrayMax": "The '{name}' field must contain less than or equal to {0} items!",
    "arrayLength": "The '{name}' field must contain {0} items!",
    "arrayContains": "The '{name}' field must contain the '{0}' item!",
    "arrayEnum": "The '{name}' field value '{0}' does not match any of the allowed values!",

    "boolean": "The '{name}' field must be a boolean!",
    "function": "The '{name}' field must be a function!",
    "date": "The '{name}' field must be a Date!",
    "email": "The '{name}' field must be a valid e-mail!",
    "url": "The '{name}' field must be a valid URL!",
    "object": "The '{name}' field must be an Object!",
    "forbidden": "The '{name}' field is forbidden!",
})

_PLACEHOLDER = re.compile(r"\{(name|\d+)\}")


def stringify(value: Any) -> str:
    """Render a message argument the way end users expect to read it."""

    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join(stringify(item) for item in value)
    if isinstance(value, re.Pattern):
        return value.pattern
    return str(value)


def resolve_template(template: str, field_path: str, args: Sequence[Any] = ()) -> str:
    """Substitute ``{name}`` and positional placeholders in *template*."""

    def _replace(match: "re.Match[str]") -> str:
        token = match.group(1)
        if token == "name":
            return field_path
        index = int(token)
        if index < len(args):
            return stringify(args[index])
        return match.group(0)

    return _PLACEHOLDER.sub(_replace, template)


class MessageResolver:
    """Template table lookup plus substitution.

    Custom *messages* are shallow-merged over :data:`DEFAULT_MESSAGES`; keys
    that are not overridden keep their default text.
    """

    def __init__(self, messages: Optional[Mapping[str, str]] = None):
        if messages is not None and not isinstance(messages, Mapping):
            raise ConfigurationError(
                f"'messages' must be a mapping of rule type to template, got {type(messages).__name__}"
            )

        self.messages: Dict[str, str] = dict(DEFAULT_MESSAGES)
        for rule_type, template in (messages or {}).items():
            if not isinstance(rule_type, str):
                raise ConfigurationError(f"Message keys must be rule type names, got {rule_type!r}")
            if not isinstance(template, str):
                raise ConfigurationError(
                    f"Message template for '{rule_type}' must be a string, got {type(template).__name__}"
                )
            self.messages[rule_type] = template

        if messages:
            logger.debug("Overriding %d default message template(s)", len(messages))

    def resolve(self, rule_type: str, field_path: str, args: Sequence[Any] = ()) -> Optional[str]:
        """Return the display text for a failure, or ``None`` if no template exists."""

        template = self.messages.get(rule_type)
        if template is None:
            return None
        return resolve_template(template, field_path, args)


__all__ = [
    "DEFAULT_MESSAGES",
    "MessageResolver",
    "resolve_template",
    "stringify",
]
