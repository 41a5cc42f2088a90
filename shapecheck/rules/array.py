# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Built-in ``array`` rule.

Only the container is checked here. Elements are checked against ``items``
by the compiled checker, which knows each element's path.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..validation.base import fail


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def check_array(value: Any, definition: Mapping[str, Any], path: str):
    if not is_array(value):
        return fail("array")

    size = len(value)

    if definition.get("empty") is False and size == 0:
        return fail("arrayEmpty")

    minimum = definition.get("min")
    if minimum is not None and size < minimum:
        return fail("arrayMin", minimum, size)

    maximum = definition.get("max")
    if maximum is not None and size > maximum:
        return fail("arrayMax", maximum, size)

    expected_length = definition.get("length")
    if expected_length is not None and size != expected_length:
        return fail("arrayLength", expected_length, size)

    if "contains" in definition and definition["contains"] not in value:
        return fail("arrayContains", definition["contains"])

    enum = definition.get("enum")
    if enum is not None:
        for item in value:
            if item not in enum:
                return fail("arrayEnum", item, enum)

    return True


__all__ = ["check_array", "is_array"]
