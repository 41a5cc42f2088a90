# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Built-in ``string`` rule."""

from __future__ import annotations

from typing import Any, Mapping

from ..validation.base import fail
from ..validation.schema import compile_pattern


def check_string(value: Any, definition: Mapping[str, Any], path: str):
    if not isinstance(value, str):
        return fail("string")

    length = len(value)

    if definition.get("empty") is False and length == 0:
        return fail("stringEmpty", value)

    minimum = definition.get("min")
    if minimum is not None and length < minimum:
        return fail("stringMin", minimum, length)

    maximum = definition.get("max")
    if maximum is not None and length > maximum:
        return fail("stringMax", maximum, length)

    expected_length = definition.get("length")
    if expected_length is not None and length != expected_length:
        return fail("stringLength", expected_length, length)

    pattern = definition.get("pattern")
    if pattern is not None and compile_pattern(pattern).search(value) is None:
        return fail("stringPattern", pattern, value)

    contains = definition.get("contains")
    if contains is not None and contains not in value:
        return fail("stringContains", contains, value)

    enum = definition.get("enum")
    if enum is not None and value not in enum:
        return fail("stringEnum", enum, value)

    return True


__all__ = ["check_string"]
