# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Built-in ``number`` rule.

``bool`` is not a number here even though it subclasses ``int``, and
neither NaN nor infinities are accepted. With ``convert: True`` a
non-numeric value is passed through ``float()`` before checking; the
candidate itself is never modified.
"""

from __future__ import annotations

import math
from typing import Any, Mapping

from ..validation.base import fail


def is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not (isinstance(value, float) and not math.isfinite(value))


def _convert(value: Any) -> Any:
    try:
        return float(value)
    except (TypeError, ValueError):
        return value


def check_number(value: Any, definition: Mapping[str, Any], path: str):
    if definition.get("convert") is True and not is_number(value):
        value = _convert(value)

    if not is_number(value):
        return fail("number")

    minimum = definition.get("min")
    if minimum is not None and value < minimum:
        return fail("numberMin", minimum, value)

    maximum = definition.get("max")
    if maximum is not None and value > maximum:
        return fail("numberMax", maximum, value)

    equal = definition.get("equal")
    if equal is not None and value != equal:
        return fail("numberEqual", equal, value)

    not_equal = definition.get("notEqual")
    if not_equal is not None and value == not_equal:
        return fail("numberNotEqual", not_equal, value)

    if definition.get("integer") is True and isinstance(value, float) and not value.is_integer():
        return fail("numberInteger", value)

    if definition.get("positive") is True and value <= 0:
        return fail("numberPositive", value)

    if definition.get("negative") is True and value >= 0:
        return fail("numberNegative", value)

    return True


__all__ = ["check_number", "is_number"]
