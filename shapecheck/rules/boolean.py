# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Built-in ``boolean`` rule."""

from __future__ import annotations

from typing import Any, Mapping

from ..validation.base import fail

# Values accepted as booleans when ``convert: True`` is set.
_CONVERTIBLE = ("true", "false", "1", "0", 1, 0)


def check_boolean(value: Any, definition: Mapping[str, Any], path: str):
    if isinstance(value, bool):
        return True

    if definition.get("convert") is True and value in _CONVERTIBLE:
        return True

    return fail("boolean", value)


__all__ = ["check_boolean"]
