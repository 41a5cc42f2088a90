# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Built-in ``object`` rule. Declared ``props`` are walked by the compiler."""

from __future__ import annotations

from typing import Any, Mapping

from ..validation.base import fail


def check_object(value: Any, definition: Mapping[str, Any], path: str):
    if not isinstance(value, Mapping):
        return fail("object")
    return True


__all__ = ["check_object"]
