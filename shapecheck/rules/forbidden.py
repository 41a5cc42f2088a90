# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Built-in ``forbidden`` rule.

The compiler only calls rules for present values, so reaching this rule
means the field was supplied.
"""

from __future__ import annotations

from typing import Any, Mapping

from ..validation.base import fail


def check_forbidden(value: Any, definition: Mapping[str, Any], path: str):
    if value is not None:
        return fail("forbidden")
    return True


__all__ = ["check_forbidden"]
