# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Field path composition."""

from __future__ import annotations

from typing import Union

PathLocator = Union[str, int]


def compose_path(parent: str, locator: PathLocator) -> str:
    """Join *parent* and a property name or array index into a field path.

    >>> compose_path("", "name")
    'name'
    >>> compose_path("address", "zip")
    'address.zip'
    >>> compose_path("arr", 1)
    'arr[1]'
    >>> compose_path("", 2)
    '[2]'
    """

    if isinstance(locator, int) and not isinstance(locator, bool):
        return f"{parent}[{locator}]"
    if not parent:
        return str(locator)
    return f"{parent}.{locator}"


__all__ = ["PathLocator", "compose_path"]
