# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Small built-in rules: ``any``, ``date``, ``email``, ``url`` and ``function``."""

from __future__ import annotations

import datetime
import re
from typing import Any, Mapping

from ..validation.base import fail

_EMAIL_QUICK = re.compile(r"^\S+@\S+\.\S+$")
_EMAIL_PRECISE = re.compile(
    r'^(([^<>()\[\]\\.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|(".+"))'
    r"@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$"
)
_URL = re.compile(
    r"^(https?|ftp)://(www\.)?[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z]{2,63}\b([-a-zA-Z0-9@:%_+.~#?&/=]*)$"
)


def check_any(value: Any, definition: Mapping[str, Any], path: str):
    return True


def check_date(value: Any, definition: Mapping[str, Any], path: str):
    # datetime.datetime subclasses datetime.date
    if not isinstance(value, datetime.date):
        return fail("date", value)
    return True


def check_email(value: Any, definition: Mapping[str, Any], path: str):
    if not isinstance(value, str):
        return fail("string")

    pattern = _EMAIL_PRECISE if definition.get("mode") == "precise" else _EMAIL_QUICK
    if pattern.match(value) is None:
        return fail("email", value)
    return True


def check_url(value: Any, definition: Mapping[str, Any], path: str):
    if not isinstance(value, str):
        return fail("string")

    if _URL.match(value) is None:
        return fail("url", value)
    return True


def check_function(value: Any, definition: Mapping[str, Any], path: str):
    if not callable(value):
        return fail("function")
    return True


__all__ = [
    "check_any",
    "check_date",
    "check_email",
    "check_function",
    "check_url",
]
