# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OpenTelemetry meter/tracer handles and the telemetry switch.

Without an OpenTelemetry SDK configured by the host application the API
objects are no-ops, so instrumenting costs next to nothing.
"""

from __future__ import annotations

import contextlib
import os
from typing import Any, ContextManager

from opentelemetry import metrics, trace

from .._version import __version__

meter = metrics.get_meter("shapecheck", __version__)

_DISABLED_VALUES = ("", "0", "false", "no")


def telemetry_enabled() -> bool:
    """Return False when ``SHAPECHECK_TELEMETRY`` switches recording off."""

    return os.getenv("SHAPECHECK_TELEMETRY", "1").strip().lower() not in _DISABLED_VALUES


def get_tracer(name: str = "shapecheck") -> trace.Tracer:
    return trace.get_tracer(name, __version__)


def start_span(name: str, **attributes: Any) -> ContextManager[Any]:
    """Start a span, or a do-nothing context when telemetry is disabled."""

    if not telemetry_enabled():
        return contextlib.nullcontext()
    return get_tracer().start_as_current_span(name, attributes=attributes)


__all__ = ["get_tracer", "meter", "start_span", "telemetry_enabled"]
