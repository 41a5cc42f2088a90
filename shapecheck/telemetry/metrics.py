# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for shapecheck."""

from __future__ import annotations

import time
from typing import Any

from .runtime import meter, telemetry_enabled

schema_compile_total = meter.create_counter(
    name="shapecheck.schema.compile.total",
    description="Counts schema compilations, partitioned by outcome and root shape.",
    unit="1",
)

schema_compile_latency_ms = meter.create_histogram(
    name="shapecheck.schema.compile.latency.ms",
    description="Time taken to compile a schema into a checker.",
    unit="ms",
)

validate_total = meter.create_counter(
    name="shapecheck.validate.total",
    description="Counts one-shot validations run through the facade.",
    unit="1",
)

violation_total = meter.create_counter(
    name="shapecheck.violation.total",
    description="Counts violations reported by one-shot validations, by rule type.",
    unit="1",
)


def root_kind(schema: Any) -> str:
    return "array" if isinstance(schema, (list, tuple)) else "object"


def record_compile_metrics(schema: Any, status: str, started_at: float) -> None:
    """Record latency and outcome of one compilation.

    Args:
        schema: The root schema that was compiled
        status: "ok" or "error"
        started_at: Timestamp from time.perf_counter() when compilation started
    """
    if not telemetry_enabled():
        return

    duration_ms = (time.perf_counter() - started_at) * 1000.0
    attributes = {"status": status, "root": root_kind(schema)}
    schema_compile_latency_ms.record(duration_ms, attributes)
    schema_compile_total.add(1, attributes)


def record_validation_metrics(result: Any) -> None:
    """Record the outcome of one validation and its violations by type."""

    if not telemetry_enabled():
        return

    if result is True:
        validate_total.add(1, {"status": "valid"})
        return

    validate_total.add(1, {"status": "invalid"})
    for violation in result:
        violation_total.add(1, {"type": violation.type})


__all__ = [
    "schema_compile_total",
    "schema_compile_latency_ms",
    "validate_total",
    "violation_total",
    "record_compile_metrics",
    "record_validation_metrics",
]
