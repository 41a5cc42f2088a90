"""Telemetry package - OpenTelemetry metrics and tracing hooks."""

from .metrics import (
    record_compile_metrics,
    record_validation_metrics,
    schema_compile_latency_ms,
    schema_compile_total,
    validate_total,
    violation_total,
)
from .runtime import get_tracer, meter, start_span, telemetry_enabled

__all__ = [
    "get_tracer",
    "meter",
    "record_compile_metrics",
    "record_validation_metrics",
    "schema_compile_latency_ms",
    "schema_compile_total",
    "start_span",
    "telemetry_enabled",
    "validate_total",
    "violation_total",
]
