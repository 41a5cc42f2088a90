"""Shared fixtures for the shapecheck test-suite."""
from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pytest

from shapecheck import Validator


# ---------------------------------------------------------------------------
# 1. Global, reusable fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def validator() -> Validator:  # noqa: D401
    """Return a fresh validator with default rules and messages."""
    return Validator()


class _InstrumentSpy:
    """Records ``add``/``record`` calls instead of exporting them."""

    def __init__(self) -> None:
        self.calls: List[Tuple[Any, Dict[str, Any]]] = []

    def add(self, amount: Any, attributes: Dict[str, Any] | None = None) -> None:
        self.calls.append((amount, dict(attributes or {})))

    def record(self, amount: Any, attributes: Dict[str, Any] | None = None) -> None:
        self.calls.append((amount, dict(attributes or {})))


@pytest.fixture()
def metric_spies(monkeypatch):  # noqa: D401
    """Swap every shapecheck instrument for a spy and return them by name."""
    import shapecheck.telemetry.metrics as _metrics

    spies = {}
    for name in (
        "schema_compile_total",
        "schema_compile_latency_ms",
        "validate_total",
        "violation_total",
    ):
        spy = _InstrumentSpy()
        monkeypatch.setattr(_metrics, name, spy)
        spies[name] = spy

    monkeypatch.setenv("SHAPECHECK_TELEMETRY", "1")
    return spies


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield
