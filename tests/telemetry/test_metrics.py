# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for telemetry recording in the Validator facade."""

import pytest

from shapecheck import Validator
from shapecheck.exceptions import UnknownRuleError
from shapecheck.telemetry import telemetry_enabled


def test_compile_records_success(metric_spies):
    Validator().compile([{"type": "array", "items": "number"}])

    [(amount, attributes)] = metric_spies["schema_compile_total"].calls
    assert amount == 1
    assert attributes == {"status": "ok", "root": "array"}
    [(latency, _)] = metric_spies["schema_compile_latency_ms"].calls
    assert latency >= 0


def test_compile_records_failure(metric_spies):
    with pytest.raises(UnknownRuleError):
        Validator().compile({"a": "nope"})

    [(_, attributes)] = metric_spies["schema_compile_total"].calls
    assert attributes == {"status": "error", "root": "object"}


def test_validate_records_outcome_and_violation_types(metric_spies):
    v = Validator()
    v.validate({"a": 1}, {"a": "number"})
    v.validate({"b": "x"}, {"a": "number", "b": "number"})

    statuses = [attrs["status"] for _, attrs in metric_spies["validate_total"].calls]
    assert statuses == ["valid", "invalid"]
    types = [attrs["type"] for _, attrs in metric_spies["violation_total"].calls]
    assert types == ["required", "number"]


def test_compiled_checkers_record_nothing(metric_spies):
    check = Validator().compile({"a": "number"})
    metric_spies["schema_compile_total"].calls.clear()

    check({"a": "x"})

    assert metric_spies["validate_total"].calls == []
    assert metric_spies["violation_total"].calls == []


@pytest.mark.parametrize("value", ["0", "false", "no", "", "FALSE"])
def test_telemetry_switch_disables_recording(metric_spies, monkeypatch, value):
    monkeypatch.setenv("SHAPECHECK_TELEMETRY", value)
    assert telemetry_enabled() is False

    Validator().validate({}, {"a": "number"})

    assert metric_spies["schema_compile_total"].calls == []
    assert metric_spies["validate_total"].calls == []


def test_telemetry_enabled_by_default(monkeypatch):
    monkeypatch.delenv("SHAPECHECK_TELEMETRY", raising=False)
    assert telemetry_enabled() is True
