# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for the rule registry and custom rule outcomes."""

from unittest.mock import Mock

import pytest

from shapecheck import BUILTIN_RULES, RuleFailure, RuleRegistry, Validator, fail


def test_registry_with_defaults_holds_every_builtin():
    registry = RuleRegistry.with_defaults()
    for name in ("string", "number", "boolean", "array", "object", "forbidden"):
        assert name in registry
    assert set(registry) == set(BUILTIN_RULES)
    assert len(registry) == len(BUILTIN_RULES)


def test_add_inserts_and_overwrites():
    registry = RuleRegistry()
    first, second = Mock(), Mock()

    assert registry.add("even", first) is None
    assert registry["even"] is first

    registry.add("even", second)
    assert registry["even"] is second


def test_registries_are_independent():
    a, b = Validator(), Validator()
    a.add("myValidator", Mock(return_value=True))

    assert "myValidator" in a.rules
    assert "myValidator" not in b.rules
    assert "myValidator" not in BUILTIN_RULES


def test_registry_supports_mapping_protocol():
    registry = RuleRegistry({"x": Mock()})
    assert registry.get("missing") is None
    del registry["x"]
    assert "x" not in registry
    assert "RuleRegistry" in repr(registry)


def test_new_validator_is_called_with_value_definition_path():
    v = Validator()
    valid_fn = Mock(return_value=True)
    assert v.rules.get("myValidator") is None

    v.add("myValidator", valid_fn)
    schema = {"a": {"type": "myValidator"}}
    assert v.validate({"a": 5}, schema) is True

    valid_fn.assert_called_once_with(5, schema["a"], "a")


def test_builtin_rule_can_be_overridden():
    v = Validator()
    v.add("string", lambda value, definition, path: True)
    assert v.validate({"name": 42}, {"name": "string"}) is True


# ------------------------------------------------------------------
# Custom rule outcomes
# ------------------------------------------------------------------


def _run(outcome):
    v = Validator(messages={"even": "{name} must be even, got {0}"})
    v.add("even", lambda value, definition, path: outcome(value))
    return v.validate({"n": 3}, {"n": "even"})


def test_rule_failure_outcome():
    [violation] = _run(lambda value: fail("even", value))
    assert violation.type == "even"
    assert violation.args == [3]
    assert violation.message == "n must be even, got 3"


def test_false_outcome_reports_the_rule_tag():
    [violation] = _run(lambda value: False)
    assert violation.type == "even"
    assert violation.args == []
    assert violation.message == "n must be even, got {0}"


def test_list_outcome_reports_each_failure_in_order():
    res = _run(lambda value: [fail("even", value), RuleFailure("numberMin", (10, value))])
    assert [v.type for v in res] == ["even", "numberMin"]
    assert res[1].message == "The 'n' field must be larger than or equal to 10!"


def test_empty_list_outcome_is_success():
    assert _run(lambda value: []) is True


def test_mapping_failure_descriptor():
    [violation] = _run(lambda value: [{"type": "even", "args": [value]}])
    assert violation.args == [3]


def test_failure_without_template_has_no_message():
    [violation] = _run(lambda value: fail("oddity"))
    assert violation.type == "oddity"
    assert violation.message is None


def test_exceptions_from_custom_rules_propagate():
    v = Validator()

    def broken(value, definition, path):
        raise RuntimeError("bug in rule")

    v.add("broken", broken)
    check = v.compile({"a": "broken"})
    with pytest.raises(RuntimeError, match="bug in rule"):
        check({"a": 1})
