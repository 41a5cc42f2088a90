# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Nested Schema Demo: Compile Once, Check Many.

This demo compiles a nested schema once and reuses the checker for several
payloads, showing flattened violation paths, a custom rule and a custom
message.

Run with:
    python examples/nested_schema_demo.py
"""

from shapecheck import UnknownRuleError, Validator, fail, format_violations


ORDER_SCHEMA = {
    "id": {"type": "number", "positive": True, "integer": True},
    "customer": {"type": "object", "props": {
        "name": {"type": "string", "min": 2},
        "email": {"type": "email"},
    }},
    "lines": {"type": "array", "empty": False, "items": {
        "type": "object", "props": {
            "sku": {"type": "sku"},
            "qty": {"type": "number", "min": 1},
        },
    }},
    "coupon": {"type": "string", "optional": True},
    "internal_note": {"type": "forbidden"},
}


def check_sku(value, definition, path):
    """Custom rule: SKUs look like ``ABC-123``."""
    if not isinstance(value, str) or len(value) != 7 or value[3] != "-":
        return fail("sku", value)
    return True


def demo_valid_and_invalid_orders(validator: Validator):
    print("\n" + "=" * 70)
    print("DEMO 1: One compiled checker, many payloads")
    print("=" * 70)

    check = validator.compile(ORDER_SCHEMA)

    good = {
        "id": 1001,
        "customer": {"name": "Ada", "email": "ada@example.com"},
        "lines": [{"sku": "ABC-123", "qty": 2}],
    }
    print(f"\n  Valid order -> {check(good)}")

    bad = {
        "id": 0,
        "customer": {"name": "A", "email": "not-an-email"},
        "lines": [{"sku": "ABC-123", "qty": 2}, {"sku": "nope", "qty": 0}],
        "internal_note": "ship first",
    }
    print("\n  Invalid order:")
    print("    " + format_violations(check(bad)).replace("\n", "\n    "))


def demo_unknown_type():
    print("\n" + "=" * 70)
    print("DEMO 2: Unknown types fail at compile time")
    print("=" * 70)

    try:
        Validator().compile({"price": {"type": "money"}})
        print("  Result: FAIL - schema compiled (should have been rejected)")
    except UnknownRuleError as e:
        print("  Result: SUCCESS - schema rejected before any data was checked")
        print(f"    {e}")


if __name__ == "__main__":
    v = Validator(messages={"sku": "The '{name}' field must be a SKU like ABC-123, got '{0}'!"})
    v.add("sku", check_sku)

    demo_valid_and_invalid_orders(v)
    demo_unknown_type()
