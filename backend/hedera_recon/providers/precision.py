"""Exact rendering of nanosecond timestamps in indexer payloads.

Nanosecond timestamps (~1.7e18) exceed the range a double can represent
exactly (2**53 - 1). Clients that decode JSON numbers as doubles would lose
digits, and some encoders switch to exponential notation for them. Rendering
such values as integer strings keeps every digit for any consumer.
"""

from decimal import Decimal
from typing import Any

MAX_SAFE_INTEGER = 2**53 - 1

PRECISION_FIELDS = frozenset({"consensus_timestamp", "valid_start_ns"})


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def needs_exact_rendering(value: int | float | Decimal) -> bool:
    """True if the value is outside the exact-integer range or prints in exponent form."""
    return abs(value) > MAX_SAFE_INTEGER or "e" in str(value).lower()


def to_exact_integer_string(value: int | float | Decimal) -> str:
    """Render a numeric value as an integer string without exponent."""
    if isinstance(value, int):
        return str(value)
    # Decimal(float) is exact, so no digits beyond the float's own are invented
    return format(Decimal(value).to_integral_value(), "f")


def fix_precision(payload: Any) -> Any:
    """Walk a decoded JSON tree and re-render large timestamp fields as strings.

    Only keys in PRECISION_FIELDS with numeric values are touched. Returns a
    new tree; the input is not modified.
    """
    if isinstance(payload, dict):
        fixed = {}
        for key, value in payload.items():
            if key in PRECISION_FIELDS and _is_number(value):
                if needs_exact_rendering(value):
                    value = to_exact_integer_string(value)
                fixed[key] = value
            else:
                fixed[key] = fix_precision(value)
        return fixed
    if isinstance(payload, list):
        return [fix_precision(item) for item in payload]
    return payload
