"""Comparison of a test method's return value against an expected literal."""

import numbers
from decimal import Decimal
from typing import Any

NULL_LITERAL = "null"


def render_value(value: Any) -> str:
    """Render a value to the canonical text compared against expected literals."""
    if value is None:
        return NULL_LITERAL
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def is_numeric(value: Any) -> bool:
    """Check if a value takes part in tolerance comparison (booleans do not)."""
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def values_match(actual: Any, expected: str | None, tolerance: float = 0.0) -> bool:
    """Decide whether an actual value satisfies an expected literal.

    A missing expectation accepts any value. Otherwise the canonical text of
    the value must equal the literal exactly, or, for numeric values, the
    literal must parse as a float within ``tolerance`` of the value. ``None``
    only matches the literal ``"null"``.
    """
    if expected is None:
        return True

    if actual is None:
        return expected == NULL_LITERAL

    if render_value(actual) == expected:
        return True

    if not is_numeric(actual):
        return False

    try:
        return abs(float(actual) - float(expected)) <= tolerance
    except (OverflowError, ValueError):
        return False
