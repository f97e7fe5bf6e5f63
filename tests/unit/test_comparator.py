"""Tests for result comparison."""

from decimal import Decimal
from fractions import Fraction
from typing import Any

import pytest

from annotated_runner.comparator import is_numeric, render_value, values_match


@pytest.mark.parametrize(
    ("value", "rendered"),
    [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (25, "25"),
        (3.14, "3.14"),
        ("HELLO", "HELLO"),
    ],
)
def test_render_value(value: Any, rendered: str) -> None:
    """Renders values to their canonical text."""
    assert render_value(value) == rendered


def test_missing_expectation_always_matches() -> None:
    """No expected literal accepts any value, including None."""
    assert values_match(None, None)
    assert values_match(999, None)
    assert values_match("anything", None)


@pytest.mark.parametrize(
    ("actual", "expected"),
    [
        (25, "25"),
        ("HELLO", "HELLO"),
        (False, "false"),
        (True, "true"),
        (3.14, "3.14"),
    ],
)
def test_exact_text_match(actual: Any, expected: str) -> None:
    """Canonical text equal to the literal matches regardless of type."""
    assert values_match(actual, expected)


def test_none_matches_only_null_literal() -> None:
    """None matches the literal "null" and nothing else."""
    assert values_match(None, "null")
    assert not values_match(None, "None")
    assert not values_match(None, "0")


@pytest.mark.parametrize(
    ("actual", "expected", "tolerance"),
    [
        (3.14, "3.14", 0.01),
        (3.141, "3.14", 0.01),
        (2.72, "2.71828", 0.01),
        (25, "25.0", 0.0),
        (10, "10.5", 0.5),
        (Fraction(1, 2), "0.5", 0.0),
    ],
)
def test_numeric_within_tolerance(actual: Any, expected: str, tolerance: float) -> None:
    """Numeric values within tolerance of the parsed literal match."""
    assert values_match(actual, expected, tolerance)


@pytest.mark.parametrize(
    ("actual", "expected", "tolerance"),
    [
        (25, "999", 0.0),
        (3.2, "3.14", 0.01),
        (10, "10.5", 0.4),
        (25, "twenty-five", 100.0),
        (float("nan"), "0", 1.0),
    ],
)
def test_numeric_outside_tolerance(
    actual: Any, expected: str, tolerance: float
) -> None:
    """Numeric values beyond tolerance or with unparsable literals fail."""
    assert not values_match(actual, expected, tolerance)


def test_text_does_not_use_tolerance() -> None:
    """Text results are compared exactly even when they look numeric."""
    assert not values_match("3.14", "3.15", 1.0)


def test_booleans_are_not_numeric() -> None:
    """Booleans never fall back to numeric comparison."""
    assert not is_numeric(True)
    assert not values_match(True, "1", 1.0)


def test_decimal_uses_tolerance() -> None:
    """Decimal values fall back to numeric comparison like other numbers."""
    assert is_numeric(Decimal("1.5"))
    assert values_match(Decimal("1.5"), "1.5")
    assert values_match(Decimal("3.141"), "3.14", 0.01)
    assert not values_match(Decimal("3.2"), "3.14", 0.01)
    assert not values_match(Decimal("sNaN"), "0", 1.0)


def test_huge_integer_does_not_raise() -> None:
    """Integers too large for float simply fail the numeric comparison."""
    assert not values_match(10**400, "1e308", 0.0)
