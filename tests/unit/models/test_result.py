"""Tests for outcome records and run summaries."""

import pytest

from annotated_runner.models.result import (
    CaseResult,
    DescriptorResult,
    Outcome,
    RunReport,
    RunSummary,
)
from annotated_runner.testing.factories import CaseResultFactory


def test_summary_counts_outcomes() -> None:
    """Counts each outcome across all cases."""
    cases = [
        CaseResultFactory.build(outcome=Outcome.PASS),
        CaseResultFactory.build(outcome=Outcome.PASS),
        CaseResultFactory.build(outcome=Outcome.FAIL),
        CaseResultFactory.build(outcome=Outcome.ERROR),
    ]

    summary = RunSummary.from_results(cases)

    assert summary == RunSummary(passed=2, failed=1, errors=1)
    assert summary.total == 4
    assert summary.success_rate == pytest.approx(50.0)
    assert not summary.all_passed


def test_empty_summary() -> None:
    """Empty run has zero totals and a zero success rate."""
    summary = RunSummary.from_results([])

    assert summary.total == 0
    assert summary.success_rate == 0.0
    assert summary.all_passed


def test_report_flattens_cases_in_order() -> None:
    """Report lists cases in descriptor order, then case order."""
    first = CaseResultFactory.build(descriptor="a", index=0)
    second = CaseResultFactory.build(descriptor="a", index=1)
    third = CaseResultFactory.build(descriptor="b", index=0)
    report = RunReport(
        results=[
            DescriptorResult(name="a", cases=[first, second]),
            DescriptorResult(name="b", cases=[third]),
        ],
        summary=RunSummary.from_results([first, second, third]),
    )

    assert report.cases == [first, second, third]


@pytest.mark.parametrize(
    ("case", "description"),
    [
        (
            CaseResult(descriptor="t", index=0, outcome=Outcome.PASS),
            "PASS (no expected result defined)",
        ),
        (
            CaseResult(
                descriptor="t", index=0, outcome=Outcome.PASS, param="x", actual="y"
            ),
            "PASS [param: x] (no expected result defined)",
        ),
        (
            CaseResult(
                descriptor="t",
                index=0,
                outcome=Outcome.PASS,
                param="5",
                expected="25",
                actual="25",
            ),
            "PASS [param: 5] → result: 25",
        ),
        (
            CaseResult(
                descriptor="t",
                index=1,
                outcome=Outcome.FAIL,
                param="5",
                expected="999",
                actual="25",
            ),
            "FAIL [param: 5] → expected: 999, got: 25",
        ),
        (
            CaseResult(
                descriptor="t",
                index=0,
                outcome=Outcome.ERROR,
                error_type="ZeroDivisionError",
                error_message="integer division or modulo by zero",
            ),
            "ERROR → ZeroDivisionError: integer division or modulo by zero",
        ),
    ],
)
def test_case_description(case: CaseResult, description: str) -> None:
    """Describes each outcome on one line."""
    assert case.description == description
