"""Models for test case outcomes and run aggregates."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum


class Outcome(StrEnum):
    """Classification of a single test case."""

    PASS = "pass"
    FAIL = "fail"
    ERROR = "error"


@dataclass(frozen=True, kw_only=True)
class CaseResult:
    """Outcome of one invocation of a test method.

    ``actual`` holds the rendered return value for PASS and FAIL; for ERROR the
    raised exception is described by ``error_type`` and ``error_message``.
    """

    descriptor: str
    index: int
    outcome: Outcome
    param: str | None = None
    expected: str | None = None
    actual: str | None = None
    error_type: str | None = None
    error_message: str | None = None

    @property
    def description(self) -> str:
        """Human-readable one-line description of the case outcome."""
        param_info = f" [param: {self.param}]" if self.param is not None else ""
        match self.outcome:
            case Outcome.PASS if self.expected is None:
                return f"PASS{param_info} (no expected result defined)"
            case Outcome.PASS:
                return f"PASS{param_info} → result: {self.actual}"
            case Outcome.FAIL:
                return (
                    f"FAIL{param_info} → expected: {self.expected}, "
                    f"got: {self.actual}"
                )
            case _:
                return f"ERROR{param_info} → {self.error_type}: {self.error_message}"


@dataclass(frozen=True, kw_only=True)
class DescriptorResult:
    """Results of all cases of one test method, in case order."""

    name: str
    cases: Sequence[CaseResult]


@dataclass(frozen=True, kw_only=True)
class RunSummary:
    """Aggregate outcome counts of one run."""

    passed: int = 0
    failed: int = 0
    errors: int = 0

    @classmethod
    def from_results(cls, cases: Iterable[CaseResult]) -> "RunSummary":
        """Count outcomes across the given cases."""
        outcomes = [case.outcome for case in cases]
        return cls(
            passed=outcomes.count(Outcome.PASS),
            failed=outcomes.count(Outcome.FAIL),
            errors=outcomes.count(Outcome.ERROR),
        )

    @property
    def total(self) -> int:
        return self.passed + self.failed + self.errors

    @property
    def success_rate(self) -> float:
        """Percentage of passed cases (0.0 for an empty run)."""
        if not self.total:
            return 0.0
        return self.passed * 100.0 / self.total

    @property
    def all_passed(self) -> bool:
        return self.failed == 0 and self.errors == 0


@dataclass(frozen=True, kw_only=True)
class RunReport:
    """Everything one run produced: per-method results and the summary."""

    results: Sequence[DescriptorResult]
    summary: RunSummary

    @property
    def cases(self) -> Sequence[CaseResult]:
        """All case results flattened in execution order."""
        return [case for result in self.results for case in result.cases]
