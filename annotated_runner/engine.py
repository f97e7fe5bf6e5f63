"""Test engine executing discovered test methods case by case."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from annotated_runner.coercion import coerce
from annotated_runner.comparator import render_value, values_match
from annotated_runner.discovery import discover_tests
from annotated_runner.models.descriptor import TestCase, TestDescriptor
from annotated_runner.models.result import (
    CaseResult,
    DescriptorResult,
    Outcome,
    RunReport,
    RunSummary,
)
from annotated_runner.subject_loading import instantiate_subject, load_subject_class

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class TestEngine:
    """Runs descriptors sequentially against their shared subject instance."""

    __test__ = False

    def run(self, descriptors: Sequence[TestDescriptor]) -> RunReport:
        """Run every case of every descriptor and aggregate the outcomes.

        Descriptors run in the given order and cases in parameter order. A
        fault in one case is recorded as ERROR and never stops the run.

        Args:
            descriptors: Descriptors as returned by discovery

        Returns:
            Per-descriptor case results and the run summary

        """
        if not descriptors:
            log.info("No test methods to run")
            return RunReport(results=[], summary=RunSummary())

        log.info("Running %d test method(s)...", len(descriptors))
        results = [self._run_descriptor(descriptor) for descriptor in descriptors]

        summary = RunSummary.from_results(
            case for result in results for case in result.cases
        )
        log.info(
            "Run completed: passed=%d failed=%d errors=%d",
            summary.passed,
            summary.failed,
            summary.errors,
        )
        return RunReport(results=results, summary=summary)

    def _run_descriptor(self, descriptor: TestDescriptor) -> DescriptorResult:
        """Run all cases of one test method."""
        log.debug(
            "Running %s (%d case(s))", descriptor.name, descriptor.case_count
        )
        cases = [self._run_case(descriptor, case) for case in descriptor.to_cases()]
        return DescriptorResult(name=descriptor.name, cases=cases)

    def _run_case(self, descriptor: TestDescriptor, case: TestCase) -> CaseResult:
        """Invoke the method once and classify the outcome."""
        try:
            if case.param is not None and descriptor.accepts_param:
                argument = coerce(case.param, descriptor.param_kind)
                actual = descriptor.method(argument)
            else:
                actual = descriptor.method()
        except Exception as e:
            log.debug(
                "Case %s[%d] raised %s", descriptor.name, case.index, e, exc_info=e
            )
            return CaseResult(
                descriptor=descriptor.name,
                index=case.index,
                outcome=Outcome.ERROR,
                param=case.param,
                expected=case.expected,
                error_type=type(e).__name__,
                error_message=str(e),
            )

        matched = values_match(actual, case.expected, descriptor.marker.tolerance)
        result = CaseResult(
            descriptor=descriptor.name,
            index=case.index,
            outcome=Outcome.PASS if matched else Outcome.FAIL,
            param=case.param,
            expected=case.expected,
            actual=render_value(actual),
        )
        log.debug("Case %s[%d]: %s", descriptor.name, case.index, result.outcome)
        return result


def discover_subject(subject: str) -> Sequence[TestDescriptor]:
    """Load and instantiate the named subject class, then discover its tests.

    Raises:
        SubjectNotFoundError: If the subject identifier cannot be resolved
        InstantiationError: If the subject cannot be built without arguments

    """
    subject_cls = load_subject_class(subject)
    instance = instantiate_subject(subject_cls)

    descriptors = discover_tests(instance)
    if not descriptors:
        log.info("No test methods discovered in %s", subject)
    return descriptors


def run_subject(subject: str, engine: TestEngine | None = None) -> RunReport:
    """Test the named subject class from start to finish.

    Only configuration faults escape; test faults are part of the report.
    """
    return (engine or TestEngine()).run(discover_subject(subject))
