"""CLI entry point for running marked tests of a class."""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from annotated_runner.config import RunConfig
from annotated_runner.engine import TestEngine, discover_subject
from annotated_runner.models.descriptor import TestDescriptor
from annotated_runner.models.result import Outcome, RunReport
from annotated_runner.subject_loading import ConfigurationError

EXIT_OK = 0
EXIT_TEST_FAILURES = 1
EXIT_CONFIGURATION_ERROR = 2

STATUS_SYMBOLS = {
    Outcome.PASS: "✓",
    Outcome.FAIL: "✗",
    Outcome.ERROR: "⚠",
}


def log_discovery_overview(
    log: logging.Logger, descriptors: Sequence[TestDescriptor]
) -> None:
    """Log the discovered test methods and their case counts."""
    log.info("Found %d test method(s):", len(descriptors))
    for position, descriptor in enumerate(descriptors, start=1):
        log.info(
            "  %d. %s → %d test case(s)",
            position,
            descriptor.name,
            descriptor.case_count,
        )


def log_results_summary(log: logging.Logger, report: RunReport) -> None:
    """Log every case outcome followed by the aggregate counts."""
    log.info("=" * 70)
    log.info("Test Results:")
    log.info("=" * 70)

    for descriptor_result in report.results:
        log.info("▶ Test: %s", descriptor_result.name)
        for case in descriptor_result.cases:
            log.info("  %s %s", STATUS_SYMBOLS[case.outcome], case.description)

    summary = report.summary
    log.info("=" * 70)
    log.info("Results Summary:")
    log.info("Total executed: %d", summary.total)
    log.info("  %s PASSED:  %d", STATUS_SYMBOLS[Outcome.PASS], summary.passed)
    log.info("  %s FAILED:  %d", STATUS_SYMBOLS[Outcome.FAIL], summary.failed)
    log.info("  %s ERRORS:  %d", STATUS_SYMBOLS[Outcome.ERROR], summary.errors)
    log.info("Success rate: %.1f%%", summary.success_rate)
    log.info("=" * 70)

    if summary.all_passed:
        log.info("All tests passed successfully!")
    elif summary.errors:
        log.info("Some tests encountered errors.")


def format_output(report: RunReport) -> dict[str, Any]:
    """Format a run report for JSON output."""
    all_results: list[dict[str, Any]] = []
    for case in report.cases:
        all_results.append(
            {
                "test": case.descriptor,
                "index": case.index,
                "status": str(case.outcome),
                "param": case.param,
                "expected": case.expected,
                "actual": case.actual,
                "error": (
                    f"{case.error_type}: {case.error_message}"
                    if case.outcome is Outcome.ERROR
                    else None
                ),
            }
        )

    summary = report.summary
    return {
        "total": summary.total,
        "passed": summary.passed,
        "failed": summary.failed,
        "errors": summary.errors,
        "success_rate": round(summary.success_rate, 1),
        "tests": {result.name: len(result.cases) for result in report.results},
        "results": all_results,
    }


def run(config: RunConfig) -> int:
    """Run the marked tests of the configured subject and return exit code."""
    log = logging.getLogger("annotated_runner")

    log.info("Class under test: %s", config.subject)
    try:
        descriptors = discover_subject(config.subject)
    except ConfigurationError as e:
        log.error("Unable to create test subject: %s", e)
        return EXIT_CONFIGURATION_ERROR

    if not descriptors:
        log.info("No test methods discovered in class.")
        print(json.dumps({"total": 0, "results": []}))
        return EXIT_OK

    log_discovery_overview(log, descriptors)

    report = TestEngine().run(descriptors)

    log_results_summary(log, report)
    print(json.dumps(format_output(report), indent=2))

    return EXIT_OK if report.summary.all_passed else EXIT_TEST_FAILURES


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run the marked test methods of a class"
    )
    parser.add_argument(
        "subject",
        help=(
            "Class under test: a registered suite key, "
            "package.module:ClassName or package.module.ClassName"
        ),
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    args = parser.parse_args()

    try:
        config = RunConfig(subject=args.subject, log_level=args.log_level)
    except ValidationError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    sys.exit(run(config))


if __name__ == "__main__":  # pragma: no cover
    main()
