"""Rendering of run reports. Everything here is a pure function of the report."""

import logging
from typing import Any

from endpoint_harness.models.result import CheckResult, RunReport

STATUS_SYMBOLS = {
    True: "✓",
    False: "✗",
}


def format_result_line(result: CheckResult) -> str:
    """Render one check as ``<symbol> <name>: passed|failed - <detail>``."""
    verdict = "passed" if result.passed else "failed"
    line = f"{STATUS_SYMBOLS[result.passed]} {result.name}: {verdict}"
    if result.outcome.detail:
        line = f"{line} - {result.outcome.detail}"
    if result.outcome.status_code is not None:
        line = f"{line} [HTTP {result.outcome.status_code}]"
    return line


def not_run_count(report: RunReport, registered: int | None) -> int:
    """Number of registered checks missing from a partial report."""
    if registered is None:
        return 0
    return max(registered - report.total_count, 0)


def format_report(report: RunReport, registered: int | None = None) -> str:
    """Render the human readable summary printed at the end of a run.

    When ``registered`` exceeds the number of results the run was cut short,
    and the checks that never ran are counted on a separate line.
    """
    lines = [format_result_line(result) for result in report.results]
    lines.append(f"Passed: {report.passed_count}/{report.total_count}")
    lines.append(
        f"Failed: {report.total_count - report.passed_count}/{report.total_count}"
    )
    if not_run := not_run_count(report, registered):
        lines.append(f"Not run: {not_run}/{registered}")
    return "\n".join(lines)


def format_output(
    report: RunReport, registered: int | None = None
) -> dict[str, Any]:
    """Format a report for JSON output."""
    results = [
        {
            "name": result.name,
            "passed": result.passed,
            "detail": result.outcome.detail,
            "status_code": result.outcome.status_code,
            "duration": result.duration,
        }
        for result in report.results
    ]

    not_run = not_run_count(report, registered)
    return {
        "total": report.total_count,
        "passed": report.passed_count,
        "failed": report.total_count - report.passed_count,
        "not_run": not_run,
        "succeeded": report.succeeded and not not_run,
        "results": results,
    }


def log_report_summary(
    log: logging.Logger, report: RunReport, registered: int | None = None
) -> None:
    """Log a formatted summary of check results."""
    log.info("=" * 80)
    log.info("Check Results Summary:")
    log.info("=" * 80)

    for result in report.results:
        log.info(
            "%s %s: %s (%.2fs)",
            STATUS_SYMBOLS[result.passed],
            result.name,
            "passed" if result.passed else "failed",
            result.duration,
        )
        if result.outcome.status_code is not None:
            log.info("  Status: %d", result.outcome.status_code)
        if result.outcome.detail:
            log.info("  Detail: %s", result.outcome.detail)

    log.info("Passed: %d/%d", report.passed_count, report.total_count)
    if not_run := not_run_count(report, registered):
        log.info("Not run: %d/%d", not_run, registered)
