"""CLI entry point for the endpoint verification harness."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

from pydantic import ValidationError

from endpoint_harness.definition_loader import (
    load_definition_file,
    register_definitions,
)
from endpoint_harness.errors import ConfigurationError
from endpoint_harness.harness import VerificationHarness
from endpoint_harness.http import AiohttpClient, HttpClient
from endpoint_harness.models.config import DEFAULT_CHECK_TIMEOUT, HarnessConfig
from endpoint_harness.models.result import RunReport
from endpoint_harness.report import format_output, format_report, log_report_summary
from endpoint_harness.suites.loading import load_suite_manifest

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIGURATION_ERROR = 2


def parse_headers(values: Sequence[str]) -> Mapping[str, str]:
    """Parse ``Name=value`` pairs given on the command line."""
    headers: dict[str, str] = {}
    for value in values:
        name, sep, header_value = value.partition("=")
        if not sep or not name.strip():
            raise ConfigurationError(f"Invalid header '{value}', expected NAME=VALUE")
        headers[name.strip()] = header_value.strip()
    return headers


async def build_harness(
    config: HarnessConfig,
    client: HttpClient,
    suite_key: str | None,
    suite_config_json: str,
    definitions_path: Path | None,
) -> VerificationHarness:
    """Create a harness and register the suite and file-defined checks."""
    log = logging.getLogger("endpoint_harness")
    harness = VerificationHarness(config, client)

    if suite_key:
        log.info("Loading suite: %s", suite_key)
        manifest = load_suite_manifest(suite_key)
        try:
            suite_config = manifest.config_cls(**json.loads(suite_config_json))
        except (ValueError, TypeError, ValidationError) as e:
            raise ConfigurationError(
                f"Invalid configuration for suite '{suite_key}': {e}"
            ) from e
        manifest.register_checks(harness, suite_config)

    if definitions_path is not None:
        log.info("Loading check definitions from %s", definitions_path)
        try:
            definitions = await load_definition_file(definitions_path)
        except (FileNotFoundError, ValueError) as e:
            raise ConfigurationError(str(e)) from e
        register_definitions(harness, definitions)

    if not harness.checks:
        raise ConfigurationError("No checks registered, use --suite or --definitions")

    return harness


async def run(
    base_url: str,
    suite_key: str | None = None,
    suite_config_json: str = "{}",
    definitions_path: Path | None = None,
    headers: Mapping[str, str] | None = None,
    check_timeout: float = DEFAULT_CHECK_TIMEOUT,
    run_timeout: float | None = None,
    output: str = "text",
) -> int:
    """Run the configured checks and return exit code."""
    log = logging.getLogger("endpoint_harness")

    try:
        config = HarnessConfig.build(base_url, headers, check_timeout)
        if run_timeout is not None and run_timeout <= 0:
            raise ConfigurationError(
                f"Run timeout must be greater than 0, got {run_timeout}"
            )
    except ConfigurationError as e:
        log.error("Configuration error: %s", e)
        return EXIT_CONFIGURATION_ERROR

    async with AiohttpClient.open() as client:
        try:
            harness = await build_harness(
                config, client, suite_key, suite_config_json, definitions_path
            )
        except ConfigurationError as e:
            log.error("Configuration error: %s", e)
            return EXIT_CONFIGURATION_ERROR

        log.info("Running %d check(s)...", len(harness.checks))
        timed_out = False
        try:
            async with asyncio.timeout(run_timeout):
                report = await harness.run()
        except TimeoutError:
            log.error("Run did not complete within %s seconds", run_timeout)
            timed_out = True
            report = harness.report

    emit_report(log, report, output, registered=len(harness.checks))

    if timed_out or not report.succeeded:
        return EXIT_FAILED
    return EXIT_OK


def emit_report(
    log: logging.Logger,
    report: RunReport,
    output: str,
    registered: int | None = None,
) -> None:
    """Log the summary and print the report to stdout."""
    log_report_summary(log, report, registered)
    if output == "json":
        print(json.dumps(format_output(report, registered), indent=2))
    else:
        print(format_report(report, registered))


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Verify that HTTP API endpoints are reachable and behave"
    )
    parser.add_argument(
        "--base-url",
        required=True,
        help="Absolute URL prefix of the API (e.g. http://localhost:5000/api)",
    )
    parser.add_argument(
        "--suite",
        default=None,
        help="Suite key (escrow-setup, escrow-endpoints)",
    )
    parser.add_argument(
        "--suite-config",
        default="{}",
        help="JSON configuration for the suite",
    )
    parser.add_argument(
        "--definitions",
        type=Path,
        default=None,
        help="Path to a YAML file with declarative checks",
    )
    parser.add_argument(
        "--header",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Header sent with every request, may be repeated",
    )
    parser.add_argument(
        "--check-timeout",
        type=float,
        default=DEFAULT_CHECK_TIMEOUT,
        help="Seconds a single check may take (default: %(default)s)",
    )
    parser.add_argument(
        "--run-timeout",
        type=float,
        default=None,
        help="Seconds the whole run may take, the partial report is still printed",
    )
    parser.add_argument(
        "--output",
        choices=("text", "json"),
        default="text",
        help="Report format written to stdout",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        headers = parse_headers(args.header)
    except ConfigurationError as e:
        logging.getLogger("endpoint_harness").error("Configuration error: %s", e)
        sys.exit(EXIT_CONFIGURATION_ERROR)

    exit_code = asyncio.run(
        run(
            base_url=args.base_url,
            suite_key=args.suite,
            suite_config_json=args.suite_config,
            definitions_path=args.definitions,
            headers=headers,
            check_timeout=args.check_timeout,
            run_timeout=args.run_timeout,
            output=args.output,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
