"""Sequential runner for named endpoint checks."""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from endpoint_harness.errors import ConfigurationError, DuplicateCheckError
from endpoint_harness.http import HttpClient, HttpResponse
from endpoint_harness.models.config import HarnessConfig
from endpoint_harness.models.result import CheckResult, Outcome, RunReport

log = logging.getLogger(__name__)

TIMEOUT_DETAIL = "timeout"


@dataclass(frozen=True, kw_only=True)
class CheckContext:
    """What a check executor is given: the client and where to point it."""

    client: HttpClient = field(repr=False)
    base_url: str
    default_headers: Mapping[str, str] = field(default_factory=dict)

    def url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        """Send a request to ``path`` with the default headers merged in."""
        return await self.client.request(
            method,
            self.url(path),
            json=json,
            headers={**self.default_headers, **(headers or {})},
        )

    async def get(
        self, path: str, *, headers: Mapping[str, str] | None = None
    ) -> HttpResponse:
        return await self.request("GET", path, headers=headers)

    async def post(
        self,
        path: str,
        json: Any = None,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        return await self.request("POST", path, json=json, headers=headers)


type CheckExecutor = Callable[[CheckContext], Awaitable[Outcome]]


@dataclass(frozen=True, kw_only=True)
class Check:
    """A registered, named verification step."""

    name: str
    executor: CheckExecutor = field(repr=False)


class VerificationHarness:
    """Runs registered checks one after another and collects a report.

    Checks run strictly in registration order, so a check may rely on side
    effects of the checks before it. A failing, raising or hanging check
    only fails itself; the remaining checks still run.
    """

    def __init__(self, config: HarnessConfig, client: HttpClient) -> None:
        if not isinstance(config, HarnessConfig):
            raise ConfigurationError("Harness requires a HarnessConfig")

        self.config = config
        self.client = client
        self._checks: list[Check] = []
        self._results: list[CheckResult] = []

    @property
    def checks(self) -> Sequence[Check]:
        return tuple(self._checks)

    @property
    def report(self) -> RunReport:
        """Report of the current or most recent run, partial if it was cancelled."""
        return RunReport(results=tuple(self._results))

    def register_check(self, name: str, executor: CheckExecutor) -> None:
        """Append a check to the run order.

        Raises:
            ConfigurationError: If the name is empty
            DuplicateCheckError: If a check with this name is already registered

        """
        if not name or not name.strip():
            raise ConfigurationError("Check name must not be empty")
        if any(check.name == name for check in self._checks):
            raise DuplicateCheckError(f"Check '{name}' is already registered")

        self._checks.append(Check(name=name, executor=executor))

    async def run(self) -> RunReport:
        """Execute every registered check once and return the report.

        Individual check failures never raise. Cancelling the run stops it
        before the next check; the results gathered so far remain available
        through ``report``.
        """
        self._results = []
        context = CheckContext(
            client=self.client,
            base_url=self.config.base_url,
            default_headers=self.config.default_headers,
        )

        log.info(
            "Running %d check(s) against %s", len(self._checks), self.config.base_url
        )
        for check in self._checks:
            result = await self._run_check(check, context)
            self._results.append(result)

        report = self.report
        log.info(
            "Checks completed: %d/%d passed", report.passed_count, report.total_count
        )
        return report

    async def _run_check(self, check: Check, context: CheckContext) -> CheckResult:
        log.info("Running check %s", check.name)
        started = time.monotonic()

        try:
            async with asyncio.timeout(self.config.check_timeout):
                outcome = await check.executor(context)
            if not isinstance(outcome, Outcome):
                raise TypeError(
                    f"check returned {type(outcome).__name__}, expected Outcome"
                )
        except TimeoutError:
            log.warning(
                "Check %s timed out after %.1fs", check.name, self.config.check_timeout
            )
            outcome = Outcome(passed=False, detail=TIMEOUT_DETAIL)
        except Exception as e:
            log.warning("Check %s raised: %s", check.name, e, exc_info=e)
            outcome = Outcome(passed=False, detail=str(e) or type(e).__name__)

        duration = time.monotonic() - started
        log.info(
            "Check completed: name=%s passed=%s duration=%.2fs",
            check.name,
            outcome.passed,
            duration,
        )
        return CheckResult(name=check.name, outcome=outcome, duration=duration)
