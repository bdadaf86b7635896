"""Models for check outcomes and run reports."""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class Outcome:
    """Result of executing a single check.

    Contains only the verdict - the harness knows which check produced it.
    """

    passed: bool
    detail: str
    status_code: int | None = None


@dataclass(frozen=True, kw_only=True)
class CheckResult:
    """Outcome of a check together with the check name and run time."""

    name: str
    outcome: Outcome
    duration: float = 0.0

    @property
    def passed(self) -> bool:
        return self.outcome.passed


@dataclass(frozen=True, kw_only=True)
class RunReport:
    """Ordered outcomes of one harness run."""

    results: Sequence[CheckResult] = ()

    @property
    def passed_count(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @property
    def total_count(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> bool:
        """Whether every check passed."""
        return self.passed_count == self.total_count

    @property
    def failed(self) -> Sequence[CheckResult]:
        return [result for result in self.results if not result.passed]
