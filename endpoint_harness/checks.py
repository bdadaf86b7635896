"""Reusable check builders implementing the endpoint interpretation rules.

Two levels of judgment are kept apart:

* accessibility - the endpoint exists, i.e. it did not answer 404. A 400 or
  401 means "accessible but rejected" and still passes.
* behavior - the endpoint answered the way a specific check requires, e.g.
  a 2xx with particular JSON fields.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Literal

from endpoint_harness.harness import CheckContext, CheckExecutor
from endpoint_harness.http import HttpResponse
from endpoint_harness.models.result import Outcome

log = logging.getLogger(__name__)

NOT_FOUND = 404

type Strictness = Literal["accessible", "success", "exact"]

_MISSING = object()


def is_accessible(status: int) -> bool:
    """Whether a status code means the endpoint exists."""
    return status != NOT_FOUND


def lookup_field(payload: Any, path: str) -> Any:
    """Resolve a dotted path such as ``config.keyId`` inside a JSON document.

    Raises:
        KeyError: If any segment of the path is absent

    """
    current = payload
    for segment in path.split("."):
        if isinstance(current, Mapping) and segment in current:
            current = current[segment]
        elif isinstance(current, list) and segment.isdigit():
            index = int(segment)
            if index >= len(current):
                raise KeyError(path)
            current = current[index]
        else:
            raise KeyError(path)
    return current


def judge_status(
    response: HttpResponse, strictness: Strictness, status: int | None = None
) -> str | None:
    """Return why the status code is unacceptable, or None when it is fine."""
    match strictness:
        case "accessible":
            if not is_accessible(response.status):
                return f"not found ({response.status})"
        case "success":
            if not response.ok:
                return f"expected a 2xx status, got {response.status}"
        case "exact":
            if response.status != status:
                return f"expected status {status}, got {response.status}"
    return None


def judge_fields(payload: Any, fields: Mapping[str, Any]) -> Sequence[str]:
    """List the mismatches between expected field values and the payload."""
    mismatches: list[str] = []
    for path, expected in fields.items():
        try:
            actual = lookup_field(payload, path)
        except KeyError:
            actual = _MISSING

        if actual is _MISSING:
            mismatches.append(f"{path} is missing")
        elif actual != expected:
            mismatches.append(f"{path}={actual!r} (expected {expected!r})")
    return mismatches


def endpoint_accessible(
    path: str,
    method: str = "POST",
    json: Any = None,
    headers: Mapping[str, str] | None = None,
) -> CheckExecutor:
    """Check that passes whenever the endpoint does not answer 404."""
    body = {} if json is None and method != "GET" else json

    async def executor(context: CheckContext) -> Outcome:
        response = await context.request(method, path, json=body, headers=headers)
        if is_accessible(response.status):
            return Outcome(
                passed=True,
                detail=f"{path} accessible (status {response.status})",
                status_code=response.status,
            )
        return Outcome(
            passed=False,
            detail=f"{path} not found ({response.status})",
            status_code=response.status,
        )

    return executor


def endpoints_accessible(
    paths: Sequence[str],
    method: str = "POST",
    json: Any = None,
    headers: Mapping[str, str] | None = None,
) -> CheckExecutor:
    """Check that passes when every endpoint in ``paths`` is accessible.

    A request error only marks its own endpoint as inaccessible; the other
    endpoints are still requested.
    """
    body = {} if json is None and method != "GET" else json

    async def executor(context: CheckContext) -> Outcome:
        problems: list[str] = []
        for path in paths:
            try:
                response = await context.request(
                    method, path, json=body, headers=headers
                )
            except Exception as e:
                log.info("%s %s failed: %s", method, path, e)
                problems.append(f"{path} error: {str(e) or type(e).__name__}")
                continue

            log.info("%s %s answered %d", method, path, response.status)
            if not is_accessible(response.status):
                problems.append(f"{path} not found ({response.status})")

        accessible = len(paths) - len(problems)
        detail = f"{accessible}/{len(paths)} accessible"
        if problems:
            detail = f"{detail}; {'; '.join(problems)}"
        return Outcome(passed=not problems, detail=detail)

    return executor


def expect_response(
    path: str,
    method: str = "GET",
    *,
    strictness: Strictness = "success",
    status: int | None = None,
    fields: Mapping[str, Any] | None = None,
    json: Any = None,
    headers: Mapping[str, str] | None = None,
) -> CheckExecutor:
    """Check that asserts the status code and, optionally, JSON body fields.

    Args:
        path: Path appended to the base URL
        method: HTTP method
        strictness: ``accessible`` (not 404), ``success`` (2xx) or ``exact``
            (status equals ``status``)
        status: Expected status code, required for ``exact``
        fields: Dotted JSON paths mapped to their expected values
        json: Request body
        headers: Extra request headers

    """
    if strictness == "exact" and status is None:
        raise ValueError("exact strictness requires an expected status")

    async def executor(context: CheckContext) -> Outcome:
        response = await context.request(method, path, json=json, headers=headers)

        if (problem := judge_status(response, strictness, status)) is not None:
            return Outcome(
                passed=False,
                detail=f"{method} {path}: {problem}",
                status_code=response.status,
            )

        if fields:
            mismatches = judge_fields(response.json(), fields)
            if mismatches:
                return Outcome(
                    passed=False,
                    detail=f"{method} {path}: {', '.join(mismatches)}",
                    status_code=response.status,
                )

        return Outcome(
            passed=True,
            detail=f"{method} {path}: status {response.status}",
            status_code=response.status,
        )

    return executor
