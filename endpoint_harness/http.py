"""HTTP client capability used by checks."""

import json
import logging
from collections.abc import AsyncGenerator, Mapping
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any, Protocol

import aiohttp

from endpoint_harness.errors import CheckExecutionFailure

log = logging.getLogger(__name__)

JSON_HEADERS: Mapping[str, str] = {"Content-Type": "application/json"}


@dataclass(frozen=True, kw_only=True)
class HttpResponse:
    """Fully read HTTP response."""

    status: int
    text: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            CheckExecutionFailure: If the body is not valid JSON

        """
        try:
            return json.loads(self.text)
        except ValueError as e:
            raise CheckExecutionFailure(
                f"malformed JSON response (status {self.status}): {e}"
            ) from e


def decode_body(body: bytes, charset: str | None) -> str:
    """Decode a response body, replacing bytes that do not decode."""
    try:
        return body.decode(charset or "utf-8", errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")


class HttpClient(Protocol):
    """Anything able to issue a request and return the complete response."""

    async def request(
        self,
        method: str,
        url: str,
        *,
        json: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        """Send a request and read the whole response."""


@dataclass(frozen=True, kw_only=True)
class AiohttpClient:
    """HttpClient backed by an aiohttp session."""

    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def open(
        cls, headers: Mapping[str, str] | None = None
    ) -> AsyncGenerator["AiohttpClient", None]:
        """Create client with managed session lifecycle."""
        async with aiohttp.ClientSession(
            headers={**JSON_HEADERS, **(headers or {})},
        ) as session:
            yield cls(session=session)

    async def request(
        self,
        method: str,
        url: str,
        *,
        json: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        """Send a request; transport problems raise CheckExecutionFailure.

        The body is decoded leniently, an undecodable body still yields the
        status code.
        """
        log.debug("%s %s", method, url)
        try:
            async with self.session.request(
                method, url, json=json, headers=headers
            ) as response:
                body = await response.read()
                return HttpResponse(
                    status=response.status,
                    text=decode_body(body, response.charset),
                    headers=dict(response.headers),
                )
        except aiohttp.ClientConnectionError as e:
            raise CheckExecutionFailure(f"connection failed: {e}") from e
        except aiohttp.ClientError as e:
            raise CheckExecutionFailure(f"request failed: {e}") from e
