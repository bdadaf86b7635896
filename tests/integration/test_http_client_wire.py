"""Integration tests checking what the aiohttp client puts on the wire."""

from collections.abc import AsyncGenerator

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer as LocalServer

from endpoint_harness.http import AiohttpClient


@pytest.fixture
def received() -> list[web.Request]:
    """Requests seen by the server."""
    return []


@pytest.fixture
async def server(received: list[web.Request]) -> AsyncGenerator[LocalServer, None]:
    """Run a local server that records every request."""

    async def handler(request: web.Request) -> web.Response:
        await request.read()
        received.append(request)
        return web.json_response({})

    app = web.Application()
    app.router.add_route("*", "/{tail:.*}", handler)
    async with LocalServer(app) as impl:
        yield impl


@pytest.fixture
async def client() -> AsyncGenerator[AiohttpClient, None]:
    """Create client with managed session."""
    async with AiohttpClient.open({"X-Default": "1"}) as impl:
        yield impl


class TestContentType:
    """Every request declares a JSON content type."""

    async def test_post_with_body(
        self,
        server: LocalServer,
        client: AiohttpClient,
        received: list[web.Request],
    ) -> None:
        """A POST carrying a JSON body."""
        url = str(server.make_url("/api/escrow/status"))

        response = await client.request(
            "POST", url, json={"project_id": "p1"}, headers={"user_role": "client"}
        )

        assert response.status == 200
        (request,) = received
        assert request.method == "POST"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["X-Default"] == "1"
        assert request.headers["user_role"] == "client"

    async def test_get_without_body(
        self,
        server: LocalServer,
        client: AiohttpClient,
        received: list[web.Request],
    ) -> None:
        """A GET with no body still sends the header."""
        url = str(server.make_url("/api/health"))

        response = await client.request("GET", url)

        assert response.status == 200
        (request,) = received
        assert request.method == "GET"
        assert request.headers["Content-Type"] == "application/json"
