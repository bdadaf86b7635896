"""Tests for the escrow setup suite."""

import pytest

from endpoint_harness.harness import VerificationHarness
from endpoint_harness.http import HttpClient, HttpResponse
from endpoint_harness.models.config import HarnessConfig
from endpoint_harness.suites.escrow_setup import (
    EscrowSetupConfig,
    register_escrow_setup_checks,
)
from endpoint_harness.suites.escrow_setup.config import DEFAULT_ENDPOINTS
from endpoint_harness.testing.client import FakeHttpClient, UnreachableHttpClient
from endpoint_harness.testing.payloads import (
    created_order,
    gateway_config,
    project_list,
)

BASE_URL = "http://localhost:5000/api"


@pytest.fixture
def client() -> FakeHttpClient:
    """Create fake HTTP client answering like a healthy backend."""
    client = FakeHttpClient()
    client.add_json(
        "GET",
        f"{BASE_URL}/payment/test-config",
        gateway_config(key_type="test"),
    )
    client.add_json("POST", f"{BASE_URL}/payment/test-order", created_order())
    client.add_json("POST", f"{BASE_URL}/project/browse", project_list())
    for endpoint in DEFAULT_ENDPOINTS:
        client.add("POST", f"{BASE_URL}{endpoint}", HttpResponse(status=400))
    return client


def make_harness(client: HttpClient) -> VerificationHarness:
    harness = VerificationHarness(HarnessConfig.build(BASE_URL), client)
    register_escrow_setup_checks(harness, EscrowSetupConfig())
    return harness


def test_registers_checks_in_order() -> None:
    """Registers config, order-creation, db and endpoints."""
    harness = make_harness(FakeHttpClient())

    assert [check.name for check in harness.checks] == [
        "config",
        "order-creation",
        "db",
        "endpoints",
    ]


async def test_healthy_backend_passes(client: FakeHttpClient) -> None:
    """Every check passes against a correctly configured backend."""
    report = await make_harness(client).run()

    assert report.succeeded
    assert report.passed_count == report.total_count == 4
    config_outcome = report.results[0].outcome
    assert config_outcome.passed
    assert "environment: development" in config_outcome.detail
    assert "order_test123" in report.results[1].outcome.detail
    assert report.results[3].outcome.detail == "6/6 accessible"


async def test_config_fails_when_keys_missing(client: FakeHttpClient) -> None:
    """The config check fails when a gateway key is not set."""
    client.add_json(
        "GET",
        f"{BASE_URL}/payment/test-config",
        gateway_config(key_secret="Not Set"),
    )

    report = await make_harness(client).run()

    assert not report.results[0].passed
    assert "config.keySecret='Not Set'" in report.results[0].outcome.detail
    assert report.passed_count == 3


async def test_order_creation_fails_without_success_status(
    client: FakeHttpClient,
) -> None:
    """The order check requires status 'success'."""
    client.add_json(
        "POST", f"{BASE_URL}/payment/test-order", created_order(status="error")
    )

    report = await make_harness(client).run()

    assert not report.results[1].passed
    assert "status='error'" in report.results[1].outcome.detail


@pytest.mark.parametrize("order", ["abc", ["order_1"], None, 42])
async def test_order_creation_tolerates_unexpected_order_shape(
    client: FakeHttpClient, order: object
) -> None:
    """A success status passes even when the order is not an object."""
    client.add_json(
        "POST",
        f"{BASE_URL}/payment/test-order",
        {"status": "success", "order": order},
    )

    report = await make_harness(client).run()

    outcome = report.results[1].outcome
    assert outcome.passed
    assert outcome.detail == "test order ? created (? paise)"


async def test_db_fails_on_server_error(client: FakeHttpClient) -> None:
    """The database check requires a 2xx from the browse endpoint."""
    client.add("POST", f"{BASE_URL}/project/browse", HttpResponse(status=500))

    report = await make_harness(client).run()

    assert not report.results[2].passed
    assert report.results[2].outcome.status_code == 500


async def test_endpoints_fail_on_missing_route(client: FakeHttpClient) -> None:
    """The endpoints check fails when any route answers 404."""
    client.add("POST", f"{BASE_URL}/milestone/list", HttpResponse(status=404))

    report = await make_harness(client).run()

    endpoints = report.results[3].outcome
    assert not endpoints.passed
    assert endpoints.detail.startswith("5/6 accessible")
    assert "/milestone/list not found (404)" in endpoints.detail


async def test_unreachable_server_fails_every_check() -> None:
    """Connection failures fail every check without aborting the run."""
    report = await make_harness(UnreachableHttpClient()).run()

    assert report.passed_count == 0
    assert report.total_count == 4
    for result in report.results:
        assert "connection failed" in result.outcome.detail
