"""Checks exercising the escrow endpoints on behalf of a project owner."""

from endpoint_harness.checks import endpoints_accessible, expect_response
from endpoint_harness.harness import VerificationHarness
from endpoint_harness.suites.escrow_endpoints.config import EscrowEndpointsConfig


def register_escrow_endpoints_checks(
    harness: VerificationHarness, config: EscrowEndpointsConfig
) -> None:
    """Register health, escrow-status and escrow-endpoints checks."""
    body = {"project_id": config.project_id}

    harness.register_check("health", expect_response(config.health_path, "GET"))
    harness.register_check(
        "escrow-status",
        expect_response(
            config.status_path,
            "POST",
            strictness="success",
            json=body,
            headers=config.identity_headers,
        ),
    )
    harness.register_check(
        "escrow-endpoints",
        endpoints_accessible(
            config.endpoints, "POST", json=body, headers=config.identity_headers
        ),
    )
