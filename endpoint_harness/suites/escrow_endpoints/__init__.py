"""Escrow endpoints suite."""

from endpoint_harness.suites.escrow_endpoints.config import EscrowEndpointsConfig
from endpoint_harness.suites.escrow_endpoints.manifest import escrow_endpoints_manifest
from endpoint_harness.suites.escrow_endpoints.suite import (
    register_escrow_endpoints_checks,
)

__all__ = [
    "EscrowEndpointsConfig",
    "escrow_endpoints_manifest",
    "register_escrow_endpoints_checks",
]
