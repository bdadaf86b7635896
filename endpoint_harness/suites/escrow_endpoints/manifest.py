"""Escrow endpoints suite manifest."""

from endpoint_harness.suites.escrow_endpoints.config import EscrowEndpointsConfig
from endpoint_harness.suites.escrow_endpoints.suite import (
    register_escrow_endpoints_checks,
)
from endpoint_harness.suites.manifest import SuiteManifest

escrow_endpoints_manifest = SuiteManifest(
    config_cls=EscrowEndpointsConfig,
    register_checks=register_escrow_endpoints_checks,
)
