"""Escrow setup suite manifest."""

from endpoint_harness.suites.escrow_setup.config import EscrowSetupConfig
from endpoint_harness.suites.escrow_setup.suite import register_escrow_setup_checks
from endpoint_harness.suites.manifest import SuiteManifest

escrow_setup_manifest = SuiteManifest(
    config_cls=EscrowSetupConfig,
    register_checks=register_escrow_setup_checks,
)
