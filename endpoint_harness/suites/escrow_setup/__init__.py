"""Escrow and payment setup suite."""

from endpoint_harness.suites.escrow_setup.config import EscrowSetupConfig
from endpoint_harness.suites.escrow_setup.manifest import escrow_setup_manifest
from endpoint_harness.suites.escrow_setup.suite import register_escrow_setup_checks

__all__ = [
    "EscrowSetupConfig",
    "escrow_setup_manifest",
    "register_escrow_setup_checks",
]
