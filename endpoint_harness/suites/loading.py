"""Suite discovery through the ``endpoint_harness.suites`` entry-point group.

Any installed distribution may add suites to the group. A suite key maps to
an object path resolving to a ``SuiteManifest``, for example::

    [project.entry-points."endpoint_harness.suites"]
    escrow-setup = "endpoint_harness.suites.escrow_setup:escrow_setup_manifest"
"""

import logging
from collections.abc import Mapping
from importlib.metadata import EntryPoint, entry_points
from typing import Any

from endpoint_harness.errors import ConfigurationError
from endpoint_harness.suites.manifest import SuiteManifest

log = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "endpoint_harness.suites"


class SuiteNotFoundError(ConfigurationError):
    """Raised for a suite key no installed distribution provides."""


def available_suites() -> Mapping[str, EntryPoint]:
    """Installed suites by key; the first distribution wins on a clash."""
    suites: dict[str, EntryPoint] = {}
    for entry in entry_points(group=ENTRY_POINT_GROUP):
        suites.setdefault(entry.name, entry)
    return suites


def load_suite_manifest(key: str) -> SuiteManifest[Any]:
    """Import the manifest registered under ``key``.

    Raises:
        SuiteNotFoundError: If no suite is registered under ``key``
        ConfigurationError: If the entry point does not resolve to a manifest

    """
    suites = available_suites()
    if key not in suites:
        names = ", ".join(sorted(suites)) or "none"
        raise SuiteNotFoundError(f"Unknown suite '{key}'. Available suites: {names}")

    entry = suites[key]
    log.debug("Suite %s resolves to %s", key, entry.value)
    manifest = entry.load()
    if not isinstance(manifest, SuiteManifest):
        raise ConfigurationError(
            f"Suite '{key}' ({entry.value}) is not a SuiteManifest"
        )
    return manifest
