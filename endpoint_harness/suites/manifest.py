"""Suite manifest definition for the plugin system."""

from collections.abc import Callable
from dataclasses import dataclass

from pydantic import BaseModel

from endpoint_harness.harness import VerificationHarness


@dataclass(frozen=True, kw_only=True)
class SuiteManifest[ConfigT: BaseModel]:
    """Manifest describing a check suite plugin.

    The manifest holds the suite's configuration class and the function that
    registers its checks, so suites can be loaded lazily by key.
    """

    config_cls: type[ConfigT]
    register_checks: Callable[[VerificationHarness, ConfigT], None]
