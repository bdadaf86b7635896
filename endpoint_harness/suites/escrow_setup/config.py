"""Configuration for the escrow setup suite."""

from collections.abc import Sequence

from pydantic import BaseModel

DEFAULT_ENDPOINTS = (
    "/bank-details/add",
    "/escrow/create",
    "/escrow/status",
    "/milestone/list",
    "/milestone/complete",
    "/bid/update-price",
)


class EscrowSetupConfig(BaseModel):
    """Configuration for the escrow setup suite."""

    config_path: str = "/payment/test-config"
    order_path: str = "/payment/test-order"
    browse_path: str = "/project/browse"
    endpoints: Sequence[str] = DEFAULT_ENDPOINTS
