"""Configuration for the escrow endpoints suite."""

from collections.abc import Sequence

from pydantic import BaseModel

DEFAULT_ENDPOINTS = (
    "/escrow/create",
    "/escrow/verify",
    "/escrow/release-milestone",
    "/escrow/reset",
)


class EscrowEndpointsConfig(BaseModel):
    """Configuration for the escrow endpoints suite."""

    project_id: str
    user_id: str = "test-user-id"
    user_role: str = "client"
    health_path: str = "/health"
    status_path: str = "/escrow/status"
    endpoints: Sequence[str] = DEFAULT_ENDPOINTS

    @property
    def identity_headers(self) -> dict[str, str]:
        """Headers the API reads the caller identity from."""
        return {"id": self.user_id, "user_role": self.user_role}
