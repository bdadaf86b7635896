"""Configuration for the verification harness."""

from collections.abc import Mapping
from typing import Any

from pydantic import Field, ValidationError, field_validator
from yarl import URL

from endpoint_harness.errors import ConfigurationError
from endpoint_harness.models.base import Model

DEFAULT_CHECK_TIMEOUT = 10.0


class HarnessConfig(Model):
    """Target and limits of a harness run.

    Constructing it with unusable settings raises ConfigurationError, not
    pydantic's ValidationError.
    """

    base_url: str = Field(..., description="Absolute URL prefix of the API")
    default_headers: Mapping[str, str] = Field(
        default_factory=dict, description="Headers sent with every request"
    )
    check_timeout: float = Field(
        default=DEFAULT_CHECK_TIMEOUT,
        gt=0,
        description="Seconds a single check may take before it fails",
    )

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid harness configuration: {e}") from e

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("base URL must not be empty")

        url = URL(value)
        if url.scheme not in {"http", "https"} or not url.host:
            raise ValueError(f"base URL must be an absolute http(s) URL: {value!r}")
        if url.query_string or url.fragment:
            raise ValueError(f"base URL must not carry a query or fragment: {value!r}")

        return value.rstrip("/")

    @classmethod
    def build(
        cls,
        base_url: str,
        default_headers: Mapping[str, str] | None = None,
        check_timeout: float = DEFAULT_CHECK_TIMEOUT,
    ) -> "HarnessConfig":
        """Validate settings, raising ConfigurationError when they are unusable."""
        return cls(
            base_url=base_url,
            default_headers=dict(default_headers or {}),
            check_timeout=check_timeout,
        )
