"""Models for check definitions loaded from YAML files."""

from collections.abc import Mapping, Sequence
from typing import Any, Literal, Self

from pydantic import Field, field_validator, model_validator

from endpoint_harness.checks import expect_response
from endpoint_harness.harness import CheckExecutor
from endpoint_harness.models.base import Model


class Expectation(Model):
    """How strictly a response is judged."""

    strictness: Literal["accessible", "success", "exact"] = Field(
        default="success",
        description="accessible (not 404), success (2xx) or exact (status match)",
    )
    status: int | None = Field(
        default=None, ge=100, le=599, description="Status required by 'exact'"
    )
    fields: Mapping[str, Any] = Field(
        default_factory=dict,
        description="Dotted JSON paths mapped to their expected values",
    )

    @model_validator(mode="after")
    def check_status_for_exact(self) -> Self:
        if self.strictness == "exact" and self.status is None:
            raise ValueError("'exact' strictness requires 'status'")
        return self


class CheckDefinition(Model):
    """A single declarative check."""

    name: str = Field(..., min_length=1, description="Unique check name")
    method: Literal["GET", "POST", "PUT", "PATCH", "DELETE"] = Field(
        default="GET", description="HTTP method"
    )
    path: str = Field(..., description="Path appended to the base URL")
    headers: Mapping[str, str] = Field(
        default_factory=dict, description="Extra request headers"
    )
    body: Any = Field(default=None, description="JSON request body")
    expect: Expectation = Field(default_factory=Expectation)

    @field_validator("method", mode="before")
    @classmethod
    def upper_method(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @field_validator("path")
    @classmethod
    def validate_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("path must start with '/'")
        return value

    def to_executor(self) -> CheckExecutor:
        """Build the executor that performs this check."""
        return expect_response(
            self.path,
            self.method,
            strictness=self.expect.strictness,
            status=self.expect.status,
            fields=self.expect.fields,
            json=self.body,
            headers=self.headers,
        )


class DefinitionFile(Model):
    """Complete definition file."""

    version: str = Field(..., description="Definition schema version")
    checks: Sequence[CheckDefinition] = Field(
        default_factory=list, description="Checks in run order"
    )

    @model_validator(mode="after")
    def check_unique_names(self) -> Self:
        names = [check.name for check in self.checks]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate check names: {', '.join(duplicates)}")
        return self
