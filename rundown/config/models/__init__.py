"""Rundown config models."""

from __future__ import annotations

from typing import Annotated

from pydantic import ConfigDict, Field, field_validator

from .base import ConfigProperty

__all__ = ["RundownConfigDefinitionModel", "RundownServerDefinitionModel"]


class RundownServerDefinitionModel(ConfigProperty):
    """Model for the deployment directory connection."""

    model_config = ConfigDict(
        extra="forbid",
        title="Rundown Server Definition",
        validate_default=True,
        validate_assignment=True,
    )

    address: Annotated[
        str,
        Field(
            description="Base URL of the deployment directory.",
            examples=["https://directory.example.com"],
        ),
    ]
    """Base URL of the deployment directory."""

    timeout: Annotated[
        float | None,
        Field(description="Seconds to wait for a response. (default: no timeout)", gt=0),
    ] = None
    """Seconds to wait for a response."""

    tls_skip_verify: Annotated[
        bool, Field(description="Disable verification of the server's TLS certificate.")
    ] = False
    """Disable verification of the server's TLS certificate."""

    token: Annotated[
        str | None, Field(description="Token used to authenticate with the directory.")
    ] = None
    """Token used to authenticate with the directory."""

    @field_validator("address")
    @classmethod
    def _validate_address(cls, v: str) -> str:
        """Validate address is an http(s) URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("address must start with http:// or https://")
        return v.rstrip("/")


class RundownConfigDefinitionModel(ConfigProperty):
    """Rundown configuration definition model."""

    model_config = ConfigDict(
        extra="forbid",
        title="Rundown Configuration File",
        validate_default=True,
        validate_assignment=True,
    )

    applications: Annotated[
        list[str],
        Field(
            description="Applications of the project, in the order they are enumerated.",
            min_length=1,
        ),
    ]
    """Applications of the project, in the order they are enumerated."""

    project: Annotated[str, Field(description="Name of the project.", min_length=1)]
    """Name of the project."""

    server: RundownServerDefinitionModel
    """Deployment directory connection."""

    workspace: Annotated[
        str, Field(description="Workspace deployments are enumerated in.", min_length=1)
    ] = "default"
    """Workspace deployments are enumerated in."""

    @field_validator("applications")
    @classmethod
    def _validate_unique_applications(cls, v: list[str]) -> list[str]:
        """Validate applications are not duplicated."""
        duplicates = sorted({app for app in v if v.count(app) > 1})
        if duplicates:
            raise ValueError(f"duplicate applications: {duplicates}")
        return v
