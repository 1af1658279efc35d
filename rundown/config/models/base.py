"""Base models & other objects."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ConfigProperty(BaseModel):
    """Base class for Rundown configuration properties."""

    model_config = ConfigDict(
        extra="forbid",
        validate_default=True,
        validate_assignment=True,
    )
