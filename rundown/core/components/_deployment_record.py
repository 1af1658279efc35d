"""Deployment record as returned by the deployment directory."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class LifecycleState(str, Enum):
    """Outcome of the operation that produced a deployment."""

    UNKNOWN = "UNKNOWN"
    PENDING = "PENDING"
    RUNNING = "RUNNING"
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class PhysicalState(str, Enum):
    """Whether the infrastructure backing a deployment still exists."""

    UNKNOWN = "UNKNOWN"
    PENDING = "PENDING"
    CREATED = "CREATED"
    DESTROYED = "DESTROYED"


class ApplicationRef(BaseModel):
    """Reference to an application within a project."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    project: str
    """Name of the project that owns the application."""

    application: str
    """Name of the application."""

    def __str__(self) -> str:
        """Return string representation of the object."""
        return f"{self.project}/{self.application}"


class WorkspaceRef(BaseModel):
    """Reference to a workspace."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    workspace: str = "default"
    """Name of the workspace."""

    def __str__(self) -> str:
        """Return string representation of the object."""
        return self.workspace


class DeploymentRecord(BaseModel):
    """One deployed instance of an application.

    Records are owned by the deployment directory. They are only read here
    and passed back, unmodified, as the payload of a destroy call. Attributes
    the directory returns that are not modeled are retained in
    ``model_extra`` so they survive that round trip.

    """

    model_config = ConfigDict(
        extra="allow",
        frozen=True,
        populate_by_name=True,
    )

    id: str
    """Unique, immutable identifier of the deployment within a workspace."""

    application: Annotated[
        ApplicationRef, Field(validation_alias=AliasChoices("application", "applicationRef"))
    ]
    """Application (and project) the deployment belongs to."""

    workspace: WorkspaceRef | None = None
    """Workspace the deployment was made in."""

    lifecycle_state: Annotated[
        LifecycleState | str,
        Field(
            alias="lifecycleState",
            union_mode="left_to_right",
            validation_alias=AliasChoices("lifecycleState", "lifecycle_state"),
        ),
    ] = LifecycleState.UNKNOWN
    """Outcome of the deploy operation.

    States the directory reports that are not a :class:`LifecycleState` are
    kept as the raw string.

    """

    physical_state: Annotated[
        PhysicalState | str,
        Field(
            alias="physicalState",
            union_mode="left_to_right",
            validation_alias=AliasChoices("physicalState", "physical_state"),
        ),
    ] = PhysicalState.UNKNOWN
    """Whether the underlying infrastructure still exists (raw string if unrecognized)."""

    complete_time: Annotated[
        datetime | None,
        Field(
            alias="completeTime",
            validation_alias=AliasChoices("completeTime", "complete_time"),
        ),
    ] = None
    """When the deploy operation completed."""

    def to_payload(self) -> dict[str, Any]:
        """Serialize the record using the directory's wire names."""
        return self.model_dump(by_alias=True, mode="json")
