"""Core Rundown components."""

from ._deployment_record import (
    ApplicationRef,
    DeploymentRecord,
    LifecycleState,
    PhysicalState,
    WorkspaceRef,
)
from ._destroy_request import (
    ALL_DEPLOYMENTS,
    AllDeploymentsRequest,
    DestroyRequest,
    ExplicitDestroyRequest,
    destroy_request_from_ids,
)
from ._workspace_scope import WorkspaceScope

__all__ = [
    "ALL_DEPLOYMENTS",
    "AllDeploymentsRequest",
    "ApplicationRef",
    "DeploymentRecord",
    "DestroyRequest",
    "ExplicitDestroyRequest",
    "LifecycleState",
    "PhysicalState",
    "WorkspaceRef",
    "WorkspaceScope",
    "destroy_request_from_ids",
]
