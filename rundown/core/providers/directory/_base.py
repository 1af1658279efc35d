"""Interface of the deployment directory."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from typing_extensions import Protocol

if TYPE_CHECKING:
    import threading

    from ...components import ApplicationRef, DeploymentRecord, PhysicalState, WorkspaceRef


@dataclass(frozen=True)
class DeploymentOrder:
    """Ordering applied by the directory when listing deployments."""

    field: str = "complete_time"
    desc: bool = True


LATEST_COMPLETED_FIRST = DeploymentOrder()


class AppClient(Protocol):
    """Operations scoped to a single application."""

    application: ApplicationRef

    def destroy_deploy(self, deployment: DeploymentRecord, *, cancel: threading.Event) -> None:
        """Tear down the infrastructure of a deployment.

        The full record is sent so the directory can locate the physical
        resources. On success the directory marks the deployment destroyed.

        Raises:
            TransportError: The call failed.

        """


class DirectoryClient(Protocol):
    """Remote service that stores and lists deployment records."""

    def app(self, application: ApplicationRef) -> AppClient:
        """Return a client scoped to an application."""

    def get_deployment(self, deployment_id: str, *, cancel: threading.Event) -> DeploymentRecord:
        """Get a deployment by ID.

        Raises:
            DeploymentNotFound: No deployment has this ID.
            TransportError: The call failed.

        """

    def list_deployments(
        self,
        application: ApplicationRef,
        workspace: WorkspaceRef,
        *,
        physical_state: PhysicalState,
        order: DeploymentOrder,
        cancel: threading.Event,
    ) -> list[DeploymentRecord]:
        """List the deployments of an application in a workspace.

        Raises:
            TransportError: The call failed.

        """
