"""Turn a destroy request into the deployments it targets."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from .._logging import PrefixAdaptor
from .components import AllDeploymentsRequest, ExplicitDestroyRequest, PhysicalState
from .providers.directory import LATEST_COMPLETED_FIRST

if TYPE_CHECKING:
    import threading

    from .._logging import RundownLogger
    from .components import DeploymentRecord, DestroyRequest, WorkspaceScope
    from .providers.directory import DirectoryClient

LOGGER = cast("RundownLogger", logging.getLogger(__name__))


class DeploymentResolver:
    """Resolve a :data:`~rundown.core.components.DestroyRequest`.

    Explicit IDs are looked up one at a time, in order. The "all" sentinel
    lists every application in scope for deployments whose infrastructure
    still exists, latest completed first, and concatenates the results in
    application order. Any error aborts resolution and is raised unchanged.

    """

    def __init__(self, client: DirectoryClient, scope: WorkspaceScope) -> None:
        """Instantiate class.

        Args:
            client: Deployment directory client.
            scope: Applications enumerated for the "all" sentinel.

        """
        self.client = client
        self.scope = scope

    def resolve(
        self, request: DestroyRequest, *, cancel: threading.Event
    ) -> list[DeploymentRecord]:
        """Resolve a request into an ordered list of deployments.

        Args:
            request: What to destroy.
            cancel: Cancel handler passed to every directory call.

        Raises:
            DeploymentNotFound: An explicit ID does not exist.
            TransportError: A directory call failed.

        """
        if isinstance(request, ExplicitDestroyRequest):
            return self.get_deployments(request.ids, cancel=cancel)
        if isinstance(request, AllDeploymentsRequest):
            return self.all_deployments(cancel=cancel)
        raise TypeError(f"unsupported destroy request: {request!r}")

    def get_deployments(
        self, ids: tuple[str, ...], *, cancel: threading.Event
    ) -> list[DeploymentRecord]:
        """Get each deployment by ID, stopping at the first failure."""
        result: list[DeploymentRecord] = []
        for deployment_id in ids:
            LOGGER.debug("getting deployment %s", deployment_id)
            result.append(self.client.get_deployment(deployment_id, cancel=cancel))
        return result

    def all_deployments(self, *, cancel: threading.Event) -> list[DeploymentRecord]:
        """List deployments that still physically exist for every application in scope."""
        result: list[DeploymentRecord] = []
        for application in self.scope.applications:
            logger = PrefixAdaptor(application.application, LOGGER)
            logger.debug(
                "listing created deployments in workspace %s", self.scope.workspace.workspace
            )
            deployments = self.client.list_deployments(
                application,
                self.scope.workspace,
                physical_state=PhysicalState.CREATED,
                order=LATEST_COMPLETED_FIRST,
                cancel=cancel,
            )
            logger.verbose("found %d created deployment(s)", len(deployments))
            result.extend(deployments)
        return result
