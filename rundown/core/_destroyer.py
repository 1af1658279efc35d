"""Issue the destroy call for a single deployment."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    import threading

    from .._logging import RundownLogger
    from .components import DeploymentRecord
    from .providers.directory import DirectoryClient

LOGGER = cast("RundownLogger", logging.getLogger(__name__))


class Destroyer:
    """Destroy deployments through application scoped clients."""

    def __init__(self, client: DirectoryClient) -> None:
        """Instantiate class.

        Args:
            client: Deployment directory client.

        """
        self.client = client

    def destroy(self, deployment: DeploymentRecord, *, cancel: threading.Event) -> None:
        """Destroy one deployment.

        A single call is made and nothing is retried. The directory marks the
        deployment destroyed on success; it is not fetched again to confirm.

        Args:
            deployment: Deployment to destroy. Sent as the call's payload.
            cancel: Cancel handler.

        Raises:
            TransportError: The call failed.

        """
        app = self.client.app(deployment.application)
        app.destroy_deploy(deployment, cancel=cancel)
        LOGGER.debug("%s:destroy call accepted for deployment %s", app.application, deployment.id)
