"""Core Rundown API."""

from __future__ import annotations

import logging as _logging
import threading as _threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

from .._logging import RundownLogger as _RundownLogger
from ..exceptions import RundownError
from . import components, providers, status
from ._destroyer import Destroyer
from ._eligibility import is_eligible
from ._resolver import DeploymentResolver

if TYPE_CHECKING:
    from .components import DestroyRequest, WorkspaceScope
    from .providers.directory import DirectoryClient

LOGGER = cast("_RundownLogger", _logging.getLogger(__name__))

__all__ = [
    "DeploymentResolver",
    "DestroyResult",
    "Destroyer",
    "Rundown",
    "components",
    "is_eligible",
    "providers",
    "status",
]


@dataclass
class DestroyResult:
    """Outcome of a destroy batch."""

    status: status.Status
    """Final state of the batch (:data:`~rundown.core.status.DONE` or
    :data:`~rundown.core.status.FAILED`)."""

    candidates: int = 0
    """Number of deployments resolved, including those later skipped."""

    error: RundownError | None = None
    """The error that halted the batch, exactly as it was raised."""

    @property
    def ok(self) -> bool:
        """Whether the batch completed without error."""
        return self.status == status.DONE


class Rundown:
    """Rundown's core functionality.

    Composes :class:`DeploymentResolver`, :func:`is_eligible` and
    :class:`Destroyer` into a strictly sequential batch that stops at the
    first error. Deployments destroyed before the error are not rolled back.

    """

    def __init__(
        self,
        client: DirectoryClient,
        scope: WorkspaceScope,
        *,
        cancel: _threading.Event | None = None,
    ) -> None:
        """Instantiate class.

        Args:
            client: Deployment directory client.
            scope: Applications enumerated when destroying "all".
            cancel: Cancel handler passed to every directory call.

        """
        self.cancel = cancel or _threading.Event()
        self.client = client
        self.destroyer = Destroyer(client)
        self.resolver = DeploymentResolver(client, scope)
        self.scope = scope
        self.status: status.Status = status.RESOLVING

    def destroy(self, request: DestroyRequest) -> DestroyResult:
        """Destroy the deployments targeted by a request.

        Args:
            request: Explicit IDs or the "all" sentinel.

        Returns:
            Result of the batch. When it failed, ``error`` holds the error
            that stopped it.

        """
        self.status = status.RESOLVING
        try:
            deployments = self.resolver.resolve(request, cancel=self.cancel)
        except RundownError as err:
            LOGGER.error(err)
            return self.__fail(err)

        # ineligible deployments are included in this count
        LOGGER.notice("%d deployments will be destroyed", len(deployments))
        self.status = status.DESTROYING
        for deployment in deployments:
            if not is_eligible(deployment):
                continue
            LOGGER.info("destroying deployment: %s", deployment.id)
            try:
                self.destroyer.destroy(deployment, cancel=self.cancel)
            except RundownError as err:
                LOGGER.error("error destroying the deployment: %s", err)
                return self.__fail(err, candidates=len(deployments))

        self.status = status.DONE
        LOGGER.success("finished destroying deployments")
        return DestroyResult(status=self.status, candidates=len(deployments))

    def __fail(self, err: RundownError, *, candidates: int = 0) -> DestroyResult:
        self.status = status.FAILED
        return DestroyResult(status=self.status, candidates=candidates, error=err)
