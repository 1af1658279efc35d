"""Deployment directory client over HTTP."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, cast
from urllib.parse import quote

import requests
from pydantic import ValidationError

from ....exceptions import DeploymentNotFound, OperationCancelled, TransportError
from ...components import ApplicationRef, DeploymentRecord, PhysicalState, WorkspaceRef
from ._base import LATEST_COMPLETED_FIRST, DeploymentOrder

if TYPE_CHECKING:
    import threading

    from ...._logging import RundownLogger
    from ....config.models import RundownServerDefinitionModel

LOGGER = cast("RundownLogger", logging.getLogger(__name__))

API_PREFIX = "/v1"


class HttpDirectoryClient:
    """Talk to the deployment directory's REST API.

    A single :class:`requests.Session` is shared by every call. Nothing is
    retried and no timeout is applied unless one is configured.

    """

    def __init__(
        self,
        address: str,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
        tls_skip_verify: bool = False,
        token: str | None = None,
    ) -> None:
        """Instantiate class.

        Args:
            address: Base URL of the directory (e.g. ``https://directory.example.com``).
            session: Session to send requests with.
            timeout: Seconds to wait for the directory to respond.
            tls_skip_verify: Disable verification of the server's certificate.
            token: Bearer token used to authenticate.

        """
        self.address = address.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.session.verify = not tls_skip_verify
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    @classmethod
    def from_config(
        cls, server: RundownServerDefinitionModel, **kwargs: Any
    ) -> HttpDirectoryClient:
        """Create a client from the ``server`` section of a config file."""
        return cls(
            server.address,
            timeout=server.timeout,
            tls_skip_verify=server.tls_skip_verify,
            token=server.token,
            **kwargs,
        )

    def app(self, application: ApplicationRef) -> HttpAppClient:
        """Return a client scoped to an application."""
        return HttpAppClient(self, application)

    def get_deployment(self, deployment_id: str, *, cancel: threading.Event) -> DeploymentRecord:
        """Get a deployment by ID.

        Raises:
            DeploymentNotFound: The directory returned 404.
            TransportError: The call failed.

        """
        try:
            data = self.request(
                "GET", f"/deployments/{quote(deployment_id, safe='')}", cancel=cancel
            )
        except TransportError as exc:
            if exc.status_code == 404:
                raise DeploymentNotFound(deployment_id) from exc
            raise
        return self._parse_record(data)

    def list_deployments(
        self,
        application: ApplicationRef,
        workspace: WorkspaceRef,
        *,
        physical_state: PhysicalState = PhysicalState.CREATED,
        order: DeploymentOrder = LATEST_COMPLETED_FIRST,
        cancel: threading.Event,
    ) -> list[DeploymentRecord]:
        """List the deployments of an application in a workspace.

        The order the directory returns is kept as-is.

        """
        data = self.request(
            "GET",
            f"{self.application_path(application)}/deployments",
            cancel=cancel,
            params={
                "workspace": workspace.workspace,
                "physical_state": physical_state.value,
                "order": order.field,
                "desc": "true" if order.desc else "false",
            },
        )
        if data is None:
            return []
        if not isinstance(data, dict) or not isinstance(data.get("deployments") or [], list):
            raise TransportError(
                "directory returned a malformed deployment list: "
                f"expected an object with a \"deployments\" array, got {data!r}"
            )
        return [self._parse_record(i) for i in data.get("deployments") or []]

    def request(
        self,
        method: str,
        path: str,
        *,
        cancel: threading.Event,
        **kwargs: Any,
    ) -> Any:
        """Send a request to the directory and return the decoded JSON body.

        Args:
            method: HTTP method.
            path: Path relative to the API prefix.
            cancel: Cancel handler. Checked before the request is sent.
            **kwargs: Passed to :meth:`requests.Session.request`.

        Raises:
            OperationCancelled: The cancel handler was set.
            TransportError: The request failed or returned a non-2xx status.

        """
        if cancel.is_set():
            raise OperationCancelled(f"{method} {path}")
        url = f"{self.address}{API_PREFIX}{path}"
        LOGGER.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as exc:
            raise TransportError(f"{method} {url} failed: {exc}") from exc
        if not response.ok:
            raise TransportError(
                f"{method} {url} returned {response.status_code}: {_error_detail(response)}",
                status_code=response.status_code,
            )
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise TransportError(
                f"{method} {url} returned invalid JSON", status_code=response.status_code
            ) from exc

    @staticmethod
    def application_path(application: ApplicationRef) -> str:
        """Path of an application resource."""
        return (
            f"/projects/{quote(application.project, safe='')}"
            f"/applications/{quote(application.application, safe='')}"
        )

    @staticmethod
    def _parse_record(data: Any) -> DeploymentRecord:
        try:
            return DeploymentRecord.model_validate(data)
        except ValidationError as exc:
            raise TransportError(f"directory returned a malformed deployment: {exc}") from exc


class HttpAppClient:
    """Application scoped operations of :class:`HttpDirectoryClient`."""

    def __init__(self, client: HttpDirectoryClient, application: ApplicationRef) -> None:
        """Instantiate class.

        Args:
            client: Client the requests are sent with.
            application: Application the operations are scoped to.

        """
        self.application = application
        self.client = client

    def destroy_deploy(self, deployment: DeploymentRecord, *, cancel: threading.Event) -> None:
        """Tear down the infrastructure of a deployment."""
        self.client.request(
            "POST",
            f"{self.client.application_path(self.application)}"
            f"/deployments/{quote(deployment.id, safe='')}/destroy",
            cancel=cancel,
            json={"deployment": deployment.to_payload()},
        )


def _error_detail(response: requests.Response) -> str:
    """Extract an error message from a failed response."""
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason or "no detail"
    if isinstance(body, dict):
        return str(body.get("error") or body.get("message") or body)
    return str(body)
