"""Rundown exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path


class RundownError(Exception):
    """Base class for custom exceptions raised by Rundown."""

    message: str
    """Error message."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Instantiate class."""
        if getattr(self, "message", None):
            super().__init__(self.message, *args, **kwargs)
        else:
            super().__init__(*args, **kwargs)


class ConfigNotFound(RundownError):
    """Configuration file could not be found."""

    looking_for: list[str]
    message: str
    path: Path

    def __init__(self, *, looking_for: list[str] | None = None, path: Path) -> None:
        """Instantiate class.

        Args:
            path: Path where the config file was expected to be found.
            looking_for: List of file names that were being looked for.

        """
        self.looking_for = looking_for or []
        self.path = path

        if looking_for:
            self.message = f"config file not found at path {path}; looking for one of {looking_for}"
        else:
            self.message = f"config file not found at path {path}"
        super().__init__(self.path, self.looking_for)


class DeploymentNotFound(RundownError):
    """A deployment ID did not resolve to a known deployment."""

    deployment_id: str
    message: str

    def __init__(self, deployment_id: str) -> None:
        """Instantiate class.

        Args:
            deployment_id: ID of the deployment that was requested.

        """
        self.deployment_id = deployment_id
        self.message = f"deployment not found: {deployment_id}"
        super().__init__()


class TransportError(RundownError):
    """A call to the remote deployment directory failed."""

    message: str
    status_code: int | None
    """HTTP status code returned by the remote, if one was received."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        """Instantiate class.

        Args:
            message: Description of the failure.
            status_code: HTTP status code returned by the remote.

        """
        self.message = message
        self.status_code = status_code
        super().__init__()


class OperationCancelled(TransportError):
    """A call observed that the batch was cancelled before it was issued."""

    def __init__(self, operation: str) -> None:
        """Instantiate class.

        Args:
            operation: Name of the call that was cancelled.

        """
        self.operation = operation
        super().__init__(f"{operation} cancelled")


class UnknownApplication(RundownError):
    """An application name is not part of the configured project."""

    application: str
    message: str

    def __init__(self, application: str, *, available: list[str]) -> None:
        """Instantiate class.

        Args:
            application: Name of the application that was requested.
            available: Names of the applications in the project.

        """
        self.application = application
        self.available = available
        self.message = f'application "{application}" is not defined; choose from {available}'
        super().__init__()
