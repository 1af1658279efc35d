"""States of a destroy batch."""

from __future__ import annotations

from typing import Any


class Status:
    """Destroy batch status base class.

    Attributes:
        name: Name of the status.
        code: Status code.
        reason: Reason for the status.

    """

    code: int
    name: str
    reason: str | None

    def __init__(self, name: str, code: int, reason: str | None = None) -> None:
        """Instantiate class.

        Args:
            name: Name of the status.
            code: Status code.
            reason: Reason for the status.

        """
        self.name = name
        self.code = code
        self.reason = reason or getattr(self, "reason", None)

    def __eq__(self, other: Any) -> bool:
        """Compare if self is equal to another object."""
        if hasattr(other, "code"):
            return self.code == other.code
        return NotImplemented

    def __ne__(self, other: Any) -> bool:
        """Compare if self is not equal to another object."""
        if hasattr(other, "code"):
            return self.code != other.code
        return NotImplemented

    def __hash__(self) -> int:
        """Hash on the status code."""
        return hash(self.code)

    def __repr__(self) -> str:
        """Return a meaningful representation of the object."""
        if self.reason:
            return f"<{self.__class__.__name__} {self.name}: {self.reason}>"
        return f"<{self.__class__.__name__} {self.name}>"


class ResolvingStatus(Status):
    """Status name of 'resolving' with code of '0'."""

    CODE = 0

    def __init__(self, reason: str | None = None) -> None:
        """Instantiate class."""
        super().__init__("resolving", self.CODE, reason)


class DestroyingStatus(Status):
    """Status name of 'destroying' with code of '1'."""

    CODE = 1

    def __init__(self, reason: str | None = None) -> None:
        """Instantiate class."""
        super().__init__("destroying", self.CODE, reason)


class DoneStatus(Status):
    """Status name of 'done' with code of '2'."""

    CODE = 2

    def __init__(self, reason: str | None = None) -> None:
        """Instantiate class."""
        super().__init__("done", self.CODE, reason)


class FailedStatus(Status):
    """Status name of 'failed' with code of '3'."""

    CODE = 3

    def __init__(self, reason: str | None = None) -> None:
        """Instantiate class."""
        super().__init__("failed", self.CODE, reason)


RESOLVING = ResolvingStatus()
DESTROYING = DestroyingStatus()
DONE = DoneStatus()
FAILED = FailedStatus()
