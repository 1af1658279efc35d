"""Applications over which "all" enumeration is performed."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ...exceptions import UnknownApplication
from ._deployment_record import ApplicationRef, WorkspaceRef

if TYPE_CHECKING:
    from ...config import RundownConfig


@dataclass(frozen=True)
class WorkspaceScope:
    """A workspace and the ordered applications enumerated within it."""

    workspace: WorkspaceRef
    applications: tuple[ApplicationRef, ...] = field(default_factory=tuple)

    @classmethod
    def from_config(cls, config: RundownConfig, *, workspace: str | None = None) -> WorkspaceScope:
        """Create a scope covering every application of a project config.

        Args:
            config: Rundown config.
            workspace: Overrides the workspace defined in the config.

        """
        return cls(
            workspace=WorkspaceRef(workspace=workspace or config.workspace),
            applications=tuple(
                ApplicationRef(project=config.project, application=app)
                for app in config.applications
            ),
        )

    def single(self, application: str) -> WorkspaceScope:
        """Narrow the scope to one application.

        Args:
            application: Name of the application.

        Raises:
            UnknownApplication: The application is not part of this scope.

        """
        for app in self.applications:
            if app.application == application:
                return WorkspaceScope(workspace=self.workspace, applications=(app,))
        raise UnknownApplication(
            application, available=[app.application for app in self.applications]
        )
