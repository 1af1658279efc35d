"""CLI utils."""

from __future__ import annotations

import logging
import os
import signal
import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from functools import cached_property
from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..config import RundownConfig
from ..core import Rundown
from ..core.components import WorkspaceScope
from ..core.providers.directory import HttpDirectoryClient
from ..exceptions import ConfigNotFound

if TYPE_CHECKING:
    from types import FrameType

    from ..core.providers.directory import DirectoryClient

LOGGER = logging.getLogger(__name__)

SIGNAL_NAMES = {
    signal.SIGINT: "SIGINT",
    signal.SIGTERM: "SIGTERM",
}


class CliContext:
    """CLI context object."""

    def __init__(
        self,
        *,
        ci: bool = False,
        debug: int = 0,
        verbose: bool = False,
        **_: Any,
    ) -> None:
        """Instantiate class.

        Args:
            ci: Whether Rundown is being run in non-interactive mode.
            debug: Debug level
            verbose: Whether to display verbose logs.

        """
        self.cancel = threading.Event()
        self.ci = ci
        self.debug = debug
        self.root_dir = Path.cwd()
        self.verbose = verbose

    @cached_property
    def config(self) -> RundownConfig:
        """Rundown config with environment overrides applied."""
        config = RundownConfig.parse_file(file_path=self.config_path)
        config.apply_environ(os.environ)
        return config

    @cached_property
    def config_path(self) -> Path:
        """Path to the config file.

        Raises:
            SystemExit: Config file not found or multiple were matches were found.

        """
        try:
            path = RundownConfig.find_config_file(self.root_dir)
            self.root_dir = path.parent
            return path
        except ConfigNotFound as err:
            LOGGER.error(err.message)
        except ValueError as err:
            LOGGER.error(err)
        sys.exit(1)

    @cached_property
    def directory_client(self) -> DirectoryClient:
        """Client for the deployment directory defined in the config."""
        return HttpDirectoryClient.from_config(self.config.server)

    def get_scope(self, *, app: str | None = None, workspace: str | None = None) -> WorkspaceScope:
        """Get the scope "all" is enumerated over.

        Args:
            app: Restrict the scope to a single application.
            workspace: Overrides the workspace in the config.

        Raises:
            UnknownApplication: ``app`` is not defined in the config.

        """
        scope = WorkspaceScope.from_config(self.config, workspace=workspace)
        return scope.single(app) if app else scope

    def get_rundown(self, scope: WorkspaceScope) -> Rundown:
        """Get a Rundown object sharing this context's cancel handler."""
        return Rundown(self.directory_client, scope, cancel=self.cancel)

    @contextmanager
    def cancel_on_interrupt(self) -> Iterator[threading.Event]:
        """Set the cancel handler when SIGINT or SIGTERM is received.

        The call in flight is left to finish; the next call observes the
        handler and fails.

        """

        def cancel_execution(signum: int, _frame: FrameType | None) -> None:
            LOGGER.info(
                "signal %s received, quitting after the current call...",
                SIGNAL_NAMES.get(signum, signum),
            )
            self.cancel.set()

        previous = {sig: signal.signal(sig, cancel_execution) for sig in SIGNAL_NAMES}
        try:
            yield self.cancel
        finally:
            for sig, handler in previous.items():
                signal.signal(sig, handler)

    def __str__(self) -> str:
        """Return string representation of the object."""
        return f"CliContext({self.__dict__})"  # cov: ignore
