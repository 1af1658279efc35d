"""Log output of the ``rundown`` command.

Records of the ``rundown`` logger are rendered by coloredlogs. The level
follows ``--debug`` and ``--verbose``. Passing ``--debug`` twice also renders
the HTTP transport's records so each request sent to the directory is shown.

"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from typing import Any, TextIO

import coloredlogs
from humanfriendly.terminal import terminal_supports_colors  # type: ignore

from .._logging import LogLevels
from ..utils import str_to_bool

LOGGER = logging.getLogger("rundown")

ENV_FIELD_STYLES = "RUNDOWN_LOG_FIELD_STYLES"
ENV_FORMAT = "RUNDOWN_LOG_FORMAT"
ENV_LEVEL_STYLES = "RUNDOWN_LOG_LEVEL_STYLES"

TRANSPORT_LOGGERS = ("urllib3",)
"""Loggers that are also rendered at debug level 2."""

LOG_FORMAT = "[rundown] %(message)s"
LOG_FORMAT_DEBUG = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_FORMAT_VERBOSE = "%(levelname)s:%(name)s: %(message)s"

# only the fields used by the formats above
LOG_FIELD_STYLES: dict[str, dict[str, Any]] = {
    "asctime": {"color": "black", "bright": True},
    "levelname": {"bold": True},
    "name": {"color": "blue"},
}
LOG_LEVEL_STYLES: dict[str, dict[str, Any]] = {
    "critical": {"color": "red", "bold": True},
    "debug": {"color": "green"},
    "error": {"color": "red"},
    "notice": {"color": "yellow"},
    "success": {"color": "green", "bold": True},
    "verbose": {"color": "cyan"},
    "warning": {"color": 214},
}


class LogSettings:
    """How the CLI renders log records.

    The defaults can be changed through the environment:

    - ``RUNDOWN_LOG_FORMAT`` replaces the record format.
    - ``RUNDOWN_LOG_FIELD_STYLES`` and ``RUNDOWN_LOG_LEVEL_STYLES`` are
      coloredlogs encoded styles (e.g. ``debug=red;notice=blue,bold``) merged
      over :data:`LOG_FIELD_STYLES` and :data:`LOG_LEVEL_STYLES`.
    - ``GITLAB_CI`` forces color since GitLab jobs have no TTY to detect.

    """

    def __init__(
        self,
        *,
        debug: int = 0,
        environ: Mapping[str, str] | None = None,
        no_color: bool = False,
        stream: TextIO | None = None,
        verbose: bool = False,
    ) -> None:
        """Instantiate class.

        Args:
            debug: Debug level.
            environ: Environment variables. Defaults to ``os.environ``.
            no_color: Disable color.
            stream: Stream records are written to. Defaults to stdout.
            verbose: Whether to display verbose logs.

        """
        self.debug = debug
        self.environ = os.environ if environ is None else environ
        self.no_color = no_color
        self.stream = stream or sys.stdout
        self.verbose = verbose

    @property
    def colorize(self) -> bool:
        """Whether records are rendered with ANSI escape sequences."""
        if self.no_color:
            return False
        if str_to_bool(self.environ.get("GITLAB_CI")):
            return True
        return bool(terminal_supports_colors(self.stream))

    @property
    def fmt(self) -> str:
        """Record format."""
        if self.environ.get(ENV_FORMAT):
            return self.environ[ENV_FORMAT]
        if self.debug:
            return LOG_FORMAT_DEBUG
        if self.verbose:
            return LOG_FORMAT_VERBOSE
        return LOG_FORMAT

    @property
    def log_level(self) -> LogLevels:
        """Lowest level that is rendered."""
        if self.debug:
            return LogLevels.DEBUG
        if self.verbose:
            return LogLevels.VERBOSE
        return LogLevels.INFO

    def styles(self, defaults: dict[str, dict[str, Any]], env_var: str) -> dict[str, Any]:
        """Merge encoded styles from the environment over the defaults.

        Args:
            defaults: Default styles.
            env_var: Name of the environment variable holding overrides.

        """
        if not self.colorize:
            return {}
        result = {name: dict(style) for name, style in defaults.items()}
        if self.environ.get(env_var):
            result.update(coloredlogs.parse_encoded_styles(self.environ[env_var]))
        return result

    def install(self, logger: logging.Logger) -> None:
        """Render the records of a logger with these settings."""
        coloredlogs.install(
            self.log_level,
            logger=logger,
            field_styles=self.styles(LOG_FIELD_STYLES, ENV_FIELD_STYLES),
            fmt=self.fmt,
            isatty=self.colorize,
            level_styles=self.styles(LOG_LEVEL_STYLES, ENV_LEVEL_STYLES),
            stream=self.stream,
        )


def setup_logging(*, debug: int = 0, no_color: bool = False, verbose: bool = False) -> LogSettings:
    """Configure logging for the CLI.

    Keyword Args:
        debug: Debug level (0-2).
        no_color: Disable color.
        verbose: Display verbose logs.

    """
    settings = LogSettings(debug=debug, no_color=no_color, verbose=verbose)
    settings.install(LOGGER)
    if debug > 1:
        for name in TRANSPORT_LOGGERS:
            settings.install(logging.getLogger(name))
        LOGGER.debug("rendering transport logs of %s", ", ".join(TRANSPORT_LOGGERS))
    LOGGER.debug("rundown log level: %s", settings.log_level.name)
    return settings
