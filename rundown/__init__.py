"""Set package version."""

from __future__ import annotations

import logging

from ._logging import LogLevels, RundownLogger  # noqa: F401

logging.setLoggerClass(RundownLogger)

__version__: str = "0.0.0"
"""Version of the Python package presented as a :class:`string`.

Dynamically set upon release by `setuptools_scm`.

"""
