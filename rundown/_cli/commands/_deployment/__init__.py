"""``rundown deployment`` command group."""

from __future__ import annotations

from typing import Any

import click

from ... import options
from ._destroy import destroy

__all__ = ["destroy"]

COMMANDS: list[click.Command] = [destroy]


@click.group("deployment", short_help="deployment (destroy)")
@options.debug
@options.no_color
@options.verbose
def deployment(**_: Any) -> None:
    """Manage the deployments of the project's applications."""


for cmd in COMMANDS:  # register commands
    deployment.add_command(cmd)
