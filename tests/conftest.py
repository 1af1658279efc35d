"""Pytest configuration, fixtures, and plugins."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from .factories import cli_runner_factory

if TYPE_CHECKING:
    from collections.abc import Iterator

    from _pytest.config import Config
    from _pytest.fixtures import SubRequest
    from click.testing import CliRunner


def pytest_configure(config: Config) -> None:
    """Configure pytest."""
    config.addinivalue_line(  # cspell:ignore addinivalue
        "markers",
        "cli_runner(charset:='utf-8', env=None, echo_stdin=False): "
        "Pass kwargs to `click.testing.CliRunner` initialization.",
    )


@pytest.fixture()
def cli_runner(request: SubRequest) -> CliRunner:
    """Initialize instance of `click.testing.CliRunner`."""
    return cli_runner_factory(request)


@pytest.fixture()
def cd_tmp_path(tmp_path: Path) -> Iterator[Path]:
    """Change directory to a temporary path.

    Returns:
        Path: Temporary path object.

    """
    prev_dir = Path.cwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(prev_dir)


@pytest.fixture(scope="session", autouse=True)
def sanitize_environment() -> None:
    """Remove variables from the environment that could interfere with tests."""
    env_vars = [
        "CI",
        "DEBUG",
        "GITLAB_CI",
        "RUNDOWN_LOG_FIELD_STYLES",
        "RUNDOWN_LOG_FORMAT",
        "RUNDOWN_LOG_LEVEL_STYLES",
        "RUNDOWN_NO_COLOR",
        "RUNDOWN_SERVER_ADDRESS",
        "RUNDOWN_SERVER_TOKEN",
        "RUNDOWN_WORKSPACE",
        "VERBOSE",
    ]
    for var in env_vars:
        os.environ.pop(var, None)
