"""Pytest fixtures and plugins."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import yaml

from rundown.config import RundownConfig
from rundown.core.components import ApplicationRef, WorkspaceRef, WorkspaceScope

from .factories import MockDirectoryClient

if TYPE_CHECKING:
    from pathlib import Path

PROJECT = "test-project"


@pytest.fixture
def config_data() -> dict[str, Any]:
    """Contents of a valid config file."""
    return {
        "project": PROJECT,
        "applications": ["web", "worker"],
        "server": {"address": "https://directory.example.com"},
    }


@pytest.fixture
def config_file(cd_tmp_path: Path, config_data: dict[str, Any]) -> Path:
    """Write a config file to the current working directory."""
    path = cd_tmp_path / "rundown.yml"
    path.write_text(yaml.safe_dump(config_data))
    return path


@pytest.fixture
def rundown_config(config_data: dict[str, Any]) -> RundownConfig:
    """Create a config object."""
    return RundownConfig.parse_obj(config_data)


@pytest.fixture
def directory_client() -> MockDirectoryClient:
    """Create an in-memory deployment directory."""
    return MockDirectoryClient()


@pytest.fixture
def scope() -> WorkspaceScope:
    """Scope containing two applications."""
    return WorkspaceScope(
        workspace=WorkspaceRef(workspace="default"),
        applications=(
            ApplicationRef(project=PROJECT, application="web"),
            ApplicationRef(project=PROJECT, application="worker"),
        ),
    )
