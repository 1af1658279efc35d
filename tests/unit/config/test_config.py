"""Test rundown.config."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import yaml

from rundown.config import RundownConfig
from rundown.exceptions import ConfigNotFound

if TYPE_CHECKING:
    from pathlib import Path


MODULE = "rundown.config"


class TestRundownConfig:
    """Test rundown.config.RundownConfig."""

    def test___init__(self, config_data: dict[str, Any]) -> None:
        """Test __init__."""
        obj = RundownConfig.parse_obj(config_data)
        assert obj.applications == ["web", "worker"]
        assert obj.project == "test-project"
        assert obj.server.address == "https://directory.example.com"
        assert obj.server.token is None
        assert obj.workspace == "default"

    def test_apply_environ(self, rundown_config: RundownConfig) -> None:
        """Test apply_environ."""
        rundown_config.apply_environ(
            {
                "RUNDOWN_SERVER_ADDRESS": "http://localhost:9701/",
                "RUNDOWN_SERVER_TOKEN": "secret",
                "RUNDOWN_WORKSPACE": "staging",
            }
        )
        assert rundown_config.server.address == "http://localhost:9701"
        assert rundown_config.server.token == "secret"
        assert rundown_config.workspace == "staging"

    def test_apply_environ_empty(self, rundown_config: RundownConfig) -> None:
        """Test apply_environ with nothing to override."""
        server = rundown_config.server
        rundown_config.apply_environ({"RUNDOWN_SERVER_TOKEN": ""})
        assert rundown_config.server is server
        assert rundown_config.workspace == "default"

    def test_find_config_file_yaml(self, tmp_path: Path) -> None:
        """Test file_config_file rundown.yaml."""
        rundown_yaml = tmp_path / "rundown.yaml"
        rundown_yaml.touch()
        assert RundownConfig.find_config_file(tmp_path) == rundown_yaml

    def test_find_config_file_yml(self, tmp_path: Path) -> None:
        """Test file_config_file rundown.yml."""
        rundown_yml = tmp_path / "rundown.yml"
        rundown_yml.touch()
        assert RundownConfig.find_config_file(tmp_path) == rundown_yml

    def test_find_config_file_parent(self, tmp_path: Path) -> None:
        """Test file_config_file in parent directory."""
        rundown_yml = tmp_path / "rundown.yml"
        rundown_yml.touch()
        child = tmp_path / "child"
        child.mkdir()
        assert RundownConfig.find_config_file(child) == rundown_yml

    def test_find_config_file_not_found(self, tmp_path: Path) -> None:
        """Test file_config_file raise ConfigNotFound."""
        with pytest.raises(ConfigNotFound) as excinfo:
            RundownConfig.find_config_file(tmp_path)
        assert excinfo.value.path == tmp_path
        assert excinfo.value.looking_for == RundownConfig.ACCEPTED_NAMES

    def test_find_config_file_value_error(self, tmp_path: Path) -> None:
        """Test file_config_file raise ValueError."""
        (tmp_path / "rundown.yaml").touch()
        (tmp_path / "rundown.yml").touch()
        with pytest.raises(ValueError, match="more than one"):
            RundownConfig.find_config_file(tmp_path)

    def test_parse_file_file_path(self, config_data: dict[str, Any], tmp_path: Path) -> None:
        """Test parse_file with file_path."""
        config_path = tmp_path / "rundown.yml"
        config_path.write_text(yaml.safe_dump(config_data))
        obj = RundownConfig.parse_file(file_path=config_path)
        assert obj.file_path == config_path.resolve()
        assert obj.project == "test-project"

    def test_parse_file_file_path_missing(self, tmp_path: Path) -> None:
        """Test parse_file with file_path missing."""
        config_path = tmp_path / "rundown.yml"
        with pytest.raises(ConfigNotFound) as excinfo:
            RundownConfig.parse_file(file_path=config_path)
        assert excinfo.value.path == config_path

    def test_parse_file_path(self, config_file: Path) -> None:
        """Test parse_file with path."""
        obj = RundownConfig.parse_file(path=config_file.parent)
        assert obj.file_path == config_file.resolve()

    def test_parse_file_value_error(self) -> None:
        """Test parse_file raise ValueError."""
        with pytest.raises(ValueError, match="must provide path or file_path"):
            RundownConfig.parse_file()
