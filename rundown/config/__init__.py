"""Rundown config."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from ..exceptions import ConfigNotFound
from .models import RundownConfigDefinitionModel, RundownServerDefinitionModel

LOGGER = logging.getLogger(__name__)

ENV_SERVER_ADDRESS = "RUNDOWN_SERVER_ADDRESS"
ENV_SERVER_TOKEN = "RUNDOWN_SERVER_TOKEN"
ENV_WORKSPACE = "RUNDOWN_WORKSPACE"


class RundownConfig:
    """Python representation of a Rundown config file."""

    ACCEPTED_NAMES = ["rundown.yml", "rundown.yaml"]

    applications: list[str]
    file_path: Path
    project: str
    server: RundownServerDefinitionModel
    workspace: str

    def __init__(self, data: RundownConfigDefinitionModel, *, path: Path | None = None) -> None:
        """Instantiate class.

        Args:
            data: The data model of the config file.
            path: Path to the config file.

        """
        self._data = data.model_copy()
        self.file_path = path.resolve() if path else Path.cwd()
        self.applications = list(self._data.applications)
        self.project = self._data.project
        self.server = self._data.server
        self.workspace = self._data.workspace

    def apply_environ(self, environ: Mapping[str, str]) -> None:
        """Override values with those found in the environment.

        Args:
            environ: Environment variables (e.g. ``os.environ``).

        """
        overrides: dict[str, Any] = {}
        if environ.get(ENV_SERVER_ADDRESS):
            overrides["address"] = environ[ENV_SERVER_ADDRESS]
        if environ.get(ENV_SERVER_TOKEN):
            overrides["token"] = environ[ENV_SERVER_TOKEN]
        if overrides:
            LOGGER.debug("server settings overridden from environment: %s", sorted(overrides))
            self.server = RundownServerDefinitionModel.model_validate(
                {**self.server.model_dump(), **overrides}
            )
        if environ.get(ENV_WORKSPACE):
            self.workspace = environ[ENV_WORKSPACE]

    @classmethod
    def find_config_file(cls, path: Path) -> Path:
        """Find a config file in the provided path.

        Args:
            path: The path to search for a config file.

        Raises:
            ConfigNotFound: Could not find a config file in the provided path.
            ValueError: More than one config file found in the provided path.

        """
        match = list(path.glob("rundown.y*"))
        if not match or all(f.name not in cls.ACCEPTED_NAMES for f in match):
            match = list(path.parent.glob("rundown.y*"))
        found = [f for f in match if f.is_file() and f.name in cls.ACCEPTED_NAMES]
        if not found:
            raise ConfigNotFound(looking_for=cls.ACCEPTED_NAMES, path=path)
        if len(found) != 1:
            raise ValueError(f"more than one config files found: {found}")
        return found[0]

    @classmethod
    def parse_file(
        cls,
        *,
        path: Path | None = None,
        file_path: Path | None = None,
    ) -> RundownConfig:
        """Parse a YAML file to create a config object.

        Args:
            path: The path to search for a config file.
            file_path: Exact path to a file to parse.

        Raises:
            ConfigNotFound: Provided config file was not found.
            ValueError: path and file_path were both excluded.

        """
        if file_path:
            if not file_path.is_file():
                raise ConfigNotFound(path=file_path)
            return cls.parse_obj(yaml.safe_load(file_path.read_text()), path=file_path)
        if path:
            return cls.parse_file(file_path=cls.find_config_file(path))
        raise ValueError("must provide path or file_path")

    @classmethod
    def parse_obj(cls, obj: Any, *, path: Path | None = None) -> RundownConfig:
        """Parse a python object into a config object.

        Args:
            obj: The object to be parsed.
            path: Path to the file the object was parsed from.

        """
        return cls(RundownConfigDefinitionModel.model_validate(obj), path=path)
