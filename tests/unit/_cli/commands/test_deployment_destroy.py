"""Test ``rundown deployment destroy``."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from rundown._cli.main import cli
from rundown._cli.utils import CliContext
from rundown.core.components import LifecycleState
from rundown.exceptions import TransportError

from ...factories import MockDirectoryClient, make_deployment

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import CliRunner
    from pytest_mock import MockerFixture


@pytest.fixture
def patched_client(
    config_file: Path, mocker: MockerFixture  # noqa: ARG001
) -> MockDirectoryClient:
    """Replace the HTTP client with an in-memory directory."""
    client = MockDirectoryClient(
        deployments=[
            make_deployment("d1"),
            make_deployment("d2", lifecycle_state=LifecycleState.ERROR),
        ],
        listings={
            "web": [make_deployment("web-2"), make_deployment("web-1")],
            "worker": [make_deployment("worker-1", application="worker")],
        },
    )
    mocker.patch.object(CliContext, "directory_client", client)
    return client


def test_destroy_ids(
    caplog: pytest.LogCaptureFixture, cli_runner: CliRunner, patched_client: MockDirectoryClient
) -> None:
    """Test destroy with IDs does not prompt and skips ineligible deployments."""
    caplog.set_level(logging.INFO, logger="rundown")
    result = cli_runner.invoke(cli, ["deployment", "destroy", "d1", "d2"])
    assert result.exit_code == 0
    assert "Proceed?" not in result.output
    assert patched_client.calls == [
        ("get_deployment", "d1"),
        ("get_deployment", "d2"),
        ("destroy_deploy", "d1"),
    ]
    assert "2 deployments will be destroyed" in caplog.messages


def test_destroy_ids_not_found(
    caplog: pytest.LogCaptureFixture, cli_runner: CliRunner, patched_client: MockDirectoryClient
) -> None:
    """Test destroy with an ID that does not exist."""
    caplog.set_level(logging.ERROR, logger="rundown")
    result = cli_runner.invoke(cli, ["deployment", "destroy", "missing", "d1"])
    assert result.exit_code == 1
    assert patched_client.calls == [("get_deployment", "missing")]
    assert "deployment not found: missing" in caplog.messages


def test_destroy_all_confirmed(
    cli_runner: CliRunner, patched_client: MockDirectoryClient
) -> None:
    """Test destroy without IDs prompts and destroys everything when confirmed."""
    result = cli_runner.invoke(cli, ["deployment", "destroy"], input="y\n")
    assert result.exit_code == 0
    assert "irrecoverably DESTROYED" in result.output
    assert 'web, worker in workspace "default"' in result.output
    assert patched_client.destroyed == ["web-2", "web-1", "worker-1"]


def test_destroy_all_declined(cli_runner: CliRunner, patched_client: MockDirectoryClient) -> None:
    """Test destroy without IDs makes no calls when the prompt is declined."""
    result = cli_runner.invoke(cli, ["deployment", "destroy"], input="n\n")
    assert result.exit_code == 0
    assert not patched_client.calls


@pytest.mark.parametrize("flag", ["--force", "--ci"])
def test_destroy_all_force(
    cli_runner: CliRunner, flag: str, patched_client: MockDirectoryClient
) -> None:
    """Test destroy without IDs does not prompt when forced."""
    result = cli_runner.invoke(cli, ["deployment", "destroy", flag])
    assert result.exit_code == 0
    assert "Proceed?" not in result.output
    assert patched_client.destroyed == ["web-2", "web-1", "worker-1"]


def test_destroy_all_env_ci(cli_runner: CliRunner, patched_client: MockDirectoryClient) -> None:
    """Test destroy without IDs does not prompt when CI is set."""
    result = cli_runner.invoke(cli, ["deployment", "destroy"], env={"CI": "1"})
    assert result.exit_code == 0
    assert "Proceed?" not in result.output
    assert patched_client.destroyed == ["web-2", "web-1", "worker-1"]


def test_destroy_app(cli_runner: CliRunner, patched_client: MockDirectoryClient) -> None:
    """Test destroy restricted to a single application."""
    result = cli_runner.invoke(
        cli, ["deployment", "destroy", "--app", "worker", "-w", "staging", "--force"]
    )
    assert result.exit_code == 0
    assert [call[:3] for call in patched_client.calls] == [
        ("list_deployments", "worker", "staging"),
        ("destroy_deploy", "worker-1"),
    ]


def test_destroy_app_unknown(
    caplog: pytest.LogCaptureFixture, cli_runner: CliRunner, patched_client: MockDirectoryClient
) -> None:
    """Test destroy with an application that is not in the config."""
    caplog.set_level(logging.ERROR, logger="rundown")
    result = cli_runner.invoke(cli, ["deployment", "destroy", "--app", "api", "--force"])
    assert result.exit_code == 1
    assert not patched_client.calls
    assert "application \"api\" is not defined; choose from ['web', 'worker']" in caplog.messages


def test_destroy_failed(
    caplog: pytest.LogCaptureFixture, cli_runner: CliRunner, patched_client: MockDirectoryClient
) -> None:
    """Test destroy exits 1 and stops at the first failure."""
    caplog.set_level(logging.ERROR, logger="rundown")
    patched_client.destroy_errors = {"web-1": TransportError("boom", status_code=500)}
    result = cli_runner.invoke(cli, ["deployment", "destroy", "--force"])
    assert result.exit_code == 1
    assert patched_client.destroyed == ["web-2", "web-1"]
    assert "error destroying the deployment: boom" in caplog.messages


def test_destroy_no_config(cd_tmp_path: Path, cli_runner: CliRunner) -> None:  # noqa: ARG001
    """Test destroy when there is no config file."""
    result = cli_runner.invoke(cli, ["deployment", "destroy", "d1"])
    assert result.exit_code == 1


def test_destroy_invalid_yaml(
    caplog: pytest.LogCaptureFixture, cd_tmp_path: Path, cli_runner: CliRunner
) -> None:
    """Test destroy when the config file can't be parsed."""
    caplog.set_level(logging.ERROR, logger="rundown")
    (cd_tmp_path / "rundown.yml").write_text("project: [unclosed\n")
    result = cli_runner.invoke(cli, ["deployment", "destroy", "d1"])
    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert caplog.messages[0].startswith("config file is not valid YAML: ")
