"""Pytest fixtures and plugins."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from unittest.mock import MagicMock

    from pytest_mock import MockerFixture


@pytest.fixture(autouse=True)
def mock_setup_logging(mocker: MockerFixture) -> MagicMock:
    """Keep CLI tests from installing log handlers on the captured stream."""
    return mocker.patch("rundown._cli.main.setup_logging")
