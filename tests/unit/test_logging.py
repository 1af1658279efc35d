"""Test rundown._logging."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from rundown._logging import LogLevels, PrefixAdaptor, RundownLogger

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


class TestPrefixAdaptor:
    """Test PrefixAdaptor."""

    def test_process(self) -> None:
        """Test process."""
        obj = PrefixAdaptor("web", logging.getLogger("rundown.test"))
        assert obj.process("msg", {"a": 1}) == ("web:msg", {"a": 1})

    def test_verbose(self, mocker: MockerFixture) -> None:
        """Test verbose."""
        obj = PrefixAdaptor("web", logging.getLogger("rundown.test"))
        mock_log = mocker.patch.object(obj, "log")
        obj.verbose("msg %s", "arg")
        mock_log.assert_called_once_with(LogLevels.VERBOSE, "msg %s", "arg")


class TestRundownLogger:
    """Test RundownLogger."""

    def test_logger_class(self) -> None:
        """Test loggers created by the package use RundownLogger."""
        assert isinstance(logging.getLogger("rundown.core"), RundownLogger)

    @pytest.mark.parametrize("level", ["notice", "success", "verbose"])
    def test_custom_levels(self, caplog: pytest.LogCaptureFixture, level: str) -> None:
        """Test methods for custom levels."""
        logger = RundownLogger("rundown.test.custom")
        caplog.set_level(LogLevels.VERBOSE)
        logger.addHandler(caplog.handler)
        try:
            getattr(logger, level)("msg %s", "arg")
        finally:
            logger.removeHandler(caplog.handler)
        assert caplog.records[-1].levelname == level.upper()
        assert caplog.records[-1].getMessage() == "msg arg"
