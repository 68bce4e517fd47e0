"""Tests for sdkran.utils.logging."""

import logging
import os
import sys
from unittest.mock import patch

import pytest

from sdkran.utils.constants import LOG_LEVEL_ENV_VAR
from sdkran.utils import logging as sdkran_logging
from sdkran.utils.logging import resolve_level, setup_logging


class TestResolveLevel:
    """Tests for resolve_level()."""

    def test_defaults_to_warning(self):
        with patch.dict(os.environ, {}, clear=True):
            assert resolve_level() == logging.WARNING

    def test_reads_env_var(self):
        with patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "debug"}):
            assert resolve_level() == logging.DEBUG

    def test_explicit_name_wins_over_env(self):
        with patch.dict(os.environ, {LOG_LEVEL_ENV_VAR: "debug"}):
            assert resolve_level("error") == logging.ERROR

    def test_numeric_level_passed_through(self):
        assert resolve_level(15) == 15

    def test_unknown_name_falls_back_to_warning(self):
        assert resolve_level("chatty") == logging.WARNING


class TestSetupLogging:
    """Tests for setup_logging()."""

    @pytest.fixture(autouse=True)
    def restore_package_logger(self, monkeypatch):
        monkeypatch.setattr(sdkran_logging, "_handler", None)
        logger = logging.getLogger("sdkran")
        level, handlers = logger.level, list(logger.handlers)
        yield
        logger.setLevel(level)
        logger.handlers[:] = handlers

    def test_handler_added_once(self):
        """Repeated setup does not stack handlers."""
        logger = setup_logging("info")
        count = len(logger.handlers)

        setup_logging("debug")

        assert len(logger.handlers) == count
        assert logger.level == logging.DEBUG

    def test_handler_writes_to_stderr(self):
        """The package handler is a plain stderr StreamHandler."""
        logger = setup_logging()

        assert sdkran_logging._handler in logger.handlers
        assert isinstance(sdkran_logging._handler, logging.StreamHandler)
        assert sdkran_logging._handler.stream is sys.stderr

    def test_configures_package_logger(self):
        logger = setup_logging("warning")

        assert logger.name == "sdkran"
        assert logging.getLogger("sdkran.version").getEffectiveLevel() == logging.WARNING
