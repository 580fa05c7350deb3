import logging

import pytest

from gittown.config import DEFAULT_LOG_LEVEL, Settings, load_settings
from gittown.logging_utils import ROOT_LOGGER_NAME, configure_logging


def test_defaults_from_empty_environment():
    assert load_settings({}) == Settings(browser=None, color=None, log_level=DEFAULT_LOG_LEVEL)


def test_environment_overrides():
    settings = load_settings(
        {"GITTOWN_BROWSER": " firefox ", "NO_COLOR": "1", "GITTOWN_LOG_LEVEL": "DEBUG"}
    )
    assert settings.browser == "firefox"
    assert settings.color is False
    assert settings.log_level == "debug"


def test_invalid_log_level_names_variable():
    with pytest.raises(ValueError, match="GITTOWN_LOG_LEVEL"):
        load_settings({"GITTOWN_LOG_LEVEL": "loud"})


def test_configure_logging_replaces_handlers():
    configure_logging("info")
    logger = configure_logging("debug")
    assert logger.name == ROOT_LOGGER_NAME
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert not logger.propagate
