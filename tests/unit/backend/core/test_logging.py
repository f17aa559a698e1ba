"""
Unit Tests for Centralized Logging.

Tests the logging configuration, handlers, and source handling.
"""

import logging
from logging.handlers import RotatingFileHandler
from unittest.mock import MagicMock, patch

import pytest

from snipshare.backend.core import logging as logging_module


TEST_CONFIG = {
    "level": "INFO",
    "format": "json",
    "handlers": {
        "console": {"enabled": True},
        "file": {
            "enabled": False,
            "path": "logs/system.jsonl",
            "max_bytes": 1024,
            "backup_count": 1,
        },
    },
}


@pytest.fixture(autouse=True)
def _reset_logging_state():
    """Reset cached config and restore root handlers after each test."""
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level
    logging_module._logging_config = None
    yield
    logging_module._logging_config = None
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if isinstance(handler, RotatingFileHandler):
            handler.close()
    for handler in saved_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(saved_level)


class TestValidSources:
    """Tests for VALID_SOURCES constant."""

    def test_valid_sources_contains_expected_values(self):
        """Should contain all recognized log source values."""
        expected = frozenset({"web", "cli", "mobile", "api", "internal", "unknown"})
        assert logging_module.VALID_SOURCES == expected

    def test_valid_sources_is_frozenset(self):
        """Should be immutable."""
        assert isinstance(logging_module.VALID_SOURCES, frozenset)


class TestLoggingConfigLoading:
    """Tests for logging configuration loading from YAML."""

    def test_reads_real_logging_yaml(self):
        """Should load the project's logging.yaml."""
        config = logging_module._load_logging_config()

        assert "level" in config
        assert set(config["handlers"]) == {"console", "file"}

    def test_config_is_cached(self):
        """Should only read the YAML file once."""
        with patch.object(
            logging_module, "load_yaml_config", return_value=TEST_CONFIG,
        ) as mock_load:
            logging_module._load_logging_config()
            logging_module._load_logging_config()

        mock_load.assert_called_once_with("logging.yaml")

    def test_raises_if_file_missing(self):
        """Should propagate FileNotFoundError."""
        with patch.object(
            logging_module, "load_yaml_config", side_effect=FileNotFoundError("logging.yaml"),
        ):
            with pytest.raises(FileNotFoundError):
                logging_module._load_logging_config()


class TestSetupLogging:
    """Tests for setup_logging handler wiring."""

    def test_sets_level_from_config(self):
        """Should apply the configured level to the root logger."""
        with patch.object(logging_module, "load_yaml_config", return_value=TEST_CONFIG):
            logging_module.setup_logging()

        assert logging.getLogger().level == logging.INFO

    def test_argument_overrides_config_level(self):
        """Explicit level should win over YAML."""
        with patch.object(logging_module, "load_yaml_config", return_value=TEST_CONFIG):
            logging_module.setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_console_handler_added(self):
        """Should install exactly one stream handler when console is enabled."""
        with patch.object(logging_module, "load_yaml_config", return_value=TEST_CONFIG):
            logging_module.setup_logging(format_type="console")

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)

    def test_console_can_be_disabled(self):
        """Should install no handlers when console and file are off."""
        with patch.object(logging_module, "load_yaml_config", return_value=TEST_CONFIG):
            logging_module.setup_logging(enable_console=False)

        assert logging.getLogger().handlers == []

    def test_file_handler_writes_under_project_root(self, tmp_path):
        """Should create a rotating file handler at the resolved path."""
        with patch.object(logging_module, "load_yaml_config", return_value=TEST_CONFIG), \
             patch.object(logging_module, "find_project_root", return_value=tmp_path):
            logging_module.setup_logging(enable_console=False, enable_file_logging=True)

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RotatingFileHandler)
        assert (tmp_path / "logs").is_dir()


class TestLogWithSource:
    """Tests for explicit-source logging."""

    def test_passes_source_to_logger(self):
        """Should call the level method with source bound."""
        logger = MagicMock()

        logging_module.log_with_source(logger, "cli", "info", "Tables created", count=1)

        logger.info.assert_called_once_with("Tables created", source="cli", count=1)

    def test_invalid_level_raises(self):
        """Should raise AttributeError for an unknown level."""
        logger = MagicMock(spec=["info"])

        with pytest.raises(AttributeError):
            logging_module.log_with_source(logger, "cli", "loud", "x")
