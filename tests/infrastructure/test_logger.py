#!/usr/bin/env python3
"""Tests for the Logger module."""

import io
import logging
import logging.handlers
import threading

import pytest

from resfilter.infrastructure.config_manager import ConfigError, ConfigManager
from resfilter.infrastructure.logger import (
    LogLevel,
    Logger,
    configure_logger,
    get_logger,
    set_global_logger,
)


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def logger(stream):
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    return Logger(name="resfilter.test.logger", level=LogLevel.DEBUG, handlers=[handler])


class TestLogLevel:
    """Tests for LogLevel enum."""

    def test_log_levels(self):
        """Test log level values match Python logging."""
        assert LogLevel.DEBUG == logging.DEBUG
        assert LogLevel.INFO == logging.INFO
        assert LogLevel.WARNING == logging.WARNING
        assert LogLevel.ERROR == logging.ERROR
        assert LogLevel.CRITICAL == logging.CRITICAL


class TestLogger:
    """Tests for Logger."""

    def test_levels(self, logger, stream):
        """Test each level method writes a record."""
        logger.debug("d")
        logger.info("i")
        logger.warning("w")
        logger.error("e")
        assert stream.getvalue().splitlines() == ["DEBUG d", "INFO i", "WARNING w", "ERROR e"]

    def test_context_formatting(self, logger, stream):
        """Test keyword context is appended to the message."""
        logger.info("Built filter", name="sources", steps=2)
        assert stream.getvalue().strip() == "INFO Built filter | name=sources steps=2"

    def test_add_context(self, logger, stream):
        """Test pushed context applies inside the block only."""
        with logger.add_context(filter="dotfiles"):
            logger.info("inside")
        logger.info("outside")
        assert stream.getvalue().splitlines() == [
            "INFO inside | filter=dotfiles",
            "INFO outside",
        ]

    def test_nested_context(self, logger, stream):
        """Test nested context merges and inner keys win."""
        with logger.add_context(a=1, b=1):
            with logger.add_context(b=2):
                logger.info("msg")
        assert stream.getvalue().strip() == "INFO msg | a=1 b=2"

    def test_context_is_thread_local(self, logger, stream):
        """Test context pushed in one thread is invisible to another."""
        with logger.add_context(owner="main"):
            thread = threading.Thread(target=logger.info, args=("worker",))
            thread.start()
            thread.join()
        assert stream.getvalue().strip() == "INFO worker"

    def test_level_filtering(self, logger, stream):
        """Test messages below the level are dropped."""
        logger.set_level("warning")
        logger.info("hidden")
        logger.warning("shown")
        assert stream.getvalue().strip() == "WARNING shown"
        assert logger.get_level() == LogLevel.WARNING
        assert not logger.is_enabled_for("info")
        assert logger.is_enabled_for(LogLevel.ERROR)

    def test_exception(self, logger, stream):
        """Test exceptions are logged with type and traceback."""
        try:
            raise ValueError("boom")
        except ValueError as e:
            logger.exception("failed", e)
        output = stream.getvalue()
        assert "exception_type=ValueError" in output
        assert "Traceback" in output

    def test_string_level(self):
        """Test constructing with a level name."""
        assert Logger(name="resfilter.test.str", level="error", handlers=[]).get_level() == LogLevel.ERROR

    def test_no_propagation(self, logger):
        """Test records do not reach the root logger."""
        assert logger.logger.propagate is False

    def test_file_handler(self, logger, temp_dir):
        """Test rotating file handler output."""
        handler = logger.create_file_handler(temp_dir / "resfilter.log")
        logger.add_handler(handler)
        logger.info("to file", key="v")
        handler.flush()
        logger.remove_handler(handler)
        handler.close()
        assert "to file | key=v" in (temp_dir / "resfilter.log").read_text()


class TestGlobalLogger:
    """Tests for the global logger helpers."""

    def test_get_logger_reuses_instance(self):
        """Test the same name returns the same logger."""
        assert get_logger("resfilter.test.global") is get_logger("resfilter.test.global")

    def test_set_global_logger(self, logger):
        """Test installing a logger."""
        set_global_logger(logger)
        assert get_logger("resfilter.test.logger") is logger

    def test_configure_logger(self, temp_dir):
        """Test configuring from the logging config section."""
        config = ConfigManager()
        config.set("resfilter.logging.level", "DEBUG")
        config.set("resfilter.logging.file", str(temp_dir / "out.log"))

        configured = configure_logger(config, name="resfilter.test.configured")

        assert configured.get_level() == LogLevel.DEBUG
        assert get_logger("resfilter.test.configured") is configured
        assert any(
            isinstance(h, logging.handlers.RotatingFileHandler) for h in configured.logger.handlers
        )
        for handler in configured.logger.handlers:
            handler.close()

    def test_configure_logger_defaults(self):
        """Test the default level comes from compiled defaults."""
        configured = configure_logger(ConfigManager(), name="resfilter.test.defaults")
        assert configured.get_level() == LogLevel.INFO

    @pytest.mark.parametrize("level", ["warn", "verbose", 15, ["DEBUG"]])
    def test_configure_logger_invalid_level(self, level):
        """Test unknown levels raise ConfigError."""
        config = ConfigManager()
        config.set("resfilter.logging.level", level)
        with pytest.raises(ConfigError, match="Invalid log level"):
            configure_logger(config, name="resfilter.test.invalid")

    def test_configure_logger_numeric_level(self):
        """Test numeric levels, as parsed from the environment."""
        config = ConfigManager()
        config.set("resfilter.logging.level", 30)
        assert configure_logger(config, name="resfilter.test.numeric").get_level() == LogLevel.WARNING

    def test_reconfigure_closes_file_handler(self, temp_dir):
        """Test configuring again closes the previous file handler."""
        config = ConfigManager()
        config.set("resfilter.logging.file", str(temp_dir / "first.log"))
        first = configure_logger(config, name="resfilter.test.reconfigure")
        file_handler = next(
            h for h in first.logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)
        )
        assert file_handler.stream is not None

        config.set("resfilter.logging.file", None)
        second = configure_logger(config, name="resfilter.test.reconfigure")

        assert file_handler.stream is None
        assert file_handler not in second.logger.handlers
        for handler in second.logger.handlers:
            handler.close()
