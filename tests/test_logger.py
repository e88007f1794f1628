import dataclasses
import logging
from datetime import date

from logger import setup_logging, get_logger


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_file_and_console_handlers(self, test_config):
        """Test that enabling file logging adds a dated file handler."""
        config = dataclasses.replace(test_config, log_file_enabled=True)

        logger = setup_logging(config)
        logger.info("menu started")
        for handler in logger.handlers:
            handler.flush()

        log_file = config.log_dir / f"bankapp-{date.today().isoformat()}.log"
        assert log_file.exists()
        assert "menu started" in log_file.read_text()
        assert len(logger.handlers) == 2

    def test_console_only(self, test_config):
        """Test that disabling file logging leaves only the stderr handler."""
        logger = setup_logging(test_config)

        assert len(logger.handlers) == 1
        assert type(logger.handlers[0]) is logging.StreamHandler
        assert not test_config.log_dir.exists()

    def test_repeated_setup_does_not_stack_handlers(self, test_config):
        """Test that calling setup twice replaces the handlers."""
        setup_logging(test_config)
        logger = setup_logging(test_config)

        assert len(logger.handlers) == 1

    def test_get_logger_returns_named_logger(self):
        """Test that get_logger returns the shared bankapp logger."""
        assert get_logger() is logging.getLogger("bankapp")
