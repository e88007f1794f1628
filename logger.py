"""Logging configuration for Bankapp.

Sets up logging to both file (with date-based naming) and console. The console
handler writes to stderr so diagnostics stay out of the interactive menu on stdout.
"""

import logging
import sys
from datetime import date
from config import Config


def setup_logging(config: Config) -> logging.Logger:
    """Set up application logging with file and console handlers.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger("bankapp")
    logger.setLevel(logging.DEBUG)

    # Clear any existing handlers (in case this is called multiple times)
    logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_formatter = logging.Formatter("%(levelname)s - %(message)s")

    # File handler - logs to bankapp-{date}.log
    if config.log_file_enabled:
        config.log_dir.mkdir(parents=True, exist_ok=True)
        log_filename = f"bankapp-{date.today().isoformat()}.log"
        file_handler = logging.FileHandler(config.log_dir / log_filename, delay=True)
        file_handler.setLevel(config.log_level)
        file_handler.setFormatter(detailed_formatter)
        logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(config.console_log_level)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger.

    Returns:
        The bankapp logger instance.
    """
    return logging.getLogger("bankapp")
