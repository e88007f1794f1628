#!/usr/bin/env python3
"""
Bankapp CLI - Interactive console for a single bank account.

Usage:
    python -m cli

The program takes no options. It shows a numbered menu on standard output:
    1. Enter Account Details
    2. Deposit Money
    3. Withdraw Money
    4. Display Account Details
    5. Exit

Account data lives only for the duration of the session.
"""

import argparse
import dataclasses
from cli.input_source import ConsoleInput
from cli.menu import BankMenu
from config import Config, ConfigError, load_config
from services.base import Services
from logger import setup_logging, get_logger


def _load_settings() -> Config:
    """Load configuration, falling back to defaults without file logging."""
    try:
        return load_config()
    except (ConfigError, OSError) as e:
        print(f"Warning: {e}. Using default settings.")
        return dataclasses.replace(Config.default(), log_file_enabled=False)


def _start_logging(config: Config) -> Config:
    """Set up logging, retrying with default levels and no log file on failure.

    Returns:
        The config actually used for logging.
    """
    try:
        setup_logging(config)
        return config
    except (ValueError, OSError) as e:
        print(f"Warning: {e}. Using default logging settings.")
        defaults = Config.default()
        config = dataclasses.replace(
            config,
            log_level=defaults.log_level,
            console_log_level=defaults.console_log_level,
            log_file_enabled=False,
        )
        setup_logging(config)
        return config


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="bankapp",
        description="Bankapp - Manage a single bank account for one session",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # Only -h is honoured; anything else on the command line is ignored
    parser.parse_known_args()

    try:
        config = _start_logging(_load_settings())
        get_logger().info("Starting bank menu")

        # Create services container for dependency injection
        services = Services(config)
        menu = BankMenu(ConsoleInput(), services)
        iterations = menu.run()

        get_logger().info(f"Bank menu closed after {iterations} iteration(s)")
    except Exception as e:
        print(f"An unexpected error occurred during application execution: {e}")


if __name__ == "__main__":
    main()
