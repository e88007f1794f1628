"""Shared pytest fixtures for all tests."""

import logging

import pytest

from config import Config
from logger import get_logger
from models.account import Account
from services.base import Services


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "bankapp",
        log_level="DEBUG",
        console_log_level="CRITICAL",
        log_dir=tmp_path / "bankapp" / "logs",
        log_file_enabled=False,
        menu_title="Bank Menu",
    )


@pytest.fixture
def account():
    """Create a fresh account with zero balance."""
    return Account()


@pytest.fixture
def services(test_config, account):
    """Create a Services container around the fresh account.

    Args:
        test_config: Test configuration fixture.
        account: Account fixture.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, account=account)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop any handlers a test attached to the bankapp logger."""
    yield
    logger = get_logger()
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
