"""Base services container for dependency injection."""

from typing import Optional
from config import Config
from models.account import Account
from services.transactions import TransactionHandler


class Services:
    """Container for all application services.

    This class owns the session's single account and makes it easy to inject
    a prepared account for testing.

    Args:
        config: Application configuration object.
        account: Optional account for testing. If None, a blank account is created.
    """

    def __init__(self, config: Config, account: Optional[Account] = None):
        """Initialize services with configuration.

        Args:
            config: Config object containing application configuration.
            account: Optional account for dependency injection (testing).
        """
        self.config = config
        self.account = account if account is not None else Account()
        self.transactions = TransactionHandler(self.account)
