"""Transaction service wrapping deposits and withdrawals on the account."""

from models.account import Account
from logger import get_logger

logger = get_logger()


class TransactionHandler:
    """Service for moving money in and out of the account.

    Invalid amounts are reported to the user here and never reach the caller
    as a failure value.
    """

    def __init__(self, account: Account):
        """Initialize the transaction handler.

        Args:
            account: The account whose balance this handler changes.
        """
        self.account = account

    def deposit(self, amount: int) -> None:
        """Deposit into the account, printing an error for invalid amounts.

        Args:
            amount: Amount to deposit.
        """
        result = self.account.deposit(amount)
        if result.is_invalid_amount:
            logger.warning(f"Rejected deposit of {amount}: {result.message}")
            print(f"Error: {result.message}")
            return

        logger.info(f"Deposited {amount}, balance now {self.account.balance}")

    def withdraw(self, amount: int) -> bool:
        """Withdraw from the account.

        Args:
            amount: Amount to withdraw.

        Returns:
            True if the balance was reduced, False for an invalid amount
            (after printing an error) or insufficient funds.
        """
        result = self.account.withdraw(amount)
        if result.is_invalid_amount:
            logger.warning(f"Rejected withdrawal of {amount}: {result.message}")
            print(f"Error: {result.message}")
            return False

        if not result:
            logger.info(f"Withdrawal of {amount} declined: {result.message}")
            return False

        logger.info(f"Withdrew {amount}, balance now {self.account.balance}")
        return True

    def get_balance(self) -> int:
        return self.account.balance
