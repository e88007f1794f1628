from dataclasses import dataclass
from models.transaction_result import FailureReason, TransactionResult


@dataclass
class Account:
    name: str = ""
    account_number: int = 0
    account_type: str = ""  # free text, e.g. "Savings"
    bank_name: str = ""
    ifsc: str = ""  # bank branch code, opaque
    balance: int = 0  # never negative

    def set_details(
        self,
        name: str,
        account_number: int,
        account_type: str,
        bank_name: str,
        ifsc: str,
    ) -> None:
        """Overwrite all identity fields. The balance is left untouched."""
        self.name = name
        self.account_number = account_number
        self.account_type = account_type
        self.bank_name = bank_name
        self.ifsc = ifsc

    def describe(self) -> str:
        """Format every field, including the current balance, one per line."""
        return (
            f"Name: {self.name}\n"
            f"Account Number: {self.account_number}\n"
            f"Type: {self.account_type}\n"
            f"Bank: {self.bank_name}\n"
            f"IFSC: {self.ifsc}\n"
            f"Balance: {self.balance}"
        )

    def deposit(self, amount: int) -> TransactionResult:
        """Add a positive amount to the balance.

        Args:
            amount: Amount to add.

        Returns:
            Successful result, or an INVALID_AMOUNT failure if amount <= 0.
        """
        if amount <= 0:
            return TransactionResult.failure(
                FailureReason.INVALID_AMOUNT,
                "Deposit amount must be greater than zero.",
            )
        self.balance += amount
        return TransactionResult.success()

    def withdraw(self, amount: int) -> TransactionResult:
        """Subtract a positive amount that the balance can cover.

        Args:
            amount: Amount to remove.

        Returns:
            Successful result, an INVALID_AMOUNT failure if amount <= 0, or an
            INSUFFICIENT_FUNDS failure if amount exceeds the balance.
        """
        if amount <= 0:
            return TransactionResult.failure(
                FailureReason.INVALID_AMOUNT,
                "Withdrawal amount must be greater than zero.",
            )
        if amount > self.balance:
            return TransactionResult.failure(
                FailureReason.INSUFFICIENT_FUNDS,
                f"Cannot withdraw {amount} from balance {self.balance}.",
            )
        self.balance -= amount
        return TransactionResult.success()
