"""Interactive bank menu."""

from cli.input_source import InputSource
from services.base import Services
from logger import get_logger

logger = get_logger()

MENU_OPTIONS = [
    "1. Enter Account Details",
    "2. Deposit Money",
    "3. Withdraw Money",
    "4. Display Account Details",
    "5. Exit",
]

EXIT_CHOICE = 5


class BankMenu:
    """Menu loop dispatching numbered choices against the session's account.

    Args:
        input_source: Where choices and field values are read from.
        services: Services container owning the account and transaction handler.
    """

    def __init__(self, input_source: InputSource, services: Services):
        self.input_source = input_source
        self.services = services
        self.title = services.config.menu_title
        self._handlers = {
            1: self.handle_account_details,
            2: self.handle_deposit,
            3: self.handle_withdrawal,
            4: self.handle_display_details,
        }

    def show_menu(self) -> None:
        print(f"\n--- {self.title} ---")
        for option in MENU_OPTIONS:
            print(option)

    def run(self) -> int:
        """Run the menu until the user exits or input runs out.

        Returns:
            Number of menu iterations processed, including the final one.
        """
        iterations = 0
        while True:
            iterations += 1
            try:
                self.show_menu()
                choice = self.input_source.read_int("Choose an option:")
                logger.debug(f"Menu choice: {choice}")

                if choice == EXIT_CHOICE:
                    print("Exiting...")
                    return iterations

                handler = self._handlers.get(choice)
                if handler is None:
                    print("Invalid choice. Please try again.")
                    continue
                handler()
            except (EOFError, KeyboardInterrupt):
                # No further choice can be read
                logger.info("Input closed, leaving menu")
                print("Exiting...")
                return iterations
            except Exception as e:
                logger.info(f"Recovered from menu error: {e}", exc_info=True)
                print(f"An unexpected error occurred: {e}")

    def handle_account_details(self) -> None:
        name = self.input_source.read_string("Enter Name:")
        account_number = self.input_source.read_int("Enter Account Number:")
        account_type = self.input_source.read_string("Enter Account Type:")
        bank_name = self.input_source.read_string("Enter Bank Name:")
        ifsc = self.input_source.read_string("Enter IFSC:")

        self.services.account.set_details(
            name, account_number, account_type, bank_name, ifsc
        )
        logger.info(f"Account details updated for account {account_number}")
        print("Account details saved successfully.")

    def handle_deposit(self) -> None:
        amount = self.input_source.read_int("Enter Deposit Amount:")
        transactions = self.services.transactions
        transactions.deposit(amount)
        print(f"Deposit successful. New Balance: {transactions.get_balance()}")

    def handle_withdrawal(self) -> None:
        amount = self.input_source.read_int("Enter Withdrawal Amount:")
        transactions = self.services.transactions
        if transactions.withdraw(amount):
            print(
                f"Withdrawal successful. Remaining Balance: {transactions.get_balance()}"
            )
        else:
            print("Insufficient balance. Transaction failed.")

    def handle_display_details(self) -> None:
        print(self.services.account.describe())
