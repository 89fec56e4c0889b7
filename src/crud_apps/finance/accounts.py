"""
Accounts and their balance policies.

Two policies coexist on purpose:
- Account debits unconditionally and may go negative.
- SavingsAccount refuses any transaction larger than the current balance.
"""

import logging
from decimal import Decimal

from crud_apps.core.formatting import format_currency
from crud_apps.finance.models import Transaction

logger = logging.getLogger(__name__)

INSUFFICIENT_FUNDS_MESSAGE = "Insufficient funds for this transaction."


class Account:

    def __init__(self, account_number: str, initial_balance: Decimal, currency_symbol: str = "$"):
        self._account_number = account_number
        self._balance = Decimal(initial_balance)
        self.currency_symbol = currency_symbol

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def balance(self) -> Decimal:
        return self._balance

    def apply_transaction(self, transaction: Transaction) -> bool:
        """Debit the transaction amount. Always applied, even below zero."""
        self._balance -= transaction.amount
        logger.debug(f"{self.account_number}: debited {transaction.amount}, balance {self._balance}")
        return True


class SavingsAccount(Account):

    def apply_transaction(self, transaction: Transaction) -> bool:
        """
        Debit the transaction amount unless it exceeds the balance.

        Rejection is reported on the console and leaves the balance unchanged.

        Returns:
            True if the transaction was applied
        """
        if transaction.amount > self._balance:
            logger.info(f"{self.account_number}: rejected transaction {transaction.id} ({transaction.amount} > {self._balance})")
            print(INSUFFICIENT_FUNDS_MESSAGE)
            return False

        self._balance -= transaction.amount
        print(f"Transaction successful. New balance: {format_currency(self._balance, self.currency_symbol)}")
        return True
