"""
Transaction processors - one per payment channel.

A processor only announces the transaction on the console; applying it to
an account balance is the account's job.
"""

from abc import ABC, abstractmethod

from crud_apps.core.formatting import format_currency
from crud_apps.finance.models import Transaction


class TransactionProcessor(ABC):
    """Abstract base class for payment channels"""

    channel: str = ""

    def __init__(self, currency_symbol: str = "$"):
        self.currency_symbol = currency_symbol

    def describe(self, transaction: Transaction) -> str:
        amount = format_currency(transaction.amount, self.currency_symbol)
        return f"[{self.channel}] {transaction.category} - Amount: {amount}"

    @abstractmethod
    def process(self, transaction: Transaction) -> None:
        pass


class BankTransferProcessor(TransactionProcessor):
    channel = "Bank Transfer"

    def process(self, transaction: Transaction) -> None:
        print(self.describe(transaction))


class MobileMoneyProcessor(TransactionProcessor):
    channel = "Mobile Money"

    def process(self, transaction: Transaction) -> None:
        print(self.describe(transaction))


class CryptoWalletProcessor(TransactionProcessor):
    channel = "Crypto Wallet"

    def process(self, transaction: Transaction) -> None:
        print(self.describe(transaction))
