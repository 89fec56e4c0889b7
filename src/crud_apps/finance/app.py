"""
Finance demo application.

Seeds a savings account, routes three transactions through different payment
channels, applies each to the account and records it in a transaction
repository.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from crud_apps.core.exceptions import DuplicateKeyError
from crud_apps.core.repository import KeyedRepository
from crud_apps.finance.accounts import Account, SavingsAccount
from crud_apps.finance.models import Transaction
from crud_apps.finance.processors import (
    BankTransferProcessor,
    CryptoWalletProcessor,
    MobileMoneyProcessor,
    TransactionProcessor,
)

logger = logging.getLogger(__name__)


class FinanceApp:

    def __init__(
        self,
        account: Optional[Account] = None,
        opening_balance: Decimal = Decimal("1000"),
        currency_symbol: str = "$",
    ):
        self.currency_symbol = currency_symbol
        self.account = account or SavingsAccount("ACCT-001", opening_balance, currency_symbol)
        self.transactions: KeyedRepository[Transaction] = KeyedRepository(
            quantity_field="amount", name="transactions"
        )

    def record(self, processor: TransactionProcessor, transaction: Transaction) -> bool:
        """
        Process, apply and record one transaction.

        The transaction is recorded whether or not the account accepted it;
        a duplicate transaction id is reported and nothing else happens.

        Returns:
            True if the account balance was debited
        """
        try:
            self.transactions.add(transaction)
        except DuplicateKeyError as e:
            print(f"Error recording transaction: {e}")
            return False

        processor.process(transaction)
        return self.account.apply_transaction(transaction)

    def seed_transactions(self) -> List[tuple[TransactionProcessor, Transaction]]:
        now = datetime.now()
        return [
            (MobileMoneyProcessor(self.currency_symbol), Transaction(id=1, date=now, amount=Decimal("120"), category="Groceries")),
            (BankTransferProcessor(self.currency_symbol), Transaction(id=2, date=now, amount=Decimal("300"), category="Utilities")),
            (CryptoWalletProcessor(self.currency_symbol), Transaction(id=3, date=now, amount=Decimal("450"), category="Entertainment")),
        ]

    def run(self) -> None:
        logger.info(f"Running finance demo on {self.account.account_number}")
        for processor, transaction in self.seed_transactions():
            self.record(processor, transaction)
        logger.info(f"Recorded {len(self.transactions)} transactions, final balance {self.account.balance}")
