"""Finance demo: transactions, payment channels and account balance policies."""

from .accounts import Account, SavingsAccount
from .app import FinanceApp
from .models import Transaction

__all__ = ["Account", "SavingsAccount", "FinanceApp", "Transaction"]
