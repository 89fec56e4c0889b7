"""
CLI for the finance transaction demo.
"""

import argparse
import logging
from decimal import Decimal

from crud_apps import logging_setup
from crud_apps.core.formatting import format_currency
from crud_apps.finance.accounts import Account, SavingsAccount
from crud_apps.finance.app import FinanceApp
from crud_apps.settings import get_settings

logger = logging.getLogger(__name__)

ACCOUNT_TYPES = {
    "savings": SavingsAccount,
    "basic": Account,
}


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run the finance transaction demo")

    cfg = get_settings()

    parser.add_argument(
        "--opening-balance",
        type=Decimal,
        default=cfg.opening_balance,
        help=f"Opening account balance (default: {cfg.opening_balance})"
    )
    parser.add_argument(
        "--account-type",
        choices=sorted(ACCOUNT_TYPES),
        default="savings",
        help="savings rejects overdrafts, basic lets the balance go negative (default: savings)"
    )
    parser.add_argument("--log_level", default=cfg.log_level, help="Logging level (DEBUG, INFO, WARNING, ERROR)")

    args = parser.parse_args(argv)
    logging_setup.setup_logging(args.log_level)

    account = ACCOUNT_TYPES[args.account_type]("ACCT-001", args.opening_balance, cfg.currency_symbol)
    app = FinanceApp(account=account, currency_symbol=cfg.currency_symbol)
    app.run()

    print(f"\nFinal balance for {account.account_number}: {format_currency(account.balance, cfg.currency_symbol)}")
    return 0


if __name__ == "__main__":
    exit(main())
