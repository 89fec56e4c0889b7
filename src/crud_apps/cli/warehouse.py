"""
CLI for the warehouse inventory manager.
"""

import argparse
import logging

from crud_apps import logging_setup
from crud_apps.core.formatting import print_section
from crud_apps.settings import get_settings
from crud_apps.warehouse.manager import WarehouseManager

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Seed the warehouse and exercise its repositories")

    cfg = get_settings()

    parser.add_argument(
        "--table",
        action="store_true",
        help="Print each repository as a table after the run"
    )
    parser.add_argument("--log_level", default=cfg.log_level, help="Logging level (DEBUG, INFO, WARNING, ERROR)")

    args = parser.parse_args(argv)
    logging_setup.setup_logging(args.log_level)

    manager = WarehouseManager()
    manager.seed_data()
    manager.run_tests()

    if args.table:
        print_section("Electronics Table")
        print(manager.electronics.to_frame().to_string())
        print_section("Groceries Table")
        print(manager.groceries.to_frame().to_string())

    return 0


if __name__ == "__main__":
    exit(main())
