"""
CLI for the inventory logger.

Seeds sample items and saves them to the snapshot file, then loads the file
into a fresh logger and prints what came back.
"""

import argparse
import logging
from pathlib import Path

from crud_apps import logging_setup
from crud_apps.inventory.app import InventoryApp
from crud_apps.settings import get_settings

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Save and reload an inventory snapshot")

    cfg = get_settings()

    parser.add_argument(
        "--snapshot",
        type=Path,
        default=cfg.inventory_snapshot,
        help=f"Path to the JSON snapshot file (default: {cfg.inventory_snapshot})"
    )
    parser.add_argument("--log_level", default=cfg.log_level, help="Logging level (DEBUG, INFO, WARNING, ERROR)")

    args = parser.parse_args(argv)
    logging_setup.setup_logging(args.log_level)

    app = InventoryApp(args.snapshot)
    app.seed_sample_data()
    if not app.save_data():
        return 1

    print("\n--- Simulating New Session ---\n")

    new_app = InventoryApp(args.snapshot)
    if not new_app.load_data():
        return 1
    new_app.print_all_items()
    return 0


if __name__ == "__main__":
    exit(main())
