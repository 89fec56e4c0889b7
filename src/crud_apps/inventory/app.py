"""
Inventory logger application: seed, save, then reload in a fresh session.
"""

import logging
from datetime import datetime, timedelta
from pathlib import Path

from crud_apps.core.exceptions import RepositoryError
from crud_apps.inventory.logger import InventoryLogger
from crud_apps.inventory.models import InventoryItem

logger = logging.getLogger(__name__)


class InventoryApp:

    def __init__(self, file_path: Path):
        self.inventory_logger = InventoryLogger(file_path)

    def seed_sample_data(self) -> None:
        now = datetime.now()
        self.inventory_logger.add(InventoryItem(id=1, name="Laptop", quantity=5, date_added=now))
        self.inventory_logger.add(InventoryItem(id=2, name="Rice Bag", quantity=30, date_added=now - timedelta(days=2)))
        self.inventory_logger.add(InventoryItem(id=3, name="Desk Chair", quantity=10, date_added=now - timedelta(days=7)))

    def save_data(self) -> bool:
        try:
            path = self.inventory_logger.save_to_file()
        except OSError as e:
            logger.debug("Snapshot save failed", exc_info=True)
            print(f"Error saving file: {e}")
            return False
        print(f"Data saved to {path}")
        return True

    def load_data(self) -> bool:
        try:
            self.inventory_logger.load_from_file()
        except FileNotFoundError:
            print("No saved file found.")
            return False
        except (OSError, RepositoryError) as e:
            logger.debug("Snapshot load failed", exc_info=True)
            print(f"Error loading file: {e}")
            return False
        print(f"Data loaded from {self.inventory_logger.file_path}")
        return True

    def print_all_items(self) -> None:
        for item in self.inventory_logger.get_all():
            print(item)
