"""
Warehouse inventory manager.

Keeps electronics and groceries in separate repositories and shows how
repository errors are reported without stopping the run.
"""

import logging
from datetime import datetime, timedelta
from typing import TypeVar

import pandas as pd

from crud_apps.core.exceptions import (
    DuplicateKeyError,
    InvalidValueError,
    NotFoundError,
    RepositoryError,
)
from crud_apps.core.formatting import print_section
from crud_apps.core.repository import KeyedRepository
from crud_apps.warehouse.models import ElectronicItem, GroceryItem, WarehouseItem

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=WarehouseItem)


class WarehouseManager:

    def __init__(self):
        self.electronics: KeyedRepository[ElectronicItem] = KeyedRepository(name="electronics")
        self.groceries: KeyedRepository[GroceryItem] = KeyedRepository(name="groceries")

    def seed_data(self) -> None:
        self.electronics.add(ElectronicItem(id=1, name="Laptop", quantity=5, brand="Dell", warranty_months=24))
        self.electronics.add(ElectronicItem(id=2, name="Smartphone", quantity=10, brand="Samsung", warranty_months=12))

        now = datetime.now()
        six_months_out = (pd.Timestamp(now) + pd.DateOffset(months=6)).to_pydatetime()
        self.groceries.add(GroceryItem(id=101, name="Rice", quantity=50, expiry_date=six_months_out))
        self.groceries.add(GroceryItem(id=102, name="Milk", quantity=20, expiry_date=now + timedelta(days=10)))
        logger.info(f"Seeded {len(self.electronics)} electronics and {len(self.groceries)} groceries")

    def print_all_items(self, repo: KeyedRepository[ItemT]) -> None:
        for item in repo.list_all():
            print(item)

    def increase_stock(self, repo: KeyedRepository[ItemT], item_id: int, quantity: int) -> bool:
        try:
            item = repo.get_by_id(item_id)
            updated = repo.update_quantity(item_id, item.quantity + quantity)
        except RepositoryError as e:
            print(f"Error updating stock: {e}")
            return False
        print(f"Stock updated for {updated.name}. New quantity: {updated.quantity}")
        return True

    def remove_item_by_id(self, repo: KeyedRepository[ItemT], item_id: int) -> bool:
        try:
            repo.remove(item_id)
        except RepositoryError as e:
            print(f"Error removing item: {e}")
            return False
        print(f"Item with ID {item_id} removed successfully.")
        return True

    def run_tests(self) -> None:
        """Print both repositories, then trigger and report each repository error."""
        print_section("Grocery Items")
        self.print_all_items(self.groceries)

        print_section("Electronic Items")
        self.print_all_items(self.electronics)

        print_section("Testing Exceptions")
        try:
            self.electronics.add(ElectronicItem(id=1, name="Tablet", quantity=3, brand="Apple", warranty_months=18))
        except DuplicateKeyError as e:
            print(f"Duplicate Error: {e}")

        try:
            self.groceries.remove(999)
        except NotFoundError as e:
            print(f"Not Found Error: {e}")

        try:
            self.electronics.update_quantity(2, -5)
        except InvalidValueError as e:
            print(f"Quantity Error: {e}")
