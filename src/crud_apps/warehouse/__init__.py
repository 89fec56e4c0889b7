"""Warehouse inventory: electronics and groceries with stock updates and error reporting."""

from .manager import WarehouseManager
from .models import ElectronicItem, GroceryItem, WarehouseItem

__all__ = ["WarehouseManager", "ElectronicItem", "GroceryItem", "WarehouseItem"]
