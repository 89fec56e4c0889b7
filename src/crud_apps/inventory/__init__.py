"""Inventory logger: keyed item log with JSON snapshot save and load."""

from .app import InventoryApp
from .logger import InventoryLogger
from .models import InventoryItem

__all__ = ["InventoryApp", "InventoryLogger", "InventoryItem"]
