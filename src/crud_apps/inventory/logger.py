"""
Inventory Logger - keyed inventory log with JSON snapshot persistence

The snapshot is a JSON array of item objects. Saving writes the whole log
atomically; loading replaces the in-memory log with the file contents.
"""

import logging
from pathlib import Path
from typing import List

from pydantic import TypeAdapter, ValidationError

from crud_apps.core.exceptions import SnapshotFormatError
from crud_apps.core.repository import KeyedRepository
from crud_apps.inventory.models import InventoryItem
from crud_apps.io.readers import read_json
from crud_apps.io.writers import atomic_write_json

logger = logging.getLogger(__name__)

_SNAPSHOT_ADAPTER = TypeAdapter(List[InventoryItem])


class InventoryLogger:

    def __init__(self, file_path: Path):
        self.file_path = Path(file_path)
        self._log: KeyedRepository[InventoryItem] = KeyedRepository(name="inventory")

    def add(self, item: InventoryItem) -> None:
        self._log.add(item)

    def get_all(self) -> List[InventoryItem]:
        return self._log.list_all()

    def update_quantity(self, item_id: int, new_quantity: int) -> InventoryItem:
        return self._log.update_quantity(item_id, new_quantity)

    def remove(self, item_id: int) -> None:
        self._log.remove(item_id)

    def save_to_file(self) -> Path:
        """Write the current log to the snapshot file."""
        data = _SNAPSHOT_ADAPTER.dump_python(self._log.list_all(), mode="json")
        atomic_write_json(data, self.file_path)
        logger.info(f"Saved {len(data)} items to {self.file_path}")
        return self.file_path

    def load_from_file(self) -> List[InventoryItem]:
        """
        Replace the current log with the snapshot file contents.

        Raises:
            FileNotFoundError: if the snapshot file does not exist
            SnapshotFormatError: if the file is not a valid list of items
            DuplicateKeyError: if two items in the file share an id
        """
        try:
            raw = read_json(self.file_path)
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError
            raise SnapshotFormatError(f"{self.file_path} is not valid UTF-8 JSON: {e}") from e

        try:
            items = _SNAPSHOT_ADAPTER.validate_python(raw)
        except ValidationError as e:
            raise SnapshotFormatError(f"{self.file_path} does not hold inventory items: {e}") from e

        loaded: KeyedRepository[InventoryItem] = KeyedRepository(name="inventory")
        loaded.extend(items)
        self._log = loaded
        logger.info(f"Loaded {len(items)} items from {self.file_path}")
        return self.get_all()
