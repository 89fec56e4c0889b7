"""
Keyed Repository - in-memory, duplicate-free collection of entities

One implementation is shared by every application: finance transactions,
healthcare patients and prescriptions, logged inventory, students and
warehouse stock.

Pattern: Repository Pattern
"""

import logging
from typing import Dict, Generic, Iterable, List, Optional, TypeVar

import pandas as pd
from pydantic import ValidationError

from crud_apps.core.entity import Entity
from crud_apps.core.exceptions import DuplicateKeyError, InvalidValueError, NotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Entity)


class KeyedRepository(Generic[T]):
    """
    Map from entity id to entity.

    Entities are frozen, so `get_by_id` hands out the stored instance safely.
    `update_quantity` swaps in an updated copy instead of mutating in place.
    Listing follows insertion order.
    """

    def __init__(self, quantity_field: Optional[str] = "quantity", name: Optional[str] = None):
        """
        Args:
            quantity_field: Name of the non-negative numeric field that
                `update_quantity` changes (e.g. "quantity", "amount", "score"),
                or None for entities without one
            name: Label used in log messages
        """
        self.quantity_field = quantity_field
        self.name = name or "repository"
        self._items: Dict[int, T] = {}

    def add(self, entity: T) -> None:
        if entity.id in self._items:
            raise DuplicateKeyError(entity.id)
        self._items[entity.id] = entity
        logger.debug(f"[{self.name}] added id={entity.id}")

    def extend(self, entities: Iterable[T]) -> None:
        """Add several entities, stopping at the first duplicate id."""
        for entity in entities:
            self.add(entity)

    def get_by_id(self, entity_id: int) -> T:
        try:
            return self._items[entity_id]
        except KeyError:
            raise NotFoundError(entity_id) from None

    def remove(self, entity_id: int) -> None:
        if entity_id not in self._items:
            raise NotFoundError(entity_id, f"Item with ID {entity_id} not found for removal.")
        del self._items[entity_id]
        logger.debug(f"[{self.name}] removed id={entity_id}")

    def update_quantity(self, entity_id: int, new_value) -> T:
        """
        Set the quantity field of one entity.

        Negative values are rejected before the id is looked up. The updated
        entity is re-validated, so a value of the wrong type (e.g. 2.5 for an
        int field) is rejected too. A failed update leaves the stored entity
        untouched.

        Returns:
            The updated entity
        """
        if self.quantity_field is None:
            raise TypeError(f"{self.name} holds entities without a quantity field")
        if new_value < 0:
            raise InvalidValueError(new_value)
        if entity_id not in self._items:
            raise NotFoundError(entity_id, f"Item with ID {entity_id} not found for update.")

        current = self._items[entity_id]
        try:
            updated = type(current).model_validate({**current.model_dump(), self.quantity_field: new_value})
        except ValidationError as e:
            raise InvalidValueError(new_value, f"Invalid {self.quantity_field} value: {new_value!r}") from e
        self._items[entity_id] = updated
        logger.debug(f"[{self.name}] id={entity_id} {self.quantity_field} -> {new_value}")
        return updated

    def list_all(self) -> List[T]:
        return list(self._items.values())

    def to_frame(self) -> pd.DataFrame:
        """Tabular view of all entities, one row per entity, indexed by id."""
        rows = [e.model_dump() for e in self._items.values()]
        if not rows:
            return pd.DataFrame()
        return pd.DataFrame(rows).set_index("id")

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._items
