from datetime import datetime

from pydantic import Field

from crud_apps.core.entity import Entity
from crud_apps.core.formatting import format_date


class InventoryItem(Entity):
    name: str = Field(..., description="Item name")
    quantity: int = Field(..., ge=0, description="Units in stock")
    date_added: datetime = Field(..., description="When the item was logged")

    def __str__(self) -> str:
        return f"{self.name} (ID: {self.id}, Qty: {self.quantity}, Added: {format_date(self.date_added)})"
