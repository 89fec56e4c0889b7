from datetime import datetime

from pydantic import Field

from crud_apps.core.entity import Entity
from crud_apps.core.formatting import format_date


class WarehouseItem(Entity):
    """Fields every warehouse item carries"""

    name: str = Field(..., description="Item name")
    quantity: int = Field(..., ge=0, description="Units in stock")


class ElectronicItem(WarehouseItem):
    brand: str = Field(..., description="Manufacturer")
    warranty_months: int = Field(..., ge=0, description="Warranty length in months")

    def __str__(self) -> str:
        return (
            f"{self.name} (ID: {self.id}, Brand: {self.brand}, Qty: {self.quantity}, "
            f"Warranty: {self.warranty_months} months)"
        )


class GroceryItem(WarehouseItem):
    expiry_date: datetime = Field(..., description="Best-before date")

    def __str__(self) -> str:
        return f"{self.name} (ID: {self.id}, Qty: {self.quantity}, Expires: {format_date(self.expiry_date)})"
