from datetime import datetime
from decimal import Decimal

from pydantic import Field

from crud_apps.core.entity import Entity


class Transaction(Entity):
    """A single outgoing payment recorded against an account"""

    date: datetime = Field(..., description="When the transaction was made")
    amount: Decimal = Field(..., ge=0, description="Amount debited from the account")
    category: str = Field(..., description="Spending category, e.g. Groceries")
