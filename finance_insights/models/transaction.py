from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class Balance(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    amount: float = 0.0
    currency: str = "USD"


class Category(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    icon: Optional[str] = None


class Transaction(BaseModel):
    """
    A dated income or expense event against a balance.

    ``amount`` is always a magnitude; the direction comes from ``type``.
    A missing ``date`` keeps the record in totals but out of every
    date-windowed view.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    amount: float
    type: TransactionType
    date: Optional[datetime] = None
    description: Optional[str] = None
    category: Optional[Category] = None
    balance: Optional[Balance] = None

    @property
    def category_name(self) -> str:
        if self.category is None or not self.category.name:
            return "Uncategorized"
        return self.category.name
