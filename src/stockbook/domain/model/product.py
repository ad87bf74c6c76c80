"""Product record.

A product is identified by its name; quantity and price change over
time, and every such change refreshes ``last_updated``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from stockbook.domain.exceptions import ValidationError
from stockbook.domain.model.value_objects import Money

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
LOW_STOCK_THRESHOLD = 5


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


@dataclass
class Product:
    """A stock item.

    Kept as a mutable dataclass because restocking is a legitimate
    mutation. ``name`` is never reassigned after creation.

    Invariants:
    - ``quantity`` is a non-negative int
    - ``last_updated`` reflects the most recent quantity/price change
    """

    name: str
    quantity: int
    price: Money
    last_updated: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        _check_quantity(self.quantity)

    @classmethod
    def create(cls, name: str, quantity: int, price: Money, now: datetime) -> Product:
        """Build a brand-new product stamped with ``now``."""
        return cls(
            name=name,
            quantity=quantity,
            price=price,
            last_updated=format_timestamp(now),
        )

    @property
    def total_value(self) -> Money:
        return self.price * self.quantity

    def is_low_stock(self, threshold: int = LOW_STOCK_THRESHOLD) -> bool:
        return self.quantity <= threshold

    def matches(self, name: str) -> bool:
        """Case-insensitive exact name comparison."""
        return self.name.lower() == name.lower()

    def restock(self, quantity: int, price: Money, now: datetime) -> None:
        """Overwrite quantity and price, refreshing the timestamp."""
        _check_quantity(quantity)
        self.quantity = quantity
        self.price = price
        self.last_updated = format_timestamp(now)


def _check_quantity(quantity: int) -> None:
    if not isinstance(quantity, int) or isinstance(quantity, bool):
        raise ValidationError(
            f"Quantity must be an integer, got {type(quantity).__name__}"
        )
    if quantity < 0:
        raise ValidationError("Quantity cannot be negative")
