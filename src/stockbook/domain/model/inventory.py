"""Inventory aggregate: the ordered collection of products.

Order is insertion order until one of the sorts rearranges it in place.
Names are matched case-insensitively. Duplicate names are tolerated:
lookups and updates touch the first match, removal touches all of them.
"""

from __future__ import annotations

from datetime import datetime

from stockbook.domain.model.product import LOW_STOCK_THRESHOLD, Product
from stockbook.domain.model.value_objects import Money, total


class Inventory:
    """Aggregate root owning every Product instance.

    Callers get tuples from ``products`` so the internal list is
    never aliased outside the aggregate.
    """

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: list[Product] = list(products or [])

    def __len__(self) -> int:
        return len(self._products)

    @property
    def products(self) -> tuple[Product, ...]:
        return tuple(self._products)

    def add(self, product: Product) -> None:
        self._products.append(product)

    def find(self, name: str) -> Product | None:
        """Return the first product whose name matches, or None."""
        for product in self._products:
            if product.matches(name):
                return product
        return None

    def restock(
        self, name: str, quantity: int, price: Money, now: datetime
    ) -> Product | None:
        """Update the first match; None when no product has that name."""
        product = self.find(name)
        if product is None:
            return None
        product.restock(quantity, price, now)
        return product

    def remove_all(self, name: str) -> int:
        """Remove every match and return how many were removed."""
        kept = [p for p in self._products if not p.matches(name)]
        removed = len(self._products) - len(kept)
        self._products = kept
        return removed

    def sort_by_name(self) -> None:
        # list.sort is stable, so equal names keep their relative order
        self._products.sort(key=lambda p: p.name.lower())

    def sort_by_value(self) -> None:
        self._products.sort(key=lambda p: p.total_value.amount, reverse=True)

    def low_stock(self, threshold: int = LOW_STOCK_THRESHOLD) -> list[Product]:
        return [p for p in self._products if p.is_low_stock(threshold)]

    def total_value(self) -> Money:
        return total([p.total_value for p in self._products])
