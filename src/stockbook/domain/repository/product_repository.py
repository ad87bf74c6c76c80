"""Abstract repository for the persisted product list.

Defined in the domain layer so the domain never depends on
infrastructure. The delimited-file implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stockbook.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def load_all(self) -> list[Product]:
        """Return every persisted product in file order (empty if none)."""

    @abstractmethod
    def save_all(self, products: list[Product]) -> None:
        """Replace the persisted products with ``products``."""
