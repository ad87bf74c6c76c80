"""Application service: the Inventory store.

Owns the in-memory Inventory, loads it once on construction and
rewrites the persisted file after every successful mutation. Report
readers format the current state; report writers hand the formatted
text to a ReportSink.

I/O failures never escape an operation: they are logged as warnings
and the in-memory state stays the source of truth.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable

from stockbook.application.report_generator import ReportGenerator
from stockbook.domain.model.inventory import Inventory
from stockbook.domain.model.product import Product, format_timestamp
from stockbook.domain.model.value_objects import Money
from stockbook.domain.repository.product_repository import ProductRepository
from stockbook.domain.repository.report_sink import ReportSink

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class InventoryStore:

    def __init__(
        self,
        product_repo: ProductRepository,
        report_sink: ReportSink,
        generator: ReportGenerator | None = None,
        clock: Clock = datetime.now,
    ) -> None:
        self._product_repo = product_repo
        self._report_sink = report_sink
        self._generator = generator or ReportGenerator()
        self._clock = clock
        self._inventory = Inventory()
        self.last_save_ok = True
        self._load()

    @property
    def products(self) -> tuple[Product, ...]:
        return self._inventory.products

    # --- Mutators -------------------------------------------------------------

    def add(self, name: str, quantity: int, price: str | float | Decimal) -> Product:
        """Append a new product stamped with the current time."""
        product = Product.create(name, quantity, Money.of(price), self._clock())
        self._inventory.add(product)
        logger.info("Added product '%s'", product.name)
        self._save()
        return product

    def update(
        self, name: str, quantity: int, price: str | float | Decimal
    ) -> Product | None:
        """Restock the first product named ``name``.

        Returns None, without writing, when nothing matches.
        """
        product = self._inventory.restock(name, quantity, Money.of(price), self._clock())
        if product is None:
            logger.info("Update skipped, no product named '%s'", name)
            return None
        self._save()
        return product

    def delete(self, name: str) -> int:
        """Remove every product named ``name``; returns how many went."""
        removed = self._inventory.remove_all(name)
        if removed:
            logger.info("Deleted %d product(s) named '%s'", removed, name)
            self._save()
        return removed

    def search(self, name: str) -> Product | None:
        return self._inventory.find(name)

    def sort_by_name(self) -> None:
        self._inventory.sort_by_name()
        self._save()

    def sort_by_value(self) -> None:
        self._inventory.sort_by_value()
        self._save()

    # --- Report readers -------------------------------------------------------

    def total_value(self) -> Money:
        return self._inventory.total_value()

    def describe(self, product: Product) -> str:
        return self._generator.format_line(product)

    def low_stock_products(self) -> list[Product]:
        return self._inventory.low_stock(self._generator.low_stock_threshold)

    def full_report(self) -> str:
        return self._generator.full_report(list(self.products))

    def low_stock_report(self) -> str:
        return self._generator.low_stock_report(list(self.products))

    # --- Report writers -------------------------------------------------------

    def append_low_stock_report(self) -> bool:
        section = self._generator.low_stock_section(
            list(self.products), format_timestamp(self._clock())
        )
        try:
            self._report_sink.append_low_stock(section)
        except OSError as exc:
            logger.warning("Error writing low stock report: %s", exc)
            return False
        return True

    def export_csv(self) -> bool:
        rows = self._generator.csv_export(list(self.products))
        try:
            self._report_sink.write_export(rows)
        except OSError as exc:
            logger.warning("Error exporting CSV: %s", exc)
            return False
        return True

    def startup_alert(self) -> str:
        """Low stock check meant to run once, right after construction.

        Returns the low stock report text and appends a dated section
        to the low stock file.
        """
        report = self.low_stock_report()
        self.append_low_stock_report()
        return report

    # --- Persistence ----------------------------------------------------------

    def _load(self) -> None:
        try:
            products = self._product_repo.load_all()
        except OSError as exc:
            logger.warning("Error loading inventory: %s", exc)
            return
        self._inventory = Inventory(products)

    def _save(self) -> None:
        try:
            self._product_repo.save_all(list(self.products))
        except OSError as exc:
            logger.warning("Error saving inventory: %s", exc)
            self.last_save_ok = False
            return
        self.last_save_ok = True
