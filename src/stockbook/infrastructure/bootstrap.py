"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from stockbook.application.inventory_store import InventoryStore
from stockbook.application.report_generator import ReportGenerator
from stockbook.infrastructure.config import StockbookConfig
from stockbook.infrastructure.persistence.delimited_product_repository import (
    DelimitedProductRepository,
)
from stockbook.infrastructure.reporting.file_report_sink import FileReportSink


def product_repository(config: StockbookConfig) -> DelimitedProductRepository:
    return DelimitedProductRepository(
        config.paths.inventory_file, policy=config.malformed_policy
    )


def report_sink(config: StockbookConfig) -> FileReportSink:
    return FileReportSink(config.paths.low_stock_file, config.paths.csv_file)


def report_generator(config: StockbookConfig) -> ReportGenerator:
    return ReportGenerator(
        low_stock_threshold=config.low_stock_threshold,
        currency_symbol=config.currency_symbol,
        csv_currency_prefix=config.csv_currency_prefix,
    )


def inventory_store(config: StockbookConfig) -> InventoryStore:
    """Build a store and load the persisted inventory.

    The startup low stock alert is not run here; the caller decides.
    """
    return InventoryStore(
        product_repo=product_repository(config),
        report_sink=report_sink(config),
        generator=report_generator(config),
    )
