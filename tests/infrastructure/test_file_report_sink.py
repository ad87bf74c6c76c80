"""Tests for the low stock log and CSV export files."""

from datetime import datetime

from stockbook.application.inventory_store import InventoryStore
from stockbook.application.report_generator import RULE
from stockbook.infrastructure.persistence.delimited_product_repository import (
    DelimitedProductRepository,
)
from stockbook.infrastructure.reporting.file_report_sink import FileReportSink
from tests.fakes import FixedClock


def _store(tmp_path, *lines):
    inventory_file = tmp_path / "inventory.txt"
    if lines:
        inventory_file.write_text("".join(l + "\n" for l in lines), encoding="utf-8")
    sink = FileReportSink(tmp_path / "low_stock_report.txt", tmp_path / "inventory_report.csv")
    return InventoryStore(
        DelimitedProductRepository(inventory_file),
        sink,
        clock=FixedClock(datetime(2024, 3, 1, 9, 30, 0)),
    )


class TestLowStockFile:

    def test_two_appends_keep_both_sections(self, tmp_path):
        store = _store(tmp_path, "Widget,2,2.50,2024-01-01 00:00:00")

        store.append_low_stock_report()
        store.append_low_stock_report()

        content = (tmp_path / "low_stock_report.txt").read_text(encoding="utf-8")
        sections = [s for s in content.split("\n\n") if s]
        assert len(sections) == 2
        assert sections[0].startswith("Low Stock Report - 2024-03-01 09:30:00")
        assert sections[1].startswith("Low Stock Report - 2024-03-01 09:30:01")
        for section in sections:
            assert "Widget" in section
            assert section.endswith(RULE)
        assert content.endswith(RULE + "\n\n")

    def test_append_preserves_existing_content(self, tmp_path):
        report = tmp_path / "low_stock_report.txt"
        report.write_text("older section\n\n", encoding="utf-8")
        _store(tmp_path).append_low_stock_report()
        assert report.read_text(encoding="utf-8").startswith("older section\n\n")


class TestCsvExportFile:

    def test_export_layout_and_summary(self, tmp_path):
        store = _store(
            tmp_path,
            "A,2,12.50,2024-01-01 00:00:00",
            "B,3,10,2024-01-02 00:00:00",
        )

        assert store.export_csv() is True

        content = (tmp_path / "inventory_report.csv").read_text(encoding="utf-8")
        assert content == (
            "Product Name,Quantity,Price,Last Updated,Total Value\n"
            "A,2,12.50,2024-01-01 00:00:00,25.00\n"
            "B,3,10,2024-01-02 00:00:00,30\n"
            "\n"
            "Total Inventory Value,,,,Rs55.00\n"
        )

    def test_export_overwrites_previous_file(self, tmp_path):
        csv_file = tmp_path / "inventory_report.csv"
        csv_file.write_text("stale\n", encoding="utf-8")
        _store(tmp_path).export_csv()
        assert "stale" not in csv_file.read_text(encoding="utf-8")

    def test_unwritable_export_reported(self, tmp_path):
        store = InventoryStore(
            DelimitedProductRepository(tmp_path / "inventory.txt"),
            FileReportSink(tmp_path / "low.txt", tmp_path),
        )
        assert store.export_csv() is False
