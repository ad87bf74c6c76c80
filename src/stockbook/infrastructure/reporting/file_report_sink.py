"""File-backed ReportSink: append-only low-stock log and CSV export."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from stockbook.domain.repository.report_sink import ReportSink

logger = logging.getLogger(__name__)


class FileReportSink(ReportSink):

    def __init__(self, low_stock_file: Path, csv_file: Path) -> None:
        self._low_stock_file = low_stock_file
        self._csv_file = csv_file

    def append_low_stock(self, section: str) -> None:
        self._low_stock_file.parent.mkdir(parents=True, exist_ok=True)
        with self._low_stock_file.open("a", encoding="utf-8", newline="\n") as fh:
            fh.write(section)
        logger.debug("Appended low stock section to %s", self._low_stock_file)

    def write_export(self, rows: list[list[str]]) -> None:
        self._csv_file.parent.mkdir(parents=True, exist_ok=True)
        with self._csv_file.open("w", encoding="utf-8", newline="") as fh:
            writer = csv.writer(fh, lineterminator="\n")
            writer.writerows(rows)
        logger.debug("Exported %d rows to %s", len(rows), self._csv_file)
