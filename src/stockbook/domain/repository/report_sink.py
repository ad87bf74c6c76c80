"""Abstract destination for generated report files."""

from __future__ import annotations

from abc import ABC, abstractmethod


class ReportSink(ABC):

    @abstractmethod
    def append_low_stock(self, section: str) -> None:
        """Append a low-stock section, keeping earlier sections."""

    @abstractmethod
    def write_export(self, rows: list[list[str]]) -> None:
        """Overwrite the CSV export with ``rows``."""
