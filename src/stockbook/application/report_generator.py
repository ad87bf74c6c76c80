"""Formats reports from the current product list.

Pure text formatting: nothing here touches the filesystem.
"""

from __future__ import annotations

from stockbook.domain.model.product import LOW_STOCK_THRESHOLD, Product
from stockbook.domain.model.value_objects import DEFAULT_CURRENCY_SYMBOL, Money, total

RULE = "-" * 61
EMPTY_MESSAGE = "Inventory is empty."
NONE_LOW_MESSAGE = "No products are low on stock."
LOW_STOCK_MARKER = " ⚠ Low Stock!"
CSV_HEADER = ["Product Name", "Quantity", "Price", "Last Updated", "Total Value"]
CSV_SUMMARY_LABEL = "Total Inventory Value"


class ReportGenerator:

    def __init__(
        self,
        low_stock_threshold: int = LOW_STOCK_THRESHOLD,
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
        csv_currency_prefix: str = "Rs",
    ) -> None:
        self.low_stock_threshold = low_stock_threshold
        self._symbol = currency_symbol
        self._csv_prefix = csv_currency_prefix

    def format_line(self, product: Product) -> str:
        marker = LOW_STOCK_MARKER if product.is_low_stock(self.low_stock_threshold) else ""
        return (
            f"Product: {product.name:<15} | Qty: {product.quantity:<5} "
            f"| Price: {self._symbol}{product.price.rounded():<8.2f} "
            f"| Total: {self._symbol}{product.total_value.rounded():<8.2f} "
            f"| Last Updated: {product.last_updated}{marker}"
        )

    def low_stock(self, products: list[Product]) -> list[Product]:
        return [p for p in products if p.is_low_stock(self.low_stock_threshold)]

    def full_report(self, products: list[Product]) -> str:
        if not products:
            return EMPTY_MESSAGE

        lines = ["Inventory Report:", RULE]
        lines.extend(self.format_line(p) for p in products)
        lines.append(RULE)
        grand_total = total([p.total_value for p in products])
        lines.append(f"Total Inventory Value: {grand_total.format(self._symbol)}")
        return "\n".join(lines)

    def low_stock_report(self, products: list[Product]) -> str:
        lines = [f"Low Stock Report (Qty ≤ {self.low_stock_threshold}):", RULE]
        lines.extend(self._low_stock_body(products))
        return "\n".join(lines)

    def low_stock_section(self, products: list[Product], timestamp: str) -> str:
        """Dated block for the append-only low stock file.

        Ends with a rule and a blank line so consecutive sections
        stay visually separate.
        """
        lines = [f"Low Stock Report - {timestamp}", RULE]
        lines.extend(self._low_stock_body(products))
        lines.append(RULE)
        return "\n".join(lines) + "\n\n"

    def csv_export(self, products: list[Product]) -> list[list[str]]:
        rows = [list(CSV_HEADER)]
        for p in products:
            rows.append(
                [
                    p.name,
                    str(p.quantity),
                    p.price.plain(),
                    p.last_updated,
                    p.total_value.plain(),
                ]
            )
        rows.append([])
        grand_total: Money = total([p.total_value for p in products])
        rows.append([CSV_SUMMARY_LABEL, "", "", "", grand_total.format(self._csv_prefix)])
        return rows

    def _low_stock_body(self, products: list[Product]) -> list[str]:
        low = self.low_stock(products)
        if not low:
            return [NONE_LOW_MESSAGE]
        return [self.format_line(p) for p in low]
