"""Delimited-file-backed implementation of ProductRepository."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from stockbook.domain.exceptions import MalformedRecordError
from stockbook.domain.model.product import Product
from stockbook.domain.repository.product_repository import ProductRepository
from stockbook.infrastructure.persistence.delimited_codec import (
    decode_line,
    encode_product,
)

logger = logging.getLogger(__name__)


class MalformedLinePolicy(Enum):
    WARN = "warn"
    SILENT = "silent"
    STRICT = "strict"


class DelimitedProductRepository(ProductRepository):
    """Reads and rewrites the whole inventory file on every call.

    What happens to lines that do not decode depends on ``policy``:
    WARN skips them with a warning, SILENT skips them quietly, and
    STRICT drops short lines quietly but aborts the load on a bad
    number.
    """

    def __init__(
        self,
        file_path: Path,
        policy: MalformedLinePolicy = MalformedLinePolicy.WARN,
    ) -> None:
        self._file_path = file_path
        self._policy = policy

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- ProductRepository interface ------------------------------------------

    def load_all(self) -> list[Product]:
        if not self._file_path.exists():
            logger.debug("No inventory file at %s, starting empty", self._file_path)
            return []

        products: list[Product] = []
        with self._file_path.open("r", encoding="utf-8", errors="replace") as fh:
            for line_number, line in enumerate(fh, start=1):
                product = self._decode(line, line_number)
                if product is not None:
                    products.append(product)

        logger.debug("Loaded %d products from %s", len(products), self._file_path)
        return products

    def save_all(self, products: list[Product]) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        with self._file_path.open("w", encoding="utf-8", newline="\n") as fh:
            for product in products:
                fh.write(encode_product(product) + "\n")
        logger.debug("Saved %d products to %s", len(products), self._file_path)

    # --- Decoding -------------------------------------------------------------

    def _decode(self, line: str, line_number: int) -> Product | None:
        try:
            product = decode_line(line)
        except MalformedRecordError as exc:
            exc.line_number = line_number
            if self._policy is MalformedLinePolicy.STRICT:
                raise
            if self._policy is MalformedLinePolicy.WARN:
                logger.warning(
                    "Skipping line %d of %s: %s", line_number, self._file_path, exc
                )
            return None

        if product is None and self._policy is MalformedLinePolicy.WARN:
            logger.warning(
                "Skipping line %d of %s: expected 4 fields",
                line_number,
                self._file_path,
            )
        return product
