"""Runtime configuration.

File locations are explicit values handed to the composition root, so
tests can point everything at a temporary directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from stockbook.domain.exceptions import ValidationError
from stockbook.domain.model.product import LOW_STOCK_THRESHOLD
from stockbook.domain.model.value_objects import DEFAULT_CURRENCY_SYMBOL
from stockbook.infrastructure.persistence.delimited_product_repository import (
    MalformedLinePolicy,
)

INVENTORY_FILE_NAME = "inventory.txt"
LOW_STOCK_FILE_NAME = "low_stock_report.txt"
CSV_FILE_NAME = "inventory_report.csv"

DEFAULT_DATA_DIR = Path("data")


@dataclass(frozen=True)
class InventoryPaths:
    inventory_file: Path
    low_stock_file: Path
    csv_file: Path

    @classmethod
    def in_directory(cls, data_dir: Path) -> InventoryPaths:
        return cls(
            inventory_file=data_dir / INVENTORY_FILE_NAME,
            low_stock_file=data_dir / LOW_STOCK_FILE_NAME,
            csv_file=data_dir / CSV_FILE_NAME,
        )


@dataclass(frozen=True)
class StockbookConfig:
    paths: InventoryPaths = field(
        default_factory=lambda: InventoryPaths.in_directory(DEFAULT_DATA_DIR)
    )
    low_stock_threshold: int = LOW_STOCK_THRESHOLD
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    csv_currency_prefix: str = "Rs"
    malformed_policy: MalformedLinePolicy = MalformedLinePolicy.WARN
    startup_alert: bool = True

    @classmethod
    def from_env(cls, data_dir: Path | None = None) -> StockbookConfig:
        """Build a config from ``STOCKBOOK_*`` environment variables.

        An explicit ``data_dir`` wins over ``STOCKBOOK_DATA_DIR``.
        """
        if data_dir is None:
            data_dir = Path(os.environ.get("STOCKBOOK_DATA_DIR", DEFAULT_DATA_DIR))

        return cls(
            paths=InventoryPaths.in_directory(data_dir),
            low_stock_threshold=_int_env(
                "STOCKBOOK_LOW_STOCK_THRESHOLD", LOW_STOCK_THRESHOLD
            ),
            malformed_policy=_policy_env("STOCKBOOK_MALFORMED_POLICY"),
            startup_alert=_bool_env("STOCKBOOK_STARTUP_ALERT", True),
        )


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValidationError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 0:
        raise ValidationError(f"{name} cannot be negative")
    return value


def _policy_env(name: str) -> MalformedLinePolicy:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return MalformedLinePolicy.WARN
    try:
        return MalformedLinePolicy(raw.strip().lower())
    except ValueError as exc:
        choices = ", ".join(p.value for p in MalformedLinePolicy)
        raise ValidationError(f"{name} must be one of {choices}, got {raw!r}") from exc


def _bool_env(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ValidationError(f"{name} must be a boolean, got {raw!r}")
