"""Tests for environment-driven configuration."""

from pathlib import Path

import pytest

from stockbook.domain.exceptions import ValidationError
from stockbook.infrastructure.config import InventoryPaths, StockbookConfig
from stockbook.infrastructure.persistence.delimited_product_repository import (
    MalformedLinePolicy,
)

ENV_VARS = (
    "STOCKBOOK_DATA_DIR",
    "STOCKBOOK_LOW_STOCK_THRESHOLD",
    "STOCKBOOK_MALFORMED_POLICY",
    "STOCKBOOK_STARTUP_ALERT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestDefaults:

    def test_default_paths(self):
        config = StockbookConfig.from_env()
        assert config.paths == InventoryPaths(
            inventory_file=Path("data") / "inventory.txt",
            low_stock_file=Path("data") / "low_stock_report.txt",
            csv_file=Path("data") / "inventory_report.csv",
        )
        assert config.low_stock_threshold == 5
        assert config.malformed_policy is MalformedLinePolicy.WARN
        assert config.startup_alert is True


class TestOverrides:

    def test_explicit_dir_beats_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STOCKBOOK_DATA_DIR", "/somewhere/else")
        config = StockbookConfig.from_env(tmp_path)
        assert config.paths.inventory_file == tmp_path / "inventory.txt"

    def test_env_values(self, monkeypatch, tmp_path):
        monkeypatch.setenv("STOCKBOOK_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("STOCKBOOK_LOW_STOCK_THRESHOLD", "10")
        monkeypatch.setenv("STOCKBOOK_MALFORMED_POLICY", "Strict")
        monkeypatch.setenv("STOCKBOOK_STARTUP_ALERT", "off")

        config = StockbookConfig.from_env()

        assert config.paths.csv_file == tmp_path / "inventory_report.csv"
        assert config.low_stock_threshold == 10
        assert config.malformed_policy is MalformedLinePolicy.STRICT
        assert config.startup_alert is False

    @pytest.mark.parametrize(
        "name, value",
        [
            ("STOCKBOOK_LOW_STOCK_THRESHOLD", "five"),
            ("STOCKBOOK_LOW_STOCK_THRESHOLD", "-1"),
            ("STOCKBOOK_MALFORMED_POLICY", "loud"),
            ("STOCKBOOK_STARTUP_ALERT", "maybe"),
        ],
    )
    def test_bad_values_rejected(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ValidationError, match=name):
            StockbookConfig.from_env()
