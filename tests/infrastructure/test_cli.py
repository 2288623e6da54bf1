"""End-to-end tests for the click CLI against a temporary data directory."""

import json
import logging

import pytest
from click.testing import CliRunner

from basket.infrastructure.cli.main import cli
from basket.infrastructure.config import get_settings
from basket.infrastructure.logging_setup import _parse_level


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("BASKET_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("BASKET_BASKET_ID", "cli-test")
    get_settings.cache_clear()
    yield CliRunner()
    get_settings.cache_clear()


def _invoke(runner, *args):
    return runner.invoke(cli, list(args))


def _seed(runner):
    _invoke(runner, "product", "add", "--name", "Widget", "--price", "10.00", "--stock", "5")
    _invoke(runner, "product", "add", "--name", "Gizmo", "--price", "5.00", "--stock", "10")


class TestProductCommands:

    def test_add_and_list(self, runner):
        result = _invoke(runner, "product", "add", "--name", "Widget", "--price", "10.00", "--stock", "5")
        assert result.exit_code == 0
        assert "Product #1 'Widget' added at $10.00 (5 in stock)" in result.output

        result = _invoke(runner, "product", "list")
        assert "Widget" in result.output
        assert "$10.00" in result.output

    def test_duplicate_product_fails(self, runner):
        _seed(runner)
        result = _invoke(runner, "product", "add", "--name", "Widget", "--price", "1.00")
        assert result.exit_code == 1
        assert "already exists" in result.output


class TestCartCommands:

    def test_add_show_and_subtotal(self, runner):
        _seed(runner)
        assert _invoke(runner, "cart", "add", "--product", "1", "--quantity", "3").exit_code == 0
        assert _invoke(runner, "cart", "add", "--product", "2", "--quantity", "2").exit_code == 0

        result = _invoke(runner, "cart", "show")
        assert result.exit_code == 0
        assert "Widget" in result.output
        assert "$40.00" in result.output

    def test_quantity_exceeded_reports_error(self, runner):
        _seed(runner)
        _invoke(runner, "cart", "add", "--product", "1", "--quantity", "3")
        result = _invoke(runner, "cart", "add", "--product", "1", "--quantity", "3")
        assert result.exit_code == 1
        assert "Quantity exceeded" in result.output

    def test_refresh_after_stock_drop(self, runner):
        _seed(runner)
        _invoke(runner, "cart", "add", "--product", "1", "--quantity", "3")
        _invoke(runner, "cart", "add", "--product", "2", "--quantity", "2")
        _invoke(runner, "product", "stock", "--id", "1", "--stock", "1")

        result = _invoke(runner, "cart", "refresh")
        assert result.exit_code == 0
        assert "$20.00" in result.output

    def test_show_reports_mixed_currencies_as_error(self, runner, tmp_path):
        _seed(runner)
        products_file = tmp_path / "products.json"
        products = json.loads(products_file.read_text())
        products.append(
            {"id": 3, "name": "Euro Mug", "price": "8.00", "currency": "EUR", "stock": 4}
        )
        products_file.write_text(json.dumps(products))
        _invoke(runner, "cart", "add", "--product", "1")
        _invoke(runner, "cart", "add", "--product", "3")

        result = _invoke(runner, "cart", "show")
        assert result.exit_code == 1
        assert "Cannot combine" in result.output
        assert isinstance(result.exception, SystemExit)

    def test_separate_baskets(self, runner):
        _seed(runner)
        _invoke(runner, "cart", "add", "--product", "1", "--basket", "alice")
        result = _invoke(runner, "cart", "show", "--basket", "bob")
        assert "Basket is empty." in result.output

    def test_remove_and_clear(self, runner):
        _seed(runner)
        _invoke(runner, "cart", "add", "--product", "1")
        assert "removed from basket" in _invoke(runner, "cart", "remove", "--product", "1").output
        assert "was not in the basket" in _invoke(runner, "cart", "remove", "--product", "1").output

        _invoke(runner, "cart", "add", "--product", "2")
        result = _invoke(runner, "cart", "clear")
        assert "1 line(s) removed" in result.output


class TestLogLevel:

    def test_known_level(self):
        assert _parse_level("debug") == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self):
        assert _parse_level("chatty") == logging.WARNING
