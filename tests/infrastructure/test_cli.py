"""End-to-end tests of the click commands against a temp data dir and a
mocked product service."""

import httpx
import pytest
from click.testing import CliRunner

from ordersvc.infrastructure.cli import line_commands, order_commands
from ordersvc.infrastructure.cli.main import cli
from ordersvc.infrastructure.http.product_client import HttpProductCatalog

PRODUCTS = {
    "1": {"id": 1, "name": "Widget", "description": "A widget", "price": 10.0, "quantity": 5},
    "2": {"id": 2, "name": "Gadget", "description": "A gadget", "price": 25.0, "quantity": 3},
}


def _handler(request: httpx.Request) -> httpx.Response:
    product_id = request.url.path.rsplit("/", 1)[-1]
    if product_id not in PRODUCTS:
        return httpx.Response(404)
    return httpx.Response(200, json=PRODUCTS[product_id])


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("ORDERSVC_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    def catalog():
        return HttpProductCatalog("http://catalog.test", transport=httpx.MockTransport(_handler))

    monkeypatch.setattr(order_commands, "product_catalog", catalog)
    monkeypatch.setattr(line_commands, "product_catalog", catalog)
    return CliRunner()


def test_create_show_and_total(runner):
    result = runner.invoke(cli, ["order", "create", "--user", "alice", "--items", "1:3,2:1"])
    assert result.exit_code == 0, result.output
    assert "Order #1 created." in result.output

    result = runner.invoke(cli, ["order", "show", "--id", "1"])
    assert result.exit_code == 0, result.output
    assert "Widget" in result.output
    assert "Gadget" in result.output
    assert "$55.00" in result.output


def test_line_lifecycle(runner):
    runner.invoke(cli, ["order", "create", "--user", "alice", "--items", "1:1"])

    result = runner.invoke(cli, ["order", "add-line", "--id", "1", "--product", "2", "--qty", "2"])
    assert result.exit_code == 0, result.output
    assert "$60.00" in result.output

    result = runner.invoke(cli, ["order", "remove-line", "--id", "1", "--line", "2"])
    assert result.exit_code == 0, result.output
    assert "$10.00" in result.output

    result = runner.invoke(cli, ["line", "show", "--id", "2"])
    assert result.exit_code != 0
    assert "Line 2 not found" in result.output


def test_update_status_and_mine(runner):
    runner.invoke(cli, ["order", "create", "--user", "alice", "--items", "1:1"])
    runner.invoke(cli, ["order", "create", "--user", "bob", "--items", "2:1"])

    result = runner.invoke(cli, ["order", "status", "--id", "1", "--value", "shipped"])
    assert result.exit_code == 0, result.output

    result = runner.invoke(cli, ["order", "mine", "--user", "alice"])
    assert result.exit_code == 0, result.output
    assert "SHIPPED" in result.output
    assert "bob" not in result.output


def test_invalid_status_and_unknown_product(runner):
    runner.invoke(cli, ["order", "create", "--user", "alice", "--items", "1:1"])

    result = runner.invoke(cli, ["order", "status", "--id", "1", "--value", "LOST"])
    assert result.exit_code == 1
    assert "Invalid order status" in result.output

    result = runner.invoke(cli, ["order", "create", "--user", "alice", "--items", "99:1"])
    assert result.exit_code == 1
    assert "Product not found" in result.output


def test_delete(runner):
    runner.invoke(cli, ["order", "create", "--user", "alice", "--items", "1:1"])
    result = runner.invoke(cli, ["order", "delete", "--id", "1"])
    assert result.exit_code == 0, result.output

    result = runner.invoke(cli, ["order", "list"])
    assert "No orders." in result.output


def test_line_delete(runner):
    runner.invoke(cli, ["order", "create", "--user", "alice", "--items", "1:1,2:1"])

    result = runner.invoke(cli, ["line", "delete", "--id", "2"])
    assert result.exit_code == 0, result.output
    assert "Line 2 deleted." in result.output

    result = runner.invoke(cli, ["order", "show", "--id", "1"])
    assert "Gadget" not in result.output
    assert "$10.00" in result.output

    result = runner.invoke(cli, ["line", "delete", "--id", "2"])
    assert result.exit_code == 1
    assert "Line 2 not found" in result.output
