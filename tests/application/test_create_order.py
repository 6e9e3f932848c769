"""Integration tests for the CreateOrder use case.

Uses in-memory fakes — no file I/O, no network.
"""

import pytest

from ordersvc.application.create_order import CreateOrderHandler
from ordersvc.application.dto import OrderLineSpec
from ordersvc.domain.exceptions import (
    ProductNotFoundError,
    UpstreamUnavailableError,
    ValidationError,
)
from ordersvc.domain.model.order import OrderStatus
from ordersvc.domain.model.value_objects import Money
from tests.fakes import FakeOrderRepository, FakeProductCatalog, default_products


def _setup(
    unavailable: set[str] | None = None,
) -> tuple[CreateOrderHandler, FakeOrderRepository, FakeProductCatalog]:
    order_repo = FakeOrderRepository()
    catalog = FakeProductCatalog(default_products(), unavailable=unavailable)
    handler = CreateOrderHandler(order_repo, catalog)
    return handler, order_repo, catalog


class TestCreateOrderHappyPath:

    def test_total_uses_live_price(self):
        handler, order_repo, _ = _setup()
        order_id = handler.handle("alice", [OrderLineSpec("P1", 3)])

        order = order_repo.get_by_id(order_id)
        assert order.total_amount == Money.of("30.00")
        assert order.status == OrderStatus.PENDING
        assert order.user_id == "alice"

    def test_caller_price_is_discarded(self):
        handler, order_repo, _ = _setup()
        order_id = handler.handle("alice", [OrderLineSpec("P1", 3, unit_price="1.00")])

        [line] = order_repo.get_by_id(order_id).lines
        assert line.unit_price == Money.of("10.00")

    def test_assigns_order_and_line_ids(self):
        handler, order_repo, _ = _setup()
        order_id = handler.handle("alice", [OrderLineSpec("P1", 1), OrderLineSpec("P2", 2)])

        order = order_repo.get_by_id(order_id)
        assert order_id == 1
        assert [line.id for line in order.lines] == [1, 2]
        assert all(line.order is order for line in order.lines)

    def test_sequential_ids(self):
        handler, _, _ = _setup()
        first = handler.handle("alice", [OrderLineSpec("P1", 1)])
        second = handler.handle("bob", [OrderLineSpec("P2", 1)])
        assert second == first + 1

    def test_order_without_lines_is_allowed(self):
        handler, order_repo, _ = _setup()
        order_id = handler.handle("alice", [])
        assert order_repo.get_by_id(order_id).total_amount == Money.of("0")

    def test_line_without_product_is_not_priced(self):
        handler, order_repo, catalog = _setup()
        order_id = handler.handle("alice", [OrderLineSpec(None, 2)])

        [line] = order_repo.get_by_id(order_id).lines
        assert line.unit_price is None
        assert catalog.calls == []


class TestCreateOrderPriceSnapshot:

    def test_catalog_price_change_does_not_touch_saved_order(self):
        handler, order_repo, catalog = _setup()
        order_id = handler.handle("alice", [OrderLineSpec("P1", 1)])

        catalog.set_price("P1", "99.99")

        assert order_repo.get_by_id(order_id).total_amount == Money.of("10.00")


class TestCreateOrderFailures:

    def test_unknown_product_aborts_without_saving(self):
        handler, order_repo, _ = _setup()
        with pytest.raises(ProductNotFoundError, match="Product not found"):
            handler.handle("alice", [OrderLineSpec("P1", 1), OrderLineSpec("NOPE", 1)])
        assert order_repo.list_all() == []
        assert order_repo.save_count == 0

    def test_unreachable_catalog_aborts_without_saving(self):
        handler, order_repo, _ = _setup(unavailable={"P2"})
        with pytest.raises(UpstreamUnavailableError):
            handler.handle("alice", [OrderLineSpec("P1", 1), OrderLineSpec("P2", 1)])
        assert order_repo.list_all() == []

    def test_non_positive_quantity_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            handler.handle("alice", [OrderLineSpec("P1", 0)])

    def test_blank_user_rejected(self):
        handler, _, _ = _setup()
        with pytest.raises(ValidationError, match="Owning user"):
            handler.handle("", [OrderLineSpec("P1", 1)])
