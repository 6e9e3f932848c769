"""Integration tests for the DeleteOrderLine use case."""

import pytest

from ordersvc.application.create_order import CreateOrderHandler
from ordersvc.application.delete_order_line import DeleteOrderLineHandler
from ordersvc.application.dto import OrderLineSpec
from ordersvc.domain.exceptions import EntityNotFoundError
from ordersvc.domain.model.value_objects import Money
from tests.fakes import FakeOrderRepository, FakeProductCatalog, default_products


def _setup():
    order_repo = FakeOrderRepository()
    catalog = FakeProductCatalog(default_products())
    order_id = CreateOrderHandler(order_repo, catalog).handle(
        "alice", [OrderLineSpec("P1", 2), OrderLineSpec("P2", 1)]
    )
    return DeleteOrderLineHandler(order_repo), order_repo, order_id


class TestDeleteOrderLine:

    def test_deletes_line_and_keeps_the_rest(self):
        handler, order_repo, order_id = _setup()
        kept, dropped = order_repo.get_by_id(order_id).lines

        handler.handle(dropped.id)

        order = order_repo.get_by_id(order_id)
        assert [line.id for line in order.lines] == [kept.id]
        assert order.total_amount == Money.of("20.00")
        assert order_repo.get_line_by_id(dropped.id) is None

    def test_deleting_twice_reports_not_found(self):
        handler, order_repo, order_id = _setup()
        line_id = order_repo.get_by_id(order_id).lines[0].id
        handler.handle(line_id)
        with pytest.raises(EntityNotFoundError, match=f"Line {line_id} not found"):
            handler.handle(line_id)

    def test_missing_line(self):
        handler, order_repo, order_id = _setup()
        saves = order_repo.save_count
        with pytest.raises(EntityNotFoundError, match="Line 99 not found"):
            handler.handle(99)
        assert order_repo.save_count == saves
        assert len(order_repo.get_by_id(order_id).lines) == 2
