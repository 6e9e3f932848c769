"""Application service: Create Order use case.

Orchestrates the flow between the catalog, the Order aggregate and the
repository.  Every line is priced before anything is saved, so a
failed lookup leaves the store untouched.
"""

from __future__ import annotations

import structlog

from ordersvc.application.dto import OrderLineSpec
from ordersvc.application.pricing import LinePricer
from ordersvc.domain.model.order import Order, OrderStatus
from ordersvc.domain.repository.order_repository import OrderRepository
from ordersvc.domain.repository.product_catalog import ProductCatalog

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        catalog: ProductCatalog,
    ) -> None:
        self._order_repo = order_repo
        self._pricer = LinePricer(catalog)

    def handle(
        self,
        user_id: str,
        line_specs: list[OrderLineSpec],
        status: OrderStatus = OrderStatus.PENDING,
    ) -> int:
        """Create a new order and return its ID.

        Steps:
        1. Price each line from the catalog (caller prices are discarded).
        2. Let the Order aggregate link the lines.
        3. Persist once.
        """
        lines = self._pricer.build_lines(line_specs)
        order = Order.create(user_id=user_id, lines=lines, status=status)
        self._order_repo.save(order)

        logger.info(
            "Order created",
            order_id=order.id,
            user_id=order.user_id,
            lines=len(order.lines),
            total=str(order.total_amount),
        )
        return order.id  # type: ignore[return-value]
