"""Application service: Add Order Line use case.

The line is priced from the catalog before it is attached; the order is
saved only once both have succeeded.
"""

from __future__ import annotations

import structlog

from ordersvc.application.dto import OrderDTO, OrderLineSpec
from ordersvc.application.enrichment import OrderEnricher
from ordersvc.application.pricing import LinePricer
from ordersvc.domain.exceptions import EntityNotFoundError
from ordersvc.domain.repository.order_repository import OrderRepository
from ordersvc.domain.repository.product_catalog import ProductCatalog

logger = structlog.get_logger(__name__)


class AddOrderLineHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        catalog: ProductCatalog,
    ) -> None:
        self._order_repo = order_repo
        self._pricer = LinePricer(catalog)
        self._enricher = OrderEnricher(catalog)

    def handle(self, order_id: int, spec: OrderLineSpec) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        [line] = self._pricer.build_lines([spec])
        order.add_line(line)
        self._order_repo.save(order)

        logger.info(
            "Order line added",
            order_id=order_id,
            line_id=line.id,
            product_id=line.product_id,
            quantity=line.quantity.value,
            unit_price=str(line.unit_price),
        )
        return self._enricher.order(order)
