"""Application service: Remove Order Line use case.

Detaching the line from the aggregate and saving the order is what
deletes the line from the store.
"""

from __future__ import annotations

import structlog

from ordersvc.application.dto import OrderDTO
from ordersvc.application.enrichment import OrderEnricher
from ordersvc.domain.exceptions import EntityNotFoundError
from ordersvc.domain.repository.order_repository import OrderRepository
from ordersvc.domain.repository.product_catalog import ProductCatalog

logger = structlog.get_logger(__name__)


class RemoveOrderLineHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        catalog: ProductCatalog,
    ) -> None:
        self._order_repo = order_repo
        self._enricher = OrderEnricher(catalog)

    def handle(self, order_id: int, line_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        line = self._order_repo.get_line_by_id(line_id)
        if line is None:
            raise EntityNotFoundError(f"Line {line_id} not found")

        # A line of another order is reported the same way as a missing one.
        order.remove_line(line)
        self._order_repo.save(order)

        logger.info("Order line removed", order_id=order_id, line_id=line_id)
        return self._enricher.order(order)
