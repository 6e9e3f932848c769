"""Application service: Delete Order Line use case.

The line is detached by its own order and the order saved, which drops
the line from the store.
"""

from __future__ import annotations

import structlog

from ordersvc.domain.exceptions import EntityNotFoundError
from ordersvc.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class DeleteOrderLineHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, line_id: int) -> None:
        line = self._order_repo.get_line_by_id(line_id)
        if line is None or line.order is None:
            raise EntityNotFoundError(f"Line {line_id} not found")

        order = line.order
        order.remove_line(line)
        self._order_repo.save(order)

        logger.info("Order line deleted", order_id=order.id, line_id=line_id)
