"""Application service: Delete Order use case.

The repository removes the order's lines along with it.
"""

from __future__ import annotations

import structlog

from ordersvc.domain.exceptions import EntityNotFoundError
from ordersvc.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> None:
        if not self._order_repo.delete(order_id):
            raise EntityNotFoundError(f"Order #{order_id} not found")
        logger.info("Order deleted", order_id=order_id)
