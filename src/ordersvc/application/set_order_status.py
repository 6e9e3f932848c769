"""Application service: Set Order Status use case.

Any status may follow any other; only the literal itself is validated.
"""

from __future__ import annotations

import structlog

from ordersvc.domain.exceptions import EntityNotFoundError
from ordersvc.domain.model.order import OrderStatus
from ordersvc.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class SetOrderStatusHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, status: str) -> None:
        new_status = OrderStatus.parse(status)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        previous = order.status
        order.status = new_status
        self._order_repo.save(order)

        logger.info(
            "Order status changed",
            order_id=order_id,
            previous=previous.value,
            status=new_status.value,
        )
