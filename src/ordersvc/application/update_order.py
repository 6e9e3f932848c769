"""Application service: Update Order use case.

Applies an ``OrderPatch``: supplied fields overwrite, absent fields are
left alone, and any lines in the patch are appended to the order.
"""

from __future__ import annotations

from datetime import datetime

import structlog

from ordersvc.application.dto import OrderPatch
from ordersvc.application.pricing import LinePricer
from ordersvc.domain.exceptions import EntityNotFoundError, ValidationError
from ordersvc.domain.model.order import OrderStatus
from ordersvc.domain.repository.order_repository import OrderRepository
from ordersvc.domain.repository.product_catalog import ProductCatalog

logger = structlog.get_logger(__name__)


class UpdateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        catalog: ProductCatalog,
    ) -> None:
        self._order_repo = order_repo
        self._pricer = LinePricer(catalog)

    def handle(self, order_id: int, patch: OrderPatch) -> None:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        if patch.user_id is not None and not (patch.user_id.value or "").strip():
            raise ValidationError("Owning user is required")
        if patch.status is not None and not isinstance(patch.status.value, OrderStatus):
            raise ValidationError(f"Invalid order status {patch.status.value!r}")
        if patch.date is not None and not isinstance(patch.date.value, datetime):
            raise ValidationError(f"Invalid order date {patch.date.value!r}")

        # Price before touching the aggregate so a failed lookup aborts cleanly.
        new_lines = self._pricer.build_lines(patch.lines)

        changed: list[str] = []
        if patch.date is not None:
            order.date = patch.date.value
            changed.append("date")
        if patch.status is not None:
            order.status = patch.status.value
            changed.append("status")
        if patch.user_id is not None:
            order.user_id = patch.user_id.value.strip()
            changed.append("user_id")

        order.append_lines(new_lines)
        self._order_repo.save(order)

        logger.info(
            "Order updated",
            order_id=order_id,
            fields=changed,
            appended_lines=len(new_lines),
        )
