"""Application service: Update Order Line use case.

Supplied fields overwrite, absent fields are left alone.  Pointing a
line at another product re-prices it from the catalog; the price is
otherwise never recomputed.
"""

from __future__ import annotations

import structlog

from ordersvc.application.dto import LinePatch
from ordersvc.application.pricing import LinePricer
from ordersvc.domain.exceptions import EntityNotFoundError, ValidationError
from ordersvc.domain.model.value_objects import Quantity
from ordersvc.domain.repository.order_repository import OrderRepository
from ordersvc.domain.repository.product_catalog import ProductCatalog

logger = structlog.get_logger(__name__)


class UpdateOrderLineHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        catalog: ProductCatalog,
    ) -> None:
        self._order_repo = order_repo
        self._pricer = LinePricer(catalog)

    def handle(self, line_id: int, patch: LinePatch) -> None:
        line = self._order_repo.get_line_by_id(line_id)
        if line is None or line.order is None:
            raise EntityNotFoundError(f"Line {line_id} not found")
        order = line.order

        quantity = Quantity(patch.quantity.value) if patch.quantity is not None else None
        product_id = None
        if patch.product_id is not None:
            product_id = (patch.product_id.value or "").strip()
            if not product_id:
                raise ValidationError("Product ID cannot be blank")

        if quantity is not None:
            line.quantity = quantity
        if product_id is not None and product_id != line.product_id:
            line.product_id = product_id
            self._pricer.price(line)

        self._order_repo.save(order)

        logger.info(
            "Order line updated",
            order_id=order.id,
            line_id=line_id,
            quantity=line.quantity.value,
            product_id=line.product_id,
            unit_price=str(line.unit_price),
        )
