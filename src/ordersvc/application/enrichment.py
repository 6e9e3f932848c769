"""Read-side mapping: domain orders to DTOs carrying live product data.

Every read path goes through ``OrderEnricher`` so listings, single
orders and single lines are enriched the same way.  A failed lookup
marks the affected lines instead of failing the whole read.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Iterable

import structlog

from ordersvc.application.dto import OrderDTO, OrderLineDTO, ProductDTO
from ordersvc.domain.exceptions import EntityNotFoundError, UpstreamUnavailableError
from ordersvc.domain.model.order import Order, OrderLine
from ordersvc.domain.model.product import Product
from ordersvc.domain.repository.product_catalog import ProductCatalog

logger = structlog.get_logger(__name__)

DATE_FORMAT = "%Y-%m-%d %H:%M UTC"


class OrderEnricher:

    def __init__(self, catalog: ProductCatalog, max_workers: int = 8) -> None:
        self._catalog = catalog
        self._max_workers = max_workers

    def orders(self, orders: Iterable[Order]) -> list[OrderDTO]:
        orders = list(orders)
        products = self._fetch_all(
            line.product_id for order in orders for line in order.lines
        )
        return [self._order_to_dto(order, products) for order in orders]

    def order(self, order: Order) -> OrderDTO:
        return self.orders([order])[0]

    def lines(self, lines: Iterable[OrderLine]) -> list[OrderLineDTO]:
        lines = list(lines)
        products = self._fetch_all(line.product_id for line in lines)
        return [self._line_to_dto(line, products) for line in lines]

    def line(self, line: OrderLine) -> OrderLineDTO:
        return self.lines([line])[0]

    # --- Lookups --------------------------------------------------------------

    def _fetch_all(
        self, product_ids: Iterable[str | None]
    ) -> dict[str, Product | Exception]:
        """Fetch each distinct product once, concurrently.

        The result maps product id to either the product or the error the
        catalog raised for it.
        """
        wanted = list(dict.fromkeys(pid for pid in product_ids if pid is not None))
        if not wanted:
            return {}
        workers = min(self._max_workers, len(wanted))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = pool.map(self._fetch_one, wanted)
            return dict(zip(wanted, results))

    def _fetch_one(self, product_id: str) -> Product | Exception:
        try:
            return self._catalog.fetch_product(product_id)
        except (EntityNotFoundError, UpstreamUnavailableError) as exc:
            logger.warning(
                "Product enrichment failed",
                product_id=product_id,
                error=str(exc),
            )
            return exc

    # --- Mapping --------------------------------------------------------------

    def _order_to_dto(
        self, order: Order, products: dict[str, Product | Exception]
    ) -> OrderDTO:
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            user_id=order.user_id,
            status=order.status.value,
            date=order.date.strftime(DATE_FORMAT),
            lines=[self._line_to_dto(line, products) for line in order.lines],
            total_amount=str(order.total_amount),
        )

    @staticmethod
    def _line_to_dto(
        line: OrderLine, products: dict[str, Product | Exception]
    ) -> OrderLineDTO:
        product: ProductDTO | None = None
        error: str | None = None
        if line.product_id is not None:
            found = products[line.product_id]
            if isinstance(found, Exception):
                error = str(found)
            else:
                product = ProductDTO(
                    id=found.id,
                    name=found.name,
                    description=found.description,
                    price=str(found.price),
                    quantity=found.quantity,
                )

        return OrderLineDTO(
            id=line.id,  # type: ignore[arg-type]
            order_id=line.order.id if line.order is not None else None,
            product_id=line.product_id,
            quantity=line.quantity.value,
            unit_price=str(line.unit_price) if line.unit_price is not None else None,
            line_total=str(line.line_total),
            product=product,
            product_error=error,
        )
