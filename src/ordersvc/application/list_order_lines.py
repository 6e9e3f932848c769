"""Application service: List Order Lines use case (query)."""

from __future__ import annotations

from ordersvc.application.dto import OrderLineDTO
from ordersvc.application.enrichment import OrderEnricher
from ordersvc.domain.exceptions import EntityNotFoundError
from ordersvc.domain.repository.order_repository import OrderRepository
from ordersvc.domain.repository.product_catalog import ProductCatalog


class ListOrderLinesHandler:

    def __init__(self, order_repo: OrderRepository, catalog: ProductCatalog) -> None:
        self._order_repo = order_repo
        self._enricher = OrderEnricher(catalog)

    def handle(self, order_id: int | None = None) -> list[OrderLineDTO]:
        """List the lines of one order, or of every order when *order_id* is None."""
        if order_id is not None and self._order_repo.get_by_id(order_id) is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return self._enricher.lines(self._order_repo.list_lines(order_id))
