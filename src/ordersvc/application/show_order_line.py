"""Application service: Show Order Line use case (query)."""

from __future__ import annotations

from ordersvc.application.dto import OrderLineDTO
from ordersvc.application.enrichment import OrderEnricher
from ordersvc.domain.exceptions import EntityNotFoundError
from ordersvc.domain.repository.order_repository import OrderRepository
from ordersvc.domain.repository.product_catalog import ProductCatalog


class ShowOrderLineHandler:

    def __init__(self, order_repo: OrderRepository, catalog: ProductCatalog) -> None:
        self._order_repo = order_repo
        self._enricher = OrderEnricher(catalog)

    def handle(self, line_id: int) -> OrderLineDTO:
        line = self._order_repo.get_line_by_id(line_id)
        if line is None:
            raise EntityNotFoundError(f"Line {line_id} not found")
        return self._enricher.line(line)
