"""Application service: Show Order use case (query)."""

from __future__ import annotations

from ordersvc.application.dto import OrderDTO
from ordersvc.application.enrichment import OrderEnricher
from ordersvc.domain.exceptions import EntityNotFoundError
from ordersvc.domain.repository.order_repository import OrderRepository
from ordersvc.domain.repository.product_catalog import ProductCatalog


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository, catalog: ProductCatalog) -> None:
        self._order_repo = order_repo
        self._enricher = OrderEnricher(catalog)

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return self._enricher.order(order)
