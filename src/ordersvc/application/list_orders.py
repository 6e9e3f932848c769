"""Application service: List Orders use cases (queries).

Both the full listing and the per-user listing are enriched.
"""

from __future__ import annotations

from ordersvc.application.dto import OrderDTO
from ordersvc.application.enrichment import OrderEnricher
from ordersvc.domain.repository.order_repository import OrderRepository
from ordersvc.domain.repository.product_catalog import ProductCatalog


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository, catalog: ProductCatalog) -> None:
        self._order_repo = order_repo
        self._enricher = OrderEnricher(catalog)

    def handle(self) -> list[OrderDTO]:
        return self._enricher.orders(self._order_repo.list_all())


class ListUserOrdersHandler:

    def __init__(self, order_repo: OrderRepository, catalog: ProductCatalog) -> None:
        self._order_repo = order_repo
        self._enricher = OrderEnricher(catalog)

    def handle(self, user_id: str) -> list[OrderDTO]:
        return self._enricher.orders(self._order_repo.list_by_user(user_id))
