"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON repository and
the HTTP catalog but keep everything in a dict. No file I/O, no network.
Like the JSON repository, the fake order repository hands out copies, so
nothing a handler does is visible until it calls ``save``.
"""

from __future__ import annotations

import copy
from dataclasses import replace

from ordersvc.domain.exceptions import ProductNotFoundError, UpstreamUnavailableError
from ordersvc.domain.model.order import Order, OrderLine
from ordersvc.domain.model.product import Product
from ordersvc.domain.model.value_objects import Money
from ordersvc.domain.repository.order_repository import OrderRepository
from ordersvc.domain.repository.product_catalog import ProductCatalog


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1
        self._next_line_id = 1
        self.save_count = 0

    def get_by_id(self, order_id: int) -> Order | None:
        order = self._store.get(order_id)
        return copy.deepcopy(order) if order is not None else None

    def list_all(self) -> list[Order]:
        return [copy.deepcopy(o) for o in self._store.values()]

    def list_by_user(self, user_id: str) -> list[Order]:
        return [copy.deepcopy(o) for o in self._store.values() if o.user_id == user_id]

    def get_line_by_id(self, line_id: int) -> OrderLine | None:
        for order in self._store.values():
            if any(line.id == line_id for line in order.lines):
                return copy.deepcopy(order).find_line(line_id)
        return None

    def list_lines(self, order_id: int | None = None) -> list[OrderLine]:
        return [
            line
            for order in self.list_all()
            if order_id is None or order.id == order_id
            for line in order.lines
        ]

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self._next_id
            self._next_id += 1
        for line in order.lines:
            if line.id is None:
                line.id = self._next_line_id
                self._next_line_id += 1
        self._store[order.id] = copy.deepcopy(order)
        self.save_count += 1

    def delete(self, order_id: int) -> bool:
        return self._store.pop(order_id, None) is not None


class FakeProductCatalog(ProductCatalog):

    def __init__(
        self,
        products: list[Product] | None = None,
        unavailable: set[str] | None = None,
    ) -> None:
        self._store: dict[str, Product] = {p.id: p for p in products or []}
        self._unavailable = set(unavailable or ())
        self.calls: list[str] = []

    def fetch_product(self, product_id: str) -> Product:
        self.calls.append(product_id)
        if product_id in self._unavailable:
            raise UpstreamUnavailableError(
                f"Product service unreachable fetching product '{product_id}'"
            )
        product = self._store.get(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product not found: '{product_id}'")
        return product

    def set_price(self, product_id: str, price: str) -> None:
        self._store[product_id] = replace(self._store[product_id], price=Money.of(price))

    def make_unavailable(self, product_id: str) -> None:
        self._unavailable.add(product_id)


def default_products() -> list[Product]:
    return [
        Product(id="P1", name="Widget", price=Money.of("10.00"), description="A widget", quantity=100),
        Product(id="P2", name="Gadget", price=Money.of("25.00"), description="A gadget", quantity=50),
        Product(id="P3", name="Gizmo", price=Money.of("4.50"), quantity=7),
    ]
