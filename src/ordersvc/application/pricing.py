"""Line pricing against the live catalog.

Pricing is mandatory before a line is committed, so lookup failures are
never caught here.
"""

from __future__ import annotations

from typing import Iterable

from ordersvc.application.dto import OrderLineSpec
from ordersvc.domain.model.order import OrderLine
from ordersvc.domain.model.value_objects import Quantity
from ordersvc.domain.repository.product_catalog import ProductCatalog


class LinePricer:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def price(self, line: OrderLine) -> None:
        """Overwrite the line's unit price with the current catalog price."""
        if line.product_id is None:
            return
        product = self._catalog.fetch_product(line.product_id)
        line.unit_price = product.price  # <-- price snapshot

    def build_lines(self, specs: Iterable[OrderLineSpec]) -> list[OrderLine]:
        """Build and price detached lines from caller specs.

        Any price the caller sent is dropped.
        """
        lines = [
            OrderLine(product_id=spec.product_id, quantity=Quantity(spec.quantity))
            for spec in specs
        ]
        for line in lines:
            self.price(line)
        return lines
