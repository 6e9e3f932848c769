"""Product snapshot.

Products are owned by the remote catalog service. The order service
only ever sees a read-only copy of what the catalog answered.
"""

from __future__ import annotations

from dataclasses import dataclass

from ordersvc.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product record as returned by the catalog."""

    id: str
    name: str
    price: Money
    description: str = ""
    quantity: int = 0  # catalog stock level, informational only
