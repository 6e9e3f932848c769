"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  The product snapshot
attached during enrichment only ever lives here, never on the domain
``OrderLine``, so it cannot be persisted by accident.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Generic, TypeVar

from ordersvc.domain.model.order import OrderStatus

T = TypeVar("T")


@dataclass(frozen=True)
class Present(Generic[T]):
    """Marks a patch field as supplied by the caller.

    A patch field left as ``None`` was not supplied; ``Present(x)`` was,
    whatever ``x`` is.
    """

    value: T


# --- Input -------------------------------------------------------------------


@dataclass(frozen=True)
class OrderLineSpec:
    """Input: what the caller asked for (product + quantity).

    ``unit_price`` is accepted for compatibility with clients that send
    one, but it is always replaced by the live catalog price.
    """

    product_id: str | None
    quantity: int
    unit_price: str | None = None


@dataclass(frozen=True)
class OrderPatch:
    """Input: a partial update of an order.

    Only fields wrapped in ``Present`` overwrite existing state.  ``lines``
    are appended to the order, never substituted for its lines.
    """

    date: Present[datetime] | None = None
    status: Present[OrderStatus] | None = None
    user_id: Present[str] | None = None
    lines: tuple[OrderLineSpec, ...] = ()


@dataclass(frozen=True)
class LinePatch:
    """Input: a partial update of a single line."""

    quantity: Present[int] | None = None
    product_id: Present[str] | None = None


# --- Output ------------------------------------------------------------------


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    description: str
    price: str
    quantity: int


@dataclass(frozen=True)
class OrderLineDTO:
    """Output: a single line as displayed to the user.

    ``product`` is the live catalog record; when it could not be fetched
    it is None and ``product_error`` says why.
    """

    id: int
    order_id: int | None
    product_id: str | None
    quantity: int
    unit_price: str | None  # formatted, e.g. "$15.00"
    line_total: str
    product: ProductDTO | None = None
    product_error: str | None = None


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    user_id: str
    status: str
    date: str
    lines: list[OrderLineDTO]
    total_amount: str

    @property
    def has_enrichment_failures(self) -> bool:
        return any(line.product_error is not None for line in self.lines)
