"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its lines.  The back-reference
from a line to its order is only ever set or cleared here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable

from ordersvc.domain.exceptions import EntityNotFoundError, ValidationError
from ordersvc.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "PENDING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @classmethod
    def parse(cls, literal: str) -> OrderStatus:
        """Turn a caller-supplied literal into a status (case-insensitive)."""
        try:
            return cls(literal.strip().upper())
        except (AttributeError, ValueError) as exc:
            allowed = ", ".join(s.value for s in cls)
            raise ValidationError(
                f"Invalid order status {literal!r}; expected one of {allowed}"
            ) from exc


@dataclass(eq=False)
class OrderLine:
    """A product/quantity/price entry belonging to at most one order.

    ``unit_price`` is a snapshot taken when the line is priced; it is
    ``None`` until then.
    """

    product_id: str | None
    quantity: Quantity
    unit_price: Money | None = None
    id: int | None = None
    order: Order | None = field(default=None, repr=False)

    @property
    def line_total(self) -> Money:
        if self.unit_price is None:
            return Money.zero()
        return self.unit_price * self.quantity.value

    def same_as(self, other: OrderLine) -> bool:
        if self is other:
            return True
        return self.id is not None and self.id == other.id


@dataclass(eq=False)
class Order:
    """Aggregate root for purchase orders.

    Use ``Order.create()`` for new orders.  The ``__init__`` is kept plain
    so the repository can reconstitute persisted orders; it does not link
    lines, the repository does that through ``add_line``.
    """

    id: int | None
    user_id: str
    status: OrderStatus = OrderStatus.PENDING
    date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    lines: list[OrderLine] = field(default_factory=list)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        user_id: str,
        lines: Iterable[OrderLine] = (),
        status: OrderStatus = OrderStatus.PENDING,
        date: datetime | None = None,
    ) -> Order:
        if not user_id or not user_id.strip():
            raise ValidationError("Owning user is required")

        order = Order(id=None, user_id=user_id.strip(), status=status)
        if date is not None:
            order.date = date
        order.append_lines(lines)
        return order

    # --- Line collection ------------------------------------------------------

    def add_line(self, line: OrderLine) -> None:
        """Attach *line* to this order.

        The line is not detached from a previous owner; passing a line
        that still belongs to another order is an error.
        """
        if line.order is not None and line.order is not self:
            raise ValidationError(
                f"Line {line.id} already belongs to order #{line.order.id}"
            )
        line.order = self
        self.lines.append(line)

    def remove_line(self, line: OrderLine) -> OrderLine:
        """Detach *line* from this order and return the detached member.

        Matching is by identity, or by id for lines loaded separately from
        the store.
        """
        for i, member in enumerate(self.lines):
            if member.same_as(line):
                del self.lines[i]
                member.order = None
                line.order = None
                return member
        raise EntityNotFoundError(
            f"Line {line.id} not found on order #{self.id}"
        )

    def append_lines(self, lines: Iterable[OrderLine]) -> None:
        """Grow the order by *lines*.  Existing lines are never replaced."""
        for line in lines:
            self.add_line(line)

    def find_line(self, line_id: int) -> OrderLine:
        for line in self.lines:
            if line.id == line_id:
                return line
        raise EntityNotFoundError(f"Line {line_id} not found on order #{self.id}")

    # --- Computed properties --------------------------------------------------

    @property
    def total_amount(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.line_total
        return result
