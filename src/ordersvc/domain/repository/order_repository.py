"""Abstract repository for the Order aggregate.

Lines are stored with their order; there is no separate line store.
Implementations must hand out detached copies so that an aborted use
case leaves nothing observable until ``save`` is called.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ordersvc.domain.model.order import Order, OrderLine


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order."""

    @abstractmethod
    def list_by_user(self, user_id: str) -> list[Order]:
        """Return the orders owned by *user_id*."""

    @abstractmethod
    def get_line_by_id(self, line_id: int) -> OrderLine | None:
        """Return a line attached to its reconstituted order, or None."""

    @abstractmethod
    def list_lines(self, order_id: int | None = None) -> list[OrderLine]:
        """Return the lines of one order, or of every order."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order, assigning missing order and line IDs.

        Lines no longer on the order are deleted.
        """

    @abstractmethod
    def delete(self, order_id: int) -> bool:
        """Delete an order and all of its lines.  Return False if absent."""
