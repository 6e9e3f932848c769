"""JSON-file-backed implementation of OrderRepository.

Lines are nested under their order in the file, so deleting an order
deletes its lines and a line dropped from an order disappears on save.
Every read rebuilds fresh aggregates from disk.  Order and line ids come
from counters stored in the file that only ever increase, so a deleted
id never comes back.
"""

from __future__ import annotations

import json
import os
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from ordersvc.domain.model.order import Order, OrderLine, OrderStatus
from ordersvc.domain.model.value_objects import Money, Quantity
from ordersvc.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._load_raw():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def list_by_user(self, user_id: str) -> list[Order]:
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["user_id"] == user_id
        ]

    def get_line_by_id(self, line_id: int) -> OrderLine | None:
        for raw in self._load_raw():
            if any(line["id"] == line_id for line in raw["lines"]):
                return self._to_domain(raw).find_line(line_id)
        return None

    def list_lines(self, order_id: int | None = None) -> list[OrderLine]:
        return [
            line
            for raw in self._load_raw()
            if order_id is None or raw["id"] == order_id
            for line in self._to_domain(raw).lines
        ]

    def save(self, order: Order) -> None:
        document = self._load_document()
        orders = document["orders"]

        if order.id is None:
            order.id = document["next_order_id"]
            document["next_order_id"] += 1

        for line in order.lines:
            if line.id is None:
                line.id = document["next_line_id"]
                document["next_line_id"] += 1

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                break
        else:
            orders.append(self._to_raw(order))

        self._persist_document(document)

    def delete(self, order_id: int) -> bool:
        document = self._load_document()
        remaining = [o for o in document["orders"] if o["id"] != order_id]
        if len(remaining) == len(document["orders"]):
            return False
        # Counters are left alone so deleted ids are never handed out again.
        document["orders"] = remaining
        self._persist_document(document)
        return True

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "status": order.status.value,
            "date": order.date.isoformat(),
            "lines": [
                {
                    "id": line.id,
                    "product_id": line.product_id,
                    "quantity": line.quantity.value,
                    "unit_price": (
                        str(line.unit_price.amount) if line.unit_price else None
                    ),
                    "currency": line.unit_price.currency if line.unit_price else None,
                }
                for line in order.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        order = Order(
            id=raw["id"],
            user_id=raw["user_id"],
            status=OrderStatus(raw["status"]),
            date=datetime.fromisoformat(raw["date"]),
        )
        order.append_lines(
            OrderLine(
                id=i["id"],
                product_id=i["product_id"],
                quantity=Quantity(i["quantity"]),
                unit_price=(
                    Money(Decimal(i["unit_price"]), i.get("currency") or "USD")
                    if i["unit_price"] is not None
                    else None
                ),
            )
            for i in raw["lines"]
        )
        return order

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return self._load_document()["orders"]

    def _load_document(self) -> dict:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_document(self, document: dict) -> None:
        # Write-then-rename so readers never see a half-written file.
        tmp_path = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
        os.replace(tmp_path, self._file_path)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist_document(
                {"next_order_id": 1, "next_line_id": 1, "orders": []}
            )
