"""CLI commands for the Order aggregate."""

from __future__ import annotations

from datetime import datetime, timezone

import click

from ordersvc.application.add_order_line import AddOrderLineHandler
from ordersvc.application.create_order import CreateOrderHandler
from ordersvc.application.delete_order import DeleteOrderHandler
from ordersvc.application.dto import OrderLineSpec, OrderPatch, Present
from ordersvc.application.list_orders import ListOrdersHandler, ListUserOrdersHandler
from ordersvc.application.remove_order_line import RemoveOrderLineHandler
from ordersvc.application.set_order_status import SetOrderStatusHandler
from ordersvc.application.show_order import ShowOrderHandler
from ordersvc.application.update_order import UpdateOrderHandler
from ordersvc.domain.exceptions import DomainException
from ordersvc.domain.model.order import OrderStatus
from ordersvc.infrastructure.bootstrap import order_repository, product_catalog
from ordersvc.infrastructure.cli.formatting import echo_order, echo_order_summary


def _parse_items(raw: str) -> list[OrderLineSpec]:
    """Parse 'P1:3,P2:5' into OrderLineSpec list."""
    specs: list[OrderLineSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(OrderLineSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _parse_date(raw: str) -> datetime:
    try:
        value = datetime.fromisoformat(raw)
    except ValueError:
        raise click.BadParameter(f"Invalid date '{raw}'. Expected ISO 8601.")
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


@click.command("list")
def order_list() -> None:
    """List every order."""
    with product_catalog() as catalog:
        handler = ListOrdersHandler(order_repository(), catalog)
        try:
            orders = handler.handle()
        except DomainException as exc:
            raise click.ClickException(str(exc))

    echo_order_summary(orders)


@click.command("mine")
@click.option("--user", "user_id", required=True, help="Owning user ID.")
def order_mine(user_id: str) -> None:
    """List the orders of one user."""
    with product_catalog() as catalog:
        handler = ListUserOrdersHandler(order_repository(), catalog)
        try:
            orders = handler.handle(user_id)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    echo_order_summary(orders)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    with product_catalog() as catalog:
        handler = ShowOrderHandler(order_repository(), catalog)
        try:
            dto = handler.handle(order_id)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    echo_order(dto)


@click.command("create")
@click.option("--user", "user_id", required=True, help="Owning user ID.")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
def order_create(user_id: str, items: str) -> None:
    """Create a new order priced from the catalog."""
    specs = _parse_items(items)

    with product_catalog() as catalog:
        handler = CreateOrderHandler(order_repository(), catalog)
        try:
            order_id = handler.handle(user_id=user_id, line_specs=specs)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} created.")


@click.command("update")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option("--status", default=None, help="New status.")
@click.option("--date", "date_str", default=None, help="New order date (ISO 8601).")
@click.option("--user", "user_id", default=None, help="New owning user ID.")
@click.option("--items", default=None, help="Lines to append as 'ProductId:Qty,...'.")
def order_update(
    order_id: int,
    status: str | None,
    date_str: str | None,
    user_id: str | None,
    items: str | None,
) -> None:
    """Update the given fields of an order; --items appends lines."""
    try:
        patch = OrderPatch(
            date=Present(_parse_date(date_str)) if date_str is not None else None,
            status=Present(OrderStatus.parse(status)) if status is not None else None,
            user_id=Present(user_id) if user_id is not None else None,
            lines=tuple(_parse_items(items)) if items else (),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    with product_catalog() as catalog:
        handler = UpdateOrderHandler(order_repository(), catalog)
        try:
            handler.handle(order_id, patch)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} updated.")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
def order_delete(order_id: int) -> None:
    """Delete an order and all of its lines."""
    handler = DeleteOrderHandler(order_repository())
    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} deleted.")


@click.command("add-line")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--qty", "quantity", required=True, type=int, help="Quantity.")
def order_add_line(order_id: int, product_id: str, quantity: int) -> None:
    """Add a line priced at the current catalog price."""
    with product_catalog() as catalog:
        handler = AddOrderLineHandler(order_repository(), catalog)
        try:
            dto = handler.handle(order_id, OrderLineSpec(product_id, quantity))
        except DomainException as exc:
            raise click.ClickException(str(exc))

    echo_order(dto)


@click.command("remove-line")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--line", "line_id", required=True, type=int, help="Line ID to remove.")
def order_remove_line(order_id: int, line_id: int) -> None:
    """Remove a line from an order."""
    with product_catalog() as catalog:
        handler = RemoveOrderLineHandler(order_repository(), catalog)
        try:
            dto = handler.handle(order_id, line_id)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    echo_order(dto)


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option(
    "--value",
    "status",
    required=True,
    help="One of " + ", ".join(s.value for s in OrderStatus) + ".",
)
def order_status(order_id: int, status: str) -> None:
    """Set the status of an order."""
    handler = SetOrderStatusHandler(order_repository())
    try:
        handler.handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} is now {status.strip().upper()}.")
