"""CLI commands for individual order lines."""

from __future__ import annotations

import click

from ordersvc.application.delete_order_line import DeleteOrderLineHandler
from ordersvc.application.dto import LinePatch, Present
from ordersvc.application.list_order_lines import ListOrderLinesHandler
from ordersvc.application.show_order_line import ShowOrderLineHandler
from ordersvc.application.update_order_line import UpdateOrderLineHandler
from ordersvc.domain.exceptions import DomainException
from ordersvc.infrastructure.bootstrap import order_repository, product_catalog
from ordersvc.infrastructure.cli.formatting import echo_line_table


@click.command("show")
@click.option("--id", "line_id", required=True, type=int, help="Line ID to display.")
def line_show(line_id: int) -> None:
    """Show a single line with its product."""
    with product_catalog() as catalog:
        handler = ShowOrderLineHandler(order_repository(), catalog)
        try:
            dto = handler.handle(line_id)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    echo_line_table([dto], with_order=True)
    if dto.product is not None:
        click.echo()
        click.echo(f"  {dto.product.name}: {dto.product.description}")
        click.echo(f"  Catalog price {dto.product.price}, stock {dto.product.quantity}")
    elif dto.product_error is not None:
        click.echo(f"  ! {dto.product_error}")


@click.command("list")
@click.option("--order", "order_id", default=None, type=int, help="Only lines of this order.")
def line_list(order_id: int | None) -> None:
    """List order lines."""
    with product_catalog() as catalog:
        handler = ListOrderLinesHandler(order_repository(), catalog)
        try:
            lines = handler.handle(order_id)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    if not lines:
        click.echo("No lines.")
        return
    echo_line_table(lines, with_order=True)


@click.command("update")
@click.option("--id", "line_id", required=True, type=int, help="Line ID to update.")
@click.option("--qty", "quantity", default=None, type=int, help="New quantity.")
@click.option("--product", "product_id", default=None, help="New product ID (re-prices the line).")
def line_update(line_id: int, quantity: int | None, product_id: str | None) -> None:
    """Update the given fields of a line."""
    patch = LinePatch(
        quantity=Present(quantity) if quantity is not None else None,
        product_id=Present(product_id) if product_id is not None else None,
    )

    with product_catalog() as catalog:
        handler = UpdateOrderLineHandler(order_repository(), catalog)
        try:
            handler.handle(line_id, patch)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    click.echo(f"Line {line_id} updated.")


@click.command("delete")
@click.option("--id", "line_id", required=True, type=int, help="Line ID to delete.")
def line_delete(line_id: int) -> None:
    """Delete a line from its order."""
    handler = DeleteOrderLineHandler(order_repository())
    try:
        handler.handle(line_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Line {line_id} deleted.")
