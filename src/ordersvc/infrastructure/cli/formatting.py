"""Shared table rendering for orders and lines."""

from __future__ import annotations

import click

from ordersvc.application.dto import OrderDTO, OrderLineDTO


def product_label(line: OrderLineDTO) -> str:
    if line.product is not None:
        return line.product.name
    if line.product_error is not None:
        return f"{line.product_id} (unavailable)"
    return line.product_id or "-"


def echo_line_table(lines: list[OrderLineDTO], with_order: bool = False) -> None:
    order_col = f"{'Order':>6} " if with_order else ""
    click.echo(f"  {'Line':>5} {order_col}{'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-' * (58 + len(order_col))}")
    for line in lines:
        order_cell = f"{line.order_id or '-':>6} " if with_order else ""
        click.echo(
            f"  {line.id:>5} {order_cell}{product_label(line):<24} {line.quantity:>5} "
            f"{line.unit_price or '-':>10} {line.line_total:>10}"
        )


def echo_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"User:    {dto.user_id}")
    click.echo(f"Date:    {dto.date}")
    click.echo()
    echo_line_table(dto.lines)
    click.echo(f"  {'-' * 58}")
    click.echo(f"  {'Order Total':<36} {dto.total_amount:>22}")

    for line in dto.lines:
        if line.product_error is not None:
            click.echo(f"  ! line {line.id}: {line.product_error}")


def echo_order_summary(orders: list[OrderDTO]) -> None:
    if not orders:
        click.echo("No orders.")
        return
    click.echo(f"  {'ID':>5} {'User':<16} {'Status':<10} {'Lines':>5} {'Total':>12}")
    click.echo(f"  {'-' * 52}")
    for dto in orders:
        flag = " !" if dto.has_enrichment_failures else ""
        click.echo(
            f"  {dto.id:>5} {dto.user_id:<16} {dto.status:<10} "
            f"{len(dto.lines):>5} {dto.total_amount:>12}{flag}"
        )
