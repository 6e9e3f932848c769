import click

from ordersvc.infrastructure.cli.line_commands import (
    line_delete,
    line_list,
    line_show,
    line_update,
)
from ordersvc.infrastructure.cli.order_commands import (
    order_add_line,
    order_create,
    order_delete,
    order_list,
    order_mine,
    order_remove_line,
    order_show,
    order_status,
    order_update,
)
from ordersvc.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """ordersvc — orders priced by the remote product catalog"""
    configure_logging()


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def line() -> None:
    """Inspect and edit order lines."""


# Register subcommands
order.add_command(order_add_line)
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_mine)
order.add_command(order_remove_line)
order.add_command(order_show)
order.add_command(order_status)
order.add_command(order_update)
line.add_command(line_delete)
line.add_command(line_list)
line.add_command(line_show)
line.add_command(line_update)
