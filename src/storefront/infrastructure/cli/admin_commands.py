"""CLI commands for order administration."""

from __future__ import annotations

import click

from storefront.application.list_orders import ListOrdersHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import DomainException, IllegalTransitionError
from storefront.infrastructure.bootstrap import order_repository
from storefront.infrastructure.cli.display import display_order_table


@click.command("orders")
@click.option("--status", default="all", show_default=True, help="Filter by status.")
@click.option("--email", default=None, help="Filter by customer email.")
def admin_orders(status: str, email: str | None) -> None:
    """List orders, newest first."""
    handler = ListOrdersHandler(order_repo=order_repository())

    try:
        orders = handler.handle(status=status, email=email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    display_order_table(orders)


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID to update.")
@click.option("--to", "status", required=True, help="New status (Processing, Delivered, Cancelled).")
@click.option("--note", default=None, help="Note recorded in the status history.")
def admin_status(order_id: str, status: str, note: str | None) -> None:
    """Move an order to its next status."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, status, note=note)
    except IllegalTransitionError as exc:
        raise click.ClickException(f"Invalid status transition. {exc}")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.order_id} status updated to {dto.status}")
