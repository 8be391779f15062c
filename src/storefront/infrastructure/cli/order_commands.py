"""CLI commands for checkout and customer order lookup."""

from __future__ import annotations

import click

from storefront.application.dto import CheckoutCustomer
from storefront.application.list_customer_orders import ListCustomerOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.show_cart import PreviewOrderHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import cart_repository, order_repository
from storefront.infrastructure.cli.display import (
    display_cart,
    display_order,
    display_order_table,
)


@click.command("preview")
@click.pass_obj
def order_preview(session_id: str) -> None:
    """Preview the order, including tax, before placing it."""
    handler = PreviewOrderHandler(cart_repo=cart_repository())

    try:
        dto = handler.handle(session_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_cart(dto, with_tax=True)


@click.command("place")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer email.")
@click.option("--address", required=True, help="Delivery address.")
@click.option("--phone", required=True, help="Contact phone number.")
@click.pass_obj
def order_place(session_id: str, name: str, email: str, address: str, phone: str) -> None:
    """Place an order for everything in the cart."""
    handler = PlaceOrderHandler(
        order_repo=order_repository(),
        cart_repo=cart_repository(),
    )

    try:
        dto = handler.handle(
            session_id,
            CheckoutCustomer(name=name, email=email, address=address, phone=phone),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.order_id} placed  (status={dto.status})")
    click.echo()
    display_order(dto, with_history=False)


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("mine")
@click.option("--email", required=True, help="Email address used at checkout.")
def order_mine(email: str) -> None:
    """List the orders placed with an email address."""
    handler = ListCustomerOrdersHandler(order_repo=order_repository())

    try:
        orders = handler.handle(email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    clean_email = email.strip().lower()
    if not orders:
        click.echo(f"No orders found for email: {clean_email}")
        return

    click.echo(f"Found {len(orders)} order(s) for {clean_email}")
    display_order_table(orders)
