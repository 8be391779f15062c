"""CLI commands for the session cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.apply_coupon import ApplyCouponHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import cart_repository, product_repository
from storefront.infrastructure.cli.display import display_cart


@click.command("show")
@click.pass_obj
def cart_show(session_id: str) -> None:
    """Show the contents of the cart."""
    handler = ShowCartHandler(cart_repo=cart_repository())

    try:
        dto = handler.handle(session_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_cart(dto)


@click.command("add")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", default="1", show_default=True, help="Number of units.")
@click.option("--name", default=None, help="Item name (for items not in the catalog).")
@click.option("--price", default=None, help="Unit price (for items not in the catalog).")
@click.pass_obj
def cart_add(
    session_id: str,
    product_id: str,
    quantity: str,
    name: str | None,
    price: str | None,
) -> None:
    """Add a product to the cart."""
    if (name is None) != (price is None):
        raise click.UsageError("--name and --price must be given together")

    handler = AddToCartHandler(
        cart_repo=cart_repository(),
        product_repo=product_repository(),
    )

    try:
        dto = handler.handle(session_id, product_id, quantity, name=name, price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_cart(dto)


@click.command("remove")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.pass_obj
def cart_remove(session_id: str, product_id: str) -> None:
    """Remove a product from the cart."""
    handler = RemoveFromCartHandler(cart_repo=cart_repository())

    try:
        dto = handler.handle(session_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_cart(dto)


@click.command("clear")
@click.pass_obj
def cart_clear(session_id: str) -> None:
    """Empty the cart and drop any coupon."""
    handler = ClearCartHandler(cart_repo=cart_repository())

    try:
        handler.handle(session_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Cart cleared.")


@click.command("coupon")
@click.argument("code", required=False)
@click.pass_obj
def cart_coupon(session_id: str, code: str | None) -> None:
    """Apply a coupon code (omit CODE to remove the discount)."""
    handler = ApplyCouponHandler(cart_repo=cart_repository())

    try:
        dto = handler.handle(session_id, code)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_cart(dto)
