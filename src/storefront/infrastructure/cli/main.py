import click

from storefront.infrastructure.cli.admin_commands import admin_orders, admin_status
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_coupon,
    cart_remove,
    cart_show,
)
from storefront.infrastructure.cli.order_commands import (
    order_mine,
    order_place,
    order_preview,
    order_show,
)
from storefront.infrastructure.cli.product_commands import product_list
from storefront.infrastructure.config import load_settings
from storefront.infrastructure.logging import configure_logging


@click.group()
@click.option("--session", "session_id", default=None, help="Cart session ID.")
@click.pass_context
def cli(ctx: click.Context, session_id: str | None) -> None:
    """Storefront: catalog, cart, checkout and order admin"""
    settings = load_settings()
    configure_logging(settings.log_level, settings.log_format)
    ctx.obj = session_id or settings.session_id


@cli.group()
def product() -> None:
    """Browse the catalog."""


@cli.group()
def cart() -> None:
    """Manage the session cart."""


@cli.group()
def order() -> None:
    """Check out and look up orders."""


@cli.group()
def admin() -> None:
    """Administer orders."""


# Register subcommands
product.add_command(product_list)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_coupon)
cart.add_command(cart_remove)
cart.add_command(cart_show)
order.add_command(order_mine)
order.add_command(order_place)
order.add_command(order_preview)
order.add_command(order_show)
admin.add_command(admin_orders)
admin.add_command(admin_status)
