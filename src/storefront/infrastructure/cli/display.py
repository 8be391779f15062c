"""Shared formatting for cart and order output."""

from __future__ import annotations

from decimal import Decimal

import click

from storefront.application.dto import CartDTO, LineItemDTO, OrderDTO


def money(amount: Decimal) -> str:
    return f"${amount:.2f}"


def _display_lines(items: list[LineItemDTO]) -> None:
    click.echo(f"  {'ID':<4} {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>11}")
    click.echo(f"  {'-'*58}")
    for item in items:
        click.echo(
            f"  {item.product_id:<4} {item.name:<24} {item.quantity:>5} "
            f"{money(item.unit_price):>10} {money(item.line_total):>11}"
        )
    click.echo(f"  {'-'*58}")


def _display_total(label: str, amount: Decimal, sign: str = "") -> None:
    click.echo(f"  {label:<35} {sign + money(amount):>23}")


def display_cart(dto: CartDTO, with_tax: bool = False) -> None:
    if dto.message:
        click.echo(dto.message)
    if not dto.items:
        click.echo("Your cart is empty.")
        return

    _display_lines(dto.items)
    _display_total("Subtotal", dto.subtotal)
    if dto.discount_code:
        _display_total(f"Discount ({dto.discount_code})", dto.discount, sign="-")
    _display_total("Total", dto.total)
    if with_tax:
        _display_total("Tax (8%)", dto.tax)
        _display_total("Total with tax", dto.total_with_tax)


def display_order(dto: OrderDTO, with_history: bool = True) -> None:
    click.echo(f"Order {dto.order_id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name} <{dto.customer_email}>")
    click.echo(f"Address:  {dto.customer_address}")
    click.echo(f"Phone:    {dto.customer_phone}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()

    _display_lines(dto.items)
    _display_total("Subtotal", dto.subtotal)
    if dto.discount_code:
        _display_total(f"Discount ({dto.discount_code})", dto.discount, sign="-")
    _display_total("Tax", dto.tax)
    _display_total("Order Total", dto.total)

    if with_history:
        click.echo()
        click.echo("History:")
        for change in dto.status_history:
            click.echo(f"  {change.changed_at}  {change.status:<11} {change.note}")


def display_order_row(dto: OrderDTO) -> None:
    click.echo(
        f"{dto.order_id:<24} {dto.created_at[:19]:<20} {dto.status:<11} "
        f"{dto.item_count:>5} {money(dto.total):>11}  {dto.customer_email}"
    )


def display_order_table(orders: list[OrderDTO]) -> None:
    click.echo(f"{'Order':<24} {'Created':<20} {'Status':<11} {'Items':>5} {'Total':>11}  Customer")
    click.echo("-" * 96)
    for dto in orders:
        display_order_row(dto)
