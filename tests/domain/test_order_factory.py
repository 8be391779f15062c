"""Unit tests for turning a cart into an order."""

from datetime import datetime, timezone

import pytest

from storefront.domain.exceptions import EmptyCartError, ValidationError
from storefront.domain.model.cart import Cart
from storefront.domain.model.order_status import OrderStatus
from storefront.domain.model.value_objects import CustomerDetails, Money
from storefront.domain.service.order_factory import OrderFactory, generate_order_id

CUSTOMER = CustomerDetails("Alice", "alice@example.com", "1 Main St", "555-0100")


def _cart(coupon: str | None = None) -> Cart:
    cart = Cart.empty()
    cart.add_item("1", "Widget", "50.00", 2)
    cart.apply_coupon(coupon)
    return cart


class TestCreateOrder:

    def test_prices_the_order(self):
        order = OrderFactory().create_order(_cart("SAVE10"), CUSTOMER)
        assert order.subtotal == Money.of("100.00")
        assert order.discount == Money.of("10.00")
        assert order.discount_code == "SAVE10"
        assert order.tax == Money.of("7.20")
        assert order.total == Money.of("97.20")

    def test_without_coupon(self):
        order = OrderFactory().create_order(_cart(), CUSTOMER)
        assert order.discount == Money.zero()
        assert order.discount_code is None
        assert order.total == Money.of("108.00")

    def test_starts_placed_with_one_history_entry(self):
        now = datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        order = OrderFactory().create_order(_cart(), CUSTOMER, now=now)
        assert order.status is OrderStatus.PLACED
        assert len(order.status_history) == 1
        entry = order.status_history[0]
        assert entry.status is OrderStatus.PLACED
        assert entry.changed_at == now
        assert entry.note == "Status changed to Placed"
        assert order.created_at == order.updated_at == now

    def test_items_are_a_snapshot(self):
        cart = _cart()
        order = OrderFactory().create_order(cart, CUSTOMER)

        cart.add_item("1", "Widget", "50.00", 5)
        cart.clear()

        assert len(order.items) == 1
        assert order.items[0].quantity.value == 2
        assert order.items[0].line_total == Money.of("100.00")
        assert order.item_count == 2

    def test_cart_is_left_untouched(self):
        cart = _cart("SAVE10")
        OrderFactory().create_order(cart, CUSTOMER)
        assert cart.item_count == 2
        assert cart.coupon_code == "SAVE10"

    def test_empty_cart_rejected(self):
        with pytest.raises(EmptyCartError, match="Cart is empty"):
            OrderFactory().create_order(Cart.empty(), CUSTOMER)

    def test_empty_cart_is_also_a_validation_error(self):
        with pytest.raises(ValidationError):
            OrderFactory().create_order(Cart.empty(), CUSTOMER)

    def test_blank_customer_rejected(self):
        with pytest.raises(ValidationError, match="missing: name"):
            OrderFactory().create_order(_cart(), CustomerDetails("  ", "a@b.c", "1 Main St", "1"))

    def test_uses_injected_id_generator(self):
        order = OrderFactory(id_generator=lambda: "ORD-TEST").create_order(_cart(), CUSTOMER)
        assert order.order_id == "ORD-TEST"

    def test_explicit_order_id_wins(self):
        order = OrderFactory().create_order(_cart(), CUSTOMER, order_id="ORD-42")
        assert order.order_id == "ORD-42"


class TestGenerateOrderId:

    def test_format(self):
        order_id = generate_order_id()
        assert order_id.startswith("ORD")
        assert len(order_id) == 22
        int(order_id[3:], 16)

    def test_ten_thousand_ids_are_unique(self):
        ids = [generate_order_id() for _ in range(10_000)]
        assert len(set(ids)) == len(ids)
