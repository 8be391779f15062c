"""Unit tests for order status transitions."""

from datetime import datetime, timedelta, timezone

import pytest

from storefront.domain.exceptions import IllegalTransitionError, InvalidInputError
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order
from storefront.domain.model.order_status import (
    ALLOWED_TRANSITIONS,
    OrderStatus,
    can_transition,
)
from storefront.domain.model.value_objects import CustomerDetails
from storefront.domain.service.order_factory import OrderFactory


def _make_order() -> Order:
    cart = Cart.empty()
    cart.add_item("1", "Widget", "15.00", 1)
    customer = CustomerDetails("Alice", "alice@example.com", "1 Main St", "555-0100")
    return OrderFactory().create_order(cart, customer)


def _order_at(status: OrderStatus) -> Order:
    order = _make_order()
    path = {
        OrderStatus.PLACED: [],
        OrderStatus.PROCESSING: [OrderStatus.PROCESSING],
        OrderStatus.DELIVERED: [OrderStatus.PROCESSING, OrderStatus.DELIVERED],
        OrderStatus.CANCELLED: [OrderStatus.CANCELLED],
    }[status]
    for step in path:
        order.transition_to(step)
    return order


class TestTransitionTable:

    def test_edges(self):
        assert ALLOWED_TRANSITIONS == {
            OrderStatus.PLACED: (OrderStatus.PROCESSING, OrderStatus.CANCELLED),
            OrderStatus.PROCESSING: (OrderStatus.DELIVERED, OrderStatus.CANCELLED),
            OrderStatus.DELIVERED: (),
            OrderStatus.CANCELLED: (),
        }

    def test_final_states(self):
        assert OrderStatus.DELIVERED.is_final
        assert OrderStatus.CANCELLED.is_final
        assert not OrderStatus.PLACED.is_final

    def test_no_self_loops(self):
        for status in OrderStatus:
            assert not can_transition(status, status)

    @pytest.mark.parametrize("raw", ["processing", " Delivered ", "CANCELLED"])
    def test_parse_ignores_case(self, raw):
        assert OrderStatus.parse(raw).value.lower() == raw.strip().lower()

    def test_parse_unknown_status(self):
        with pytest.raises(InvalidInputError, match="Unknown order status"):
            OrderStatus.parse("Shipped")


class TestTransitions:

    def test_full_cycle(self):
        order = _make_order()
        order.transition_to(OrderStatus.PROCESSING)
        order.transition_to(OrderStatus.DELIVERED)

        assert order.status is OrderStatus.DELIVERED
        assert [c.status for c in order.status_history] == [
            OrderStatus.PLACED,
            OrderStatus.PROCESSING,
            OrderStatus.DELIVERED,
        ]
        stamps = [c.changed_at for c in order.status_history]
        assert stamps == sorted(stamps)

    def test_placed_to_delivered_rejected(self):
        order = _make_order()
        with pytest.raises(IllegalTransitionError) as exc_info:
            order.transition_to(OrderStatus.DELIVERED)

        err = exc_info.value
        assert err.current_status is OrderStatus.PLACED
        assert err.requested is OrderStatus.DELIVERED
        assert err.allowed == (OrderStatus.PROCESSING, OrderStatus.CANCELLED)
        assert "Placed" in str(err) and "Processing, Cancelled" in str(err)
        assert order.status is OrderStatus.PLACED
        assert len(order.status_history) == 1

    @pytest.mark.parametrize("final", [OrderStatus.DELIVERED, OrderStatus.CANCELLED])
    @pytest.mark.parametrize("target", list(OrderStatus))
    def test_final_states_reject_every_target(self, final, target):
        order = _order_at(final)
        history_before = list(order.status_history)

        with pytest.raises(IllegalTransitionError, match="final state") as exc_info:
            order.transition_to(target)

        assert exc_info.value.allowed == ()
        assert order.status is final
        assert order.status_history == history_before

    def test_repeating_a_transition_fails(self):
        order = _make_order()
        order.transition_to(OrderStatus.PROCESSING)
        with pytest.raises(IllegalTransitionError):
            order.transition_to(OrderStatus.PROCESSING)

    def test_cancel_from_processing(self):
        order = _order_at(OrderStatus.PROCESSING)
        order.transition_to(OrderStatus.CANCELLED)
        assert order.status is OrderStatus.CANCELLED

    def test_default_and_custom_notes(self):
        order = _make_order()
        first = order.transition_to(OrderStatus.PROCESSING, note="  ")
        second = order.transition_to(OrderStatus.DELIVERED, note="Left at the door")
        assert first.note == "Status changed to Processing"
        assert second.note == "Left at the door"

    def test_updated_at_follows_change(self):
        order = _make_order()
        later = order.created_at + timedelta(hours=1)
        change = order.transition_to(OrderStatus.PROCESSING, now=later)
        assert change.changed_at == later
        assert order.updated_at == later
        assert order.created_at < order.updated_at

    def test_allowed_next_statuses(self):
        assert _order_at(OrderStatus.PROCESSING).allowed_next_statuses == (
            OrderStatus.DELIVERED,
            OrderStatus.CANCELLED,
        )
        assert _order_at(OrderStatus.DELIVERED).allowed_next_statuses == ()

    def test_timestamps_are_utc(self):
        order = _make_order()
        change = order.transition_to(OrderStatus.PROCESSING)
        assert change.changed_at.tzinfo is not None
        assert change.changed_at.utcoffset() == timedelta(0)
        assert isinstance(change.changed_at, datetime)
        assert order.created_at.tzinfo == timezone.utc
