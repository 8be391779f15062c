"""Integration tests for the UpdateOrderStatus use case."""

import pytest

from storefront.application.dto import CheckoutCustomer
from storefront.application.place_order import PlaceOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import (
    ConflictError,
    EntityNotFoundError,
    IllegalTransitionError,
    InvalidInputError,
)
from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order
from storefront.domain.model.order_status import OrderStatus
from tests.fakes import FakeCartRepository, FakeOrderRepository


class StaleReadOrderRepository(FakeOrderRepository):
    """Returns a previously captured copy, as if another admin wrote in between."""

    def __init__(self) -> None:
        super().__init__()
        self.stale: Order | None = None

    def get_by_order_id(self, order_id: str) -> Order | None:
        if self.stale is not None:
            return self.stale
        return super().get_by_order_id(order_id)


def _place_order(order_repo: FakeOrderRepository) -> str:
    cart_repo = FakeCartRepository()
    cart = Cart.empty()
    cart.add_item("1", "Widget", "15.00", 1)
    cart_repo.save("s1", cart)
    dto = PlaceOrderHandler(order_repo, cart_repo).handle(
        "s1", CheckoutCustomer("Alice", "alice@example.com", "1 Main St", "555-0100")
    )
    return dto.order_id


class TestUpdateOrderStatusHappyPath:

    def test_full_cycle(self):
        order_repo = FakeOrderRepository()
        order_id = _place_order(order_repo)
        handler = UpdateOrderStatusHandler(order_repo)

        handler.handle(order_id, "Processing")
        dto = handler.handle(order_id, "delivered", note="Signed for by reception")

        assert dto.status == "Delivered"
        assert dto.allowed_next_statuses == []
        assert [h.status for h in dto.status_history] == ["Placed", "Processing", "Delivered"]
        assert dto.status_history[-1].note == "Signed for by reception"

        saved = order_repo.get_by_order_id(order_id)
        assert saved.status is OrderStatus.DELIVERED
        assert len(saved.status_history) == 3
        stamps = [c.changed_at for c in saved.status_history]
        assert stamps == sorted(stamps)
        assert saved.updated_at == stamps[-1]

    def test_default_note(self):
        order_repo = FakeOrderRepository()
        order_id = _place_order(order_repo)
        dto = UpdateOrderStatusHandler(order_repo).handle(order_id, "Cancelled")
        assert dto.status_history[-1].note == "Status changed to Cancelled"


class TestUpdateOrderStatusValidation:

    def test_skipping_processing_rejected(self):
        order_repo = FakeOrderRepository()
        order_id = _place_order(order_repo)

        with pytest.raises(IllegalTransitionError) as exc_info:
            UpdateOrderStatusHandler(order_repo).handle(order_id, "Delivered")

        assert exc_info.value.current_status is OrderStatus.PLACED
        saved = order_repo.get_by_order_id(order_id)
        assert saved.status is OrderStatus.PLACED
        assert len(saved.status_history) == 1

    @pytest.mark.parametrize("target", ["Placed", "Processing", "Delivered", "Cancelled"])
    def test_cancelled_order_is_final(self, target):
        order_repo = FakeOrderRepository()
        order_id = _place_order(order_repo)
        handler = UpdateOrderStatusHandler(order_repo)
        handler.handle(order_id, "Cancelled")

        with pytest.raises(IllegalTransitionError):
            handler.handle(order_id, target)

    def test_unknown_order(self):
        with pytest.raises(EntityNotFoundError, match="not found"):
            UpdateOrderStatusHandler(FakeOrderRepository()).handle("ORD-NOPE", "Processing")

    def test_unknown_status(self):
        order_repo = FakeOrderRepository()
        order_id = _place_order(order_repo)
        with pytest.raises(InvalidInputError, match="Unknown order status"):
            UpdateOrderStatusHandler(order_repo).handle(order_id, "Shipped")


class TestConcurrentUpdates:

    def test_stale_read_loses_the_race(self):
        order_repo = StaleReadOrderRepository()
        order_id = _place_order(order_repo)
        stale_copy = order_repo.get_by_order_id(order_id)

        UpdateOrderStatusHandler(order_repo).handle(order_id, "Processing")

        order_repo.stale = stale_copy
        with pytest.raises(ConflictError, match="updated by someone else"):
            UpdateOrderStatusHandler(order_repo).handle(order_id, "Cancelled")

        order_repo.stale = None
        saved = order_repo.get_by_order_id(order_id)
        assert saved.status is OrderStatus.PROCESSING
        assert [c.status for c in saved.status_history] == [
            OrderStatus.PLACED,
            OrderStatus.PROCESSING,
        ]
