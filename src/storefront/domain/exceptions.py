"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storefront.domain.model.order_status import OrderStatus


class DomainException(Exception):
    """Base class for all domain errors."""


class InvalidInputError(DomainException):
    """A price, quantity or status value could not be accepted."""


class ValidationError(DomainException):
    """Required information is missing or blank."""


class EmptyCartError(ValidationError):
    """Checkout was attempted with no items in the cart."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class IllegalTransitionError(DomainException):
    """The requested status change is not an edge of the order lifecycle."""

    def __init__(
        self,
        current_status: OrderStatus,
        requested: OrderStatus,
        allowed: tuple[OrderStatus, ...],
    ) -> None:
        self.current_status = current_status
        self.requested = requested
        self.allowed = allowed
        allowed_text = ", ".join(s.value for s in allowed) or "none (final state)"
        super().__init__(
            f"Cannot change order status from {current_status.value} to "
            f"{requested.value}. Allowed next statuses: {allowed_text}"
        )


class ConflictError(DomainException):
    """A concurrent update won the race against this one."""


class DuplicateOrderIdError(ConflictError):
    """An order with the same order ID is already stored."""


class StorageUnavailableError(DomainException):
    """The backing store could not be read or written."""
