"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from storefront.domain.exceptions import InvalidInputError, ValidationError

CENT = Decimal("0.01")

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Money:
    """Monetary amount in the store currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.  Amounts keep full precision
    until ``rounded()`` is called at display or persistence time.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidInputError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise InvalidInputError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise InvalidInputError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise InvalidInputError("Money subtraction would result in a negative amount")
        return Money(result, self.currency)

    def __mul__(self, factor: int) -> Money:
        if not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    def scale(self, rate: Decimal) -> Money:
        """Multiply by a rate such as a tax or discount percentage."""
        return Money(self.amount * rate, self.currency)

    def rounded(self) -> Money:
        """Round half-up to whole cents."""
        return Money(self.amount.quantize(CENT, rounding=ROUND_HALF_UP), self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise InvalidInputError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise InvalidInputError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidInputError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise InvalidInputError("Quantity must be positive")

    def __add__(self, other: Quantity) -> Quantity:
        return Quantity(self.value + other.value)

    def __str__(self) -> str:
        return str(self.value)

    @staticmethod
    def parse(raw: str | int | None) -> Quantity:
        """Read a quantity from form-style input.

        Only the leading integer counts, so ``"2.5"`` and ``"3 boxes"`` read
        as 2 and 3.  Input that does not start with a number falls back to
        1; a number that is zero or negative is rejected.
        """
        if isinstance(raw, int) and not isinstance(raw, bool):
            return Quantity(raw)
        match = _LEADING_INT.match("" if raw is None else str(raw))
        if match is None:
            return Quantity(1)
        return Quantity(int(match.group(1)))


@dataclass(frozen=True)
class CustomerDetails:
    """Contact details captured at checkout.

    Every field is trimmed and required; the email is lower-cased so
    lookups by email are case-insensitive.
    """

    name: str
    email: str
    address: str
    phone: str

    def __post_init__(self) -> None:
        fields = {
            "name": (self.name or "").strip(),
            "email": (self.email or "").strip().lower(),
            "address": (self.address or "").strip(),
            "phone": (self.phone or "").strip(),
        }
        missing = [key for key, value in fields.items() if not value]
        if missing:
            raise ValidationError(
                "Please fill all customer information fields "
                f"(missing: {', '.join(missing)})"
            )
        for key, value in fields.items():
            object.__setattr__(self, key, value)

    @staticmethod
    def create(name: str | None, email: str | None, address: str | None, phone: str | None) -> CustomerDetails:
        return CustomerDetails(
            name=name or "",
            email=email or "",
            address=address or "",
            phone=phone or "",
        )
