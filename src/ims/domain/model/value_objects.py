"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from ims.domain.exceptions import (
    InvalidPriceError,
    MinExceedsMaxError,
    StockAboveMaxError,
    StockBelowMinError,
)


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount with currency.

    Uses Decimal so a price typed as "3.50" is stored as exactly 3.50.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise InvalidPriceError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise InvalidPriceError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise InvalidPriceError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    @staticmethod
    def of(amount: str | int | Decimal, currency: str = "USD") -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            return Money(Decimal(str(amount)), currency)
        except (InvalidOperation, ValueError) as exc:
            raise InvalidPriceError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class StockLevels:
    """Stock on hand together with its allowed range.

    Invariants, checked in this order:
    - ``minimum`` <= ``maximum``
    - ``stock`` >= ``minimum``
    - ``stock`` <= ``maximum``
    """

    stock: int
    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise MinExceedsMaxError(
                f"Minimum {self.minimum} is greater than maximum {self.maximum}"
            )
        if self.stock < self.minimum:
            raise StockBelowMinError(
                f"Inventory {self.stock} is less than the minimum {self.minimum}"
            )
        if self.stock > self.maximum:
            raise StockAboveMaxError(
                f"Inventory {self.stock} is greater than the maximum {self.maximum}"
            )
