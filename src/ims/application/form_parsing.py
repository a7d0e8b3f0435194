"""Parsing and validation of the stock-item form fields.

Every add/modify form in the application submits the same five text
fields. They are checked in a fixed order and the first failure is
reported; nothing is built until all of them pass.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal

from loguru import logger

from ims.domain.exceptions import (
    EmptyNameError,
    InvalidMaxError,
    InvalidMinError,
    InvalidPriceError,
    InvalidStockError,
    ValidationError,
)
from ims.domain.model.value_objects import Money, StockLevels
from ims.domain.service.inventory_search import parse_int

_DECIMAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")


@dataclass(frozen=True)
class StockItemFields:
    """The validated contents of a stock-item form."""

    name: str
    price: Money
    levels: StockLevels


def parse_price(text: str, currency: str = "USD") -> Money:
    """Parse a plain decimal such as "3.50", ".5" or "12".

    Whitespace, underscores, exponents and NaN/Infinity are rejected, and
    "-0" reads as zero.
    """
    if not _DECIMAL.fullmatch(text):
        raise InvalidPriceError(
            f"Invalid price {text!r}: a non-negative decimal is expected"
        )
    amount = Decimal(text)
    if amount < 0:
        raise InvalidPriceError(
            f"Invalid price {text!r}: a non-negative decimal is expected"
        )
    return Money(amount.copy_abs(), currency)


def _parse_field(text: str, label: str, error: type[ValidationError]) -> int:
    value = parse_int(text)
    if value is None:
        raise error(f"Invalid {label} {text!r}: an integer is expected")
    return value


def parse_stock_item_form(
    name: str,
    stock_text: str,
    price_text: str,
    min_text: str,
    max_text: str,
    currency: str = "USD",
) -> StockItemFields:
    """Validate the raw form fields.

    Order of checks: name, inventory, price, min, max, then the stock
    level range (see ``StockLevels``). Raises the ValidationError subclass
    for the first failing check.
    """
    try:
        if name == "":
            raise EmptyNameError("Name is required")
        stock = _parse_field(stock_text, "inventory", InvalidStockError)
        price = parse_price(price_text, currency)
        minimum = _parse_field(min_text, "minimum", InvalidMinError)
        maximum = _parse_field(max_text, "maximum", InvalidMaxError)
        levels = StockLevels(stock=stock, minimum=minimum, maximum=maximum)
    except ValidationError as exc:
        logger.warning("Invalid input ({}): {}", exc.code, exc)
        raise

    return StockItemFields(name=name, price=price, levels=levels)
