"""Domain service: inventory search.

Both search boxes of the application follow the same rules:

- an empty query shows everything, in store order;
- a query that reads as an integer is an exact ID lookup and yields at
  most one row (no row when the ID is unknown);
- anything else is a case-sensitive substring match on the name.
"""

from __future__ import annotations

import re
from typing import Protocol, Sequence, TypeVar

from loguru import logger

from ims.domain.model.part import Part
from ims.domain.model.product import Product

_INTEGER = re.compile(r"[+-]?[0-9]+")


class _Searchable(Protocol):
    id: int
    name: str


T = TypeVar("T", bound=_Searchable)


def parse_int(text: str) -> int | None:
    """Parse an optionally signed run of ASCII digits, or return None.

    Unlike ``int()`` this rejects surrounding whitespace and underscores,
    so " 7" or "1_000" are not treated as numbers. Digit runs too long to
    convert are not numbers either.
    """
    if not _INTEGER.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        return None


def search(items: Sequence[T], query: str) -> list[T]:
    if query == "":
        return list(items)

    item_id = parse_int(query)
    if item_id is not None:
        matches = [item for item in items if item.id == item_id][:1]
        logger.debug("ID search for {} matched {} row(s)", item_id, len(matches))
        return matches

    matches = [item for item in items if query in item.name]
    logger.debug("Name search for {!r} matched {} row(s)", query, len(matches))
    return matches


def search_parts(parts: Sequence[Part], query: str) -> list[Part]:
    """Filter a part list by ID or name fragment."""
    return search(parts, query)


def search_products(products: Sequence[Product], query: str) -> list[Product]:
    """Filter a product list by ID or name fragment."""
    return search(products, query)
