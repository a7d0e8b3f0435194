"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.part import InHousePart, OutsourcedPart, Part
from ims.domain.model.product import Product


@dataclass(frozen=True)
class ProductFormDTO:
    """Output: the editable fields of a product, as shown in the form."""

    id: int
    name: str
    stock: str
    price: str
    minimum: str
    maximum: str

    @staticmethod
    def from_product(product: Product) -> ProductFormDTO:
        return ProductFormDTO(
            id=product.id,
            name=product.name,
            stock=str(product.stock),
            price=str(product.price.amount),
            minimum=str(product.minimum),
            maximum=str(product.maximum),
        )


@dataclass(frozen=True)
class PartRowDTO:
    """Output: a single row of a parts table."""

    id: int
    name: str
    stock: int
    price: str  # formatted, e.g. "$3.50"
    source: str

    @staticmethod
    def from_part(part: Part) -> PartRowDTO:
        if isinstance(part, InHousePart):
            source = f"machine {part.machine_id}"
        elif isinstance(part, OutsourcedPart):
            source = part.company_name
        else:
            source = ""
        return PartRowDTO(
            id=part.id,
            name=part.name,
            stock=part.stock,
            price=str(part.price),
            source=source,
        )


@dataclass(frozen=True)
class ProductRowDTO:
    """Output: a single row of the products table."""

    id: int
    name: str
    stock: int
    price: str
    part_count: int

    @staticmethod
    def from_product(product: Product) -> ProductRowDTO:
        return ProductRowDTO(
            id=product.id,
            name=product.name,
            stock=product.stock,
            price=str(product.price),
            part_count=len(product.associated_parts),
        )
