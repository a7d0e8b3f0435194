"""Abstract repository for the inventory store.

Defined in the domain layer so the domain never depends on
infrastructure. The store keeps parts and products in insertion order;
table views and positional updates rely on that order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ims.domain.model.part import Part
from ims.domain.model.product import Product


class InventoryRepository(ABC):

    # --- Parts ----------------------------------------------------------------

    @abstractmethod
    def get_all_parts(self) -> list[Part]:
        """Return every part, in insertion order."""

    @abstractmethod
    def lookup_part(self, part_id: int) -> Part | None:
        """Return a part by its ID, or None if not found."""

    @abstractmethod
    def lookup_parts(self, name_fragment: str) -> list[Part]:
        """Return parts whose name contains ``name_fragment`` (case-sensitive)."""

    @abstractmethod
    def add_part(self, part: Part) -> None:
        """Append a new part."""

    @abstractmethod
    def delete_part(self, part: Part) -> bool:
        """Remove a part; return False if it was not in the store."""

    @abstractmethod
    def next_part_id(self) -> int:
        """Generate the next unique part ID."""

    # --- Products -------------------------------------------------------------

    @abstractmethod
    def get_all_products(self) -> list[Product]:
        """Return every product, in insertion order."""

    @abstractmethod
    def lookup_product(self, product_id: int) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def lookup_products(self, name_fragment: str) -> list[Product]:
        """Return products whose name contains ``name_fragment`` (case-sensitive)."""

    @abstractmethod
    def index_of_product(self, product: Product) -> int | None:
        """Return the position of this exact product object, or None."""

    @abstractmethod
    def update_product(self, index: int, new_product: Product) -> None:
        """Replace the product at ``index`` with ``new_product``."""

    @abstractmethod
    def add_product(self, product: Product) -> None:
        """Append a new product."""

    @abstractmethod
    def delete_product(self, product: Product) -> bool:
        """Remove a product; return False if it was not in the store."""

    @abstractmethod
    def next_product_id(self) -> int:
        """Generate the next unique product ID."""
