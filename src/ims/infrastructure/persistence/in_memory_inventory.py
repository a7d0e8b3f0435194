"""In-process implementation of InventoryRepository.

Parts and products live in two plain lists for the lifetime of the
process. Nothing is written anywhere; the data is gone on exit.
"""

from __future__ import annotations

from ims.domain.exceptions import StoreInconsistencyError
from ims.domain.model.part import Part
from ims.domain.model.product import Product
from ims.domain.repository.inventory_repository import InventoryRepository


class InMemoryInventory(InventoryRepository):

    def __init__(
        self,
        parts: list[Part] | None = None,
        products: list[Product] | None = None,
    ) -> None:
        self._parts: list[Part] = list(parts or [])
        self._products: list[Product] = list(products or [])

    # --- Parts ----------------------------------------------------------------

    def get_all_parts(self) -> list[Part]:
        return list(self._parts)

    def lookup_part(self, part_id: int) -> Part | None:
        for part in self._parts:
            if part.id == part_id:
                return part
        return None

    def lookup_parts(self, name_fragment: str) -> list[Part]:
        return [p for p in self._parts if name_fragment in p.name]

    def add_part(self, part: Part) -> None:
        self._parts.append(part)

    def delete_part(self, part: Part) -> bool:
        for i, p in enumerate(self._parts):
            if p is part:
                del self._parts[i]
                return True
        return False

    def next_part_id(self) -> int:
        if not self._parts:
            return 1
        return max(p.id for p in self._parts) + 1

    # --- Products -------------------------------------------------------------

    def get_all_products(self) -> list[Product]:
        return list(self._products)

    def lookup_product(self, product_id: int) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def lookup_products(self, name_fragment: str) -> list[Product]:
        return [p for p in self._products if name_fragment in p.name]

    def index_of_product(self, product: Product) -> int | None:
        for i, p in enumerate(self._products):
            if p is product:
                return i
        return None

    def update_product(self, index: int, new_product: Product) -> None:
        if not 0 <= index < len(self._products):
            raise StoreInconsistencyError(
                f"No product at position {index} "
                f"(inventory holds {len(self._products)})"
            )
        self._products[index] = new_product

    def add_product(self, product: Product) -> None:
        self._products.append(product)

    def delete_product(self, product: Product) -> bool:
        index = self.index_of_product(product)
        if index is None:
            return False
        del self._products[index]
        return True

    def next_product_id(self) -> int:
        if not self._products:
            return 1
        return max(p.id for p in self._products) + 1
