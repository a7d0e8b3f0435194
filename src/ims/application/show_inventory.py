"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from ims.application.dto import PartRowDTO, ProductRowDTO
from ims.domain.repository.inventory_repository import InventoryRepository
from ims.domain.service.inventory_search import search_parts, search_products


class ShowInventoryHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def parts(self, query: str = "") -> list[PartRowDTO]:
        parts = search_parts(self._inventory_repo.get_all_parts(), query)
        return [PartRowDTO.from_part(p) for p in parts]

    def products(self, query: str = "") -> list[ProductRowDTO]:
        products = search_products(self._inventory_repo.get_all_products(), query)
        return [ProductRowDTO.from_product(p) for p in products]
