"""Application service: Add Product use case."""

from __future__ import annotations

from collections.abc import Iterable

from loguru import logger

from ims.application.form_parsing import parse_stock_item_form
from ims.domain.exceptions import EntityNotFoundError
from ims.domain.model.product import Product
from ims.domain.repository.inventory_repository import InventoryRepository


class AddProductHandler:

    def __init__(self, inventory_repo: InventoryRepository, currency: str = "USD") -> None:
        self._inventory_repo = inventory_repo
        self._currency = currency

    def handle(
        self,
        name: str,
        stock: str,
        price: str,
        minimum: str,
        maximum: str,
        part_ids: Iterable[int] = (),
    ) -> Product:
        """Add a new product, optionally associated with existing parts."""
        fields = parse_stock_item_form(name, stock, price, minimum, maximum, self._currency)

        product = Product(
            id=self._inventory_repo.next_product_id(),
            name=fields.name,
            price=fields.price,
            stock=fields.levels.stock,
            minimum=fields.levels.minimum,
            maximum=fields.levels.maximum,
        )
        for part_id in part_ids:
            part = self._inventory_repo.lookup_part(part_id)
            if part is None:
                raise EntityNotFoundError(f"Part with ID {part_id} not found")
            product.add_associated_part(part)

        self._inventory_repo.add_product(product)
        logger.info("Added product #{} '{}'", product.id, product.name)
        return product
