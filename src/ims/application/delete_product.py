"""Application service: Delete Product use case."""

from __future__ import annotations

from loguru import logger

from ims.domain.exceptions import EntityNotFoundError, ProductHasAssociatedPartsError
from ims.domain.model.product import Product
from ims.domain.repository.inventory_repository import InventoryRepository


class DeleteProductHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, product_id: int) -> Product:
        """Remove a product that no longer has associated parts."""
        product = self._inventory_repo.lookup_product(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")

        if product.associated_parts:
            logger.warning(
                "Refused to delete product #{} with {} associated part(s)",
                product.id,
                len(product.associated_parts),
            )
            raise ProductHasAssociatedPartsError(
                f"Product #{product.id} still has associated parts; "
                f"remove them before deleting the product"
            )

        self._inventory_repo.delete_product(product)
        logger.info("Deleted product #{} '{}'", product.id, product.name)
        return product
