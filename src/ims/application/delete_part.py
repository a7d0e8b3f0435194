"""Application service: Delete Part use case."""

from __future__ import annotations

from loguru import logger

from ims.domain.exceptions import EntityNotFoundError
from ims.domain.model.part import Part
from ims.domain.repository.inventory_repository import InventoryRepository


class DeletePartHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, part_id: int) -> Part:
        """Remove a part from the inventory.

        Products that reference the part keep their reference; association
        is not ownership.
        """
        part = self._inventory_repo.lookup_part(part_id)
        if part is None:
            raise EntityNotFoundError(f"Part with ID {part_id} not found")

        self._inventory_repo.delete_part(part)
        logger.info("Deleted part #{} '{}'", part.id, part.name)
        return part
