"""Product aggregate.

A product references the parts it is built from. The reference is not
ownership: the same part may be associated with any number of products.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ims.domain.exceptions import DuplicateAssociationError
from ims.domain.model.part import Part
from ims.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the inventory.

    The ``__init__`` is intentionally simple so the store can hold seeded
    records without re-validating. Edited products are built through the
    form parsing in the application layer, which enforces the stock level
    invariants.
    """

    id: int
    name: str
    price: Money
    stock: int
    minimum: int
    maximum: int
    associated_parts: list[Part] = field(default_factory=list)

    def is_associated(self, part: Part) -> bool:
        return any(p.same_as(part) for p in self.associated_parts)

    def add_associated_part(self, part: Part) -> None:
        """Append ``part`` unless a part with the same id is already there."""
        if self.is_associated(part):
            raise DuplicateAssociationError(
                f"Part #{part.id} '{part.name}' is already associated with this product"
            )
        self.associated_parts.append(part)

    def delete_associated_part(self, part: Part) -> bool:
        """Remove the first associated part with the same id.

        Returns False when nothing matched.
        """
        for i, p in enumerate(self.associated_parts):
            if p.same_as(part):
                del self.associated_parts[i]
                return True
        return False
