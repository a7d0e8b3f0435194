"""Part records.

Parts are the building blocks products are assembled from. A part is
either made in-house (identified by the machine that produces it) or
bought from an outside company.
"""

from __future__ import annotations

from dataclasses import dataclass

from ims.domain.model.value_objects import Money


@dataclass
class Part:
    """A part held in inventory. Identity is by ``id``."""

    id: int
    name: str
    price: Money
    stock: int
    minimum: int
    maximum: int

    def same_as(self, other: Part) -> bool:
        return self.id == other.id


@dataclass
class InHousePart(Part):
    machine_id: int = 0


@dataclass
class OutsourcedPart(Part):
    company_name: str = ""
