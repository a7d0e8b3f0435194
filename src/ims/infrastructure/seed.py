"""Start-up data for the in-memory inventory.

The seed file is a JSON document with a ``parts`` array and a
``products`` array. Products list the IDs of their associated parts;
those are resolved against the parts loaded from the same file.
"""

from __future__ import annotations

import json
from pathlib import Path

from ims.domain.exceptions import EntityNotFoundError, ValidationError
from ims.domain.model.part import InHousePart, OutsourcedPart, Part
from ims.domain.model.product import Product
from ims.domain.model.value_objects import Money
from ims.infrastructure.persistence.in_memory_inventory import InMemoryInventory

DEFAULT_SEED_FILE = Path(__file__).resolve().parent / "data" / "seed.json"


def load_inventory(file_path: Path, currency: str = "USD") -> InMemoryInventory:
    raw = json.loads(file_path.read_text(encoding="utf-8"))
    parts = [_part_to_domain(item, currency) for item in raw.get("parts", [])]
    by_id = {p.id: p for p in parts}
    products = [
        _product_to_domain(item, by_id, currency) for item in raw.get("products", [])
    ]
    return InMemoryInventory(parts=parts, products=products)


# --- Deserialization ----------------------------------------------------------


def _part_to_domain(raw: dict, currency: str) -> Part:
    common = dict(
        id=raw["id"],
        name=raw["name"],
        price=Money.of(raw["price"], currency),
        stock=raw["stock"],
        minimum=raw["min"],
        maximum=raw["max"],
    )
    if "machine_id" in raw:
        return InHousePart(**common, machine_id=raw["machine_id"])
    if "company_name" in raw:
        return OutsourcedPart(**common, company_name=raw["company_name"])
    raise ValidationError(
        f"Seed part #{raw['id']} needs either 'machine_id' or 'company_name'"
    )


def _product_to_domain(raw: dict, parts: dict[int, Part], currency: str) -> Product:
    product = Product(
        id=raw["id"],
        name=raw["name"],
        price=Money.of(raw["price"], currency),
        stock=raw["stock"],
        minimum=raw["min"],
        maximum=raw["max"],
    )
    for part_id in raw.get("part_ids", []):
        part = parts.get(part_id)
        if part is None:
            raise EntityNotFoundError(
                f"Seed product #{product.id} references unknown part #{part_id}"
            )
        product.add_associated_part(part)
    return product
