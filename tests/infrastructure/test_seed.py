"""Tests for loading the start-up inventory."""

import json
from decimal import Decimal

import pytest

from ims.domain.exceptions import EntityNotFoundError, InvalidPriceError, ValidationError
from ims.domain.model.part import InHousePart, OutsourcedPart
from ims.infrastructure.seed import DEFAULT_SEED_FILE, load_inventory


def _write(tmp_path, document):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


class TestLoadInventory:

    def test_packaged_seed_loads(self):
        inv = load_inventory(DEFAULT_SEED_FILE)
        assert inv.get_all_parts()
        assert inv.get_all_products()

    def test_parts_and_associations(self, tmp_path):
        path = _write(tmp_path, {
            "parts": [
                {"id": 1, "name": "Bolt", "price": "0.25", "stock": 5, "min": 0, "max": 9, "machine_id": 4},
                {"id": 2, "name": "Nut", "price": "0.10", "stock": 5, "min": 0, "max": 9, "company_name": "Acme"},
            ],
            "products": [
                {"id": 10, "name": "Kit", "price": "1.00", "stock": 1, "min": 0, "max": 2, "part_ids": [2, 1]},
            ],
        })
        inv = load_inventory(path, currency="EUR")

        bolt, nut = inv.get_all_parts()
        assert isinstance(bolt, InHousePart) and bolt.machine_id == 4
        assert isinstance(nut, OutsourcedPart) and nut.company_name == "Acme"
        assert nut.price.amount == Decimal("0.10")
        assert nut.price.currency == "EUR"

        kit = inv.lookup_product(10)
        assert kit.associated_parts[0] is nut
        assert kit.associated_parts[1] is bolt

    def test_part_without_source_rejected(self, tmp_path):
        path = _write(tmp_path, {
            "parts": [{"id": 1, "name": "Bolt", "price": "1", "stock": 1, "min": 0, "max": 2}],
        })
        with pytest.raises(ValidationError, match="machine_id"):
            load_inventory(path)

    def test_unknown_part_reference_rejected(self, tmp_path):
        path = _write(tmp_path, {
            "products": [{"id": 1, "name": "Kit", "price": "1", "stock": 1, "min": 0, "max": 2, "part_ids": [3]}],
        })
        with pytest.raises(EntityNotFoundError, match="unknown part #3"):
            load_inventory(path)

    def test_unreadable_price_is_a_price_error(self, tmp_path):
        path = _write(tmp_path, {
            "parts": [{"id": 1, "name": "Bolt", "price": "cheap", "stock": 1, "min": 0, "max": 2, "machine_id": 4}],
        })
        with pytest.raises(InvalidPriceError):
            load_inventory(path)

    def test_numeric_price_is_read_exactly(self, tmp_path):
        path = _write(tmp_path, {
            "products": [{"id": 1, "name": "Kit", "price": 2.3, "stock": 1, "min": 0, "max": 2, "part_ids": []}],
        })
        inv = load_inventory(path)
        assert inv.lookup_product(1).price.amount == Decimal("2.3")
