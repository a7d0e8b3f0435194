"""Integration tests for the main-form use cases around the modify form."""

import pytest

from ims.application.add_part import AddPartHandler
from ims.application.add_product import AddProductHandler
from ims.application.delete_part import DeletePartHandler
from ims.application.delete_product import DeleteProductHandler
from ims.application.show_inventory import ShowInventoryHandler
from ims.domain.exceptions import (
    DuplicateAssociationError,
    EmptyCompanyNameError,
    EntityNotFoundError,
    InvalidMachineIdError,
    ProductHasAssociatedPartsError,
    StockAboveMaxError,
    ValidationError,
)
from ims.domain.model.part import InHousePart, OutsourcedPart
from tests.fakes import FakeInventoryRepository, make_product, sample_parts


class TestAddPart:

    def test_in_house_part_gets_next_id(self):
        repo = FakeInventoryRepository(parts=sample_parts())
        part = AddPartHandler(repo).handle("Bolt", "5", "0.25", "0", "100", "in-house", "42")

        assert isinstance(part, InHousePart)
        assert part.id == 10
        assert part.machine_id == 42
        assert repo.parts[-1] is part

    def test_outsourced_part(self):
        repo = FakeInventoryRepository()
        part = AddPartHandler(repo).handle("Bolt", "5", "0.25", "0", "100", "outsourced", "Acme")

        assert isinstance(part, OutsourcedPart)
        assert part.id == 1
        assert part.company_name == "Acme"

    def test_invalid_machine_id(self):
        repo = FakeInventoryRepository()
        with pytest.raises(InvalidMachineIdError):
            AddPartHandler(repo).handle("Bolt", "5", "0.25", "0", "100", "in-house", "M1")
        assert repo.parts == []

    def test_overlong_machine_id(self):
        repo = FakeInventoryRepository()
        with pytest.raises(InvalidMachineIdError):
            AddPartHandler(repo).handle("Bolt", "5", "0.25", "0", "100", "in-house", "9" * 5000)
        assert repo.parts == []

    def test_empty_company_name(self):
        with pytest.raises(EmptyCompanyNameError):
            AddPartHandler(FakeInventoryRepository()).handle(
                "Bolt", "5", "0.25", "0", "100", "outsourced", ""
            )

    def test_unknown_source(self):
        with pytest.raises(ValidationError, match="Unknown part source"):
            AddPartHandler(FakeInventoryRepository()).handle(
                "Bolt", "5", "0.25", "0", "100", "bartered", "x"
            )

    def test_common_fields_checked_first(self):
        with pytest.raises(StockAboveMaxError):
            AddPartHandler(FakeInventoryRepository()).handle(
                "Bolt", "500", "0.25", "0", "100", "in-house", "not a number"
            )


class TestAddProduct:

    def test_product_with_parts(self):
        repo = FakeInventoryRepository(parts=sample_parts(), products=[make_product(5)])
        product = AddProductHandler(repo).handle("Kit", "3", "20", "1", "5", part_ids=[7, 1])

        assert product.id == 6
        assert [p.id for p in product.associated_parts] == [7, 1]
        assert repo.products[-1] is product

    def test_unknown_part_rejected(self):
        repo = FakeInventoryRepository(parts=sample_parts())
        with pytest.raises(EntityNotFoundError, match="Part with ID 99"):
            AddProductHandler(repo).handle("Kit", "3", "20", "1", "5", part_ids=[99])
        assert repo.products == []

    def test_duplicate_part_rejected(self):
        repo = FakeInventoryRepository(parts=sample_parts())
        with pytest.raises(DuplicateAssociationError):
            AddProductHandler(repo).handle("Kit", "3", "20", "1", "5", part_ids=[1, 1])


class TestDelete:

    def test_delete_part(self):
        repo = FakeInventoryRepository(parts=sample_parts())
        deleted = DeletePartHandler(repo).handle(7)
        assert deleted.name == "Sledge Hammer"
        assert [p.id for p in repo.parts] == [1, 2, 9]

    def test_delete_missing_part(self):
        with pytest.raises(EntityNotFoundError):
            DeletePartHandler(FakeInventoryRepository()).handle(1)

    def test_delete_product_without_parts(self):
        repo = FakeInventoryRepository(products=[make_product(5)])
        DeleteProductHandler(repo).handle(5)
        assert repo.products == []

    def test_delete_product_with_parts_refused(self):
        product = make_product(5, parts=sample_parts()[:1])
        repo = FakeInventoryRepository(products=[product])

        with pytest.raises(ProductHasAssociatedPartsError):
            DeleteProductHandler(repo).handle(5)
        assert repo.products == [product]

    def test_delete_missing_product(self):
        with pytest.raises(EntityNotFoundError):
            DeleteProductHandler(FakeInventoryRepository()).handle(5)


class TestShowInventory:

    def test_part_rows(self):
        repo = FakeInventoryRepository(parts=sample_parts())
        rows = ShowInventoryHandler(repo).parts("Hammer")

        assert [r.id for r in rows] == [1, 7]
        assert rows[0].price == "$10.00"
        assert rows[0].source == "machine 101"

    def test_outsourced_source_column(self):
        repo = FakeInventoryRepository(parts=sample_parts())
        assert ShowInventoryHandler(repo).parts("2")[0].source == "Acme"

    def test_product_rows(self):
        repo = FakeInventoryRepository(
            products=[make_product(5, parts=sample_parts()[:2]), make_product(6, "Gadget")]
        )
        rows = ShowInventoryHandler(repo).products()

        assert [(r.id, r.part_count) for r in rows] == [(5, 2), (6, 0)]
