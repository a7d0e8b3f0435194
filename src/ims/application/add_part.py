"""Application service: Add Part use case."""

from __future__ import annotations

from loguru import logger

from ims.application.form_parsing import parse_stock_item_form
from ims.domain.exceptions import (
    EmptyCompanyNameError,
    InvalidMachineIdError,
    ValidationError,
)
from ims.domain.model.part import InHousePart, OutsourcedPart, Part
from ims.domain.repository.inventory_repository import InventoryRepository
from ims.domain.service.inventory_search import parse_int

IN_HOUSE = "in-house"
OUTSOURCED = "outsourced"


class AddPartHandler:

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
        source: str,
        source_value: str,
    ) -> Part:
        """Add a new part to the inventory.

        ``source`` is either "in-house" (``source_value`` is the machine ID)
        or "outsourced" (``source_value`` is the company name). The common
        fields are validated before the source-specific one.
        """
        fields = parse_stock_item_form(name, stock, price, minimum, maximum, self._currency)

        common = dict(
            id=self._inventory_repo.next_part_id(),
            name=fields.name,
            price=fields.price,
            stock=fields.levels.stock,
            minimum=fields.levels.minimum,
            maximum=fields.levels.maximum,
        )
        if source == IN_HOUSE:
            machine_id = parse_int(source_value)
            if machine_id is None:
                raise InvalidMachineIdError(
                    f"Invalid machine ID {source_value!r}: an integer is expected"
                )
            part: Part = InHousePart(**common, machine_id=machine_id)
        elif source == OUTSOURCED:
            if source_value == "":
                raise EmptyCompanyNameError("Company name is required")
            part = OutsourcedPart(**common, company_name=source_value)
        else:
            raise ValidationError(
                f"Unknown part source {source!r}; expected '{IN_HOUSE}' or '{OUTSOURCED}'"
            )

        self._inventory_repo.add_part(part)
        logger.info("Added part #{} '{}'", part.id, part.name)
        return part
