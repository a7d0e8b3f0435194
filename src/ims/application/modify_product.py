"""Application service: Modify Product use case.

One ``ModifyProductSession`` backs one open "modify product" form. It
loads a product into editable fields, lets the user search the parts
inventory, associate and disassociate parts, and finally either saves a
replacement product into the store or is cancelled.

Association edits are applied to the product being edited as soon as
they happen. Cancelling the session does not undo them.
"""

from __future__ import annotations

from loguru import logger

from ims.application.dto import ProductFormDTO
from ims.application.form_parsing import parse_stock_item_form
from ims.domain.exceptions import (
    DuplicateAssociationError,
    SessionClosedError,
    StoreInconsistencyError,
)
from ims.domain.model.part import Part
from ims.domain.model.product import Product
from ims.domain.repository.inventory_repository import InventoryRepository
from ims.domain.service.inventory_search import search_parts


class ModifyProductSession:

    def __init__(self, inventory_repo: InventoryRepository, currency: str = "USD") -> None:
        self._inventory_repo = inventory_repo
        self._currency = currency
        self._product: Product | None = None
        self._open = False

    # --- Session lifecycle ----------------------------------------------------

    def begin(self, product: Product) -> ProductFormDTO:
        """Start editing ``product`` and return its fields for the form."""
        self._product = product
        self._open = True
        logger.info("Editing product #{} '{}'", product.id, product.name)
        return ProductFormDTO.from_product(product)

    def cancel(self) -> None:
        """Close the form without saving field edits."""
        product = self._require_open()
        self._open = False
        logger.info("Cancelled edit of product #{}", product.id)

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def product(self) -> Product:
        """The product handed to ``begin``."""
        if self._product is None:
            raise SessionClosedError("No product has been loaded")
        return self._product

    @property
    def associated_parts(self) -> list[Part]:
        """The live association list of the product being edited."""
        return self.product.associated_parts

    # --- Parts table ----------------------------------------------------------

    def search_parts(self, query: str, all_parts: list[Part] | None = None) -> list[Part]:
        """Filter the parts table.

        Searches ``all_parts`` when given, otherwise every part in the
        store. An unknown ID yields an empty list.
        """
        if all_parts is None:
            all_parts = self._inventory_repo.get_all_parts()
        return search_parts(all_parts, query)

    # --- Associated parts -----------------------------------------------------

    def add_association(self, part: Part) -> None:
        product = self._require_open()
        try:
            product.add_associated_part(part)
        except DuplicateAssociationError as exc:
            logger.warning("Rejected association of part #{}: {}", part.id, exc)
            raise
        logger.info("Associated part #{} with product #{}", part.id, product.id)

    def remove_association(self, part: Part, confirmed: bool) -> bool:
        """Remove ``part`` from the association list.

        Nothing happens unless the user ``confirmed`` the removal. Returns
        whether a part was removed.
        """
        product = self._require_open()
        if not confirmed:
            return False
        removed = product.delete_associated_part(part)
        if removed:
            logger.info("Removed part #{} from product #{}", part.id, product.id)
        return removed

    # --- Save -----------------------------------------------------------------

    def validate_and_build(
        self,
        name: str,
        stock_text: str,
        price_text: str,
        min_text: str,
        max_text: str,
    ) -> Product:
        """Build the replacement product from the form fields.

        Raises the ValidationError for the first invalid field; the session
        stays open so the user can correct it and try again.
        """
        product = self._require_open()
        fields = parse_stock_item_form(
            name, stock_text, price_text, min_text, max_text, self._currency
        )
        return Product(
            id=product.id,
            name=fields.name,
            price=fields.price,
            stock=fields.levels.stock,
            minimum=fields.levels.minimum,
            maximum=fields.levels.maximum,
            associated_parts=list(product.associated_parts),
        )

    def commit(self, new_product: Product) -> None:
        """Replace the edited product in the store with ``new_product``.

        If the store no longer holds the edited product the session is
        aborted and StoreInconsistencyError propagates; the store is left
        untouched.
        """
        product = self._require_open()
        index = self._inventory_repo.index_of_product(product)
        if index is None:
            self._open = False
            logger.error("Product #{} vanished from the inventory before save", product.id)
            raise StoreInconsistencyError(
                f"Product #{product.id} is no longer in the inventory"
            )

        self._inventory_repo.update_product(index, new_product)
        self._open = False
        logger.info("Saved product #{} '{}'", new_product.id, new_product.name)

    def save(
        self,
        name: str,
        stock_text: str,
        price_text: str,
        min_text: str,
        max_text: str,
    ) -> Product:
        """Validate the form and commit it in one step."""
        new_product = self.validate_and_build(
            name, stock_text, price_text, min_text, max_text
        )
        self.commit(new_product)
        return new_product

    # --- Internal helpers -----------------------------------------------------

    def _require_open(self) -> Product:
        if not self._open or self._product is None:
            raise SessionClosedError("The modify product form is not open")
        return self._product
