"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each class carries a short ``code`` the presentation layer can switch on.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    code = "DomainError"


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    code = "ValidationError"


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    code = "NotFound"


# --- Form field errors --------------------------------------------------------


class EmptyNameError(ValidationError):
    code = "EmptyName"


class InvalidStockError(ValidationError):
    code = "InvalidStock"


class InvalidPriceError(ValidationError):
    code = "InvalidPrice"


class InvalidMinError(ValidationError):
    code = "InvalidMin"


class InvalidMaxError(ValidationError):
    code = "InvalidMax"


class InvalidMachineIdError(ValidationError):
    code = "InvalidMachineId"


class EmptyCompanyNameError(ValidationError):
    code = "EmptyCompanyName"


# --- Stock level invariants ---------------------------------------------------


class MinExceedsMaxError(ValidationError):
    code = "MinExceedsMax"


class StockBelowMinError(ValidationError):
    code = "StockBelowMin"


class StockAboveMaxError(ValidationError):
    code = "StockAboveMax"


# --- Associations -------------------------------------------------------------


class DuplicateAssociationError(ValidationError):
    """The part is already associated with the product."""

    code = "DuplicateAssociation"


class ProductHasAssociatedPartsError(ValidationError):
    """A product cannot be deleted while parts are still associated."""

    code = "ProductHasAssociatedParts"


# --- Session / store ----------------------------------------------------------


class StoreInconsistencyError(DomainException):
    """The inventory no longer holds the record being edited."""

    code = "StoreInconsistency"


class SessionClosedError(DomainException):
    """An edit session was used after it was saved, aborted or cancelled."""

    code = "SessionClosed"
