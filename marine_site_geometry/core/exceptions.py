"""Site geometry exception taxonomy.

Every domain exception inherits from ``SiteGeometryError`` and carries
structured context fields for consistent logging and diagnostics.

Taxonomy categories
-------------------
- ``ValidationError``: caller supplied values that break a contract.
- ``ContractError``: payload/schema drift from an upstream collaborator.

Malformed user input (a missing latitude, a two-point polygon, a
degenerate extent) is not an exception in this package: the parser and
feature assembler return ``None`` or ``[]`` and the view policy falls
back to the default UK view. Exceptions are reserved for programming
and integration errors.

Every exception exposes ``to_error_dict()`` for a stable structured
error payload suitable for logging.
"""

from __future__ import annotations


class SiteGeometryError(Exception):
    """Base exception for all site-geometry errors.

    Attributes:
        message: Human-readable error description.
        stage: Component where the error occurred
            (e.g. ``"circle"``, ``"geojson"``).
        code: Machine-readable error code (e.g. ``"CIRCLE_SIDES_INVALID"``).
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        return "internal"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(SiteGeometryError):
    """A caller supplied a value outside the documented contract."""


class ContractError(SiteGeometryError):
    """Payload or schema drift from an upstream collaborator."""
