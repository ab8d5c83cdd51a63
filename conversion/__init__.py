"""Unit conversion core: per-category converters and their shared helpers."""

import logging

logger = logging.getLogger("conversion")
if not logger.handlers:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


class ConversionError(ValueError):
    """Base class for invalid conversion requests."""


class UnknownCategoryError(ConversionError):
    """Raised when a category tag is not one of the supported categories."""


class UnsupportedUnitError(ConversionError):
    """Raised when a unit tag does not belong to the requested category."""


class IncompleteTableError(ConversionError):
    """Raised when a conversion table does not cover every ordered unit pair."""


__all__ = [
    "ConversionError",
    "IncompleteTableError",
    "UnknownCategoryError",
    "UnsupportedUnitError",
    "logger",
]
