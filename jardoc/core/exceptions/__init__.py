"""Exception definitions module."""

from jardoc.core.exceptions.errors import (
    ConfigurationError,
    DeclarationParseError,
    JardocError,
    MissingInputError,
    SourceUnitValidationError,
)

__all__ = [
    "JardocError",
    "ConfigurationError",
    "DeclarationParseError",
    "MissingInputError",
    "SourceUnitValidationError",
]
