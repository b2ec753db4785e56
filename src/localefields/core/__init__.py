"""Core utilities shared across engine and runtime layers.

Exports:
    LocaleFieldsError: Base exception class
    ExtractionError: Requested part type absent from formatted output
    UnsupportedFieldError: Field table not available
    InvalidOptionError: Unknown length token or formatter option

Python 3.13+.
"""

from .errors import ExtractionError, InvalidOptionError, LocaleFieldsError, UnsupportedFieldError

__all__ = ["ExtractionError", "InvalidOptionError", "LocaleFieldsError", "UnsupportedFieldError"]
