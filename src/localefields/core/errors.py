"""Error types shared across the engine and runtime layers.

Errors raised by Babel (UnknownLocaleError, ValueError for malformed tags,
LookupError for unknown time zones) are not wrapped; they propagate to the
caller unchanged.

Python 3.13+.
"""

__all__ = [
    "ExtractionError",
    "InvalidOptionError",
    "LocaleFieldsError",
    "UnsupportedFieldError",
]


class LocaleFieldsError(Exception):
    """Base class for all localefields errors."""


class ExtractionError(LocaleFieldsError, LookupError):
    """Raised when a requested part type is absent from formatted output.

    This always indicates that the formatting options did not ask the engine
    for the field being extracted (for example extracting ``weekday`` from a
    formatter configured only with ``month``).

    Attributes:
        field: Part type that was requested
        available: Part types present in the decomposed output, in order
    """

    def __init__(self, field: str, available: tuple[str, ...]) -> None:
        """Initialize ExtractionError.

        Args:
            field: Part type that was requested
            available: Part types present in the decomposed output
        """
        listed = ", ".join(available) if available else "<none>"
        super().__init__(f"No '{field}' part in formatted output (parts: {listed})")
        self.field = field
        self.available = available


class UnsupportedFieldError(LocaleFieldsError, NotImplementedError):
    """Raised for field tables this library cannot produce."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"'{field}' names are not supported: {reason}")
        self.field = field


class InvalidOptionError(LocaleFieldsError, ValueError):
    """Raised for an unknown length token or formatter option value."""
