"""localefields - locale-aware calendar field names and formatters.

Resolves a locale (plus optional numbering and calendar overrides) to a
cached Locale object that produces month, weekday and meridiem names in
standalone or format context, and builds number and date/time formatters
bound to that locale. CLDR data comes from Babel.

Public API:
    Locale - Cached locale facade (create, from_options, clone, months, ...)
    Instant - Wall-clock datetime attached to a UniversalZone or NamedZone
    DateTimeFormatter - Date/time formatter with format_to_parts()
    NumberFormatter - Number formatter (grouping, padding, rounding)

Exceptions:
    LocaleFieldsError - Base exception class
    ExtractionError - Requested part type absent from formatted output
    UnsupportedFieldError - Field table not available (eras)
    InvalidOptionError - Unknown length token or formatter option

Submodules:
    localefields.engine - Babel-backed formatters and locale resolution
    localefields.runtime - Locale, LocaleCache and sample-date helpers
    localefields.locale_utils - Tag normalization and config strings
"""

from .core.errors import (
    ExtractionError,
    InvalidOptionError,
    LocaleFieldsError,
    UnsupportedFieldError,
)
from .engine import DateTimeFormatter, FormatPart, NumberFormatter
from .instant import Instant, NamedZone, UniversalZone, as_if_utc
from .runtime import Locale

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localefields")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DateTimeFormatter",
    "ExtractionError",
    "FormatPart",
    "Instant",
    "InvalidOptionError",
    "Locale",
    "LocaleFieldsError",
    "NamedZone",
    "NumberFormatter",
    "UniversalZone",
    "UnsupportedFieldError",
    "__version__",
    "as_if_utc",
]
