"""Babel-backed formatting engine.

Exposes the formatter contract the runtime layer consumes: formatters are
built from a tuple of configuration strings plus options, date/time
formatters decompose their output into typed parts.

Python 3.13+.
"""

from .datetime_format import DateTimeFormatter, DateTimeOptions, FormatPart
from .number_format import NumberFormatter, NumberOptions
from .resolve import ResolvedLocale, resolve_locale

__all__ = [
    "DateTimeFormatter",
    "DateTimeOptions",
    "FormatPart",
    "NumberFormatter",
    "NumberOptions",
    "ResolvedLocale",
    "resolve_locale",
]
