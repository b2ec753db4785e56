"""Locale runtime package.

Provides the cached Locale facade, its process-wide identity cache, and the
sample-date helpers used to build field-name tables.

Python 3.13+.
"""

from .locale import Locale
from .locale_cache import LocaleCache
from .sampler import map_meridiems, map_months, map_weekdays

__all__ = [
    "Locale",
    "LocaleCache",
    "map_meridiems",
    "map_months",
    "map_weekdays",
]
