"""Resolution of configuration strings to a Babel locale.

The engine accepts an ordered tuple of configuration strings, each a BCP-47
tag optionally carrying a Unicode extension (``-u-ca-...-nu-...``). Babel does
not understand extensions, so they are split off and recorded; the base tags
are tried in order, like Intl's lookup matcher.

Thread-safe. Resolution results are memoized per configuration tuple.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

from babel import Locale, UnknownLocaleError

from localefields.constants import FALLBACK_BABEL_LOCALE
from localefields.locale_utils import normalize_locale, split_extension

__all__ = ["ResolvedLocale", "resolve_locale"]

logger = logging.getLogger(__name__)

_GREGORIAN = "gregory"


@dataclass(frozen=True, slots=True)
class ResolvedLocale:
    """Babel locale chosen for a configuration tuple.

    Attributes:
        babel_locale: Babel Locale used for formatting
        tag: Configuration string the locale was resolved from (None on fallback)
        calendar: Calendar keyword from the extension, if any
        numbering: Numbering keyword from the extension, if any
        is_fallback: True when no configured tag was known to Babel
    """

    babel_locale: Locale
    tag: str | None
    calendar: str | None
    numbering: str | None
    is_fallback: bool = False

    @property
    def locale_code(self) -> str:
        return str(self.babel_locale)


@lru_cache(maxsize=256)
def resolve_locale(config_strings: tuple[str, ...]) -> ResolvedLocale:
    """Pick the first configuration string Babel has data for.

    Args:
        config_strings: Ordered configuration strings

    Returns:
        ResolvedLocale. When no tag is known, falls back to en_US with a
        warning logged and ``is_fallback`` set.

    Raises:
        ValueError: A tag is syntactically malformed (from Babel, unchanged)

    Example:
        >>> resolve_locale(("xx-unknown", "fr-ca")).locale_code
        'fr_CA'
        >>> resolve_locale(("th-u-ca-buddhist",)).calendar
        'buddhist'
    """
    for config in config_strings:
        parts = split_extension(config)
        try:
            babel_locale = Locale.parse(normalize_locale(parts.base))
        except UnknownLocaleError:
            logger.debug("No locale data for '%s', trying next tag", config)
            continue

        if parts.calendar and parts.calendar != _GREGORIAN:
            logger.debug(
                "Calendar '%s' requested for '%s'; formatting uses the Gregorian calendar",
                parts.calendar,
                config,
            )
        if parts.numbering:
            logger.debug(
                "Numbering system '%s' requested for '%s'; it is recorded but not applied",
                parts.numbering,
                config,
            )
        return ResolvedLocale(babel_locale, config, parts.calendar, parts.numbering)

    logger.warning(
        "No locale data for any of %s. Falling back to %s",
        list(config_strings),
        FALLBACK_BABEL_LOCALE,
    )
    first = split_extension(config_strings[0]) if config_strings else None
    return ResolvedLocale(
        Locale.parse(FALLBACK_BABEL_LOCALE),
        None,
        first.calendar if first else None,
        first.numbering if first else None,
        is_fallback=True,
    )
