"""Locale tag utilities: canonical cache keys, POSIX conversion, config strings.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent cache keys and lookups,
and builds the configuration strings handed to the formatting engine.

Python 3.13+.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import NamedTuple

__all__ = [
    "ExtensionTags",
    "build_config_strings",
    "canonicalize_tag",
    "get_system_locale",
    "normalize_locale",
    "split_extension",
]

# Unicode locale extension singleton (BCP-47 "-u-").
_UNICODE_EXTENSION = "u"


class ExtensionTags(NamedTuple):
    """Base tag and Unicode extension keywords split out of a config string."""

    base: str
    calendar: str | None
    numbering: str | None


def canonicalize_tag(locale_code: str) -> str:
    """Canonical BCP-47 spelling used for cache keys.

    BCP-47 is case-insensitive, so "en-US", "en_US" and "EN-us" all name the
    same locale and must map to the same cache entry.

    Example:
        >>> canonicalize_tag("en_US")
        'en-us'
        >>> canonicalize_tag("zh-Hant-TW")
        'zh-hant-tw'
    """
    return locale_code.replace("_", "-").lower()


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Babel fixes the casing of each subtag itself.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


def build_config_strings(
    code: str | Sequence[str] | None,
    numbering: str | None = None,
    calendar: str | None = None,
) -> tuple[str, ...]:
    """Build the locale identifiers the formatting engine is configured with.

    A single code is wrapped into a one-element tuple; a sequence keeps its
    order. When either override is given, every identifier is suffixed with a
    Unicode extension: ``-u-ca-<calendar>`` and/or ``-nu-<numbering>``.

    The extension keywords are formatting hints only. The engine records them
    but Babel formats with the Gregorian calendar and Latin digits regardless,
    and the suffixed strings must never be used to parse formatted text back.

    Args:
        code: Locale code, ordered fallback codes, or None for the system locale
        numbering: Numbering system override (e.g. "arab")
        calendar: Calendar override (e.g. "buddhist")

    Returns:
        Tuple of configuration strings

    Example:
        >>> build_config_strings("fr-fr")
        ('fr-fr',)
        >>> build_config_strings(["de-ch", "de"], calendar="buddhist")
        ('de-ch-u-ca-buddhist', 'de-u-ca-buddhist')
        >>> build_config_strings("th", numbering="thai", calendar="buddhist")
        ('th-u-ca-buddhist-nu-thai',)
    """
    if not code:
        code = get_system_locale().replace("_", "-")

    tags: tuple[str, ...] = (code,) if isinstance(code, str) else tuple(code)

    if not (calendar or numbering):
        return tags

    suffix = f"-{_UNICODE_EXTENSION}"
    if calendar:
        suffix += f"-ca-{calendar}"
    if numbering:
        suffix += f"-nu-{numbering}"
    return tuple(tag + suffix for tag in tags)


def split_extension(config_string: str) -> ExtensionTags:
    """Separate a config string into its base tag and extension keywords.

    Only the ``ca`` and ``nu`` keywords are recognized; other keywords in the
    Unicode extension are dropped.

    Example:
        >>> split_extension("th-u-ca-buddhist-nu-thai")
        ExtensionTags(base='th', calendar='buddhist', numbering='thai')
        >>> split_extension("en-us")
        ExtensionTags(base='en-us', calendar=None, numbering=None)
    """
    subtags = config_string.replace("_", "-").split("-")
    lowered = [s.lower() for s in subtags]
    if _UNICODE_EXTENSION not in lowered[1:]:
        return ExtensionTags(config_string, None, None)

    index = lowered.index(_UNICODE_EXTENSION, 1)
    base = "-".join(subtags[:index])
    keywords = lowered[index + 1 :]

    calendar: str | None = None
    numbering: str | None = None
    for key, value in zip(keywords[::2], keywords[1::2], strict=False):
        if key == "ca":
            calendar = value
        elif key == "nu":
            numbering = value
    return ExtensionTags(base, calendar, numbering)


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Normalizes the result to POSIX format for Babel compatibility.
    Filters out "C" and "POSIX" pseudo-locales.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_US" as fallback.

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return normalize_locale(system_locale.split(".")[0])
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX", ""):
            # Strip encoding suffix (e.g., ".UTF-8")
            return normalize_locale(value.split(".")[0])

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return "en_US"
