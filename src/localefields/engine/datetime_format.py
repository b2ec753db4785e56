"""Locale-aware date/time formatting with decomposition into typed parts.

Babel formats whole patterns; it has no counterpart of Intl's
formatToParts(). This module fills the gap:

    1. Requested options become a CLDR skeleton ("yMMMMEEEEd")
    2. babel.dates.match_skeleton() picks the locale's closest skeleton
    3. Field widths of the matched pattern are adjusted to the requested
       widths, keeping the pattern's letters ("LLL" -> "LLLL" keeps the
       standalone form, "MMM" -> "MMMM" keeps the format form)
    4. Requested fields missing from the pattern are appended
    5. Each pattern field is formatted on its own through DateTimeFormat and
       tagged with its part type

Whether a month or weekday comes out in its standalone or format (running
text) form is decided by the locale's pattern, exactly as in CLDR: a skeleton
with only a month yields "LLLL" in most locales, one with a day yields "MMMM".

Thread-safe. Pattern selection is memoized per (locale, skeleton, widths).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import UTC, datetime
from functools import lru_cache
from typing import Literal, NamedTuple, TypedDict

from babel import Locale
from babel.dates import (
    DateTimeFormat,
    get_timezone,
    match_skeleton,
    tokenize_pattern,
    untokenize_pattern,
)

from localefields.core.errors import InvalidOptionError
from localefields.engine.resolve import ResolvedLocale, resolve_locale

__all__ = ["DateTimeFormatter", "DateTimeOptions", "FormatPart"]

logger = logging.getLogger(__name__)

type PatternToken = tuple[str, tuple[str, int]] | tuple[str, str]


class DateTimeOptions(TypedDict, total=False):
    """Options accepted by DateTimeFormatter (Intl.DateTimeFormat style)."""

    era: Literal["narrow", "short", "long"]
    year: Literal["numeric", "2-digit"]
    month: Literal["numeric", "2-digit", "narrow", "short", "long"]
    weekday: Literal["narrow", "short", "long"]
    day: Literal["numeric", "2-digit"]
    day_period: Literal["narrow", "short", "long"]
    hour: Literal["numeric", "2-digit"]
    minute: Literal["numeric", "2-digit"]
    second: Literal["numeric", "2-digit"]
    time_zone_name: Literal["short", "long"]
    hour12: bool
    time_zone: str


class FormatPart(NamedTuple):
    """One typed piece of a formatted date."""

    type: str
    value: str


_NUMERIC = {"numeric": 1, "2-digit": 2}
_TEXT = {"short": 1, "long": 4, "narrow": 5}

# Option name -> (part type, skeleton letter, value -> width)
# The hour letter is chosen per locale / hour12 at construction time.
_FIELD_OPTIONS: dict[str, tuple[str, str, dict[str, int]]] = {
    "era": ("era", "G", _TEXT),
    "year": ("year", "y", _NUMERIC),
    "month": ("month", "M", {**_NUMERIC, "short": 3, "long": 4, "narrow": 5}),
    "weekday": ("weekday", "E", {"short": 3, "long": 4, "narrow": 5}),
    "day": ("day", "d", _NUMERIC),
    "day_period": ("dayPeriod", "a", {"short": 1, "long": 4, "narrow": 5}),
    "hour": ("hour", "h", _NUMERIC),
    "minute": ("minute", "m", _NUMERIC),
    "second": ("second", "s", _NUMERIC),
    "time_zone_name": ("timeZoneName", "z", {"short": 1, "long": 4}),
}

_OTHER_OPTIONS = frozenset({"hour12", "time_zone"})

# Day period is never part of a CLDR skeleton id; it is applied by adjustment.
_NOT_IN_SKELETON = frozenset({"dayPeriod"})

# Numeric fields keep a wider pattern width ("dd" stays "dd" for numeric).
_NUMERIC_PART_TYPES = frozenset({"day", "hour", "minute", "second"})

_PART_TYPES: dict[str, str] = {
    "G": "era",
    "y": "year", "Y": "year", "u": "year", "U": "year", "r": "year",
    "M": "month", "L": "month",
    "d": "day",
    "E": "weekday", "e": "weekday", "c": "weekday",
    "a": "dayPeriod", "b": "dayPeriod", "B": "dayPeriod",
    "h": "hour", "H": "hour", "K": "hour", "k": "hour",
    "m": "minute",
    "s": "second",
    "S": "fractionalSecond",
    "z": "timeZoneName", "Z": "timeZoneName", "v": "timeZoneName",
    "V": "timeZoneName", "O": "timeZoneName", "X": "timeZoneName", "x": "timeZoneName",
}  # fmt: skip

# Intl default when no field is requested: numeric year, month and day.
_DEFAULT_FIELDS: DateTimeOptions = {"year": "numeric", "month": "numeric", "day": "numeric"}


def _hour_letter(babel_locale: Locale, hour12: bool | None) -> str:
    if hour12 is None:
        short = babel_locale.time_formats.get("short")
        pattern = getattr(short, "pattern", str(short or ""))
        hour12 = "h" in pattern or "K" in pattern
    return "h" if hour12 else "H"


@lru_cache(maxsize=1024)
def _pattern_tokens(
    babel_locale: Locale,
    skeleton: str,
    widths: tuple[tuple[str, str, int], ...],
) -> tuple[PatternToken, ...]:
    """Select and width-adjust the locale pattern for a skeleton.

    Args:
        babel_locale: Locale whose skeletons are searched
        skeleton: Requested CLDR skeleton
        widths: (part type, letter, width) for every requested field
    """
    matched = match_skeleton(skeleton, babel_locale.datetime_skeletons) if skeleton else None
    if matched is None:
        logger.debug("No skeleton match for '%s' in %s; composing fields", skeleton, babel_locale)
        tokens: list[PatternToken] = []
    else:
        pattern = babel_locale.datetime_skeletons[matched]
        tokens = list(tokenize_pattern(getattr(pattern, "pattern", str(pattern))))

    requested = {part_type: width for part_type, _, width in widths}
    present: set[str] = set()
    adjusted: list[PatternToken] = []
    for kind, value in tokens:
        if kind != "field":
            adjusted.append((kind, value))
            continue
        letter, width = value
        part_type = _PART_TYPES.get(letter, "unknown")
        present.add(part_type)
        if part_type == "dayPeriod" and part_type in requested:
            # A requested day period means AM/PM; flexible periods (b, B) name
            # times of day such as "evening" instead.
            letter = "a"
        if part_type in requested:
            wanted = requested[part_type]
            width = max(width, wanted) if part_type in _NUMERIC_PART_TYPES else wanted
        adjusted.append(("field", (letter, width)))

    for part_type, letter, width in widths:
        if part_type in present:
            continue
        if adjusted:
            adjusted.append(("chars", " "))
        adjusted.append(("field", (letter, width)))
    return tuple(adjusted)


class DateTimeFormatter:
    """Date/time formatter bound to configuration strings and options.

    Constructing a formatter resolves the locale and the pattern; formatting
    is then a per-field walk over the pattern.

    Examples:
        >>> from datetime import datetime, UTC
        >>> fmt = DateTimeFormatter(("en-us",), {"month": "long", "day": "numeric"})
        >>> fmt.format(datetime(2016, 3, 1, tzinfo=UTC))
        'March 1'
        >>> [p.type for p in fmt.format_to_parts(datetime(2016, 3, 1, tzinfo=UTC))]
        ['month', 'literal', 'day']
    """

    __slots__ = ("_options", "_resolved", "_time_zone", "_tokens")

    def __init__(
        self,
        config_strings: tuple[str, ...],
        options: DateTimeOptions | Mapping[str, object] | None = None,
    ) -> None:
        options = dict(options or {})
        unknown = set(options) - set(_FIELD_OPTIONS) - _OTHER_OPTIONS
        if unknown:
            msg = f"Unknown date/time option(s): {', '.join(sorted(unknown))}"
            raise InvalidOptionError(msg)

        self._resolved: ResolvedLocale = resolve_locale(tuple(config_strings))
        self._options = options

        zone_name = options.get("time_zone")
        self._time_zone = get_timezone(zone_name) if zone_name else None

        fields = {k: v for k, v in options.items() if k in _FIELD_OPTIONS}
        if not fields:
            fields = dict(_DEFAULT_FIELDS)

        hour_letter = _hour_letter(self._resolved.babel_locale, options.get("hour12"))  # type: ignore[arg-type]
        widths: list[tuple[str, str, int]] = []
        for name, (part_type, letter, width_map) in _FIELD_OPTIONS.items():
            if name not in fields:
                continue
            value = fields[name]
            if value not in width_map:
                msg = f"Invalid value {value!r} for date/time option '{name}'"
                raise InvalidOptionError(msg)
            if part_type == "hour":
                letter = hour_letter
            widths.append((part_type, letter, width_map[value]))

        skeleton = "".join(
            letter * width for part_type, letter, width in widths if part_type not in _NOT_IN_SKELETON
        )
        self._tokens = _pattern_tokens(self._resolved.babel_locale, skeleton, tuple(widths))

    @property
    def pattern(self) -> str:
        """CLDR pattern this formatter applies."""
        return str(untokenize_pattern(self._tokens))

    def resolved_options(self) -> dict[str, object]:
        """Report what the formatter actually uses.

        Calendar and numbering system reflect the configuration string's
        extension when present, although formatting always uses the
        Gregorian calendar and Latin digits.
        """
        return {
            "locale": self._resolved.locale_code.replace("_", "-"),
            "calendar": self._resolved.calendar or "gregory",
            "numbering_system": self._resolved.numbering or "latn",
            "time_zone": self._options.get("time_zone"),
            "pattern": self.pattern,
            "is_fallback": self._resolved.is_fallback,
        }

    def _localize(self, value: datetime) -> datetime:
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        if self._time_zone is not None:
            value = value.astimezone(self._time_zone)
        return value

    def format_to_parts(self, value: datetime) -> list[FormatPart]:
        """Format and return the output split into typed parts.

        Naive datetimes are taken to be UTC. When the formatter has a
        ``time_zone`` option, the value is converted to that zone first.
        """
        fields = DateTimeFormat(self._localize(value), locale=self._resolved.babel_locale)
        parts: list[FormatPart] = []
        for kind, token in self._tokens:
            if kind == "field":
                letter, width = token  # type: ignore[misc]
                parts.append(FormatPart(_PART_TYPES.get(letter, "unknown"), fields[letter * width]))
            else:
                parts.append(FormatPart("literal", str(token)))
        return parts

    def format(self, value: datetime) -> str:
        """Format a datetime to a string."""
        return "".join(part.value for part in self.format_to_parts(value))
