"""Locale objects: cached field-name tables and formatter factories.

Architecture:
    - Locale: identity (code, numbering, calendar) plus lazily filled
      field-name tables
    - One Locale per normalized identity, held in a process-wide LocaleCache
    - Formatting goes through the Babel-backed engine in localefields.engine;
      formatters are built fresh for every cache miss and never retained

Field-name tables are keyed by (context, length). They depend only on the
immutable identity and on fixed sample dates, so once filled they are never
recomputed. A computation that raises leaves its table entry empty.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from threading import RLock
from typing import TYPE_CHECKING, ClassVar

from localefields.constants import (
    DEFAULT_LOCALE_CODE,
    ERA_LENGTHS,
    FORMAT_CONTEXT,
    MERIDIEM_LENGTHS,
    MONTH_LENGTHS,
    STANDALONE_CONTEXT,
    WEEKDAY_LENGTHS,
)
from localefields.core.errors import ExtractionError, InvalidOptionError, UnsupportedFieldError
from localefields.engine.datetime_format import DateTimeFormatter, DateTimeOptions
from localefields.engine.number_format import NumberFormatter, NumberOptions
from localefields.engine.resolve import resolve_locale
from localefields.instant import Instant, NamedZone, UniversalZone, as_if_utc
from localefields.locale_utils import build_config_strings, canonicalize_tag
from localefields.runtime.locale_cache import LocaleCache, default_cache
from localefields.runtime.sampler import map_meridiems, map_months, map_weekdays

if TYPE_CHECKING:
    from babel import Locale as BabelLocale

__all__ = ["Locale", "LocaleCode"]

logger = logging.getLogger(__name__)

type LocaleCode = str | tuple[str, ...]
type CacheKey = tuple[LocaleCode, str | None, str | None]
type FieldTable = dict[tuple[str, str], tuple[str, ...]]

_CLONE_FIELDS = frozenset({"code", "numbering", "calendar"})


def _normalize_code(code: str | Sequence[str] | None) -> LocaleCode:
    if not code:
        return DEFAULT_LOCALE_CODE
    if isinstance(code, str):
        return canonicalize_tag(code)
    tags = tuple(canonicalize_tag(tag) for tag in code)
    return tags[0] if len(tags) == 1 else tags


def _normalize_key(
    code: str | Sequence[str] | None,
    numbering: str | None,
    calendar: str | None,
) -> CacheKey:
    return (
        _normalize_code(code),
        numbering.lower() if numbering else None,
        calendar.lower() if calendar else None,
    )


def _check_length(field_name: str, length: str, allowed: frozenset[str]) -> None:
    if length not in allowed:
        msg = f"Invalid {field_name} length {length!r}; expected one of {sorted(allowed)}"
        raise InvalidOptionError(msg)


@dataclass(frozen=True, slots=True)
class Locale:
    """Locale with cached month, weekday and meridiem names.

    Use Locale.create() (or from_options() / clone()) to obtain instances;
    those return one shared instance per normalized identity. Direct
    construction bypasses the cache.

    Attributes:
        code: Canonical locale tag, or a tuple of fallback tags
        numbering: Numbering system override, or None
        calendar: Calendar override, or None
        config_strings: Configuration strings handed to the formatting engine

    Examples:
        >>> Locale.create("en-US").months("long")[:2]
        ('January', 'February')
        >>> Locale.create("fr").weekdays("long")[0]
        'lundi'
        >>> Locale.create("en-US") is Locale.create("en_us")
        True

    Thread Safety:
        Identity fields are immutable. Field tables are filled under a
        per-instance RLock; the process-wide cache has its own lock.
    """

    _cache: ClassVar[LocaleCache[CacheKey, Locale]] = default_cache

    code: LocaleCode
    numbering: str | None = None
    calendar: str | None = None
    config_strings: tuple[str, ...] = field(init=False)
    _months: FieldTable = field(init=False, repr=False, compare=False)
    _weekdays: FieldTable = field(init=False, repr=False, compare=False)
    _meridiems: FieldTable = field(init=False, repr=False, compare=False)
    _lock: RLock = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.code, str):
            object.__setattr__(self, "code", tuple(self.code))
        config = build_config_strings(self.code, self.numbering, self.calendar)
        object.__setattr__(self, "config_strings", config)
        object.__setattr__(self, "_months", {})
        object.__setattr__(self, "_weekdays", {})
        object.__setattr__(self, "_meridiems", {})
        object.__setattr__(self, "_lock", RLock())

    # ------------------------------------------------------------------
    # Factories and cache management
    # ------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        code: str | Sequence[str] | None = None,
        numbering: str | None = None,
        calendar: str | None = None,
    ) -> Locale:
        """Return the shared Locale for a (code, numbering, calendar) triple.

        Normalization before lookup:
            - empty or missing code -> "en-us"
            - tags are lowercased with hyphens ("en_US" -> "en-us")
            - a one-element sequence is the same as its single tag
            - empty overrides -> None

        Args:
            code: Locale tag or ordered fallback tags
            numbering: Numbering system override (e.g. "arab")
            calendar: Calendar override (e.g. "buddhist")

        Returns:
            Cached Locale instance
        """
        key = _normalize_key(code, numbering, calendar)
        return cls._cache.get_or_create(key, lambda: cls(*key))

    @classmethod
    def from_options(cls, options: Mapping[str, object]) -> Locale:
        """Create from a mapping with optional ``code``, ``numbering``, ``calendar`` keys."""
        return cls.create(
            options.get("code"),  # type: ignore[arg-type]
            options.get("numbering"),  # type: ignore[arg-type]
            options.get("calendar"),  # type: ignore[arg-type]
        )

    def clone(self, **overrides: str | Sequence[str] | None) -> Locale:
        """Return the Locale that differs from this one only in ``overrides``.

        Only keys actually passed are replaced; passing ``numbering=None``
        removes the numbering override. This instance is not modified.

        Raises:
            TypeError: For keys other than code, numbering and calendar

        Example:
            >>> Locale.create("fr").clone(calendar="buddhist").config_strings
            ('fr-u-ca-buddhist',)
        """
        unknown = set(overrides) - _CLONE_FIELDS
        if unknown:
            msg = f"clone() got unexpected field(s): {', '.join(sorted(unknown))}"
            raise TypeError(msg)
        return type(self).create(
            overrides.get("code", self.code),
            overrides.get("numbering", self.numbering),  # type: ignore[arg-type]
            overrides.get("calendar", self.calendar),  # type: ignore[arg-type]
        )

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the process-wide Locale cache (intended for tests)."""
        cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        return cls._cache.size()

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[CacheKey, ...]]:
        """Cache statistics: ``size`` and ``keys`` in insertion order."""
        return cls._cache.info()

    @property
    def babel_locale(self) -> BabelLocale:
        """Babel locale the configuration strings resolve to."""
        return resolve_locale(self.config_strings).babel_locale

    @property
    def is_fallback(self) -> bool:
        """True when no configured tag is known and en_US is used instead."""
        return resolve_locale(self.config_strings).is_fallback

    # ------------------------------------------------------------------
    # Field-name tables
    # ------------------------------------------------------------------

    def _field_table(
        self,
        table: FieldTable,
        key: tuple[str, str],
        compute: Callable[[], list[str]],
    ) -> tuple[str, ...]:
        with self._lock:
            if key in table:
                return table[key]
            logger.debug("Computing %s names for %s", key, self.code)
            names = tuple(compute())
            table[key] = names
            return names

    def months(self, length: str, use_format_context: bool = False) -> tuple[str, ...]:
        """Names of the twelve months, January first.

        Args:
            length: "narrow", "short", "long", "numeric" or "2-digit"
            use_format_context: Return the form used inside a full date
                (e.g. Russian "января") instead of the standalone form
                ("январь")

        Raises:
            InvalidOptionError: Unknown length
        """
        _check_length("month", length, MONTH_LENGTHS)
        if use_format_context:
            context = FORMAT_CONTEXT
            options: DateTimeOptions = {"month": length, "day": "numeric"}  # type: ignore[typeddict-item]
        else:
            context = STANDALONE_CONTEXT
            options = {"month": length}  # type: ignore[typeddict-item]
        return self._field_table(
            self._months,
            (context, length),
            lambda: map_months(lambda inst: self.extract(inst, options, "month")),
        )

    def weekdays(self, length: str, use_format_context: bool = False) -> tuple[str, ...]:
        """Names of the seven weekdays, Monday first.

        Index i matches ``datetime.weekday() == i``: index 0 is Monday and
        index 6 is Sunday, whatever the locale's first day of the week.
        Callers used to a Sunday-first table must rotate it themselves.

        Args:
            length: "narrow", "short" or "long"
            use_format_context: Return the form used inside a full date

        Raises:
            InvalidOptionError: Unknown length
        """
        _check_length("weekday", length, WEEKDAY_LENGTHS)
        if use_format_context:
            context = FORMAT_CONTEXT
            options: DateTimeOptions = {
                "weekday": length,  # type: ignore[typeddict-item]
                "year": "numeric",
                "month": "long",
                "day": "numeric",
            }
        else:
            context = STANDALONE_CONTEXT
            options = {"weekday": length}  # type: ignore[typeddict-item]
        return self._field_table(
            self._weekdays,
            (context, length),
            lambda: map_weekdays(lambda inst: self.extract(inst, options, "weekday")),
        )

    def meridiems(self, length: str = "short") -> tuple[str, ...]:
        """AM and PM markers, in that order."""
        _check_length("meridiem", length, MERIDIEM_LENGTHS)
        options: DateTimeOptions = {"hour": "numeric", "hour12": True, "day_period": length}  # type: ignore[typeddict-item]
        return self._field_table(
            self._meridiems,
            (FORMAT_CONTEXT, length),
            lambda: map_meridiems(lambda inst: self.extract(inst, options, "dayPeriod")),
        )

    def eras(self, length: str = "short") -> tuple[str, ...]:
        """Era names are not available.

        Raises:
            UnsupportedFieldError: Always. Python datetimes cannot represent
                years before 1 CE, so the BCE era cannot be sampled.
        """
        _check_length("era", length, ERA_LENGTHS)
        raise UnsupportedFieldError("era", "years before 1 CE cannot be sampled")

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def extract(self, instant: Instant, options: DateTimeOptions, field_name: str) -> str:
        """Format ``instant`` and return the first part of type ``field_name``.

        Raises:
            ExtractionError: The options produce no part of that type
        """
        formatter, value = self.inst_formatter(instant, options)
        parts = formatter.format_to_parts(value)
        for part in parts:
            if part.type == field_name:
                return part.value
        raise ExtractionError(field_name, tuple(part.type for part in parts))

    def inst_formatter(
        self,
        instant: Instant,
        options: DateTimeOptions | None = None,
    ) -> tuple[DateTimeFormatter, datetime]:
        """Build a formatter for ``instant`` and the datetime to give it.

        A floating instant is formatted as if it were UTC: its wall-clock
        fields are kept and the time zone is set to "UTC". Zone-dependent
        output (time zone names) is therefore meaningless for such instants.
        A zoned instant is converted to an aware datetime and formatted in
        its own zone.
        """
        match instant.zone:
            case UniversalZone():
                value = as_if_utc(instant)
                zone_name = "UTC"
            case NamedZone() as zone:
                value = instant.to_datetime()
                zone_name = zone.name()
            case other:
                msg = f"Unsupported zone type {type(other).__name__}"
                raise TypeError(msg)

        tagged: DateTimeOptions = {**(options or {}), "time_zone": zone_name}
        return DateTimeFormatter(self.config_strings, tagged), value

    def number_formatter(
        self,
        *,
        pad_to: int = 0,
        round: bool = False,  # noqa: A002  # pylint: disable=redefined-builtin
        options: NumberOptions | None = None,
    ) -> NumberFormatter:
        """Build a number formatter for this locale.

        Grouping is off unless ``options`` turns it on.

        Args:
            pad_to: Minimum integer digits (zero padding) when positive
            round: Format with no fraction digits
            options: Further NumberFormatter options

        Example:
            >>> Locale.create("en-US").number_formatter(pad_to=2).format(5)
            '05'
        """
        merged: NumberOptions = {"use_grouping": False, **(options or {})}
        if pad_to > 0:
            merged["minimum_integer_digits"] = pad_to
        if round:
            merged["minimum_fraction_digits"] = 0
            merged["maximum_fraction_digits"] = 0
        return NumberFormatter(self.config_strings, merged)
