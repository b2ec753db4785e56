"""Locale-aware number formatting (Intl.NumberFormat style) over Babel.

Options are translated into a CLDR decimal pattern and applied with
babel.numbers.format_decimal(). Rounding happens beforehand with the decimal
module, half away from zero, which is Intl's default ("halfExpand") rather
than the banker's rounding Babel would apply.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import TypedDict

from babel import numbers as babel_numbers

from localefields.core.errors import InvalidOptionError
from localefields.engine.resolve import ResolvedLocale, resolve_locale

__all__ = ["NumberFormatter", "NumberOptions"]


class NumberOptions(TypedDict, total=False):
    """Options accepted by NumberFormatter."""

    use_grouping: bool
    minimum_integer_digits: int
    minimum_fraction_digits: int
    maximum_fraction_digits: int


_DEFAULTS: NumberOptions = {
    "use_grouping": True,
    "minimum_integer_digits": 1,
    "minimum_fraction_digits": 0,
    "maximum_fraction_digits": 3,
}


def _integer_pattern(minimum_digits: int, use_grouping: bool) -> str:
    """Integer part of a decimal pattern.

    Example:
        >>> _integer_pattern(1, True)
        '#,##0'
        >>> _integer_pattern(2, True)
        '#,#00'
        >>> _integer_pattern(5, True)
        '00,000'
        >>> _integer_pattern(3, False)
        '000'
    """
    zeros = "0" * minimum_digits
    if not use_grouping:
        return zeros
    padded = "#" * max(0, 4 - minimum_digits) + zeros
    return f"{padded[:-3]},{padded[-3:]}"


class NumberFormatter:
    """Number formatter bound to configuration strings and options.

    Examples:
        >>> NumberFormatter(("en-us",)).format(1234.5)
        '1,234.5'
        >>> NumberFormatter(("en-us",), {"minimum_integer_digits": 2}).format(5)
        '05'
        >>> NumberFormatter(("de-de",), {"maximum_fraction_digits": 0}).format(2.5)
        '3'
    """

    __slots__ = ("_options", "_pattern", "_resolved")

    def __init__(
        self,
        config_strings: tuple[str, ...],
        options: NumberOptions | Mapping[str, object] | None = None,
    ) -> None:
        merged = dict(_DEFAULTS)
        for name, value in (options or {}).items():
            if name not in _DEFAULTS:
                msg = f"Unknown number option '{name}'"
                raise InvalidOptionError(msg)
            merged[name] = value  # type: ignore[literal-required]

        min_int = int(merged["minimum_integer_digits"])  # type: ignore[call-overload]
        min_frac = int(merged["minimum_fraction_digits"])  # type: ignore[call-overload]
        max_frac = int(merged["maximum_fraction_digits"])  # type: ignore[call-overload]
        if min_int < 1:
            msg = f"minimum_integer_digits must be at least 1, got {min_int}"
            raise InvalidOptionError(msg)
        if min_frac < 0 or max_frac < 0:
            msg = "fraction digit options must not be negative"
            raise InvalidOptionError(msg)
        # Intl raises max to min when only the minimum is raised.
        max_frac = max(max_frac, min_frac)
        merged["maximum_fraction_digits"] = max_frac

        self._resolved: ResolvedLocale = resolve_locale(tuple(config_strings))
        self._options = merged

        integer_part = _integer_pattern(min_int, bool(merged["use_grouping"]))
        if max_frac == 0:
            self._pattern = integer_part
        else:
            self._pattern = f"{integer_part}.{'0' * min_frac}{'#' * (max_frac - min_frac)}"

    @property
    def pattern(self) -> str:
        """CLDR decimal pattern this formatter applies."""
        return self._pattern

    def resolved_options(self) -> dict[str, object]:
        return {
            "locale": self._resolved.locale_code.replace("_", "-"),
            "numbering_system": self._resolved.numbering or "latn",
            "pattern": self._pattern,
            **self._options,
        }

    def format(self, value: int | float | Decimal) -> str:
        """Format a number.

        Raises:
            ValueError: For values that are not finite numbers
        """
        try:
            number = value if isinstance(value, Decimal) else Decimal(str(value))
            if not number.is_finite():
                msg = f"Cannot format non-finite number {value!r}"
                raise ValueError(msg)
            max_frac = int(self._options["maximum_fraction_digits"])  # type: ignore[call-overload]
        except InvalidOperation as e:
            msg = f"Cannot format {value!r} as a number"
            raise ValueError(msg) from e

        # Babel quantizes again under the active context, so both steps need
        # room for every integer digit plus the kept fraction digits.
        integer_digits = max(number.adjusted(), 0) + 1
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, integer_digits + max_frac + 1)
            number = number.quantize(Decimal(1).scaleb(-max_frac), rounding=ROUND_HALF_UP)
            return str(
                babel_numbers.format_decimal(
                    number,
                    format=self._pattern,
                    locale=self._resolved.babel_locale,
                )
            )
