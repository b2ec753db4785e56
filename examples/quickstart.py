"""localefields Quick Start - month, weekday and number formatting by locale.

Demonstrates:
1. Month names in standalone and format context
2. Weekday names (Monday first)
3. Locale identity caching and clone()
4. Number formatters with padding and rounding
5. Field extraction from floating and zoned instants

Python 3.13+.
"""

from __future__ import annotations

from localefields import ExtractionError, Instant, Locale, UnsupportedFieldError


def example_1_months() -> None:
    """Example 1: Month names; Russian shows the context difference."""
    print("=" * 60)
    print("Example 1: Month names")
    print("=" * 60)

    for code in ("en-US", "fr", "ru"):
        loc = Locale.create(code)
        print(f"{code:6} standalone: {', '.join(loc.months('long')[:3])}")
        print(f"{code:6} in a date:  {', '.join(loc.months('long', use_format_context=True)[:3])}")
    print()


def example_2_weekdays() -> None:
    """Example 2: Weekday names, index 0 = Monday."""
    print("=" * 60)
    print("Example 2: Weekday names")
    print("=" * 60)

    for code in ("en-US", "de-DE", "ja"):
        print(f"{code:6} {' '.join(Locale.create(code).weekdays('short'))}")
    print(f"en-US meridiems: {Locale.create('en-US').meridiems()}")
    try:
        Locale.create("en-US").eras("long")
    except UnsupportedFieldError as e:
        print(f"eras: {e}")
    print()


def example_3_identity() -> None:
    """Example 3: One Locale per (code, numbering, calendar)."""
    print("=" * 60)
    print("Example 3: Identity caching")
    print("=" * 60)

    th = Locale.create("th-TH")
    print(f"same instance for th_th: {th is Locale.create('th_th')}")
    buddhist = th.clone(calendar="buddhist")
    print(f"clone config strings:   {buddhist.config_strings}")
    print(f"cached locales:         {Locale.cache_size()}")
    print()


def example_4_numbers() -> None:
    """Example 4: Number formatters (no grouping unless asked)."""
    print("=" * 60)
    print("Example 4: Numbers")
    print("=" * 60)

    loc = Locale.create("de-DE")
    print(f"pad_to=2:   {loc.number_formatter(pad_to=2).format(5)}")
    print(f"round=True: {loc.number_formatter(round=True).format(5.7)}")
    grouped = loc.number_formatter(options={"use_grouping": True})
    print(f"grouped:    {grouped.format(1234567.891)}")
    print()


def example_5_extraction() -> None:
    """Example 5: Pulling one field out of a formatted date."""
    print("=" * 60)
    print("Example 5: Extraction")
    print("=" * 60)

    loc = Locale.create("en-US")
    floating = Instant.from_fields(2016, 11, 14, 23, 30)
    zoned = Instant.from_fields(2016, 11, 14, 23, 30, zone="Asia/Tokyo")
    print(f"floating weekday: {loc.extract(floating, {'weekday': 'long'}, 'weekday')}")
    print(f"zoned hour:       {loc.extract(zoned, {'hour': 'numeric'}, 'hour')}")
    try:
        loc.extract(floating, {"month": "long"}, "weekday")
    except ExtractionError as e:
        print(f"mismatch:         {e}")
    print()


if __name__ == "__main__":
    example_1_months()
    example_2_weekdays()
    example_3_identity()
    example_4_numbers()
    example_5_extraction()
