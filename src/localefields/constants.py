"""Shared constants for localefields.

Centralizes defaults and sampling anchors used across the engine and runtime
packages. Placing constants here avoids circular imports.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE_CODE",
    "FALLBACK_BABEL_LOCALE",
    # Sampler anchors
    "SAMPLE_YEAR",
    "WEEKDAY_ANCHOR_MONTH",
    "WEEKDAY_ANCHOR_DAY",
    "MERIDIEM_SAMPLE_HOURS",
    # Length tokens
    "MONTH_LENGTHS",
    "WEEKDAY_LENGTHS",
    "MERIDIEM_LENGTHS",
    "ERA_LENGTHS",
    # Contexts
    "FORMAT_CONTEXT",
    "STANDALONE_CONTEXT",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Code used by Locale.create() when no code is given.
DEFAULT_LOCALE_CODE: str = "en-us"

# Babel locale used by the engine when none of the configured tags resolve.
FALLBACK_BABEL_LOCALE: str = "en_US"

# ============================================================================
# SAMPLER ANCHORS
# ============================================================================
#
# 2016-11-14 is a Monday, so weekday sample i falls on datetime.weekday() == i.
# Days 14..20 stay inside November; months are sampled on day 1 of 2016.

SAMPLE_YEAR: int = 2016
WEEKDAY_ANCHOR_MONTH: int = 11
WEEKDAY_ANCHOR_DAY: int = 14

# AM sample first, PM sample second.
MERIDIEM_SAMPLE_HOURS: tuple[int, int] = (9, 19)

# ============================================================================
# LENGTH TOKENS
# ============================================================================

MONTH_LENGTHS: frozenset[str] = frozenset({"narrow", "short", "long", "numeric", "2-digit"})
WEEKDAY_LENGTHS: frozenset[str] = frozenset({"narrow", "short", "long"})
MERIDIEM_LENGTHS: frozenset[str] = frozenset({"narrow", "short", "long"})
ERA_LENGTHS: frozenset[str] = frozenset({"narrow", "short", "long"})

# ============================================================================
# CONTEXTS
# ============================================================================

FORMAT_CONTEXT: str = "format"
STANDALONE_CONTEXT: str = "standalone"
