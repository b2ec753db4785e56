"""Tests for Locale: identity caching, field-name tables, formatter factories.

Python 3.13+.
"""

from __future__ import annotations

import threading
from datetime import UTC
from unittest.mock import patch

import pytest

from localefields.core.errors import ExtractionError, InvalidOptionError, UnsupportedFieldError
from localefields.engine.datetime_format import DateTimeFormatter
from localefields.instant import Instant
from localefields.runtime.locale import Locale

EN_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)  # fmt: skip
FR_MONTHS = (
    "janvier", "février", "mars", "avril", "mai", "juin",
    "juillet", "août", "septembre", "octobre", "novembre", "décembre",
)  # fmt: skip


# ============================================================================
# Identity and cache
# ============================================================================


class TestLocaleIdentity:
    """Locale.create() returns one instance per normalized triple."""

    def test_same_triple_same_instance(self) -> None:
        assert Locale.create("fr", "latn", "gregory") is Locale.create("fr", "latn", "gregory")

    def test_spelling_variants_share_instance(self) -> None:
        assert Locale.create("en-US") is Locale.create("en_us")

    def test_one_element_sequence_is_its_tag(self) -> None:
        assert Locale.create(["de-at"]) is Locale.create("de-AT")

    def test_falsy_code_becomes_default(self) -> None:
        loc = Locale.create(None)
        assert loc.code == "en-us"
        assert Locale.create("") is loc

    def test_falsy_overrides_become_none(self) -> None:
        loc = Locale.create("fr", "", "")
        assert loc.numbering is None
        assert loc.calendar is None
        assert loc is Locale.create("fr")

    def test_different_overrides_different_instances(self) -> None:
        assert Locale.create("th") is not Locale.create("th", calendar="buddhist")

    def test_direct_construction_with_list_is_hashable(self) -> None:
        loc = Locale(["fr", "de"])
        assert loc.code == ("fr", "de")
        assert hash(loc) == hash(Locale(("fr", "de")))

    def test_fallback_sequence_kept(self) -> None:
        loc = Locale.create(["de-CH", "de"])
        assert loc.code == ("de-ch", "de")
        assert loc.config_strings == ("de-ch", "de")

    def test_config_strings_carry_overrides(self) -> None:
        loc = Locale.create("th", numbering="thai", calendar="buddhist")
        assert loc.config_strings == ("th-u-ca-buddhist-nu-thai",)

    def test_from_options(self) -> None:
        loc = Locale.from_options({"code": "ja", "calendar": "japanese"})
        assert loc is Locale.create("ja", None, "japanese")

    def test_from_options_empty_mapping(self) -> None:
        assert Locale.from_options({}) is Locale.create()

    def test_cache_management(self) -> None:
        Locale.create("en-us")
        Locale.create("fr")
        assert Locale.cache_size() == 2
        info = Locale.cache_info()
        assert info["keys"] == (("en-us", None, None), ("fr", None, None))
        Locale.clear_cache()
        assert Locale.cache_size() == 0

    def test_failed_construction_not_cached(self) -> None:
        with (
            patch(
                "localefields.runtime.locale.build_config_strings",
                side_effect=RuntimeError("boom"),
            ),
            pytest.raises(RuntimeError),
        ):
            Locale.create("it")
        assert Locale.cache_size() == 0

    def test_concurrent_create_returns_same_instance(self) -> None:
        results: list[Locale] = []
        barrier = threading.Barrier(8)

        def create() -> None:
            barrier.wait()
            results.append(Locale.create("pl"))

        threads = [threading.Thread(target=create) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert all(loc is results[0] for loc in results)


class TestClone:
    def test_clone_overrides_one_field(self) -> None:
        base = Locale.create("fr", numbering="latn")
        cloned = base.clone(calendar="buddhist")
        assert cloned is Locale.create("fr", "latn", "buddhist")
        assert base.calendar is None

    def test_clone_without_overrides_is_self(self) -> None:
        base = Locale.create("fr")
        assert base.clone() is base

    def test_clone_none_clears_override(self) -> None:
        base = Locale.create("ar", numbering="arab")
        assert base.clone(numbering=None) is Locale.create("ar")

    def test_clone_unknown_field(self) -> None:
        with pytest.raises(TypeError, match="unexpected field"):
            Locale.create("fr").clone(region="CA")


# ============================================================================
# Field-name tables
# ============================================================================


class TestMonths:
    def test_english_long(self) -> None:
        assert Locale.create("en-us").months("long") == EN_MONTHS

    def test_french_long(self) -> None:
        fr = Locale.create("fr").months("long")
        assert fr == FR_MONTHS
        assert fr != Locale.create("en-us").months("long")

    def test_numeric(self) -> None:
        assert Locale.create("en-us").months("numeric") == tuple(str(m) for m in range(1, 13))

    def test_two_digit(self) -> None:
        assert Locale.create("en-us").months("2-digit")[0] == "01"

    def test_short(self) -> None:
        assert Locale.create("en-us").months("short")[:3] == ("Jan", "Feb", "Mar")

    def test_cached_table_returned(self) -> None:
        loc = Locale.create("en-us")
        assert loc.months("long") is loc.months("long")

    def test_cache_hit_skips_engine(self) -> None:
        loc = Locale.create("en-us")
        with patch(
            "localefields.runtime.locale.DateTimeFormatter", wraps=DateTimeFormatter
        ) as spy:
            loc.months("long")
            assert spy.call_count == 12
            loc.months("long")
            assert spy.call_count == 12

    def test_contexts_cached_independently(self) -> None:
        loc = Locale.create("ru")
        standalone = loc.months("long")
        in_format = loc.months("long", use_format_context=True)
        assert standalone[0] == "январь"
        assert in_format[0] == "января"
        assert standalone is loc.months("long")
        assert in_format is loc.months("long", True)

    def test_context_keys_distinct_even_when_names_agree(self) -> None:
        loc = Locale.create("en-us")
        standalone = loc.months("long")
        in_format = loc.months("long", True)
        assert standalone == in_format
        assert standalone is not in_format

    def test_invalid_length(self) -> None:
        with (
            patch("localefields.runtime.locale.DateTimeFormatter") as engine,
            pytest.raises(InvalidOptionError, match="Invalid month length"),
        ):
            Locale.create("en-us").months("huge")
        engine.assert_not_called()

    def test_failure_not_cached(self) -> None:
        loc = Locale.create("en-us")
        with (
            patch.object(Locale, "extract", side_effect=ExtractionError("month", ())),
            pytest.raises(ExtractionError),
        ):
            loc.months("short")
        assert loc.months("short")[0] == "Jan"


class TestWeekdays:
    def test_english_short_monday_first(self) -> None:
        assert Locale.create("en-us").weekdays("short") == (
            "Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun",
        )  # fmt: skip

    def test_english_long_format_context(self) -> None:
        days = Locale.create("en-us").weekdays("long", use_format_context=True)
        assert days[0] == "Monday"
        assert days[6] == "Sunday"

    def test_french_long(self) -> None:
        assert Locale.create("fr").weekdays("long")[:2] == ("lundi", "mardi")

    def test_seven_distinct_names(self) -> None:
        days = Locale.create("de").weekdays("long")
        assert len(days) == 7
        assert len(set(days)) == 7

    def test_numeric_length_rejected(self) -> None:
        with pytest.raises(InvalidOptionError):
            Locale.create("en-us").weekdays("numeric")


class TestMeridiemsAndEras:
    def test_english_meridiems(self) -> None:
        assert Locale.create("en-us").meridiems("short") == ("AM", "PM")

    def test_chinese_meridiems_are_am_pm_not_times_of_day(self) -> None:
        assert Locale.create("zh-tw").meridiems("short") == ("上午", "下午")

    def test_japanese_meridiems(self) -> None:
        assert Locale.create("ja").meridiems("short") == ("午前", "午後")

    def test_meridiems_cached(self) -> None:
        loc = Locale.create("en-us")
        assert loc.meridiems() is loc.meridiems("short")

    def test_eras_unsupported(self) -> None:
        with pytest.raises(UnsupportedFieldError):
            Locale.create("en-us").eras("long")

    def test_unsupported_is_not_implemented_error(self) -> None:
        with pytest.raises(NotImplementedError):
            Locale.create("en-us").eras()


# ============================================================================
# Extraction and formatter construction
# ============================================================================


class TestExtract:
    def test_extracts_requested_part(self) -> None:
        inst = Instant.from_fields(2016, 3, 1)
        assert Locale.create("en-us").extract(inst, {"month": "long"}, "month") == "March"

    def test_missing_part_raises(self) -> None:
        inst = Instant.from_fields(2016, 3, 1)
        with pytest.raises(ExtractionError) as exc_info:
            Locale.create("en-us").extract(inst, {"month": "long"}, "weekday")
        assert exc_info.value.field == "weekday"
        assert "month" in exc_info.value.available

    def test_extraction_error_is_lookup_error(self) -> None:
        inst = Instant.from_fields(2016, 3, 1)
        with pytest.raises(LookupError):
            Locale.create("en-us").extract(inst, {"day": "numeric"}, "era")


class TestInstFormatter:
    def test_floating_instant_formatted_as_utc(self) -> None:
        inst = Instant.from_fields(2016, 11, 14, 23, 30)
        formatter, value = Locale.create("en-us").inst_formatter(inst, {"day": "numeric"})
        assert formatter.resolved_options()["time_zone"] == "UTC"
        assert value.tzinfo is UTC
        assert formatter.format(value) == "14"

    def test_zoned_instant_uses_zone_name(self) -> None:
        inst = Instant.from_fields(2016, 11, 14, 2, zone="Asia/Tokyo")
        formatter, value = Locale.create("en-us").inst_formatter(inst, {"day": "numeric"})
        assert formatter.resolved_options()["time_zone"] == "Asia/Tokyo"
        assert formatter.format(value) == "14"

    def test_instant_zone_overrides_caller_zone(self) -> None:
        inst = Instant.from_fields(2016, 11, 14, 2, zone="Europe/Riga")
        formatter, _ = Locale.create("en-us").inst_formatter(inst, {"time_zone": "UTC"})
        assert formatter.resolved_options()["time_zone"] == "Europe/Riga"

    def test_caller_options_not_mutated(self) -> None:
        options = {"day": "numeric"}
        Locale.create("en-us").inst_formatter(Instant.from_fields(2016, 1, 1), options)  # type: ignore[arg-type]
        assert options == {"day": "numeric"}


class TestNumberFormatter:
    def test_pad_to(self) -> None:
        assert Locale.create("en-us").number_formatter(pad_to=2).format(5) == "05"

    def test_round(self) -> None:
        assert Locale.create("en-us").number_formatter(round=True).format(5.7) == "6"

    def test_no_grouping_by_default(self) -> None:
        assert Locale.create("en-us").number_formatter().format(1234567) == "1234567"

    def test_grouping_overridable(self) -> None:
        fmt = Locale.create("en-us").number_formatter(options={"use_grouping": True})
        assert fmt.format(1234567) == "1,234,567"

    def test_round_wins_over_fraction_options(self) -> None:
        fmt = Locale.create("en-us").number_formatter(
            round=True, options={"minimum_fraction_digits": 2}
        )
        assert fmt.format(2.25) == "2"

    def test_fresh_formatter_per_call(self) -> None:
        loc = Locale.create("en-us")
        assert loc.number_formatter(pad_to=2) is not loc.number_formatter(pad_to=2)

    def test_locale_separators(self) -> None:
        fmt = Locale.create("de-de").number_formatter(options={"maximum_fraction_digits": 2})
        assert fmt.format(3.14159) == "3,14"
