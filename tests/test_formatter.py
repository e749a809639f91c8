"""Tests for component extraction and text rendering.

Tests cover:
- Non-zero filtering and year -> nanosecond ordering
- Seconds/milliseconds merge switch
- Short and long text per component variant
- Pluralization boundary
- Joining into short and long strings
"""

import pytest

from millisecond import (
    Days,
    Hours,
    Micros,
    Millis,
    Millisecond,
    Minutes,
    Nanos,
    Seconds,
    SecsAndMillis,
    Years,
    components_of,
    long_string,
    long_text,
    short_string,
    short_text,
    with_pluralization,
)

EVERY_FIELD = Millisecond(
    years=1, days=2, hours=3, minutes=4, seconds=5, millis=6, micros=7, nanos=8
)


class TestComponentsOf:
    """Test extraction of the ordered non-zero component list."""

    def test_empty_record(self) -> None:
        """Test an all-zero record has no components."""
        assert components_of(Millisecond()) == []

    def test_zero_fields_omitted(self) -> None:
        """Test zero fields in the middle are skipped."""
        record = Millisecond(years=1, minutes=10, nanos=3)
        assert components_of(record) == [Years(1), Minutes(10), Nanos(3)]

    def test_order_merged(self) -> None:
        """Test every field in order with seconds and millis merged."""
        assert components_of(EVERY_FIELD) == [
            Years(1),
            Days(2),
            Hours(3),
            Minutes(4),
            SecsAndMillis(5, 6),
            Micros(7),
            Nanos(8),
        ]

    def test_order_unmerged(self) -> None:
        """Test every field in order with the merge disabled."""
        assert components_of(EVERY_FIELD, merge_millis=False) == [
            Years(1),
            Days(2),
            Hours(3),
            Minutes(4),
            Seconds(5),
            Millis(6),
            Micros(7),
            Nanos(8),
        ]

    def test_merge_toggle(self) -> None:
        """Test 1s 400ms with merge on and off."""
        record = Millisecond(seconds=1, millis=400)
        assert components_of(record, True) == [SecsAndMillis(1, 400)]
        assert components_of(record, False) == [Seconds(1), Millis(400)]

    def test_merge_is_default(self) -> None:
        """Test the merge is enabled without an argument."""
        record = Millisecond(seconds=1, millis=400)
        assert components_of(record) == record.components() == [SecsAndMillis(1, 400)]

    def test_millis_without_seconds_never_merged(self) -> None:
        """Test millis alone stays a Millis component in both modes."""
        record = Millisecond(minutes=1, millis=400)
        assert components_of(record, True) == [Minutes(1), Millis(400)]
        assert components_of(record, False) == [Minutes(1), Millis(400)]

    def test_seconds_without_millis_never_merged(self) -> None:
        """Test seconds alone stays a Seconds component."""
        assert components_of(Millisecond(seconds=48)) == [Seconds(48)]

    def test_unnormalized_record_rendered_as_is(self) -> None:
        """Test fields over their carry bound are not renormalized."""
        assert components_of(Millisecond(days=365)) == [Days(365)]


class TestComponentText:
    """Test rendering of individual components."""

    @pytest.mark.parametrize(
        "component,short,long",
        [
            (Years(1), "1y", "1 year"),
            (Years(2), "2y", "2 years"),
            (Days(17), "17d", "17 days"),
            (Hours(1), "1h", "1 hour"),
            (Minutes(10), "10m", "10 minutes"),
            (Seconds(1), "1s", "1 second"),
            (Seconds(48), "48s", "48 seconds"),
            (Millis(400), "400ms", "400 milliseconds"),
            (Micros(800), "800µs", "800 microseconds"),
            (Nanos(1), "1ns", "1 nanosecond"),
            (SecsAndMillis(1, 400), "1.400s", "1.400 seconds"),
            (SecsAndMillis(10, 123), "10.123s", "10.123 seconds"),
        ],
    )
    def test_short_and_long(self, component, short: str, long: str) -> None:
        """Test short and long text of each variant."""
        assert short_text(component) == short
        assert long_text(component) == long
        assert str(component) == short

    def test_secs_and_millis_not_zero_padded(self) -> None:
        """Test the millisecond magnitude is printed as-is."""
        assert short_text(SecsAndMillis(1, 5)) == "1.5s"
        assert short_text(SecsAndMillis(2, 50)) == "2.50s"

    def test_secs_and_millis_long_always_plural(self) -> None:
        """Test the long form says seconds even for one second."""
        assert long_text(SecsAndMillis(1, 1)) == "1.1 seconds"

    def test_variants_compare_by_type(self) -> None:
        """Test equal magnitudes of different units are not equal."""
        assert Years(1) != Days(1)
        assert Seconds(1) == Seconds(1)
        assert SecsAndMillis(1, 400) != SecsAndMillis(1, 40)


class TestPluralization:
    """Test singular/plural boundary."""

    @pytest.mark.parametrize(
        "value,expected",
        [(0, "0 hours"), (1, "1 hour"), (2, "2 hours"), (11, "11 hours"), (21, "21 hours")],
    )
    def test_singular_only_at_one(self, value: int, expected: str) -> None:
        """Test only exactly 1 uses the singular word."""
        assert with_pluralization(value, "hour") == expected


class TestStrings:
    """Test joining components into full strings."""

    def test_empty(self) -> None:
        """Test the zero record renders as an empty string."""
        assert short_string(Millisecond()) == ""
        assert long_string(Millisecond()) == ""

    def test_example_duration(self) -> None:
        """Test 33,023,448,000ms in both styles."""
        record = Millisecond.from_millis(33_023_448_000)
        assert short_string(record) == "1y 17d 5h 10m 48s"
        assert long_string(record) == "1 year 17 days 5 hours 10 minutes 48 seconds"
        assert str(record) == "1y 17d 5h 10m 48s"

    @pytest.mark.parametrize(
        "millis,merged,unmerged",
        [
            (10_123, "10.123s", "10s 123ms"),
            (1_000, "1s", "1s"),
            (119_999, "1m 59.999s", "1m 59s 999ms"),
            (999, "999ms", "999ms"),
        ],
    )
    def test_merge_switch(self, millis: int, merged: str, unmerged: str) -> None:
        """Test short strings with merge on and off."""
        record = Millisecond.from_millis(millis)
        assert short_string(record) == merged
        assert short_string(record, merge_millis=False) == unmerged
        assert record.to_short_string(merge_millis=False) == unmerged

    def test_long_merge_switch(self) -> None:
        """Test long strings with merge on and off."""
        record = Millisecond.from_millis(1_400)
        assert long_string(record) == "1.400 seconds"
        assert long_string(record, merge_millis=False) == "1 second 400 milliseconds"
        assert record.to_long_string(merge_millis=False) == "1 second 400 milliseconds"

    def test_every_field_long(self) -> None:
        """Test the long form of a record with every field set."""
        assert EVERY_FIELD.to_long_string(merge_millis=False) == (
            "1 year 2 days 3 hours 4 minutes 5 seconds 6 milliseconds "
            "7 microseconds 8 nanoseconds"
        )
        assert str(EVERY_FIELD) == "1y 2d 3h 4m 5.6s 7µs 8ns"

    def test_component_sequence(self) -> None:
        """Test strings can be built from an explicit component list."""
        parts = [Hours(1), Seconds(1), Nanos(2)]
        assert short_string(parts) == "1h 1s 2ns"
        assert long_string(parts) == "1 hour 1 second 2 nanoseconds"
        assert short_string(()) == ""

    def test_component_generator(self) -> None:
        """Test any iterable of components is accepted, not just lists."""
        parts = [Minutes(2), Seconds(1)]
        assert short_string(part for part in parts) == "2m 1s"
        assert long_string(iter(parts)) == "2 minutes 1 second"

    def test_single_component(self) -> None:
        """Test a lone component renders like a one-element list."""
        assert short_string(Micros(3)) == "3µs"

    def test_sub_second_only(self) -> None:
        """Test nanosecond input below one second."""
        assert str(Millisecond.from_nanos(1_800)) == "1µs 800ns"
