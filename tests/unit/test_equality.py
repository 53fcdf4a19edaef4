"""Tests for vouch.assertions.equality module."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum
from fractions import Fraction

import pytest

from vouch.assertions.equality import deep_equal


@dataclass
class Point:
    x: int
    y: int | None = None


class Color(Enum):
    RED = 1
    BLUE = 2


class TestScalars:
    @pytest.mark.parametrize("value", [0, 1, -3.5, "hello", "", b"raw", None, True, False])
    def test_scalar_equals_itself(self, value):
        assert deep_equal(value, value)

    def test_distinct_scalars(self):
        assert not deep_equal(1, 2)
        assert not deep_equal("world", "hello")

    def test_int_and_float_compare_by_value(self):
        assert deep_equal(1, 1.0)

    def test_bool_is_not_a_number(self):
        assert not deep_equal(1, True)
        assert not deep_equal(False, 0)

    def test_same_nan_object_is_equal(self):
        nan = float("nan")
        assert deep_equal(nan, nan)

    def test_none_is_not_a_record(self):
        assert not deep_equal(None, {})
        assert not deep_equal({}, None)


class TestOtherValues:
    def test_value_types_compare_with_their_own_equality(self):
        assert deep_equal(Decimal("1.5"), Decimal("1.5"))
        assert not deep_equal(Decimal("1.5"), Decimal("2.5"))
        assert deep_equal(Fraction(1, 3), Fraction(2, 6))
        assert deep_equal(Decimal("1.5"), 1.5)

    def test_sets(self):
        assert deep_equal({1, 2}, {2, 1})
        assert deep_equal(frozenset({1, 2}), {1, 2})
        assert not deep_equal({1, 2}, {1, 2, 3})
        assert not deep_equal({1, 2}, [1, 2])

    def test_enums(self):
        assert deep_equal(Color.RED, Color(1))
        assert not deep_equal(Color.RED, Color.BLUE)
        assert not deep_equal(Color.RED, 1)

    def test_bool_stays_strict(self):
        assert not deep_equal(True, Decimal(1))

    def test_objects_without_equality_compare_by_identity(self):
        first, second = object(), object()
        assert deep_equal(first, first)
        assert not deep_equal(first, second)


class TestSequences:
    def test_equal_lists_with_different_identity(self):
        assert deep_equal([1, 2, 3], [1, 2, 3])

    def test_length_mismatch(self):
        assert not deep_equal([1, 2], [1, 2, 3])
        assert not deep_equal([1, 2, 3], [1, 2])

    def test_list_and_tuple_are_both_sequences(self):
        assert deep_equal([1, 2, 3], (1, 2, 3))

    def test_nested(self):
        assert deep_equal([1, [2, {"a": 3}]], [1, [2, {"a": 3}]])
        assert not deep_equal([1, [2, {"a": 3}]], [1, [2, {"a": 4}]])

    def test_sequence_vs_non_sequence(self):
        assert not deep_equal([1], 1)
        assert not deep_equal("abc", ["a", "b", "c"])


class TestInstants:
    def test_same_instant(self):
        assert deep_equal(datetime(2000, 2, 1), datetime(2000, 2, 1))

    def test_different_instant(self):
        assert not deep_equal(datetime(2000, 2, 2), datetime(2000, 2, 1))

    def test_aware_datetimes_compare_by_instant(self):
        utc = datetime(2000, 1, 1, 12, tzinfo=timezone.utc)
        plus_two = datetime(2000, 1, 1, 14, tzinfo=timezone(timedelta(hours=2)))
        assert deep_equal(utc, plus_two)

    def test_naive_and_aware_are_never_equal(self):
        assert not deep_equal(datetime(2000, 1, 1), datetime(2000, 1, 1, tzinfo=timezone.utc))

    def test_date_is_not_datetime(self):
        assert not deep_equal(date(2000, 1, 1), datetime(2000, 1, 1))


class TestRecords:
    def test_extra_keys_in_expected_are_ignored(self):
        assert deep_equal({"hello": "World"}, {"hello": "World", "hola": "Mundo"})

    def test_none_matches_absent_key(self):
        assert deep_equal({"hello": "World", "hola": None}, {"hello": "World"})

    def test_subset_is_one_directional(self):
        assert not deep_equal({"hello": "World", "hola": "Mundo"}, {"hello": "World"})

    def test_value_mismatch(self):
        assert not deep_equal({"hello": "Mundo"}, {"hello": "World"})

    def test_dataclass_records(self):
        assert deep_equal(Point(1, 2), Point(1, 2))
        assert deep_equal(Point(1), {"x": 1})
        assert not deep_equal(Point(1), {"x": 1, "y": 5})
        assert not deep_equal(Point(1, 2), Point(1, 3))

    def test_non_string_keys_against_dataclass(self):
        assert not deep_equal({1: 2}, Point(1))
        assert deep_equal(Point(1, 2), {"x": 1, "y": 2, 3: "extra"})

    def test_record_vs_sequence(self):
        assert not deep_equal({"0": 1}, [1])
