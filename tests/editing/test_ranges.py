"""Tests for ranges, range translation and range sets."""

import pytest

from snippet_formatter.editing.ranges import Range, RangeSet, shift, shift_all
from snippet_formatter.errors import InvalidArgument


class TestRange:
    def test_closed_open_is_canonical(self):
        rng = Range(2, 5)
        assert rng.canonical() is rng
        assert len(rng) == 3

    def test_closed_range_canonicalizes(self):
        assert Range.closed(2, 4).canonical() == Range(2, 5)

    def test_open_lower_bound_canonicalizes(self):
        assert Range(2, 4, start_closed=False).canonical() == Range(3, 4)

    def test_from_offset(self):
        assert Range.from_offset(10, 4) == Range(10, 14)

    def test_empty_range(self):
        assert Range(3, 3).is_empty
        assert len(Range(3, 3)) == 0

    def test_reversed_bounds_rejected(self):
        with pytest.raises(InvalidArgument):
            Range(5, 2)

    def test_negative_length_rejected(self):
        with pytest.raises(InvalidArgument):
            Range.from_offset(4, -1)

    def test_encloses(self):
        outer = Range(0, 10)
        assert outer.encloses(Range(2, 8))
        assert outer.encloses(Range(0, 10))
        assert outer.encloses(Range(10, 10))
        assert not outer.encloses(Range(8, 11))


class TestShift:
    def test_shift_adds_offset(self):
        assert shift(Range(1, 3), 10) == Range(11, 13)

    def test_shift_canonicalizes(self):
        assert shift(Range.closed(1, 3), 10) == Range(11, 14)

    def test_negative_offset_allowed(self):
        assert shift(Range(1, 3), -5) == Range(-4, -2)

    def test_shift_all_preserves_order(self):
        ranges = [Range(5, 6), Range(0, 2), Range(3, 3)]
        assert shift_all(ranges, 4) == [Range(9, 10), Range(4, 6), Range(7, 7)]


class TestRangeSet:
    def test_overlapping_ranges_coalesce(self):
        rs = RangeSet([Range(0, 4), Range(2, 8)])
        assert rs.as_ranges() == [Range(0, 8)]

    def test_adjacent_ranges_coalesce(self):
        rs = RangeSet([Range(0, 2), Range(2, 5)])
        assert rs.as_ranges() == [Range(0, 5)]
        assert rs.encloses(Range(1, 3))

    def test_disjoint_ranges_stay_apart(self):
        rs = RangeSet([Range(6, 8), Range(0, 2)])
        assert rs.as_ranges() == [Range(0, 2), Range(6, 8)]
        assert not rs.encloses(Range(1, 7))

    def test_range_bridging_several_entries(self):
        rs = RangeSet([Range(0, 1), Range(3, 4), Range(6, 7)])
        rs.add(Range(1, 6))
        assert rs.as_ranges() == [Range(0, 7)]

    def test_empty_ranges_ignored(self):
        rs = RangeSet([Range(3, 3)])
        assert len(rs) == 0
        assert not rs.encloses(Range(3, 3))

    def test_encloses_empty_range_at_boundary(self):
        rs = RangeSet([Range(0, 5)])
        assert rs.encloses(Range(0, 0))
        assert rs.encloses(Range(5, 5))
        assert not rs.encloses(Range(6, 6))

    def test_partial_overlap_not_enclosed(self):
        rs = RangeSet([Range(2, 6)])
        assert not rs.encloses(Range(1, 3))
        assert not rs.encloses(Range(5, 7))
