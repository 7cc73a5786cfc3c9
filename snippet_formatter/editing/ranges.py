"""
Integer ranges over text offsets, and translation between coordinate
spaces (snippet offsets <-> synthetic wrapper offsets).
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Iterable

from ..errors import InvalidArgument


@dataclass(frozen=True)
class Range:
    """An interval of integer offsets.

    Bounds default to closed-open (``[start, end)``), which is the only
    form the rest of the package works with.  Other bound types exist so
    callers holding inclusive positions can hand them over unchanged;
    :meth:`canonical` turns any of them into closed-open form.
    """
    start: int
    end: int
    start_closed: bool = True
    end_closed: bool = False

    def __post_init__(self) -> None:
        lower, upper = self._discrete_bounds()
        if lower > upper:
            raise InvalidArgument(f"Invalid range: {self!r}")

    @classmethod
    def closed_open(cls, start: int, end: int) -> "Range":
        return cls(start, end)

    @classmethod
    def closed(cls, start: int, end: int) -> "Range":
        return cls(start, end, True, True)

    @classmethod
    def from_offset(cls, offset: int, length: int) -> "Range":
        """Build ``[offset, offset + length)`` from an editor region."""
        return cls(offset, offset + length)

    def _discrete_bounds(self) -> tuple[int, int]:
        lower = self.start if self.start_closed else self.start + 1
        upper = self.end + 1 if self.end_closed else self.end
        return lower, upper

    def canonical(self) -> "Range":
        """Return the equivalent closed-open range."""
        if self.start_closed and not self.end_closed:
            return self
        lower, upper = self._discrete_bounds()
        return Range(lower, upper)

    @property
    def is_empty(self) -> bool:
        lower, upper = self._discrete_bounds()
        return lower == upper

    def __len__(self) -> int:
        lower, upper = self._discrete_bounds()
        return upper - lower

    def encloses(self, other: "Range") -> bool:
        a = self.canonical()
        b = other.canonical()
        return a.start <= b.start and b.end <= a.end


def shift(rng: Range, offset: int) -> Range:
    """Move ``rng`` by ``offset``; the result is always closed-open.

    No bounds checking: a negative result means the range lies before
    the anchor it was translated against.
    """
    rng = rng.canonical()
    return Range(rng.start + offset, rng.end + offset)


def shift_all(ranges: Iterable[Range], offset: int) -> list[Range]:
    """Apply :func:`shift` to every range, preserving order."""
    return [shift(r, offset) for r in ranges]


class RangeSet:
    """A set of offsets stored as disjoint, non-adjacent closed-open ranges.

    Connected ranges (overlapping or touching) are coalesced on
    :meth:`add`, so :meth:`encloses` answers against their union.  Empty
    ranges are ignored.
    """

    def __init__(self, ranges: Iterable[Range] = ()) -> None:
        self._starts: list[int] = []
        self._ranges: list[Range] = []
        for rng in ranges:
            self.add(rng)

    def add(self, rng: Range) -> None:
        rng = rng.canonical()
        if rng.is_empty:
            return
        start, end = rng.start, rng.end
        # First stored range that could connect: the one before the
        # insertion point may reach up to ``start``.
        idx = bisect.bisect_left(self._starts, start)
        if idx > 0 and self._ranges[idx - 1].end >= start:
            idx -= 1
        last = idx
        while last < len(self._ranges) and self._ranges[last].start <= end:
            start = min(start, self._ranges[last].start)
            end = max(end, self._ranges[last].end)
            last += 1
        self._ranges[idx:last] = [Range(start, end)]
        self._starts[idx:last] = [start]

    def encloses(self, rng: Range) -> bool:
        """True when ``rng`` lies entirely inside one coalesced range."""
        rng = rng.canonical()
        idx = bisect.bisect_right(self._starts, rng.start) - 1
        return idx >= 0 and self._ranges[idx].encloses(rng)

    def as_ranges(self) -> list[Range]:
        return list(self._ranges)

    def __len__(self) -> int:
        return len(self._ranges)

    def __iter__(self):
        return iter(self._ranges)
