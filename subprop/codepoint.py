"""
Unicode code points and their ranges.

This module defines subprop's representation for code points, ranges of code
points, and sets of ranges: `CodePoint`, `CodePointRange`, and `RangeSet`.

A `CodePoint` is an `int` restricted to the code space, i.e., 0 through
0x10FFFF. Its `repr()` uses Unicode `U+` notation, whereas `str()` shows the
actual character.

A `CodePointRange` is a closed interval of code points, inclusive of both
`start` and `stop`. A singleton range has `start == stop`. A range `can_merge()`
and `merge()` with another range or a code point if the union of all their code
points is a single, continuous range, i.e., if they overlap or abut.

A `RangeSet` is an immutable tuple of ranges that are sorted in ascending
order, pairwise disjoint, and non-adjacent. It is the result of `rangify()`,
which collapses an arbitrary collection of code points into the minimal number
of ranges covering exactly those code points. Since a range set is a tuple, it
can be used as a sequence of ranges as well as a single, hashable value.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, ClassVar, Self, SupportsIndex


class CodePoint(int):

    MAX: 'ClassVar[CodePoint]'

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> Self:
        value = super().__new__(cls, *args, **kwargs)
        if not (0 <= value <= 0x10_FFFF):
            raise ValueError(f'{value:04x} is out of range')
        return value

    @classmethod
    def of(cls, value: str | SupportsIndex) -> Self:
        """Convert a single character or an integer into a code point."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f'"{value}" is not a single character')
            return cls(ord(value))
        return cls(value)

    def to_range(self) -> 'CodePointRange':
        return CodePointRange(self, self)

    def __repr__(self) -> str:
        return f'U+{self:04X}'

    def __str__(self) -> str:
        return chr(self)


# --------------------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class CodePointRange:

    start: CodePoint
    stop: CodePoint

    def __post_init__(self) -> None:
        if self.stop < self.start:
            raise ValueError(f'range from {self.start!r} to {self.stop!r} is empty')

    @classmethod
    def of(
        cls,
        start: str | SupportsIndex,
        stop: None | str | SupportsIndex = None,
    ) -> 'CodePointRange':
        first = CodePoint.of(start)
        return cls(first, first if stop is None else CodePoint.of(stop))

    def __contains__(self, codepoint: Any) -> bool:
        try:
            return self.start <= CodePoint.of(codepoint) <= self.stop
        except (TypeError, ValueError):
            return False

    def __len__(self) -> int:
        return self.stop - self.start + 1

    def to_range(self) -> 'CodePointRange':
        return self

    def can_merge(self, other: 'CodePoint | CodePointRange') -> bool:
        """Determine whether the union with the other is one continuous range."""
        other = other.to_range()
        return other.start <= self.stop + 1 and self.start <= other.stop + 1

    def merge(self, other: 'CodePoint | CodePointRange') -> 'CodePointRange':
        if not self.can_merge(other):
            raise ValueError(f'{self!r} neither overlaps nor abuts {other!r}')
        other = other.to_range()
        return CodePointRange(min(self.start, other.start), max(self.stop, other.stop))

    def is_singleton(self) -> bool:
        return self.start == self.stop

    def codepoints(self) -> Iterator[CodePoint]:
        for value in range(self.start, self.stop + 1):
            yield CodePoint(value)

    def __repr__(self) -> str:
        return f'{self.start!r}..{self.stop!r}'

    def __str__(self) -> str:
        return f'{self.start}..{self.stop}'


# --------------------------------------------------------------------------------------


class RangeSet(tuple[CodePointRange, ...]):
    """
    A minimal set of code point ranges. The ranges are sorted in ascending
    order and neither overlap nor abut. Use `rangify()` or `RangeSet.of()` to
    create range sets, since the constructor does not normalize its input.
    """

    __slots__ = ()

    @classmethod
    def of(cls, *ranges: CodePointRange) -> 'RangeSet':
        """Normalize possibly unordered, overlapping, or adjacent ranges."""
        result: list[CodePointRange] = []
        accumulator: None | CodePointRange = None

        for range in sorted(ranges, key=lambda r: r.start):
            if accumulator is not None:
                if accumulator.can_merge(range):
                    accumulator = accumulator.merge(range)
                    continue
                result.append(accumulator)
            accumulator = range

        if accumulator is not None:
            result.append(accumulator)
        return cls(result)

    def covers(self, codepoint: str | SupportsIndex) -> bool:
        """Determine whether one of the ranges includes the code point."""
        return any(codepoint in range for range in self)

    def codepoints(self) -> Iterator[CodePoint]:
        for range in self:
            yield from range.codepoints()

    def __repr__(self) -> str:
        return f'RangeSet({", ".join(repr(r) for r in self)})'


def rangify(codepoints: Iterable[str | SupportsIndex]) -> RangeSet:
    """
    Collapse the code points into the minimal set of ranges covering exactly
    those code points. The input may be in any order and contain duplicates.
    """
    ranges: list[CodePointRange] = []
    accumulator: None | CodePointRange = None

    # Since code points are distinct and sorted, they merge only if adjacent.
    for codepoint in sorted({CodePoint.of(cp) for cp in codepoints}):
        if accumulator is not None:
            if accumulator.can_merge(codepoint):
                accumulator = accumulator.merge(codepoint)
                continue
            ranges.append(accumulator)
        accumulator = codepoint.to_range()

    if accumulator is not None:
        ranges.append(accumulator)
    return RangeSet(ranges)


# --------------------------------------------------------------------------------------

CodePoint.MAX = CodePoint(0x10_FFFF)
