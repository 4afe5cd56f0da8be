import math
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import numpy as np
from typing_extensions import override

from flinterval.ranges import ClosedRange

T = TypeVar("T", bound="float | np.floating[Any]")


@dataclass(frozen=True, repr=False)
class Interval(Generic[T]):
    """A closed floating-point interval from ``a`` to ``b``.

    Unlike ``ClosedRange``, ``a`` may be greater than ``b``. Bounds are stored
    exactly as given; equality and hashing are order-sensitive, so
    ``Interval(0, 100) != Interval(100, 0)``.

    Any predicate or operation given a NaN bound returns an unspecified
    result without raising, since NaN compares false with everything.

    Example:
        >>> Interval(0, 100)
        Interval(0..100)
        >>> ivl[100:3.14].is_descending
        True
    """

    a: T
    b: T

    @classmethod
    def unit(cls, scalar_type: type[T] = float) -> "Interval[T]":
        """Return the unit interval ``0..1`` in the given scalar type."""
        return cls(scalar_type(0), scalar_type(1))

    @classmethod
    def from_range(cls, r: "ClosedRange[T]") -> "Interval[T]":
        """Construct an interval from an ordered range, keeping its order.

        Example:
            >>> Interval.from_range(ClosedRange(lower=10.5, upper=203.7))
            Interval(10.5..203.7)
        """
        return cls(r.lower, r.upper)

    def to_range(self) -> "ClosedRange[T]":
        return ClosedRange.from_interval(self)

    @property
    def is_ascending(self) -> bool:
        return self.a < self.b

    @property
    def is_descending(self) -> bool:
        return self.a > self.b

    @property
    def is_empty(self) -> bool:
        """True if both bounds are equal.

        A single-point interval subtends no space on the number line, so it
        counts as empty here even though a degenerate ``ClosedRange`` does not.
        """
        return self.a == self.b

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.a) and math.isfinite(self.b)

    @property
    def reversed(self) -> "Interval[T]":
        return Interval(self.b, self.a)

    @property
    def normalized(self) -> "Interval[T]":
        """This interval with ``a`` as the lesser bound.

        Example:
            >>> Interval(100, 0).normalized
            Interval(0..100)
        """
        if self.is_ascending or self.is_empty:
            return self
        return self.reversed

    @property
    def min(self) -> T:
        return min(self.a, self.b)

    @property
    def max(self) -> T:
        return max(self.a, self.b)

    @property
    def extent(self) -> T:
        """Signed distance from ``a`` to ``b``; negative when descending."""
        return self.b - self.a

    def contains(self, item: "T | Interval[T]") -> bool:
        """Test containment of a value or of another interval.

        Orientation is ignored on both sides: ``Interval(0, 100)`` contains
        ``Interval(10, 1)`` and ``Interval(100, 0)`` contains ``50``.
        """
        if isinstance(item, Interval):
            return self.min <= item.min and item.max <= self.max
        return self.min <= item <= self.max

    def intersects(self, other: "Interval[T]") -> bool:
        """True if the intervals overlap, including touching at one point."""
        i1 = self.normalized
        i2 = other.normalized

        is_disjoint = i2.b < i1.a or i1.b < i2.a
        return not is_disjoint

    def intersection(self, other: "Interval[T]") -> "Interval[T] | None":
        """Return the overlap of two intervals, normalized, or None.

        Example:
            >>> Interval(60, 0).intersection(Interval(40, 100))
            Interval(40..60)
            >>> Interval(0, 30).intersection(Interval(50, 100)) is None
            True
        """
        i1 = self.normalized
        i2 = other.normalized

        is_disjoint = i2.b < i1.a or i1.b < i2.a
        if is_disjoint:
            return None

        return Interval(max(i1.a, i2.a), min(i1.b, i2.b))

    def union(self, other: "Interval[T]") -> "Interval[T]":
        """Return the ascending interval spanning both intervals.

        The intervals need not overlap; any gap between them is covered.
        """
        return Interval(min(self.min, other.min), max(self.max, other.max))

    def __contains__(self, item: "T | Interval[T]") -> bool:
        return self.contains(item)

    def __or__(self, other: "Interval[T]") -> "Interval[T]":
        if not isinstance(other, Interval):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: "Interval[T]") -> "Interval[T] | None":
        if not isinstance(other, Interval):
            return NotImplemented
        return self.intersection(other)

    @override
    def __str__(self) -> str:
        return f"{self.a}..{self.b}"

    @override
    def __repr__(self) -> str:
        return f"Interval({self.a}..{self.b})"


class _IntervalFormation:
    """Builds intervals with slice syntax: ``ivl[0:100]`` or ``ivl[100:0]``.

    Also callable as ``ivl(a, b)``. Unlike ``range`` or slicing a sequence,
    both bounds are required, the first may exceed the second, and no step is
    accepted.
    """

    def __call__(self, a: T, b: T) -> Interval[T]:
        return Interval(a, b)

    def __getitem__(self, item: slice) -> Interval[Any]:
        if not isinstance(item, slice):
            raise TypeError(
                f"Interval formation expects a slice with two bounds.\n"
                f"Got {type(item).__name__!r}: {item!r}\n"
                f"Examples:\n"
                f"  ivl[0:100]     # ascending\n"
                f"  ivl[100:3.14]  # descending"
            )
        if item.start is None or item.stop is None:
            raise TypeError(
                f"Interval formation requires both bounds, "
                f"got start={item.start}, stop={item.stop}.\n"
                f"Hint: intervals are closed and finite on both ends: ivl[0:1]"
            )
        if item.step is not None:
            raise TypeError(
                f"Interval formation does not accept a step, got {item.step!r}.\n"
                f"Hint: use ivl[a:b], not ivl[a:b:step]"
            )
        return Interval(item.start, item.stop)


ivl = _IntervalFormation()
