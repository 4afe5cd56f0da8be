from functools import reduce
from typing import Any, TypeVar

import numpy as np

from flinterval.interval import Interval

T = TypeVar("T", bound="float | np.floating[Any]")


def union(*intervals: Interval[T]) -> Interval[T]:
    """Return the ascending interval spanning every argument (equivalent to chaining `|`).

    Gaps between the intervals are covered, so the result is the hull of the
    inputs rather than a set union.

    Example:
        >>> union(Interval(0, 10), Interval(40, 30), Interval(-5, 2))
        Interval(-5..40)
    """

    if not intervals:
        raise ValueError(
            f"union() requires at least one interval argument.\n"
            f"Example: union(Interval(0, 10), Interval(20, 30))"
        )

    def reducer(acc: Interval[T], nxt: Interval[T]) -> Interval[T]:
        return acc | nxt

    return reduce(reducer, intervals, intervals[0].normalized)


def intersection(*intervals: Interval[T]) -> Interval[T] | None:
    """Return the region shared by every argument (equivalent to chaining `&`).

    Returns None as soon as any two intervals fail to overlap.
    """

    if not intervals:
        raise ValueError(
            f"intersection() requires at least one interval argument.\n"
            f"Example: intersection(Interval(0, 60), Interval(40, 100))"
        )

    acc: Interval[T] | None = intervals[0].normalized
    for nxt in intervals[1:]:
        acc = acc & nxt
        if acc is None:
            return None
    return acc
