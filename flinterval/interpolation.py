"""Unclamped linear interpolation between interval coordinate spaces.

Each function computes its result directly from the bounds involved, so
mapping between two intervals does not round-trip through the unit interval.
None of them clamp: inputs outside ``0..1`` or outside the source interval
extrapolate along the same line.

Calling with a non-finite value or bound, or dividing by an empty source
interval, is a caller error and raises ``ValueError``.
"""

import logging
import math
from typing import Any, TypeVar

import numpy as np

from flinterval.interval import Interval

T = TypeVar("T", bound="float | np.floating[Any]")

logger = logging.getLogger(__name__)


def _require_finite(value: T, *intervals: Interval[T]) -> None:
    if not math.isfinite(value):
        logger.debug("Rejected non-finite interpolation value %r", value)
        raise ValueError(
            f"Interpolation requires a finite value, got {value!r}.\n"
            f"Hint: check for NaN or infinity before interpolating"
        )
    for interval in intervals:
        if not interval.is_finite:
            logger.debug("Rejected non-finite interval %r", interval)
            raise ValueError(
                f"Interpolation requires finite bounds, got {interval!r}.\n"
                f"Hint: interval.is_finite must be True"
            )


def _require_non_empty(interval: Interval[T]) -> None:
    if interval.is_empty:
        logger.debug("Rejected empty source interval %r", interval)
        raise ValueError(
            f"Cannot interpolate from an empty interval {interval!r}: "
            f"both bounds are {interval.a}.\n"
            f"Mapping out of an interval divides by its extent, which is zero."
        )


def interpolated_to(value: T, interval: Interval[T]) -> T:
    """Map ``value`` from the unit interval ``0..1`` into ``interval``.

    Example:
        >>> interpolated_to(0.5, Interval(20, 30))
        25.0
        >>> interpolated_to(-0.1, Interval(0, 100))
        -10.0
    """
    _require_finite(value, interval)
    return value * (interval.b - interval.a) + interval.a


def interpolated_from(value: T, interval: Interval[T]) -> T:
    """Map ``value`` from ``interval`` into the unit interval ``0..1``.

    Example:
        >>> interpolated_from(25.0, Interval(20, 30))
        0.5
    """
    _require_finite(value, interval)
    _require_non_empty(interval)
    return (interval.a - value) / (interval.a - interval.b)


def interpolated_from_to(value: T, source: Interval[T], target: Interval[T]) -> T:
    """Map ``value`` from the ``source`` interval into the ``target`` interval.

    Example:
        >>> interpolated_from_to(20.0, Interval(0, 100), Interval(500, 100))
        420.0
    """
    _require_finite(value, source, target)
    _require_non_empty(source)
    return target.a + ((target.b - target.a) * (value - source.a)) / (
        source.b - source.a
    )
