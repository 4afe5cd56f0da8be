"""Uniform random sampling within an interval.

Sampling converts the interval to a ``ClosedRange`` and hands its bounds to a
random source; no sampling algorithm is implemented here. Any object with a
``uniform(low, high)`` method works as a source, including
``numpy.random.Generator`` and the standard library's ``random.Random``.
"""

import logging
from typing import Any, Protocol, TypeVar

import numpy as np

from flinterval.interval import Interval
from flinterval.ranges import ClosedRange

T = TypeVar("T", bound="float | np.floating[Any]")

logger = logging.getLogger(__name__)


class UniformSource(Protocol):
    def uniform(self, low: float, high: float) -> float: ...


def _default_source() -> np.random.Generator:
    logger.debug("No random source given, using a fresh numpy default_rng()")
    return np.random.default_rng()


def uniform(interval: Interval[T], rng: UniformSource | None = None) -> T:
    """Return a value drawn uniformly from ``interval``, in either orientation.

    When the bounds are NumPy floating scalars the result has the same scalar
    type; otherwise it is a Python ``float``.

    Args:
        interval: Interval to sample from. Descending intervals are normalized.
        rng: Random source; defaults to ``numpy.random.default_rng()``.
            Pass a seeded generator for reproducible draws.

    Example:
        >>> rng = np.random.default_rng(42)
        >>> 0.0 <= uniform(Interval(1.0, 0.0), rng) <= 1.0
        True
    """
    r = ClosedRange.from_interval(interval)
    if rng is None:
        rng = _default_source()
    value = rng.uniform(r.lower, r.upper)
    if isinstance(r.lower, np.floating):
        return r.lower.dtype.type(value)
    return float(value)


def uniform_many(
    interval: Interval[T], size: int, rng: np.random.Generator | None = None
) -> np.ndarray:
    """Return ``size`` values drawn uniformly from ``interval`` as an array.

    The array dtype follows the interval's NumPy scalar type, or ``float64``
    for Python floats.
    """
    r = ClosedRange.from_interval(interval)
    if rng is None:
        rng = _default_source()
    if not isinstance(rng, np.random.Generator):
        raise TypeError(
            f"uniform_many() requires a numpy.random.Generator, "
            f"got {type(rng).__name__!r}.\n"
            f"Hint: use numpy.random.default_rng(seed), or call uniform() "
            f"in a loop for other sources"
        )
    dtype = r.lower.dtype if isinstance(r.lower, np.floating) else np.float64
    return rng.uniform(r.lower, r.upper, size=size).astype(dtype, copy=False)
