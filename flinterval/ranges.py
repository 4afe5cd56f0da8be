from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import numpy as np
from typing_extensions import override

if TYPE_CHECKING:
    from flinterval.interval import Interval

T = TypeVar("T", bound="float | np.floating[Any]")


@dataclass(frozen=True, kw_only=True, repr=False)
class ClosedRange(Generic[T]):
    """An ordered closed range ``lower...upper`` with ``lower <= upper``.

    A degenerate range (``lower == upper``) holds exactly one value and is
    never considered empty.
    """

    lower: T
    upper: T

    def __post_init__(self) -> None:
        if self.lower > self.upper:
            raise ValueError(
                f"ClosedRange lower ({self.lower}) must be <= upper ({self.upper})\n"
                f"Hint: for bounds in either order, use Interval({self.lower}, "
                f"{self.upper}) or ClosedRange.from_interval(...)"
            )

    @classmethod
    def from_interval(cls, i: "Interval[T]") -> "ClosedRange[T]":
        """Construct a range from an interval of either orientation.

        Example:
            >>> ClosedRange.from_interval(Interval(203.7, 10.5))
            ClosedRange(10.5...203.7)
        """
        i = i.normalized
        return cls(lower=i.a, upper=i.b)

    def __contains__(self, value: T) -> bool:
        return self.lower <= value <= self.upper

    @override
    def __str__(self) -> str:
        return f"{self.lower}...{self.upper}"

    @override
    def __repr__(self) -> str:
        return f"ClosedRange({self.lower}...{self.upper})"
