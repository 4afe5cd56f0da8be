import pytest

from flinterval import Interval, intersection, union


def test_union_helper_matches_operator() -> None:
    intervals = [Interval(0, 10), Interval(40, 30), Interval(-5, 2)]

    chained = intervals[0] | intervals[1] | intervals[2]

    assert union(*intervals) == chained == Interval(-5, 40)


def test_union_single_interval_is_normalized() -> None:
    assert union(Interval(100, 0)) == Interval(0, 100)


def test_union_requires_arguments() -> None:
    with pytest.raises(ValueError, match="at least one interval"):
        union()


def test_intersection_helper_matches_operator() -> None:
    intervals = [Interval(0, 100), Interval(80, 20), Interval(50, 150)]

    chained = (intervals[0] & intervals[1]) & intervals[2]

    assert intersection(*intervals) == chained == Interval(50, 80)


def test_intersection_single_interval_is_normalized() -> None:
    assert intersection(Interval(100, 0)) == Interval(0, 100)


def test_intersection_none_when_any_pair_is_disjoint() -> None:
    assert intersection(Interval(0, 10), Interval(20, 30), Interval(0, 100)) is None
    assert intersection(Interval(0, 100), Interval(0, 10), Interval(20, 30)) is None


def test_intersection_touching_yields_point() -> None:
    result = intersection(Interval(0, 50), Interval(50, 100), Interval(100, 50))
    assert result == Interval(50, 50)


def test_intersection_requires_arguments() -> None:
    with pytest.raises(ValueError, match="at least one interval"):
        intersection()
