"""Tests for graticule, boundary path and geodesic segment generators."""

from __future__ import annotations

import pytest

from globe_tools.paths import (
    PathSet,
    geodesic_segments,
    meridian_longitudes,
    meridian_segments,
    parallel_latitudes,
    parallel_segments,
    path_segments,
    path_set_segments,
)
from globe_tools.sphere import GeoPoint, cartesian


def test_parallel_has_360_segments_at_default_step() -> None:
    """lng steps -180..179; each segment joins lng and lng + 1."""
    segs = list(parallel_segments(45.0))
    assert len(segs) == 360
    assert segs[0] == (cartesian(45.0, -180.0), cartesian(45.0, -179.0))
    assert segs[-1] == (cartesian(45.0, 179.0), cartesian(45.0, 180.0))


@pytest.mark.parametrize(('step', 'count'), [(0.5, 720), (2.5, 144), (7.0, 52)])
def test_parallel_segment_count_follows_step(step: float, count: int) -> None:
    """Strict upper bound: values start + k*step below 180."""
    assert len(list(parallel_segments(10.0, step))) == count


def test_meridian_has_180_segments() -> None:
    """lat steps -90..89 at fixed longitude."""
    segs = list(meridian_segments(30.0))
    assert len(segs) == 180
    assert segs[0] == (cartesian(-90.0, 30.0), cartesian(-89.0, 30.0))
    assert segs[-1] == (cartesian(89.0, 30.0), cartesian(90.0, 30.0))


def test_generators_are_restartable() -> None:
    """Calling a generator again yields the same sequence."""
    assert list(meridian_segments(5.0, 10.0)) == list(meridian_segments(5.0, 10.0))


def test_parallel_latitudes_order() -> None:
    """Equator, then north/south pairs below 90."""
    assert list(parallel_latitudes(30.0)) == [0.0, 30.0, -30.0, 60.0, -60.0]


@pytest.mark.parametrize('interval', [7.0, 10.0, 15.0, 30.0, 45.0, 90.0, 120.0])
def test_parallel_latitudes_has_equator_once(interval: float) -> None:
    """The equator is included exactly once regardless of interval."""
    lats = list(parallel_latitudes(interval))
    assert lats.count(0.0) == 1
    assert all(abs(lat) < 90.0 for lat in lats)


def test_meridian_longitudes_uses_interval() -> None:
    """-180 + k*interval below 180; 180 itself is not repeated."""
    assert list(meridian_longitudes(90.0)) == [-180.0, -90.0, 0.0, 90.0]
    assert len(list(meridian_longitudes(15.0))) == 24


@pytest.mark.parametrize('bad', [0.0, -1.0])
def test_non_positive_steps_rejected(bad: float) -> None:
    """Zero or negative steps would never terminate."""
    with pytest.raises(ValueError, match='positive'):
        list(parallel_segments(0.0, bad))
    with pytest.raises(ValueError, match='positive'):
        list(meridian_segments(0.0, bad))
    with pytest.raises(ValueError, match='positive'):
        list(parallel_latitudes(bad))
    with pytest.raises(ValueError, match='positive'):
        list(meridian_longitudes(bad))


def test_path_segments_has_no_closing_segment() -> None:
    """Four points give three segments; the ring is not closed."""
    path = [GeoPoint(0.0, 0.0), GeoPoint(0.0, 10.0), GeoPoint(10.0, 10.0), GeoPoint(10.0, 0.0)]
    segs = list(path_segments(path))
    assert len(segs) == 3
    assert segs[0][0] == cartesian(0.0, 0.0)
    assert segs[-1] == (cartesian(10.0, 10.0), cartesian(10.0, 0.0))


def test_path_segments_short_paths() -> None:
    """Paths with fewer than two points yield nothing."""
    assert list(path_segments([])) == []
    assert list(path_segments([GeoPoint(1.0, 2.0)])) == []


def test_path_set_segments_never_joins_paths() -> None:
    """Segments come path by path; no segment bridges two paths."""
    first = (GeoPoint(0.0, 0.0), GeoPoint(0.0, 1.0), GeoPoint(0.0, 2.0))
    second = (GeoPoint(5.0, 5.0), GeoPoint(6.0, 6.0))
    path_set = PathSet(name='test', paths=(first, second))
    segs = list(path_set_segments(path_set))
    assert len(segs) == 3
    assert (cartesian(0.0, 2.0), cartesian(5.0, 5.0)) not in segs
    assert segs[2] == (cartesian(5.0, 5.0), cartesian(6.0, 6.0))


def test_path_set_container_protocol() -> None:
    """PathSet iterates its paths and counts points."""
    path_set = PathSet(name='land', paths=((GeoPoint(0.0, 0.0), GeoPoint(1.0, 1.0)), ()))
    assert len(path_set) == 2
    assert list(path_set)[0][1] == GeoPoint(1.0, 1.0)
    assert path_set.point_count() == 2
    assert len(PathSet(name='empty')) == 0


def test_geodesic_segments_chain() -> None:
    """Geodesic segments connect end to start and span the arc."""
    segs = list(geodesic_segments(GeoPoint(0.0, 0.0), GeoPoint(0.0, 90.0), interval=1000.0))
    assert len(segs) == 11
    for (_, end), (start, _) in zip(segs, segs[1:]):
        assert end == start
    assert segs[0][0] == cartesian(0.0, 0.0)
    assert segs[-1][1] == cartesian(0.0, 90.0)
