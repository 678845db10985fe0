"""Segment generators for parallels, meridians, boundary paths and geodesics.

Every generator yields (SpherePoint, SpherePoint) segments in traversal order.
Stepped loops use strict upper bounds (lng < 180, lat < 90), so the closing
segment back to the start is never produced; rings stay open unless the data
repeats its first point.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from itertools import pairwise

from globe_tools.constants import (
    GRATICULE_LINE_STEP,
    HALF_CIRCLE_DEGREES,
    LINE_POINT_INTERVAL,
    QUARTER_CIRCLE_DEGREES,
)
from globe_tools.sphere import GeoPoint, SpherePoint, cartesian, great_circle_points

Path = Sequence[GeoPoint]
Segment = tuple[SpherePoint, SpherePoint]


@dataclass(frozen=True)
class PathSet:
    """Named, ordered collection of paths (e.g. 'land', 'countries')."""

    name: str
    paths: tuple[Path, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Path]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)

    def point_count(self) -> int:
        return sum(len(p) for p in self.paths)


def _check_positive(name: str, value: float) -> None:
    if value <= 0.0:
        raise ValueError(f'{name} must be positive, got {value!r}')


def _stepped(start: float, stop: float, step: float) -> Iterator[float]:
    """Yield start + k*step while the value is strictly below stop."""
    k = 0
    value = start
    while value < stop:
        yield value
        k += 1
        value = start + k * step


def parallel_segments(lat: float, step: float = GRATICULE_LINE_STEP) -> Iterator[Segment]:
    """Segments of the parallel at `lat`, lng stepping from -180 toward 180."""
    _check_positive('step', step)
    for lng in _stepped(-HALF_CIRCLE_DEGREES, HALF_CIRCLE_DEGREES, step):
        yield (cartesian(lat, lng), cartesian(lat, lng + step))


def meridian_segments(lng: float, step: float = GRATICULE_LINE_STEP) -> Iterator[Segment]:
    """Segments of the meridian at `lng`, lat stepping from -90 toward 90."""
    _check_positive('step', step)
    for lat in _stepped(-QUARTER_CIRCLE_DEGREES, QUARTER_CIRCLE_DEGREES, step):
        yield (cartesian(lat, lng), cartesian(lat + step, lng))


def parallel_latitudes(interval: float) -> Iterator[float]:
    """Latitudes of a parallels set: the equator once, then +/-k*interval below 90."""
    _check_positive('interval', interval)
    yield 0.0
    for lat in _stepped(interval, QUARTER_CIRCLE_DEGREES, interval):
        yield lat
        yield -lat


def meridian_longitudes(interval: float) -> Iterator[float]:
    """Longitudes of a meridians set: -180 + k*interval below 180."""
    _check_positive('interval', interval)
    yield from _stepped(-HALF_CIRCLE_DEGREES, HALF_CIRCLE_DEGREES, interval)


def path_segments(path: Path) -> Iterator[Segment]:
    """Segments between consecutive points of one path (no closing segment)."""
    for p1, p2 in pairwise(path):
        yield (cartesian(p1.lat, p1.lng), cartesian(p2.lat, p2.lng))


def path_set_segments(paths: Iterable[Path]) -> Iterator[Segment]:
    """Segments of every path in order; paths are never joined to each other."""
    for path in paths:
        yield from path_segments(path)


def geodesic_segments(
    p1: GeoPoint,
    p2: GeoPoint,
    interval: float = LINE_POINT_INTERVAL,
) -> Iterator[Segment]:
    """Segments approximating the great-circle arc from p1 to p2."""
    yield from path_segments(list(great_circle_points(p1, p2, interval)))
