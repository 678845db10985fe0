"""Unit-sphere projection, haversine distance and great-circle interpolation."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass

from globe_tools.angle_utils import cosd, radian_to_degree, sind
from globe_tools.constants import DEGENERATE_SEPARATION, EARTH_RADIUS, LINE_POINT_INTERVAL

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeoPoint:
    """Geographic position in degrees (lat in [-90, 90], lng in [-180, 180])."""

    lat: float
    lng: float


@dataclass(frozen=True)
class SpherePoint:
    """Cartesian point on the unit sphere (built by cartesian())."""

    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


def cartesian(lat: float, lng: float) -> SpherePoint:
    """Project (lat, lng) in degrees onto the unit sphere.

    x = cos(lat) cos(lng), y = cos(lat) sin(lng), z = -sin(lat). Inputs are not
    range-checked; values outside the geographic ranges wrap through the
    periodic trig functions.
    """
    clat = cosd(lat)
    return SpherePoint(clat * cosd(lng), clat * sind(lng), -sind(lat))


def haversine_distance(
    lat1: float,
    lng1: float,
    lat2: float,
    lng2: float,
    radius: float = EARTH_RADIUS,
) -> float:
    """Great-circle distance between two points (haversine formula).

    Parameters:
        lat1, lng1: First point (degrees).
        lat2, lng2: Second point (degrees).
        radius: Sphere radius; the result is in the same units.

    Returns:
        Non-negative distance; 0 when the points coincide.
    """
    dlat = lat2 - lat1
    dlng = lng2 - lng1
    slat = sind(dlat / 2.0)
    slng = sind(dlng / 2.0)
    a = slat * slat + cosd(lat1) * cosd(lat2) * slng * slng
    # Rounding can push a slightly past 1 for near-antipodal points.
    a = min(1.0, max(0.0, a))
    return radius * 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))


def angular_separation(p1: GeoPoint, p2: GeoPoint) -> float:
    """Central angle between two points (radians)."""
    return haversine_distance(p1.lat, p1.lng, p2.lat, p2.lng, radius=1.0)


def _is_antipodal(delta: float) -> bool:
    return math.pi - delta <= DEGENERATE_SEPARATION


def intermediate_point(p1: GeoPoint, p2: GeoPoint, f: float) -> GeoPoint:
    """Point a fraction f of the way from p1 to p2 along the shorter great circle.

    Coincident points have no defined great circle; p1 is returned for every f.
    Antipodal points have infinitely many; a warning is logged and the nearer
    endpoint (p1 for f < 0.5, else p2) is returned.

    Parameters:
        p1: Start point.
        p2: End point.
        f: Fraction in [0, 1].

    Returns:
        Interpolated point; exactly p1 at f=0 and exactly p2 at f=1.
    """
    delta = angular_separation(p1, p2)
    if delta <= DEGENERATE_SEPARATION:
        return p1
    if _is_antipodal(delta):
        logger.warning(
            'Great circle between antipodal points %s and %s is undefined', p1, p2
        )
        return p1 if f < 0.5 else p2
    if f == 0.0:
        return p1
    if f == 1.0:
        return p2
    sin_delta = math.sin(delta)
    a = math.sin((1.0 - f) * delta) / sin_delta
    b = math.sin(f * delta) / sin_delta
    clat1 = cosd(p1.lat)
    clat2 = cosd(p2.lat)
    x = a * clat1 * cosd(p1.lng) + b * clat2 * cosd(p2.lng)
    y = a * clat1 * sind(p1.lng) + b * clat2 * sind(p2.lng)
    z = a * sind(p1.lat) + b * sind(p2.lat)
    phi = math.atan2(z, math.sqrt(x * x + y * y))
    lam = math.atan2(y, x)
    return GeoPoint(lat=radian_to_degree(phi), lng=radian_to_degree(lam))


def great_circle_points(
    p1: GeoPoint,
    p2: GeoPoint,
    interval: float = LINE_POINT_INTERVAL,
    radius: float = EARTH_RADIUS,
) -> Iterator[GeoPoint]:
    """Yield points along the geodesic from p1 to p2, both endpoints included.

    Consecutive points are at most `interval` apart (units of `radius`).

    Raises:
        ValueError: If interval or radius is not positive.
    """
    if interval <= 0.0:
        raise ValueError(f'interval must be positive, got {interval!r}')
    if radius <= 0.0:
        raise ValueError(f'radius must be positive, got {radius!r}')
    delta = angular_separation(p1, p2)
    if _is_antipodal(delta):
        logger.warning(
            'Great circle between antipodal points %s and %s is undefined', p1, p2
        )
        yield p1
        yield p2
        return
    nsteps = max(1, math.ceil(delta * radius / interval))
    for k in range(nsteps + 1):
        yield intermediate_point(p1, p2, k / nsteps)
