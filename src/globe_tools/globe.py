"""Globe: view centering and shape drawing on a rendering backend.

Every shape is emitted inside one drawing group. The group gets exactly one
color (the caller's, else the style default for the shape kind) assigned right
before it closes.

Typical usage::

    globe = Globe(path_sets={'land': land})
    globe.center_on(40.0, -100.0)
    globe.draw_graticule(15.0)
    globe.draw_land_boundaries()
    globe.draw_dot(40.7, -74.0, 0.01)
    globe.render('globe.ps')
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from globe_tools.angle_utils import degree_to_radian
from globe_tools.constants import GRATICULE_LINE_STEP, HALF_PI, LINE_POINT_INTERVAL
from globe_tools.paths import (
    PathSet,
    Segment,
    geodesic_segments,
    meridian_longitudes,
    meridian_segments,
    parallel_latitudes,
    parallel_segments,
    path_set_segments,
)
from globe_tools.rendering.backend import RenderingBackend
from globe_tools.rendering.pinhole import Pinhole
from globe_tools.sphere import GeoPoint, cartesian
from globe_tools.style import DEFAULT_STYLE, Style

logger = logging.getLogger(__name__)

LAND = 'land'
COUNTRIES = 'countries'


class Globe:
    """Draws graticules, dots and boundary paths onto a rendering backend.

    Parameters:
        backend: Rendering backend; a new Pinhole when omitted.
        style: Drawing style (immutable; may be replaced between drawing calls).
        path_sets: Boundary datasets by name ('land', 'countries', ...).
        step: Angular step (degrees) between graticule line points.
    """

    def __init__(
        self,
        backend: RenderingBackend | None = None,
        style: Style = DEFAULT_STYLE,
        path_sets: Mapping[str, PathSet] | None = None,
        step: float = GRATICULE_LINE_STEP,
    ) -> None:
        if step <= 0.0:
            raise ValueError(f'step must be positive, got {step!r}')
        self.backend: RenderingBackend = backend if backend is not None else Pinhole()
        self.style = style
        self.path_sets: dict[str, PathSet] = dict(path_sets or {})
        self.step = step

    def center_on(self, lat: float, lng: float) -> None:
        """Rotate the view so that (lat, lng) faces the viewer, north up.

        First about the vertical (z) axis, then about the horizontal (x) axis;
        the order matters.
        """
        self.backend.rotate(0.0, 0.0, -degree_to_radian(lng) - HALF_PI)
        self.backend.rotate(HALF_PI - degree_to_radian(lat), 0.0, 0.0)

    @contextlib.contextmanager
    def drawing_group(self, color: str | None, default: str) -> Iterator[RenderingBackend]:
        """Bracket primitive emissions in begin()/end() with one color assignment.

        The color (or default) is applied once on normal exit. end() is always
        called; when the body raises, the group is closed uncolored and the
        exception propagates.
        """
        self.backend.begin()
        try:
            yield self.backend
            self.backend.colorize(color or default)
        finally:
            self.backend.end()

    def _emit_segments(self, segments: Iterable[Segment]) -> int:
        count = 0
        for a, b in segments:
            self.backend.draw_line(a.x, a.y, a.z, b.x, b.y, b.z)
            count += 1
        return count

    def draw_parallel(self, lat: float, color: str | None = None) -> None:
        with self.drawing_group(color, self.style.graticule_color):
            self._emit_segments(parallel_segments(lat, self.step))

    def draw_parallels(self, interval: float, color: str | None = None) -> None:
        """Draw the equator once, then the parallels at +/-k*interval below 90 degrees.

        The equator always uses the style's graticule color; `color` applies to
        the other parallels only.
        """
        for lat in parallel_latitudes(interval):
            self.draw_parallel(lat, color if lat != 0.0 else None)

    def draw_meridian(self, lng: float, color: str | None = None) -> None:
        with self.drawing_group(color, self.style.graticule_color):
            self._emit_segments(meridian_segments(lng, self.step))

    def draw_meridians(self, interval: float, color: str | None = None) -> None:
        """Draw one meridian every `interval` degrees of longitude from -180."""
        for lng in meridian_longitudes(interval):
            self.draw_meridian(lng, color)

    def draw_graticule(self, interval: float, color: str | None = None) -> None:
        self.draw_parallels(interval, color)
        self.draw_meridians(interval, color)

    def draw_dot(self, lat: float, lng: float, radius: float, color: str | None = None) -> None:
        """Draw a dot of the given radius (unit-sphere units) at (lat, lng)."""
        with self.drawing_group(color, self.style.dot_color):
            c = cartesian(lat, lng)
            self.backend.draw_dot(c.x, c.y, c.z, radius)

    def draw_paths(self, path_set: PathSet, color: str | None = None) -> None:
        """Draw every path of a set as one group; paths are never joined."""
        with self.drawing_group(color, self.style.line_color):
            count = self._emit_segments(path_set_segments(path_set))
        logger.debug('Drew %d segments from path set %r', count, path_set.name)

    def draw_land_boundaries(self, color: str | None = None) -> None:
        self.draw_paths(self._path_set(LAND), color)

    def draw_country_boundaries(self, color: str | None = None) -> None:
        self.draw_paths(self._path_set(COUNTRIES), color)

    def draw_great_circle(
        self,
        p1: GeoPoint,
        p2: GeoPoint,
        color: str | None = None,
        interval: float = LINE_POINT_INTERVAL,
    ) -> None:
        """Draw the shorter great-circle arc from p1 to p2 as one group."""
        with self.drawing_group(color, self.style.line_color):
            self._emit_segments(geodesic_segments(p1, p2, interval))

    def render(self, surface: Any) -> None:
        """Paint everything drawn so far onto surface using the current style."""
        self.backend.render(surface, self.style)

    def _path_set(self, name: str) -> PathSet:
        try:
            return self.path_sets[name]
        except KeyError:
            raise KeyError(f'no path set named {name!r} loaded') from None

