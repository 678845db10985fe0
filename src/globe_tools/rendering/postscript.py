"""PostScript output for projected drawing groups.

Coordinate system: 0.1 0.1 scale (1 device unit = 0.1 points); all device
coordinates are integers. The globe (unit radius times style.scale) is centered
in a square plot area on a letter page.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, TextIO

from matplotlib.colors import to_rgb

from globe_tools.style import Style

if TYPE_CHECKING:
    from globe_tools.rendering.pinhole import ProjectedGroup

# Plot area bounds in device units (36..576 x 180..720 points).
MINX = 360
MAXX = 5760
MINY = 1800
MAXY = 7200

# Maximum points per stroked path.
BUFSZ = 64
MINWIDTH = 1
CREATOR = 'globe-tools'


def _nint(x: float) -> int:
    """Round half away from zero (not banker's rounding)."""
    if x >= 0.0:
        return int(x + 0.5)
    return -int(-x + 0.5)


def _opairi(x: int, y: int, suffix: str) -> str:
    """Format ordered pair of integers as 'X Y suffix'."""
    return f'{x} {y} {suffix}'


def _rgb_string(color: str) -> str:
    """'R G B setrgbcolor' for a matplotlib color spec (ValueError if invalid)."""
    r, g, b = to_rgb(color)
    return f'{r:.3f} {g:.3f} {b:.3f} setrgbcolor'


def clip_line(
    xmin: float,
    xmax: float,
    ymin: float,
    ymax: float,
    x1: float,
    y1: float,
    x2: float,
    y2: float,
) -> tuple[float, float, float, float, bool]:
    """Clip segment to rectangle (Liang-Barsky). Returns (x1, y1, x2, y2, inside).

    Boundary points count as inside. inside is False when no part of the
    segment lies in the rectangle.
    """
    dx = x2 - x1
    dy = y2 - y1
    t0 = 0.0
    t1 = 1.0
    for p, q in ((-dx, x1 - xmin), (dx, xmax - x1), (-dy, y1 - ymin), (dy, ymax - y1)):
        if p == 0.0:
            if q < 0.0:
                return (x1, y1, x2, y2, False)
            continue
        r = q / p
        if p < 0.0:
            if r > t1:
                return (x1, y1, x2, y2, False)
            t0 = max(t0, r)
        else:
            if r < t0:
                return (x1, y1, x2, y2, False)
            t1 = min(t1, r)
    return (x1 + t0 * dx, y1 + t0 * dy, x1 + t1 * dx, y1 + t1 * dy, True)


class _PageMap:
    """Map view-plane coordinates (unit sphere, y up) to device units."""

    def __init__(self, scale: float) -> None:
        self.xcen = (MINX + MAXX) / 2.0
        self.ycen = (MINY + MAXY) / 2.0
        self.unit = scale * min(MAXX - MINX, MAXY - MINY) / 2.0

    def point(self, x: float, y: float) -> tuple[float, float]:
        return (self.xcen + self.unit * x, self.ycen + self.unit * y)

    def segment(self, x1: float, y1: float, x2: float, y2: float) -> tuple[int, int, int, int] | None:
        bx, by = self.point(x1, y1)
        ex, ey = self.point(x2, y2)
        bx, by, ex, ey, inside = clip_line(MINX, MAXX, MINY, MAXY, bx, by, ex, ey)
        if not inside:
            return None
        return (_nint(bx), _nint(by), _nint(ex), _nint(ey))


def write_ps_header(out: TextIO, title: str, line_width: float) -> None:
    """Write the EPS header, abbreviations and initial line width."""
    width = max(_nint(line_width * 10.0), MINWIDTH)
    out.write('%!PS-Adobe-2.0 EPSF-2.0\n')
    out.write(f'%%Title: {title}\n')
    out.write(f'%%Creator: {CREATOR}\n')
    out.write(f'%%BoundingBox: {MINX // 10} {MINY // 10} {MAXX // 10} {MAXY // 10}\n')
    out.write('%%Pages: 1\n')
    out.write('%%EndComments\n')
    out.write('% \n')
    out.write('0.1 0.1 scale\n')
    out.write(f'{width} setlinewidth\n')
    out.write('1 setlinecap\n')
    out.write('1 setlinejoin\n')
    out.write('/L {lineto} def\n')
    out.write('/M {moveto} def\n')
    out.write('/N {newpath} def\n')
    out.write('/S {stroke} def\n')


def write_background(out: TextIO, color: str) -> None:
    """Fill the plot area with the background color."""
    out.write('% \n')
    out.write('% BACKGROUND\n')
    out.write('% \n')
    out.write('N\n')
    out.write(_opairi(MINX, MINY, 'M') + '\n')
    out.write(_opairi(MINX, MAXY, 'L') + '\n')
    out.write(_opairi(MAXX, MAXY, 'L') + '\n')
    out.write(_opairi(MAXX, MINY, 'L') + '\n')
    out.write('closepath\n')
    out.write(_rgb_string(color) + '\n')
    out.write('fill\n')


def _polylines(segs: Sequence[tuple[int, int, int, int]]) -> list[list[tuple[int, int]]]:
    """Join runs of segments where each begins at the previous end point."""
    paths: list[list[tuple[int, int]]] = []
    current: list[tuple[int, int]] = []
    for bx, by, ex, ey in segs:
        if current and current[-1] == (bx, by) and len(current) < BUFSZ:
            current.append((ex, ey))
            continue
        if current:
            paths.append(current)
        current = [(bx, by), (ex, ey)]
    if current:
        paths.append(current)
    return paths


def write_group(out: TextIO, group: ProjectedGroup, page: _PageMap, color: str) -> None:
    """Write one group: one color assignment, then its strokes and dots."""
    segs = [
        s for s in (page.segment(*line) for line in group.lines) if s is not None
    ]
    dots = []
    for x, y, r in group.dots:
        px, py = page.point(x, y)
        if MINX <= px <= MAXX and MINY <= py <= MAXY:
            dots.append((_nint(px), _nint(py), max(_nint(r * page.unit), 1)))
    if not segs and not dots:
        return
    out.write(_rgb_string(color) + '\n')
    for points in _polylines(segs):
        # Zero-length paths still need some extent to show up as a dot.
        if len(set(points)) == 1:
            x, y = points[-1]
            points[-1] = (x + 1 if x < MAXX else x - 1, y)
        out.write('N\n')
        out.write(_opairi(points[0][0], points[0][1], 'M') + '\n')
        lastln = ''
        for x, y in points[1:]:
            lineto = _opairi(x, y, 'L')
            if lineto != lastln:
                out.write(lineto + '\n')
            lastln = lineto
        out.write('S\n')
    for x, y, r in dots:
        out.write('N\n')
        out.write(f'{x} {y} {r} 0 360 arc\n')
        out.write('closepath\n')
        out.write('fill\n')


def write_postscript(
    out: TextIO,
    groups: Sequence[ProjectedGroup],
    style: Style,
    title: str = 'globe.ps',
) -> None:
    """Write a complete one-page PostScript document for the projected groups.

    Groups without a color are stroked in style.line_color.

    Parameters:
        out: Text stream receiving the document.
        groups: Projected groups in paint order.
        style: Background color, line width and scale.
        title: Value for the %%Title comment.

    Raises:
        ValueError: If a color is not a valid color specification.
    """
    page = _PageMap(style.scale)
    write_ps_header(out, title, style.line_width)
    write_background(out, style.background_color)
    for group in groups:
        write_group(out, group, page, group.color or style.line_color)
    out.write('showpage\n')
