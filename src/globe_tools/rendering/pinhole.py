"""Pinhole: in-memory 2.5D backend with a persistent view rotation.

Primitives are stored in 3-D (unit-sphere coordinates) grouped by drawing
group. At render time every primitive is rotated by the view matrix and
projected orthographically onto the view plane. The viewer looks along +z, so
the visible hemisphere is z <= 0; lines crossing the limb are clipped at z = 0
and primitives entirely behind the globe are dropped.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import numpy as np

from globe_tools.rendering.matplotlib_view import render_groups_mpl
from globe_tools.rendering.postscript import write_postscript
from globe_tools.style import Style

logger = logging.getLogger(__name__)

_POSTSCRIPT_SUFFIXES = ('.ps', '.eps')


@dataclass
class DrawingGroup:
    """Primitives emitted between begin() and end(), plus their one color."""

    lines: list[tuple[float, float, float, float, float, float]] = field(default_factory=list)
    dots: list[tuple[float, float, float, float]] = field(default_factory=list)
    color: str | None = None
    # True for primitives drawn outside any begin()/end() bracket.
    loose: bool = False

    def is_empty(self) -> bool:
        return not self.lines and not self.dots


@dataclass
class ProjectedGroup:
    """A drawing group after rotation, culling and projection to the view plane.

    lines: (x1, y1, x2, y2) and dots: (x, y, radius), in unit-sphere units.
    """

    lines: list[tuple[float, float, float, float]]
    dots: list[tuple[float, float, float]]
    color: str | None


def rotation_matrix(a1: float, a2: float, a3: float) -> np.ndarray:
    """Rotation about x by a1, then about y by a2, then about z by a3 (radians)."""
    c1, s1 = np.cos(a1), np.sin(a1)
    c2, s2 = np.cos(a2), np.sin(a2)
    c3, s3 = np.cos(a3), np.sin(a3)
    rx = np.array([[1.0, 0.0, 0.0], [0.0, c1, -s1], [0.0, s1, c1]])
    ry = np.array([[c2, 0.0, s2], [0.0, 1.0, 0.0], [-s2, 0.0, c2]])
    rz = np.array([[c3, -s3, 0.0], [s3, c3, 0.0], [0.0, 0.0, 1.0]])
    return rz @ ry @ rx


def _project_lines(lines: np.ndarray, view: np.ndarray) -> list[tuple[float, float, float, float]]:
    """Rotate (n, 6) line endpoints into view space; cull and clip at the limb."""
    p1 = lines[:, 0:3] @ view.T
    p2 = lines[:, 3:6] @ view.T
    front1 = p1[:, 2] <= 0.0
    front2 = p2[:, 2] <= 0.0
    keep = front1 | front2
    p1 = p1[keep]
    p2 = p2[keep]
    front1 = front1[keep]
    front2 = front2[keep]
    # Exactly one endpoint behind: move it onto the z = 0 plane.
    crossing = front1 != front2
    if np.any(crossing):
        a = p1[crossing]
        b = p2[crossing]
        t = a[:, 2] / (a[:, 2] - b[:, 2])
        cut = a + t[:, np.newaxis] * (b - a)
        behind1 = ~front1[crossing]
        a[behind1] = cut[behind1]
        b[~behind1] = cut[~behind1]
        p1[crossing] = a
        p2[crossing] = b
    return [
        (float(x1), float(y1), float(x2), float(y2))
        for (x1, y1), (x2, y2) in zip(p1[:, 0:2], p2[:, 0:2], strict=True)
    ]


def _project_dots(dots: np.ndarray, view: np.ndarray) -> list[tuple[float, float, float]]:
    pts = dots[:, 0:3] @ view.T
    visible = pts[:, 2] <= 0.0
    return [
        (float(x), float(y), float(r))
        for (x, y), r in zip(pts[visible, 0:2], dots[visible, 3], strict=True)
    ]


class Pinhole:
    """Reference rendering backend (see RenderingBackend)."""

    def __init__(self) -> None:
        self.view: np.ndarray = np.identity(3)
        self.groups: list[DrawingGroup] = []
        self._open: DrawingGroup | None = None

    @property
    def group_open(self) -> bool:
        return self._open is not None

    def begin(self) -> None:
        if self._open is not None:
            raise RuntimeError('begin() called while a drawing group is already open')
        self._open = DrawingGroup()
        self.groups.append(self._open)

    def end(self) -> None:
        if self._open is None:
            raise RuntimeError('end() called without an open drawing group')
        self._open = None

    def colorize(self, color: str) -> None:
        if self._open is None:
            raise RuntimeError('colorize() called without an open drawing group')
        if self._open.color is not None:
            raise RuntimeError(
                f'drawing group already colored {self._open.color!r}; cannot colorize {color!r}'
            )
        self._open.color = color

    def _target(self) -> DrawingGroup:
        if self._open is not None:
            return self._open
        if not self.groups or not self.groups[-1].loose:
            self.groups.append(DrawingGroup(loose=True))
        return self.groups[-1]

    def draw_line(
        self, x1: float, y1: float, z1: float, x2: float, y2: float, z2: float
    ) -> None:
        self._target().lines.append((x1, y1, z1, x2, y2, z2))

    def draw_dot(self, x: float, y: float, z: float, radius: float) -> None:
        self._target().dots.append((x, y, z, radius))

    def rotate(self, a1: float, a2: float, a3: float) -> None:
        """Apply a rotation (x by a1, then y by a2, then z by a3) after the current view."""
        logger.debug('rotate(%.6f, %.6f, %.6f)', a1, a2, a3)
        self.view = rotation_matrix(a1, a2, a3) @ self.view

    def clear(self) -> None:
        """Discard all drawing groups; the view rotation is kept."""
        self.groups = []
        self._open = None

    def projected_groups(self) -> list[ProjectedGroup]:
        """Rotate, cull and project every non-empty group, in emission order."""
        out: list[ProjectedGroup] = []
        for group in self.groups:
            if group.is_empty():
                continue
            lines = (
                _project_lines(np.asarray(group.lines, dtype=float), self.view)
                if group.lines
                else []
            )
            dots = (
                _project_dots(np.asarray(group.dots, dtype=float), self.view)
                if group.dots
                else []
            )
            out.append(ProjectedGroup(lines=lines, dots=dots, color=group.color))
        return out

    def render(self, surface: Any, style: Style) -> None:
        """Paint all groups onto a surface.

        Parameters:
            surface: Text stream (PostScript is written to it) or a file path.
                Paths ending in .ps/.eps get PostScript; any other suffix is
                saved by matplotlib (.png, .svg, .pdf, ...).
            style: Background color, line width and scale.

        Raises:
            RuntimeError: If a drawing group is still open.
            ValueError: If a group color is not a valid color.
        """
        if self.group_open:
            raise RuntimeError('cannot render while a drawing group is open')
        groups = self.projected_groups()
        logger.debug(
            'Rendering %d groups (%d lines, %d dots)',
            len(groups),
            sum(len(g.lines) for g in groups),
            sum(len(g.dots) for g in groups),
        )
        if hasattr(surface, 'write'):
            write_postscript(surface, groups, style)
            return
        path = Path(os.fspath(surface))
        if path.suffix.lower() in _POSTSCRIPT_SUFFIXES:
            with open(path, 'w', encoding='utf-8') as f:
                write_postscript(f, groups, style, title=path.name)
            return
        render_groups_mpl(path, groups, style)
