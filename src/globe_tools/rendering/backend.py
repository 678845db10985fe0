"""Rendering backend contract consumed by Globe."""

from __future__ import annotations

from typing import Any, Protocol

from globe_tools.style import Style


class RenderingBackend(Protocol):
    """2.5D drawing backend: owns the view rotation, projects and paints.

    Primitives are emitted between begin() and end(); colorize() assigns one
    color to everything emitted since begin() and is called at most once per
    group, right before end().
    """

    def begin(self) -> None: ...

    def end(self) -> None: ...

    def colorize(self, color: str) -> None: ...

    def draw_line(
        self, x1: float, y1: float, z1: float, x2: float, y2: float, z2: float
    ) -> None: ...

    def draw_dot(self, x: float, y: float, z: float, radius: float) -> None: ...

    def rotate(self, a1: float, a2: float, a3: float) -> None: ...

    def render(self, surface: Any, style: Style) -> None: ...
