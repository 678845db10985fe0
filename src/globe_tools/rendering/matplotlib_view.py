"""Matplotlib-based globe output (alternative to PostScript)."""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import TYPE_CHECKING

from globe_tools.style import Style

if TYPE_CHECKING:
    from globe_tools.rendering.pinhole import ProjectedGroup

FIGURE_INCHES = 6.0
DPI = 150


def render_groups_mpl(
    output_path: str | os.PathLike[str],
    groups: Sequence[ProjectedGroup],
    style: Style,
) -> None:
    """Paint projected groups with matplotlib and save to output_path.

    The file format follows the path suffix (.png, .svg, .pdf, ...). Coordinates
    are unit-sphere view-plane units scaled by style.scale; axes span [-1, 1].

    Raises:
        ValueError: If a color is not a valid color specification.
    """
    import matplotlib

    matplotlib.use('Agg')
    import matplotlib.pyplot as plt
    from matplotlib.collections import LineCollection
    from matplotlib.patches import Circle

    scale = style.scale
    fig, ax = plt.subplots(figsize=(FIGURE_INCHES, FIGURE_INCHES))
    try:
        fig.patch.set_facecolor(style.background_color)
        ax.set_facecolor(style.background_color)
        for group in groups:
            color = group.color or style.line_color
            if group.lines:
                segments = [
                    [(x1 * scale, y1 * scale), (x2 * scale, y2 * scale)]
                    for x1, y1, x2, y2 in group.lines
                ]
                ax.add_collection(
                    LineCollection(
                        segments,
                        colors=color,
                        linewidths=style.line_width,
                        capstyle='round',
                        joinstyle='round',
                    )
                )
            for x, y, r in group.dots:
                ax.add_patch(
                    Circle((x * scale, y * scale), r * scale, facecolor=color, edgecolor='none')
                )
        ax.set_xlim(-1.0, 1.0)
        ax.set_ylim(-1.0, 1.0)
        ax.set_aspect('equal')
        ax.set_axis_off()
        fig.savefig(output_path, dpi=DPI, facecolor=style.background_color)
    finally:
        plt.close(fig)
