"""Tests for matplotlib globe output."""

from __future__ import annotations

from pathlib import Path

from globe_tools.rendering.matplotlib_view import render_groups_mpl
from globe_tools.rendering.pinhole import ProjectedGroup
from globe_tools.style import DEFAULT_STYLE, Style


def _groups() -> list[ProjectedGroup]:
    return [
        ProjectedGroup(lines=[(0.0, 0.0, 0.5, 0.5), (0.5, 0.5, 0.6, 0.2)], dots=[], color='navy'),
        ProjectedGroup(lines=[], dots=[(0.1, -0.2, 0.03)], color=None),
    ]


def test_render_groups_png(tmp_path: Path) -> None:
    """PNG output is written."""
    target = tmp_path / 'globe.png'
    render_groups_mpl(target, _groups(), DEFAULT_STYLE)
    assert target.read_bytes()[:4] == b'\x89PNG'


def test_render_groups_svg_by_suffix(tmp_path: Path) -> None:
    """The format follows the suffix."""
    target = tmp_path / 'globe.svg'
    render_groups_mpl(target, _groups(), Style(background_color='black', line_width=1.0))
    assert '<svg' in target.read_text(encoding='utf-8')


def test_render_no_groups(tmp_path: Path) -> None:
    """An empty drawing still produces a background-only image."""
    target = tmp_path / 'empty.png'
    render_groups_mpl(target, [], DEFAULT_STYLE)
    assert target.exists()
