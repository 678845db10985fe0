"""Tests for the globe-tools command line."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

from globe_tools.cli import main as cli_main


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    monkeypatch.setattr(sys, 'argv', ['globe-tools', *argv])
    return cli_main.main()


def test_render_postscript(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """render draws the requested shapes into a PostScript file."""
    output = tmp_path / 'globe.ps'
    rc = _run(
        monkeypatch,
        'render',
        '--center', '40N', '100W',
        '--graticule', '30',
        '--dot', '40.7', '-74.0', '0.02',
        '--great-circle', '40.7', '-74.0', '51.5', '-0.1',
        '--style', 'lineColor=navy',
        '-o', str(output),
    )
    assert rc == 0
    text = output.read_text()
    assert text.startswith('%!PS-Adobe-2.0 EPSF-2.0')
    assert 'arc' in text
    # navy, for the great circle
    assert '0.000 0.000 0.502 setrgbcolor' in text
    assert text.rstrip().endswith('showpage')


def test_render_relative_output_uses_output_path(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv('GLOBE_OUTPUT_PATH', str(tmp_path))
    assert _run(monkeypatch, 'render', '--parallels', '45', '-o', 'p.ps') == 0
    assert (tmp_path / 'p.ps').exists()


def test_render_land_from_data_path(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """--land without a file reads land.json from GLOBE_DATA_PATH."""
    (tmp_path / 'land.json').write_text(
        json.dumps([[[0, 0], [0, 10], [10, 10]]]), encoding='utf-8'
    )
    monkeypatch.setenv('GLOBE_DATA_PATH', str(tmp_path))
    output = tmp_path / 'land.ps'
    assert _run(monkeypatch, 'render', '--land', '--center', '5', '5', '-o', str(output)) == 0
    assert output.read_text().count(' M\n') >= 2


def test_render_missing_dataset(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv('GLOBE_DATA_PATH', str(tmp_path))
    rc = _run(monkeypatch, 'render', '--countries', '-o', str(tmp_path / 'x.ps'))
    assert rc == 1
    assert 'Error:' in capsys.readouterr().err


def test_render_bad_style(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    rc = _run(monkeypatch, 'render', '--style', 'scale=big', '-o', str(tmp_path / 'x.ps'))
    assert rc == 1
    assert 'scale' in capsys.readouterr().err


def test_distance(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """A quarter of a great circle on the Earth."""
    assert _run(monkeypatch, 'distance', '0', '0', '0', '90') == 0
    assert capsys.readouterr().out.strip() == '10007.543'


def test_distance_custom_radius(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(monkeypatch, 'distance', '0', '0', '0', '180', '--radius', '1') == 0
    assert capsys.readouterr().out.strip() == '3.142'


def test_interpolate(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(monkeypatch, 'interpolate', '0', '0', '0', '90', '0.5') == 0
    assert capsys.readouterr().out.strip() == '0.000000 45.000000'


def test_interpolate_bad_fraction(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    assert _run(monkeypatch, 'interpolate', '0', '0', '0', '90', '1.5') == 1
    assert 'fraction' in capsys.readouterr().err


def test_bad_angle(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    """Unparseable angles are reported, not raised."""
    assert _run(monkeypatch, 'distance', 'north', '0', '0', '90') == 1
    assert "invalid latitude 'north'" in capsys.readouterr().err
