"""Tests for environment-driven configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from globe_tools import config


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv('GLOBE_DATA_PATH', raising=False)
    monkeypatch.delenv('GLOBE_OUTPUT_PATH', raising=False)
    assert config.get_data_path() == config.DEFAULT_DATA_PATH
    assert config.get_output_path() == config.DEFAULT_OUTPUT_PATH
    assert config.get_dataset_path('land') == Path('./data/land.json')


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Environment variables override both directories."""
    monkeypatch.setenv('GLOBE_DATA_PATH', str(tmp_path / 'geo'))
    monkeypatch.setenv('GLOBE_OUTPUT_PATH', str(tmp_path / 'out'))
    assert config.get_dataset_path('countries') == tmp_path / 'geo' / 'countries.json'
    assert config.resolve_output_path('globe.ps') == tmp_path / 'out' / 'globe.ps'


def test_absolute_output_kept(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv('GLOBE_OUTPUT_PATH', '/somewhere/else')
    target = tmp_path / 'globe.png'
    assert config.resolve_output_path(str(target)) == target
