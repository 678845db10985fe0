"""Configuration: dataset and output paths from environment."""

import os
from pathlib import Path

# Env var overrides with defaults relative to the working directory.
DEFAULT_DATA_PATH = './data'
DEFAULT_OUTPUT_PATH = '.'
DATASET_SUFFIX = '.json'


def get_data_path() -> str:
    """Return boundary dataset directory (GLOBE_DATA_PATH env var or default).

    Returns:
        Path string.
    """
    return os.environ.get('GLOBE_DATA_PATH', DEFAULT_DATA_PATH)


def get_output_path() -> str:
    """Return directory for relative output files (GLOBE_OUTPUT_PATH env var or default).

    Returns:
        Path string.
    """
    return os.environ.get('GLOBE_OUTPUT_PATH', DEFAULT_OUTPUT_PATH)


def get_dataset_path(name: str) -> Path:
    """Return the file holding the named dataset (e.g. 'land' -> <data>/land.json)."""
    return Path(get_data_path()) / f'{name}{DATASET_SUFFIX}'


def resolve_output_path(output: str) -> Path:
    """Resolve an output file name against the output directory (absolute paths kept)."""
    path = Path(output)
    if path.is_absolute():
        return path
    return Path(get_output_path()) / path
