"""Immutable drawing style passed to each Globe at construction."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Style:
    """Colors, line width and scale used when drawing and rendering a globe.

    Colors are any matplotlib color specification (names such as 'lightgrey',
    hex strings such as '#336699').
    """

    graticule_color: str = 'lightgrey'
    line_color: str = 'black'
    dot_color: str = 'red'
    background_color: str = 'white'
    line_width: float = 0.1
    scale: float = 0.7

    def __post_init__(self) -> None:
        if not self.line_width > 0.0:
            raise ValueError(f'line_width must be positive, got {self.line_width!r}')
        if not self.scale > 0.0:
            raise ValueError(f'scale must be positive, got {self.scale!r}')

    def replace(self, **changes: Any) -> Style:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)


DEFAULT_STYLE = Style()

# camelCase option names -> Style field names.
_STYLE_ALIASES: dict[str, str] = {
    'graticuleColor': 'graticule_color',
    'lineColor': 'line_color',
    'dotColor': 'dot_color',
    'backgroundColor': 'background_color',
    'bgColor': 'background_color',
    'lineWidth': 'line_width',
    'scale': 'scale',
}
_FLOAT_FIELDS = ('line_width', 'scale')


def style_from_mapping(options: Mapping[str, Any], base: Style = DEFAULT_STYLE) -> Style:
    """Build a Style from option names (camelCase or snake_case) over a base style.

    Unknown keys are logged and ignored.

    Parameters:
        options: Option name -> value. Numeric options may be given as strings.
        base: Style supplying values for options not given.

    Returns:
        New Style.

    Raises:
        ValueError: If a numeric option is not a positive number.
    """
    field_names = {f.name for f in dataclasses.fields(Style)}
    changes: dict[str, Any] = {}
    for key, value in options.items():
        name = _STYLE_ALIASES.get(key, key)
        if name not in field_names:
            logger.warning('Unknown style option %r ignored', key)
            continue
        if name in _FLOAT_FIELDS:
            try:
                value = float(value)
            except (TypeError, ValueError) as e:
                raise ValueError(f'style option {key!r} must be a number, got {value!r}') from e
        else:
            value = str(value)
        changes[name] = value
    return base.replace(**changes)


def parse_style_assignments(assignments: list[str]) -> dict[str, str]:
    """Split KEY=VALUE strings (CLI --style) into a mapping.

    Raises:
        ValueError: If an item has no '=' or an empty key.
    """
    options: dict[str, str] = {}
    for item in assignments:
        key, sep, value = item.partition('=')
        key = key.strip()
        if not sep or not key:
            raise ValueError(f'style option must be KEY=VALUE, got {item!r}')
        options[key] = value.strip()
    return options
