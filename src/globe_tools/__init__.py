"""Globe drawing tools: geographic projection and path generation.

This package turns latitude/longitude data into drawing commands for a
2.5D rendering backend:
- Spherical projection, haversine distance and great-circle interpolation
- Graticule (parallels and meridians) and boundary path segment generators
- Globe orchestration: view centering and atomic, colorable drawing groups

A reference backend (Pinhole) writes PostScript or matplotlib images.
"""

from globe_tools.globe import Globe
from globe_tools.paths import PathSet
from globe_tools.sphere import GeoPoint, SpherePoint
from globe_tools.style import DEFAULT_STYLE, Style

__all__: list[str] = [
    'DEFAULT_STYLE',
    'GeoPoint',
    'Globe',
    'PathSet',
    'SpherePoint',
    'Style',
]
