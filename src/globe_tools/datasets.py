"""Boundary dataset loading: JSON path lists and GeoJSON into PathSet values.

Accepted documents:
- a list of paths, each a list of {"lat": .., "lng": ..} objects or [lat, lng] pairs;
- an object {"name": .., "paths": [...]} with paths as above;
- GeoJSON FeatureCollection, Feature, or geometry (LineString,
  MultiLineString, Polygon, MultiPolygon, GeometryCollection). GeoJSON positions
  are [lng, lat]; every ring of a polygon becomes one path.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from globe_tools.config import get_dataset_path
from globe_tools.paths import PathSet
from globe_tools.sphere import GeoPoint

logger = logging.getLogger(__name__)

_GEOJSON_TYPES = (
    'FeatureCollection',
    'Feature',
    'GeometryCollection',
    'Point',
    'MultiPoint',
    'LineString',
    'MultiLineString',
    'Polygon',
    'MultiPolygon',
)


def _point_from_json(item: Any) -> GeoPoint:
    """Plain-format point: {"lat", "lng"} (or "lon") object or [lat, lng] pair."""
    if isinstance(item, dict):
        lng = item.get('lng', item.get('lon'))
        if 'lat' not in item or lng is None:
            raise ValueError(f'point object needs "lat" and "lng" keys, got {item!r}')
        return GeoPoint(lat=float(item['lat']), lng=float(lng))
    if isinstance(item, (list, tuple)) and len(item) >= 2:
        return GeoPoint(lat=float(item[0]), lng=float(item[1]))
    raise ValueError(f'invalid point {item!r}')


def _position_from_geojson(item: Any) -> GeoPoint:
    """GeoJSON position [lng, lat, ...]."""
    if not isinstance(item, (list, tuple)) or len(item) < 2:
        raise ValueError(f'invalid GeoJSON position {item!r}')
    return GeoPoint(lat=float(item[1]), lng=float(item[0]))


def paths_from_plain(data: list[Any]) -> list[tuple[GeoPoint, ...]]:
    paths: list[tuple[GeoPoint, ...]] = []
    for index, raw in enumerate(data):
        if not isinstance(raw, list):
            raise ValueError(f'path {index} is not a list of points')
        paths.append(tuple(_point_from_json(item) for item in raw))
    return paths


def paths_from_geojson(obj: dict[str, Any]) -> list[tuple[GeoPoint, ...]]:
    """Extract boundary paths from a GeoJSON object; points are skipped with a warning."""
    kind = obj.get('type')
    if kind == 'FeatureCollection':
        paths: list[tuple[GeoPoint, ...]] = []
        for feature in obj.get('features') or []:
            paths.extend(paths_from_geojson(feature))
        return paths
    if kind == 'Feature':
        geometry = obj.get('geometry')
        if geometry is None:
            return []
        return paths_from_geojson(geometry)
    if kind == 'GeometryCollection':
        paths = []
        for geometry in obj.get('geometries') or []:
            paths.extend(paths_from_geojson(geometry))
        return paths
    coords = obj.get('coordinates')
    if coords is None:
        raise ValueError(f'GeoJSON {kind} has no coordinates')
    if kind == 'LineString':
        lines = [coords]
    elif kind in ('MultiLineString', 'Polygon'):
        lines = coords
    elif kind == 'MultiPolygon':
        lines = [ring for polygon in coords for ring in polygon]
    else:
        logger.warning('Skipping GeoJSON %s geometry (not a boundary)', kind)
        return []
    return [tuple(_position_from_geojson(p) for p in line) for line in lines]


def path_set_from_json(data: Any, name: str) -> PathSet:
    """Build a PathSet from a decoded JSON document.

    Raises:
        ValueError: If the document is not one of the accepted shapes.
    """
    if isinstance(data, list):
        paths = paths_from_plain(data)
    elif isinstance(data, dict) and data.get('type') in _GEOJSON_TYPES:
        paths = paths_from_geojson(data)
    elif isinstance(data, dict) and isinstance(data.get('paths'), list):
        paths = paths_from_plain(data['paths'])
    else:
        raise ValueError('dataset must be a list of paths, a {"paths": [...]} object, or GeoJSON')
    short = [i for i, p in enumerate(paths) if len(p) < 2]
    if short:
        logger.warning('Path set %r: %d paths with fewer than 2 points', name, len(short))
    return PathSet(name=name, paths=tuple(paths))


def load_path_set(path: str | os.PathLike[str], name: str | None = None) -> PathSet:
    """Load a boundary dataset file.

    Parameters:
        path: JSON or GeoJSON file.
        name: PathSet name; defaults to the document's "name", else the file stem.

    Returns:
        Loaded PathSet.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not valid JSON or not an accepted shape.
    """
    p = Path(path)
    with p.open(encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f'{p}: invalid JSON: {e}') from e
    try:
        if name is None:
            name = str(data['name']) if isinstance(data, dict) and data.get('name') else p.stem
        path_set = path_set_from_json(data, name)
    except (TypeError, ValueError) as e:
        raise ValueError(f'{p}: {e}') from e
    logger.info(
        'Loaded path set %r from %s: %d paths, %d points',
        path_set.name,
        p,
        len(path_set),
        path_set.point_count(),
    )
    return path_set


def load_named_path_set(name: str) -> PathSet:
    """Load <GLOBE_DATA_PATH>/<name>.json as the PathSet called name."""
    return load_path_set(get_dataset_path(name), name=name)
