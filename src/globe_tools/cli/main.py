"""CLI entry point: globe-tools render|distance|interpolate subcommands."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import cast

from globe_tools.angle_utils import dms_string, parse_angle
from globe_tools.config import resolve_output_path
from globe_tools.constants import DEFAULT_GRATICULE_INTERVAL, EARTH_RADIUS, GRATICULE_LINE_STEP
from globe_tools.datasets import load_named_path_set, load_path_set
from globe_tools.globe import COUNTRIES, LAND, Globe
from globe_tools.sphere import GeoPoint, haversine_distance, intermediate_point
from globe_tools.style import DEFAULT_STYLE, Style, parse_style_assignments, style_from_mapping

logger = logging.getLogger(__name__)

_ANGLE_HELP = 'Angles: decimal degrees or "DD MM SS" with optional N/S/E/W suffix.'


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or GLOBE_TOOLS_LOG)."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = os.environ.get('GLOBE_TOOLS_LOG', '').upper()
    if env_level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format='%(levelname)s: %(name)s: %(message)s',
        stream=sys.stderr,
    )
    logging.getLogger('matplotlib').setLevel(logging.WARNING)


def _angle(text: str, what: str) -> float:
    """Parse a CLI angle or raise ValueError naming the argument."""
    value = parse_angle(text)
    if value is None:
        raise ValueError(f'invalid {what} {text!r}')
    return value


def _point(lat_text: str, lng_text: str) -> GeoPoint:
    return GeoPoint(lat=_angle(lat_text, 'latitude'), lng=_angle(lng_text, 'longitude'))


def _build_style(args: argparse.Namespace) -> Style:
    """Style from --style-file (JSON object) then --style KEY=VALUE overrides."""
    style = DEFAULT_STYLE
    if args.style_file:
        with open(args.style_file, encoding='utf-8') as f:
            options = json.load(f)
        if not isinstance(options, dict):
            raise ValueError(f'{args.style_file}: style file must hold a JSON object')
        style = style_from_mapping(options, style)
    if args.style:
        style = style_from_mapping(parse_style_assignments(args.style), style)
    return style


def _render_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Draw the requested shapes and render them (render subcommand).

    Parameters:
        parser: Argument parser (unused).
        args: Parsed args; center, graticule, datasets, dots, output, etc.

    Returns:
        Exit code 0 on success, 1 on error.
    """
    del parser
    try:
        globe = Globe(style=_build_style(args), step=args.step)
        if args.land is not None:
            globe.path_sets[LAND] = (
                load_path_set(args.land, name=LAND) if args.land else load_named_path_set(LAND)
            )
        if args.countries is not None:
            globe.path_sets[COUNTRIES] = (
                load_path_set(args.countries, name=COUNTRIES)
                if args.countries
                else load_named_path_set(COUNTRIES)
            )
        extra = [load_path_set(p) for p in args.paths or []]

        if args.center is not None:
            globe.center_on(_angle(args.center[0], 'latitude'), _angle(args.center[1], 'longitude'))
        if args.graticule is not None:
            globe.draw_graticule(args.graticule)
        if args.parallels is not None:
            globe.draw_parallels(args.parallels)
        if args.meridians is not None:
            globe.draw_meridians(args.meridians)
        if LAND in globe.path_sets:
            globe.draw_land_boundaries()
        if COUNTRIES in globe.path_sets:
            globe.draw_country_boundaries()
        for path_set in extra:
            globe.draw_paths(path_set)
        for lat1, lng1, lat2, lng2 in args.great_circle or []:
            globe.draw_great_circle(_point(lat1, lng1), _point(lat2, lng2))
        for lat, lng, radius in args.dot or []:
            globe.draw_dot(_angle(lat, 'latitude'), _angle(lng, 'longitude'), float(radius))

        output = resolve_output_path(args.output)
        globe.render(output)
    except (ValueError, KeyError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    logger.info('Wrote %s', output)
    return 0


def _distance_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Print the great-circle distance between two points (distance subcommand)."""
    del parser
    try:
        p1 = _point(args.lat1, args.lng1)
        p2 = _point(args.lat2, args.lng2)
        if args.radius <= 0.0:
            raise ValueError(f'radius must be positive, got {args.radius!r}')
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    distance = haversine_distance(p1.lat, p1.lng, p2.lat, p2.lng, radius=args.radius)
    print(f'{distance:.3f}')
    return 0


def _interpolate_cmd(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    """Print the point a fraction of the way along the great circle (interpolate subcommand)."""
    del parser
    try:
        p1 = _point(args.lat1, args.lng1)
        p2 = _point(args.lat2, args.lng2)
        if not 0.0 <= args.fraction <= 1.0:
            raise ValueError(f'fraction must be in [0, 1], got {args.fraction!r}')
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1
    p = intermediate_point(p1, p2, args.fraction)
    if args.dms:
        print(f'{dms_string(p.lat)}  {dms_string(p.lng)}')
    else:
        print(f'{p.lat:.6f} {p.lng:.6f}')
    return 0


def _add_point_args(sub: argparse.ArgumentParser) -> None:
    sub.add_argument('lat1', help='First point latitude')
    sub.add_argument('lng1', help='First point longitude')
    sub.add_argument('lat2', help='Second point latitude')
    sub.add_argument('lng2', help='Second point longitude')


def main() -> int:
    parser = argparse.ArgumentParser(
        prog='globe-tools',
        description='Draw geographic globes (graticules, boundaries, dots) to PostScript or images.',
        epilog=_ANGLE_HELP,
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    render_parser = subparsers.add_parser(
        'render', help='Render a globe', epilog=_ANGLE_HELP
    )
    render_parser.add_argument(
        '--center', nargs=2, metavar=('LAT', 'LNG'), default=None, help='Center the view on LAT LNG'
    )
    render_parser.add_argument(
        '--graticule',
        type=float,
        nargs='?',
        const=DEFAULT_GRATICULE_INTERVAL,
        default=None,
        metavar='INTERVAL',
        help=f'Draw parallels and meridians every INTERVAL degrees (default {DEFAULT_GRATICULE_INTERVAL:g})',
    )
    render_parser.add_argument(
        '--parallels', type=float, default=None, metavar='INTERVAL', help='Draw parallels only'
    )
    render_parser.add_argument(
        '--meridians', type=float, default=None, metavar='INTERVAL', help='Draw meridians only'
    )
    render_parser.add_argument(
        '--step',
        type=float,
        default=GRATICULE_LINE_STEP,
        help='Angular step (degrees) between graticule line points',
    )
    render_parser.add_argument(
        '--land',
        nargs='?',
        const='',
        default=None,
        metavar='FILE',
        help='Draw land boundaries (FILE, or land.json under GLOBE_DATA_PATH)',
    )
    render_parser.add_argument(
        '--countries',
        nargs='?',
        const='',
        default=None,
        metavar='FILE',
        help='Draw country boundaries (FILE, or countries.json under GLOBE_DATA_PATH)',
    )
    render_parser.add_argument(
        '--paths', action='append', default=None, metavar='FILE', help='Draw another path set'
    )
    render_parser.add_argument(
        '--dot',
        nargs=3,
        action='append',
        default=None,
        metavar=('LAT', 'LNG', 'RADIUS'),
        help='Draw a dot (radius in globe radii); repeatable',
    )
    render_parser.add_argument(
        '--great-circle',
        nargs=4,
        action='append',
        default=None,
        metavar=('LAT1', 'LNG1', 'LAT2', 'LNG2'),
        help='Draw a great-circle arc; repeatable',
    )
    render_parser.add_argument(
        '--style',
        action='append',
        default=None,
        metavar='KEY=VALUE',
        help='Style option (graticuleColor, lineColor, dotColor, backgroundColor, lineWidth, scale)',
    )
    render_parser.add_argument(
        '--style-file', type=str, default=None, help='JSON object of style options'
    )
    render_parser.add_argument(
        '-o',
        '--output',
        type=str,
        default='globe.ps',
        help='Output file (.ps/.eps PostScript, else matplotlib format by suffix)',
    )
    render_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    render_parser.set_defaults(func=_render_cmd)

    dist_parser = subparsers.add_parser('distance', help='Great-circle distance', epilog=_ANGLE_HELP)
    _add_point_args(dist_parser)
    dist_parser.add_argument(
        '--radius', type=float, default=EARTH_RADIUS, help='Sphere radius (default: Earth, km)'
    )
    dist_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    dist_parser.set_defaults(func=_distance_cmd)

    interp_parser = subparsers.add_parser(
        'interpolate', help='Point along a great circle', epilog=_ANGLE_HELP
    )
    _add_point_args(interp_parser)
    interp_parser.add_argument('fraction', type=float, help='Fraction of the way (0-1)')
    interp_parser.add_argument(
        '--dms', action='store_true', help='Print degrees/minutes/seconds'
    )
    interp_parser.add_argument('-v', '--verbose', action='store_true', help='Show DEBUG logs')
    interp_parser.set_defaults(func=_interpolate_cmd)

    args = parser.parse_args()
    _configure_logging(verbose=args.verbose)
    return cast(int, args.func(parser, args))


if __name__ == '__main__':
    sys.exit(main())
