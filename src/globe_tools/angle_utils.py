"""Angle helpers: degree/radian conversion, degree trig, DMS parsing and formatting."""

from __future__ import annotations

import math
import re

from globe_tools.constants import ARCMIN_PER_DEGREE, ARCSEC_PER_DEGREE, HALF_CIRCLE_DEGREES

_HEMISPHERES = {'N': 1.0, 'E': 1.0, 'S': -1.0, 'W': -1.0}


def degree_to_radian(degree: float) -> float:
    return math.pi * degree / HALF_CIRCLE_DEGREES


def radian_to_degree(radian: float) -> float:
    return HALF_CIRCLE_DEGREES * radian / math.pi


def sind(degree: float) -> float:
    """Sine of an angle given in degrees."""
    return math.sin(degree_to_radian(degree))


def cosd(degree: float) -> float:
    """Cosine of an angle given in degrees."""
    return math.cos(degree_to_radian(degree))


def parse_angle(string: str) -> float | None:
    """Parse an angle given as degrees, minutes, and seconds.

    Accepts three numbers (deg, min, sec), two (deg, min), or one (deg),
    separated by whitespace, colons or degree/prime marks.
    Minutes and seconds must be non-negative. A leading minus or a trailing
    hemisphere letter S or W makes the result negative (N and E are accepted
    and leave it positive).

    Parameters:
        string: Angle text (e.g. "45", "-33 51 54", "151 12 36E", "40:26:46N").

    Returns:
        Angle in decimal degrees, or None on parse failure.
    """
    s = string.strip().upper()
    if len(s) == 0:
        return None
    sign = 1.0
    if s[-1] in _HEMISPHERES:
        sign = _HEMISPHERES[s[-1]]
        s = s[:-1].strip()
        if s.startswith('-'):
            return None
    if s.startswith('-'):
        sign = -sign
        s = s[1:]
    elif s.startswith('+'):
        s = s[1:]
    parts = [p for p in re.split(r'[\s:°′″\'"]+', s) if p]
    if not 1 <= len(parts) <= 3:
        return None
    try:
        values = [float(p) for p in parts]
    except ValueError:
        return None
    if any(v < 0 for v in values):
        return None
    angle = values[0]
    if len(values) >= 2:
        angle += values[1] / ARCMIN_PER_DEGREE
    if len(values) == 3:
        angle += values[2] / ARCSEC_PER_DEGREE
    return sign * angle


def dms_string(
    value: float,
    separator: str = 'dms',
    ndecimal: int = 1,
) -> str:
    """Format decimal degrees as degrees, minutes, seconds.

    Parameters:
        value: Angle in degrees.
        separator: 3-character string of unit markers (e.g. 'dms' or "d'\\"").
            Shorter strings fall back to blanks.
        ndecimal: Decimal places for seconds.

    Returns:
        Formatted string (e.g. "-33d 51m 54.0s").
    """
    if len(separator) < 3:
        sep1 = sep2 = sep3 = ' '
    else:
        sep1, sep2, sep3 = separator[0], separator[1], separator[2]
    negative = value < 0
    ntens = 10**ndecimal
    total = round(abs(value) * ARCSEC_PER_DEGREE * ntens)
    isec, frac = divmod(total, ntens)
    imin, isec = divmod(isec, 60)
    ideg, imin = divmod(imin, 60)
    seconds = f'{isec:02d}.{frac:0{ndecimal}d}' if ndecimal > 0 else f'{isec:02d}'
    out = f'{ideg}{sep1} {imin:02d}{sep2} {seconds}{sep3}'.rstrip()
    if negative and total != 0:
        out = '-' + out
    return out
