"""Fixed constants: sphere radius, graticule resolution, angle units."""

import math

# Mean Earth radius (km); default sphere radius for distances.
EARTH_RADIUS = 6371.0

# Angular step (degrees) between consecutive points of a parallel or meridian.
GRATICULE_LINE_STEP = 1.0

# Maximum distance (same units as the radius) between geodesic sample points.
LINE_POINT_INTERVAL = 500.0

# Default spacing (degrees) between graticule lines for the CLI.
DEFAULT_GRATICULE_INTERVAL = 15.0

# Angle: degrees per circle and sexagesimal (DMS)
DEGREES_PER_CIRCLE = 360.0
HALF_CIRCLE_DEGREES = 180.0
QUARTER_CIRCLE_DEGREES = 90.0
ARCMIN_PER_DEGREE = 60.0
ARCSEC_PER_DEGREE = 3600.0
HALF_PI = math.pi / 2.0

# Angular separation (radians) below which two points are treated as coincident
# (or, measured from pi, as antipodal) by great-circle interpolation.
DEGENERATE_SEPARATION = 1e-12
