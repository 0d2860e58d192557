"""Shared constants for site geometry and map display.

Geodetic parameters for the British National Grid, the sphere used for
circle generation, and the default map view.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# British National Grid (OSGB36, EPSG:27700) Transverse Mercator
# ---------------------------------------------------------------------------

TRUE_ORIGIN_LATITUDE: float = 49.0
TRUE_ORIGIN_LONGITUDE: float = -2.0
CENTRAL_MERIDIAN_SCALE_FACTOR: float = 0.9996012717
FALSE_EASTING_M: float = 400_000.0
FALSE_NORTHING_M: float = -100_000.0
ELLIPSOID: str = "airy"

# ---------------------------------------------------------------------------
# Helmert shift OSGB36 -> WGS 84 (~3 m accuracy)
# ---------------------------------------------------------------------------

HELMERT_DX_M: float = 446.448
HELMERT_DY_M: float = -125.157
HELMERT_DZ_M: float = 542.06
HELMERT_RX_ARCSEC: float = 0.15
HELMERT_RY_ARCSEC: float = 0.247
HELMERT_RZ_ARCSEC: float = 0.842
HELMERT_SCALE_PPM: float = -20.489

BRITISH_NATIONAL_GRID_DEFINITION: str = " ".join(
    [
        "+proj=tmerc",
        f"+lat_0={TRUE_ORIGIN_LATITUDE:g}",
        f"+lon_0={TRUE_ORIGIN_LONGITUDE:g}",
        f"+k={CENTRAL_MERIDIAN_SCALE_FACTOR}",
        f"+x_0={FALSE_EASTING_M:g}",
        f"+y_0={FALSE_NORTHING_M:g}",
        f"+ellps={ELLIPSOID}",
        "+towgs84="
        + ",".join(
            f"{v:g}"
            for v in (
                HELMERT_DX_M,
                HELMERT_DY_M,
                HELMERT_DZ_M,
                HELMERT_RX_ARCSEC,
                HELMERT_RY_ARCSEC,
                HELMERT_RZ_ARCSEC,
                HELMERT_SCALE_PPM,
            )
        ),
        "+units=m",
        "+no_defs",
        "+type=crs",
    ]
)
"""PROJ definition of the British National Grid with its WGS 84 shift."""

WGS84_CRS: str = "EPSG:4326"
WEB_MERCATOR_CRS: str = "EPSG:3857"

# ---------------------------------------------------------------------------
# Circle approximation
# ---------------------------------------------------------------------------

EARTH_RADIUS_M: float = 6_378_137.0
"""Sphere radius used for circle generation (WGS 84 semi-major axis)."""

CIRCLE_APPROXIMATION_SIDES: int = 64
MIN_CIRCLE_SIDES: int = 3

# Minimum distinct vertices for a polygon site (closure not counted)
MIN_POLYGON_POINTS: int = 3

# ---------------------------------------------------------------------------
# Map view defaults
# ---------------------------------------------------------------------------

DEFAULT_UK_CENTRE_LONGITUDE: float = -3.5
DEFAULT_UK_CENTRE_LATITUDE: float = 54.0
DEFAULT_FALLBACK_ZOOM: int = 12
DEFAULT_MAP_PADDING_PX: int = 100
DEFAULT_FIT_MAX_ZOOM: int = 14
DEFAULT_FIT_MIN_ZOOM: int = 8

# Manual point/circle sites are centred at this zoom
DETAILED_ZOOM_LEVEL: int = 14

# Uploaded-file sites are fitted with tighter padding and a higher ceiling
FILE_UPLOAD_PADDING_PX: int = 20
FILE_UPLOAD_MAX_ZOOM: int = 16

# ---------------------------------------------------------------------------
# Site details payload values
# ---------------------------------------------------------------------------

COORDINATES_TYPE_FILE: str = "file"
COORDINATES_TYPE_MANUAL: str = "coordinates"
