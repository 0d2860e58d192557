"""British National Grid to WGS 84 conversion.

Converts OSGB36 eastings/northings to WGS 84 longitude/latitude using a
fixed Transverse Mercator definition on the Airy ellipsoid followed by
a 7-parameter Helmert shift. Accuracy is around 3 metres, which is
ample for site boundaries of 100-1000 m.

No bounds check is applied: callers validate grid references before
converting. Non-finite input yields ``(nan, nan)``.
"""

from __future__ import annotations

import functools
import logging
import math
from typing import TYPE_CHECKING

from marine_site_geometry.core.constants import (
    BRITISH_NATIONAL_GRID_DEFINITION,
    WGS84_CRS,
)

if TYPE_CHECKING:
    from pyproj import Transformer

logger = logging.getLogger("marine_site_geometry.mapping.datum")


@functools.lru_cache(maxsize=1)
def _bng_to_wgs84() -> Transformer:
    """Build the OSGB36 -> WGS 84 transformer once per process."""
    from pyproj import CRS, Transformer

    bng = CRS.from_proj4(BRITISH_NATIONAL_GRID_DEFINITION)
    logger.debug(
        "Created British National Grid transformer | definition=%s",
        BRITISH_NATIONAL_GRID_DEFINITION,
    )
    return Transformer.from_crs(bng, WGS84_CRS, always_xy=True)


def osgb36_to_wgs84(eastings: float, northings: float) -> tuple[float, float]:
    """Convert a British National Grid position to WGS 84.

    Args:
        eastings: OSGB36 easting in metres.
        northings: OSGB36 northing in metres.

    Returns:
        ``(longitude, latitude)`` in decimal degrees.
    """
    if not (math.isfinite(eastings) and math.isfinite(northings)):
        return (math.nan, math.nan)

    lon, lat = _bng_to_wgs84().transform(eastings, northings)
    return (float(lon), float(lat))
