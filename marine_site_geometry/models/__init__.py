"""Data models and schemas.

Defines the data structures used throughout the package:
- CoordinateSystem: WGS 84 / OSGB36 closed enum
- Wgs84Coordinate, Osgb36Coordinate: single positions
- CircleDescriptor: centre + radius for circular sites
- MapFeature: geometry handed to the map's vector layer
"""

from marine_site_geometry.models.coordinates import (
    CircleDescriptor,
    CoordinateSystem,
    Osgb36Coordinate,
    Wgs84Coordinate,
)
from marine_site_geometry.models.feature import MapFeature

__all__ = [
    "CircleDescriptor",
    "CoordinateSystem",
    "MapFeature",
    "Osgb36Coordinate",
    "Wgs84Coordinate",
]
