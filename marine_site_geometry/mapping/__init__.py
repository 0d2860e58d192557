"""Site map geometry: composable stages.

Raw coordinate input flows leaf to root through:

- **datum**: OSGB36 eastings/northings -> WGS 84 (pyproj, Helmert shift)
- **circle**: centre + radius -> closed geographic ring
- **parser**: form payloads -> projected points, fail closed
- **features**: circle/boundary/GeoJSON features via a ``MapToolkit``
- **view**: fit the map to an extent, falling back to the UK view
- **visualiser**: site details -> features on a vector source

``toolkit`` holds the injected-capability protocols and the
shapely/pyproj implementation.
"""

from __future__ import annotations

from marine_site_geometry.mapping.circle import (
    CircleGeometryError,
    calculate_circle_point,
    create_geographic_circle,
)
from marine_site_geometry.mapping.datum import osgb36_to_wgs84
from marine_site_geometry.mapping.features import FeatureFactory
from marine_site_geometry.mapping.parser import (
    CoordinateParser,
    parse_coordinates,
    parse_multiple_coordinates,
)
from marine_site_geometry.mapping.toolkit import (
    EMPTY_EXTENT,
    GeoJSONReader,
    GeoJSONReadError,
    MapToolkit,
    ShapelyToolkit,
    VectorSource,
)
from marine_site_geometry.mapping.view import MapViewManager, is_valid_extent
from marine_site_geometry.mapping.visualiser import SiteVisualiser

__all__ = [
    "EMPTY_EXTENT",
    "CircleGeometryError",
    "CoordinateParser",
    "FeatureFactory",
    "GeoJSONReadError",
    "GeoJSONReader",
    "MapToolkit",
    "MapViewManager",
    "ShapelyToolkit",
    "SiteVisualiser",
    "VectorSource",
    "calculate_circle_point",
    "create_geographic_circle",
    "is_valid_extent",
    "osgb36_to_wgs84",
    "parse_coordinates",
    "parse_multiple_coordinates",
]
