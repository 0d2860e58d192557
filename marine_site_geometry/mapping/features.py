"""Feature assembly for circle, boundary and uploaded-file sites.

Builds renderable features from already-parsed coordinates through the
injected ``MapToolkit``:

- Circle sites: centre + width -> 64-sided geographic circle, projected.
- Boundary sites: three or more points, auto-closed into a ring.
- File sites: GeoJSON FeatureCollection read through a ``GeoJSONReader``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from marine_site_geometry.core.constants import CIRCLE_APPROXIMATION_SIDES, MIN_POLYGON_POINTS
from marine_site_geometry.mapping.circle import create_geographic_circle

if TYPE_CHECKING:
    from collections.abc import Sequence

    from marine_site_geometry.mapping.toolkit import GeoJSONReader, MapToolkit

logger = logging.getLogger("marine_site_geometry.mapping.features")


class FeatureFactory:
    """Creates map features using the supplied toolkit."""

    def __init__(self, toolkit: MapToolkit) -> None:
        self._toolkit = toolkit

    @property
    def toolkit(self) -> MapToolkit:
        return self._toolkit

    def create_circle_feature(
        self,
        centre: Sequence[float],
        diameter_m: float,
        sides: int = CIRCLE_APPROXIMATION_SIDES,
    ) -> Any:
        """Create a circular site feature.

        Args:
            centre: Circle centre in map coordinates.
            diameter_m: Width of the site in metres.
            sides: Number of sides used to approximate the circle.

        Returns:
            A polygon feature whose ring has ``sides + 1`` vertices.
        """
        toolkit = self._toolkit
        centre_lon_lat = toolkit.project_inverse(centre)
        ring = create_geographic_circle(centre_lon_lat, diameter_m / 2, sides)
        projected = [toolkit.project_forward(lon_lat) for lon_lat in ring]
        return toolkit.create_feature(toolkit.create_polygon([projected]))

    def create_polygon_feature(self, coordinates: Sequence[Sequence[float]] | None) -> Any:
        """Create a boundary site feature, closing the ring if needed.

        Returns ``None`` when fewer than three points are supplied.
        """
        if not coordinates or len(coordinates) < MIN_POLYGON_POINTS:
            return None

        ring = list(coordinates)
        first, last = ring[0], ring[-1]
        if first[0] != last[0] or first[1] != last[1]:
            ring.append(first)

        return self._toolkit.create_feature(self._toolkit.create_polygon([ring]))

    def create_features_from_geojson(
        self, reader: GeoJSONReader, geojson: object
    ) -> list[Any]:
        """Read uploaded-file GeoJSON into features in the map projection.

        Returns an empty list when there is no ``features`` list to read.
        """
        if not isinstance(geojson, Mapping) or not isinstance(geojson.get("features"), list):
            logger.debug("GeoJSON has no features list; nothing to read")
            return []

        return reader.read_features(geojson, feature_projection=self._toolkit.projection)
