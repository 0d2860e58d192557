"""Site visualiser: draws a site's details onto a map.

Takes the site details embedded in the review page and turns them into
features on the map's vector source, then positions the view:

- Uploaded file: GeoJSON features, view fitted to all of them.
- Single point with a width: circle, view centred at zoom 14.
- Single point without a width: point, view centred at zoom 14.
- Boundary (three or more points): polygon, view fitted to it.

Input that does not parse draws nothing; the page falls back to its
"Failed to load map" state on its own.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from marine_site_geometry.core.config import MapConfig
from marine_site_geometry.core.constants import (
    DETAILED_ZOOM_LEVEL,
    FILE_UPLOAD_MAX_ZOOM,
    FILE_UPLOAD_PADDING_PX,
)
from marine_site_geometry.mapping.features import FeatureFactory
from marine_site_geometry.mapping.parser import CoordinateParser, coerce_number
from marine_site_geometry.mapping.view import MapViewManager
from marine_site_geometry.utils.site_data import (
    has_valid_file_coordinates,
    has_valid_manual_coordinates,
)

if TYPE_CHECKING:
    from marine_site_geometry.mapping.toolkit import GeoJSONReader, MapToolkit, VectorSource
    from marine_site_geometry.mapping.view import MapHandle
    from marine_site_geometry.models.contracts import SiteDetailsPayload

logger = logging.getLogger("marine_site_geometry.mapping.visualiser")


class SiteVisualiser:
    """Adds site features to a vector source and positions the map."""

    def __init__(
        self,
        toolkit: MapToolkit,
        source: VectorSource,
        reader: GeoJSONReader,
        map_handle: MapHandle,
        *,
        view_manager: MapViewManager | None = None,
        config: MapConfig | None = None,
    ) -> None:
        self.toolkit = toolkit
        self.source = source
        self.reader = reader
        self.map = map_handle
        self.config = config or MapConfig()
        self.view_manager = view_manager or MapViewManager(self.config)
        self.feature_factory = FeatureFactory(toolkit)
        self.coordinate_parser = CoordinateParser()

    # ------------------------------------------------------------------
    # Individual site shapes
    # ------------------------------------------------------------------

    def display_point_site(self, coordinates: Sequence[float]) -> None:
        point = self.toolkit.create_point(coordinates)
        self.source.add_feature(self.toolkit.create_feature(point))

    def display_circular_site(self, centre: Sequence[float], diameter_m: float) -> None:
        feature = self.feature_factory.create_circle_feature(
            centre, diameter_m, self.config.circle_sides
        )
        self.source.add_feature(feature)

    def display_polygon_site(self, coordinates: Sequence[Sequence[float]]) -> bool:
        """Add a boundary feature. Returns ``False`` if the boundary is too short."""
        feature = self.feature_factory.create_polygon_feature(coordinates)
        if feature is None:
            return False
        self.source.add_feature(feature)
        return True

    def display_file_upload_data(self, geojson: object) -> None:
        """Add uploaded-file features and fit the view to them."""
        features = self.feature_factory.create_features_from_geojson(self.reader, geojson)
        if not features:
            return

        self.source.add_features(features)
        padding = FILE_UPLOAD_PADDING_PX
        self.view_manager.fit_map_to_all_features(
            self.map,
            self.source,
            {"padding": [padding, padding, padding, padding], "max_zoom": FILE_UPLOAD_MAX_ZOOM},
        )
        logger.info("Displayed uploaded file site | features=%d", len(features))

    # ------------------------------------------------------------------
    # Manual entry
    # ------------------------------------------------------------------

    def display_manual_coordinates(self, site_details: SiteDetailsPayload) -> None:
        """Draw a manually entered point, circle or boundary."""
        coordinates = site_details.get("coordinates")
        if not coordinates:
            return

        coordinate_system = site_details.get("coordinateSystem")
        project = self.toolkit.project_forward

        if isinstance(coordinates, Sequence) and not isinstance(coordinates, str):
            boundary = self.coordinate_parser.parse_multiple_coordinates(
                coordinate_system, coordinates, project
            )
            if boundary is None or not self.display_polygon_site(boundary):
                logger.debug("Boundary did not parse | system=%s", coordinate_system)
                return
            self.view_manager.fit_map_to_all_features(self.map, self.source)
            logger.info("Displayed boundary site | points=%d", len(boundary))
            return

        map_coordinates = self.coordinate_parser.parse_coordinates(
            coordinate_system, coordinates, project
        )
        if map_coordinates is None:
            logger.debug("Point did not parse | system=%s", coordinate_system)
            return

        width = coerce_number(site_details.get("circleWidth"))
        if width:
            self.display_circular_site(map_coordinates, width)
        else:
            self.display_point_site(map_coordinates)

        self.centre_map_view(map_coordinates, DETAILED_ZOOM_LEVEL)
        logger.info("Displayed %s site", "circular" if width else "point")

    def display_site(self, site_details: SiteDetailsPayload) -> None:
        """Replace whatever is on the map with the site's features.

        The source is cleared first, so repeated calls never stack sites.
        """
        self.clear_features()

        if has_valid_file_coordinates(site_details):
            self.display_file_upload_data(site_details["geoJSON"])
        elif has_valid_manual_coordinates(site_details):
            self.display_manual_coordinates(site_details)
        else:
            logger.debug(
                "No displayable coordinates | coordinatesType=%r",
                site_details.get("coordinatesType"),
            )

    # ------------------------------------------------------------------
    # Map state
    # ------------------------------------------------------------------

    def clear_features(self) -> None:
        self.source.clear()

    def centre_map_view(
        self, coordinates: Sequence[float], zoom: float = DETAILED_ZOOM_LEVEL
    ) -> None:
        self.view_manager.centre_map_view(self.map, coordinates, zoom)
