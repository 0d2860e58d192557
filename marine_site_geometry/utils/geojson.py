"""GeoJSON helpers for uploaded-file sites."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from marine_site_geometry.models.contracts import ExtractedCoordinates


def extract_coordinates_from_geojson(geojson: object) -> list[ExtractedCoordinates]:
    """Pull the geometry type and raw coordinates out of each feature.

    Features without geometry coordinates are skipped. Returns an empty
    list when there are no features.
    """
    if not isinstance(geojson, Mapping) or not geojson.get("features"):
        return []

    extracted: list[ExtractedCoordinates] = []
    for feature in geojson["features"]:
        geometry = feature.get("geometry") if isinstance(feature, Mapping) else None
        if isinstance(geometry, Mapping) and geometry.get("coordinates"):
            extracted.append(
                {"type": geometry.get("type", ""), "coordinates": geometry["coordinates"]}
            )
    return extracted
