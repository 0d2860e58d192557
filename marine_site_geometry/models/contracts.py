"""Payload contracts for data handed in by the surrounding web application.

Form handlers, the session cache and the file-upload geo-parser all
exchange plain JSON-shaped dicts with this package. Each shape is
declared here as a ``TypedDict`` so field names live in one place.

Design notes:
- ``TypedDict`` rather than ``dataclass`` because the payloads arrive as
  dicts decoded from JSON and are consumed without conversion.
- Form values are typed ``str | float``: HTML fields arrive as strings,
  the session cache may hold numbers.
"""

from __future__ import annotations

from typing import TypedDict

# ---------------------------------------------------------------------------
# Manual coordinate entry
# ---------------------------------------------------------------------------


class Wgs84Payload(TypedDict):
    """A single WGS 84 point as submitted from the coordinates form."""

    latitude: str | float
    longitude: str | float


class Osgb36Payload(TypedDict):
    """A single British National Grid point as submitted from the coordinates form."""

    eastings: str | float
    northings: str | float


class SiteDetailsPayload(TypedDict, total=False):
    """Site details embedded in the review page for the map widget."""

    coordinatesType: str
    coordinateSystem: str
    coordinates: Wgs84Payload | Osgb36Payload | list[Wgs84Payload] | list[Osgb36Payload]
    circleWidth: str | float
    geoJSON: GeoJSONFeatureCollection
    fileUploadType: str


# ---------------------------------------------------------------------------
# Uploaded-file GeoJSON
# ---------------------------------------------------------------------------


class GeoJSONGeometry(TypedDict):
    type: str
    coordinates: list[object]


class GeoJSONFeature(TypedDict, total=False):
    type: str
    geometry: GeoJSONGeometry | None
    properties: dict[str, object] | None


class GeoJSONFeatureCollection(TypedDict, total=False):
    type: str
    features: list[GeoJSONFeature]


class ExtractedCoordinates(TypedDict):
    """Geometry type and raw coordinates pulled from one GeoJSON feature."""

    type: str
    coordinates: list[object]


# ---------------------------------------------------------------------------
# Map view
# ---------------------------------------------------------------------------


class FitOptions(TypedDict, total=False):
    """Options for fitting the map view to an extent. Merged key-by-key over defaults."""

    padding: list[int]
    max_zoom: int
    min_zoom: int
    duration: int
