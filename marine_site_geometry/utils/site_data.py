"""Site details embedded in the review page.

The page renders the session's site details as a JSON blob for the map
widget. These helpers decode it and classify how the coordinates were
provided.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from marine_site_geometry.core.constants import COORDINATES_TYPE_FILE, COORDINATES_TYPE_MANUAL
from marine_site_geometry.core.exceptions import ValidationError


class SiteDataError(ValidationError):
    """Raised when the embedded site details are not a JSON object."""

    default_stage = "site_data"
    default_code = "SITE_DATA_INVALID"


def load_site_details(text: str | None) -> dict[str, Any] | None:
    """Decode the embedded site details.

    Returns ``None`` when there is nothing to decode.

    Raises:
        SiteDataError: If the text is not JSON or not a JSON object.
    """
    if text is None or not text.strip():
        return None

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"Site details are not valid JSON: {exc}"
        raise SiteDataError(msg) from exc

    if not isinstance(data, dict):
        msg = f"Site details must be a JSON object, got {type(data).__name__}"
        raise SiteDataError(msg)
    return data


def has_valid_file_coordinates(site_details: Mapping[str, Any]) -> bool:
    """File upload site whose GeoJSON is present and an object."""
    geojson = site_details.get("geoJSON")
    return (
        site_details.get("coordinatesType") == COORDINATES_TYPE_FILE
        and bool(geojson)
        and isinstance(geojson, Mapping)
    )


def has_manual_coordinates(site_details: Mapping[str, Any]) -> bool:
    return site_details.get("coordinatesType") == COORDINATES_TYPE_MANUAL


def has_valid_manual_coordinates(site_details: Mapping[str, Any]) -> bool:
    return has_manual_coordinates(site_details) and bool(site_details.get("coordinates"))
