"""Geographic circle generation.

Approximates a circle of a given radius around a WGS 84 centre as a
closed ring of ``sides + 1`` longitude/latitude pairs, using the
spherical destination-point formula on a sphere of radius 6,378,137 m.

The ring's closing vertex is the first vertex itself, so
``ring[0] == ring[sides]`` holds exactly rather than to within
floating-point error of ``sin(2π)``.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from marine_site_geometry.core.constants import (
    CIRCLE_APPROXIMATION_SIDES,
    EARTH_RADIUS_M,
    MIN_CIRCLE_SIDES,
)
from marine_site_geometry.core.exceptions import ValidationError

if TYPE_CHECKING:
    from collections.abc import Sequence


class CircleGeometryError(ValidationError):
    """Raised when a circle is requested with too few sides."""

    default_stage = "circle"
    default_code = "CIRCLE_SIDES_INVALID"


def create_geographic_circle(
    centre_lon_lat: Sequence[float],
    radius_m: float,
    sides: int = CIRCLE_APPROXIMATION_SIDES,
) -> list[tuple[float, float]]:
    """Generate a closed ring approximating a circle on the sphere.

    Args:
        centre_lon_lat: Circle centre as ``(lon, lat)`` in degrees.
        radius_m: Radius in metres. Zero collapses the ring onto the centre.
        sides: Number of polygon sides (default 64, minimum 3).

    Returns:
        ``sides + 1`` ``(lon, lat)`` tuples; the last equals the first.

    Raises:
        CircleGeometryError: If ``sides`` is less than 3.
    """
    if sides < MIN_CIRCLE_SIDES:
        msg = f"A circle needs at least {MIN_CIRCLE_SIDES} sides, got {sides}"
        raise CircleGeometryError(msg)

    centre_lon, centre_lat = centre_lon_lat[0], centre_lon_lat[1]
    angular_distance = radius_m / EARTH_RADIUS_M

    ring = [
        calculate_circle_point(
            centre_lon,
            centre_lat,
            angular_distance,
            (i * 2 * math.pi) / sides,
        )
        for i in range(sides)
    ]
    ring.append(ring[0])
    return ring


def calculate_circle_point(
    centre_lon: float,
    centre_lat: float,
    angular_distance: float,
    bearing: float,
) -> tuple[float, float]:
    """Destination point from a centre, angular distance and bearing.

    Args:
        centre_lon: Start longitude in degrees.
        centre_lat: Start latitude in degrees.
        angular_distance: Distance travelled divided by the sphere radius.
        bearing: Initial bearing in radians, clockwise from north.

    Returns:
        ``(lon, lat)`` in degrees. Longitude is not normalised, so a ring
        crossing the antimeridian stays contiguous (e.g. 180.01).
    """
    lat1 = math.radians(centre_lat)
    lon1 = math.radians(centre_lon)

    lat2 = math.asin(
        math.sin(lat1) * math.cos(angular_distance)
        + math.cos(lat1) * math.sin(angular_distance) * math.cos(bearing)
    )
    lon2 = lon1 + math.atan2(
        math.sin(bearing) * math.sin(angular_distance) * math.cos(lat1),
        math.cos(angular_distance) - math.sin(lat1) * math.sin(lat2),
    )

    return (math.degrees(lon2), math.degrees(lat2))
