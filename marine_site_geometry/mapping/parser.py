"""Coordinate parsing for manually entered sites.

Normalises form input into map-projected points. A single point is a
mapping with either ``latitude``/``longitude`` (WGS 84) or
``eastings``/``northings`` (OSGB36); a boundary is a sequence of such
mappings.

Parsing fails closed: any missing field, non-numeric value, system
mismatch or short boundary yields ``None`` so the calling page can show
a validation state without handling exceptions. One bad point in a
boundary invalidates the whole boundary.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from marine_site_geometry.core.constants import MIN_POLYGON_POINTS
from marine_site_geometry.mapping.datum import osgb36_to_wgs84
from marine_site_geometry.models.coordinates import CoordinateSystem

if TYPE_CHECKING:
    from collections.abc import Callable

    ProjectFn = Callable[[Sequence[float]], Sequence[float]]

logger = logging.getLogger("marine_site_geometry.mapping.parser")


class CoordinateParser:
    """Parses WGS 84 / OSGB36 form payloads into projected map coordinates."""

    def parse_coordinates(
        self,
        coordinate_system: object,
        coordinates: object,
        project: ProjectFn,
    ) -> Sequence[float] | None:
        """Parse one point into map coordinates.

        Args:
            coordinate_system: ``"WGS84"`` / ``"OSGB36"`` (any case) or a
                ``CoordinateSystem``.
            coordinates: Point payload from the form or session cache.
            project: Projects WGS 84 ``(lon, lat)`` into map coordinates.

        Returns:
            The projected point, or ``None`` if the input does not parse.
        """
        system = CoordinateSystem.parse(coordinate_system)
        if system is None or not isinstance(coordinates, Mapping):
            return None

        first_field, second_field = system.fields
        first = coerce_number(coordinates.get(first_field))
        second = coerce_number(coordinates.get(second_field))
        if first is None or second is None:
            return None

        if system is CoordinateSystem.WGS84:
            return project((second, first))

        return project(osgb36_to_wgs84(first, second))

    def parse_multiple_coordinates(
        self,
        coordinate_system: object,
        coordinates: object,
        project: ProjectFn,
    ) -> list[Sequence[float]] | None:
        """Parse a site boundary into map coordinates.

        Returns ``None`` unless the input holds at least three points and
        every one of them parses.
        """
        if isinstance(coordinates, str | bytes | Mapping) or not isinstance(
            coordinates, Sequence
        ):
            return None
        if len(coordinates) < MIN_POLYGON_POINTS:
            return None

        points: list[Sequence[float]] = []
        for idx, point in enumerate(coordinates):
            parsed = self.parse_coordinates(coordinate_system, point, project)
            if parsed is None:
                logger.debug("Boundary point failed to parse | index=%d", idx)
                return None
            points.append(parsed)
        return points


def coerce_number(value: object) -> float | None:
    """Convert a form value to a finite float; ``None`` when absent or invalid."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


_default_parser = CoordinateParser()


def parse_coordinates(
    coordinate_system: object, coordinates: object, project: ProjectFn
) -> Sequence[float] | None:
    """Module-level shortcut for ``CoordinateParser().parse_coordinates``."""
    return _default_parser.parse_coordinates(coordinate_system, coordinates, project)


def parse_multiple_coordinates(
    coordinate_system: object, coordinates: object, project: ProjectFn
) -> list[Sequence[float]] | None:
    """Module-level shortcut for ``CoordinateParser().parse_multiple_coordinates``."""
    return _default_parser.parse_multiple_coordinates(coordinate_system, coordinates, project)
