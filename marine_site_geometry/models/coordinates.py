"""Coordinate data models.

Sites are entered either as WGS 84 latitude/longitude or as British
National Grid (OSGB36) eastings/northings. The coordinate system is a
closed enum, parsed once from the form value at the boundary.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from marine_site_geometry.core.constants import CIRCLE_APPROXIMATION_SIDES


class CoordinateSystem(enum.Enum):
    """Coordinate systems accepted for manual site entry."""

    WGS84 = "wgs84"
    OSGB36 = "osgb36"

    @classmethod
    def parse(cls, value: object) -> CoordinateSystem | None:
        """Parse a coordinate-system form value, ignoring case.

        Returns ``None`` for anything that is not a recognised system.
        """
        if isinstance(value, CoordinateSystem):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None

    @property
    def fields(self) -> tuple[str, str]:
        """Names of the two payload fields carrying this system's values."""
        if self is CoordinateSystem.WGS84:
            return ("latitude", "longitude")
        return ("eastings", "northings")


@dataclass(frozen=True, slots=True)
class Wgs84Coordinate:
    """A WGS 84 position in decimal degrees."""

    latitude: float
    longitude: float

    @property
    def is_valid(self) -> bool:
        """Whether the position lies strictly inside the WGS 84 ranges."""
        return (
            math.isfinite(self.latitude)
            and math.isfinite(self.longitude)
            and -90.0 < self.latitude < 90.0
            and -180.0 < self.longitude < 180.0
        )

    def as_lon_lat(self) -> tuple[float, float]:
        return (self.longitude, self.latitude)

    def to_dict(self) -> dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Wgs84Coordinate:
        """Build from a payload such as ``{"latitude": "51.5", "longitude": "-0.1"}``.

        Raises:
            KeyError: If a field is missing.
            ValueError: If a field is not numeric.
        """
        return cls(
            latitude=float(data["latitude"]),  # type: ignore[arg-type]
            longitude=float(data["longitude"]),  # type: ignore[arg-type]
        )


@dataclass(frozen=True, slots=True)
class Osgb36Coordinate:
    """A British National Grid position in metres."""

    eastings: float
    northings: float

    def to_dict(self) -> dict[str, float]:
        return {"eastings": self.eastings, "northings": self.northings}

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Osgb36Coordinate:
        """Build from a payload such as ``{"eastings": "577000", "northings": "178000"}``.

        Raises:
            KeyError: If a field is missing.
            ValueError: If a field is not numeric.
        """
        return cls(
            eastings=float(data["eastings"]),  # type: ignore[arg-type]
            northings=float(data["northings"]),  # type: ignore[arg-type]
        )


@dataclass(frozen=True, slots=True)
class CircleDescriptor:
    """A circular site: WGS 84 centre plus radius in metres.

    Built on demand per render; never persisted.
    """

    centre: Wgs84Coordinate
    radius_m: float
    sides: int = CIRCLE_APPROXIMATION_SIDES

    def ring(self) -> list[tuple[float, float]]:
        """Closed ``(lon, lat)`` ring approximating this circle."""
        from marine_site_geometry.mapping.circle import create_geographic_circle

        return create_geographic_circle(self.centre.as_lon_lat(), self.radius_m, self.sides)
