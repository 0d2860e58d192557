"""Data model for a renderable map feature.

A MapFeature wraps one shapely geometry (a circle-as-polygon, a
boundary polygon, or a point) in map-projected coordinates, along with
any properties carried over from an uploaded file. Ownership passes to
the vector source the feature is added to.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shapely.geometry.base import BaseGeometry


@dataclass(frozen=True, slots=True)
class MapFeature:
    """A single geometry destined for the map's vector layer.

    Attributes:
        geometry: Shapely geometry in the map projection.
        properties: Key-value pairs (e.g. GeoJSON feature properties).
    """

    geometry: BaseGeometry
    properties: dict[str, object] = field(default_factory=dict)

    def get_geometry(self) -> BaseGeometry:
        return self.geometry

    def get_extent(self) -> tuple[float, float, float, float]:
        """Bounding box ``(min_x, min_y, max_x, max_y)`` of the geometry."""
        return tuple(self.geometry.bounds)  # type: ignore[return-value]

    @property
    def geometry_type(self) -> str:
        return self.geometry.geom_type

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the exterior ring (1 for a point)."""
        exterior = getattr(self.geometry, "exterior", None)
        if exterior is not None:
            return len(exterior.coords)
        return len(self.geometry.coords)

    def to_dict(self) -> dict[str, object]:
        """Serialise to a GeoJSON ``Feature`` mapping."""
        from shapely.geometry import mapping

        return {
            "type": "Feature",
            "geometry": mapping(self.geometry),
            "properties": dict(self.properties),
        }
