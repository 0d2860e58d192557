"""Map toolkit capability and a shapely/pyproj implementation.

The geometry assembly code never imports a mapping library directly.
It receives a ``MapToolkit`` that knows how to build polygons, points
and features, and how to project between WGS 84 and the map
projection. A ``GeoJSONReader`` turns uploaded-file GeoJSON into
features.

``ShapelyToolkit`` is the implementation used server-side and in
tests: shapely geometries, pyproj transformers, Web Mercator by
default. ``VectorSource`` is the in-memory feature container the site
visualiser adds features to.
"""

from __future__ import annotations

import functools
import logging
import math
from typing import TYPE_CHECKING, Any, Protocol

from marine_site_geometry.core.constants import WEB_MERCATOR_CRS, WGS84_CRS
from marine_site_geometry.core.exceptions import ContractError
from marine_site_geometry.models.feature import MapFeature

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from pyproj import Transformer
    from shapely.geometry import Point, Polygon
    from shapely.geometry.base import BaseGeometry

    from marine_site_geometry.core.config import MapConfig

logger = logging.getLogger("marine_site_geometry.mapping.toolkit")

#: Extent reported by an empty source; fails every finiteness check.
EMPTY_EXTENT: tuple[float, float, float, float] = (math.inf, math.inf, -math.inf, -math.inf)


class GeoJSONReadError(ContractError):
    """Raised when an uploaded-file feature carries geometry that cannot be decoded."""

    default_stage = "geojson"
    default_code = "GEOJSON_GEOMETRY_INVALID"


# ---------------------------------------------------------------------------
# Capabilities
# ---------------------------------------------------------------------------


class MapToolkit(Protocol):
    """Geometry constructors and projections supplied by the map library."""

    @property
    def projection(self) -> str: ...

    def create_polygon(self, rings: Sequence[Sequence[Sequence[float]]]) -> Any: ...

    def create_point(self, coordinate: Sequence[float]) -> Any: ...

    def create_feature(
        self, geometry: Any, properties: Mapping[str, object] | None = None
    ) -> Any: ...

    def project_forward(self, lon_lat: Sequence[float]) -> tuple[float, float]: ...

    def project_inverse(self, coordinate: Sequence[float]) -> tuple[float, float]: ...


class GeoJSONReader(Protocol):
    """Reads a GeoJSON FeatureCollection into map features."""

    def read_features(
        self, geojson: Mapping[str, Any], *, feature_projection: str
    ) -> list[Any]: ...


# ---------------------------------------------------------------------------
# shapely / pyproj implementation
# ---------------------------------------------------------------------------


@functools.lru_cache(maxsize=8)
def _transformer(source: str, target: str) -> Transformer:
    from pyproj import Transformer

    return Transformer.from_crs(source, target, always_xy=True)


class ShapelyToolkit:
    """``MapToolkit`` and ``GeoJSONReader`` backed by shapely and pyproj.

    Example usage::

        toolkit = ShapelyToolkit()
        xy = toolkit.project_forward((-1.3995, 55.019889))
        feature = toolkit.create_feature(toolkit.create_point(xy))
    """

    def __init__(self, projection: str = WEB_MERCATOR_CRS) -> None:
        self._projection = projection

    @classmethod
    def from_config(cls, config: MapConfig) -> ShapelyToolkit:
        """Toolkit for the map projection configured in ``config``."""
        return cls(config.map_projection)

    @property
    def projection(self) -> str:
        return self._projection

    def project_forward(self, lon_lat: Sequence[float]) -> tuple[float, float]:
        """Project WGS 84 ``(lon, lat)`` into the map projection."""
        x, y = _transformer(WGS84_CRS, self._projection).transform(lon_lat[0], lon_lat[1])
        return (float(x), float(y))

    def project_inverse(self, coordinate: Sequence[float]) -> tuple[float, float]:
        """Project a map coordinate back to WGS 84 ``(lon, lat)``."""
        lon, lat = _transformer(self._projection, WGS84_CRS).transform(
            coordinate[0], coordinate[1]
        )
        return (float(lon), float(lat))

    def create_polygon(self, rings: Sequence[Sequence[Sequence[float]]]) -> Polygon:
        """Build a polygon from an exterior ring and optional holes."""
        from shapely.geometry import Polygon

        exterior, *holes = rings
        return Polygon(exterior, holes=holes or None)

    def create_point(self, coordinate: Sequence[float]) -> Point:
        from shapely.geometry import Point

        return Point(coordinate[0], coordinate[1])

    def create_feature(
        self, geometry: BaseGeometry, properties: Mapping[str, object] | None = None
    ) -> MapFeature:
        return MapFeature(geometry=geometry, properties=dict(properties or {}))

    def read_features(
        self, geojson: Mapping[str, Any], *, feature_projection: str | None = None
    ) -> list[MapFeature]:
        """Decode a GeoJSON FeatureCollection (WGS 84) into projected features.

        Features without a geometry are skipped.

        Raises:
            GeoJSONReadError: If a feature's geometry cannot be decoded.
        """
        import shapely
        from shapely.geometry import shape

        target = feature_projection or self._projection
        project = None
        if target != WGS84_CRS:
            project = _transformer(WGS84_CRS, target).transform

        features: list[MapFeature] = []
        for idx, raw in enumerate(geojson.get("features", [])):
            geometry_raw = raw.get("geometry") if isinstance(raw, dict) else None
            if not geometry_raw:
                logger.warning("Skipping GeoJSON feature without geometry | index=%d", idx)
                continue
            try:
                geometry = shape(geometry_raw)
            except Exception as exc:
                msg = f"Cannot decode geometry of GeoJSON feature {idx}: {exc}"
                raise GeoJSONReadError(msg) from exc
            if project is not None:
                geometry = shapely.transform(geometry, project, interleaved=False)
            features.append(
                MapFeature(geometry=geometry, properties=dict(raw.get("properties") or {}))
            )
        return features


# ---------------------------------------------------------------------------
# Vector source
# ---------------------------------------------------------------------------


class VectorSource:
    """In-memory container for the features shown on one map."""

    def __init__(self, features: Iterable[MapFeature] | None = None) -> None:
        self._features: list[MapFeature] = list(features or [])

    def add_feature(self, feature: MapFeature) -> None:
        self._features.append(feature)

    def add_features(self, features: Iterable[MapFeature]) -> None:
        self._features.extend(features)

    def clear(self) -> None:
        self._features.clear()

    def get_features(self) -> list[MapFeature]:
        return list(self._features)

    def get_extent(self) -> tuple[float, float, float, float]:
        """Combined bounding box of every feature, or ``EMPTY_EXTENT``."""
        min_x, min_y, max_x, max_y = EMPTY_EXTENT
        for feature in self._features:
            fx0, fy0, fx1, fy1 = feature.get_extent()
            min_x = min(min_x, fx0)
            min_y = min(min_y, fy0)
            max_x = max(max_x, fx1)
            max_y = max(max_y, fy1)
        return (min_x, min_y, max_x, max_y)

    def __len__(self) -> int:
        return len(self._features)
