"""Map view fitting with a deterministic fallback.

Positions the map to show a site's geometry. When the geometry is
degenerate (a non-finite extent, an empty source) or the map library's
``fit`` raises, the view is recentred on the UK at zoom 12 instead, so
the map is always left in a displayable state.

The map handle is injected: anything with ``get_view()`` returning an
object that has ``fit(extent, options)``, ``set_center(coordinates)``
and ``set_zoom(zoom)``.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from numbers import Real
from typing import TYPE_CHECKING, Any, Protocol

from marine_site_geometry.core.config import MapConfig

if TYPE_CHECKING:
    from collections.abc import Mapping

    from marine_site_geometry.models.contracts import FitOptions

logger = logging.getLogger("marine_site_geometry.mapping.view")

EXTENT_LENGTH = 4


class MapView(Protocol):
    def fit(self, extent: Sequence[float], options: Mapping[str, Any]) -> None: ...

    def set_center(self, coordinates: Sequence[float]) -> None: ...

    def set_zoom(self, zoom: float) -> None: ...


class MapHandle(Protocol):
    def get_view(self) -> MapView: ...


def is_valid_extent(extent: object) -> bool:
    """Whether ``extent`` is ``[min_x, min_y, max_x, max_y]`` with all values finite."""
    if not isinstance(extent, Sequence) or isinstance(extent, str | bytes):
        return False
    if len(extent) != EXTENT_LENGTH:
        return False
    return all(
        isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)
        for value in extent
    )


def extent_of(geometry: Any) -> Any:
    """Extent of a map-library geometry (``get_extent()``) or shapely geometry (``bounds``)."""
    get_extent = getattr(geometry, "get_extent", None)
    if callable(get_extent):
        return get_extent()
    return getattr(geometry, "bounds", None)


class MapViewManager:
    """Fits and centres a map view."""

    def __init__(self, config: MapConfig | None = None) -> None:
        self._config = config or MapConfig()

    @property
    def config(self) -> MapConfig:
        return self._config

    def fit_map_to_extent(
        self,
        map_handle: MapHandle,
        extent: object,
        options: FitOptions | None = None,
    ) -> None:
        """Fit the view to ``extent``, falling back to the default UK view.

        ``options`` override the defaults key by key (padding 100 px,
        max zoom 14, min zoom 8).
        """
        try:
            fit_options = {**self._config.fit_defaults(), **(options or {})}
            if is_valid_extent(extent):
                map_handle.get_view().fit(list(extent), fit_options)  # type: ignore[arg-type]
                return
            logger.debug("Extent not usable, centring on default view | extent=%r", extent)
        except Exception as exc:
            logger.warning(
                "Failed to fit map to extent, falling back to UK centre | extent=%r | error=%s",
                extent,
                exc,
            )

        self.centre_map_view(map_handle, self._config.default_centre, self._config.fallback_zoom)

    def fit_map_to_geometry(
        self,
        map_handle: MapHandle,
        geometry: Any,
        options: FitOptions | None = None,
    ) -> None:
        """Fit the view to a single geometry's extent."""
        self.fit_map_to_extent(map_handle, extent_of(geometry), options)

    def fit_map_to_all_features(
        self,
        map_handle: MapHandle,
        source: Any,
        options: FitOptions | None = None,
    ) -> None:
        """Fit the view to every feature in a vector source."""
        self.fit_map_to_extent(map_handle, source.get_extent(), options)

    def centre_map_view(
        self,
        map_handle: MapHandle,
        coordinates: Sequence[float],
        zoom: float | None = None,
    ) -> None:
        """Centre the view on ``coordinates`` at ``zoom`` (default 12)."""
        view = map_handle.get_view()
        view.set_center(list(coordinates))
        view.set_zoom(self._config.fallback_zoom if zoom is None else zoom)
