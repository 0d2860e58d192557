"""Map configuration loaded from environment variables.

All values default to the behaviour of the site details map; the
environment only needs to be set to tune a deployment.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any numeric
    value is out of its valid range, so bad configuration is caught at
    startup instead of when the first map renders.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from marine_site_geometry.core.constants import (
    CIRCLE_APPROXIMATION_SIDES,
    DEFAULT_FALLBACK_ZOOM,
    DEFAULT_FIT_MAX_ZOOM,
    DEFAULT_FIT_MIN_ZOOM,
    DEFAULT_MAP_PADDING_PX,
    DEFAULT_UK_CENTRE_LATITUDE,
    DEFAULT_UK_CENTRE_LONGITUDE,
    MIN_CIRCLE_SIDES,
    WEB_MERCATOR_CRS,
)
from marine_site_geometry.core.exceptions import ValidationError


class ConfigValidationError(ValidationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class MapConfig:
    """Immutable map configuration.

    Attributes:
        default_centre_lon: Longitude of the fallback view centre.
        default_centre_lat: Latitude of the fallback view centre.
        fallback_zoom: Zoom level used when a fit cannot be performed.
        fit_padding_px: Padding in pixels applied on every side when fitting.
        fit_max_zoom: Zoom ceiling when fitting (stops small sites over-zooming).
        fit_min_zoom: Zoom floor when fitting (stops large sites under-zooming).
        circle_sides: Number of sides used to approximate circular sites.
        map_projection: Projection of the rendered map (``EPSG:3857``).
    """

    default_centre_lon: float = DEFAULT_UK_CENTRE_LONGITUDE
    default_centre_lat: float = DEFAULT_UK_CENTRE_LATITUDE
    fallback_zoom: int = DEFAULT_FALLBACK_ZOOM
    fit_padding_px: int = DEFAULT_MAP_PADDING_PX
    fit_max_zoom: int = DEFAULT_FIT_MAX_ZOOM
    fit_min_zoom: int = DEFAULT_FIT_MIN_ZOOM
    circle_sides: int = CIRCLE_APPROXIMATION_SIDES
    map_projection: str = WEB_MERCATOR_CRS

    @property
    def default_centre(self) -> list[float]:
        """Fallback centre as ``[lon, lat]``."""
        return [self.default_centre_lon, self.default_centre_lat]

    def fit_defaults(self) -> dict[str, object]:
        """Default options passed to the map view ``fit`` call."""
        padding = self.fit_padding_px
        return {
            "padding": [padding, padding, padding, padding],
            "max_zoom": self.fit_max_zoom,
            "min_zoom": self.fit_min_zoom,
        }

    @classmethod
    def from_env(cls) -> MapConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a numeric value is out of range
                or a required string value is empty.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``MAP_FIT_MAX_ZOOM=abc``).
        """
        config = cls(
            default_centre_lon=float(
                os.getenv("MAP_DEFAULT_CENTRE_LON", str(DEFAULT_UK_CENTRE_LONGITUDE))
            ),
            default_centre_lat=float(
                os.getenv("MAP_DEFAULT_CENTRE_LAT", str(DEFAULT_UK_CENTRE_LATITUDE))
            ),
            fallback_zoom=int(os.getenv("MAP_FALLBACK_ZOOM", str(DEFAULT_FALLBACK_ZOOM))),
            fit_padding_px=int(os.getenv("MAP_FIT_PADDING_PX", str(DEFAULT_MAP_PADDING_PX))),
            fit_max_zoom=int(os.getenv("MAP_FIT_MAX_ZOOM", str(DEFAULT_FIT_MAX_ZOOM))),
            fit_min_zoom=int(os.getenv("MAP_FIT_MIN_ZOOM", str(DEFAULT_FIT_MIN_ZOOM))),
            circle_sides=int(os.getenv("MAP_CIRCLE_SIDES", str(CIRCLE_APPROXIMATION_SIDES))),
            map_projection=os.getenv("MAP_PROJECTION", WEB_MERCATOR_CRS),
        )
        _validate(config)
        return config


def _validate(config: MapConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not -180.0 <= config.default_centre_lon <= 180.0:
        raise ConfigValidationError(
            "MAP_DEFAULT_CENTRE_LON",
            config.default_centre_lon,
            "must be between -180 and 180 (degrees)",
        )

    if not -90.0 <= config.default_centre_lat <= 90.0:
        raise ConfigValidationError(
            "MAP_DEFAULT_CENTRE_LAT",
            config.default_centre_lat,
            "must be between -90 and 90 (degrees)",
        )

    if config.fallback_zoom < 0:
        raise ConfigValidationError(
            "MAP_FALLBACK_ZOOM",
            config.fallback_zoom,
            "must be >= 0",
        )

    if config.fit_padding_px < 0:
        raise ConfigValidationError(
            "MAP_FIT_PADDING_PX",
            config.fit_padding_px,
            "must be >= 0 (pixels)",
        )

    if config.fit_min_zoom < 0:
        raise ConfigValidationError(
            "MAP_FIT_MIN_ZOOM",
            config.fit_min_zoom,
            "must be >= 0",
        )

    if config.fit_max_zoom < config.fit_min_zoom:
        raise ConfigValidationError(
            "MAP_FIT_MAX_ZOOM",
            config.fit_max_zoom,
            f"must be >= MAP_FIT_MIN_ZOOM ({config.fit_min_zoom})",
        )

    if config.circle_sides < MIN_CIRCLE_SIDES:
        raise ConfigValidationError(
            "MAP_CIRCLE_SIDES",
            config.circle_sides,
            f"must be >= {MIN_CIRCLE_SIDES}",
        )

    if not config.map_projection:
        raise ConfigValidationError(
            "MAP_PROJECTION",
            config.map_projection,
            "must not be empty",
        )
