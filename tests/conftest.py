"""Shared pytest fixtures for the site geometry test suite."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any
from unittest.mock import MagicMock

import pytest

from marine_site_geometry.mapping.toolkit import ShapelyToolkit, VectorSource

# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------


class RecordingToolkit:
    """Toolkit double: identity projections, geometry as plain dicts.

    Keeps every ring handed to ``create_polygon`` so tests can inspect
    exactly what the feature assembler built.
    """

    projection = "EPSG:4326"

    def __init__(self) -> None:
        self.polygons: list[list[list[Sequence[float]]]] = []

    def project_forward(self, lon_lat: Sequence[float]) -> tuple[float, float]:
        return (lon_lat[0], lon_lat[1])

    def project_inverse(self, coordinate: Sequence[float]) -> tuple[float, float]:
        return (coordinate[0], coordinate[1])

    def create_polygon(self, rings: Sequence[Sequence[Sequence[float]]]) -> dict[str, Any]:
        copied = [list(ring) for ring in rings]
        self.polygons.append(copied)
        return {"type": "Polygon", "rings": copied}

    def create_point(self, coordinate: Sequence[float]) -> dict[str, Any]:
        return {"type": "Point", "coordinate": list(coordinate)}

    def create_feature(
        self, geometry: Any, properties: Mapping[str, object] | None = None
    ) -> dict[str, Any]:
        return {"geometry": geometry, "properties": dict(properties or {})}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def toolkit() -> ShapelyToolkit:
    """Web Mercator toolkit backed by shapely and pyproj."""
    return ShapelyToolkit()


@pytest.fixture()
def recording_toolkit() -> RecordingToolkit:
    return RecordingToolkit()


@pytest.fixture()
def vector_source() -> VectorSource:
    return VectorSource()


@pytest.fixture()
def map_handle() -> MagicMock:
    """Map double; ``map_handle.get_view()`` always returns the same view mock."""
    handle = MagicMock(name="map")
    handle.get_view.return_value = MagicMock(name="view")
    return handle


@pytest.fixture()
def identity_project():
    """Projection that hands WGS 84 ``(lon, lat)`` straight back."""
    return lambda lon_lat: lon_lat
