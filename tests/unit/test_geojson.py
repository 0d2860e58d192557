"""Tests for uploaded-file GeoJSON coordinate extraction."""

from __future__ import annotations

import pytest

from marine_site_geometry.utils.geojson import extract_coordinates_from_geojson

POLYGON = {
    "type": "Polygon",
    "coordinates": [[[-1.5, 55.1], [-1.48, 55.11], [-1.47, 55.095], [-1.5, 55.1]]],
}
POINT = {"type": "Point", "coordinates": [-1.4, 55.0]}


def test_extracts_type_and_coordinates() -> None:
    geojson = {
        "type": "FeatureCollection",
        "features": [
            {"type": "Feature", "geometry": POLYGON},
            {"type": "Feature", "geometry": POINT},
        ],
    }
    assert extract_coordinates_from_geojson(geojson) == [
        {"type": "Polygon", "coordinates": POLYGON["coordinates"]},
        {"type": "Point", "coordinates": [-1.4, 55.0]},
    ]


def test_skips_features_without_coordinates() -> None:
    geojson = {
        "features": [
            {"type": "Feature", "geometry": None},
            {"type": "Feature"},
            {"type": "Feature", "geometry": {"type": "Polygon", "coordinates": []}},
            "not-a-feature",
            {"type": "Feature", "geometry": POINT},
        ]
    }
    assert extract_coordinates_from_geojson(geojson) == [
        {"type": "Point", "coordinates": [-1.4, 55.0]}
    ]


@pytest.mark.parametrize(
    "geojson", [None, {}, {"features": []}, {"features": None}, "FeatureCollection"]
)
def test_no_features_returns_empty(geojson) -> None:
    assert extract_coordinates_from_geojson(geojson) == []
