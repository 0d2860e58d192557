"""Tests for the British National Grid to WGS 84 converter.

Reference positions:
- 530000, 180000: central London (Charing Cross area)
- 651409.903, 313177.270: Ordnance Survey worked example (Caister, Norfolk)
"""

from __future__ import annotations

import math

import pytest

from marine_site_geometry.core.constants import BRITISH_NATIONAL_GRID_DEFINITION
from marine_site_geometry.mapping.datum import osgb36_to_wgs84

# Coarse check for positions quoted to three decimal places
TOLERANCE_DEG = 0.01
# Well inside the ~0.0015 degree Helmert shift, so a lost +towgs84 term fails
PRECISE_TOLERANCE_DEG = 1e-4


class TestReferencePositions:
    """Known grid references land where they should."""

    def test_central_london(self) -> None:
        lon, lat = osgb36_to_wgs84(530000, 180000)
        assert lon == pytest.approx(-0.129, abs=TOLERANCE_DEG)
        assert lat == pytest.approx(51.508, abs=TOLERANCE_DEG)

    def test_ordnance_survey_worked_example(self) -> None:
        lon, lat = osgb36_to_wgs84(651409.903, 313177.270)
        assert lon == pytest.approx(1.716052, abs=PRECISE_TOLERANCE_DEG)
        assert lat == pytest.approx(52.657979, abs=PRECISE_TOLERANCE_DEG)

    def test_returns_lon_lat_order(self) -> None:
        """Longitude first: UK longitudes are small, latitudes around 50-60."""
        lon, lat = osgb36_to_wgs84(577000, 178000)
        assert -8 < lon < 2
        assert 49 < lat < 61

    def test_eastings_increase_longitude(self) -> None:
        west_lon, _ = osgb36_to_wgs84(400000, 300000)
        east_lon, _ = osgb36_to_wgs84(500000, 300000)
        assert east_lon > west_lon

    def test_northings_increase_latitude(self) -> None:
        _, south_lat = osgb36_to_wgs84(400000, 300000)
        _, north_lat = osgb36_to_wgs84(400000, 400000)
        assert north_lat > south_lat


class TestDeterminism:
    def test_same_input_same_output(self) -> None:
        assert osgb36_to_wgs84(577000, 178000) == osgb36_to_wgs84(577000, 178000)

    def test_accepts_ints_and_floats_alike(self) -> None:
        assert osgb36_to_wgs84(577000, 178000) == osgb36_to_wgs84(577000.0, 178000.0)


class TestNoBoundsCheck:
    """Out-of-grid values still convert; validation is the caller's job."""

    def test_negative_grid_reference_converts(self) -> None:
        lon, lat = osgb36_to_wgs84(-10000, -10000)
        assert math.isfinite(lon)
        assert math.isfinite(lat)

    def test_nan_propagates(self) -> None:
        lon, lat = osgb36_to_wgs84(math.nan, 180000)
        assert math.isnan(lon)
        assert math.isnan(lat)

    def test_infinity_propagates_as_nan(self) -> None:
        lon, lat = osgb36_to_wgs84(530000, math.inf)
        assert math.isnan(lon)
        assert math.isnan(lat)


class TestProjectionDefinition:
    def test_definition_carries_grid_parameters(self) -> None:
        assert "+proj=tmerc" in BRITISH_NATIONAL_GRID_DEFINITION
        assert "+lat_0=49" in BRITISH_NATIONAL_GRID_DEFINITION
        assert "+lon_0=-2" in BRITISH_NATIONAL_GRID_DEFINITION
        assert "+k=0.9996012717" in BRITISH_NATIONAL_GRID_DEFINITION
        assert "+x_0=400000" in BRITISH_NATIONAL_GRID_DEFINITION
        assert "+y_0=-100000" in BRITISH_NATIONAL_GRID_DEFINITION
        assert "+ellps=airy" in BRITISH_NATIONAL_GRID_DEFINITION

    def test_definition_carries_helmert_shift(self) -> None:
        assert (
            "+towgs84=446.448,-125.157,542.06,0.15,0.247,0.842,-20.489"
            in BRITISH_NATIONAL_GRID_DEFINITION
        )
