"""Tests for the exception taxonomy.

Validates:
- SiteGeometryError hierarchy and structured attributes
- Category classification (validation, contract, internal)
- ``to_error_dict()`` produces stable payload keys
- Every module exception is a SiteGeometryError subclass
"""

from __future__ import annotations

from typing import ClassVar

from marine_site_geometry.core.config import ConfigValidationError
from marine_site_geometry.core.exceptions import (
    ContractError,
    SiteGeometryError,
    ValidationError,
)
from marine_site_geometry.mapping.circle import CircleGeometryError
from marine_site_geometry.mapping.toolkit import GeoJSONReadError
from marine_site_geometry.utils.site_data import SiteDataError


class TestSiteGeometryErrorBase:
    """SiteGeometryError base class behavior."""

    def test_default_attributes(self) -> None:
        err = SiteGeometryError("boom")
        assert err.message == "boom"
        assert err.stage == ""
        assert err.code == ""

    def test_custom_attributes(self) -> None:
        err = SiteGeometryError("fail", stage="view", code="FIT_FAILED")
        assert err.stage == "view"
        assert err.code == "FIT_FAILED"

    def test_str_is_message(self) -> None:
        assert str(SiteGeometryError("human-readable error")) == "human-readable error"

    def test_base_category_is_internal(self) -> None:
        assert SiteGeometryError("x").category == "internal"

    def test_to_error_dict_keys(self) -> None:
        d = SiteGeometryError("x", stage="s", code="C").to_error_dict()
        assert d == {"category": "internal", "code": "C", "stage": "s", "message": "x"}


class TestCategoryBases:
    def test_validation_error(self) -> None:
        assert ValidationError("bad input").category == "validation"

    def test_contract_error(self) -> None:
        assert ContractError("schema drift").category == "contract"


class TestAllExceptionsAreSiteGeometryError:
    """Every custom exception inherits from SiteGeometryError."""

    EXCEPTION_CLASSES: ClassVar[list[type[SiteGeometryError]]] = [
        CircleGeometryError,
        ConfigValidationError,
        GeoJSONReadError,
        SiteDataError,
    ]

    def test_all_subclass_site_geometry_error(self) -> None:
        for cls in self.EXCEPTION_CLASSES:
            assert issubclass(cls, SiteGeometryError), f"{cls.__name__} is not a SiteGeometryError"


class TestModuleExceptionStageAndCode:
    """Every module exception has a default stage and code."""

    def test_circle_geometry_error(self) -> None:
        err = CircleGeometryError("two sides")
        assert err.stage == "circle"
        assert err.code == "CIRCLE_SIDES_INVALID"
        assert err.category == "validation"

    def test_geojson_read_error(self) -> None:
        err = GeoJSONReadError("unknown geometry")
        assert err.stage == "geojson"
        assert err.code == "GEOJSON_GEOMETRY_INVALID"
        assert err.category == "contract"

    def test_site_data_error(self) -> None:
        err = SiteDataError("not an object")
        assert err.stage == "site_data"
        assert err.code == "SITE_DATA_INVALID"
        assert err.category == "validation"

    def test_config_validation_error(self) -> None:
        err = ConfigValidationError("MAP_FIT_MAX_ZOOM", 3, "must be >= MAP_FIT_MIN_ZOOM (8)")
        assert err.stage == "config"
        assert err.code == "CONFIG_VALIDATION_FAILED"
        assert err.key == "MAP_FIT_MAX_ZOOM"
        assert err.to_error_dict()["message"] == (
            "Invalid configuration MAP_FIT_MAX_ZOOM=3: must be >= MAP_FIT_MIN_ZOOM (8)"
        )

    def test_kwarg_overrides_default(self) -> None:
        err = CircleGeometryError("x", code="CUSTOM")
        assert err.code == "CUSTOM"
        assert err.stage == "circle"
