"""Tests for assessment input coercion and result models."""

from __future__ import annotations

import pytest

from parceltax.assessment.models import (
    Assessment,
    FloorInput,
    SiteInput,
    coerce_float,
    coerce_year,
)


class TestCoercion:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("1200", 1200.0),
            (" 743.49 ", 743.49),
            (5, 5.0),
            ("", 0.0),
            ("   ", 0.0),
            (None, 0.0),
            ("abc", 0.0),
            (float("nan"), 0.0),
            (float("inf"), 0.0),
            ([1, 2], 0.0),
        ],
    )
    def test_coerce_float(self, value, expected):
        assert coerce_float(value) == expected

    def test_coerce_float_custom_default(self):
        assert coerce_float("", default=1.0) == 1.0

    def test_coerce_year(self):
        assert coerce_year("2020") == 2020
        assert coerce_year("2020.7") == 2020
        assert coerce_year("soon") == 0
        assert coerce_year(None) == 0


class TestSiteInput:
    def test_defaults(self):
        site = SiteInput()
        assert site.plot_area == 0.0
        assert site.plinth_factor == 1.0
        assert site.is_corner_site is False
        assert site.landuse == "Builtup"
        assert site.market_rate_by_construction_type is None
        assert site.is_vacant is False

    def test_non_numeric_fields_become_zero(self):
        site = SiteInput(plot_area="n/a", guidance_value="", tax_rate_percent=None)
        assert site.plot_area == 0.0
        assert site.guidance_value == 0.0
        assert site.tax_rate_percent == 0.0

    @pytest.mark.parametrize("value", [0, "", None, "x"])
    def test_plinth_falls_back_to_one(self, value):
        assert SiteInput(plinth_factor=value).plinth_factor == 1.0

    def test_plinth_explicit(self):
        assert SiteInput(plinth_factor="1.2").plinth_factor == 1.2

    @pytest.mark.parametrize("value", ["yes", "Y", "1", "TRUE", True, 1])
    def test_corner_truthy(self, value):
        assert SiteInput(is_corner_site=value).is_corner_site is True

    @pytest.mark.parametrize("value", ["no", "", None, "0", "corner", False])
    def test_corner_falsy(self, value):
        assert SiteInput(is_corner_site=value).is_corner_site is False

    @pytest.mark.parametrize("landuse", ["Vacant", "vacant", " VACANT "])
    def test_is_vacant(self, landuse):
        assert SiteInput(landuse=landuse).is_vacant is True

    @pytest.mark.parametrize("landuse", ["Builtup", "Commercial", "", None])
    def test_not_vacant(self, landuse):
        assert SiteInput(landuse=landuse).is_vacant is False

    def test_market_rates_coerced(self):
        site = SiteInput(market_rate_by_construction_type={"RCC": "1576", "OTHER": ""})
        assert site.market_rate_by_construction_type == {"RCC": 1576.0, "OTHER": 0.0}


class TestFloorInput:
    def test_defaults(self):
        floor = FloorInput()
        assert floor.row_id
        assert floor.use == "Residential"
        assert floor.construction_type == "RCC"
        assert floor.market_rate is None
        assert floor.occupancy_factor == 0.5

    def test_row_ids_unique(self):
        assert FloorInput().row_id != FloorInput().row_id

    def test_construction_type_normalized(self):
        assert FloorInput(construction_type=" granite ").construction_type == "GRANITE"

    def test_blank_market_rate_is_unset(self):
        assert FloorInput(market_rate="").market_rate is None
        assert FloorInput(market_rate=None).market_rate is None

    def test_garbage_market_rate_is_zero(self):
        assert FloorInput(market_rate="abc").market_rate == 0.0

    @pytest.mark.parametrize("value", [0, "", None, "self"])
    def test_occupancy_falls_back_to_one(self, value):
        assert FloorInput(occupancy_factor=value).occupancy_factor == 1.0

    def test_occupancy_from_form_value(self):
        assert FloorInput(occupancy_factor="0.5").occupancy_factor == 0.5

    def test_year_coerced(self):
        assert FloorInput(construction_year="2015").construction_year == 2015
        assert FloorInput(construction_year="").construction_year == 0


class TestAssessment:
    def test_warning_property(self):
        assert Assessment(current_year=2024).warning is None
        result = Assessment(current_year=2024, warnings=["first", "second"])
        assert result.warning == "first"
