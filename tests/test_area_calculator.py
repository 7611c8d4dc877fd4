"""
Area-tier calculator tests — per-type surface takeoffs and the cost roll-up.

Tests:
1-4.   Registry and base calculator helpers
5-9.   Interior takeoff (reference room: 12 × 15 × 9)
10-12. Exterior, commercial and cabinet takeoffs
13-20. Paint engine roll-up (gallons, costs, time, breakdown cost pass)
21-24. Gallons rounding per project type, oversized and non-finite input
25-27. Recommendations
28-30. Input validation
"""

import math

import pytest

from paintquote.calculators.base import BaseCalculator
from paintquote.calculators.interior import InteriorCalculator
from paintquote.calculators.paint_engine import (
    calculate_painting_project,
    generate_recommendations,
    validate_calculator_input,
)
from paintquote.calculators.pricing_config import PricingConfig, PRICING_CONFIG_VERSION
from paintquote.calculators.registry import get_calculator, has_calculator, list_calculators


# --- Test fixtures ---

def _sample_room():
    """12 × 15 room with 9 ft ceilings and two doors."""
    return {"length": 12, "width": 15, "height": 9, "doors": 2}


def _sample_input(**overrides):
    """Interior walls-only job, standard paint, two coats."""
    calc_input = {
        "type": "interior",
        "dimensions": {"length": 12, "width": 15, "height": 9},
        "surfaces": {"walls": True},
        "paint_quality": "standard",
        "coats": 2,
    }
    calc_input.update(overrides)
    return calc_input


# ============================================================
# Registry + base helpers
# ============================================================

def test_registry_has_all_project_types():
    assert sorted(list_calculators()) == ["cabinet", "commercial", "exterior", "interior"]
    for project_type in list_calculators():
        assert has_calculator(project_type)
        assert isinstance(get_calculator(project_type), BaseCalculator)


def test_registry_unknown_type_raises():
    assert not has_calculator("garage")
    with pytest.raises(ValueError):
        get_calculator("garage")


def test_parse_number_rejects_junk_and_negatives():
    calc = InteriorCalculator()
    assert calc.parse_number("12.5") == 12.5
    assert calc.parse_number(None) == 0.0
    assert calc.parse_number("abc") == 0.0
    assert calc.parse_number(-4) == 0.0
    assert calc.parse_number(float("nan")) == 0.0
    assert calc.parse_number(float("inf")) == 0.0


def test_get_dims_requires_every_key():
    calc = InteriorCalculator()
    assert calc.get_dims({"length": 12, "width": 15}, "length", "width") == [12.0, 15.0]
    assert calc.get_dims({"length": 12}, "length", "width") is None
    assert calc.get_dims({"length": 12, "width": 0}, "length", "width") is None


# ============================================================
# Interior
# ============================================================

def test_interior_walls_reference_room():
    """2 × (12 + 15) × 9 × 0.9 = 437.4 sqft."""
    takeoff = InteriorCalculator().calculate(_sample_room(), {"walls": True}, 2, 350)
    assert takeoff["total_area"] == pytest.approx(437.4)
    walls = takeoff["breakdown"]["walls"]
    assert walls["labor_hours"] == pytest.approx(437.4 / 175)
    assert walls["paint_gallons"] == pytest.approx(437.4 * 2 / 350)


def test_interior_all_surfaces():
    surfaces = {"walls": True, "ceiling": True, "trim": True, "doors": True}
    takeoff = InteriorCalculator().calculate(_sample_room(), surfaces, 2, 350)
    breakdown = takeoff["breakdown"]

    assert breakdown["ceiling"]["area"] == pytest.approx(180.0)
    assert breakdown["trim"]["area"] == pytest.approx(27.0)        # 54 lf × 0.5
    assert breakdown["trim"]["labor_hours"] == pytest.approx(0.9)  # 54 lf / 60
    assert breakdown["doors"]["area"] == pytest.approx(40.0)
    assert breakdown["doors"]["labor_hours"] == pytest.approx(1.5)
    assert takeoff["total_area"] == pytest.approx(437.4 + 180 + 27 + 40)


def test_interior_prep_is_twenty_percent():
    takeoff = InteriorCalculator().calculate(_sample_room(), {"walls": True}, 2, 350)
    times = takeoff["time_estimates"]
    assert times["prep_hours"] == pytest.approx(times["painting_hours"] * 0.2)
    assert times["total_hours"] == pytest.approx(times["painting_hours"] * 1.2)
    assert times["total_days"] == 1


def test_selected_surface_without_dimensions_contributes_nothing():
    surfaces = {"walls": True, "ceiling": True, "doors": True}
    takeoff = InteriorCalculator().calculate({"length": 12}, surfaces, 2, 350)
    assert takeoff["total_area"] == 0.0
    assert takeoff["breakdown"] == {}


def test_negative_dimension_is_ignored():
    takeoff = InteriorCalculator().calculate(
        {"length": -12, "width": 15, "height": 9}, {"walls": True}, 2, 350,
    )
    assert takeoff["total_area"] == 0.0


# ============================================================
# Exterior, commercial, cabinet
# ============================================================

def test_exterior_all_surfaces():
    dims = {"length": 40, "width": 30, "height": 10, "doors": 2, "windows": 10}
    surfaces = {"siding": True, "soffit": True, "fascia": True, "trim": True,
                "doors": True, "windows": True}
    takeoff = get_calculator("exterior").calculate(dims, surfaces, 2, 350)
    breakdown = takeoff["breakdown"]

    assert breakdown["siding"]["area"] == pytest.approx(1190.0)   # 140 × 10 × 0.85
    assert breakdown["soffit"]["area"] == pytest.approx(296.0)    # 2 × (40+30+4) × 2
    assert breakdown["fascia"]["area"] == pytest.approx(140.0)
    assert breakdown["trim"]["area"] == pytest.approx(95.0)       # (4 × 10 + 10 × 15) × 0.5
    assert breakdown["trim"]["labor_hours"] == pytest.approx(190 / 40)
    assert breakdown["doors"]["area"] == pytest.approx(60.0)
    assert breakdown["window trim"]["area"] == pytest.approx(100.0)
    assert breakdown["window trim"]["labor_hours"] == pytest.approx(3.0)
    times = takeoff["time_estimates"]
    assert times["prep_hours"] == pytest.approx(times["painting_hours"] * 0.3)


def test_commercial_no_opening_deduction_and_floors():
    dims = {"length": 50, "width": 40, "height": 12}
    surfaces = {"walls": True, "ceiling": True, "floors": True}
    takeoff = get_calculator("commercial").calculate(dims, surfaces, 2, 350)
    breakdown = takeoff["breakdown"]

    assert breakdown["walls"]["area"] == pytest.approx(2160.0)
    assert breakdown["walls"]["labor_hours"] == pytest.approx(10.8)
    assert breakdown["floors"]["labor_hours"] == pytest.approx(8.0)
    times = takeoff["time_estimates"]
    assert times["painting_hours"] == pytest.approx(10.8 + 2000 / 150 + 8.0)
    assert times["prep_hours"] == pytest.approx(times["painting_hours"] * 0.1)
    assert times["total_days"] == math.ceil(times["total_hours"] / 8)


def test_cabinet_flat_estimate_ignores_geometry():
    dims = {"cabinet_count": 10, "length": 99, "width": 99, "height": 99}
    takeoff = get_calculator("cabinet").calculate(dims, {"walls": True}, 2, 350)
    assert takeoff["total_area"] == pytest.approx(300.0)
    times = takeoff["time_estimates"]
    assert times["painting_hours"] == pytest.approx(25.0)   # 10 × (2×0.5 + 2×0.25 + 1)
    assert times["prep_hours"] == pytest.approx(12.5)
    assert times["total_days"] == 5


# ============================================================
# Paint engine roll-up
# ============================================================

def test_reference_scenario_gallons_and_paint_cost():
    result = calculate_painting_project(_sample_input())
    assert result["total_area"] == pytest.approx(437.4)
    assert result["paint_needed"]["gallons"] == 3
    assert result["paint_needed"]["liters"] == round(3 * 3.785)
    assert result["costs"]["paint"] == pytest.approx(142.5)
    assert result["coverage"] == 350
    assert result["pricing_version"] == PRICING_CONFIG_VERSION


def test_cost_invariants():
    result = calculate_painting_project(_sample_input())
    costs = result["costs"]
    hours = result["time_estimates"]["total_hours"]

    assert costs["labor"] == pytest.approx(hours * 50)
    assert costs["supplies"] == pytest.approx(costs["paint"] * 0.15)
    assert costs["subtotal"] == pytest.approx(costs["paint"] + costs["labor"] + costs["supplies"])
    assert costs["overhead"] == pytest.approx(costs["subtotal"] * 0.15)
    assert costs["profit"] == pytest.approx(costs["subtotal"] * 0.25)
    assert costs["total"] == pytest.approx(costs["subtotal"] + costs["overhead"] + costs["profit"])


def test_coverage_and_labor_rate_overrides():
    result = calculate_painting_project(_sample_input(paint_coverage=250, labor_rate=80))
    assert result["paint_needed"]["gallons"] == 4   # ceil(874.8 / 250)
    assert result["costs"]["labor"] == pytest.approx(result["time_estimates"]["total_hours"] * 80)


def test_no_surfaces_selected_costs_nothing():
    result = calculate_painting_project(_sample_input(surfaces={}))
    assert result["total_area"] == 0.0
    assert result["paint_needed"]["gallons"] == 0
    assert result["costs"]["total"] == 0.0
    assert result["time_estimates"]["total_days"] == 0


def test_breakdown_cost_is_area_share_of_total():
    surfaces = {"walls": True, "ceiling": True, "trim": True}
    result = calculate_painting_project(_sample_input(surfaces=surfaces))
    breakdown = result["breakdown"]
    total = result["costs"]["total"]

    assert sum(e["cost"] for e in breakdown.values()) == pytest.approx(total)
    assert breakdown["ceiling"]["cost"] == pytest.approx(total * 180 / result["total_area"])


def test_unknown_project_type_yields_empty_takeoff():
    result = calculate_painting_project(_sample_input(type="garage"))
    assert result["total_area"] == 0.0
    assert result["breakdown"] == {}


def test_custom_config_changes_prices():
    config = PricingConfig(version="test", default_labor_rate=100.0)
    result = calculate_painting_project(_sample_input(), config)
    assert result["pricing_version"] == "test"
    assert result["costs"]["labor"] == pytest.approx(result["time_estimates"]["total_hours"] * 100)


def test_default_coverage_comes_from_config():
    result = calculate_painting_project(_sample_input(), PricingConfig(default_coverage=250.0))
    assert result["coverage"] == 250.0
    assert result["paint_needed"]["gallons"] == 4   # ceil(874.8 / 250)


@pytest.mark.parametrize("project_type, dims, surfaces, coats", [
    ("exterior", {"length": 40, "width": 30, "height": 10}, ["siding"], 2),
    ("exterior", {"length": 40, "width": 30, "height": 10}, ["soffit", "fascia"], 1),
    ("exterior", {"length": 40, "width": 30, "height": 10, "windows": 10}, ["trim", "windows"], 3),
    ("exterior", {"length": 40, "width": 30, "height": 10, "doors": 2, "windows": 10},
     ["siding", "soffit", "fascia", "trim", "doors", "windows"], 2),
    ("commercial", {"length": 50, "width": 40, "height": 12}, ["walls"], 2),
    ("commercial", {"length": 50, "width": 40, "height": 12}, ["ceiling", "floors"], 1),
    ("commercial", {"length": 50, "width": 40, "height": 12, "doors": 3}, ["trim", "doors"], 3),
    ("commercial", {"length": 50, "width": 40, "height": 12, "doors": 3},
     ["walls", "ceiling", "trim", "doors", "floors"], 2),
    ("cabinet", {"cabinet_count": 12}, ["walls"], 2),
    ("cabinet", {"cabinet_count": 7}, ["doors", "trim"], 3),
])
def test_gallons_round_up_for_every_project_type(project_type, dims, surfaces, coats):
    calc_input = _sample_input(
        type=project_type,
        dimensions=dims,
        surfaces={s: True for s in surfaces},
        coats=coats,
    )
    result = calculate_painting_project(calc_input)
    assert result["total_area"] > 0
    assert result["paint_needed"]["gallons"] == math.ceil(result["total_area"] * coats / 350)


def test_overflowing_dimensions_yield_empty_takeoff():
    dims = {"length": 1e200, "width": 1e200, "height": 1e200}
    result = calculate_painting_project(_sample_input(dimensions=dims))
    assert result["total_area"] == 0.0
    assert result["paint_needed"]["gallons"] == 0
    assert result["time_estimates"]["total_days"] == 0


def test_infinite_dimension_counts_as_missing():
    dims = {"length": float("inf"), "width": 15, "height": 9}
    result = calculate_painting_project(_sample_input(dimensions=dims))
    assert result["total_area"] == 0.0


def test_vanishing_coverage_does_not_raise():
    result = calculate_painting_project(_sample_input(paint_coverage=1e-310))
    assert result["paint_needed"]["gallons"] == 0


# ============================================================
# Recommendations
# ============================================================

def test_interior_primer_only_for_single_coat():
    assert generate_recommendations(_sample_input(coats=1))["primer_needed"] is True
    assert generate_recommendations(_sample_input(coats=2))["primer_needed"] is False


def test_interior_sheen_mentions_ceiling_when_selected():
    with_ceiling = generate_recommendations(_sample_input(surfaces={"walls": True, "ceiling": True}))
    walls_only = generate_recommendations(_sample_input())
    assert "ceiling" in with_ceiling["sheen_type"].lower()
    assert "ceiling" not in walls_only["sheen_type"].lower()


def test_brand_suggestions_follow_quality():
    premium = generate_recommendations(_sample_input(type="exterior", paint_quality="premium"))
    assert premium["primer_needed"] is True
    assert "Benjamin Moore Aura" in premium["brand_suggestions"]


# ============================================================
# Validation
# ============================================================

def test_validation_reports_every_missing_field():
    errors = validate_calculator_input({})
    assert errors == [
        "Calculator type is required",
        "Dimensions are required",
        "At least one surface must be selected",
        "Paint quality selection is required",
        "Number of coats must be a whole number between 1 and 5",
    ]


def test_validation_accepts_complete_input():
    assert validate_calculator_input(_sample_input()) == []
    assert validate_calculator_input(_sample_input(coats=2.0)) == []


@pytest.mark.parametrize("coats", [0, 6, None, "two", 2.5, True])
def test_validation_coats_out_of_range(coats):
    errors = validate_calculator_input(_sample_input(coats=coats))
    assert errors == ["Number of coats must be a whole number between 1 and 5"]
