"""
Area-tier paint calculator.

Turns room/building dimensions into total paintable area, gallons, labor
hours, and a cost breakdown priced by paint quality tier.

Input: PaintCalculationInput dict
    {type, dimensions, surfaces, paint_quality, coats, labor_rate?, paint_coverage?}
Output: PaintCalculationResult dict

calculate_painting_project never raises for missing or zero dimensions —
they contribute zero area. Callers check validate_calculator_input first
(or go through PricingEngine, which does it for them).
"""

import logging
import math

from .pricing_config import DEFAULT_PRICING, PricingConfig
from .base import empty_takeoff, is_non_negative_number
from .registry import get_calculator, has_calculator

logger = logging.getLogger(__name__)


def calculate_painting_project(calc_input: dict, config: PricingConfig = None) -> dict:
    """
    Run the full area-tier calculation.

    Returns:
        {
            total_area, paint_needed: {gallons, liters}, coverage,
            costs: {paint, labor, supplies, subtotal, overhead, profit, total},
            time_estimates: {prep_hours, painting_hours, total_hours, total_days},
            breakdown: {surface: {area, paint_gallons, labor_hours, cost}},
            recommendations: {paint_type, primer_needed, sheen_type, brand_suggestions},
            pricing_version,
        }
    """
    config = config or DEFAULT_PRICING
    project_type = calc_input.get("type")
    coats = _as_int(calc_input.get("coats"))
    coverage = _positive(calc_input.get("paint_coverage")) or config.default_coverage

    # --- Surface takeoff, per project type ---
    if has_calculator(project_type):
        calculator = get_calculator(project_type, config)
        takeoff = calculator.calculate(
            calc_input.get("dimensions") or {},
            calc_input.get("surfaces") or {},
            coats,
            coverage,
        )
    else:
        logger.warning("Unknown project type %r, no surfaces measured", project_type)
        takeoff = empty_takeoff()

    total_area = takeoff["total_area"]
    time_estimates = takeoff["time_estimates"]
    breakdown = takeoff["breakdown"]

    # --- Paint needed ---
    raw_gallons = (total_area * coats) / coverage
    if math.isfinite(raw_gallons):
        gallons = math.ceil(raw_gallons)
    else:
        logger.warning("Coverage %r too small to price %.1f sqft", coverage, total_area)
        gallons = 0
    liters = round(gallons * config.liters_per_gallon)

    # --- Costs ---
    paint_price = _paint_price(calc_input.get("paint_quality"), config)
    labor_rate = _positive(calc_input.get("labor_rate")) or config.default_labor_rate

    paint_cost = gallons * paint_price
    labor_cost = time_estimates["total_hours"] * labor_rate
    supplies = paint_cost * config.supplies_pct
    subtotal = paint_cost + labor_cost + supplies
    overhead = subtotal * config.overhead_pct
    profit = subtotal * config.profit_pct
    total = subtotal + overhead + profit

    # Second pass: each surface carries its share of the total by area
    for entry in breakdown.values():
        entry["cost"] = total * entry["area"] / total_area if total_area else 0.0

    logger.debug("Area quote (%s): %.1f sqft, %d gal, %.2f hrs, total $%.2f",
                 project_type, total_area, gallons, time_estimates["total_hours"], total)

    return {
        "total_area": total_area,
        "paint_needed": {"gallons": gallons, "liters": liters},
        "coverage": coverage,
        "costs": {
            "paint": paint_cost,
            "labor": labor_cost,
            "supplies": supplies,
            "subtotal": subtotal,
            "overhead": overhead,
            "profit": profit,
            "total": total,
        },
        "time_estimates": time_estimates,
        "breakdown": breakdown,
        "recommendations": generate_recommendations(calc_input, config),
        "pricing_version": config.version,
    }


def generate_recommendations(calc_input: dict, config: PricingConfig = None) -> dict:
    """Static lookup — paint chemistry and sheen by project type, brands by quality."""
    config = config or DEFAULT_PRICING
    project_type = calc_input.get("type")
    surfaces = calc_input.get("surfaces") or {}
    table = config.recommendations.get(project_type, {})

    if project_type == "interior":
        sheen = table["sheen_type_with_ceiling"] if surfaces.get("ceiling") else table["sheen_type"]
        primer_needed = calc_input.get("coats") == 1
    else:
        sheen = table.get("sheen_type", "")
        primer_needed = table.get("primer_needed", False)

    return {
        "paint_type": table.get("paint_type", ""),
        "primer_needed": primer_needed,
        "sheen_type": sheen,
        "brand_suggestions": list(config.brands.get(calc_input.get("paint_quality"), [])),
    }


def validate_calculator_input(calc_input: dict) -> list[str]:
    """
    Check a (possibly partial) calculator input.
    Returns human-readable error strings; empty list means valid.
    """
    errors = []
    calc_input = calc_input or {}

    if not calc_input.get("type"):
        errors.append("Calculator type is required")

    if not calc_input.get("dimensions"):
        errors.append("Dimensions are required")

    surfaces = calc_input.get("surfaces") or {}
    if not any(surfaces.values()):
        errors.append("At least one surface must be selected")

    if not calc_input.get("paint_quality"):
        errors.append("Paint quality selection is required")

    coats = calc_input.get("coats")
    if not _is_whole_number(coats) or coats < 1 or coats > 5:
        errors.append("Number of coats must be a whole number between 1 and 5")

    return errors


def _paint_price(paint_quality, config: PricingConfig) -> float:
    tier = config.paint_prices.get(paint_quality)
    if tier is None:
        logger.warning("Unknown paint quality %r, pricing at standard", paint_quality)
        tier = config.paint_prices["standard"]
    return tier["avg"]


def _is_whole_number(value) -> bool:
    """2 and 2.0 count, 2.5 and True do not."""
    return is_non_negative_number(value) and float(value).is_integer()


def _as_int(value) -> int:
    try:
        return max(int(value), 0)
    except (ValueError, TypeError, OverflowError):
        return 0


def _positive(value):
    """Return value as a float if it is a positive number, else None."""
    try:
        number = float(value)
    except (ValueError, TypeError):
        return None
    if not is_non_negative_number(number) or number == 0:
        return None
    return number
