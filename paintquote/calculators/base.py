"""
Abstract base class for the per-project-type area calculators.

Input: dimensions + surfaces dicts (from PaintCalculationInput)
Output: SurfaceTakeoff dict — total_area, breakdown, time_estimates
"""

import logging
import math
from abc import ABC, abstractmethod

from .pricing_config import DEFAULT_PRICING, PricingConfig

logger = logging.getLogger(__name__)


def is_non_negative_number(value) -> bool:
    """True for a finite int or float >= 0. Bools and numeric strings are not numbers here."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


def empty_takeoff() -> dict:
    return {
        "total_area": 0.0,
        "breakdown": {},
        "time_estimates": {
            "prep_hours": 0.0,
            "painting_hours": 0.0,
            "total_hours": 0.0,
            "total_days": 0,
        },
    }


class BaseCalculator(ABC):
    """All project-type calculators inherit from this."""

    PROJECT_TYPE = ""

    def __init__(self, config: PricingConfig = None):
        self.config = config or DEFAULT_PRICING

    @abstractmethod
    def measure_surfaces(self, dimensions: dict, surfaces: dict) -> list:
        """
        Takes the project dimensions and selected surfaces.
        Returns a list of SurfaceMeasure dicts: {surface, area, labor_hours}.
        Surfaces that are unselected or missing a dimension are left out.
        """
        pass

    def calculate(self, dimensions: dict, surfaces: dict, coats: int,
                  coverage: float) -> dict:
        """
        Run the takeoff for this project type.

        Returns:
            {
                total_area: float,
                breakdown: {surface: {area, paint_gallons, labor_hours, cost}},
                time_estimates: {prep_hours, painting_hours, total_hours, total_days},
            }
        """
        dimensions = dimensions or {}
        surfaces = surfaces or {}
        measures = self.measure_surfaces(dimensions, surfaces)

        total_area = 0.0
        painting_hours = 0.0
        breakdown = {}
        for m in measures:
            total_area += m["area"]
            painting_hours += m["labor_hours"]
            breakdown[m["surface"]] = self.make_breakdown_entry(
                m["area"], m["labor_hours"], coats, coverage,
            )

        total_hours = painting_hours * (1 + self.config.prep_fraction[self.PROJECT_TYPE])
        if not (math.isfinite(total_area) and math.isfinite(total_hours)):
            logger.warning("%s takeoff overflowed, dimensions too large to measure", self.PROJECT_TYPE)
            return empty_takeoff()

        logger.debug("%s takeoff: %d surfaces, %.1f sqft, %.2f hrs",
                     self.PROJECT_TYPE, len(measures), total_area, painting_hours)

        return {
            "total_area": total_area,
            "breakdown": breakdown,
            "time_estimates": self.make_time_estimate(painting_hours),
        }

    # --- Helper methods for all calculators ---

    def parse_number(self, value, default: float = 0.0) -> float:
        """Parse a numeric value from user input. Negative, NaN, infinite or junk becomes default."""
        if value is None:
            return default
        try:
            number = float(str(value).strip())
        except (ValueError, TypeError):
            return default
        if not is_non_negative_number(number):
            return default
        return number

    def get_dims(self, dimensions: dict, *keys) -> list:
        """Return the parsed values for keys, or None if any is missing/zero."""
        values = [self.parse_number(dimensions.get(k)) for k in keys]
        if not all(values):
            return None
        return values

    def perimeter(self, length: float, width: float) -> float:
        """Room or building perimeter in feet."""
        return 2.0 * (length + width)

    def throughput(self, key: str) -> float:
        """Look up a labor throughput constant for this project type."""
        return self.config.throughput[self.PROJECT_TYPE][key]

    def make_measure(self, surface: str, area: float, labor_hours: float) -> dict:
        """Build a SurfaceMeasure dict."""
        return {
            "surface": surface,
            "area": area,
            "labor_hours": labor_hours,
        }

    def make_breakdown_entry(self, area: float, labor_hours: float, coats: int,
                             coverage: float) -> dict:
        """Per-surface breakdown entry. Cost is filled in by the paint engine."""
        return {
            "area": area,
            "paint_gallons": (area * coats) / coverage if coverage else 0.0,
            "labor_hours": labor_hours,
            "cost": 0.0,
        }

    def make_time_estimate(self, painting_hours: float) -> dict:
        """Prep is a fixed fraction of painting time; days round up to whole days."""
        prep_hours = painting_hours * self.config.prep_fraction[self.PROJECT_TYPE]
        total_hours = prep_hours + painting_hours
        return {
            "prep_hours": prep_hours,
            "painting_hours": painting_hours,
            "total_hours": total_hours,
            "total_days": math.ceil(total_hours / self.config.hours_per_day),
        }
