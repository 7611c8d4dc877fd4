"""
Pricing configuration — every constant the calculators use, in one place.

Versioned so a quote can record which calibration produced it. To recalibrate
for a region or market, build a PricingConfig with different tables and pass
it to the calculators; nothing in the formulas hardcodes these values.
"""

from dataclasses import dataclass, field

PRICING_CONFIG_VERSION = "2025.1"

# Average $/gallon by quality tier (area-tier model)
PAINT_PRICES = {
    "economy": {"min": 25.0, "max": 35.0, "avg": 30.0},
    "standard": {"min": 40.0, "max": 55.0, "avg": 47.5},
    "premium": {"min": 60.0, "max": 80.0, "avg": 70.0},
}

# Throughput per surface: sqft/hr, linear ft/hr, or hours per unit (see keys)
LABOR_THROUGHPUT = {
    "interior": {
        "walls_sqft_per_hr": 175.0,
        "ceiling_sqft_per_hr": 125.0,
        "trim_lf_per_hr": 60.0,
        "hours_per_door": 0.75,
    },
    "exterior": {
        "siding_sqft_per_hr": 150.0,
        "soffit_sqft_per_hr": 100.0,
        "fascia_lf_per_hr": 50.0,
        "trim_lf_per_hr": 40.0,
        "hours_per_door": 1.0,
        "hours_per_window": 0.3,
    },
    "commercial": {
        "walls_sqft_per_hr": 200.0,
        "ceiling_sqft_per_hr": 150.0,
        "trim_lf_per_hr": 60.0,
        "floors_sqft_per_hr": 250.0,  # epoxy
        "hours_per_door": 1.0,
    },
    "cabinet": {
        "hours_per_door": 0.5,
        "hours_per_drawer": 0.25,
        "hours_per_frame": 1.0,
    },
}

# Fraction of wall area left after deducting doors/windows
OPENING_FACTOR = {
    "interior": 0.90,
    "exterior": 0.85,
    "commercial": 1.00,
}

DOOR_SQFT = {
    "interior": 20.0,
    "exterior": 30.0,
    "commercial": 30.0,
}

# Surface-prep hours as a fraction of painting hours
PREP_FRACTION = {
    "interior": 0.20,
    "exterior": 0.30,
    "commercial": 0.10,
    "cabinet": 0.50,
}

GEOMETRY = {
    "trim_sqft_per_lf": 0.5,           # ~6" wide trim
    "fascia_height_ft": 1.0,
    "soffit_overhang_ft": 2.0,
    "exterior_corner_runs": 4,         # corner boards, one per corner, full height
    "exterior_trim_lf_per_window": 15.0,
    "window_trim_sqft": 10.0,
    "cabinet_sqft": 30.0,
    "cabinet_doors_each": 2,
    "cabinet_drawers_each": 2,
}

# Simplified-context model: base $/sqft by [paint_quality][project_type]
SIMPLE_BASE_RATES = {
    "basic": {"interior": 2.00, "exterior": 2.60},
    "premium": {"interior": 3.25, "exterior": 4.25},
    "luxury": {"interior": 5.25, "exterior": 6.75},
}

PREP_MULTIPLIERS = {
    "minimal": 1.10,
    "standard": 1.25,
    "extensive": 1.50,
}

TIMELINE_MULTIPLIERS = {
    "rush": 1.35,
    "standard": 1.00,
    "flexible": 0.95,
}

RECOMMENDATIONS_BY_TYPE = {
    "interior": {
        "paint_type": "Acrylic Latex",
        "sheen_type": "Eggshell or Satin",
        "sheen_type_with_ceiling": "Flat for ceilings, Eggshell for walls",
    },
    "exterior": {
        "paint_type": "100% Acrylic",
        "sheen_type": "Satin or Semi-Gloss",
        "primer_needed": True,
    },
    "commercial": {
        "paint_type": "Commercial-Grade Acrylic",
        "sheen_type": "Semi-Gloss or Gloss",
        "primer_needed": False,
    },
    "cabinet": {
        "paint_type": "Alkyd or Hybrid Enamel",
        "sheen_type": "Semi-Gloss or Gloss",
        "primer_needed": True,
    },
}

BRAND_SUGGESTIONS = {
    "economy": ["Behr Pro", "Valspar Pro", "Glidden Professional"],
    "standard": ["Benjamin Moore Ben", "Sherwin-Williams SuperPaint", "PPG Diamond"],
    "premium": ["Benjamin Moore Aura", "Sherwin-Williams Emerald", "Farrow & Ball"],
}


@dataclass(frozen=True)
class PricingConfig:
    """Calibration for all three pricing models."""

    version: str = PRICING_CONFIG_VERSION

    # Area-tier model
    paint_prices: dict = field(default_factory=lambda: dict(PAINT_PRICES))
    throughput: dict = field(default_factory=lambda: dict(LABOR_THROUGHPUT))
    opening_factor: dict = field(default_factory=lambda: dict(OPENING_FACTOR))
    door_sqft: dict = field(default_factory=lambda: dict(DOOR_SQFT))
    prep_fraction: dict = field(default_factory=lambda: dict(PREP_FRACTION))
    geometry: dict = field(default_factory=lambda: dict(GEOMETRY))
    recommendations: dict = field(default_factory=lambda: dict(RECOMMENDATIONS_BY_TYPE))
    brands: dict = field(default_factory=lambda: dict(BRAND_SUGGESTIONS))
    default_labor_rate: float = 50.0
    default_coverage: float = 350.0  # sqft per gallon per coat
    min_coverage: float = 1.0
    max_dimension: float = 10000.0  # feet, or a count of doors/windows/cabinets
    supplies_pct: float = 0.15
    overhead_pct: float = 0.15
    profit_pct: float = 0.25
    hours_per_day: float = 8.0
    liters_per_gallon: float = 3.785

    # Charge-rate model
    charge_labor_share: float = 0.30

    # Simplified-context model
    simple_base_rates: dict = field(default_factory=lambda: dict(SIMPLE_BASE_RATES))
    prep_multipliers: dict = field(default_factory=lambda: dict(PREP_MULTIPLIERS))
    timeline_multipliers: dict = field(default_factory=lambda: dict(TIMELINE_MULTIPLIERS))
    simple_materials_pct: float = 0.35
    simple_labor_pct: float = 0.45
    simple_markup_pct: float = 0.20
    both_interior_share: float = 0.60
    max_sqft: float = 1000000.0

    @property
    def charge_materials_share(self) -> float:
        return 1.0 - self.charge_labor_share


DEFAULT_PRICING = PricingConfig()
