"""
Pricing front door.

One entry point for all three pricing models. A quote is requested as a
PricingStrategy, one of:

    AreaTier           dimensions + surfaces, priced by paint quality tier
    ChargeRate         per-unit charge rates + business settings
    SimplifiedContext  a completed conversation context

The variant decides the model, so two models can never be mixed within one
quote. PricingEngine.price() validates first and fails closed: any invalid
input yields a QuoteOutcome with ok=False and the error list, and no quote.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Optional, Union

from .calculators.base import is_non_negative_number
from .calculators.contractor import (
    CHARGE_RATE_FIELDS,
    calculate_contractor_quote,
)
from .calculators.paint_engine import calculate_painting_project, validate_calculator_input
from .calculators.pricing_config import DEFAULT_PRICING, PricingConfig
from .calculators.simple_quote import calculate_simple_quote, validate_simple_context

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AreaTier:
    type: str
    dimensions: dict
    surfaces: dict
    paint_quality: str
    coats: int
    labor_rate: Optional[float] = None
    paint_coverage: Optional[float] = None

    def as_input(self) -> dict:
        return {
            "type": self.type,
            "dimensions": dict(self.dimensions or {}),
            "surfaces": dict(self.surfaces or {}),
            "paint_quality": self.paint_quality,
            "coats": self.coats,
            "labor_rate": self.labor_rate,
            "paint_coverage": self.paint_coverage,
        }


@dataclass(frozen=True)
class ChargeRate:
    dimensions: dict
    rates: dict
    business_settings: dict = field(default_factory=dict)


@dataclass(frozen=True)
class SimplifiedContext:
    context: dict


PricingStrategy = Union[AreaTier, ChargeRate, SimplifiedContext]


@dataclass(frozen=True)
class QuoteOutcome:
    ok: bool
    strategy: str
    quote: Optional[dict] = None
    errors: list = field(default_factory=list)


class PricingEngine:
    """
    Validates a PricingStrategy and runs the matching calculator.
    """

    def __init__(self, config: PricingConfig = None):
        self.config = config or DEFAULT_PRICING

    def price(self, strategy: PricingStrategy) -> QuoteOutcome:
        """
        Price a strategy. Never returns a quote alongside errors.

        Raises:
            TypeError: strategy is not one of the PricingStrategy variants
        """
        if isinstance(strategy, AreaTier):
            name = "area_tier"
            errors = self._validate_area(strategy)
        elif isinstance(strategy, ChargeRate):
            name = "charge_rate"
            errors = self._validate_charge_rate(strategy)
        elif isinstance(strategy, SimplifiedContext):
            name = "simplified_context"
            errors = validate_simple_context(strategy.context, self.config)
        else:
            raise TypeError(f"Unknown pricing strategy: {type(strategy).__name__}")

        if errors:
            logger.info("Rejected %s quote: %s", name, "; ".join(errors))
            return QuoteOutcome(ok=False, strategy=name, errors=errors)

        quote = self._build(strategy)
        if not math.isfinite(_headline_total(quote)):
            errors = ["Quote total is not a finite number"]
            logger.info("Rejected %s quote: %s", name, errors[0])
            return QuoteOutcome(ok=False, strategy=name, errors=errors)

        return QuoteOutcome(ok=True, strategy=name, quote=quote)

    def _build(self, strategy: PricingStrategy) -> dict:
        if isinstance(strategy, AreaTier):
            return calculate_painting_project(strategy.as_input(), self.config)
        if isinstance(strategy, ChargeRate):
            return calculate_contractor_quote(
                strategy.dimensions, strategy.rates, strategy.business_settings or {}, self.config,
            )
        return calculate_simple_quote(strategy.context, self.config)

    # --- Validators ---

    def _validate_area(self, strategy: AreaTier) -> list:
        calc_input = strategy.as_input()
        errors = validate_calculator_input(calc_input)

        if calc_input["type"] and calc_input["type"] not in self.config.prep_fraction:
            errors.append(f"Unknown project type: {calc_input['type']}")
        if calc_input["paint_quality"] and calc_input["paint_quality"] not in self.config.paint_prices:
            errors.append(f"Unknown paint quality: {calc_input['paint_quality']}")

        max_dimension = self.config.max_dimension
        for key, value in calc_input["dimensions"].items():
            if value is None:
                continue
            if not is_non_negative_number(value):
                errors.append(f"Dimension {key} must be a non-negative number")
            elif value > max_dimension:
                errors.append(f"Dimension {key} must be at most {max_dimension:g}")
        for key in ("labor_rate", "paint_coverage"):
            value = calc_input[key]
            if value is not None and (not is_non_negative_number(value) or value == 0):
                errors.append(f"{key} must be a positive number")

        coverage = calc_input["paint_coverage"]
        if is_non_negative_number(coverage) and 0 < coverage < self.config.min_coverage:
            errors.append(f"paint_coverage must be at least {self.config.min_coverage:g}")
        return errors

    def _validate_charge_rate(self, strategy: ChargeRate) -> list:
        errors = []
        rates = strategy.rates or {}

        for rate_field in CHARGE_RATE_FIELDS:
            if rate_field not in rates or rates[rate_field] is None:
                errors.append(f"Missing charge rate: {rate_field}")
            elif not is_non_negative_number(rates[rate_field]):
                errors.append(f"Charge rate {rate_field} must be a non-negative number")

        for key, value in (strategy.dimensions or {}).items():
            if value is not None and not is_non_negative_number(value):
                errors.append(f"Dimension {key} must be a non-negative number")

        settings = strategy.business_settings or {}
        for key in ("overhead_percentage", "markup_percentage", "tax_rate"):
            value = settings.get(key)
            if value is not None and not is_non_negative_number(value):
                errors.append(f"{key} must be a non-negative number")
        return errors


def _headline_total(quote: dict) -> float:
    """The amount a customer would be billed, whichever model produced the quote."""
    if "final_price" in quote:
        return quote["final_price"]
    if "costs" in quote:
        return quote["costs"]["total"]
    return quote["total"]
