"""
Simplified-context quote — the price the chat assistant gives once a
conversation has collected enough fields.

Input: ConversationContext dict {sqft, paint_quality, project_type, prep_work?, timeline?}
Output: {total, breakdown: {labor, materials, prep_work, markup}, base, subtotal,
         timeline_multiplier, pricing_version}

materials and labor are informational shares of the base cost. They are not
a partition of the total and do not sum with prep and markup to it.
"""

import logging
import math

from .base import is_non_negative_number
from .pricing_config import DEFAULT_PRICING, PricingConfig

logger = logging.getLogger(__name__)

PROJECT_TYPES = ("interior", "exterior", "both")

# Fallbacks when the caller passes a context with gaps
DEFAULT_SQFT = 1000
DEFAULT_PAINT_QUALITY = "premium"
DEFAULT_PROJECT_TYPE = "interior"
DEFAULT_PREP_WORK = "standard"
DEFAULT_TIMELINE = "standard"


def calculate_simple_quote(context: dict, config: PricingConfig = None) -> dict:
    """Price a conversation context from base $/sqft and the prep/timeline multipliers."""
    config = config or DEFAULT_PRICING
    context = context or {}

    sqft = context.get("sqft") or DEFAULT_SQFT
    paint_quality = context.get("paint_quality") or DEFAULT_PAINT_QUALITY
    project_type = context.get("project_type") or DEFAULT_PROJECT_TYPE
    prep_work = context.get("prep_work") or DEFAULT_PREP_WORK
    timeline = context.get("timeline") or DEFAULT_TIMELINE

    rates = config.simple_base_rates.get(paint_quality)
    if rates is None:
        logger.warning("Unknown paint quality %r, pricing at %s", paint_quality, DEFAULT_PAINT_QUALITY)
        rates = config.simple_base_rates[DEFAULT_PAINT_QUALITY]

    # --- Base cost ---
    if project_type == "both":
        interior_sqft = sqft * config.both_interior_share
        exterior_sqft = sqft - interior_sqft
        base = interior_sqft * rates["interior"] + exterior_sqft * rates["exterior"]
    else:
        base = sqft * rates.get(project_type, rates["interior"])

    # --- Prep, markup, timeline ---
    prep_multiplier = config.prep_multipliers.get(prep_work, config.prep_multipliers[DEFAULT_PREP_WORK])
    timeline_multiplier = config.timeline_multipliers.get(
        timeline, config.timeline_multipliers[DEFAULT_TIMELINE])

    prep_cost = base * (prep_multiplier - 1)
    markup = (base + prep_cost) * config.simple_markup_pct
    subtotal = base + prep_cost + markup
    total = _round_half_up(subtotal * timeline_multiplier)

    logger.debug("Simple quote: %s sqft %s/%s, base $%.2f, total $%d",
                 sqft, paint_quality, project_type, base, total)

    return {
        "total": total,
        "breakdown": {
            "labor": base * config.simple_labor_pct,
            "materials": base * config.simple_materials_pct,
            "prep_work": prep_cost,
            "markup": markup,
        },
        "base": base,
        "subtotal": subtotal,
        "timeline_multiplier": timeline_multiplier,
        "pricing_version": config.version,
    }


def validate_simple_context(context: dict, config: PricingConfig = None) -> list[str]:
    """Errors that would make a simplified quote meaningless. Empty list means valid."""
    config = config or DEFAULT_PRICING
    context = context or {}
    errors = []

    sqft = context.get("sqft")
    if not is_non_negative_number(sqft) or sqft == 0:
        errors.append("Square footage must be a positive number")
    elif sqft > config.max_sqft:
        errors.append("Square footage must be at most {:,.0f}".format(config.max_sqft))

    if context.get("paint_quality") not in config.simple_base_rates:
        errors.append("Paint quality must be one of: %s" % ", ".join(config.simple_base_rates))

    if context.get("project_type") not in PROJECT_TYPES:
        errors.append("Project type must be one of: %s" % ", ".join(PROJECT_TYPES))

    prep_work = context.get("prep_work")
    if prep_work is not None and prep_work not in config.prep_multipliers:
        errors.append("Prep work must be one of: %s" % ", ".join(config.prep_multipliers))

    timeline = context.get("timeline")
    if timeline is not None and timeline not in config.timeline_multipliers:
        errors.append("Timeline must be one of: %s" % ", ".join(config.timeline_multipliers))

    return errors


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
