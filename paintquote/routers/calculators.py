"""
Calculator API — stateless pricing endpoints.

POST /api/calculate/area        — Area-tier quote from room dimensions
POST /api/calculate/contractor  — Charge-rate quote with overhead, markup and tax
POST /api/calculate/summary     — Charge-rate quote plus a plain-text breakdown
POST /api/calculate/simple      — $/sqft quote from a completed conversation context
GET  /api/calculate/defaults    — Default charge rates and business settings
"""

import logging

from fastapi import APIRouter, HTTPException

from ..calculators.contractor import generate_quote_summary
from ..calculators.pricing_config import PRICING_CONFIG_VERSION
from ..config import DEFAULT_CHARGE_RATES, default_business_settings, settings
from ..conversation.engine import get_completion_status
from ..formatting import format_currency
from ..pricing_engine import AreaTier, ChargeRate, PricingEngine, SimplifiedContext
from ..schemas import AreaCalculationRequest, ContractorQuoteRequest, ConversationContext

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculate", tags=["calculators"])

# Stateless, shared across requests
pricing = PricingEngine()


@router.post("/area")
def calculate_area(request: AreaCalculationRequest):
    """
    Price a job from room dimensions and selected surfaces.
    Returns 422 with the validation messages if the input is incomplete.
    """
    strategy = AreaTier(
        type=request.type,
        dimensions=request.dimensions.model_dump(exclude_none=True) if request.dimensions else {},
        surfaces=request.surfaces.model_dump() if request.surfaces else {},
        paint_quality=request.paint_quality,
        coats=request.coats,
        labor_rate=request.labor_rate or settings.LABOR_RATE_DEFAULT,
        paint_coverage=request.paint_coverage or settings.PAINT_COVERAGE_DEFAULT,
    )
    outcome = pricing.price(strategy)
    if not outcome.ok:
        raise HTTPException(status_code=422, detail=outcome.errors)

    result = dict(outcome.quote)
    result["formatted_total"] = format_currency(result["costs"]["total"])
    return result


@router.post("/contractor")
def calculate_contractor(request: ContractorQuoteRequest):
    """Price a job from per-unit charge rates. Missing rates/settings use the defaults."""
    outcome = pricing.price(_charge_rate_strategy(request))
    if not outcome.ok:
        raise HTTPException(status_code=422, detail=outcome.errors)

    result = dict(outcome.quote)
    result["formatted_total"] = format_currency(result["final_price"], 2)
    return result


@router.post("/summary")
def calculate_summary(request: ContractorQuoteRequest):
    """Charge-rate quote plus its plain-text breakdown, for notes and emails."""
    outcome = pricing.price(_charge_rate_strategy(request))
    if not outcome.ok:
        raise HTTPException(status_code=422, detail=outcome.errors)

    return {
        "quote": outcome.quote,
        "summary": generate_quote_summary(outcome.quote),
    }


@router.post("/simple")
def calculate_simple(request: ConversationContext):
    """Price a completed conversation context."""
    context = request.model_dump(exclude_none=True)

    completion = get_completion_status(context)
    if not completion["is_complete"]:
        raise HTTPException(
            status_code=422,
            detail=[f"Missing required field: {f}" for f in completion["required_missing"]],
        )

    outcome = pricing.price(SimplifiedContext(context=context))
    if not outcome.ok:
        raise HTTPException(status_code=422, detail=outcome.errors)

    result = dict(outcome.quote)
    result["formatted_total"] = format_currency(result["total"])
    return result


@router.get("/defaults")
def get_defaults():
    """Starting charge rates and business settings for a new contractor."""
    return {
        "company_name": settings.COMPANY_NAME,
        "rates": dict(DEFAULT_CHARGE_RATES),
        "business_settings": default_business_settings(),
        "labor_rate": settings.LABOR_RATE_DEFAULT,
        "paint_coverage": settings.PAINT_COVERAGE_DEFAULT,
        "pricing_version": PRICING_CONFIG_VERSION,
    }


def _charge_rate_strategy(request: ContractorQuoteRequest) -> ChargeRate:
    """Fill unset rates and business settings from the configured defaults."""
    rates = dict(DEFAULT_CHARGE_RATES)
    if request.rates:
        rates.update(request.rates.model_dump(exclude_none=True))

    business_settings = default_business_settings()
    if request.business_settings:
        business_settings.update(request.business_settings.model_dump(exclude_none=True))

    return ChargeRate(
        dimensions=request.dimensions.model_dump(exclude_none=True),
        rates=rates,
        business_settings=business_settings,
    )
