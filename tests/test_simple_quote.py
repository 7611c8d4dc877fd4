"""
Simplified-context quote tests — the price given at the end of a chat.

Tests:
1-3.  Reference scenario and its breakdown
4-6.  Project type blending, timeline and prep multipliers
7-8.  Defaults for gaps in the context
9-10. Context validation
"""

import pytest

from paintquote.calculators.simple_quote import calculate_simple_quote, validate_simple_context


# --- Test fixtures ---

def _sample_context(**overrides):
    context = {
        "client_name": "John Smith",
        "address": "123 Main St",
        "quote_type": "quick",
        "sqft": 1000,
        "paint_quality": "premium",
        "project_type": "interior",
        "prep_work": "standard",
        "timeline": "standard",
    }
    context.update(overrides)
    return context


# ============================================================
# Reference scenario
# ============================================================

def test_reference_scenario_total():
    """base 3250 + prep 812.50 + markup 812.50 = 4875."""
    quote = calculate_simple_quote(_sample_context())
    assert quote["base"] == pytest.approx(3250.0)
    assert quote["breakdown"]["prep_work"] == pytest.approx(812.5)
    assert quote["breakdown"]["markup"] == pytest.approx(812.5)
    assert quote["total"] == 4875


def test_labor_and_materials_are_informational_shares_of_base():
    """45% / 35% of base. They don't partition the total."""
    quote = calculate_simple_quote(_sample_context())
    breakdown = quote["breakdown"]
    assert breakdown["labor"] == pytest.approx(3250 * 0.45)
    assert breakdown["materials"] == pytest.approx(3250 * 0.35)
    parts = breakdown["labor"] + breakdown["materials"] + breakdown["prep_work"] + breakdown["markup"]
    assert parts != pytest.approx(quote["total"])


def test_total_is_whole_dollars():
    quote = calculate_simple_quote(_sample_context(sqft=1234, timeline="rush"))
    assert isinstance(quote["total"], int)


# ============================================================
# Multipliers
# ============================================================

def test_both_blends_sixty_forty():
    quote = calculate_simple_quote(_sample_context(project_type="both"))
    assert quote["base"] == pytest.approx(600 * 3.25 + 400 * 4.25)
    assert quote["total"] == 5475


@pytest.mark.parametrize("timeline, expected", [
    ("rush", 6581),       # 4875 × 1.35 = 6581.25
    ("standard", 4875),
    ("flexible", 4631),   # 4875 × 0.95 = 4631.25
])
def test_timeline_multiplier_applies_after_markup(timeline, expected):
    quote = calculate_simple_quote(_sample_context(timeline=timeline))
    assert quote["total"] == expected


@pytest.mark.parametrize("prep_work, multiplier", [
    ("minimal", 1.10),
    ("standard", 1.25),
    ("extensive", 1.50),
])
def test_prep_is_base_times_multiplier_minus_one(prep_work, multiplier):
    quote = calculate_simple_quote(_sample_context(prep_work=prep_work))
    assert quote["breakdown"]["prep_work"] == pytest.approx(3250 * (multiplier - 1))
    assert quote["breakdown"]["markup"] == pytest.approx(3250 * multiplier * 0.2)


# ============================================================
# Defaults
# ============================================================

def test_missing_prep_and_timeline_default_to_standard():
    context = _sample_context()
    del context["prep_work"]
    del context["timeline"]
    quote = calculate_simple_quote(context)
    assert quote["total"] == 4875
    assert quote["timeline_multiplier"] == 1.0


def test_empty_context_prices_default_job():
    """1000 sqft premium interior."""
    assert calculate_simple_quote({})["total"] == 4875


# ============================================================
# Validation
# ============================================================

def test_validate_accepts_complete_context():
    assert validate_simple_context(_sample_context()) == []


def test_validate_rejects_bad_values():
    errors = validate_simple_context(_sample_context(
        sqft=-100, paint_quality="gold", project_type="garage", timeline="someday",
    ))
    assert len(errors) == 4
    assert errors[0] == "Square footage must be a positive number"
