"""
Charge-rate contractor calculator.

Each surface has a single $/unit charge rate that already bundles labor and
materials. Every line total is split 30% labor / 70% materials. Overhead,
markup and tax are layered on the combined charge.

Input: ContractorDimensions (new or legacy field names), ChargeRates, BusinessSettings
Output: ContractorQuote dict
"""

import logging

from ..formatting import format_currency
from .pricing_config import DEFAULT_PRICING, PricingConfig

logger = logging.getLogger(__name__)

# (breakdown key, dimension field, rate field, unit)
INTERIOR_LINE_ITEMS = [
    ("walls", "wall_sqft", "wall_charge_rate", "sq ft"),
    ("ceilings", "ceiling_sqft", "ceiling_charge_rate", "sq ft"),
    ("baseboards", "baseboard_linear_feet", "baseboard_charge_rate", "linear ft"),
    ("crown_molding", "crown_molding_linear_feet", "crown_molding_charge_rate", "linear ft"),
    ("interior_doors", "interior_doors", "door_charge_rate", "each"),
    ("interior_windows", "interior_windows", "window_charge_rate", "each"),
]

EXTERIOR_LINE_ITEMS = [
    ("exterior_walls", "exterior_wall_sqft", "exterior_wall_charge_rate", "sq ft"),
    ("soffits", "soffit_sqft", "soffit_charge_rate", "sq ft"),
    ("fascia", "fascia_linear_feet", "fascia_charge_rate", "linear ft"),
    ("exterior_doors", "exterior_doors", "exterior_door_charge_rate", "each"),
    ("exterior_windows", "exterior_windows", "exterior_window_charge_rate", "each"),
]

LINE_ITEMS = INTERIOR_LINE_ITEMS + EXTERIOR_LINE_ITEMS

CHARGE_RATE_FIELDS = [rate_field for _, _, rate_field, _ in LINE_ITEMS]

# Labels for the plain-text summary: (label, per-unit suffix)
SUMMARY_LABELS = {
    "walls": ("Walls", "/sq ft"),
    "ceilings": ("Ceilings", "/sq ft"),
    "baseboards": ("Baseboards", "/ft"),
    "crown_molding": ("Crown Molding", "/ft"),
    "interior_doors": ("Doors (with jambs)", " each"),
    "interior_windows": ("Windows", " each"),
    "exterior_walls": ("Exterior Walls", "/sq ft"),
    "soffits": ("Soffits", "/sq ft"),
    "fascia": ("Fascia Boards", "/ft"),
    "exterior_doors": ("Exterior Doors", " each"),
    "exterior_windows": ("Exterior Windows", " each"),
}


def convert_legacy_dimensions(dimensions: dict) -> dict:
    """
    Map legacy dimension fields onto the current ones.

    Returns a new dict; the input is not modified. Idempotent — a field that
    is already set is never overwritten, so running it twice changes nothing.
    """
    converted = dict(dimensions or {})

    wall_lf = converted.get("wall_linear_feet")
    ceiling_height = converted.get("ceiling_height")

    # Wall sqft from wall length × ceiling height
    if not converted.get("wall_sqft") and wall_lf and ceiling_height:
        converted["wall_sqft"] = wall_lf * ceiling_height

    if not converted.get("ceiling_sqft") and converted.get("ceiling_area") is not None:
        converted["ceiling_sqft"] = converted["ceiling_area"]

    if not converted.get("interior_doors") and converted.get("number_of_doors") is not None:
        converted["interior_doors"] = converted["number_of_doors"]
    if not converted.get("interior_windows") and converted.get("number_of_windows") is not None:
        converted["interior_windows"] = converted["number_of_windows"]

    # Baseboards run along every wall
    if not converted.get("baseboard_linear_feet") and wall_lf:
        converted["baseboard_linear_feet"] = wall_lf

    return converted


def calculate_contractor_quote(dimensions: dict, rates: dict, business_settings: dict,
                               config: PricingConfig = None) -> dict:
    """
    Price a job from per-unit charge rates.

    Args:
        dimensions: ContractorDimensions dict (legacy names accepted)
        rates: ChargeRates dict — all 11 *_charge_rate fields
        business_settings: {overhead_percentage, markup_percentage, tax_rate,
                            tax_on_materials_only, tax_label}

    Returns:
        ContractorQuote dict — dimensions, rates, breakdown, business amounts,
        tax, total_before_tax, final_price, labor_cost, materials_cost
    """
    config = config or DEFAULT_PRICING
    converted = convert_legacy_dimensions(dimensions)

    # --- Line items ---
    breakdown = {}
    for key, dim_field, rate_field, unit in LINE_ITEMS:
        breakdown[key] = _make_line_item(
            converted.get(dim_field) or 0, rates.get(rate_field) or 0, unit, config,
        )

    # --- Subtotals ---
    interior_subtotal = sum(breakdown[key]["total"] for key, _, _, _ in INTERIOR_LINE_ITEMS)
    exterior_subtotal = sum(breakdown[key]["total"] for key, _, _, _ in EXTERIOR_LINE_ITEMS)
    total_charge = interior_subtotal + exterior_subtotal
    total_labor = total_charge * config.charge_labor_share
    total_materials = total_charge * config.charge_materials_share

    breakdown.update({
        "interior_subtotal": interior_subtotal,
        "exterior_subtotal": exterior_subtotal,
        "total_charge": total_charge,
        "total_labor": total_labor,
        "total_materials": total_materials,
    })

    # --- Business layer ---
    overhead_pct = business_settings.get("overhead_percentage") or 0
    markup_pct = business_settings.get("markup_percentage") or 0
    tax_rate = business_settings.get("tax_rate") or 0
    tax_on_materials_only = bool(business_settings.get("tax_on_materials_only"))

    subtotal = total_charge
    overhead_amount = subtotal * (overhead_pct / 100.0)
    after_overhead = subtotal + overhead_amount
    markup_amount = after_overhead * (markup_pct / 100.0)
    total_before_tax = after_overhead + markup_amount

    # --- Tax ---
    tax_amount = 0.0
    if tax_rate > 0:
        if tax_on_materials_only:
            # Materials carry their share of overhead and markup into the tax base
            tax_base = (total_materials
                        * (1 + overhead_pct / 100.0)
                        * (1 + markup_pct / 100.0))
        else:
            tax_base = total_before_tax
        tax_amount = tax_base * (tax_rate / 100.0)

    final_price = total_before_tax + tax_amount

    logger.debug("Contractor quote: charge $%.2f, before tax $%.2f, final $%.2f",
                 total_charge, total_before_tax, final_price)

    return {
        "dimensions": converted,
        "rates": dict(rates),
        "breakdown": breakdown,
        "subtotal": subtotal,
        "overhead_percentage": overhead_pct,
        "overhead_amount": overhead_amount,
        "markup_percentage": markup_pct,
        "markup_amount": markup_amount,
        "tax_rate": tax_rate,
        "tax_on_materials_only": tax_on_materials_only,
        "tax_amount": tax_amount,
        "tax_label": business_settings.get("tax_label", ""),
        "total_before_tax": total_before_tax,
        "final_price": final_price,
        "labor_cost": total_labor,
        "materials_cost": total_materials,
        "pricing_version": config.version,
    }


def generate_quote_summary(quote: dict) -> str:
    """Plain-text itemised breakdown of a ContractorQuote, for notes and emails."""
    breakdown = quote["breakdown"]
    lines = ["QUOTE BREAKDOWN", ""]

    sections = [
        ("INTERIOR WORK:", INTERIOR_LINE_ITEMS, "interior_subtotal", "Interior Subtotal"),
        ("EXTERIOR WORK:", EXTERIOR_LINE_ITEMS, "exterior_subtotal", "Exterior Subtotal"),
    ]
    for heading, items, subtotal_key, subtotal_label in sections:
        if breakdown[subtotal_key] <= 0:
            continue
        lines.append(heading)
        for key, _, _, _ in items:
            item = breakdown[key]
            if item["quantity"] <= 0:
                continue
            label, per_unit = SUMMARY_LABELS[key]
            unit = "" if item["unit"] == "each" else " " + item["unit"]
            lines.append("- %s: %s%s @ %s%s = %s" % (
                label, _format_quantity(item["quantity"]), unit,
                format_currency(item["rate"], 2), per_unit,
                format_currency(item["total"], 2),
            ))
        lines.append("%s: %s" % (subtotal_label, format_currency(breakdown[subtotal_key], 2)))
        lines.append("")

    labor_pct = round(quote["labor_cost"] / quote["subtotal"] * 100) if quote["subtotal"] else 30
    lines.append("COST BREAKDOWN:")
    lines.append("Labor (%d%%): %s" % (labor_pct, format_currency(quote["labor_cost"], 2)))
    lines.append("Materials (%d%%): %s" % (100 - labor_pct, format_currency(quote["materials_cost"], 2)))
    lines.append("Subtotal: %s" % format_currency(quote["subtotal"], 2))

    if quote["overhead_amount"] > 0:
        lines.append("Overhead (%s%%): %s" % (
            _format_quantity(quote["overhead_percentage"]),
            format_currency(quote["overhead_amount"], 2)))
    if quote["markup_amount"] > 0:
        lines.append("Profit Margin (%s%%): %s" % (
            _format_quantity(quote["markup_percentage"]),
            format_currency(quote["markup_amount"], 2)))

    lines.append("Total Before Tax: %s" % format_currency(quote["total_before_tax"], 2))

    if quote["tax_amount"] > 0:
        note = " (on materials only)" if quote["tax_on_materials_only"] else ""
        lines.append("%s (%s%%%s): %s" % (
            quote["tax_label"] or "Tax", _format_quantity(quote["tax_rate"]), note,
            format_currency(quote["tax_amount"], 2)))

    lines.append("")
    lines.append("FINAL TOTAL: %s" % format_currency(quote["final_price"], 2))
    return "\n".join(lines)


def _make_line_item(quantity: float, rate: float, unit: str, config: PricingConfig) -> dict:
    """Build a ChargeLineItem dict — total split labor/materials by the configured share."""
    total = quantity * rate
    return {
        "quantity": quantity,
        "unit": unit,
        "rate": rate,
        "total": total,
        "labor": total * config.charge_labor_share,
        "materials": total * config.charge_materials_share,
    }


def _format_quantity(value) -> str:
    """1000.0 → '1000', 8.5 → '8.5'."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return str(round(value, 2))
