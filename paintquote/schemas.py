from pydantic import BaseModel, Field
from typing import Optional


def _measure(**kwargs):
    """Optional non-negative measurement."""
    return Field(None, ge=0, allow_inf_nan=False, **kwargs)


# --- Area-tier calculator ---

class ProjectDimensions(BaseModel):
    length: Optional[float] = _measure()
    width: Optional[float] = _measure()
    height: Optional[float] = _measure()
    doors: Optional[float] = _measure()
    windows: Optional[float] = _measure()
    cabinet_count: Optional[float] = _measure()


class SurfaceSelection(BaseModel):
    walls: bool = False
    ceiling: bool = False
    trim: bool = False
    doors: bool = False
    windows: bool = False
    siding: bool = False
    soffit: bool = False
    fascia: bool = False
    floors: bool = False


class AreaCalculationRequest(BaseModel):
    # Everything optional so the calculator's own validation can report what's missing
    type: Optional[str] = None
    dimensions: Optional[ProjectDimensions] = None
    surfaces: Optional[SurfaceSelection] = None
    paint_quality: Optional[str] = None
    coats: Optional[int] = None
    labor_rate: Optional[float] = Field(None, gt=0, allow_inf_nan=False)
    paint_coverage: Optional[float] = Field(None, gt=0, allow_inf_nan=False)


# --- Charge-rate calculator ---

class ContractorDimensions(BaseModel):
    wall_sqft: Optional[float] = _measure()
    ceiling_sqft: Optional[float] = _measure()
    baseboard_linear_feet: Optional[float] = _measure()
    crown_molding_linear_feet: Optional[float] = _measure()
    interior_doors: Optional[float] = _measure()
    interior_windows: Optional[float] = _measure()
    exterior_wall_sqft: Optional[float] = _measure()
    soffit_sqft: Optional[float] = _measure()
    fascia_linear_feet: Optional[float] = _measure()
    exterior_doors: Optional[float] = _measure()
    exterior_windows: Optional[float] = _measure()

    # Legacy fields, converted before pricing
    wall_linear_feet: Optional[float] = _measure()
    ceiling_height: Optional[float] = _measure()
    ceiling_area: Optional[float] = _measure()
    number_of_doors: Optional[float] = _measure()
    number_of_windows: Optional[float] = _measure()


class ChargeRates(BaseModel):
    wall_charge_rate: Optional[float] = _measure()
    ceiling_charge_rate: Optional[float] = _measure()
    baseboard_charge_rate: Optional[float] = _measure()
    crown_molding_charge_rate: Optional[float] = _measure()
    door_charge_rate: Optional[float] = _measure()
    window_charge_rate: Optional[float] = _measure()
    exterior_wall_charge_rate: Optional[float] = _measure()
    soffit_charge_rate: Optional[float] = _measure()
    fascia_charge_rate: Optional[float] = _measure()
    exterior_door_charge_rate: Optional[float] = _measure()
    exterior_window_charge_rate: Optional[float] = _measure()


class BusinessSettings(BaseModel):
    overhead_percentage: Optional[float] = _measure()
    markup_percentage: Optional[float] = _measure()
    tax_rate: Optional[float] = _measure()
    tax_on_materials_only: Optional[bool] = None
    tax_label: Optional[str] = None


class ContractorQuoteRequest(BaseModel):
    dimensions: ContractorDimensions
    rates: Optional[ChargeRates] = None  # Missing rates fall back to DEFAULT_CHARGE_RATES
    business_settings: Optional[BusinessSettings] = None


# --- Simplified-context quote ---

class ConversationContext(BaseModel):
    client_name: Optional[str] = None
    address: Optional[str] = None
    quote_type: Optional[str] = None  # 'quick' | 'advanced'
    project_type: Optional[str] = None  # 'interior' | 'exterior' | 'both'
    sqft: Optional[float] = Field(None, gt=0, allow_inf_nan=False)
    paint_quality: Optional[str] = None  # 'basic' | 'premium' | 'luxury'
    prep_work: Optional[str] = None  # 'minimal' | 'standard' | 'extensive'
    timeline: Optional[str] = None  # 'rush' | 'standard' | 'flexible'
