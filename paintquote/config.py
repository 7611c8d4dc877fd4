from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./paintquote.db"
    COMPANY_NAME: str = "PaintQuote"
    LOG_LEVEL: str = "INFO"

    # Area-tier defaults
    LABOR_RATE_DEFAULT: float = 50.00
    PAINT_COVERAGE_DEFAULT: float = 350.0

    # Charge-rate business defaults, in percent
    OVERHEAD_PCT_DEFAULT: float = 15.0
    MARKUP_PCT_DEFAULT: float = 30.0
    TAX_RATE_DEFAULT: float = 0.0
    TAX_ON_MATERIALS_ONLY_DEFAULT: bool = False
    TAX_LABEL_DEFAULT: str = "Sales Tax"

    class Config:
        env_file = ".env"


settings = Settings()


# Starting charge rates for a new contractor ($ per sq ft / linear ft / each)
DEFAULT_CHARGE_RATES = {
    "wall_charge_rate": 1.50,
    "ceiling_charge_rate": 1.25,
    "baseboard_charge_rate": 2.50,
    "crown_molding_charge_rate": 3.50,
    "door_charge_rate": 150.00,
    "window_charge_rate": 100.00,
    "exterior_wall_charge_rate": 2.00,
    "soffit_charge_rate": 1.75,
    "fascia_charge_rate": 3.50,
    "exterior_door_charge_rate": 200.00,
    "exterior_window_charge_rate": 125.00,
}


def default_business_settings() -> dict:
    """BusinessSettings dict built from the environment-backed defaults."""
    return {
        "overhead_percentage": settings.OVERHEAD_PCT_DEFAULT,
        "markup_percentage": settings.MARKUP_PCT_DEFAULT,
        "tax_rate": settings.TAX_RATE_DEFAULT,
        "tax_on_materials_only": settings.TAX_ON_MATERIALS_ONLY_DEFAULT,
        "tax_label": settings.TAX_LABEL_DEFAULT,
    }
