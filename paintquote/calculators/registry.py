"""
Calculator registry — maps project type strings to calculator classes.
"""

from .base import BaseCalculator
from .cabinet import CabinetCalculator
from .commercial import CommercialCalculator
from .exterior import ExteriorCalculator
from .interior import InteriorCalculator
from .pricing_config import PricingConfig

CALCULATOR_REGISTRY: dict[str, type] = {
    "interior": InteriorCalculator,
    "exterior": ExteriorCalculator,
    "commercial": CommercialCalculator,
    "cabinet": CabinetCalculator,
}


def get_calculator(project_type: str, config: PricingConfig = None) -> BaseCalculator:
    """Returns an instance of the calculator for a project type, or raises ValueError."""
    if project_type not in CALCULATOR_REGISTRY:
        raise ValueError(
            f"No calculator registered for project type: {project_type}. "
            f"Available: {list(CALCULATOR_REGISTRY.keys())}"
        )
    return CALCULATOR_REGISTRY[project_type](config)


def has_calculator(project_type: str) -> bool:
    """Check if a calculator exists for a project type."""
    return project_type in CALCULATOR_REGISTRY


def list_calculators() -> list[str]:
    """List all registered project types."""
    return list(CALCULATOR_REGISTRY.keys())
