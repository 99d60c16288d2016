"""
Tax component - Threshold-based payment calculation.
"""

from .component import (
    calculate,
    run,
    run_calculate,
    select_multiplier,
)
from .models import (
    TaxCalculationError,
    TaxInput,
    TaxOutput,
)
from .ports import TaxRulesPort

__all__ = [
    # Entry points
    "run",
    "run_calculate",
    # Functions
    "calculate",
    "select_multiplier",
    # Models
    "TaxInput",
    "TaxOutput",
    "TaxCalculationError",
    # Ports
    "TaxRulesPort",
]
