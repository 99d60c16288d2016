from typing import Protocol


class TaxRulesPort(Protocol):
    """Rate table consumed by the calculation (satisfied by TaxRules)."""

    default_tax_year: int
    threshold_year: int
    post_threshold_multiplier: float
    base_multiplier: float
