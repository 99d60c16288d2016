"""
Tax component - Threshold-based payment calculation.

The payment is the income scaled by one of two multipliers:
- tax years after the threshold use the post-threshold multiplier
- everything else (threshold year included) uses the base multiplier
"""

from __future__ import annotations

import logging
import math

from src.rules.models import TaxRules

from .models import TaxCalculationError, TaxInput, TaxOutput
from .ports import TaxRulesPort

logger = logging.getLogger(__name__)

DEFAULT_RULES = TaxRules()


def select_multiplier(tax_year: int, rules: TaxRulesPort = DEFAULT_RULES) -> float:
    if tax_year > rules.threshold_year:
        return rules.post_threshold_multiplier
    return rules.base_multiplier


def _validate_income(income: float) -> None:
    # bool is an int subclass; True * 1.3 is never what the caller meant
    if isinstance(income, bool) or not isinstance(income, (int, float)):
        raise TaxCalculationError(f"Income must be a number, got {type(income).__name__}")
    if not math.isfinite(income):
        raise TaxCalculationError(f"Income must be finite, got {income}")


def calculate(
    income: float,
    tax_year: int | None = None,
    rules: TaxRulesPort = DEFAULT_RULES,
) -> float:
    """
    Calculate the payment for an income in a given tax year.

    Args:
        income: Gross income. Negative values are taxed as-is.
        tax_year: Year to tax; defaults to rules.default_tax_year (2000).
        rules: Threshold and multipliers.

    Raises:
        TaxCalculationError: income is not a finite number, or the payment
            overflows
    """
    _validate_income(income)
    year = rules.default_tax_year if tax_year is None else tax_year
    payment = income * select_multiplier(year, rules)
    if not math.isfinite(payment):
        raise TaxCalculationError(f"Payment overflows for income {income}")
    return payment


def run_calculate(inp: TaxInput, rules: TaxRulesPort = DEFAULT_RULES) -> TaxOutput:
    year = rules.default_tax_year if inp.tax_year is None else inp.tax_year

    try:
        payment = calculate(inp.income, year, rules)
    except TaxCalculationError as e:
        logger.warning("Tax calculation rejected: %s", e)
        return TaxOutput(success=False, error=str(e))

    multiplier = select_multiplier(year, rules)
    logger.debug("Taxed %s for %d at x%s -> %s", inp.income, year, multiplier, payment)
    return TaxOutput(payment=payment, multiplier=multiplier, success=True)


def run(inp: TaxInput, *, rules: TaxRulesPort | None = None) -> TaxOutput:
    if isinstance(inp, TaxInput):
        return run_calculate(inp, rules or DEFAULT_RULES)

    raise ValueError(f"Unknown input type: {type(inp)}")
