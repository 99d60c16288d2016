import logging
import os
from pathlib import Path

from src.rules.models import Rules

logger = logging.getLogger(__name__)

RULES_PATH_ENV = "LTL_RULES_PATH"
DEFAULT_RULES_PATH = "rules.yaml"


def get_rules_path(override: str | None = None) -> Path:
    """
    Resolve the rules file location.

    Precedence: explicit override, then $LTL_RULES_PATH, then ./rules.yaml.
    """
    if override:
        return Path(override)
    return Path(os.environ.get(RULES_PATH_ENV, DEFAULT_RULES_PATH))


def validate_tax_rules(rules: Rules) -> list[str]:
    """
    Sanity-check the tax rules before use. Returns a list of warnings.
    """
    warnings = []
    tax = rules.tax

    if tax.post_threshold_multiplier <= 0 or tax.base_multiplier <= 0:
        warnings.append("Tax multipliers should be positive")

    if tax.default_tax_year > tax.threshold_year:
        warnings.append(
            f"Default tax year {tax.default_tax_year} is past the threshold "
            f"{tax.threshold_year}; the post-threshold multiplier applies by default"
        )

    for w in warnings:
        logger.warning(w)

    return warnings
