from dataclasses import dataclass


class TaxCalculationError(ValueError):
    """Raised when an income cannot be taxed."""


@dataclass
class TaxInput:
    income: float
    tax_year: int | None = None  # None -> rules default


@dataclass
class TaxOutput:
    payment: float | None = None
    multiplier: float | None = None
    success: bool = False
    error: str | None = None
