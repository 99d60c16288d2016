from pydantic import BaseModel, Field


class TaxRules(BaseModel):
    default_tax_year: int = 2000
    threshold_year: int = 2000
    post_threshold_multiplier: float = 1.2
    base_multiplier: float = 1.3

class DemoRules(BaseModel):
    income: float = 1000
    user_id: int = 1
    initial_item: str = "toy"
    replacement_item: str = "chicken"

class Rules(BaseModel):
    tax: TaxRules = Field(default_factory=TaxRules)
    demo: DemoRules = Field(default_factory=DemoRules)
