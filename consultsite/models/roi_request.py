from typing import Literal

from pydantic import BaseModel, Field

CompanySize = Literal["startup", "small", "medium", "large", "enterprise"]

# Keeps every scenario product well inside float range
MAX_AMOUNT = 1e12


class RoiEstimateRequest(BaseModel):
    investment: float = Field(
        ge=0, le=MAX_AMOUNT, allow_inf_nan=False, description="Total up-front investment in USD."
    )
    annual_benefit: float = Field(
        ge=0,
        le=MAX_AMOUNT,
        allow_inf_nan=False,
        description="Expected yearly benefit in USD before adjustments.",
    )
    years: int = Field(default=3, ge=1, le=10, description="Horizon used for total benefit and NPV (1–10).")
    discount_rate: float = Field(default=0.1, ge=0, le=1, description="Annual discount rate for NPV.")
    company_size: CompanySize = "medium"
    industry: str = Field(
        default="technology",
        description="Industry preset; unknown industries use a neutral factor of 1.0.",
    )
