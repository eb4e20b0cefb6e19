from typing import List, Literal

from pydantic import BaseModel

ResultType = Literal["currency", "percentage", "hours", "number"]


class CalculatorResult(BaseModel):
    label: str
    value: float
    type: ResultType
    formatted: str
    description: str = ""
    is_highlight: bool = False


class ScenarioResult(BaseModel):
    name: str
    multiplier: float
    description: str
    results: List[CalculatorResult]


class RoiEstimateResponse(BaseModel):
    adjustment_factor: float
    """Combined company-size and industry multiplier applied to the benefit."""
    scenarios: List[ScenarioResult]
