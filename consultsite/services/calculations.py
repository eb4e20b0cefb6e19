"""ROI, NPV and payback arithmetic behind the ROI calculator pages."""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, NamedTuple, Sequence, Tuple

from consultsite.models.roi_response import CalculatorResult, ScenarioResult


class Scenario(NamedTuple):
    name: str
    multiplier: float
    description: str


COMPANY_SIZE_MULTIPLIERS: Dict[str, float] = {
    "startup": 0.5,
    "small": 0.8,
    "medium": 1.0,
    "large": 1.3,
    "enterprise": 1.8,
}

INDUSTRY_FACTORS: Dict[str, float] = {
    "technology": 1.2,
    "finance": 1.4,
    "healthcare": 1.1,
    "manufacturing": 0.9,
    "retail": 0.8,
    "government": 0.7,
    "nonprofit": 0.6,
}

STANDARD_SCENARIOS: Tuple[Scenario, ...] = (
    Scenario("Conservative", 0.7, "Cautious estimates with lower expected benefits"),
    Scenario("Realistic", 1.0, "Most likely outcomes based on typical engagements"),
    Scenario("Optimistic", 1.4, "Best-case scenario with maximum potential benefits"),
)

DEFAULT_DISCOUNT_RATE = 0.1

# Shown in place of a figure that is infinite or NaN
NOT_AVAILABLE = "N/A"


def _round(value: float) -> int:
    """Round half away from zero (``round()`` would round half to even)."""
    return int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_currency(amount: float) -> str:
    """``1234.5`` → ``$1,235``; negatives keep the sign in front: ``-$1,235``."""
    if not math.isfinite(amount):
        return NOT_AVAILABLE
    rounded = _round(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,}"


def format_percentage(value: float) -> str:
    if not math.isfinite(value):
        return NOT_AVAILABLE
    return f"{_round(value)}%"


def format_number(value: float) -> str:
    if not math.isfinite(value):
        return NOT_AVAILABLE
    return f"{_round(value):,}"


# ---------------------------------------------------------------------------
# Core formulas
# ---------------------------------------------------------------------------

def calculate_roi(benefits: float, investment: float) -> float:
    """Return on investment as a percentage; 0 when nothing was invested."""
    if investment == 0:
        return 0.0
    return (benefits - investment) / investment * 100


def calculate_payback_period(investment: float, monthly_benefit: float) -> float:
    """Months until *investment* is recovered; 0 when there is no positive benefit."""
    if monthly_benefit <= 0:
        return 0.0
    return investment / monthly_benefit


def calculate_npv(
    investment: float,
    annual_benefit: float,
    years: int,
    discount_rate: float = DEFAULT_DISCOUNT_RATE,
) -> float:
    """Net present value of a constant yearly benefit received at each year end."""
    npv = -investment
    for year in range(1, years + 1):
        npv += annual_benefit / (1 + discount_rate) ** year
    return npv


# ---------------------------------------------------------------------------
# Scenario estimates
# ---------------------------------------------------------------------------

def adjustment_factor(company_size: str, industry: str) -> float:
    """Combined preset multiplier; unknown keys count as 1.0."""
    return COMPANY_SIZE_MULTIPLIERS.get(company_size, 1.0) * INDUSTRY_FACTORS.get(
        industry.lower(), 1.0
    )


def _scenario_results(
    investment: float, annual_benefit: float, years: int, discount_rate: float
) -> List[CalculatorResult]:
    total_benefit = annual_benefit * years
    roi = calculate_roi(total_benefit, investment)
    payback = calculate_payback_period(investment, annual_benefit / 12)
    npv = calculate_npv(investment, annual_benefit, years, discount_rate)
    return [
        CalculatorResult(
            label="Annual Benefit",
            value=annual_benefit,
            type="currency",
            formatted=format_currency(annual_benefit),
            description="Expected yearly value after size, industry and scenario adjustments",
        ),
        CalculatorResult(
            label="Total Benefit",
            value=total_benefit,
            type="currency",
            formatted=format_currency(total_benefit),
            description=f"Cumulative benefit over {years} year(s)",
        ),
        CalculatorResult(
            label="Return on Investment",
            value=roi,
            type="percentage",
            formatted=format_percentage(roi),
            description="Net gain relative to the investment",
            is_highlight=True,
        ),
        CalculatorResult(
            label="Payback Period",
            value=payback,
            type="number",
            formatted=f"{format_number(payback)} months",
            description="Months until the investment is recovered",
        ),
        CalculatorResult(
            label="Net Present Value",
            value=npv,
            type="currency",
            formatted=format_currency(npv),
            description=f"Discounted at {format_percentage(discount_rate * 100)} per year",
        ),
    ]


def estimate_roi(
    investment: float,
    annual_benefit: float,
    years: int = 3,
    discount_rate: float = DEFAULT_DISCOUNT_RATE,
    company_size: str = "medium",
    industry: str = "technology",
    scenarios: Sequence[Scenario] = STANDARD_SCENARIOS,
) -> Tuple[float, List[ScenarioResult]]:
    """Evaluate every scenario for the given inputs.

    Returns:
        A tuple of *(adjustment_factor, scenario_results)*.
    """
    factor = adjustment_factor(company_size, industry)
    results = []
    for scenario in scenarios:
        adjusted = annual_benefit * factor * scenario.multiplier
        results.append(
            ScenarioResult(
                name=scenario.name,
                multiplier=scenario.multiplier,
                description=scenario.description,
                results=_scenario_results(investment, adjusted, years, discount_rate),
            )
        )
    return factor, results
