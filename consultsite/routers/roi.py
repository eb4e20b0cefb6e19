import logging

from fastapi import APIRouter, HTTPException, Request

from consultsite.limiter import limiter
from consultsite.models.page_data import RoiCalculatorPageData
from consultsite.models.roi_request import RoiEstimateRequest
from consultsite.models.roi_response import RoiEstimateResponse
from consultsite.services.calculations import estimate_roi
from consultsite.services.pages import ContentNotFoundError, load_roi_calculator_page

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/roi-calculator")


@router.get("", response_model=RoiCalculatorPageData, summary="ROI calculator index")
async def calculator_index() -> RoiCalculatorPageData:
    return load_roi_calculator_page()


@router.post(
    "/estimate",
    response_model=RoiEstimateResponse,
    summary="Estimate ROI across the standard scenarios",
    description=(
        "Applies the company-size and industry presets to *annual_benefit*, then "
        "returns ROI, payback period and NPV for the Conservative, Realistic and "
        "Optimistic scenarios."
    ),
)
@limiter.limit("30/minute")
async def estimate(request: Request, body: RoiEstimateRequest) -> RoiEstimateResponse:
    logger.info(
        "ROI estimate requested",
        extra={"company_size": body.company_size, "industry": body.industry, "years": body.years},
    )
    factor, scenarios = estimate_roi(
        investment=body.investment,
        annual_benefit=body.annual_benefit,
        years=body.years,
        discount_rate=body.discount_rate,
        company_size=body.company_size,
        industry=body.industry,
    )
    return RoiEstimateResponse(adjustment_factor=factor, scenarios=scenarios)


@router.get("/{slug}", response_model=RoiCalculatorPageData, summary="ROI calculator page")
async def calculator_page(slug: str) -> RoiCalculatorPageData:
    try:
        return load_roi_calculator_page(slug)
    except ContentNotFoundError:
        raise HTTPException(status_code=404, detail="Calculator not found")
