"""Page-data endpoints: the payload each site route renders from."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from consultsite.dependencies import get_content_client, get_fallbacks
from consultsite.limiter import limiter
from consultsite.models.page_data import (
    CaseStudiesPageData,
    CaseStudyPageData,
    HomePageData,
    InsightPageData,
    InsightsPageData,
    ServicePageData,
    ServicesPageData,
    StaticPageData,
)
from consultsite.services.contentful import ContentClient
from consultsite.services.fallbacks import FallbackStore
from consultsite.services.pages import (
    ContentNotFoundError,
    load_about_page,
    load_case_studies_page,
    load_case_study_page,
    load_home_page,
    load_insight_page,
    load_insights_page,
    load_layout,
    load_service_page,
    load_services_page,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

_PAGE_LIMIT = "60/minute"


def _not_found(exc: ContentNotFoundError, detail: str) -> HTTPException:
    logger.info("Not found: %s", exc, extra={"kind": exc.kind, "slug": exc.slug})
    return HTTPException(status_code=404, detail=detail)


@router.get("/pages/layout", response_model=StaticPageData, summary="Site-wide default SEO")
async def layout_page() -> StaticPageData:
    return load_layout()


@router.get("/pages/home", response_model=HomePageData, summary="Home page data")
@limiter.limit(_PAGE_LIMIT)
async def home_page(
    request: Request, client: ContentClient = Depends(get_content_client)
) -> HomePageData:
    return await load_home_page(client)


@router.get("/pages/about", response_model=StaticPageData, summary="About page data")
async def about_page() -> StaticPageData:
    return load_about_page()


@router.get("/services", response_model=ServicesPageData, summary="Services listing")
@limiter.limit(_PAGE_LIMIT)
async def services_page(
    request: Request, client: ContentClient = Depends(get_content_client)
) -> ServicesPageData:
    return await load_services_page(client)


@router.get("/services/{slug}", response_model=ServicePageData, summary="Service detail")
@limiter.limit(_PAGE_LIMIT)
async def service_page(
    request: Request,
    slug: str,
    client: ContentClient = Depends(get_content_client),
    fallbacks: FallbackStore = Depends(get_fallbacks),
) -> ServicePageData:
    try:
        return await load_service_page(client, fallbacks, slug)
    except ContentNotFoundError as exc:
        raise _not_found(exc, "Service not found")


@router.get("/case-studies", response_model=CaseStudiesPageData, summary="Case studies listing")
@limiter.limit(_PAGE_LIMIT)
async def case_studies_page(
    request: Request, client: ContentClient = Depends(get_content_client)
) -> CaseStudiesPageData:
    """Featured case studies first, newest first within each group."""
    return await load_case_studies_page(client)


@router.get("/case-studies/{slug}", response_model=CaseStudyPageData, summary="Case study detail")
@limiter.limit(_PAGE_LIMIT)
async def case_study_page(
    request: Request,
    slug: str,
    client: ContentClient = Depends(get_content_client),
    fallbacks: FallbackStore = Depends(get_fallbacks),
) -> CaseStudyPageData:
    try:
        return await load_case_study_page(client, fallbacks, slug)
    except ContentNotFoundError as exc:
        raise _not_found(exc, "Case study not found")


@router.get("/insights", response_model=InsightsPageData, summary="Insights (blog) listing")
@limiter.limit(_PAGE_LIMIT)
async def insights_page(
    request: Request, client: ContentClient = Depends(get_content_client)
) -> InsightsPageData:
    """Featured posts first, newest first within each group."""
    return await load_insights_page(client)


@router.get("/insights/{slug}", response_model=InsightPageData, summary="Insight (blog post) detail")
@limiter.limit(_PAGE_LIMIT)
async def insight_page(
    request: Request,
    slug: str,
    client: ContentClient = Depends(get_content_client),
    fallbacks: FallbackStore = Depends(get_fallbacks),
) -> InsightPageData:
    try:
        return await load_insight_page(client, fallbacks, slug)
    except ContentNotFoundError as exc:
        raise _not_found(exc, "Article not found")
