"""Per-route page loaders: fetch content, sort it, apply fallbacks and derive SEO."""

import asyncio
import logging
from datetime import date
from typing import List, Optional, Protocol, Sequence, TypeVar

from consultsite.models.content import CaseStudy, Service
from consultsite.models.page_data import (
    CalculatorLink,
    CaseStudiesPageData,
    CaseStudyPageData,
    HomePageData,
    InsightPageData,
    InsightsPageData,
    RoiCalculatorPageData,
    ServicePageData,
    ServicesPageData,
    StaticPageData,
)
from consultsite.models.seo import SEO
from consultsite.services.contentful import ContentClient
from consultsite.services.fallbacks import FallbackStore
from consultsite.services.seo import (
    ABOUT_SEO,
    CASE_STUDIES_SEO,
    HOME_SEO,
    INSIGHTS_SEO,
    LAYOUT_SEO,
    ROI_CALCULATOR_SEO,
    ROI_CALCULATORS,
    SERVICES_SEO,
    blog_post_seo,
    case_study_seo,
    service_seo,
)

logger = logging.getLogger(__name__)

# Featured records shown on the home page when the homepage entry picks none
HOME_FEATURED_LIMIT = 3

ROI_CALCULATOR_PATH = "/resources/roi-calculator"


class ContentNotFoundError(LookupError):
    """Raised when neither the content source nor the fallbacks have a record."""

    def __init__(self, kind: str, slug: str) -> None:
        self.kind = kind
        self.slug = slug
        super().__init__(f"{kind} '{slug}' not found")


class Listable(Protocol):
    featured: bool
    published_date: Optional[date]


L = TypeVar("L", bound=Listable)


def sort_featured_first(items: Sequence[L]) -> List[L]:
    """Featured records first, then newest ``published_date`` first.

    Records without a published date sort after dated records of the same
    group.  The sort is stable for records with equal keys.
    """
    by_date = sorted(items, key=lambda item: item.published_date or date.min, reverse=True)
    return sorted(by_date, key=lambda item: not item.featured)


# ---------------------------------------------------------------------------
# Static pages
# ---------------------------------------------------------------------------

def load_layout() -> StaticPageData:
    return StaticPageData(seo=LAYOUT_SEO)


def load_about_page() -> StaticPageData:
    return StaticPageData(seo=ABOUT_SEO)


def load_roi_calculator_page(slug: Optional[str] = None) -> RoiCalculatorPageData:
    """Index page (no *slug*) or one calculator page.

    Raises:
        ContentNotFoundError: if *slug* names no known calculator.
    """
    calculators = [
        CalculatorLink(slug=key, title=page.title, url=f"{ROI_CALCULATOR_PATH}/{key}")
        for key, page in ROI_CALCULATORS.items()
    ]
    if slug is None:
        return RoiCalculatorPageData(calculators=calculators, seo=ROI_CALCULATOR_SEO)

    page = ROI_CALCULATORS.get(slug)
    if page is None:
        raise ContentNotFoundError("calculator", slug)
    return RoiCalculatorPageData(slug=slug, calculators=calculators, seo=page.seo)


# ---------------------------------------------------------------------------
# Home
# ---------------------------------------------------------------------------

def _featured(records: Sequence, limit: int = HOME_FEATURED_LIMIT) -> list:
    return [record for record in records if record.featured][:limit]


async def load_home_page(client: ContentClient) -> HomePageData:
    homepage, services, case_studies = await asyncio.gather(
        client.get_homepage(),
        client.get_services(),
        client.get_case_studies(),
    )

    featured_services: List[Service] = _featured(services)
    featured_case_studies: List[CaseStudy] = _featured(sort_featured_first(case_studies))
    seo = HOME_SEO
    if homepage is not None:
        featured_services = homepage.featured_services or featured_services
        featured_case_studies = homepage.featured_case_studies or featured_case_studies
        if homepage.seo_title:
            seo = SEO(
                title=homepage.seo_title,
                description=homepage.seo_description or HOME_SEO.description,
                keywords=homepage.seo_keywords or HOME_SEO.keywords,
            )

    return HomePageData(
        homepage=homepage,
        services=featured_services,
        case_studies=featured_case_studies,
        seo=seo,
    )


# ---------------------------------------------------------------------------
# Services
# ---------------------------------------------------------------------------

async def load_services_page(client: ContentClient) -> ServicesPageData:
    # Services keep the content source's ``fields.order`` ordering
    services = await client.get_services()
    return ServicesPageData(services=services, seo=SERVICES_SEO)


async def load_service_page(
    client: ContentClient, fallbacks: FallbackStore, slug: str
) -> ServicePageData:
    """Resolve one service by *slug*, remote first, then the fallback table.

    Raises:
        ContentNotFoundError: if neither source has the service.
    """
    services = await client.get_services()
    service = next((s for s in services if s.slug == slug), None)
    if service is not None:
        return ServicePageData(service=service, source="contentful", seo=service_seo(service))

    service = fallbacks.service(slug)
    if service is None:
        raise ContentNotFoundError("service", slug)
    logger.info("Serving fallback service %s", slug)
    return ServicePageData(service=service, source="fallback", seo=service_seo(service))


# ---------------------------------------------------------------------------
# Case studies
# ---------------------------------------------------------------------------

async def load_case_studies_page(client: ContentClient) -> CaseStudiesPageData:
    case_studies = await client.get_case_studies()
    return CaseStudiesPageData(case_studies=sort_featured_first(case_studies), seo=CASE_STUDIES_SEO)


async def load_case_study_page(
    client: ContentClient, fallbacks: FallbackStore, slug: str
) -> CaseStudyPageData:
    """Resolve one case study by *slug*, remote first, then the fallback table.

    Raises:
        ContentNotFoundError: if neither source has the case study.
    """
    case_studies = await client.get_case_studies()
    case_study = next((cs for cs in case_studies if cs.slug == slug), None)
    if case_study is not None:
        return CaseStudyPageData(
            case_study=case_study, source="contentful", seo=case_study_seo(case_study)
        )

    case_study = fallbacks.case_study(slug)
    if case_study is None:
        raise ContentNotFoundError("case study", slug)
    logger.info("Serving fallback case study %s", slug)
    return CaseStudyPageData(case_study=case_study, source="fallback", seo=case_study_seo(case_study))


# ---------------------------------------------------------------------------
# Insights (blog)
# ---------------------------------------------------------------------------

async def load_insights_page(client: ContentClient) -> InsightsPageData:
    posts = await client.get_blog_posts()
    return InsightsPageData(posts=sort_featured_first(posts), seo=INSIGHTS_SEO)


async def load_insight_page(
    client: ContentClient, fallbacks: FallbackStore, slug: str
) -> InsightPageData:
    """Resolve one blog post by *slug*, remote first, then the fallback table.

    Raises:
        ContentNotFoundError: if neither source has the post.
    """
    post = await client.get_blog_post(slug)
    if post is not None:
        return InsightPageData(post=post, source="contentful", seo=blog_post_seo(post))

    post = fallbacks.blog_post(slug)
    if post is None:
        raise ContentNotFoundError("article", slug)
    logger.info("Serving fallback blog post %s", slug)
    return InsightPageData(post=post, source="fallback", seo=blog_post_seo(post))
