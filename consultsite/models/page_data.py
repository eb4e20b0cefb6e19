"""Response models for the page-data endpoints, one per route."""

from typing import List, Literal, Optional

from pydantic import BaseModel

from consultsite.models.content import BlogPost, CaseStudy, Homepage, Service
from consultsite.models.seo import SEO

RecordSource = Literal["contentful", "fallback"]


class StaticPageData(BaseModel):
    seo: SEO


class HomePageData(BaseModel):
    homepage: Optional[Homepage] = None
    services: List[Service]
    case_studies: List[CaseStudy]
    seo: SEO


class ServicesPageData(BaseModel):
    services: List[Service]
    seo: SEO


class ServicePageData(BaseModel):
    service: Service
    source: RecordSource
    seo: SEO


class CaseStudiesPageData(BaseModel):
    case_studies: List[CaseStudy]
    seo: SEO


class CaseStudyPageData(BaseModel):
    case_study: CaseStudy
    source: RecordSource
    seo: SEO


class InsightsPageData(BaseModel):
    posts: List[BlogPost]
    seo: SEO


class InsightPageData(BaseModel):
    post: BlogPost
    source: RecordSource
    seo: SEO


class CalculatorLink(BaseModel):
    slug: str
    title: str
    url: str


class RoiCalculatorPageData(BaseModel):
    slug: Optional[str] = None
    calculators: List[CalculatorLink] = []
    seo: SEO
