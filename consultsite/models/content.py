"""Typed content records normalised from the content platform (or fallback data)."""

from datetime import date, datetime
from typing import List, Literal, Optional

from pydantic import BaseModel


class Asset(BaseModel):
    id: Optional[str] = None
    title: str = ""
    description: str = ""
    url: str
    content_type: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


class ContentRecord(BaseModel):
    """Fields shared by every record: identifier and source-owned timestamps."""

    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SEOFields(BaseModel):
    seo_title: str = ""
    seo_description: str = ""
    seo_keywords: List[str] = []


class Pricing(BaseModel):
    type: Optional[Literal["hourly", "project", "retainer"]] = None
    starting_price: Optional[float] = None
    price_range: str = ""


class Service(ContentRecord, SEOFields):
    title: str
    slug: str
    short_description: str = ""
    full_description: str = ""
    icon: str = ""
    features: List[str] = []
    pricing: Optional[Pricing] = None
    order: int = 0
    featured: bool = False


class ClientInfo(BaseModel):
    name: str = ""
    industry: str = ""
    size: str = ""
    logo: Optional[Asset] = None


class ResultMetric(BaseModel):
    metric: str
    value: str
    description: str = ""


class CaseStudyTestimonial(BaseModel):
    quote: str
    author: str
    position: str = ""
    avatar: Optional[Asset] = None


class CaseStudy(ContentRecord, SEOFields):
    title: str
    slug: str
    client: ClientInfo = ClientInfo()
    challenge: str = ""
    solution: str = ""
    results: List[ResultMetric] = []
    technologies: List[str] = []
    timeline: str = ""
    published_date: Optional[date] = None
    featured: bool = False
    testimonial: Optional[CaseStudyTestimonial] = None
    images: List[Asset] = []


class Author(BaseModel):
    name: str = ""
    bio: str = ""
    avatar: Optional[Asset] = None


class BlogPost(ContentRecord, SEOFields):
    title: str
    slug: str
    excerpt: str = ""
    content: str = ""  # markdown, whatever shape the source delivered
    published_date: Optional[date] = None
    updated_date: Optional[date] = None
    featured: bool = False
    reading_time: int = 0
    tags: List[str] = []
    category: str = ""
    author: Author = Author()
    featured_image: Optional[Asset] = None
    featured_image_alt_text: str = ""


class Testimonial(ContentRecord):
    quote: str
    author: str
    position: str = ""
    company: str = ""
    avatar: Optional[Asset] = None
    rating: int = 0
    featured: bool = False


class Homepage(ContentRecord, SEOFields):
    hero_title: str = ""
    hero_subtitle: str = ""
    hero_description: str = ""
    hero_cta_text: str = ""
    hero_cta_link: str = ""
    hero_image: Optional[Asset] = None
    featured_services: List[Service] = []
    featured_case_studies: List[CaseStudy] = []
    testimonials: List[Testimonial] = []
