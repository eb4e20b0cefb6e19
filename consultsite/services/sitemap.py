"""Sitemap generation: static routes plus one entry per published content record."""

import asyncio
import logging
from datetime import date, datetime
from typing import Iterable, List, NamedTuple, Optional, Sequence, Union
from xml.etree import ElementTree

from consultsite.models.content import BlogPost, CaseStudy, Service
from consultsite.services.contentful import ContentClient
from consultsite.services.pages import ROI_CALCULATOR_PATH
from consultsite.services.seo import ROI_CALCULATORS

logger = logging.getLogger(__name__)

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

# (path, changefreq, priority) for routes that exist regardless of content
_STATIC_PAGES = (
    ("", "weekly", "1.0"),
    ("/about", "monthly", "0.8"),
    ("/services", "weekly", "0.9"),
    ("/case-studies", "weekly", "0.8"),
    ("/insights", "weekly", "0.8"),
    (ROI_CALCULATOR_PATH, "monthly", "0.7"),
)


class SitemapEntry(NamedTuple):
    path: str
    lastmod: Optional[str]
    changefreq: str
    priority: str


class Sitemap(NamedTuple):
    xml: str
    fallback: bool
    """*True* when aggregation failed and only the homepage entry was emitted."""


def _day(value: Union[date, datetime, None]) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def static_entries(lastmod: str) -> List[SitemapEntry]:
    entries = [SitemapEntry(path, lastmod, freq, priority) for path, freq, priority in _STATIC_PAGES]
    entries.extend(
        SitemapEntry(f"{ROI_CALCULATOR_PATH}/{slug}", lastmod, "monthly", "0.6")
        for slug in ROI_CALCULATORS
    )
    return entries


def service_entries(services: Iterable[Service]) -> List[SitemapEntry]:
    return [
        SitemapEntry(
            f"/services/{service.slug}",
            _day(service.updated_at),
            "monthly",
            "0.8" if service.featured else "0.7",
        )
        for service in services
    ]


def case_study_entries(case_studies: Iterable[CaseStudy]) -> List[SitemapEntry]:
    return [
        SitemapEntry(
            f"/case-studies/{case_study.slug}",
            _day(case_study.updated_at or case_study.published_date),
            "yearly",
            "0.7" if case_study.featured else "0.6",
        )
        for case_study in case_studies
    ]


def blog_post_entries(posts: Iterable[BlogPost]) -> List[SitemapEntry]:
    return [
        SitemapEntry(
            f"/insights/{post.slug}",
            _day(post.updated_date or post.published_date),
            "monthly",
            "0.7" if post.featured else "0.6",
        )
        for post in posts
    ]


def build_entries(
    services: Sequence[Service],
    case_studies: Sequence[CaseStudy],
    posts: Sequence[BlogPost],
    static_lastmod: str,
) -> List[SitemapEntry]:
    return [
        *static_entries(static_lastmod),
        *service_entries(services),
        *case_study_entries(case_studies),
        *blog_post_entries(posts),
    ]


def render_sitemap(entries: Iterable[SitemapEntry], base_url: str) -> str:
    """Serialise *entries* as a sitemap-protocol ``<urlset>`` document."""
    base = base_url.rstrip("/")
    root = ElementTree.Element("urlset", xmlns=SITEMAP_NS)
    for entry in entries:
        url = ElementTree.SubElement(root, "url")
        ElementTree.SubElement(url, "loc").text = f"{base}{entry.path or '/'}"
        # <lastmod> is optional in the protocol; omit it rather than invent a date
        if entry.lastmod:
            ElementTree.SubElement(url, "lastmod").text = entry.lastmod
        ElementTree.SubElement(url, "changefreq").text = entry.changefreq
        ElementTree.SubElement(url, "priority").text = entry.priority
    ElementTree.indent(root)
    return _XML_DECLARATION + ElementTree.tostring(root, encoding="unicode")


def fallback_sitemap(base_url: str, static_lastmod: str) -> str:
    """Minimal sitemap holding only the homepage entry."""
    return render_sitemap([SitemapEntry("", static_lastmod, "weekly", "1.0")], base_url)


async def generate_sitemap(client: ContentClient, base_url: str, static_lastmod: str) -> Sitemap:
    """Fetch every content kind concurrently and assemble the full sitemap.

    Never raises: on any failure the homepage-only sitemap is returned with
    ``fallback=True``.
    """
    try:
        services, case_studies, posts = await asyncio.gather(
            client.get_services(),
            client.get_case_studies(),
            client.get_blog_posts(),
        )
        entries = build_entries(services, case_studies, posts, static_lastmod)
        xml = render_sitemap(entries, base_url)
    except Exception as exc:
        logger.error("Error generating sitemap: %s", exc)
        return Sitemap(fallback_sitemap(base_url, static_lastmod), fallback=True)

    logger.info("Generated sitemap with %d URLs", len(entries))
    return Sitemap(xml, fallback=False)
