"""Conversion of Contentful entries into typed content records."""

import html
import logging
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

from bs4 import BeautifulSoup
from markdownify import markdownify
from pydantic import ValidationError

from consultsite.models.content import (
    Asset,
    Author,
    BlogPost,
    CaseStudy,
    CaseStudyTestimonial,
    ClientInfo,
    Homepage,
    Pricing,
    ResultMetric,
    Service,
    Testimonial,
)
from consultsite.services.formatting import calculate_reading_time

logger = logging.getLogger(__name__)

T = TypeVar("T")

IncludesIndex = Dict[Tuple[str, str], dict]

# Linked entries can reference each other; stop following links past this depth
_MAX_LINK_DEPTH = 4

_HEADING_NODES = {f"heading-{level}": f"h{level}" for level in range(1, 7)}

_BLOCK_NODES = {
    "paragraph": "p",
    "blockquote": "blockquote",
    "unordered-list": "ul",
    "ordered-list": "ol",
    "list-item": "li",
    "table": "table",
    "table-row": "tr",
    "table-cell": "td",
    "table-header-cell": "th",
    **_HEADING_NODES,
}

_MARK_TAGS = {
    "bold": "strong",
    "italic": "em",
    "underline": "u",
    "code": "code",
    "superscript": "sup",
    "subscript": "sub",
}


# ---------------------------------------------------------------------------
# Link resolution
# ---------------------------------------------------------------------------

def build_includes_index(payload: dict) -> IncludesIndex:
    """Index the ``includes`` block of an entries response by (link type, id)."""
    index: IncludesIndex = {}
    for link_type, items in (payload.get("includes") or {}).items():
        for item in items or []:
            item_id = (item.get("sys") or {}).get("id")
            if item_id:
                index[(link_type, item_id)] = item
    return index


def _is_link(value: Any) -> bool:
    return isinstance(value, dict) and (value.get("sys") or {}).get("type") == "Link"


def resolve_links(value: Any, index: IncludesIndex, depth: int = 0) -> Any:
    """Replace ``Link`` objects in *value* with the included asset/entry they point to.

    Unresolvable links are left in place; normalisers ignore them.
    """
    if depth > _MAX_LINK_DEPTH:
        return value
    if _is_link(value):
        sys = value["sys"]
        target = index.get((sys.get("linkType", ""), sys.get("id", "")))
        if target is None:
            return value
        return resolve_links(target, index, depth + 1)
    if isinstance(value, dict):
        return {key: resolve_links(item, index, depth) for key, item in value.items()}
    if isinstance(value, list):
        return [resolve_links(item, index, depth) for item in value]
    return value


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------

def _parse_date(value: Any) -> Optional[date]:
    """Parse ``YYYY-MM-DD`` or a full ISO-8601 timestamp into a :class:`date`."""
    if not value:
        return None
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        logger.warning("Ignoring unparseable date value %r", value)
        return None


def _sys_fields(entry: dict, slug: str) -> dict:
    sys = entry.get("sys") or {}
    return {
        "id": sys.get("id") or f"fallback-{slug}",
        "created_at": sys.get("createdAt"),
        "updated_at": sys.get("updatedAt"),
    }


def _seo_fields(fields: dict) -> dict:
    return {
        "seo_title": fields.get("seoTitle") or "",
        "seo_description": fields.get("seoDescription") or "",
        "seo_keywords": fields.get("seoKeywords") or [],
    }


def to_asset(value: Any) -> Optional[Asset]:
    """Convert a resolved Contentful asset into an :class:`Asset`, or *None*."""
    if not isinstance(value, dict) or _is_link(value):
        return None
    fields = value.get("fields") or {}
    file_info = fields.get("file") or {}
    url = file_info.get("url")
    if not url:
        return None
    # Contentful serves protocol-relative asset URLs
    if url.startswith("//"):
        url = f"https:{url}"
    image = (file_info.get("details") or {}).get("image") or {}
    return Asset(
        id=(value.get("sys") or {}).get("id"),
        title=fields.get("title") or "",
        description=fields.get("description") or "",
        url=url,
        content_type=file_info.get("contentType"),
        width=image.get("width"),
        height=image.get("height"),
    )


def _assets(values: Any) -> List[Asset]:
    return [asset for asset in map(to_asset, values or []) if asset is not None]


def _linked_records(values: Any, convert: Callable[[dict], Optional[T]]) -> List[T]:
    records = []
    for value in values or []:
        if not isinstance(value, dict) or _is_link(value):
            continue
        record = convert(value)
        if record is not None:
            records.append(record)
    return records


# ---------------------------------------------------------------------------
# Rich text
# ---------------------------------------------------------------------------

def _render_text_node(node: dict) -> str:
    text = html.escape(node.get("value", "")).replace("\n", "<br>")
    for mark in node.get("marks") or []:
        tag = _MARK_TAGS.get(mark.get("type", ""))
        if tag:
            text = f"<{tag}>{text}</{tag}>"
    return text


def _render_node(node: dict) -> str:
    node_type = node.get("nodeType", "")
    if node_type == "text":
        return _render_text_node(node)

    inner = "".join(_render_node(child) for child in node.get("content") or [])
    data = node.get("data") or {}

    if node_type == "document":
        return inner
    if node_type == "hr":
        return "<hr>"
    if node_type == "hyperlink":
        return f'<a href="{html.escape(data.get("uri", ""), quote=True)}">{inner}</a>'
    if node_type == "embedded-asset-block":
        asset = to_asset(data.get("target"))
        if asset is None:
            return ""
        return f'<p><img src="{html.escape(asset.url, quote=True)}" alt="{html.escape(asset.title, quote=True)}"></p>'
    tag = _BLOCK_NODES.get(node_type)
    if tag:
        return f"<{tag}>{inner}</{tag}>"
    # Embedded entries and unknown node types contribute their text only
    return inner


def rich_text_to_html(document: dict) -> str:
    """Render a Contentful rich-text document to HTML."""
    return _render_node(document)


def content_to_markdown(content: Any) -> str:
    """Normalise blog content to markdown.

    Plain strings are taken as markdown already; rich-text documents are
    rendered to HTML and converted.
    """
    if not content:
        return ""
    if isinstance(content, str):
        return content.strip()
    if isinstance(content, dict) and content.get("nodeType") == "document":
        rendered = rich_text_to_html(content)
        return markdownify(rendered, heading_style="ATX").strip()
    logger.warning("Unsupported blog content shape: %s", type(content).__name__)
    return ""


def plain_text(markdown_or_html: str) -> str:
    """Strip markup from *markdown_or_html* for word counting."""
    if not markdown_or_html:
        return ""
    return BeautifulSoup(markdown_or_html, "lxml").get_text(separator=" ", strip=True)


# ---------------------------------------------------------------------------
# Entry converters
# ---------------------------------------------------------------------------

def _pricing(fields: dict) -> Optional[Pricing]:
    raw = fields.get("pricing")
    if isinstance(raw, dict):
        return Pricing(
            type=raw.get("type"),
            starting_price=raw.get("startingPrice"),
            price_range=raw.get("priceRange") or "",
        )
    # Flat shape used by hand-written fallback records
    if fields.get("priceRange") or fields.get("pricingType"):
        return Pricing(type=fields.get("pricingType"), price_range=fields.get("priceRange") or "")
    return None


def _client_info(fields: dict) -> ClientInfo:
    raw = fields.get("client")
    if isinstance(raw, dict) and not _is_link(raw):
        # A linked client entry arrives with its own "fields" block
        raw = raw.get("fields", raw)
        return ClientInfo(
            name=raw.get("name") or "",
            industry=raw.get("industry") or "",
            size=raw.get("size") or "",
            logo=to_asset(raw.get("logo")),
        )
    return ClientInfo(
        name=fields.get("clientName") or "",
        industry=fields.get("clientIndustry") or "",
        size=fields.get("clientSize") or "",
    )


def _case_study_testimonial(raw: Any) -> Optional[CaseStudyTestimonial]:
    if not isinstance(raw, dict) or _is_link(raw):
        return None
    raw = raw.get("fields", raw)
    if not raw.get("quote"):
        return None
    return CaseStudyTestimonial(
        quote=raw["quote"],
        author=raw.get("author") or "",
        position=raw.get("position") or "",
        avatar=to_asset(raw.get("avatar")),
    )


def _convert(kind: str, entry: dict, build: Callable[[dict], T]) -> Optional[T]:
    """Run *build* on the entry's fields, logging and skipping malformed records."""
    fields = entry.get("fields") or {}
    try:
        return build(fields)
    except (ValidationError, KeyError, TypeError, ValueError) as exc:
        entry_id = (entry.get("sys") or {}).get("id", "?")
        logger.warning("Skipping malformed %s entry %s: %s", kind, entry_id, exc)
        return None


def entry_to_service(entry: dict) -> Optional[Service]:
    def build(fields: dict) -> Service:
        slug = fields["slug"]
        return Service(
            **_sys_fields(entry, slug),
            **_seo_fields(fields),
            title=fields["title"],
            slug=slug,
            short_description=fields.get("shortDescription") or "",
            full_description=fields.get("fullDescription") or "",
            icon=fields.get("icon") or "",
            features=fields.get("features") or [],
            pricing=_pricing(fields),
            order=fields.get("order") or 0,
            featured=bool(fields.get("featured")),
        )

    return _convert("service", entry, build)


def entry_to_case_study(entry: dict) -> Optional[CaseStudy]:
    def build(fields: dict) -> CaseStudy:
        slug = fields["slug"]
        return CaseStudy(
            **_sys_fields(entry, slug),
            **_seo_fields(fields),
            title=fields["title"],
            slug=slug,
            client=_client_info(fields),
            challenge=fields.get("challenge") or "",
            solution=fields.get("solution") or "",
            results=[ResultMetric(**result) for result in fields.get("results") or []],
            technologies=fields.get("technologies") or [],
            timeline=fields.get("timeline") or "",
            published_date=_parse_date(fields.get("publishedDate")),
            featured=bool(fields.get("featured")),
            testimonial=_case_study_testimonial(fields.get("testimonial")),
            images=_assets(fields.get("images")),
        )

    return _convert("caseStudy", entry, build)


def entry_to_blog_post(entry: dict) -> Optional[BlogPost]:
    def build(fields: dict) -> BlogPost:
        slug = fields["slug"]
        content = content_to_markdown(fields.get("content"))
        reading_time = fields.get("readingTime") or calculate_reading_time(plain_text(content))
        return BlogPost(
            **_sys_fields(entry, slug),
            **_seo_fields(fields),
            title=fields["title"],
            slug=slug,
            excerpt=fields.get("excerpt") or "",
            content=content,
            published_date=_parse_date(fields.get("publishedDate")),
            updated_date=_parse_date(fields.get("updatedDate")),
            featured=bool(fields.get("featured")),
            reading_time=reading_time,
            tags=fields.get("tags") or [],
            category=fields.get("category") or "",
            author=Author(
                name=fields.get("authorName") or "",
                bio=fields.get("authorBio") or "",
                avatar=to_asset(fields.get("authorAvatar")),
            ),
            featured_image=to_asset(fields.get("featuredImage")),
            featured_image_alt_text=fields.get("featuredImageAltText") or "",
        )

    return _convert("blogPost", entry, build)


def entry_to_testimonial(entry: dict) -> Optional[Testimonial]:
    def build(fields: dict) -> Testimonial:
        return Testimonial(
            **_sys_fields(entry, "testimonial"),
            quote=fields["quote"],
            author=fields["author"],
            position=fields.get("position") or "",
            company=fields.get("company") or "",
            avatar=to_asset(fields.get("avatar")),
            rating=fields.get("rating") or 0,
            featured=bool(fields.get("featured")),
        )

    return _convert("testimonial", entry, build)


def entry_to_homepage(entry: dict) -> Optional[Homepage]:
    def build(fields: dict) -> Homepage:
        return Homepage(
            **_sys_fields(entry, "homepage"),
            **_seo_fields(fields),
            hero_title=fields.get("heroTitle") or "",
            hero_subtitle=fields.get("heroSubtitle") or "",
            hero_description=fields.get("heroDescription") or "",
            hero_cta_text=fields.get("heroCtaText") or "",
            hero_cta_link=fields.get("heroCtaLink") or "",
            hero_image=to_asset(fields.get("heroImage")),
            featured_services=_linked_records(fields.get("featuredServices"), entry_to_service),
            featured_case_studies=_linked_records(
                fields.get("featuredCaseStudies"), entry_to_case_study
            ),
            testimonials=_linked_records(fields.get("testimonials"), entry_to_testimonial),
        )

    return _convert("homepage", entry, build)
