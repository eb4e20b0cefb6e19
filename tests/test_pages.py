"""Tests for the page loaders: ordering, fallback resolution, not-found and SEO chains."""

import asyncio
from datetime import date
from unittest.mock import MagicMock

import pytest

from consultsite.models.content import BlogPost, CaseStudy, Homepage, Service
from consultsite.services.contentful import ContentClient
from consultsite.services.fallbacks import EMPTY_FALLBACKS, load_fallbacks
from consultsite.services.pages import (
    ContentNotFoundError,
    load_case_study_page,
    load_case_studies_page,
    load_home_page,
    load_insight_page,
    load_insights_page,
    load_roi_calculator_page,
    load_service_page,
    load_services_page,
    sort_featured_first,
)


def _content_client(services=(), case_studies=(), posts=(), post=None, homepage=None) -> MagicMock:
    client = MagicMock(spec=ContentClient)
    client.get_services.return_value = list(services)
    client.get_case_studies.return_value = list(case_studies)
    client.get_blog_posts.return_value = list(posts)
    client.get_blog_post.return_value = post
    client.get_homepage.return_value = homepage
    return client


def _post(slug: str, featured: bool = False, published=None, **fields) -> BlogPost:
    return BlogPost(id=slug, title=slug.title(), slug=slug, featured=featured, published_date=published, **fields)


def _case_study(slug: str, featured: bool = False, published=None, **fields) -> CaseStudy:
    return CaseStudy(id=slug, title=slug.title(), slug=slug, featured=featured, published_date=published, **fields)


# ---------------------------------------------------------------------------
# Sorting
# ---------------------------------------------------------------------------

class TestSortFeaturedFirst:
    def test_featured_beats_newer_date(self):
        items = [
            _post("old-plain", featured=False, published=date(2024, 1, 1)),
            _post("older-featured", featured=True, published=date(2023, 1, 1)),
        ]
        assert [p.slug for p in sort_featured_first(items)] == ["older-featured", "old-plain"]

    def test_descending_date_within_groups(self):
        items = [
            _post("a", False, date(2022, 1, 1)),
            _post("b", True, date(2021, 1, 1)),
            _post("c", False, date(2024, 1, 1)),
            _post("d", True, date(2025, 1, 1)),
        ]
        assert [p.slug for p in sort_featured_first(items)] == ["d", "b", "c", "a"]

    def test_undated_records_sort_last_in_group(self):
        items = [_post("undated", True), _post("dated", True, date(2020, 1, 1))]
        assert [p.slug for p in sort_featured_first(items)] == ["dated", "undated"]

    def test_ties_keep_input_order(self):
        items = [_post("first", published=date(2024, 1, 1)), _post("second", published=date(2024, 1, 1))]
        assert [p.slug for p in sort_featured_first(items)] == ["first", "second"]

    def test_input_is_not_mutated(self):
        items = [_post("a", False, date(2024, 1, 1)), _post("b", True, date(2023, 1, 1))]
        sort_featured_first(items)
        assert [p.slug for p in items] == ["a", "b"]


# ---------------------------------------------------------------------------
# Listing pages
# ---------------------------------------------------------------------------

class TestListingPages:
    def test_insights_sorted(self):
        client = _content_client(
            posts=[_post("plain", published=date(2024, 1, 1)), _post("feat", True, date(2023, 1, 1))]
        )
        data = asyncio.run(load_insights_page(client))
        assert [p.slug for p in data.posts] == ["feat", "plain"]
        assert data.seo.title.startswith("Insights")

    def test_case_studies_sorted(self):
        client = _content_client(
            case_studies=[_case_study("x", published=date(2024, 6, 1)), _case_study("y", True, date(2010, 1, 1))]
        )
        data = asyncio.run(load_case_studies_page(client))
        assert [cs.slug for cs in data.case_studies] == ["y", "x"]

    def test_services_keep_source_order(self):
        services = [Service(id="2", title="B", slug="b", order=2), Service(id="1", title="A", slug="a", order=1)]
        data = asyncio.run(load_services_page(_content_client(services=services)))
        assert [s.slug for s in data.services] == ["b", "a"]

    def test_empty_source_gives_empty_listing(self):
        data = asyncio.run(load_insights_page(_content_client()))
        assert data.posts == []


# ---------------------------------------------------------------------------
# Detail pages
# ---------------------------------------------------------------------------

class TestServiceDetail:
    def test_remote_record_wins(self):
        remote = Service(id="r", title="Fractional CTO (remote)", slug="fractional-cto")
        data = asyncio.run(
            load_service_page(_content_client(services=[remote]), load_fallbacks(), "fractional-cto")
        )
        assert data.source == "contentful"
        assert data.service.title == "Fractional CTO (remote)"

    def test_fallback_used_when_remote_missing(self):
        data = asyncio.run(load_service_page(_content_client(), load_fallbacks(), "fractional-cto"))
        assert data.source == "fallback"
        assert data.seo.title == "Fractional CTO Services | Part-Time Technology Leadership"

    def test_unknown_slug_raises(self):
        with pytest.raises(ContentNotFoundError) as exc_info:
            asyncio.run(load_service_page(_content_client(), load_fallbacks(), "unknown"))
        assert exc_info.value.kind == "service"
        assert exc_info.value.slug == "unknown"

    def test_seo_chain_defaults(self):
        remote = Service(id="r", title="Audit", slug="audit", short_description="Quick audit.")
        data = asyncio.run(load_service_page(_content_client(services=[remote]), EMPTY_FALLBACKS, "audit"))
        assert data.seo.title == "Audit | The Digital Janitor"
        assert data.seo.description == "Quick audit."
        assert data.seo.keywords == []


class TestCaseStudyDetail:
    def test_fallback_case_study(self):
        slug = "mcafee-security-config-comparison-engine-2010"
        data = asyncio.run(load_case_study_page(_content_client(), load_fallbacks(), slug))
        assert data.source == "fallback"
        assert data.case_study.client.name == "McAfee (via Ciphent)"

    def test_seo_description_from_challenge(self):
        remote = _case_study("c", challenge="x" * 300)
        data = asyncio.run(load_case_study_page(_content_client(case_studies=[remote]), EMPTY_FALLBACKS, "c"))
        assert data.seo.title == "C | Case Study"
        assert data.seo.description == "x" * 160

    def test_missing_everywhere_raises(self):
        with pytest.raises(ContentNotFoundError):
            asyncio.run(load_case_study_page(_content_client(), EMPTY_FALLBACKS, "nothing"))


class TestInsightDetail:
    def test_missing_slug_raises_not_found(self):
        client = _content_client(post=None)
        with pytest.raises(ContentNotFoundError):
            asyncio.run(load_insight_page(client, load_fallbacks(), "missing-slug"))
        client.get_blog_post.assert_awaited_once_with("missing-slug")

    def test_fallback_post_resolves(self):
        slug = "federal-ai-implementation-2025-challenges-opportunities"
        data = asyncio.run(load_insight_page(_content_client(post=None), load_fallbacks(), slug))
        assert data.source == "fallback"
        assert data.post.featured is True

    def test_remote_post_seo_chain(self):
        post = _post("remote", excerpt="Short excerpt.")
        data = asyncio.run(load_insight_page(_content_client(post=post), EMPTY_FALLBACKS, "remote"))
        assert data.source == "contentful"
        assert data.seo.title == "Remote | Insights"
        assert data.seo.description == "Short excerpt."
        assert data.seo.open_graph.type == "article"

    def test_post_body_markup_stays_out_of_description(self):
        post = _post("remote", content="## Heading\n\nSome **bold** text.")
        data = asyncio.run(load_insight_page(_content_client(post=post), EMPTY_FALLBACKS, "remote"))
        assert data.seo.description == ""
        assert data.seo.open_graph.description == ""


# ---------------------------------------------------------------------------
# Home and static pages
# ---------------------------------------------------------------------------

class TestHomePage:
    def test_without_homepage_entry_uses_featured_records(self):
        client = _content_client(
            services=[
                Service(id="1", title="A", slug="a", featured=True),
                Service(id="2", title="B", slug="b"),
            ],
            case_studies=[_case_study("cs", True, date(2020, 1, 1)), _case_study("other")],
        )
        data = asyncio.run(load_home_page(client))
        assert data.homepage is None
        assert [s.slug for s in data.services] == ["a"]
        assert [cs.slug for cs in data.case_studies] == ["cs"]
        assert data.seo.title == "Jason Anton | The Digital Janitor"

    def test_homepage_entry_overrides_seo_and_featured(self):
        picked = Service(id="p", title="Picked", slug="picked")
        homepage = Homepage(id="home", seo_title="Custom Home", featured_services=[picked])
        data = asyncio.run(load_home_page(_content_client(homepage=homepage)))
        assert data.seo.title == "Custom Home"
        assert [s.slug for s in data.services] == ["picked"]

    def test_disabled_client_still_renders(self):
        data = asyncio.run(load_home_page(ContentClient(None, None)))
        assert data.services == []
        assert data.case_studies == []


class TestRoiCalculatorPages:
    def test_index_lists_all_calculators(self):
        data = load_roi_calculator_page()
        assert data.slug is None
        assert len(data.calculators) == 6
        assert data.calculators[0].url.startswith("/resources/roi-calculator/")

    def test_known_calculator(self):
        data = load_roi_calculator_page("fractional-cto")
        assert data.seo.title == "Fractional CTO ROI Calculator | The Digital Janitor"

    def test_unknown_calculator_raises(self):
        with pytest.raises(ContentNotFoundError):
            load_roi_calculator_page("quantum-consulting")
