"""Tests for the bundled fallback store."""

import json

import pytest

from consultsite.services.fallbacks import EMPTY_FALLBACKS, load_fallbacks


class TestBundledFallbacks:
    def test_loads_every_kind(self):
        store = load_fallbacks()
        assert set(store.services) == {
            "digital-transformation",
            "ai-ml-implementation",
            "fractional-cto",
            "technical-due-diligence",
        }
        assert "mcafee-security-config-comparison-engine-2010" in store.case_studies
        assert "federal-ai-implementation-2025-challenges-opportunities" in store.blog_posts

    def test_flat_fields_are_normalised(self):
        store = load_fallbacks()
        cto = store.service("fractional-cto")
        assert cto.pricing.type == "retainer"
        assert cto.pricing.price_range == "$10K-50K/month"

        case_study = store.case_study("mcafee-security-config-comparison-engine-2010")
        assert case_study.client.name == "McAfee (via Ciphent)"
        assert case_study.featured is True
        assert len(case_study.results) == 6

    def test_blog_post_keeps_markdown_body(self):
        post = load_fallbacks().blog_post("federal-ai-implementation-2025-challenges-opportunities")
        assert "## The Current Federal AI Landscape" in post.content
        assert post.author.name == "Jason Anton"
        assert post.reading_time == 8

    def test_unknown_slug_returns_none(self):
        store = load_fallbacks()
        assert store.service("nope") is None
        assert store.blog_post("missing-slug") is None

    def test_store_is_read_only(self):
        store = load_fallbacks()
        with pytest.raises(TypeError):
            store.services["new"] = store.service("fractional-cto")


class TestLoadFromDirectory:
    def test_missing_files_give_empty_mappings(self, tmp_path):
        store = load_fallbacks(tmp_path)
        assert store == EMPTY_FALLBACKS
        assert store.case_study("anything") is None

    def test_key_must_match_slug(self, tmp_path):
        (tmp_path / "services.json").write_text(
            json.dumps({"alpha": {"fields": {"title": "Beta", "slug": "beta"}}})
        )
        with pytest.raises(ValueError, match="does not match"):
            load_fallbacks(tmp_path)

    def test_invalid_record_raises(self, tmp_path):
        (tmp_path / "blog_posts.json").write_text(json.dumps({"x": {"fields": {"slug": "x"}}}))
        with pytest.raises(ValueError, match="Invalid fallback record"):
            load_fallbacks(tmp_path)

    def test_custom_records_load(self, tmp_path):
        (tmp_path / "case_studies.json").write_text(
            json.dumps({"pilot": {"fields": {"title": "Pilot", "slug": "pilot", "featured": True}}})
        )
        store = load_fallbacks(tmp_path)
        assert store.case_study("pilot").title == "Pilot"
