"""Bundled fallback records, loaded once at startup and keyed by slug."""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Dict, Mapping, NamedTuple, Optional, TypeVar

from consultsite.models.content import BlogPost, CaseStudy, Service
from consultsite.services.records import entry_to_blog_post, entry_to_case_study, entry_to_service

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_FALLBACK_DIR = Path(__file__).resolve().parent.parent / "data" / "fallbacks"


class FallbackStore(NamedTuple):
    services: Mapping[str, Service]
    case_studies: Mapping[str, CaseStudy]
    blog_posts: Mapping[str, BlogPost]

    def service(self, slug: str) -> Optional[Service]:
        return self.services.get(slug)

    def case_study(self, slug: str) -> Optional[CaseStudy]:
        return self.case_studies.get(slug)

    def blog_post(self, slug: str) -> Optional[BlogPost]:
        return self.blog_posts.get(slug)


def _empty() -> Mapping:
    return MappingProxyType({})


EMPTY_FALLBACKS = FallbackStore(services=_empty(), case_studies=_empty(), blog_posts=_empty())


def _load_kind(path: Path, convert: Callable[[dict], Optional[T]]) -> Mapping[str, T]:
    """Load one ``{slug: entry}`` JSON file into a read-only mapping.

    Raises:
        ValueError: if an entry cannot be converted or its slug disagrees with its key.
    """
    if not path.exists():
        logger.warning("Fallback file %s not found; no fallbacks for this kind", path)
        return _empty()

    raw: Dict[str, dict] = json.loads(path.read_text(encoding="utf-8"))
    records: Dict[str, T] = {}
    for slug, entry in raw.items():
        record = convert(entry)
        if record is None:
            raise ValueError(f"Invalid fallback record '{slug}' in {path.name}.")
        if record.slug != slug:
            raise ValueError(
                f"Fallback key '{slug}' does not match record slug '{record.slug}' in {path.name}."
            )
        records[slug] = record
    return MappingProxyType(records)


def load_fallbacks(directory: Path = DEFAULT_FALLBACK_DIR) -> FallbackStore:
    store = FallbackStore(
        services=_load_kind(directory / "services.json", entry_to_service),
        case_studies=_load_kind(directory / "case_studies.json", entry_to_case_study),
        blog_posts=_load_kind(directory / "blog_posts.json", entry_to_blog_post),
    )
    logger.info(
        "Loaded fallback content: %d services, %d case studies, %d blog posts",
        len(store.services),
        len(store.case_studies),
        len(store.blog_posts),
    )
    return store
