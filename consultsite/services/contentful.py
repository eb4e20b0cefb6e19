"""Contentful Delivery API client that degrades to defaults instead of raising."""

import logging
from typing import Any, Awaitable, Callable, Dict, List, Literal, Optional, Tuple, TypeVar

import httpx

from consultsite.config import Settings
from consultsite.models.content import BlogPost, CaseStudy, Homepage, Service
from consultsite.services.records import (
    IncludesIndex,
    build_includes_index,
    entry_to_blog_post,
    entry_to_case_study,
    entry_to_homepage,
    entry_to_service,
    resolve_links,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

ClientState = Literal["active", "disabled"]


class ContentClient:
    """Typed fetchers for each content kind.

    The client is *active* only when both a space id and an access token are
    configured.  A disabled client, or any failed request, yields the
    caller's default (``None`` or ``[]``) so callers never handle transport
    errors themselves.
    """

    def __init__(
        self,
        space_id: Optional[str],
        access_token: Optional[str],
        environment: str = "master",
        host: str = "https://cdn.contentful.com",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.environment = environment
        self._http: Optional[httpx.AsyncClient] = None
        if space_id and access_token:
            self._http = httpx.AsyncClient(
                base_url=f"{host.rstrip('/')}/spaces/{space_id}/environments/{environment}",
                headers={"Authorization": f"Bearer {access_token}"},
                timeout=timeout,
                transport=transport,
            )

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "ContentClient":
        return cls(
            space_id=settings.CONTENTFUL_SPACE_ID,
            access_token=settings.CONTENTFUL_ACCESS_TOKEN,
            environment=settings.CONTENTFUL_ENVIRONMENT,
            host=settings.CONTENTFUL_HOST,
            timeout=settings.CONTENTFUL_TIMEOUT,
            transport=transport,
        )

    @property
    def state(self) -> ClientState:
        return "active" if self._http is not None else "disabled"

    async def aclose(self) -> None:
        if self._http is not None:
            await self._http.aclose()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _safe_call(
        self,
        operation: Callable[[], Awaitable[T]],
        default: T,
        operation_name: str,
    ) -> T:
        if self._http is None:
            logger.warning("%s: Contentful client not available, using fallback data", operation_name)
            return default

        try:
            result = await operation()
        except Exception as exc:
            logger.error("%s error: %s", operation_name, exc)
            logger.warning("%s: using fallback data due to error", operation_name)
            return default

        count = len(result) if isinstance(result, list) else int(result is not None)
        logger.info("%s: successfully fetched %d item(s)", operation_name, count)
        return result

    async def _query(self, params: Dict[str, Any]) -> Tuple[List[dict], IncludesIndex]:
        """Run an entries query and return the raw items with their includes index.

        Raises:
            httpx.HTTPError: on network or HTTP errors.
            ValueError: if the response body is not an entries collection.
        """
        assert self._http is not None
        resp = await self._http.get("/entries", params=params)
        resp.raise_for_status()
        payload = resp.json()
        items = payload.get("items") if isinstance(payload, dict) else None
        if not isinstance(items, list):
            raise ValueError("Contentful response has no 'items' list.")
        return items, build_includes_index(payload)

    async def _fetch_records(
        self, params: Dict[str, Any], convert: Callable[[dict], Optional[R]]
    ) -> List[R]:
        items, index = await self._query(params)
        records = []
        for item in items:
            record = convert(resolve_links(item, index))
            if record is not None:
                records.append(record)
        return records

    async def _fetch_first(
        self, params: Dict[str, Any], convert: Callable[[dict], Optional[R]]
    ) -> Optional[R]:
        records = await self._fetch_records({**params, "limit": 1}, convert)
        return records[0] if records else None

    # ------------------------------------------------------------------
    # Fetchers
    # ------------------------------------------------------------------

    async def get_homepage(self) -> Optional[Homepage]:
        return await self._safe_call(
            lambda: self._fetch_first({"content_type": "homepage", "include": 2}, entry_to_homepage),
            None,
            "getHomepageContent",
        )

    async def get_services(self) -> List[Service]:
        return await self._safe_call(
            lambda: self._fetch_records(
                {"content_type": "service", "order": "fields.order"}, entry_to_service
            ),
            [],
            "getServices",
        )

    async def get_case_studies(self) -> List[CaseStudy]:
        return await self._safe_call(
            lambda: self._fetch_records(
                {"content_type": "caseStudy", "order": "-fields.publishedDate"},
                entry_to_case_study,
            ),
            [],
            "getCaseStudies",
        )

    async def get_blog_posts(self) -> List[BlogPost]:
        return await self._safe_call(
            lambda: self._fetch_records(
                {"content_type": "blogPost", "order": "-fields.publishedDate"},
                entry_to_blog_post,
            ),
            [],
            "getBlogPosts",
        )

    async def get_blog_post(self, slug: str) -> Optional[BlogPost]:
        return await self._safe_call(
            lambda: self._fetch_first(
                {"content_type": "blogPost", "fields.slug": slug}, entry_to_blog_post
            ),
            None,
            "getBlogPost",
        )

    async def get_entries(self, content_type: str, **query: Any) -> List[dict]:
        """Fetch raw entries (links resolved) of any content type.

        Extra keyword arguments are passed through as query parameters, e.g.
        ``order="-sys.updatedAt"`` or ``limit=5``.  Dotted parameter names
        such as ``fields.slug`` can be passed via ``**{"fields.slug": slug}``.
        """

        async def operation() -> List[dict]:
            items, index = await self._query({"content_type": content_type, **query})
            return [resolve_links(item, index) for item in items]

        return await self._safe_call(operation, [], f"getContentByType({content_type})")
