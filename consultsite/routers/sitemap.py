import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from consultsite.config import Settings, get_settings
from consultsite.dependencies import get_content_client
from consultsite.limiter import limiter
from consultsite.services.contentful import ContentClient
from consultsite.services.sitemap import generate_sitemap

logger = logging.getLogger(__name__)

router = APIRouter()

SITEMAP_CACHE_CONTROL = "max-age=3600"


@router.get(
    "/sitemap.xml",
    summary="XML sitemap of every public page",
    response_class=Response,
    responses={200: {"content": {"application/xml": {}}}},
)
@limiter.limit("30/minute")
async def sitemap(
    request: Request,
    client: ContentClient = Depends(get_content_client),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Static routes plus one URL per service, case study and blog post.

    A failed aggregation still returns 200 with a homepage-only sitemap,
    which is not cached.
    """
    result = await generate_sitemap(client, settings.SITE_BASE_URL, settings.SITE_STATIC_LASTMOD)
    headers = {} if result.fallback else {"Cache-Control": SITEMAP_CACHE_CONTROL}
    return Response(content=result.xml, media_type="application/xml", headers=headers)
