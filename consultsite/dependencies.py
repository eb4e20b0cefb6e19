"""FastAPI dependencies exposing the objects built at application startup."""

from fastapi import Request

from consultsite.services.contentful import ContentClient
from consultsite.services.fallbacks import FallbackStore


def get_content_client(request: Request) -> ContentClient:
    return request.app.state.content_client


def get_fallbacks(request: Request) -> FallbackStore:
    return request.app.state.fallbacks
