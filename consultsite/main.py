"""ASGI entry point.  Run with ``consultsite`` or ``uvicorn consultsite.main:app``."""

import logging
import logging.config
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from consultsite.config import get_settings
from consultsite.limiter import limiter
from consultsite.routers.pages import router as pages_router
from consultsite.routers.roi import router as roi_router
from consultsite.routers.sitemap import router as sitemap_router
from consultsite.services.contentful import ContentClient
from consultsite.services.fallbacks import load_fallbacks

logging.config.dictConfig(
    {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
            },
        },
        "root": {"level": get_settings().LOG_LEVEL, "handlers": ["console"]},
    }
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    app.state.fallbacks = load_fallbacks()
    app.state.content_client = ContentClient.from_settings(settings)
    logger.info(
        "Content client %s (environment %s)",
        app.state.content_client.state,
        settings.CONTENTFUL_ENVIRONMENT,
    )
    try:
        yield
    finally:
        await app.state.content_client.aclose()


app = FastAPI(
    title="Consultsite – Consulting Website API",
    description=(
        "Page data for the consulting site, sourced from Contentful with bundled "
        "fallback content, plus the XML sitemap and ROI calculators."
    ),
    version="1.0.0",
    lifespan=lifespan,
)

# Rate-limiting state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception for %s", request.url)
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred."})


app.include_router(sitemap_router)
app.include_router(pages_router)
app.include_router(roi_router)


@app.get("/", summary="Health check")
async def root() -> dict:
    return {"message": "Hello from Consultsite"}


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "consultsite.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
