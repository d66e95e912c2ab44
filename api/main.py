"""FastAPI application for the course form and site SEO endpoints."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import settings
from logging_config import init_logging
from seo.routes import PRERENDER_ROUTES

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    init_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Golf Course Form & SEO API",
        version="1.0.0",
    )
    app.state.prerender_routes = list(PRERENDER_ROUTES)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import courses, seo
    app.include_router(courses.router, prefix="/api/courses", tags=["courses"])
    app.include_router(seo.router, prefix="/api/seo", tags=["seo"])
    app.include_router(seo.sitemap_router, tags=["seo"])

    @app.get("/api/health")
    async def health():
        return {"status": "ok"}

    logger.info("API ready for %d pre-rendered routes", len(app.state.prerender_routes))
    return app


app = create_app()
