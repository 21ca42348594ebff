"""FastAPI application factory with lifespan management."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from citation_grounding import __version__
from citation_grounding.api.middleware import RequestContextMiddleware
from citation_grounding.api.routes_health import router as health_router
from citation_grounding.api.routes_validate import router as validate_router
from citation_grounding.config.settings import Settings
from citation_grounding.observability.logger import get_logger, setup_logging
from citation_grounding.pipeline.validation_pipeline import GroundingPipeline
from citation_grounding.validation.cascade import ValidationCascade

logger = get_logger("app")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level, settings.log_json)

        cascade = ValidationCascade(settings)
        app.state.pipeline = GroundingPipeline(settings, cascade=cascade)
        app.state.settings = settings

        logger.info(
            "startup_complete",
            levels=[s.name for s in cascade.strategies],
            max_workers=settings.max_workers,
            corpus_idf=settings.corpus_idf_weighting,
        )
        yield
        logger.info("shutdown_complete")

    app = FastAPI(
        title="Citation Grounding Engine",
        version=__version__,
        description="Checks citations in generated reports against their source documents",
        lifespan=lifespan,
    )
    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(validate_router, tags=["validate"])
    return app
