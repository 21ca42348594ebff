"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from citation_grounding import __version__
from citation_grounding.api.dependencies import get_pipeline
from citation_grounding.models.schemas import HealthResponse
from citation_grounding.pipeline.validation_pipeline import GroundingPipeline

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(pipeline: GroundingPipeline = Depends(get_pipeline)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        levels=[s.name for s in pipeline.cascade.strategies],
    )
