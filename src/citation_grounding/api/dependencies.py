"""FastAPI dependency injection helpers."""

from __future__ import annotations

from fastapi import Request

from citation_grounding.config.settings import Settings
from citation_grounding.pipeline.validation_pipeline import GroundingPipeline


def get_pipeline(request: Request) -> GroundingPipeline:
    return request.app.state.pipeline


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
