"""Validation endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from citation_grounding.api.dependencies import get_pipeline
from citation_grounding.exceptions import (
    GroundingEngineError,
    InvalidInputError,
    ValidationTimeoutError,
)
from citation_grounding.models.domain import AggregateReport
from citation_grounding.models.schemas import ReportResponse, ValidateRequest
from citation_grounding.pipeline.validation_pipeline import GroundingPipeline
from citation_grounding.reporting.markdown import render_markdown

router = APIRouter()


@router.post("/validate", response_model=ReportResponse)
async def validate(
    request: ValidateRequest,
    pipeline: GroundingPipeline = Depends(get_pipeline),
) -> ReportResponse:
    report = await _run(request, pipeline)
    return ReportResponse.from_report(report)


@router.post("/validate/markdown", response_class=PlainTextResponse)
async def validate_markdown(
    request: ValidateRequest,
    pipeline: GroundingPipeline = Depends(get_pipeline),
) -> PlainTextResponse:
    """Same validation, rendered as a Markdown report."""
    report = await _run(request, pipeline)
    return PlainTextResponse(render_markdown(report, pipeline.settings), media_type="text/markdown")


async def _run(request: ValidateRequest, pipeline: GroundingPipeline) -> AggregateReport:
    try:
        return await pipeline.avalidate(
            request.generated_text,
            request.corpus,
            timeout=pipeline.settings.request_timeout_s,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ValidationTimeoutError as e:
        raise HTTPException(status_code=504, detail=str(e))
    except GroundingEngineError as e:
        raise HTTPException(status_code=500, detail=str(e))
