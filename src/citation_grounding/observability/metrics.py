"""Metric recording helpers for validation runs."""

from __future__ import annotations

from collections import Counter

from citation_grounding.models.domain import AggregateReport, Citation
from citation_grounding.observability.logger import get_logger

logger = get_logger("metrics")


def log_extraction_metrics(trace_id: str, text_length: int, citations: list[Citation]) -> None:
    kinds = Counter(c.kind.value for c in citations)
    logger.info(
        "extraction_metrics",
        trace_id=trace_id,
        text_length=text_length,
        citations=len(citations),
        metadata_only=sum(1 for c in citations if not c.has_quote),
        kinds=dict(sorted(kinds.items())),
    )


def log_validation_metrics(trace_id: str, report: AggregateReport) -> None:
    logger.info(
        "validation_metrics",
        trace_id=trace_id,
        total=report.total,
        valid=report.valid_count,
        suspicious=report.suspicious_count,
        invalid=report.invalid_count,
        validation_rate=round(report.validation_rate, 4),
        grounding_score=report.grounding_score,
        level_breakdown=report.level_breakdown,
    )


def log_latency(trace_id: str, stage: str, duration_ms: float) -> None:
    logger.info(
        "latency",
        trace_id=trace_id,
        stage=stage,
        duration_ms=round(duration_ms, 2),
    )
