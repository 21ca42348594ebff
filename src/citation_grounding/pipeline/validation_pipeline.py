"""Validation pipeline orchestrator: extract, validate, aggregate."""

from __future__ import annotations

import asyncio
import os
from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor

from citation_grounding.claims.fact_checker import check_fact_claims
from citation_grounding.config.settings import Settings
from citation_grounding.embeddings.corpus_context import CorpusContext
from citation_grounding.exceptions import InvalidInputError, ValidationTimeoutError
from citation_grounding.extraction.extractor import extract_citations
from citation_grounding.models.domain import AggregateReport, Citation, SourceDocument, ValidationResult
from citation_grounding.observability.logger import get_logger
from citation_grounding.observability.metrics import (
    log_extraction_metrics,
    log_latency,
    log_validation_metrics,
)
from citation_grounding.observability.tracing import TraceContext
from citation_grounding.reporting.aggregator import ReportBuilder
from citation_grounding.validation.cascade import ValidationCascade

logger = get_logger("validation_pipeline")


class GroundingPipeline:
    """Validates every citation in a generated text against a source corpus.

    Citations are independent, so the cascade runs on a bounded worker pool;
    results are always aggregated in extraction order. A prebuilt
    :class:`CorpusContext` may be passed to reuse corpus indexing across calls;
    it must have been built from the same corpus.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        cascade: ValidationCascade | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._cascade = cascade or ValidationCascade(self._settings)
        self._reporter = ReportBuilder(self._settings)
        self._max_workers = self._settings.max_workers or os.cpu_count() or 1

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def cascade(self) -> ValidationCascade:
        return self._cascade

    def build_context(self, corpus: Iterable) -> CorpusContext:
        return CorpusContext.build(coerce_corpus(corpus), self._settings)

    def validate(
        self,
        generated_text: str,
        corpus: Iterable,
        context: CorpusContext | None = None,
    ) -> AggregateReport:
        _check_text(generated_text)
        documents = coerce_corpus(corpus)
        trace = TraceContext()

        # STEP 1: Corpus indexing (skipped when the caller supplies a context)
        with trace.span("indexing"):
            context = context or CorpusContext.build(documents, self._settings)

        # STEP 2: Citation extraction
        with trace.span("extraction"):
            citations = extract_citations(generated_text)
        log_extraction_metrics(trace.trace_id, len(generated_text), citations)

        # STEP 3: Cascade validation, fanned out over citations
        with trace.span("validation", citations=len(citations)):
            results = self._validate_all(citations, context)

        return self._finish(trace, generated_text, results, context)

    async def avalidate(
        self,
        generated_text: str,
        corpus: Iterable,
        context: CorpusContext | None = None,
        timeout: float | None = None,
    ) -> AggregateReport:
        """Async variant; ``timeout`` (seconds) bounds the whole call."""
        _check_text(generated_text)
        documents = coerce_corpus(corpus)
        try:
            return await asyncio.wait_for(
                self._avalidate(generated_text, documents, context), timeout=timeout
            )
        except asyncio.TimeoutError as e:
            logger.warning("validation_timeout", timeout_s=timeout, text_length=len(generated_text))
            raise ValidationTimeoutError(f"Validation exceeded {timeout}s") from e

    async def _avalidate(
        self,
        generated_text: str,
        documents: list[SourceDocument],
        context: CorpusContext | None,
    ) -> AggregateReport:
        trace = TraceContext()

        with trace.span("indexing"):
            if context is None:
                context = await asyncio.to_thread(CorpusContext.build, documents, self._settings)

        with trace.span("extraction"):
            citations = extract_citations(generated_text)
        log_extraction_metrics(trace.trace_id, len(generated_text), citations)

        semaphore = asyncio.Semaphore(self._max_workers)

        async def _run(citation: Citation) -> ValidationResult:
            async with semaphore:
                return await asyncio.to_thread(self._validate_one, citation, context)

        with trace.span("validation", citations=len(citations)):
            results = list(await asyncio.gather(*(_run(c) for c in citations)))

        return self._finish(trace, generated_text, results, context)

    def _validate_all(self, citations: list[Citation], context: CorpusContext) -> list[ValidationResult]:
        if len(citations) <= 1 or self._max_workers == 1:
            return [self._validate_one(c, context) for c in citations]
        with ThreadPoolExecutor(max_workers=min(self._max_workers, len(citations))) as pool:
            return list(pool.map(lambda c: self._validate_one(c, context), citations))

    def _validate_one(self, citation: Citation, context: CorpusContext) -> ValidationResult:
        result = self._cascade.validate(citation, context)
        logger.debug(
            "citation_validated",
            citation=citation.full_text[:80],
            level=result.level,
            match_type=result.match_type.value,
            confidence=result.confidence,
            accepted=result.accepted,
        )
        return result

    def _finish(
        self,
        trace: TraceContext,
        generated_text: str,
        results: list[ValidationResult],
        context: CorpusContext,
    ) -> AggregateReport:
        # STEP 4: Numeric claims outside citations
        with trace.span("fact_claims"):
            claims = (
                check_fact_claims(generated_text, context, self._settings)
                if self._settings.check_fact_claims
                else []
            )

        # STEP 5: Aggregation
        with trace.span("aggregation"):
            report = self._reporter.build(results, context, claims)

        log_validation_metrics(trace.trace_id, report)
        for stage, duration_ms in trace.span_durations().items():
            log_latency(trace.trace_id, stage, duration_ms)
        return report


def validate_article(
    generated_text: str,
    corpus: Iterable,
    settings: Settings | None = None,
    context: CorpusContext | None = None,
) -> AggregateReport:
    """Validate ``generated_text`` against ``corpus`` and return the aggregate report."""
    return GroundingPipeline(settings).validate(generated_text, corpus, context=context)


def coerce_corpus(corpus: Iterable | None) -> list[SourceDocument]:
    """Accept SourceDocuments, mappings or objects exposing ``name``/``content``.

    A missing name becomes ``document-N``; missing content contributes nothing.
    """
    if corpus is None:
        raise InvalidInputError("corpus is required")
    if isinstance(corpus, (str, bytes, Mapping)):
        raise InvalidInputError("corpus must be a sequence of documents")

    documents: list[SourceDocument] = []
    for i, item in enumerate(corpus, start=1):
        if isinstance(item, SourceDocument):
            documents.append(item)
            continue
        if isinstance(item, Mapping):
            doc_id, name, content = item.get("id"), item.get("name"), item.get("content")
        elif hasattr(item, "content"):
            doc_id = getattr(item, "id", None)
            name, content = getattr(item, "name", None), item.content
        else:
            raise InvalidInputError(f"corpus item {i} is not a document")
        if content is not None and not isinstance(content, str):
            raise InvalidInputError(f"corpus item {i} has non-text content")
        name = str(name) if name else f"document-{i}"
        documents.append(SourceDocument(id=str(doc_id or name), name=name, content=content or ""))
    return documents


def _check_text(generated_text: str | None) -> None:
    if generated_text is None:
        raise InvalidInputError("generated_text is required")
    if not isinstance(generated_text, str):
        raise InvalidInputError("generated_text must be a string")
