"""Fold per-citation results into an AggregateReport."""

from __future__ import annotations

from collections.abc import Sequence

from citation_grounding.config.settings import Settings
from citation_grounding.embeddings.corpus_context import CorpusContext
from citation_grounding.models.domain import AggregateReport, FactClaim, ValidationResult
from citation_grounding.observability.logger import get_logger
from citation_grounding.reporting.fix_suggestions import suggest_fix
from citation_grounding.reporting.summary import summarize
from citation_grounding.scoring.grounding_score import INVALID, SUSPICIOUS, VALID, GroundingScorer
from citation_grounding.scoring.reason_codes import ReasonCode
from citation_grounding.validation.base import percent

logger = get_logger("aggregator")

LEVELS = (1, 2, 3, 4, 5)


class ReportBuilder:
    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._scorer = GroundingScorer(settings)

    def build(
        self,
        results: Sequence[ValidationResult],
        corpus: CorpusContext,
        fact_claims: Sequence[FactClaim] = (),
    ) -> AggregateReport:
        """Results must arrive in extraction order; the report preserves it."""
        total = len(results)
        buckets = {VALID: 0, SUSPICIOUS: 0, INVALID: 0}
        level_breakdown = {level: 0 for level in LEVELS}
        warnings: list[str] = []
        hallucinations: list[ValidationResult] = []

        for result in results:
            bucket = self._scorer.classify(result)
            buckets[bucket] += 1
            if result.accepted:
                level_breakdown[result.level] = level_breakdown.get(result.level, 0) + 1
            if bucket == SUSPICIOUS:
                warnings.append(_warning(result))
            elif bucket == INVALID:
                hallucinations.append(result)

        fix_suggestions = [
            fix
            for fix in (suggest_fix(r, corpus, self._settings) for r in hallucinations)
            if fix is not None
        ]

        valid, suspicious, invalid = buckets[VALID], buckets[SUSPICIOUS], buckets[INVALID]
        validation_rate = valid / total if total else 1.0
        report = AggregateReport(
            total=total,
            valid_count=valid,
            suspicious_count=suspicious,
            invalid_count=invalid,
            validation_rate=round(validation_rate, 4),
            grounding_score=self._scorer.score(total, valid, suspicious),
            level_breakdown=level_breakdown,
            results=list(results),
            hallucinations=hallucinations,
            warnings=warnings,
            fix_suggestions=fix_suggestions,
            summary=summarize(total, valid, suspicious, invalid, validation_rate),
            fact_claims=list(fact_claims),
        )
        logger.info(
            "report_built",
            total=total,
            valid=valid,
            suspicious=suspicious,
            invalid=invalid,
            grounding_score=report.grounding_score,
            fixes=len(fix_suggestions),
        )
        return report


def _warning(result: ValidationResult) -> str:
    if ReasonCode.POSSIBLE_PARAPHRASE in result.flags:
        issue = "possible paraphrase of the source"
    else:
        issue = "low confidence"
    return (
        f"{result.citation.full_text}: {issue} "
        f"(level {result.level}, confidence {percent(result.confidence)})"
    )
