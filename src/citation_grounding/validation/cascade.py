"""Five-level grounding cascade: strict evidence first, looser heuristics after."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace

from citation_grounding.config.settings import Settings
from citation_grounding.embeddings.corpus_context import CorpusContext
from citation_grounding.exceptions import ConfigurationError
from citation_grounding.models.domain import Citation, MatchType, ValidationResult
from citation_grounding.scoring.reason_codes import ReasonCode
from citation_grounding.validation.author_year import check_author_year
from citation_grounding.validation.base import LevelStrategy
from citation_grounding.validation.exact_quote import check_exact_quote
from citation_grounding.validation.filename import check_filename
from citation_grounding.validation.plausibility import check_plausibility
from citation_grounding.validation.topical import check_topical

TERMINAL_LEVEL = 5


def default_strategies(settings: Settings) -> tuple[LevelStrategy, ...]:
    return (
        LevelStrategy(1, "exact-quote", check_exact_quote, settings.fuzzy_accept_threshold),
        LevelStrategy(2, "author-year", check_author_year, settings.author_year_accept_threshold),
        LevelStrategy(3, "filename", check_filename, settings.filename_accept_threshold),
        LevelStrategy(4, "topical", check_topical, settings.topical_accept_similarity),
        LevelStrategy(5, "plausibility", check_plausibility, settings.plausibility_accept_threshold),
    )


class ValidationCascade:
    """Runs the strategy table in order and returns the first accepted result.

    A level accepts when its result is valid and reaches the level's minimum
    confidence; later levels are never consulted after that. Without an
    accepted result, the most confident valid candidate wins (ties go to the
    stricter level), and failing that the citation is reported as unmatched.
    """

    def __init__(self, settings: Settings, strategies: Sequence[LevelStrategy] | None = None) -> None:
        self._settings = settings
        self._strategies = tuple(strategies) if strategies is not None else default_strategies(settings)
        levels = [s.level for s in self._strategies]
        if not levels or levels != sorted(set(levels)) or levels[0] < 1 or levels[-1] > TERMINAL_LEVEL:
            raise ConfigurationError(f"Cascade levels must be strictly ascending within 1-5, got {levels}")

    @property
    def strategies(self) -> tuple[LevelStrategy, ...]:
        return self._strategies

    def validate(self, citation: Citation, corpus: CorpusContext) -> ValidationResult:
        trail: list[str] = []
        candidates: list[ValidationResult] = []

        for strategy in self._strategies:
            result = strategy.check(citation, corpus, self._settings)
            if result is None:
                trail.append(f"L{strategy.level} {strategy.name}: no match")
                continue
            if result.is_valid and result.confidence >= strategy.min_confidence:
                return replace(result, accepted=True, reasoning=_with_trail(result.reasoning, trail))
            trail.append(
                f"L{strategy.level} {strategy.name}: {result.confidence:.2f} "
                f"below {strategy.min_confidence:.2f}"
            )
            if result.is_valid:
                candidates.append(result)

        if candidates:
            best = max(candidates, key=lambda r: (r.confidence, -r.level))
            return replace(
                best,
                reasoning=_with_trail(f"Best available evidence: {best.reasoning}", trail),
                flags=best.flags + (ReasonCode.FALLBACK_CANDIDATE,),
            )

        return ValidationResult(
            citation=citation,
            is_valid=False,
            confidence=0.0,
            level=TERMINAL_LEVEL,
            match_type=MatchType.NONE,
            reasoning=_with_trail("No supporting evidence at any level; likely hallucination", trail),
            suggested_fix="Remove the citation or replace it with a verified quote from the sources",
            flags=(ReasonCode.NO_MATCH,),
        )


def _with_trail(reasoning: str, trail: list[str]) -> str:
    if not trail:
        return reasoning
    return f"{reasoning} [checked: {'; '.join(trail)}]"
