"""Level 5: heuristic plausibility from the citation's own text.

The weights are configuration, not calibrated probabilities. A citation that
trips none of the heuristics yields no candidate at all.
"""

from __future__ import annotations

from citation_grounding.config.constants import SCIENTIFIC_TERMS
from citation_grounding.config.settings import Settings
from citation_grounding.embeddings.corpus_context import CorpusContext
from citation_grounding.models.domain import Citation, MatchType, ValidationResult
from citation_grounding.nlp.names import is_plausible_author
from citation_grounding.nlp.tokenizer import content_words
from citation_grounding.scoring.reason_codes import ReasonCode
from citation_grounding.validation.base import cap_confidence, percent


def check_plausibility(
    citation: Citation, corpus: CorpusContext, settings: Settings
) -> ValidationResult | None:
    quote = citation.quoted_text
    score = 0.0
    reasons: list[str] = []

    if quote and any(term in quote.lower() for term in SCIENTIFIC_TERMS):
        score += settings.plausibility_scientific_weight
        reasons.append("scientific vocabulary")

    if citation.year and corpus.year_range is not None and citation.year[:4].isdigit():
        year = int(citation.year[:4])
        low, high = corpus.year_range
        tolerance = settings.plausibility_year_tolerance
        if low - tolerance <= year <= high + tolerance:
            score += settings.plausibility_year_weight
            reasons.append(f"year {year} within corpus timeframe {low}-{high}")

    if is_plausible_author(citation.author):
        score += settings.plausibility_author_weight
        reasons.append("plausible author format")

    if settings.plausibility_min_quote_length <= len(quote) <= settings.plausibility_max_quote_length:
        score += settings.plausibility_length_weight
        reasons.append("plausible quote length")

    words = content_words(quote)
    if words:
        relevance = sum(1 for w in words if w in corpus.content_lower) / len(words)
        if relevance >= settings.plausibility_min_overlap:
            score += relevance * settings.plausibility_overlap_weight
            reasons.append(f"{percent(relevance)} word overlap with corpus")

    score = round(score, 4)
    if score <= 0:
        return None

    is_valid = score >= settings.plausibility_accept_threshold
    verdict = "passed" if is_valid else "failed"
    return ValidationResult(
        citation=citation,
        is_valid=is_valid,
        confidence=cap_confidence(min(score, settings.plausibility_confidence_cap)),
        level=5,
        match_type=MatchType.PLAUSIBILITY,
        reasoning=f"Plausibility check {verdict} ({percent(score)}): {', '.join(reasons)}",
        flags=() if is_valid else (ReasonCode.LOW_PLAUSIBILITY,),
    )
