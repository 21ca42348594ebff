"""Level 1: the quote appears verbatim (or near-verbatim) in a document."""

from __future__ import annotations

from citation_grounding.config.settings import Settings
from citation_grounding.embeddings.corpus_context import CorpusContext, DocumentView
from citation_grounding.models.domain import Citation, MatchType, ValidationResult
from citation_grounding.scoring.reason_codes import ReasonCode
from citation_grounding.similarity.edit_distance import FuzzyMatch, sliding_fuzzy_match
from citation_grounding.validation.base import cap_confidence, format_fix, percent

_TRAILING_PUNCTUATION = ".,;:!?…"


def check_exact_quote(
    citation: Citation, corpus: CorpusContext, settings: Settings
) -> ValidationResult | None:
    quote = citation.quoted_text.strip()
    if len(quote) < settings.exact_min_quote_length:
        return None

    variants = [quote]
    trimmed = quote.rstrip(_TRAILING_PUNCTUATION).strip()
    if trimmed != quote and len(trimmed) >= settings.exact_min_quote_length:
        variants.append(trimmed)

    for doc in corpus.documents:
        if not doc.has_content:
            continue
        for variant in variants:
            if variant in doc.content:
                return ValidationResult(
                    citation=citation,
                    is_valid=True,
                    confidence=1.0,
                    level=1,
                    match_type=MatchType.EXACT,
                    reasoning=f"Exact quote found in '{doc.name}'",
                    matched_document=doc.name,
                    matched_text=variant,
                )

    best: tuple[DocumentView, FuzzyMatch] | None = None
    for doc in corpus.documents:
        if not doc.has_content:
            continue
        match = sliding_fuzzy_match(
            quote,
            doc.content,
            threshold=settings.fuzzy_match_threshold,
            window_ratio=settings.fuzzy_window_ratio,
        )
        if match is not None and (best is None or match.similarity > best[1].similarity):
            best = (doc, match)

    if best is None:
        return None

    doc, match = best
    paraphrase = match.similarity < settings.paraphrase_similarity_ceiling
    return ValidationResult(
        citation=citation,
        is_valid=True,
        confidence=cap_confidence(match.similarity),
        level=1,
        match_type=MatchType.FUZZY,
        reasoning=(
            f"Near-verbatim quote in '{doc.name}' ({percent(match.similarity)} edit similarity)"
            + ("; possible paraphrase" if paraphrase else "")
        ),
        matched_document=doc.name,
        matched_text=match.text,
        suggested_fix=format_fix(match.text, citation) if paraphrase else None,
        flags=(ReasonCode.POSSIBLE_PARAPHRASE,) if paraphrase else (),
    )
