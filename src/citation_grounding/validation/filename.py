"""Level 3: the document's filename carries the author (and year)."""

from __future__ import annotations

from citation_grounding.config.settings import Settings
from citation_grounding.embeddings.corpus_context import CorpusContext
from citation_grounding.models.domain import Citation, MatchType, ValidationResult
from citation_grounding.nlp.names import surname_variants, surnames
from citation_grounding.validation.base import cap_confidence


def check_filename(
    citation: Citation, corpus: CorpusContext, settings: Settings
) -> ValidationResult | None:
    if not citation.author:
        return None
    variants = {v for name in surnames(citation.author) for v in surname_variants(name)}
    if not variants:
        return None
    year = citation.year[:4] if citation.year else None

    best: ValidationResult | None = None
    for doc in corpus.documents:
        tokens = set(doc.name_tokens)
        if not tokens or not variants & tokens:
            continue
        if year is not None and year in tokens:
            confidence = settings.filename_author_year_confidence
            reasoning = f"Filename '{doc.name}' contains author and year {year}"
        else:
            confidence = settings.filename_author_confidence
            reasoning = f"Filename '{doc.name}' contains author"
        confidence = cap_confidence(confidence)

        if best is None or confidence > best.confidence:
            best = ValidationResult(
                citation=citation,
                is_valid=True,
                confidence=confidence,
                level=3,
                match_type=MatchType.FILENAME,
                reasoning=reasoning,
                matched_document=doc.name,
            )
    return best
