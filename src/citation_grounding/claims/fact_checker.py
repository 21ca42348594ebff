"""Statistical and numeric claims in generated text, checked against the corpus."""

from __future__ import annotations

import re
from collections.abc import Sequence

from citation_grounding.config.settings import Settings
from citation_grounding.embeddings.corpus_context import CorpusContext
from citation_grounding.extraction.extractor import citation_spans
from citation_grounding.models.domain import FactClaim
from citation_grounding.nlp.tokenizer import tokenize
from citation_grounding.similarity.vector import token_similarity

_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")
_PERCENTAGE = re.compile(r"\d+(?:[.,]\d+)?\s*(?:%|percent\b|prozent\b)", re.IGNORECASE)
_STATISTIC = re.compile(
    r"\bp\s*[<>=≤≥]\s*0?[.,]\d+|\b[rtF]\s*\(\s*\d+\s*\)\s*=|\bn\s*=\s*\d+",
    re.IGNORECASE,
)
# Any number except a bare four-digit year.
_NUMBER = re.compile(r"\b(?!(?:19|20)\d{2}\b)\d+(?:[.,]\d+)?\b")


def classify_claim(sentence: str) -> str | None:
    if _PERCENTAGE.search(sentence):
        return "percentage"
    if _STATISTIC.search(sentence):
        return "statistic"
    if _NUMBER.search(sentence):
        return "number"
    return None


def check_fact_claims(text: str, corpus: CorpusContext, settings: Settings) -> list[FactClaim]:
    """Find numeric claims outside citations and look for them in the corpus.

    Every citation span is masked first, including repeats the extractor
    deduplicates, so page numbers never count as claims.
    """
    masked = _mask_spans(text, citation_spans(text))
    claims: list[FactClaim] = []
    seen: set[str] = set()
    for sentence in _SENTENCE_BOUNDARY.split(masked):
        sentence = " ".join(sentence.split())
        if not sentence or sentence in seen:
            continue
        claim_type = classify_claim(sentence)
        if claim_type is None:
            continue
        seen.add(sentence)
        claims.append(_verify(sentence, claim_type, corpus, settings))
    return claims


def _verify(sentence: str, claim_type: str, corpus: CorpusContext, settings: Settings) -> FactClaim:
    needle = sentence.rstrip(".!?").lower()
    for doc in corpus.documents:
        if needle and needle in doc.content_lower:
            return FactClaim(sentence, claim_type, is_verified=True, confidence=1.0, source=doc.name)

    tokens = tokenize(sentence)
    best_source, best_similarity = None, 0.0
    for doc in corpus.documents:
        for candidate in doc.sentences:
            similarity = token_similarity(tokens, candidate.tokens, corpus.idf, corpus.default_idf)
            if similarity > best_similarity:
                best_source, best_similarity = doc.name, similarity
    return FactClaim(
        text=sentence,
        claim_type=claim_type,
        is_verified=best_similarity > settings.claim_verify_threshold,
        confidence=round(best_similarity, 4),
        source=best_source,
    )


def _mask_spans(text: str, spans: Sequence[tuple[int, int]]) -> str:
    chars = list(text)
    for start, end in spans:
        for i in range(start, min(end, len(chars))):
            chars[i] = " "
    return "".join(chars)
