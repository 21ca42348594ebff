"""Citation extraction from generated text."""

from __future__ import annotations

import re

from citation_grounding.extraction.patterns import PATTERNS, CitationPattern
from citation_grounding.models.domain import Citation
from citation_grounding.nlp.names import normalize_author
from citation_grounding.observability.logger import get_logger

logger = get_logger("extractor")

DEDUP_QUOTE_PREFIX = 50


def extract_citations(text: str) -> list[Citation]:
    """Find every citation-like fragment in ``text``.

    All families are matched; overlapping matches are resolved longest-span
    first (ties go to the higher-priority family). Survivors come back in text
    order, deduplicated by (author, year, first 50 quote characters).
    """
    if not text:
        return []

    kept = _resolve_matches(text)
    citations: list[Citation] = []
    seen: set[tuple[str, str, str]] = set()
    for match, pattern in kept:
        citation = _to_citation(match, pattern)
        key = dedup_key(citation)
        if key in seen:
            continue
        seen.add(key)
        citations.append(citation)

    logger.debug("citations_extracted", kept=len(kept), unique=len(citations))
    return citations


def citation_spans(text: str) -> list[tuple[int, int]]:
    """Character spans of every citation in ``text``, repeated ones included."""
    if not text:
        return []
    return [(match.start(), match.end()) for match, _ in _resolve_matches(text)]


def dedup_key(citation: Citation) -> tuple[str, str, str]:
    return (
        normalize_author(citation.author),
        citation.year or "",
        citation.quoted_text[:DEDUP_QUOTE_PREFIX],
    )


def _resolve_matches(text: str) -> list[tuple[re.Match[str], CitationPattern]]:
    matches: list[tuple[int, re.Match[str], CitationPattern]] = []
    for priority, pattern in enumerate(PATTERNS):
        for match in pattern.regex.finditer(text):
            matches.append((priority, match, pattern))

    matches.sort(key=lambda m: (-(m[1].end() - m[1].start()), m[0], m[1].start()))
    kept: list[tuple[re.Match[str], CitationPattern]] = []
    for _, match, pattern in matches:
        if any(match.start() < k.end() and k.start() < match.end() for k, _ in kept):
            continue
        kept.append((match, pattern))
    kept.sort(key=lambda k: k[0].start())
    return kept


def _to_citation(match: re.Match[str], pattern: CitationPattern) -> Citation:
    groups = match.groupdict()
    author = groups.get("author")
    page = groups.get("page")
    return Citation(
        quoted_text=(groups.get("quote") or "").strip(),
        author=" ".join(author.split()).strip(" ,;&") if author else None,
        year=groups.get("year"),
        page=re.sub(r"\s+", "", page) if page else None,
        full_text=match.group(0),
        kind=pattern.kind,
        family=pattern.family,
        span_start=match.start(),
        span_end=match.end(),
    )
