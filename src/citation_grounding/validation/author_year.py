"""Level 2: author surnames and publication year appear in a document."""

from __future__ import annotations

import re

from citation_grounding.config.settings import Settings
from citation_grounding.embeddings.corpus_context import CorpusContext
from citation_grounding.models.domain import Citation, MatchType, ValidationResult
from citation_grounding.nlp.names import surname_variants, surnames
from citation_grounding.scoring.reason_codes import ReasonCode
from citation_grounding.validation.base import cap_confidence


def word_pattern(word: str) -> re.Pattern[str]:
    """Match ``word`` not flanked by other letters (underscores and digits are boundaries)."""
    return re.compile(rf"(?<![^\W\d_]){re.escape(word)}(?![^\W\d_])")


def year_pattern(year: str) -> re.Pattern[str]:
    return re.compile(rf"(?<!\d){re.escape(year)}(?!\d)")


def check_author_year(
    citation: Citation, corpus: CorpusContext, settings: Settings
) -> ValidationResult | None:
    if not citation.author or not citation.year:
        return None
    names = surnames(citation.author)
    if not names:
        return None

    name_patterns = [[word_pattern(v) for v in surname_variants(n)] for n in names]
    year = citation.year[:4]
    year_re = year_pattern(year)

    best: ValidationResult | None = None
    for doc in corpus.documents:
        name_ratio = _match_ratio(name_patterns, doc.name_lower)
        content_ratio = _match_ratio(name_patterns, doc.content_lower)
        ratio = max(name_ratio, content_ratio)
        year_found = bool(year_re.search(doc.name_lower) or year_re.search(doc.content_lower))
        where = "name" if name_ratio >= content_ratio else "content"

        if ratio >= settings.author_min_match_ratio and year_found:
            confidence = cap_confidence(
                settings.author_year_base_confidence + settings.author_year_ratio_weight * ratio
            )
            reasoning = (
                f"Author and year {year} found in '{doc.name}' "
                f"({_matched_count(ratio, names)}/{len(names)} surnames, via {where})"
            )
            flags: tuple[str, ...] = ()
        elif ratio >= settings.author_only_match_ratio:
            confidence = cap_confidence(settings.author_only_confidence)
            reasoning = f"Author found in '{doc.name}' via {where}, but year {year} is not"
            flags = (ReasonCode.YEAR_NOT_FOUND,)
        else:
            continue

        if best is None or confidence > best.confidence:
            best = ValidationResult(
                citation=citation,
                is_valid=True,
                confidence=confidence,
                level=2,
                match_type=MatchType.AUTHOR_YEAR,
                reasoning=reasoning,
                matched_document=doc.name,
                flags=flags if citation.has_quote else flags + (ReasonCode.METADATA_ONLY,),
            )
    return best


def _match_ratio(name_patterns: list[list[re.Pattern[str]]], text: str) -> float:
    if not text:
        return 0.0
    hits = sum(1 for variants in name_patterns if any(p.search(text) for p in variants))
    return hits / len(name_patterns)


def _matched_count(ratio: float, names: list[str]) -> int:
    return round(ratio * len(names))
