"""Regex families for citation-like fragments, in priority order.

Each family is a composable fragment built from the same author, year, page
and quote pieces. When two families claim overlapping text the extractor keeps
the longest span; equal spans go to the family listed first here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from citation_grounding.config.constants import NAME_PARTICLES, REPORTING_VERBS
from citation_grounding.models.domain import CitationKind, PatternFamily

_UPPER = "A-ZÀ-ÖØ-Þ"
_LETTER = "A-Za-zÀ-ÖØ-öø-ÿ"

_PARTICLE = "|".join(NAME_PARTICLES)
_NAME = rf"(?:(?:{_PARTICLE})\s+)*[{_UPPER}][{_LETTER}'’\-]*\.?"
_BARE_NAME = rf"[{_UPPER}][{_LETTER}'’\-]*"
_ET_AL = r"et\s+al\.?"
_SEP = r"(?:\s*,\s*|\s*&\s*|\s+(?:and|und)\s+|\s+)"

# Inside brackets or after a dash: any list of names.
AUTHOR_LIST = rf"{_NAME}(?:{_SEP}(?:{_ET_AL}|{_NAME}))*"
# In running text: one surname starting a word, optionally "et al." or a second surname.
NARRATIVE_AUTHOR = rf"(?<!\w){_BARE_NAME}(?:\s+{_ET_AL}|(?:\s*&\s*|\s+(?:and|und)\s+){_BARE_NAME})?"

YEAR = r"\d{4}[a-z]?"
PAGE = r"(?:pp?\.|S\.)\s*(?P<page>\d+(?:\s*[-–]\s*\d+)?)"

_QUOTE_OPEN = "[\"“„«]"
_QUOTE_CLOSE = "[\"”“»]"
_QUOTE_BODY = "[^\"“”„«»]"

_VERBS = "|".join(REPORTING_VERBS)


@dataclass(frozen=True)
class CitationPattern:
    family: PatternFamily
    kind: CitationKind
    regex: re.Pattern[str]


PATTERNS: tuple[CitationPattern, ...] = (
    # (Müller, 2020) / (Smith et al. 2019: p. 12-14)
    CitationPattern(
        PatternFamily.PARENTHETICAL,
        CitationKind.PARENTHETICAL,
        re.compile(
            rf"\(\s*(?P<author>{AUTHOR_LIST})\s*,?\s*(?P<year>{YEAR})(?:\s*[:,]\s*{PAGE})?\s*\)"
        ),
    ),
    # "quote" (Müller, 2020, p. 5)
    CitationPattern(
        PatternFamily.QUOTED_INLINE,
        CitationKind.EXACT_QUOTE,
        re.compile(
            rf"{_QUOTE_OPEN}(?P<quote>{_QUOTE_BODY}{{10,500}}){_QUOTE_CLOSE}\s*"
            rf"\(\s*(?P<author>{AUTHOR_LIST})\s*,?\s*(?P<year>{YEAR})(?:\s*[:,]\s*{PAGE})?\s*\)"
        ),
    ),
    # Müller (2020) states that "quote"
    CitationPattern(
        PatternFamily.NARRATIVE,
        CitationKind.NARRATIVE,
        re.compile(
            rf"(?P<author>{NARRATIVE_AUTHOR})\s*\(\s*(?P<year>{YEAR})\s*\)"
            rf"[^.!?\"“”„«»]{{0,50}}?{_QUOTE_OPEN}(?P<quote>{_QUOTE_BODY}{{10,300}}){_QUOTE_CLOSE}"
        ),
    ),
    # "quote" - Müller (2020)
    CitationPattern(
        PatternFamily.REVERSED_NARRATIVE,
        CitationKind.EXACT_QUOTE,
        re.compile(
            rf"{_QUOTE_OPEN}(?P<quote>{_QUOTE_BODY}{{10,300}}){_QUOTE_CLOSE}\s*[-–—]\s*"
            rf"(?P<author>{AUTHOR_LIST})\s*,?\s*\(\s*(?P<year>{YEAR})\s*\)"
        ),
    ),
    # [Müller, 2020, p. 5]
    CitationPattern(
        PatternFamily.BRACKET,
        CitationKind.FOOTNOTE,
        re.compile(
            rf"\[\s*(?P<author>{AUTHOR_LIST})\s*,\s*(?P<year>{YEAR})(?:\s*,\s*{PAGE})?\s*\]"
        ),
    ),
    # Müller (2020) argues ...
    CitationPattern(
        PatternFamily.NARRATIVE_REFERENCE,
        CitationKind.REFERENCE,
        re.compile(
            rf"(?P<author>{NARRATIVE_AUTHOR})\s*\(\s*(?P<year>{YEAR})\s*\)\s*,?\s*(?:{_VERBS})\b"
        ),
    ),
)
