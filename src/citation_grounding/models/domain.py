"""Core domain objects used throughout the system."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CitationKind(str, Enum):
    EXACT_QUOTE = "exact-quote"
    PARENTHETICAL = "parenthetical"
    NARRATIVE = "narrative"
    FOOTNOTE = "footnote"
    REFERENCE = "reference"


class PatternFamily(str, Enum):
    """Extraction pattern families, listed in priority order."""

    PARENTHETICAL = "parenthetical"
    QUOTED_INLINE = "quoted-inline"
    NARRATIVE = "narrative"
    REVERSED_NARRATIVE = "reversed-narrative"
    BRACKET = "bracket"
    NARRATIVE_REFERENCE = "narrative-reference"


class MatchType(str, Enum):
    EXACT = "exact"
    FUZZY = "fuzzy"
    SEMANTIC = "semantic"
    AUTHOR_YEAR = "author-year"
    FILENAME = "filename"
    PLAUSIBILITY = "plausibility"
    NONE = "none"


@dataclass(frozen=True)
class SourceDocument:
    id: str
    name: str
    content: str


@dataclass(frozen=True)
class Citation:
    """A citation-like fragment found in generated text.

    ``quoted_text`` is empty for metadata-only citations such as ``(Müller, 2020)``.
    """

    quoted_text: str
    author: str | None
    year: str | None
    page: str | None
    full_text: str
    kind: CitationKind
    family: PatternFamily
    span_start: int
    span_end: int

    @property
    def has_quote(self) -> bool:
        return bool(self.quoted_text)


@dataclass(frozen=True)
class ValidationResult:
    citation: Citation
    is_valid: bool
    confidence: float
    level: int
    match_type: MatchType
    reasoning: str
    matched_document: str | None = None
    matched_text: str | None = None
    suggested_fix: str | None = None
    accepted: bool = False
    flags: tuple[str, ...] = ()


@dataclass(frozen=True)
class FixSuggestion:
    original: str
    suggested: str
    reason: str
    document: str
    similarity: float


@dataclass(frozen=True)
class FactClaim:
    text: str
    claim_type: str  # "percentage", "statistic", "number"
    is_verified: bool
    confidence: float
    source: str | None = None


@dataclass
class AggregateReport:
    total: int
    valid_count: int
    suspicious_count: int
    invalid_count: int
    validation_rate: float
    grounding_score: float
    level_breakdown: dict[int, int]
    results: list[ValidationResult]
    hallucinations: list[ValidationResult]
    warnings: list[str]
    fix_suggestions: list[FixSuggestion]
    summary: str = ""
    fact_claims: list[FactClaim] = field(default_factory=list)
