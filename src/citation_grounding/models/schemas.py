"""Pydantic models for API request/response serialization.

Responses use the camelCase field names of the report contract
(``validCount``, ``groundingScore``, ``levelBreakdown`` ...); requests accept
either spelling.
"""

from __future__ import annotations

from dataclasses import asdict

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from citation_grounding.models.domain import AggregateReport, CitationKind, MatchType, PatternFamily


class ContractModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DocumentIn(ContractModel):
    id: str | None = None
    name: str | None = None
    content: str | None = None


class ValidateRequest(ContractModel):
    generated_text: str
    corpus: list[DocumentIn] = Field(default_factory=list)


class CitationOut(ContractModel):
    quoted_text: str
    author: str | None
    year: str | None
    page: str | None
    full_text: str
    kind: CitationKind
    family: PatternFamily
    span_start: int
    span_end: int


class ValidationResultOut(ContractModel):
    citation: CitationOut
    is_valid: bool
    confidence: float
    level: int
    match_type: MatchType
    reasoning: str
    matched_document: str | None = None
    matched_text: str | None = None
    suggested_fix: str | None = None
    accepted: bool = False
    flags: list[str] = Field(default_factory=list)


class FixSuggestionOut(ContractModel):
    original: str
    suggested: str
    reason: str
    document: str
    similarity: float


class FactClaimOut(ContractModel):
    text: str
    claim_type: str
    is_verified: bool
    confidence: float
    source: str | None = None


class ReportResponse(ContractModel):
    total: int
    valid_count: int
    suspicious_count: int
    invalid_count: int
    validation_rate: float
    grounding_score: float
    level_breakdown: dict[int, int]
    results: list[ValidationResultOut]
    hallucinations: list[ValidationResultOut]
    warnings: list[str]
    fix_suggestions: list[FixSuggestionOut]
    summary: str = ""
    fact_claims: list[FactClaimOut] = Field(default_factory=list)

    @classmethod
    def from_report(cls, report: AggregateReport) -> ReportResponse:
        return cls.model_validate(asdict(report))


class HealthResponse(BaseModel):
    status: str
    version: str
    levels: list[str]
