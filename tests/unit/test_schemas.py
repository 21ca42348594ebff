"""Tests for Pydantic schemas."""

import pytest
from pydantic import ValidationError

from citation_grounding.models.schemas import HealthResponse, ReportResponse, ValidateRequest
from citation_grounding.pipeline.validation_pipeline import validate_article


def test_validate_request_accepts_camel_case():
    req = ValidateRequest.model_validate(
        {"generatedText": "Some text", "corpus": [{"name": "a.txt", "content": "Body"}]}
    )
    assert req.generated_text == "Some text"
    assert req.corpus[0].name == "a.txt"
    assert req.corpus[0].id is None


def test_validate_request_accepts_snake_case():
    req = ValidateRequest(generated_text="Some text")
    assert req.corpus == []


def test_validate_request_requires_text():
    with pytest.raises(ValidationError):
        ValidateRequest.model_validate({"corpus": []})


def test_report_response_uses_contract_field_names(trust_corpus):
    report = validate_article('"Trust is earned slowly." (Müller, 2020)', trust_corpus)
    payload = ReportResponse.from_report(report).model_dump(mode="json", by_alias=True)

    assert payload["total"] == 1
    assert payload["validCount"] == 1
    assert payload["groundingScore"] == 100.0
    assert payload["levelBreakdown"]["1"] == 1
    result = payload["results"][0]
    assert result["isValid"] is True
    assert result["matchType"] == "exact"
    assert result["matchedDocument"] == "doc1"
    assert result["citation"]["quotedText"] == "Trust is earned slowly."
    assert result["citation"]["kind"] == "exact-quote"
    assert payload["fixSuggestions"] == []


def test_health_response():
    resp = HealthResponse(status="ok", version="0.1.0", levels=["exact-quote"])
    assert resp.status == "ok"
