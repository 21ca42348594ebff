"""Tests for numeric fact-claim detection."""

import pytest

from citation_grounding.claims.fact_checker import check_fact_claims, classify_claim
from citation_grounding.extraction.extractor import extract_citations
from citation_grounding.models.domain import SourceDocument


@pytest.mark.parametrize(
    "sentence,expected",
    [
        ("Engagement rose by 23% after the program.", "percentage"),
        ("Costs grew 3.5 percent last year.", "percentage"),
        ("The effect was significant (p < 0.05).", "statistic"),
        ("The sample was small (n = 48).", "statistic"),
        ("Overall, 120 participants completed the survey.", "number"),
        ("The policy changed in 2020.", None),
        ("No numbers at all here.", None),
    ],
)
def test_classify_claim(sentence, expected):
    assert classify_claim(sentence) == expected


def test_claims_checked_against_corpus(settings, build_context):
    context = build_context(
        SourceDocument(id="s", name="survey.txt", content="Engagement rose by 23% after the program. Other details follow.")
    )
    text = (
        "Engagement rose by 23% after the program. The weather was pleasant. "
        "Overall, 120 participants completed the survey."
    )
    claims = check_fact_claims(text, context, settings)

    assert len(claims) == 2
    verified, unverified = claims
    assert verified.claim_type == "percentage"
    assert verified.is_verified
    assert verified.confidence == 1.0
    assert verified.source == "survey.txt"
    assert unverified.claim_type == "number"
    assert not unverified.is_verified


def test_citation_spans_are_not_claims(settings, build_context):
    text = "Trust matters (Müller, 2020, p. 12)."
    citations = extract_citations(text)
    assert citations
    assert check_fact_claims(text, build_context(), settings) == []


def test_repeated_claims_reported_once(settings, build_context):
    text = "Sales doubled to 40 units. Sales doubled to 40 units."
    claims = check_fact_claims(text, build_context(), settings)
    assert len(claims) == 1
    assert claims[0].source is None


def test_repeated_citations_are_masked(settings, build_context):
    text = "Trust matters (Müller, 2020, p. 12). Trust matters again (Müller, 2020, p. 12)."
    assert len(extract_citations(text)) == 1
    assert check_fact_claims(text, build_context(), settings) == []
