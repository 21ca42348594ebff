"""Tests for per-citation classification and the grounding score."""

import pytest

from citation_grounding.config.settings import Settings
from citation_grounding.models.domain import MatchType, ValidationResult
from citation_grounding.scoring.grounding_score import INVALID, SUSPICIOUS, VALID, GroundingScorer
from citation_grounding.scoring.reason_codes import ReasonCode


def test_classify_buckets(settings, citation_factory):
    citation = citation_factory("Trust is earned slowly.", "Müller", "2020")

    def _result(is_valid=True, confidence=0.9, match_type=MatchType.EXACT, flags=()):
        return ValidationResult(
            citation=citation,
            is_valid=is_valid,
            confidence=confidence,
            level=1,
            match_type=match_type,
            reasoning="test",
            flags=flags,
        )

    scorer = GroundingScorer(settings)
    assert scorer.classify(_result()) == VALID
    assert scorer.classify(_result(confidence=0.7)) == VALID
    assert scorer.classify(_result(confidence=0.69)) == SUSPICIOUS
    assert scorer.classify(_result(confidence=0.95, flags=(ReasonCode.POSSIBLE_PARAPHRASE,))) == SUSPICIOUS
    assert scorer.classify(_result(is_valid=False, confidence=0.4)) == INVALID
    assert scorer.classify(_result(confidence=0.0, match_type=MatchType.NONE)) == INVALID


@pytest.mark.parametrize(
    "total,valid,suspicious,expected",
    [
        (0, 0, 0, 100.0),
        (1, 1, 0, 100.0),
        (1, 0, 0, 20.0),
        (1, 0, 1, 0.0),
        (10, 5, 0, 62.0),
        (20, 10, 0, 65.0),
        (20, 10, 5, 60.0),
        (25, 25, 0, 100.0),
    ],
)
def test_grounding_score(settings, total, valid, suspicious, expected):
    assert GroundingScorer(settings).score(total, valid, suspicious) == expected


def test_volume_bonus_can_be_disabled():
    scorer = GroundingScorer(Settings(volume_bonus_enabled=False))
    assert scorer.score(20, 10, 0) == 60.0


def test_score_is_bounded(settings):
    scorer = GroundingScorer(settings)
    for total in (1, 5, 10, 20, 40):
        for valid in range(total + 1):
            for suspicious in range(total - valid + 1):
                assert 0.0 <= scorer.score(total, valid, suspicious) <= 100.0
