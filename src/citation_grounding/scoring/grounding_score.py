"""Per-citation classification and the aggregate 0-100 grounding score."""

from __future__ import annotations

from citation_grounding.config.settings import Settings
from citation_grounding.models.domain import MatchType, ValidationResult
from citation_grounding.scoring.reason_codes import ReasonCode

VALID = "valid"
SUSPICIOUS = "suspicious"
INVALID = "invalid"


class GroundingScorer:
    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def classify(self, result: ValidationResult) -> str:
        if not result.is_valid or result.match_type == MatchType.NONE:
            return INVALID
        if (
            result.confidence < self._settings.valid_confidence_threshold
            or ReasonCode.POSSIBLE_PARAPHRASE in result.flags
        ):
            return SUSPICIOUS
        return VALID

    def score(self, total: int, valid_count: int, suspicious_count: int) -> float:
        """100 * [w_rate * rate + w_susp * (1 - suspicious / total)] plus a volume bonus."""
        s = self._settings
        rate = valid_count / total if total else 1.0
        base = 100 * (
            s.score_rate_weight * rate
            + s.score_suspicious_weight * (1 - suspicious_count / max(total, 1))
        )
        bonus = 0.0
        if s.volume_bonus_enabled:
            if total >= s.volume_bonus_large_min:
                bonus = s.volume_bonus_large
            elif total >= s.volume_bonus_medium_min:
                bonus = s.volume_bonus_medium
        return round(max(0.0, min(100.0, base + bonus)), 2)
