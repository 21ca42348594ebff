"""Reason codes attached to validation results and reports."""

from __future__ import annotations


class ReasonCode:
    POSSIBLE_PARAPHRASE = "POSSIBLE_PARAPHRASE"
    METADATA_ONLY = "METADATA_ONLY"
    YEAR_NOT_FOUND = "YEAR_NOT_FOUND"
    LOW_PLAUSIBILITY = "LOW_PLAUSIBILITY"
    NO_MATCH = "NO_MATCH"
    FALLBACK_CANDIDATE = "FALLBACK_CANDIDATE"
