"""Character-level similarity backed by rapidfuzz."""

from __future__ import annotations

import math
from dataclasses import dataclass

from rapidfuzz import fuzz
from rapidfuzz.distance import Levenshtein


@dataclass(frozen=True)
class FuzzyMatch:
    text: str
    similarity: float
    start: int


def edit_similarity(a: str, b: str) -> float:
    """1 - levenshtein(a, b) / max(len(a), len(b)); two empty strings are identical."""
    return float(Levenshtein.normalized_similarity(a, b))


def sliding_fuzzy_match(
    needle: str,
    haystack: str,
    threshold: float = 0.85,
    window_ratio: float = 1.2,
) -> FuzzyMatch | None:
    """Best haystack window (at most ceil(window_ratio * len(needle)) chars) for the needle.

    rapidfuzz slides the needle over the haystack and reports the best-aligned
    span; that span is then scored with :func:`edit_similarity`. Returns None
    unless the score exceeds ``threshold``.
    """
    if not needle or not haystack:
        return None

    window = math.ceil(window_ratio * len(needle))
    if len(haystack) <= len(needle):
        start, text = 0, haystack[:window]
    else:
        alignment = fuzz.partial_ratio_alignment(needle, haystack, score_cutoff=threshold * 100)
        if alignment is None:
            return None
        start = alignment.dest_start
        text = haystack[start : min(alignment.dest_end, start + window)]

    similarity = edit_similarity(needle, text)
    if similarity <= threshold:
        return None
    return FuzzyMatch(text=text, similarity=similarity, start=start)
