"""Shared helpers for the cascade levels."""

from __future__ import annotations

from dataclasses import dataclass

from citation_grounding.models.domain import Citation
from citation_grounding.protocols.level_check import LevelCheck

# Only an exact substring match may report full confidence.
NON_EXACT_CEILING = 0.99


@dataclass(frozen=True)
class LevelStrategy:
    level: int
    name: str
    check: LevelCheck
    min_confidence: float


def cap_confidence(value: float) -> float:
    return round(max(0.0, min(NON_EXACT_CEILING, value)), 4)


def format_fix(source_text: str, citation: Citation) -> str:
    """Replacement citation quoting the source verbatim under the original attribution."""
    author = citation.author or "Author"
    year = citation.year or "Year"
    return f'"{source_text.strip()}" ({author}, {year})'


def percent(value: float) -> str:
    return f"{value * 100:.0f}%"
