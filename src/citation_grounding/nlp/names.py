"""Author-string helpers: normalisation, surnames and plausibility."""

from __future__ import annotations

import re

from citation_grounding.config.constants import UMLAUT_TRANSLITERATION

_ET_AL = re.compile(r"\bet\s+al\.?", re.IGNORECASE)
_AUTHOR_SPLIT = re.compile(r",|&|;|\band\b|\bund\b", re.IGNORECASE)
_PLAUSIBLE_PART = re.compile(r"^[A-Za-zÀ-ÖØ-öø-ÿ\s.'’\-]+$")


def normalize_author(author: str | None) -> str:
    if not author:
        return ""
    return " ".join(author.lower().split()).strip(" ,;&")


def surnames(author: str | None) -> list[str]:
    """Lower-cased surnames: the last word of each listed author, initials dropped.

    ``"Schmidt & Weber"`` -> ``["schmidt", "weber"]``; ``"Smith et al."`` -> ``["smith"]``.
    """
    if not author:
        return []
    names: list[str] = []
    for part in _AUTHOR_SPLIT.split(_ET_AL.sub(" ", author)):
        words = [w.strip(".'’-") for w in part.split()]
        words = [w for w in words if len(w) >= 2]
        if words:
            surname = words[-1].lower()
            if surname not in names:
                names.append(surname)
    return names


def surname_variants(surname: str) -> tuple[str, ...]:
    """The surname plus its ASCII transliteration (``müller`` -> ``mueller``)."""
    transliterated = surname.translate(UMLAUT_TRANSLITERATION)
    if transliterated == surname:
        return (surname,)
    return (surname, transliterated)


def is_plausible_author(author: str | None) -> bool:
    if not author:
        return False
    parts = [p.strip() for p in _AUTHOR_SPLIT.split(author)]
    parts = [p for p in parts if p]
    return bool(parts) and all(len(p) >= 2 and _PLAUSIBLE_PART.match(p) for p in parts)
