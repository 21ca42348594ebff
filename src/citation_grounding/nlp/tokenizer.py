"""Text normalisation: tokens, keywords and sentences."""

from __future__ import annotations

import re

from citation_grounding.config.constants import STOPWORDS

_SENTENCE_SPLIT = re.compile(r"[.!?]+")


def tokenize(text: str) -> list[str]:
    """Tokenize text: lowercase, strip punctuation, remove stopwords and short tokens."""
    text = text.lower()
    text = re.sub(r"[^\w\s]", " ", text)
    tokens = text.split()
    return [t for t in tokens if t not in STOPWORDS and len(t) > 2]


def extract_keywords(text: str, limit: int = 10) -> list[str]:
    """Content-bearing words (longer than four characters), first ``limit`` distinct."""
    keywords: list[str] = []
    for word in re.split(r"\W+", text.lower()):
        if len(word) > 4 and word not in STOPWORDS and word not in keywords:
            keywords.append(word)
            if len(keywords) == limit:
                break
    return keywords


def split_sentences(text: str, min_length: int = 0) -> list[str]:
    sentences = (s.strip() for s in _SENTENCE_SPLIT.split(text))
    return [s for s in sentences if len(s) > min_length]


def content_words(text: str, min_length: int = 6) -> list[str]:
    words = re.sub(r"[^\w\s]", " ", text.lower()).split()
    return [w for w in words if len(w) >= min_length]
