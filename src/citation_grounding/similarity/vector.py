"""Cosine similarity over TF-IDF vectors."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from citation_grounding.embeddings.tfidf import build_vocabulary, embed_tokens
from citation_grounding.nlp.tokenizer import tokenize


def cosine_similarity(v1: Sequence[float] | np.ndarray, v2: Sequence[float] | np.ndarray) -> float:
    """Cosine in [0, 1]. The shorter vector is zero-padded; a zero norm gives 0."""
    a = np.asarray(v1, dtype=np.float64)
    b = np.asarray(v2, dtype=np.float64)
    if a.size < b.size:
        a = np.pad(a, (0, b.size - a.size))
    elif b.size < a.size:
        b = np.pad(b, (0, a.size - b.size))

    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(max(0.0, min(1.0, np.dot(a, b) / (norm_a * norm_b))))


def token_similarity(
    tokens_a: Sequence[str],
    tokens_b: Sequence[str],
    idf: dict[str, float] | None = None,
    default_idf: float = 1.0,
) -> float:
    vocabulary = build_vocabulary(tokens_a, tokens_b)
    if not vocabulary:
        return 0.0
    return cosine_similarity(
        embed_tokens(tokens_a, vocabulary, idf, default_idf),
        embed_tokens(tokens_b, vocabulary, idf, default_idf),
    )


def text_similarity(a: str, b: str, idf: dict[str, float] | None = None) -> float:
    """Symmetric cosine similarity over the shared vocabulary of both texts."""
    return token_similarity(tokenize(a), tokenize(b), idf)
