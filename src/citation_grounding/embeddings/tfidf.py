"""Bag-of-words TF-IDF vectors built with numpy."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence

import numpy as np

from citation_grounding.nlp.tokenizer import tokenize

# Below this many texts ln(N / (df + 1)) is <= 0 for every term.
MIN_IDF_DOCUMENTS = 3


def build_vocabulary(*token_lists: Iterable[str]) -> list[str]:
    vocabulary: set[str] = set()
    for tokens in token_lists:
        vocabulary.update(tokens)
    return sorted(vocabulary)


def compute_idf(token_lists: Sequence[Sequence[str]]) -> dict[str, float]:
    """idf(t) = ln(N / (df(t) + 1)), floored at zero.

    Returns an empty table (uniform weights) for fewer than three texts.
    """
    n = len(token_lists)
    if n < MIN_IDF_DOCUMENTS:
        return {}
    df: Counter[str] = Counter()
    for tokens in token_lists:
        df.update(set(tokens))
    return {term: max(0.0, math.log(n / (count + 1))) for term, count in df.items()}


def embed_tokens(
    tokens: Sequence[str],
    vocabulary: Sequence[str] | None = None,
    idf: dict[str, float] | None = None,
    default_idf: float = 1.0,
) -> np.ndarray:
    """TF (normalised by the max term count) x IDF, then L2-normalised."""
    vocab = list(vocabulary) if vocabulary is not None else build_vocabulary(tokens)
    vector = np.zeros(len(vocab), dtype=np.float64)
    if not tokens or not vocab:
        return vector

    counts = Counter(tokens)
    max_tf = max(counts.values())
    index = {term: i for i, term in enumerate(vocab)}
    for term, count in counts.items():
        i = index.get(term)
        if i is None:
            continue
        weight = idf.get(term, default_idf) if idf else 1.0
        vector[i] = (count / max_tf) * weight

    norm = np.linalg.norm(vector)
    if norm > 0:
        vector /= norm
    return vector


def embed(
    text: str,
    vocabulary: Sequence[str] | None = None,
    idf: dict[str, float] | None = None,
) -> np.ndarray:
    """Embed text over ``vocabulary`` (defaults to the text's own tokens). Never fails."""
    return embed_tokens(tokenize(text), vocabulary, idf)


class TfidfEmbedder:
    """Vocabulary and IDF table fitted on a fixed set of texts."""

    def __init__(self, texts: Sequence[str] = ()) -> None:
        token_lists = [tokenize(t) for t in texts]
        self.vocabulary = build_vocabulary(*token_lists)
        self.idf = compute_idf(token_lists)
        # Terms never seen in the fitted texts get the df=0 weight.
        self.default_idf = math.log(len(token_lists)) if self.idf else 1.0

    @property
    def dimensions(self) -> int:
        return len(self.vocabulary)

    def embed(self, text: str) -> np.ndarray:
        return embed_tokens(tokenize(text), self.vocabulary, self.idf, self.default_idf)
