"""Tests for TF-IDF embeddings and the corpus context."""

import math

import numpy as np
import pytest

from citation_grounding.config.settings import Settings
from citation_grounding.embeddings.corpus_context import CorpusContext
from citation_grounding.embeddings.tfidf import TfidfEmbedder, build_vocabulary, compute_idf, embed
from citation_grounding.models.domain import SourceDocument


def test_embed_is_l2_normalised():
    v = embed("alpha beta beta")
    assert np.linalg.norm(v) == pytest.approx(1.0)
    # vocabulary is sorted: alpha, beta; beta has twice the term frequency
    assert v[1] == pytest.approx(2 * v[0])


def test_embed_empty_text():
    assert embed("").size == 0
    assert np.array_equal(embed("", vocabulary=["alpha", "beta"]), np.zeros(2))


def test_embed_ignores_out_of_vocabulary_terms():
    v = embed("alpha gamma", vocabulary=["alpha", "beta"])
    assert v.tolist() == pytest.approx([1.0, 0.0])


def test_build_vocabulary_sorted_union():
    assert build_vocabulary(["pear", "apple"], ["apple", "kiwi"]) == ["apple", "kiwi", "pear"]


def test_compute_idf_needs_three_texts():
    assert compute_idf([["apple"], ["pear"]]) == {}


def test_compute_idf_values():
    idf = compute_idf([["apple", "pear"], ["apple"], ["apple"], ["kiwi"]])
    assert idf["apple"] == 0.0
    assert idf["pear"] == pytest.approx(math.log(2))
    assert idf["kiwi"] == pytest.approx(math.log(2))


def test_tfidf_embedder():
    embedder = TfidfEmbedder(["apple pear", "apple", "apple", "kiwi"])
    assert embedder.dimensions == 3
    assert embedder.default_idf == pytest.approx(math.log(4))
    # "apple" appears almost everywhere and carries no weight
    assert np.linalg.norm(embedder.embed("apple")) == 0.0
    v = embedder.embed("pear")
    assert v[embedder.vocabulary.index("pear")] == pytest.approx(1.0)


def test_corpus_context_indexes_documents():
    docs = [
        SourceDocument(id="a", name="Mueller_2018_Teams.pdf", content="Teams coordinate through written channels."),
        SourceDocument(id="b", name="notes", content="Published in 2021. Remote work changed communication habits."),
        SourceDocument(id="c", name="empty", content=""),
    ]
    context = CorpusContext.build(docs, Settings())

    assert [d.name for d in context.documents] == ["Mueller_2018_Teams.pdf", "notes", "empty"]
    assert context.documents[0].name_tokens == ("mueller", "2018", "teams", "pdf")
    assert context.documents[0].publication_year == 2018
    assert context.documents[1].publication_year == 2021
    assert context.year_range == (2018, 2021)
    assert not context.documents[2].has_content
    assert context.idf is None


def test_corpus_context_optional_idf():
    docs = [SourceDocument(id=str(i), name=str(i), content=text) for i, text in enumerate(
        ["apple pear", "apple", "apple", "kiwi"]
    )]
    context = CorpusContext.build(docs, Settings(corpus_idf_weighting=True))
    assert context.idf is not None
    assert context.idf["pear"] == pytest.approx(math.log(2))


def test_corpus_context_empty():
    context = CorpusContext.build([], Settings())
    assert context.is_empty
    assert context.year_range is None
    assert context.content_lower == ""
