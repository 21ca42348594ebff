"""Shared test fixtures."""

from __future__ import annotations

import pytest

from citation_grounding.config.settings import Settings
from citation_grounding.embeddings.corpus_context import CorpusContext
from citation_grounding.models.domain import Citation, CitationKind, PatternFamily, SourceDocument

PARAPHRASE_SOURCE = (
    "Employee engagement increases significantly when managers provide regular feedback "
    "and recognition. Office furniture purchasing follows a strict annual budget cycle."
)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def trust_corpus():
    return [SourceDocument(id="doc1", name="doc1", content="Trust is earned slowly. Everything else follows.")]


@pytest.fixture
def paraphrase_corpus():
    return [SourceDocument(id="report", name="report.txt", content=PARAPHRASE_SOURCE)]


@pytest.fixture
def build_context(settings):
    def _build(*documents: SourceDocument) -> CorpusContext:
        return CorpusContext.build(documents, settings)

    return _build


def make_citation(
    quoted_text: str = "",
    author: str | None = None,
    year: str | None = None,
    kind: CitationKind = CitationKind.EXACT_QUOTE,
) -> Citation:
    if quoted_text:
        full_text = f'"{quoted_text}" ({author}, {year})'
    else:
        full_text = f"({author}, {year})"
    return Citation(
        quoted_text=quoted_text,
        author=author,
        year=year,
        page=None,
        full_text=full_text,
        kind=kind,
        family=PatternFamily.QUOTED_INLINE if quoted_text else PatternFamily.PARENTHETICAL,
        span_start=0,
        span_end=len(full_text),
    )


@pytest.fixture
def citation_factory():
    return make_citation
