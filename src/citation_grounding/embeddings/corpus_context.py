"""Per-corpus precomputation shared read-only by every citation check.

Build a :class:`CorpusContext` once per corpus and pass it into repeated
validation calls; nothing is cached at module level.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from citation_grounding.config.settings import Settings
from citation_grounding.embeddings.tfidf import TfidfEmbedder
from citation_grounding.models.domain import SourceDocument
from citation_grounding.nlp.tokenizer import split_sentences, tokenize
from citation_grounding.observability.logger import get_logger

logger = get_logger("corpus_context")

_PUBLICATION_YEAR = re.compile(r"(?<!\d)(?:19|20)\d{2}(?!\d)")
_FILENAME_TOKEN = re.compile(r"[^\W\d_]+|\d+")


@dataclass(frozen=True)
class IndexedSentence:
    text: str
    tokens: tuple[str, ...]


@dataclass(frozen=True)
class DocumentView:
    id: str
    name: str
    content: str
    content_lower: str
    name_lower: str
    name_tokens: tuple[str, ...]
    topical_sentences: tuple[IndexedSentence, ...]
    sentences: tuple[IndexedSentence, ...]
    publication_year: int | None

    @property
    def has_content(self) -> bool:
        return bool(self.content)


@dataclass(frozen=True)
class CorpusContext:
    documents: tuple[DocumentView, ...]
    content_lower: str
    year_range: tuple[int, int] | None
    idf: Mapping[str, float] | None = None
    default_idf: float = 1.0

    @classmethod
    def build(cls, documents: Iterable[SourceDocument], settings: Settings | None = None) -> CorpusContext:
        settings = settings or Settings()
        views = tuple(_index_document(doc, settings) for doc in documents)

        years = [v.publication_year for v in views if v.publication_year is not None]
        year_range = (min(years), max(years)) if years else None

        idf: Mapping[str, float] | None = None
        default_idf = 1.0
        if settings.corpus_idf_weighting:
            embedder = TfidfEmbedder([v.content for v in views])
            if embedder.idf:
                idf = MappingProxyType(dict(embedder.idf))
                default_idf = embedder.default_idf

        logger.debug(
            "corpus_indexed",
            documents=len(views),
            sentences=sum(len(v.sentences) for v in views),
            year_range=year_range,
            idf_terms=len(idf) if idf else 0,
        )
        return cls(
            documents=views,
            content_lower=" ".join(v.content_lower for v in views),
            year_range=year_range,
            idf=idf,
            default_idf=default_idf,
        )

    @property
    def is_empty(self) -> bool:
        return not self.documents


def _index_document(doc: SourceDocument, settings: Settings) -> DocumentView:
    content = doc.content or ""
    name = doc.name or ""
    topical = split_sentences(content, settings.topical_min_sentence_length)
    topical = topical[: settings.max_sentences_per_document]
    return DocumentView(
        id=doc.id,
        name=name,
        content=content,
        content_lower=content.lower(),
        name_lower=name.lower(),
        name_tokens=tuple(_FILENAME_TOKEN.findall(name.lower())),
        topical_sentences=tuple(_indexed(s) for s in topical),
        sentences=tuple(
            _indexed(s) for s in split_sentences(content, settings.fix_min_sentence_length)
        ),
        publication_year=_publication_year(name) or _publication_year(content),
    )


def _indexed(sentence: str) -> IndexedSentence:
    return IndexedSentence(text=sentence, tokens=tuple(tokenize(sentence)))


def _publication_year(text: str) -> int | None:
    match = _PUBLICATION_YEAR.search(text)
    return int(match.group()) if match else None
