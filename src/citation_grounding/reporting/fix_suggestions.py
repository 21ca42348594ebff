"""Replacement quotes for citations with no supporting evidence."""

from __future__ import annotations

from citation_grounding.config.settings import Settings
from citation_grounding.embeddings.corpus_context import CorpusContext
from citation_grounding.models.domain import FixSuggestion, ValidationResult
from citation_grounding.nlp.tokenizer import tokenize
from citation_grounding.similarity.vector import token_similarity
from citation_grounding.validation.base import format_fix, percent


def suggest_fix(
    result: ValidationResult, corpus: CorpusContext, settings: Settings
) -> FixSuggestion | None:
    """Most similar corpus sentence to the cited quote, if similar enough.

    The suggestion keeps the original author and year so the writer only has
    to swap the quoted text.
    """
    quote = result.citation.quoted_text
    if not quote:
        return None
    quote_tokens = tokenize(quote)

    best_doc, best_sentence, best_similarity = None, None, 0.0
    for doc in corpus.documents:
        for sentence in doc.sentences:
            similarity = token_similarity(quote_tokens, sentence.tokens, corpus.idf, corpus.default_idf)
            if similarity > best_similarity:
                best_doc, best_sentence, best_similarity = doc, sentence, similarity

    if best_sentence is None or best_similarity <= settings.fix_similarity_threshold:
        return None
    return FixSuggestion(
        original=result.citation.full_text,
        suggested=format_fix(best_sentence.text, result.citation),
        reason=f"Similar passage in '{best_doc.name}' ({percent(best_similarity)} similarity)",
        document=best_doc.name,
        similarity=round(best_similarity, 4),
    )
