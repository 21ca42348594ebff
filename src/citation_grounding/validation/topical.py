"""Level 4: the quote's topic is discussed in a document."""

from __future__ import annotations

from citation_grounding.config.settings import Settings
from citation_grounding.embeddings.corpus_context import CorpusContext, IndexedSentence
from citation_grounding.models.domain import Citation, MatchType, ValidationResult
from citation_grounding.nlp.tokenizer import extract_keywords, tokenize
from citation_grounding.scoring.reason_codes import ReasonCode
from citation_grounding.similarity.vector import token_similarity
from citation_grounding.validation.base import cap_confidence, format_fix, percent


def check_topical(
    citation: Citation, corpus: CorpusContext, settings: Settings
) -> ValidationResult | None:
    quote = citation.quoted_text
    if len(quote) < settings.topical_min_quote_length:
        return None
    keywords = extract_keywords(quote, settings.topical_max_keywords)
    if not keywords:
        return None
    quote_tokens = tokenize(quote)

    best: ValidationResult | None = None
    for doc in corpus.documents:
        if not doc.has_content:
            continue
        matched = sum(1 for k in keywords if k in doc.content_lower)
        overlap = matched / len(keywords)
        if overlap < settings.topical_min_overlap:
            continue

        sentence, similarity = _best_sentence(quote_tokens, doc.topical_sentences, corpus)
        if similarity < settings.topical_accept_similarity and overlap < settings.topical_accept_overlap:
            continue

        confidence = cap_confidence(max(similarity, overlap * settings.topical_overlap_weight))
        if best is not None and confidence <= best.confidence:
            continue

        paraphrase = similarity < settings.paraphrase_similarity_ceiling
        best = ValidationResult(
            citation=citation,
            is_valid=True,
            confidence=confidence,
            level=4,
            match_type=MatchType.SEMANTIC,
            reasoning=(
                f"Topic match in '{doc.name}': {matched}/{len(keywords)} keywords, "
                f"best sentence {percent(similarity)} similar"
            ),
            matched_document=doc.name,
            matched_text=sentence.text if sentence else None,
            suggested_fix=format_fix(sentence.text, citation) if sentence and paraphrase else None,
            flags=(ReasonCode.POSSIBLE_PARAPHRASE,) if paraphrase else (),
        )
    return best


def _best_sentence(
    quote_tokens: list[str],
    sentences: tuple[IndexedSentence, ...],
    corpus: CorpusContext,
) -> tuple[IndexedSentence | None, float]:
    best: IndexedSentence | None = None
    best_similarity = 0.0
    for sentence in sentences:
        similarity = token_similarity(quote_tokens, sentence.tokens, corpus.idf, corpus.default_idf)
        if similarity > best_similarity:
            best, best_similarity = sentence, similarity
    return best, best_similarity
