"""Tests for tokenization, keywords and sentence splitting."""

from citation_grounding.nlp.names import is_plausible_author, surname_variants, surnames
from citation_grounding.nlp.tokenizer import content_words, extract_keywords, split_sentences, tokenize


def test_tokenize_basic():
    tokens = tokenize("The quick brown fox jumps over the lazy dog")
    assert "quick" in tokens
    assert "fox" in tokens
    # Stopwords removed
    assert "the" not in tokens
    assert "over" not in tokens


def test_tokenize_german_stopwords():
    assert tokenize("Die Ergebnisse der Studie sind eindeutig") == ["ergebnisse", "studie", "eindeutig"]


def test_tokenize_drops_short_tokens():
    assert tokenize("AI is ok go") == []


def test_tokenize_keeps_umlauts():
    assert tokenize("Größe und Übermaß!") == ["größe", "übermaß"]


def test_tokenize_empty():
    assert tokenize("") == []
    assert tokenize("   ") == []


def test_extract_keywords_limit_and_length():
    keywords = extract_keywords("Employee engagement increases when managers provide feedback", limit=3)
    assert keywords == ["employee", "engagement", "increases"]


def test_extract_keywords_distinct():
    assert extract_keywords("growth growth growth market") == ["growth", "market"]


def test_split_sentences():
    text = "First sentence here. Second one! Third?"
    assert split_sentences(text) == ["First sentence here", "Second one", "Third"]
    assert split_sentences(text, min_length=10) == ["First sentence here"]


def test_content_words():
    assert content_words("Remote work, productivity and focus.") == ["remote", "productivity"]


def test_surnames():
    assert surnames("Schmidt & Weber") == ["schmidt", "weber"]
    assert surnames("Smith et al.") == ["smith"]
    assert surnames("Smith, J.") == ["smith"]
    assert surnames("van der Berg") == ["berg"]
    assert surnames(None) == []


def test_surname_variants():
    assert surname_variants("müller") == ("müller", "mueller")
    assert surname_variants("smith") == ("smith",)


def test_is_plausible_author():
    assert is_plausible_author("Müller")
    assert is_plausible_author("Smith et al.")
    assert not is_plausible_author("R2D2")
    assert not is_plausible_author("")
