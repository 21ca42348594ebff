"""Tests for citation extraction."""

from citation_grounding.extraction.extractor import citation_spans, extract_citations
from citation_grounding.models.domain import CitationKind, PatternFamily


def test_quoted_inline_wins_over_nested_parenthetical():
    text = '"Trust is earned slowly." (Müller, 2020)'
    citations = extract_citations(text)
    assert len(citations) == 1
    c = citations[0]
    assert c.quoted_text == "Trust is earned slowly."
    assert c.author == "Müller"
    assert c.year == "2020"
    assert c.kind == CitationKind.EXACT_QUOTE
    assert c.family == PatternFamily.QUOTED_INLINE
    assert (c.span_start, c.span_end) == (0, len(text))
    assert c.full_text == text


def test_parenthetical_with_page_range():
    citations = extract_citations("as shown before (Smith et al., 2019, p. 12-14).")
    assert len(citations) == 1
    c = citations[0]
    assert c.kind == CitationKind.PARENTHETICAL
    assert c.author == "Smith et al."
    assert c.year == "2019"
    assert c.page == "12-14"
    assert c.quoted_text == ""
    assert not c.has_quote


def test_parenthetical_multiple_authors():
    citations = extract_citations("Coordination costs grow (Schmidt & Weber, 2019).")
    assert [c.author for c in citations] == ["Schmidt & Weber"]


def test_narrative_citation():
    text = 'Müller (2020) states that "Leadership requires consistent communication."'
    citations = extract_citations(text)
    assert len(citations) == 1
    assert citations[0].kind == CitationKind.NARRATIVE
    assert citations[0].author == "Müller"
    assert citations[0].quoted_text == "Leadership requires consistent communication."


def test_reversed_narrative_citation():
    citations = extract_citations('"Leadership requires consistent communication." - Weber (2018)')
    assert len(citations) == 1
    assert citations[0].family == PatternFamily.REVERSED_NARRATIVE
    assert citations[0].kind == CitationKind.EXACT_QUOTE
    assert citations[0].author == "Weber"
    assert citations[0].year == "2018"


def test_bracket_footnote_citation():
    citations = extract_citations("Results were robust [Schmidt, 2017, p. 4].")
    assert len(citations) == 1
    assert citations[0].kind == CitationKind.FOOTNOTE
    assert citations[0].page == "4"


def test_narrative_reference_without_quote():
    citations = extract_citations("Schmidt (2017) argues that small teams coordinate better.")
    assert len(citations) == 1
    assert citations[0].kind == CitationKind.REFERENCE
    assert citations[0].quoted_text == ""


def test_german_quotation_marks():
    citations = extract_citations("„Vertrauen entsteht langsam.“ (Müller, 2020)")
    assert len(citations) == 1
    assert citations[0].quoted_text == "Vertrauen entsteht langsam."


def test_duplicates_collapse_to_first_occurrence():
    text = "First claim (Müller, 2020). Second claim [Müller, 2020]. Third (Müller, 2020)."
    citations = extract_citations(text)
    assert len(citations) == 1
    assert citations[0].kind == CitationKind.PARENTHETICAL


def test_results_in_text_order():
    text = "Early point [Weber, 2018]. Later point (Schmidt, 2017)."
    citations = extract_citations(text)
    assert [c.author for c in citations] == ["Weber", "Schmidt"]
    assert citations[0].span_start < citations[1].span_start


def test_malformed_fragments_are_ignored():
    assert extract_citations("In (2020) and (Müller) nothing is cited.") == []


def test_empty_text():
    assert extract_citations("") == []


def test_citation_spans_include_duplicates():
    text = "Trust matters (Müller, 2020, p. 12). Trust matters again (Müller, 2020, p. 12)."
    spans = citation_spans(text)
    assert len(spans) == 2
    assert [text[start:end] for start, end in spans] == ["(Müller, 2020, p. 12)"] * 2


def test_narrative_author_starts_at_word_boundary():
    assert extract_citations("Revenue at eBay (2020) reports growth.") == []
