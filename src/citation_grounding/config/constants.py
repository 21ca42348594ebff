"""Fixed vocabularies shared by the tokenizer and the validation heuristics."""

from __future__ import annotations

# English + German function words. Generated reports and their sources mix both.
STOPWORDS: frozenset[str] = frozenset(
    {
        # English
        "a", "about", "above", "after", "again", "against", "all", "also", "am", "an",
        "and", "any", "are", "as", "at", "be", "because", "been", "before", "being",
        "below", "between", "both", "but", "by", "can", "could", "did", "do", "does",
        "doing", "down", "during", "each", "few", "for", "from", "further", "had",
        "has", "have", "having", "he", "her", "here", "hers", "him", "his", "how",
        "however", "i", "if", "in", "into", "is", "it", "its", "itself", "just", "may",
        "me", "might", "more", "most", "much", "must", "my", "no", "nor", "not", "now",
        "of", "off", "on", "once", "only", "or", "other", "our", "ours", "out", "over",
        "own", "same", "shall", "she", "should", "so", "some", "such", "than", "that",
        "the", "their", "theirs", "them", "then", "there", "therefore", "these", "they",
        "this", "those", "through", "thus", "to", "too", "under", "until", "up", "upon",
        "very", "was", "we", "were", "what", "when", "where", "whether", "which",
        "while", "who", "whom", "why", "will", "with", "within", "without", "would",
        "you", "your", "yours",
        # German
        "aber", "alle", "allem", "allen", "aller", "alles", "als", "also", "am", "an",
        "auch", "auf", "aus", "bei", "beim", "bin", "bis", "bist", "da", "damit",
        "dann", "das", "dass", "dem", "den", "denn", "der", "des", "dessen", "die",
        "dies", "diese", "diesem", "diesen", "dieser", "dieses", "doch", "dort", "du",
        "durch", "ein", "eine", "einem", "einen", "einer", "eines", "er", "es", "etwa",
        "für", "gegen", "hat", "hatte", "hatten", "hier", "ich", "ihr", "ihre", "ihrem",
        "ihren", "ihrer", "im", "in", "ist", "jedoch", "kann", "kein", "keine", "können",
        "man", "mehr", "mit", "muss", "nach", "nicht", "noch", "nur", "ob", "oder",
        "ohne", "sehr", "sein", "seine", "seinem", "seinen", "seiner", "sich", "sie",
        "sind", "so", "sondern", "sowie", "über", "um", "und", "uns", "unter", "vom",
        "von", "vor", "war", "waren", "was", "weil", "welche", "welcher", "wenn",
        "werden", "wie", "wir", "wird", "wurde", "wurden", "zu", "zum", "zur",
        "zwischen",
    }
)

# Register markers used by the plausibility check (substring match, lower-case).
SCIENTIFIC_TERMS: tuple[str, ...] = (
    "study", "research", "analysis", "findings", "results", "data", "evidence",
    "significant", "hypothesis", "theory", "method", "participants", "sample",
    "correlation", "factor", "variable", "statistical",
    "studie", "forschung", "analyse", "ergebnisse", "daten", "hypothese",
    "theorie", "methode", "teilnehmer", "stichprobe", "korrelation", "signifikant",
)

# Verbs that introduce a narrative reference without a direct quote.
REPORTING_VERBS: tuple[str, ...] = (
    "argues", "states", "claims", "suggests", "proposes", "demonstrates",
    "shows", "finds", "notes", "reports", "argumentiert", "zeigt", "betont",
)

# Name particles allowed before a capitalised surname.
NAME_PARTICLES: tuple[str, ...] = ("van", "von", "de", "der", "den", "di", "du", "la", "le", "zu")

UMLAUT_TRANSLITERATION = str.maketrans({"ä": "ae", "ö": "oe", "ü": "ue", "ß": "ss"})
