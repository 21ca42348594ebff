"""Central configuration via Pydantic Settings. All values driven by env vars."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Level 1: exact / fuzzy quote
    exact_min_quote_length: int = 10
    fuzzy_match_threshold: float = 0.85
    fuzzy_accept_threshold: float = 0.90
    fuzzy_window_ratio: float = 1.2

    # Level 2: author-year
    author_year_accept_threshold: float = 0.70
    author_year_base_confidence: float = 0.70
    author_year_ratio_weight: float = 0.30
    author_min_match_ratio: float = 0.5
    author_only_match_ratio: float = 0.8
    author_only_confidence: float = 0.60

    # Level 3: filename
    filename_author_year_confidence: float = 0.85
    filename_author_confidence: float = 0.65
    filename_accept_threshold: float = 0.65

    # Level 4: topical
    topical_min_quote_length: int = 20
    topical_max_keywords: int = 10
    topical_min_overlap: float = 0.4
    topical_accept_overlap: float = 0.6
    topical_accept_similarity: float = 0.6
    topical_overlap_weight: float = 0.8
    topical_min_sentence_length: int = 30
    max_sentences_per_document: int = 100

    # Quotes matched below this similarity are flagged as possible paraphrases
    paraphrase_similarity_ceiling: float = 0.90

    # Level 5: plausibility
    plausibility_scientific_weight: float = 0.20
    plausibility_year_weight: float = 0.15
    plausibility_author_weight: float = 0.10
    plausibility_length_weight: float = 0.10
    plausibility_overlap_weight: float = 0.30
    plausibility_min_overlap: float = 0.3
    plausibility_year_tolerance: int = 5
    plausibility_min_quote_length: int = 20
    plausibility_max_quote_length: int = 500
    plausibility_confidence_cap: float = 0.75
    plausibility_accept_threshold: float = 0.5

    # Aggregate scoring
    valid_confidence_threshold: float = 0.70
    score_rate_weight: float = 0.8
    score_suspicious_weight: float = 0.2
    volume_bonus_enabled: bool = True
    volume_bonus_large: float = 5.0
    volume_bonus_large_min: int = 20
    volume_bonus_medium: float = 2.0
    volume_bonus_medium_min: int = 10

    # Fix suggestions
    fix_similarity_threshold: float = 0.6
    fix_min_sentence_length: int = 20

    # Embeddings: weight terms by IDF over the whole corpus instead of uniformly
    corpus_idf_weighting: bool = False

    # Fact-claim checking
    check_fact_claims: bool = True
    claim_verify_threshold: float = 0.7

    # Execution
    max_workers: int | None = None
    request_timeout_s: float = 30.0

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    model_config = {"env_file": ".env", "env_prefix": "GROUNDING_"}
