"""Protocol for a single cascade level."""

from __future__ import annotations

from typing import Protocol

from citation_grounding.config.settings import Settings
from citation_grounding.embeddings.corpus_context import CorpusContext
from citation_grounding.models.domain import Citation, ValidationResult


class LevelCheck(Protocol):
    def __call__(
        self, citation: Citation, corpus: CorpusContext, settings: Settings
    ) -> ValidationResult | None:
        """Returns a candidate result, or None when the level does not apply or finds nothing."""
        ...
