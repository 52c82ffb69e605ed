"""Candidate field names for unrecognized headers.

This module provides the SuggestionEngine class which proposes canonical
schema field names for headers the schema does not know, using exact name
and alias matches first and prefix/suffix matches second.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from rapidfuzz.distance import Levenshtein

from ...constants import Defaults
from ..entities.report import SimilarField
from ..entities.schema import Schema, SchemaField


def normalized_similarity(left: str, right: str) -> float:
    """One minus the Levenshtein distance over the longer string's length."""
    return Levenshtein.normalized_similarity(left, right)


def _affix_match(field_name: str, header: str) -> bool:
    return (
        field_name == header
        or header.endswith(field_name)
        or header.startswith(field_name)
    )


class SuggestionEngine:
    """Engine for suggesting schema fields for unknown headers.

    By default similarity scores are binary: an affix match scores 1.0 and
    everything else 0.0, so only exact, prefix and suffix candidates clear the
    threshold. ``fuzzy=True`` scores non-affix names with
    :func:`normalized_similarity` instead, letting near-miss spellings through
    when they clear ``threshold``.

    Example:
        >>> engine = SuggestionEngine(schema)
        >>> [s.name for s in engine.suggest("handedness_")]
        ['handedness']
    """

    def __init__(
        self,
        schema: Schema | Iterable[SchemaField],
        *,
        max_suggestions: int = Defaults.MAX_SUGGESTIONS,
        threshold: float = Defaults.SUGGESTION_THRESHOLD,
        fuzzy: bool = Defaults.FUZZY_SUGGESTIONS,
    ) -> None:
        """Initialize the suggestion engine.

        Args:
            schema: Fields that candidates are drawn from
            max_suggestions: Maximum number of candidates per header
            threshold: Scores must be strictly greater than this value
            fuzzy: Score non-affix names by edit distance instead of 0.0
        """
        super().__init__()
        self.schema = Schema.coerce(schema)
        self.max_suggestions = max_suggestions
        self.threshold = threshold
        self.fuzzy = fuzzy

    def suggest(self, header: str) -> list[SimilarField]:
        """Return up to ``max_suggestions`` candidates for one header.

        Args:
            header: Unrecognized column header

        Returns:
            Candidates sorted by descending similarity
        """
        exact = [
            SimilarField(name=f.name, similarity=1.0, aliases=f.aliases)
            for f in self.schema
            if f.name == header or header in f.aliases
        ]
        if exact:
            return exact

        scored = [
            SimilarField(
                name=f.name, similarity=self._score(f.name, header), aliases=f.aliases
            )
            for f in self.schema
        ]
        candidates = [
            item
            for item in scored
            if item.name != header and item.similarity > self.threshold
        ]
        candidates.sort(key=lambda item: item.similarity, reverse=True)
        return candidates[: self.max_suggestions]

    def suggest_all(
        self, headers: Sequence[str]
    ) -> Mapping[str, tuple[SimilarField, ...]]:
        """Suggest for each header, keeping only headers with candidates."""
        suggestions: dict[str, tuple[SimilarField, ...]] = {}
        for header in headers:
            found = self.suggest(header)
            if found:
                suggestions[header] = tuple(found)
        return suggestions

    def _score(self, field_name: str, header: str) -> float:
        if _affix_match(field_name, header):
            return 1.0
        if self.fuzzy:
            return normalized_similarity(field_name, header)
        return 0.0
