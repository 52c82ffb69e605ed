from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ..entities.schema import DataStructure


@dataclass(frozen=True, slots=True)
class StructureMatch:
    short_name: str
    matching_fields: tuple[str, ...]
    match_count: int
    match_percentage: float


def rank_structures(
    headers: Sequence[str], structures: Iterable[DataStructure]
) -> list[StructureMatch]:
    """Rank data structures by how many of ``headers`` they define.

    Structures sharing no header are dropped. Ties keep the input order.
    """
    matches: list[StructureMatch] = []
    header_count = len(headers)
    for structure in structures:
        names = set(structure.field_names())
        matching = tuple(header for header in headers if header in names)
        if not matching:
            continue
        matches.append(
            StructureMatch(
                short_name=structure.short_name,
                matching_fields=matching,
                match_count=len(matching),
                match_percentage=len(matching) / header_count * 100,
            )
        )
    matches.sort(key=lambda match: match.match_count, reverse=True)
    return matches
