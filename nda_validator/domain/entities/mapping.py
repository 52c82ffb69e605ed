from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


def _empty_mapping() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class MappingOverlay:
    """User decisions layered over the observed headers.

    ``mapping`` renames an observed header to a canonical field name and
    ``ignored`` excludes headers from validity accounting and from export.
    Instances are immutable; every edit returns a new overlay.
    """

    mapping: Mapping[str, str] = field(default_factory=_empty_mapping)
    ignored: frozenset[str] = frozenset()

    @classmethod
    def build(
        cls,
        mapping: Mapping[str, str] | None = None,
        ignored: Iterable[str] | None = None,
    ) -> MappingOverlay:
        cleaned = {header: target for header, target in (mapping or {}).items() if target}
        return cls(mapping=MappingProxyType(cleaned), ignored=frozenset(ignored or ()))

    def resolve(self, header: str) -> str:
        return self.mapping.get(header) or header

    def with_mapping(self, header: str, target: str | None) -> MappingOverlay:
        updated = dict(self.mapping)
        if target:
            updated[header] = target
        else:
            updated.pop(header, None)
        return MappingOverlay(mapping=MappingProxyType(updated), ignored=self.ignored)

    def with_ignore_toggled(self, header: str) -> MappingOverlay:
        if header in self.ignored:
            ignored = self.ignored - {header}
        else:
            ignored = self.ignored | {header}
        return MappingOverlay(mapping=self.mapping, ignored=ignored)

    def is_ignored(self, header: str) -> bool:
        return header in self.ignored
