from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..entities.schema import Schema, SchemaField


@dataclass(frozen=True, slots=True)
class FieldNameCheck:
    ok: bool
    message: str = ""
    existing_field: str | None = None


def name_variants(name: str) -> set[str]:
    lowered = name.strip().lower()
    if not lowered:
        return set()
    variants = {lowered, f"{lowered}s", f"{lowered}es"}
    if lowered.endswith("ies") and len(lowered) > 3:
        variants.add(f"{lowered[:-3]}y")
    if lowered.endswith("y") and len(lowered) > 1:
        variants.add(f"{lowered[:-1]}ies")
    if lowered.endswith("es") and len(lowered) > 2:
        variants.add(lowered[:-2])
    if lowered.endswith("s") and len(lowered) > 1:
        variants.add(lowered[:-1])
    return variants


def check_new_field_name(
    name: str, schema: Schema | Iterable[SchemaField]
) -> FieldNameCheck:
    """Check a proposed new field name against existing schema names.

    A clash with an existing name, ignoring case and singular/plural
    endings, is returned as a failed check naming the existing field so the
    caller can offer it for selection instead.
    """
    proposed = name.strip()
    if not proposed:
        return FieldNameCheck(ok=False, message="Field name must not be empty.")
    variants = name_variants(proposed)
    for existing in Schema.coerce(schema):
        if existing.name.lower() in variants:
            return FieldNameCheck(
                ok=False,
                message=(
                    f'A field similar to "{proposed}" already exists: '
                    f'"{existing.name}". Select it instead of creating a new one.'
                ),
                existing_field=existing.name,
            )
    return FieldNameCheck(ok=True)
