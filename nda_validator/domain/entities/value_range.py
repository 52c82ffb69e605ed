"""Parsed value-range descriptors.

NDA data dictionaries describe allowed values with a small textual grammar:

- ``"M;F"`` enumerates literal tokens,
- ``"0::120"`` is a closed numeric interval, optionally combined with special
  literal values (``"0::9999; -777; -999"``),
- anything else (free text, a single token) carries no machine-checkable
  constraint.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import math

from ...constants import RangeSyntax


@dataclass(frozen=True, slots=True)
class EnumRange:
    values: tuple[str, ...]
    original: str

    def contains(self, value: str) -> bool:
        return value.strip() in self.values

    def token_set(self) -> frozenset[str]:
        return frozenset(self.values)


@dataclass(frozen=True, slots=True)
class Interval:
    minimum: float
    maximum: float

    def contains(self, number: float) -> bool:
        return self.minimum <= number <= self.maximum


@dataclass(frozen=True, slots=True)
class IntervalRange:
    intervals: tuple[Interval, ...]
    special_values: tuple[str, ...]
    original: str

    def contains(self, value: str) -> bool:
        text = value.strip()
        if text in self.special_values:
            return True
        if not text:
            return False
        number = _to_number(text)
        if number is None:
            return False
        if any(_to_number(special) == number for special in self.special_values):
            return True
        return any(interval.contains(number) for interval in self.intervals)


@dataclass(frozen=True, slots=True)
class UnconstrainedRange:
    original: str

    def contains(self, value: str) -> bool:
        return True


ValueRange = EnumRange | IntervalRange | UnconstrainedRange


@lru_cache(maxsize=1024)
def parse_value_range(descriptor: str | None) -> ValueRange | None:
    if descriptor is None or not descriptor.strip():
        return None
    parts = [part.strip() for part in descriptor.split(RangeSyntax.VALUE_SEPARATOR)]
    if any(RangeSyntax.INTERVAL_SEPARATOR in part for part in parts):
        intervals: list[Interval] = []
        specials: list[str] = []
        for part in parts:
            if RangeSyntax.INTERVAL_SEPARATOR not in part:
                specials.append(part)
                continue
            interval = _parse_interval(part)
            if interval is not None:
                intervals.append(interval)
        if not intervals:
            return UnconstrainedRange(original=descriptor)
        return IntervalRange(
            intervals=tuple(intervals),
            special_values=tuple(specials),
            original=descriptor,
        )
    if RangeSyntax.VALUE_SEPARATOR in descriptor:
        return EnumRange(values=tuple(parts), original=descriptor)
    return UnconstrainedRange(original=descriptor)


def is_value_in_range(value: str | None, value_range: ValueRange | None) -> bool:
    if value_range is None:
        return True
    return value_range.contains(value or "")


def _parse_interval(text: str) -> Interval | None:
    low_text, _, high_text = text.partition(RangeSyntax.INTERVAL_SEPARATOR)
    low = _to_number(low_text)
    high = _to_number(high_text)
    if low is None or high is None:
        return None
    return Interval(minimum=min(low, high), maximum=max(low, high))


def _to_number(text: str) -> float | None:
    """Parse a plain decimal number; None for anything else.

    ``float`` also accepts digit separators, non-ASCII digits and the
    words ``inf`` and ``nan``, none of which count as numbers here.
    """
    text = text.strip()
    if not text.isascii() or "_" in text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number
