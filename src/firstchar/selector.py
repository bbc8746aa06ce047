"""Selection of a single representative character from a frequency table."""

from __future__ import annotations

from collections.abc import Mapping

from firstchar.classes import RepetitionPolicy


def select(table: Mapping[str, int], policy: RepetitionPolicy) -> str | None:
    """Return the character *policy* picks from *table*, or None if none qualifies.

    Ties are broken by first-seen order, i.e. the table's iteration order.
    Least/most repeating only consider characters seen more than once, so the
    three policies never return the same character from one table.
    """
    match policy:
        case RepetitionPolicy.NON_REPEATING:
            return first_non_repeating(table)
        case RepetitionPolicy.LEAST_REPEATING:
            return first_least_repeating(table)
        case RepetitionPolicy.MOST_REPEATING:
            return first_most_repeating(table)
    raise ValueError(f"unknown repetition policy: {policy!r}")


def first_non_repeating(table: Mapping[str, int]) -> str | None:
    for ch, count in table.items():
        if count == 1:
            return ch
    return None


def first_least_repeating(table: Mapping[str, int]) -> str | None:
    repeated = _repeated(table)
    if not repeated:
        return None
    return _first_with_count(repeated, min(repeated.values()))


def first_most_repeating(table: Mapping[str, int]) -> str | None:
    repeated = _repeated(table)
    if not repeated:
        return None
    return _first_with_count(repeated, max(repeated.values()))


def _repeated(table: Mapping[str, int]) -> dict[str, int]:
    """Entries with a count other than 1, order preserved."""
    return {ch: count for ch, count in table.items() if count != 1}


def _first_with_count(table: Mapping[str, int], target: int) -> str:
    return next(ch for ch, count in table.items() if count == target)
