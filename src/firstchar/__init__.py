"""Character repetition analysis for letters, punctuation, and symbols."""

from __future__ import annotations

from collections.abc import Iterable

from firstchar.classes import CharacterClass, RepetitionPolicy

__version__ = "0.1.0"

__all__ = ["CharacterClass", "RepetitionPolicy", "analyze"]


def analyze(
    content: bytes,
    policy: RepetitionPolicy | str,
    categories: Iterable[CharacterClass] | None = None,
    filename: str = "<input>",
) -> dict[CharacterClass, str | None]:
    """Classify content and select one character per requested category."""
    from firstchar.counter import classify
    from firstchar.report import requested_in_order
    from firstchar.selector import select

    if isinstance(policy, str):
        policy = RepetitionPolicy.from_name(policy)
    tables = classify(content, filename)
    wanted = requested_in_order(categories if categories is not None else CharacterClass)
    return {cls: select(tables.table(cls), policy) for cls in wanted}
