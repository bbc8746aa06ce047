"""Report rendering: the 'File:' header and one result line per category."""

from __future__ import annotations

from collections.abc import Iterable

from firstchar.classes import CharacterClass, RepetitionPolicy
from firstchar.counter import FrequencyTables
from firstchar.selector import select

NONE_TEXT = "None"

# Line template; the selected character is spliced in before % substitution
_LINE_TEMPLATE = "{phrase} %(category)s: {value}"


def escape_placeholder(value: str) -> str:
    """Escape the % placeholder character so %-templating renders it verbatim."""
    return value.replace("%", "%%")


def render_header(path: str) -> str:
    return f"File: {path}"


def render_line(policy: RepetitionPolicy, category: CharacterClass, value: str | None) -> str:
    """Render e.g. 'First most repeating letter: b'."""
    shown = escape_placeholder(value) if value is not None else NONE_TEXT
    template = _LINE_TEMPLATE.format(phrase=policy.phrase, value=shown)
    return template % {"category": category.word}


def requested_in_order(categories: Iterable[CharacterClass]) -> list[CharacterClass]:
    """Deduplicate *categories* and put them in report order."""
    wanted = set(categories)
    return [cls for cls in CharacterClass if cls in wanted]


def render_report(
    path: str,
    tables: FrequencyTables,
    policy: RepetitionPolicy,
    categories: Iterable[CharacterClass],
) -> list[str]:
    """Render the full report: header, then letter, punctuation, symbol lines as requested."""
    lines = [render_header(path)]
    for cls in requested_in_order(categories):
        lines.append(render_line(policy, cls, select(tables.table(cls), policy)))
    return lines
