"""--debug frequency table dump to stderr."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import TextIO

from firstchar.counter import FrequencyTables


def dump_tables(tables: FrequencyTables, *, file: TextIO | None = None) -> None:
    """Print each class table in first-seen order to *file* (default: stderr)."""
    if file is None:
        file = sys.stderr
    file.write("FrequencyTables\n")
    for cls, table in tables.items():
        _dump_table(cls.word, table, 1, file)


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_table(name: str, table: Mapping[str, int], depth: int, f: TextIO) -> None:
    total = sum(table.values())
    f.write(f"{_indent(depth)}{name} ({len(table)} distinct, {total} total)\n")
    for ch, count in table.items():
        f.write(f"{_indent(depth + 1)}{ch!r}: {count}\n")
