"""Classifier and counter: splits file content into per-class frequency tables."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from firstchar.classes import CharacterClass, Position, classify_byte
from firstchar.errors import ContentError, EmptyContentError, display_byte

# Character -> occurrence count, in first-seen order
FrequencyTable = dict[str, int]


@dataclass(frozen=True, slots=True)
class FrequencyTables:
    """The three frequency tables built from one file."""

    letter: FrequencyTable = field(default_factory=dict)
    punctuation: FrequencyTable = field(default_factory=dict)
    symbol: FrequencyTable = field(default_factory=dict)

    def table(self, cls: CharacterClass) -> FrequencyTable:
        """Return the table for *cls*."""
        match cls:
            case CharacterClass.LETTER:
                return self.letter
            case CharacterClass.PUNCTUATION:
                return self.punctuation
            case CharacterClass.SYMBOL:
                return self.symbol
        raise ValueError(f"unknown character class: {cls!r}")

    def items(self) -> Iterator[tuple[CharacterClass, FrequencyTable]]:
        """Yield (class, table) pairs in report order."""
        for cls in CharacterClass:
            yield cls, self.table(cls)

    def empty_classes(self) -> list[CharacterClass]:
        return [cls for cls, table in self.items() if not table]


class Classifier:
    """Scan content left to right, counting each accepted byte in its class table."""

    def __init__(self, content: bytes, filename: str = "<input>") -> None:
        self._content = content
        self._filename = filename
        self._pos = 0
        self._tables: dict[CharacterClass, FrequencyTable] = {cls: {} for cls in CharacterClass}

    def classify(self) -> FrequencyTables:
        """Classify the full content and return the frequency tables."""
        if not self._content:
            raise EmptyContentError("file is empty", filename=self._filename)

        while self._pos < len(self._content):
            b = self._content[self._pos]
            cls = classify_byte(b)
            if cls is None:
                raise self._error(f"invalid character '{display_byte(b)}' (byte 0x{b:02x})")
            table = self._tables[cls]
            ch = chr(b)
            table[ch] = table.get(ch, 0) + 1
            self._pos += 1

        tables = FrequencyTables(
            letter=self._tables[CharacterClass.LETTER],
            punctuation=self._tables[CharacterClass.PUNCTUATION],
            symbol=self._tables[CharacterClass.SYMBOL],
        )

        missing = tables.empty_classes()
        if missing:
            words = ", ".join(cls.word for cls in missing)
            raise EmptyContentError(
                f"file must contain at least one letter, punctuation and symbol (no {words} found)",
                filename=self._filename,
            )
        return tables

    def _error(self, message: str) -> ContentError:
        # Newlines are rejected, so every accepted byte sits on line 1
        pos = Position(1, self._pos + 1, self._pos)
        return ContentError(message, pos, self._content, self._filename)


def classify(content: bytes, filename: str = "<input>") -> FrequencyTables:
    """Convenience function: classify content and return its frequency tables."""
    return Classifier(content, filename).classify()
