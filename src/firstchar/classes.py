"""Character classes, repetition policies, and byte classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CharacterClass(Enum):
    # Declaration order is report order
    LETTER = "letter"
    PUNCTUATION = "punctuation"
    SYMBOL = "symbol"

    @property
    def word(self) -> str:
        """Word used for this class in report lines and config files."""
        return self.value

    @property
    def flag(self) -> str:
        """Short CLI flag requesting this class."""
        return _FLAGS[self]

    @classmethod
    def from_word(cls, word: str) -> CharacterClass | None:
        """Return the class named by *word*, or None if unknown."""
        for member in cls:
            if member.value == word:
                return member
        return None


_FLAGS: dict[CharacterClass, str] = {
    CharacterClass.LETTER: "-L",
    CharacterClass.PUNCTUATION: "-P",
    CharacterClass.SYMBOL: "-S",
}


class RepetitionPolicy(Enum):
    NON_REPEATING = "non-repeating"
    LEAST_REPEATING = "least-repeating"
    MOST_REPEATING = "most-repeating"

    @property
    def phrase(self) -> str:
        """Leading phrase of a report line, e.g. 'First most repeating'."""
        return _PHRASES[self]

    @classmethod
    def from_name(cls, name: str) -> RepetitionPolicy:
        """Resolve a CLI format name; raise FormatArgumentError if unknown."""
        from firstchar.errors import FormatArgumentError

        for member in cls:
            if member.value == name:
                return member
        choices = ", ".join(m.value for m in cls)
        if not name:
            raise FormatArgumentError(f"missing format (expected one of: {choices})")
        raise FormatArgumentError(f"unknown format {name!r} (expected one of: {choices})")


_PHRASES: dict[RepetitionPolicy, str] = {
    RepetitionPolicy.NON_REPEATING: "First non-repeating",
    RepetitionPolicy.LEAST_REPEATING: "First least repeating",
    RepetitionPolicy.MOST_REPEATING: "First most repeating",
}


@dataclass(frozen=True, slots=True)
class Position:
    """Content position, 1-based line and column, 0-based byte offset."""

    line: int
    column: int
    offset: int


# Accepted byte ranges (inclusive): ! .. /   : .. @   [ .. ~
_ACCEPTED_RANGES = (
    (ord("!"), ord("/")),
    (ord(":"), ord("@")),
    (ord("["), ord("~")),
)

# Symbols: $ + < = > ^ ` | ~
_SYMBOL_BYTES = frozenset(b"$+<=>^`|~")


def is_accepted_byte(b: int) -> bool:
    """Return True if byte value b lies in one of the accepted ranges."""
    return any(lo <= b <= hi for lo, hi in _ACCEPTED_RANGES)


def classify_byte(b: int) -> CharacterClass | None:
    """Return the class of byte value b, or None if the byte is rejected."""
    if not is_accepted_byte(b):
        return None
    if ord("a") <= b <= ord("z"):
        return CharacterClass.LETTER
    if b in _SYMBOL_BYTES:
        return CharacterClass.SYMBOL
    return CharacterClass.PUNCTUATION
