"""Test the classifier: tables, first-seen order, rejection, and empty content."""

from __future__ import annotations

import pytest

from conftest import assert_counts
from firstchar.classes import CharacterClass
from firstchar.counter import Classifier, classify
from firstchar.errors import ContentError, EmptyContentError


class TestTables:
    def test_example_content(self, tables):
        t = tables("ab!ba??$")
        assert_counts(t.letter, [("a", 2), ("b", 2)])
        assert_counts(t.punctuation, [("!", 1), ("?", 2)])
        assert_counts(t.symbol, [("$", 1)])

    def test_first_seen_order(self, tables):
        t = tables("zyx!@#~^|zx")
        assert list(t.letter) == ["z", "y", "x"]
        assert list(t.punctuation) == ["!", "@", "#"]
        assert list(t.symbol) == ["~", "^", "|"]

    def test_counts_positive_and_keys_disjoint(self, tables):
        t = tables("a!$" + "abc[]{}<>=^`|~-_" * 3)
        keys = [set(table) for _, table in t.items()]
        assert keys[0].isdisjoint(keys[1])
        assert keys[0].isdisjoint(keys[2])
        assert keys[1].isdisjoint(keys[2])
        for _, table in t.items():
            assert all(count >= 1 for count in table.values())

    def test_total_matches_length(self, tables):
        content = "hello,world;$$~"
        t = tables(content)
        assert sum(sum(table.values()) for _, table in t.items()) == len(content)

    def test_idempotent(self):
        content = b"q!w@e#r$t%y^u&i*o(p)"
        first = classify(content)
        second = classify(content)
        assert first == second
        assert list(first.punctuation) == list(second.punctuation)

    def test_table_lookup(self, tables):
        t = tables("a!$")
        assert t.table(CharacterClass.LETTER) is t.letter
        assert t.table(CharacterClass.PUNCTUATION) is t.punctuation
        assert t.table(CharacterClass.SYMBOL) is t.symbol


class TestRejection:
    @pytest.mark.parametrize("bad", [b" ", b"\n", b"\t", b"7", b"Q", b"\x00", b"\xe9", b"\x7f"])
    @pytest.mark.parametrize("where", [0, 2, 3])
    def test_rejected_anywhere(self, bad, where):
        content = b"a!$"
        content = content[:where] + bad + content[where:]
        with pytest.raises(ContentError) as exc_info:
            classify(content)
        assert not isinstance(exc_info.value, EmptyContentError)
        assert exc_info.value.position.offset == where

    def test_trailing_newline_rejected(self):
        with pytest.raises(ContentError, match="0x0a"):
            classify(b"a!$\n")

    def test_stops_at_first_offender(self):
        with pytest.raises(ContentError) as exc_info:
            classify(b"ab 1")
        assert exc_info.value.position.column == 3
        assert "0x20" in exc_info.value.message

    def test_position_and_filename(self):
        with pytest.raises(ContentError) as exc_info:
            Classifier(b"a!$X", "data.txt").classify()
        err = exc_info.value
        assert (err.position.line, err.position.column, err.position.offset) == (1, 4, 3)
        assert "data.txt:1:4" in err.format()


class TestEmptyContent:
    def test_empty(self):
        with pytest.raises(EmptyContentError, match="empty"):
            classify(b"")

    def test_empty_is_content_error(self):
        with pytest.raises(ContentError) as exc_info:
            classify(b"")
        assert exc_info.value.exit_code == 2

    def test_digits_and_whitespace_only(self):
        with pytest.raises(ContentError):
            classify(b"123 456\n")

    def test_no_punctuation(self):
        with pytest.raises(EmptyContentError, match="no punctuation"):
            classify(b"abc$$+")

    def test_no_letters(self):
        with pytest.raises(EmptyContentError, match="no letter"):
            classify(b"!!$")

    def test_only_letters_names_both(self):
        with pytest.raises(EmptyContentError) as exc_info:
            classify(b"abc")
        assert "no punctuation, symbol found" in exc_info.value.message
