"""Tests for the editable word list."""

import pytest

from wordpass import WordError
from wordpass.entries import WordList


class TestWordList:
    def test_starts_with_one_blank_entry(self):
        words = WordList()
        assert len(words) == 1
        entry = next(iter(words))
        assert entry.value == ""
        assert entry.is_valid is False
        assert entry.errors == []

    def test_initial_values_are_validated(self):
        words = WordList(["tiger", "ab"])
        tiger, ab = list(words)
        assert tiger.is_valid is True
        assert ab.errors == [WordError.TOO_SHORT]

    def test_add_assigns_unique_ids(self):
        words = WordList()
        ids = {words.add().id for _ in range(5)} | {e.id for e in words}
        assert len(ids) == 6

    def test_ids_not_reused_after_remove(self):
        words = WordList(["tiger", "lily", "river"])
        assert words.remove("2") is True
        new = words.add("rose")
        assert new.id == "4"
        assert [e.id for e in words] == ["1", "3", "4"]

    def test_cannot_remove_last_entry(self):
        words = WordList()
        only = next(iter(words))
        assert words.remove(only.id) is False
        assert len(words) == 1

    def test_unknown_id(self):
        words = WordList()
        with pytest.raises(KeyError):
            words.remove("99")
        with pytest.raises(KeyError):
            words.update("99", "tiger")

    def test_update_revalidates(self):
        words = WordList()
        entry_id = next(iter(words)).id
        entry = words.update(entry_id, "ab")
        assert entry.errors == [WordError.TOO_SHORT]
        entry = words.update(entry_id, "tiger")
        assert entry.is_valid is True
        assert entry.errors == []
        assert words[entry_id].value == "tiger"

    def test_update_to_blank_is_too_short(self):
        words = WordList(["tiger"])
        entry = words.update("1", "")
        assert entry.errors == [WordError.TOO_SHORT]

    def test_values_skip_blank_keep_invalid(self):
        words = WordList(["tiger", "", "2024", "  "])
        assert words.values() == ["tiger", "2024"]

    def test_all_valid_ignores_blank_rows(self):
        words = WordList(["tiger"])
        words.add()
        assert words.all_valid is True
        words.add("admin")
        assert words.all_valid is False

    def test_all_valid_ignores_whitespace_rows(self):
        words = WordList(["tiger"])
        words.add("  ")
        assert words.values() == ["tiger"]
        assert words.all_valid is True
