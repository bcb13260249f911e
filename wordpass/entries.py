"""Editable list of word entries, as shown by the front ends.

The list never re-assembles a password by itself: after changing it, callers
pass :meth:`WordList.values` to :func:`wordpass.assemble_password`.
"""

import itertools
import logging

from wordpass import validate_word

logger = logging.getLogger(__name__)


class WordEntry:
    """One user-supplied word and its validation state."""

    __slots__ = ("id", "value", "is_valid", "errors")

    def __init__(self, entry_id: str, value: str = ""):
        self.id = entry_id
        self.value = ""
        self.is_valid = False
        self.errors: list = []
        if value:
            self.set_value(value)

    def set_value(self, value: str) -> None:
        result = validate_word(value)
        self.value = value
        self.is_valid = result["is_valid"]
        self.errors = result["errors"]

    def __repr__(self) -> str:
        return f"WordEntry(id={self.id!r}, is_valid={self.is_valid})"


class WordList:
    """Ordered word entries.  There is always at least one entry.

    A fresh entry is blank and carries no errors until its first update.
    """

    def __init__(self, values=()):
        self._ids = itertools.count(1)
        self._entries: list[WordEntry] = [
            WordEntry(self._next_id(), value) for value in values
        ]
        if not self._entries:
            self._entries.append(WordEntry(self._next_id()))

    def _next_id(self) -> str:
        return str(next(self._ids))

    def _find(self, entry_id: str) -> int:
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                return index
        raise KeyError(entry_id)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __getitem__(self, entry_id: str) -> WordEntry:
        return self._entries[self._find(entry_id)]

    def add(self, value: str = "") -> WordEntry:
        """Append a new entry and return it."""
        entry = WordEntry(self._next_id(), value)
        self._entries.append(entry)
        logger.debug("Added entry %s (%d total)", entry.id, len(self))
        return entry

    def remove(self, entry_id: str) -> bool:
        """Remove an entry.  Returns ``False`` if it is the last one left.

        Raises :class:`KeyError` for an unknown *entry_id*.
        """
        index = self._find(entry_id)
        if len(self._entries) == 1:
            return False
        del self._entries[index]
        logger.debug("Removed entry %s (%d total)", entry_id, len(self))
        return True

    def update(self, entry_id: str, value: str) -> WordEntry:
        """Replace the value of an entry and re-validate it."""
        entry = self[entry_id]
        entry.set_value(value)
        return entry

    def values(self) -> list[str]:
        """Return the non-blank values in order, valid or not."""
        return [entry.value for entry in self._entries if entry.value.strip()]

    @property
    def all_valid(self) -> bool:
        return all(entry.is_valid for entry in self._entries if entry.value.strip())
