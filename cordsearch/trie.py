"""Prefix tree mapping lexicon words to their identifiers."""

from __future__ import annotations

from typing import Optional

CHARSET_SIZE = 37
"""26 letters, 10 digits and one slot shared by dash and space."""

_SEPARATOR = CHARSET_SIZE - 1
_DIGIT_OFFSET = 26
_SUGGESTION_LIMIT = 5


def char_index(c: str) -> int:
    """Return the child slot used for character ``c``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if c in "- ":
        return _SEPARATOR
    if "0" <= c <= "9":
        return ord(c) - ord("0") + _DIGIT_OFFSET
    if "a" <= c <= "z":
        return ord(c) - ord("a")
    raise ValueError(f"character {c!r} cannot be stored in the trie")


def _slot_char(index: int) -> str:
    if index == _SEPARATOR:
        return "-"
    if index >= _DIGIT_OFFSET:
        return chr(ord("0") + index - _DIGIT_OFFSET)
    return chr(ord("a") + index)


class _Node:
    __slots__ = ("children", "word_id")

    def __init__(self) -> None:
        self.children: dict[int, _Node] = {}
        self.word_id: Optional[int] = None


class Trie:
    """A trie of lower-case words, digits and dashes, each carrying an id."""

    def __init__(self) -> None:
        self._root = _Node()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _walk(self, text: str) -> Optional[_Node]:
        node = self._root
        for c in text:
            node = node.children.get(char_index(c))
            if node is None:
                return None
        return node

    def insert(self, word: str, word_id: int) -> None:
        """Store ``word`` with identifier ``word_id``."""
        node = self._root
        for c in word:
            node = node.children.setdefault(char_index(c), _Node())
        node.word_id = word_id
        self._size += 1

    def search(self, word: str) -> Optional[int]:
        """Return the id of ``word``, or None if it is not a stored word."""
        node = self._walk(word)
        return None if node is None else node.word_id

    def starts_with(self, prefix: str) -> bool:
        """Tell whether any stored path begins with ``prefix``."""
        return self._walk(prefix) is not None

    def _collect(self, node: _Node, prefix: str, found: list[str]) -> None:
        if len(found) > _SUGGESTION_LIMIT:
            return
        if node.word_id is not None:
            found.append(prefix)
        for index in sorted(node.children):
            self._collect(node.children[index], prefix + _slot_char(index), found)

    def suggestions(self, query: str) -> list[str]:
        """Return a handful of stored words that complete ``query``."""
        node = self._walk(query)
        if node is None:
            return []
        if not node.children:
            return [query]
        found: list[str] = []
        self._collect(node, query, found)
        return found