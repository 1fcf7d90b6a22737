"""Chained hash table holding each word's document postings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Word:
    """A word id and the (document id, rank) pairs it occurs with."""

    data: int
    ranks: list[tuple[int, float]] = field(default_factory=list)

    def insert_doc(self, doc_id: int, rank: float) -> None:
        """Record that the word appears in ``doc_id`` with ``rank``."""
        self.ranks.append((doc_id, rank))


class HashTable:
    """Fixed number of buckets keyed by ``key % table_size``."""

    def __init__(self, table_size: int) -> None:
        if table_size <= 0:
            raise ValueError("table size must be positive")
        self._buckets: list[list[Word]] = [[] for _ in range(table_size)]
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def insert(self, key: int) -> Word:
        """Append a new word for ``key`` and return it."""
        word = Word(key)
        self._buckets[key % len(self._buckets)].append(word)
        self._count += 1
        return word

    def get_word(self, key: int) -> Optional[Word]:
        """Return the first word stored for ``key``, or None."""
        bucket = self._buckets[key % len(self._buckets)]
        return next((word for word in bucket if word.data == key), None)