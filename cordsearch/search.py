"""Query evaluation and ranking of matching documents."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from cordsearch.barrels import HashTable
from cordsearch.lexicon import clean_token
from cordsearch.trie import Trie

T = TypeVar("T")

Posting = tuple[int, float]


def get_rank(item: Posting) -> float:
    """Ranking criterion of a (document id, rank) pair."""
    return item[1]


def quick_sort(items: list[T], key: Callable[[T], float]) -> list[T]:
    """Sort ``items`` in place, ascending by ``key``, and return them."""
    items.sort(key=key)
    return items


def rank(ranks: list[Posting], n: int) -> list[Posting]:
    """Order postings gathered for an ``n``-word query.

    Documents matching more of the query words come first; among those
    matching equally many, the lower summed rank comes first.
    """
    counts: dict[int, int] = {}
    totals: dict[int, float] = {}
    for doc_id, score in ranks:
        counts[doc_id] = counts.get(doc_id, 0) + 1
        totals[doc_id] = totals.get(doc_id, 0.0) + score
    merged = [(doc_id, totals[doc_id]) for doc_id in counts if counts[doc_id] <= n]
    merged.sort(key=lambda item: (-counts[item[0]], item[1]))
    return merged


def multi_search(query: str, lexicon: Trie, barrels: HashTable) -> list[Posting]:
    """Return (document id, rank) pairs for ``query``, best first."""
    postings: list[Posting] = []
    n = 0
    for raw in query.split():
        word = clean_token(raw)
        if not word:
            continue
        word_id = lexicon.search(word)
        if word_id is None:
            continue
        entry = barrels.get_word(word_id)
        if entry is None:
            continue
        postings.extend(entry.ranks)
        n += 1

    if n == 1:
        return quick_sort(postings, get_rank)
    return rank(postings, n)