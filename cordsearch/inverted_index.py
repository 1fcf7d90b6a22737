"""Inverted index built from the forward index, and its in-memory barrels."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from typing import Union

from cordsearch.barrels import HashTable

logger = logging.getLogger(__name__)

INVERTED_INDEX_FILE = "inverted_index.txt"
BARREL_COUNT = 1000

PathLike = Union[str, "os.PathLike[str]"]


def _records(path: PathLike) -> Iterator[tuple[int, int, int, int]]:
    """Yield the four integers of every non-blank line of an index file."""
    with open(path, encoding="utf-8") as f:
        for line in f:
            fields = line.split()
            if not fields:
                continue
            if len(fields) != 4:
                raise ValueError(f"malformed line in {os.fspath(path)}: {line.rstrip()!r}")
            try:
                a, b, c, d = (int(field) for field in fields)
            except ValueError as exc:
                raise ValueError(
                    f"malformed line in {os.fspath(path)}: {line.rstrip()!r}"
                ) from exc
            yield a, b, c, d


def build_inverted_index(forward: PathLike, inverted: PathLike) -> None:
    """Write ``inverted`` from ``forward``, swapping document and word ids.

    Forward lines are ``docID wordID position_sum frequency``; inverted lines
    are ``wordID docID position_sum frequency``.
    """
    records = list(_records(forward))
    with open(inverted, "w", encoding="utf-8") as out:
        for doc_id, word_id, position_sum, frequency in records:
            out.write(f"{word_id} {doc_id} {position_sum} {frequency}\n")
    logger.info("Saved inverted index to file: %s", os.fspath(inverted))


def load_barrels(inverted: PathLike) -> HashTable:
    """Load an inverted index file into a hash table of word postings.

    A document's rank for a word grows with the word's positions and
    shrinks with the square of its frequency; lower ranks are better.
    """
    barrels = HashTable(BARREL_COUNT)
    for word_id, doc_id, position_sum, frequency in _records(inverted):
        word = barrels.get_word(word_id)
        if word is None:
            word = barrels.insert(word_id)
        word.insert_doc(doc_id, position_sum / (frequency * frequency))
    return barrels