import pytest

from cordsearch.barrels import HashTable
from cordsearch.search import get_rank, multi_search, quick_sort, rank
from cordsearch.trie import Trie


def test_get_rank_returns_second_element():
    assert get_rank((3, 0.5)) == 0.5


def test_quick_sort_orders_by_key():
    items = [(1, 0.5), (2, 0.9), (3, 0.1)]
    result = quick_sort(items, get_rank)
    assert [doc for doc, _ in result] == [3, 1, 2]
    assert result is items


def test_quick_sort_keeps_elements_and_is_non_decreasing():
    items = [(i, float((i * 7) % 11)) for i in range(20)]
    original = list(items)
    result = quick_sort(items, get_rank)
    assert sorted(result) == sorted(original)
    assert all(a[1] <= b[1] for a, b in zip(result, result[1:]))


def test_quick_sort_empty_and_single():
    assert quick_sort([], get_rank) == []
    assert quick_sort([(1, 2.0)], get_rank) == [(1, 2.0)]


def test_rank_prefers_documents_matching_more_words():
    result = rank([(1, 0.5), (2, 0.2), (1, 0.1)], 2)
    assert [doc for doc, _ in result] == [1, 2]
    assert result[0][1] == pytest.approx(0.6)
    assert result[1][1] == pytest.approx(0.2)


def test_rank_orders_equal_matches_by_summed_rank():
    result = rank([(1, 5.0), (2, 1.0), (3, 3.0)], 2)
    assert [doc for doc, _ in result] == [2, 3, 1]


def test_rank_empty():
    assert rank([], 0) == []


def _index():
    lexicon = Trie()
    lexicon.insert("virus", 1)
    lexicon.insert("vaccine", 2)
    lexicon.insert("orphan", 3)
    barrels = HashTable(1000)
    virus = barrels.insert(1)
    virus.insert_doc(1, 4.0)
    virus.insert_doc(2, 1.0)
    vaccine = barrels.insert(2)
    vaccine.insert_doc(1, 2.0)
    return lexicon, barrels


def test_single_word_sorted_by_rank():
    lexicon, barrels = _index()
    assert multi_search("virus", lexicon, barrels) == [(2, 1.0), (1, 4.0)]


def test_query_tokens_are_cleaned():
    lexicon, barrels = _index()
    assert multi_search("  VIRUS!! ", lexicon, barrels) == [(2, 1.0), (1, 4.0)]


def test_multi_word_puts_full_matches_first():
    lexicon, barrels = _index()
    result = multi_search("virus vaccine", lexicon, barrels)
    assert [doc for doc, _ in result] == [1, 2]
    assert result[0][1] == pytest.approx(6.0)


def test_unknown_words_give_no_results():
    lexicon, barrels = _index()
    assert multi_search("unknownword xy", lexicon, barrels) == []


def test_word_without_postings_is_ignored():
    lexicon, barrels = _index()
    assert multi_search("orphan", lexicon, barrels) == []
    assert multi_search("orphan virus", lexicon, barrels) == [(2, 1.0), (1, 4.0)]