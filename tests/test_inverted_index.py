import pytest

from cordsearch.inverted_index import BARREL_COUNT, build_inverted_index, load_barrels


def test_build_swaps_document_and_word_ids(tmp_path):
    forward = tmp_path / "forward_index.txt"
    inverted = tmp_path / "inverted_index.txt"
    forward.write_text("1 5 3 2\n2 7 1 1\n", encoding="utf-8")
    build_inverted_index(forward, inverted)
    assert inverted.read_text(encoding="utf-8") == "5 1 3 2\n7 2 1 1\n"


def test_build_skips_blank_lines(tmp_path):
    forward = tmp_path / "f.txt"
    inverted = tmp_path / "i.txt"
    forward.write_text("1 5 3 2\n\n\n", encoding="utf-8")
    build_inverted_index(forward, inverted)
    assert inverted.read_text(encoding="utf-8").splitlines() == ["5 1 3 2"]


def test_build_missing_forward_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        build_inverted_index(tmp_path / "missing.txt", tmp_path / "out.txt")


def test_build_malformed_line_raises(tmp_path):
    forward = tmp_path / "f.txt"
    forward.write_text("1 5 3\n", encoding="utf-8")
    with pytest.raises(ValueError):
        build_inverted_index(forward, tmp_path / "i.txt")


def test_load_barrels_groups_postings_by_word(tmp_path):
    inverted = tmp_path / "i.txt"
    inverted.write_text("5 1 4 1\n5 2 3 1\n9 2 6 1\n", encoding="utf-8")
    barrels = load_barrels(inverted)
    assert len(barrels) == 2
    assert barrels.get_word(5).ranks == [(1, 4.0), (2, 3.0)]
    assert barrels.get_word(9).ranks == [(2, 6.0)]
    assert barrels.get_word(42) is None


def test_load_barrels_divides_by_squared_frequency(tmp_path):
    inverted = tmp_path / "i.txt"
    inverted.write_text("5 2 8 2\n", encoding="utf-8")
    barrels = load_barrels(inverted)
    assert barrels.get_word(5).ranks == [(2, 2.0)]


def test_load_barrels_handles_colliding_ids(tmp_path):
    inverted = tmp_path / "i.txt"
    inverted.write_text(f"3 1 1 1\n{3 + BARREL_COUNT} 2 2 1\n", encoding="utf-8")
    barrels = load_barrels(inverted)
    assert barrels.get_word(3).ranks == [(1, 1.0)]
    assert barrels.get_word(3 + BARREL_COUNT).ranks == [(2, 2.0)]


def test_round_trip_through_files(tmp_path):
    forward = tmp_path / "f.txt"
    inverted = tmp_path / "i.txt"
    forward.write_text("1 5 3 1\n2 7 1 1\n2 5 2 1\n", encoding="utf-8")
    build_inverted_index(forward, inverted)
    barrels = load_barrels(inverted)
    assert barrels.get_word(5).ranks == [(1, 3.0), (2, 2.0)]
    assert barrels.get_word(7).ranks == [(2, 1.0)]


def test_load_barrels_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_barrels(tmp_path / "nothing.txt")