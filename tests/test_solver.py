import time

import pytest

from boggle_paths.score import total_score
from boggle_paths.solver import BoardSearcher, InvalidGrid, find_words, search, validate_grid
from boggle_paths.trie import Trie, load_trie
from boggle_paths.verify import check_result, paths_adjacent, paths_distinct, words_in_grid, words_legal


def _assert_valid(result, board, words):
    assert words_legal(result, words), "Words are not legal"
    assert words_in_grid(result, board), "Words do not fit on the board"
    assert paths_adjacent(result), "Path steps are not adjacent"
    assert paths_distinct(result), "Path reuses a cell"


def test_finds_horizontal_and_vertical_words_on_2x2_board():
    board = ["ab", "ba"]
    words = ["ab", "ba"]
    result = find_words(board, words)
    _assert_valid(result, board, words)
    assert result == {"ab": [(0, 0), (0, 1)], "ba": [(0, 1), (0, 0)]}
    assert total_score(result) == 4


def test_finds_diagonal_words():
    board = ["cat", "bta", "dek"]
    words = ["cat", "bet"]
    result = find_words(board, words)
    _assert_valid(result, board, words)
    assert result["cat"] == [(0, 0), (0, 1), (0, 2)]
    assert result["bet"] == [(1, 0), (2, 1), (1, 1)]


def test_overlapping_words():
    board = ["sos", "oat", "mom"]
    words = ["so", "sat", "mom"]
    result = find_words(board, words)
    _assert_valid(result, board, words)
    assert set(result) == {"so", "sat", "mom"}
    assert result["so"] == [(0, 0), (0, 1)]
    assert result["mom"] == [(2, 0), (2, 1), (2, 2)]


def test_words_requiring_backtracking():
    board = ["star", "urms", "tart", "stun"]
    words = ["start", "stun", "tart", "rum"]
    result = find_words(board, words)
    _assert_valid(result, board, words)
    assert result["start"] == [(0, 0), (0, 1), (0, 2), (1, 1), (2, 0)]
    assert result["stun"] == [(1, 3), (2, 3), (3, 2), (3, 3)]
    assert "tart" in result
    # No 'm' next to the 'u' of any 'ru' pair
    assert "rum" not in result


def test_basic_2x2_every_word():
    board = ["ea", "te"]
    words = ["eat", "tea", "ate"]
    result = find_words(board, words)
    _assert_valid(result, board, words)
    assert set(result) == set(words)


def test_all_directions_4x4():
    board = ["soup", "rope", "abnd", "nerd"]
    words = ["soup", "rope", "nerd", "den", "open", "pen"]
    result = find_words(board, words)
    _assert_valid(result, board, words)
    assert set(result) == set(words)


def test_embedded_words_8x8():
    board = [
        "connecti", "oleaders", "nnetwork", "programm",
        "algorith", "function", "variable", "constant",
    ]
    words = [
        "connection", "leadership", "network", "programming", "algorithm",
        "function", "variable", "constant", "binary", "framework",
    ]
    result = find_words(board, words)
    _assert_valid(result, board, words)
    assert {"network", "function", "variable", "constant"} <= set(result)
    assert "binary" not in result


def test_empty_dictionary():
    assert find_words(["abc", "def"], []) == {}


def test_unreachable_word_is_absent():
    result = find_words(["ab", "cd"], ["abcd", "adcb", "zzz"])
    assert "zzz" not in result
    assert "abcd" in result
    assert "adcb" in result


def test_no_revisit():
    """A word requiring revisiting a cell should not be found."""
    board = ["ab", "cd"]
    result = find_words(board, ["aba", "ab", "abc"])
    assert "aba" not in result
    assert "ab" in result
    assert "abc" in result


def test_single_cell_board():
    assert find_words(["a"], ["a", "aa"]) == {"a": [(0, 0)]}


def test_first_found_path_wins():
    # "aa" is reachable along several paths; the first in row-major,
    # direction order is kept.
    result = find_words(["aa", "aa"], ["aa"])
    assert result == {"aa": [(0, 0), (0, 1)]}


def test_list_of_lists_board():
    board = [["c", "a"], ["t", "s"]]
    result = find_words(board, ["cat", "cats", "act"])
    assert set(result) == {"cat", "cats", "act"}


def test_visited_cleared_after_search():
    searcher = BoardSearcher(["star", "urms", "tart", "stun"], Trie.build(["start", "stun", "tart"]))
    searcher.run()
    assert not searcher.visited.any()
    assert searcher.path == []
    assert searcher.stats.words_found == 3
    assert searcher.stats.pruned > 0


def test_membership_is_deterministic():
    board = ["soup", "rope", "abnd", "nerd"]
    words = ["soup", "rope", "nerd", "den", "open", "pen", "bone", "band"]
    first = find_words(board, words)
    second = find_words(board, list(reversed(words)))
    assert set(first) == set(second)


def test_search_reuses_trie():
    trie = Trie.build(["cat", "bet"])
    assert set(search(["cat", "bta", "dek"], trie)) == {"cat", "bet"}
    assert set(search(["bet", "xxx"], trie)) == {"bet"}


@pytest.mark.parametrize("board", [[], [""], ["ab", "c"], ["ab", "abc"]])
def test_invalid_grid(board):
    with pytest.raises(InvalidGrid):
        find_words(board, ["ab"])


def test_validate_grid_dimensions():
    assert validate_grid(["abc", "def"]) == (2, 3)


def test_performance_with_generated_dictionary(tmp_path):
    """Solve a 4x4 board with a decent-size dictionary under 500ms."""
    import itertools

    dict_file = tmp_path / "dict.txt"
    words = []
    letters = "abcdefghijklmnoprstue"
    for length in range(3, 5):
        for combo in itertools.combinations(letters, length):
            words.append("".join(combo))
            if len(words) > 5000:
                break
        if len(words) > 5000:
            break
    dict_file.write_text("\n".join(words))
    trie = load_trie(str(dict_file), min_length=3)

    board = ["tape", "inso", "edrl", "kghm"]

    start = time.perf_counter()
    result = search(board, trie)
    elapsed = time.perf_counter() - start

    assert elapsed < 0.5, f"Solver took {elapsed:.3f}s (expected <0.5s)"
    assert len(result) > 0
    assert check_result(result, board, trie) == []


def test_long_path_on_single_row():
    # Deeper than the default recursion limit
    board = ["abcdefghij" * 110]
    word = board[0][:1050]
    searcher = BoardSearcher(board, Trie.build([word]))
    result = searcher.run()
    assert result == {word: [(0, c) for c in range(1050)]}
    assert not searcher.visited.any()
    assert searcher.path == []
