"""Checks that a word -> path mapping is a legal answer for a grid."""
from typing import Iterable, Mapping, Sequence

from boggle_paths.trie import Trie

Result = Mapping[str, Sequence[tuple[int, int]]]


def words_legal(result: Result, words: Iterable[str]) -> bool:
    allowed = words if isinstance(words, Trie) else set(words)
    return all(word in allowed for word in result)


def words_in_grid(result: Result, grid: Sequence[Sequence[str]]) -> bool:
    for word, path in result.items():
        if len(word) != len(path):
            return False
        for ch, (r, c) in zip(word, path):
            if not (0 <= r < len(grid) and 0 <= c < len(grid[r])) or grid[r][c] != ch:
                return False
    return True


def paths_adjacent(result: Result) -> bool:
    for path in result.values():
        for (r1, c1), (r2, c2) in zip(path, path[1:]):
            if abs(r1 - r2) > 1 or abs(c1 - c2) > 1 or (r1, c1) == (r2, c2):
                return False
    return True


def paths_distinct(result: Result) -> bool:
    return all(len(set(path)) == len(path) for path in result.values())


def check_result(result: Result, grid: Sequence[Sequence[str]], words: Iterable[str]) -> list[str]:
    """Return a list of problems, empty if the result is valid."""
    problems = []
    if not words_legal(result, words):
        problems.append("result contains words outside the dictionary")
    if not words_in_grid(result, grid):
        problems.append("a path does not spell its word on the grid")
    if not paths_adjacent(result):
        problems.append("a path has a step between non-adjacent cells")
    if not paths_distinct(result):
        problems.append("a path uses the same cell twice")
    return problems
