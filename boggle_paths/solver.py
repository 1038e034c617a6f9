from __future__ import annotations

import logging
from typing import Iterable, Sequence

import numpy as np

from boggle_paths.metrics import SearchStats
from boggle_paths.trie import Trie, TrieNode

logger = logging.getLogger("boggle")

Grid = Sequence[Sequence[str]]
Path = list[tuple[int, int]]

# Row-major neighbour order; stored paths depend on it.
DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


class InvalidGrid(ValueError):
    pass


def validate_grid(grid: Grid) -> tuple[int, int]:
    """Return (rows, cols) for a rectangular, non-empty grid."""
    if not grid:
        raise InvalidGrid("grid has no rows")
    cols = len(grid[0])
    if cols == 0:
        raise InvalidGrid("grid has an empty first row")
    for r, row in enumerate(grid):
        if len(row) != cols:
            raise InvalidGrid(f"row {r} has length {len(row)}, expected {cols}")
    return len(grid), cols


class BoardSearcher:
    """One exhaustive search of a grid against a trie.

    ``visited`` marks exactly the cells of the path currently being explored,
    so it is all False whenever ``run()`` is not on the stack.
    """

    def __init__(self, grid: Grid, trie: Trie):
        self.grid = grid
        self.trie = trie
        self.rows, self.cols = validate_grid(grid)
        self.visited = np.zeros((self.rows, self.cols), dtype=bool)
        self.path: Path = []
        self.found: dict[str, Path] = {}
        self.stats = SearchStats()

    def run(self) -> dict[str, Path]:
        for r in range(self.rows):
            for c in range(self.cols):
                self._explore(r, c)
        self.stats.words_found = len(self.found)
        logger.debug("Searched %dx%d grid: %s", self.rows, self.cols, self.stats.as_dict())
        return self.found

    def _step(self, row: int, col: int, node: TrieNode) -> TrieNode | None:
        """Trie child reached by extending the path onto (row, col), if any."""
        if not (0 <= row < self.rows and 0 <= col < self.cols) or self.visited[row, col]:
            return None
        self.stats.cells_entered += 1
        child = node.children.get(self.grid[row][col])
        if child is None:
            self.stats.pruned += 1
        return child

    def _push(self, row: int, col: int, node: TrieNode, prefix: str) -> list:
        candidate = prefix + self.grid[row][col]
        self.visited[row, col] = True
        self.path.append((row, col))
        # First path found for a word is kept
        if node.is_word and candidate not in self.found:
            self.found[candidate] = list(self.path)
        return [row, col, node, candidate, 0]

    def _pop(self):
        row, col = self.path.pop()
        self.visited[row, col] = False

    def _explore(self, row: int, col: int):
        """Depth-first search from one origin cell.

        Frames are [row, col, node, word so far, next direction index]; a
        frame is pushed when its cell is marked and popped when it is
        unmarked, so the frame stack always mirrors ``self.path``.
        """
        child = self._step(row, col, self.trie.root)
        if child is None:
            return
        stack = [self._push(row, col, child, "")]
        try:
            while stack:
                frame = stack[-1]
                r, c, node, prefix, i = frame
                if i == len(DIRECTIONS) or not node.children:
                    stack.pop()
                    self._pop()
                    continue
                frame[4] = i + 1
                dr, dc = DIRECTIONS[i]
                nxt = self._step(r + dr, c + dc, node)
                if nxt is not None:
                    stack.append(self._push(r + dr, c + dc, nxt, prefix))
        finally:
            while stack:
                stack.pop()
                self._pop()


def search(grid: Grid, trie: Trie) -> dict[str, Path]:
    """Find every word of ``trie`` traceable on ``grid``, with its first path."""
    return BoardSearcher(grid, trie).run()


def find_words(grid: Grid, words: Iterable[str]) -> dict[str, Path]:
    """Build a trie from ``words`` and search ``grid`` with it.

    Raises InvalidGrid for an empty or ragged grid. An empty word list gives
    an empty mapping.
    """
    return search(grid, Trie.build(words))
