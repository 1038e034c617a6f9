from __future__ import annotations

import logging
from typing import Iterable

logger = logging.getLogger("boggle")


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class Trie:
    """Prefix dictionary over single-character cells.

    Built once, then only queried. Both queries walk child links from the
    root, so they cost O(len(query)).
    """

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    @classmethod
    def build(cls, words: Iterable[str]) -> Trie:
        trie = cls()
        for word in words:
            trie.insert(word)
        return trie

    def insert(self, word: str):
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_word:
            node.is_word = True
            self._size += 1

    def find(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def has_prefix(self, prefix: str) -> bool:
        return self.find(prefix) is not None

    def is_word(self, word: str) -> bool:
        node = self.find(word)
        return node is not None and node.is_word

    def __contains__(self, word: str) -> bool:
        return self.is_word(word)

    def __len__(self) -> int:
        return self._size


def load_words(path: str, min_length: int = 3) -> list[str]:
    """Read a newline-separated word list, lower-cased and filtered."""
    words = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().lower()
            if len(word) >= min_length and word.isalpha():
                words.append(word)
    return words


def load_trie(path: str, min_length: int = 3) -> Trie:
    trie = Trie.build(load_words(path, min_length))
    logger.info("Loaded %d words from %s (min_length=%d)", len(trie), path, min_length)
    return trie
