from typing import Iterable, Mapping

#        1  2  3  4  5   6   7   8+
SCORES = (1, 2, 4, 6, 9, 12, 16, 20)


def word_score(word: str) -> int:
    if not word:
        return 0
    return SCORES[min(len(word), len(SCORES)) - 1]


def total_score(result: Mapping[str, object]) -> int:
    return sum(word_score(w) for w in result)


def rank_words(words: Iterable[str]) -> list[str]:
    """Longest first, then alphabetical."""
    return sorted(words, key=lambda w: (-len(w), w))
