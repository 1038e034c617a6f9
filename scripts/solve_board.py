"""
Command-line solver for Boggle Paths.

Usage:
    python -m scripts.solve_board <rows> [--dictionary PATH | --words W ...]

Examples:
    python -m scripts.solve_board ab,ba --words ab ba
    python -m scripts.solve_board star,urms,tart,stun --dictionary dictionary.txt
    python -m scripts.solve_board cat,bta,dek --words cat bet --json --verify

Prints every word found on the board with the cells that spell it (longest
words first), followed by the total score.
"""
import argparse
import json
import sys
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from boggle_paths.score import rank_words, total_score, word_score
from boggle_paths.settings import settings
from boggle_paths.solver import InvalidGrid, find_words
from boggle_paths.trie import load_words
from boggle_paths.verify import check_result


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Boggle Paths solver")
    parser.add_argument("board", help="Comma-separated board rows, e.g. 'cat,bta,dek'")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--dictionary", type=str, default=None,
                        help=f"Word list file (default: {settings.DICTIONARY_PATH})")
    source.add_argument("--words", nargs="+", default=None,
                        help="Words to look for, instead of a dictionary file")
    parser.add_argument("--min-length", type=int, default=settings.MIN_WORD_LENGTH,
                        help=f"Skip dictionary words shorter than this (default: {settings.MIN_WORD_LENGTH})")
    parser.add_argument("--json", action="store_true",
                        help="Print the word -> path mapping as JSON")
    parser.add_argument("--verify", action="store_true",
                        help="Check every path against the board and exit 1 on problems")
    args = parser.parse_args(argv)

    board = [row.strip().lower() for row in args.board.split(",")]

    if args.words is not None:
        words = [w.lower() for w in args.words]
    else:
        dict_path = Path(args.dictionary) if args.dictionary else settings.DICTIONARY_PATH
        if not dict_path.exists():
            print(f"Error: {dict_path} does not exist")
            return 2
        words = load_words(str(dict_path), args.min_length)

    try:
        found = find_words(board, words)
    except InvalidGrid as e:
        print(f"Error: invalid board: {e}")
        return 2

    if args.json:
        print(json.dumps({w: found[w] for w in rank_words(found)}))
    else:
        for word in rank_words(found):
            cells = " ".join(f"({r},{c})" for r, c in found[word])
            print(f"  {word:<16} {word_score(word):>3}  {cells}")
        print(f"{len(found)} words, score {total_score(found)}")

    if args.verify:
        problems = check_result(found, board, words)
        for problem in problems:
            print(f"Problem: {problem}")
        if problems:
            return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
