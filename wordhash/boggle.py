"""Straight-line Boggle: find dictionary words along rows, columns and diagonals."""

from __future__ import annotations

import re
import sys
from pathlib import Path

from .mt19937 import MersenneTwister

# Scrabble tile frequencies for A-Z.
_FREQUENCIES = (9, 2, 2, 4, 12, 2, 3, 2, 9, 1, 1, 4, 2, 6, 8, 2, 1, 6, 4, 6, 4, 2, 2, 1, 2, 1)
_LETTERS = "".join(chr(ord("A") + i) * count for i, count in enumerate(_FREQUENCIES))

_DIRECTIONS = ((0, 1), (1, 0), (1, 1))


def gen_board(n: int, seed: int) -> list[list[str]]:
    """Build an n x n board of letters drawn with Scrabble frequencies."""
    rng = MersenneTwister(seed)
    return [[_LETTERS[rng() % len(_LETTERS)] for _ in range(n)] for _ in range(n)]


def format_board(board: list[list[str]]) -> str:
    """Render the board with each letter right-aligned in two columns."""
    return "".join("".join(f"{ch:>2}" for ch in row) + "\n" for row in board)


def parse_dict(path: str | Path) -> tuple[set[str], set[str]]:
    """Read whitespace-separated words; return (words, proper prefixes plus '')."""
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise ValueError("unable to open dictionary file") from exc
    words: set[str] = set()
    prefixes: set[str] = {""}
    for word in text.split():
        words.add(word)
        prefixes.update(word[:i] for i in range(1, len(word)))
    return words, prefixes


def boggle(
    dictionary: set[str], prefixes: set[str], board: list[list[str]]
) -> set[str]:
    """Return the longest dictionary words found on each straight path."""
    rows = len(board)
    cols = len(board[0]) if rows else 0
    result: set[str] = set()

    def search(word: str, r: int, c: int, dr: int, dc: int) -> bool:
        if r >= rows or c >= cols:
            return False
        word += board[r][c]
        in_dict = word in dictionary
        if not in_dict and word not in prefixes:
            return False
        continued = search(word, r + dr, c + dc, dr, dc)
        if not continued and in_dict:
            result.add(word)
        return continued or in_dict

    for r in range(rows):
        for c in range(rows):
            for dr, dc in _DIRECTIONS:
                search("", r, c, dr, dc)
    return result


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Generate a board, solve it against a dictionary file, print the words."""
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) < 3:
        print("Usage: boggle-driver <size> <seed> <dictionary file>")
        return 1
    size = _atoi(argv[0])
    seed = _atoi(argv[1])
    board = gen_board(max(size, 0), seed)
    print(format_board(board), end="")
    dictionary, prefixes = parse_dict(argv[2])
    found = boggle(dictionary, prefixes, board)
    print(f"Found {len(found)} words:")
    print(", ".join(sorted(found)))
    return 0


if __name__ == "__main__":
    sys.exit(main())