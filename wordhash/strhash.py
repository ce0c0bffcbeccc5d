"""Polynomial base-36 string hash with five r-value multipliers."""

from __future__ import annotations

import sys
import time

from .mt19937 import MersenneTwister

DEBUG_R_VALUES = (983132572, 1468777056, 552714139, 984953261, 261934300)

_GROUP = 6
_NUM_GROUPS = 5
_MASK64 = (1 << 64) - 1


def letter_digit_to_number(letter: str) -> int:
    """Map 'a'-'z' to 0-25 and '0'-'9' to 26-35; anything else gives 0."""
    if "a" <= letter <= "z":
        return ord(letter) - ord("a")
    if "0" <= letter <= "9":
        return 26 + ord(letter) - ord("0")
    return 0


class StringHash:
    """Hash strings of up to 30 letters/digits, ignoring letter case."""

    def __init__(self, debug: bool = True) -> None:
        self.r_values = list(DEBUG_R_VALUES)
        if not debug:
            self.generate_r_values()

    def __call__(self, key: str) -> int:
        length = len(key)
        if length > _GROUP * _NUM_GROUPS:
            raise ValueError(
                f"key longer than {_GROUP * _NUM_GROUPS} characters: {length}"
            )
        w = [0] * _NUM_GROUPS
        for g in range((length + _GROUP - 1) // _GROUP):
            end = length - _GROUP * g
            chunk = key[max(0, end - _GROUP):end]
            value = 0
            for ch in chunk:
                if "A" <= ch <= "Z":
                    ch = ch.lower()
                value = value * 36 + letter_digit_to_number(ch)
            w[_NUM_GROUPS - 1 - g] = value
        total = sum(r * wi for r, wi in zip(self.r_values, w))
        return total & _MASK64

    def generate_r_values(self) -> None:
        """Replace the r-values with ones drawn from a clock-seeded generator."""
        generator = MersenneTwister(time.time_ns() & 0xFFFFFFFF)
        self.r_values = [generator() for _ in range(_NUM_GROUPS)]


def main(argv: list[str] | None = None) -> int:
    """Print the debug-mode hash of the first argument."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print("Please provide a string to hash")
        return 1
    key = argv[0]
    print(f"h({key})={StringHash(True)(key)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())