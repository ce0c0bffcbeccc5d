"""Probe sequences for open-addressing hash tables."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable
from typing import Optional

from .strhash import StringHash

DOUBLE_HASH_MOD_VALUES = (
    7, 19, 43, 89, 193, 389, 787, 1583, 3191, 6397, 12841, 25703, 51431, 102871,
    205721, 411503, 823051, 1646221, 3292463, 6584957, 13169963, 26339921, 52679927,
    105359939, 210719881, 421439749, 842879563, 1685759113,
)


class Prober(ABC):
    """Base prober: remembers the start location, table size and probe count."""

    def __init__(self) -> None:
        self.start = 0
        self.m = 0
        self.num_probes = 0

    def init(self, start: int, m: int, key: Hashable) -> None:
        """Begin a new probe sequence at ``start`` in a table of size ``m``."""
        self.start = start
        self.m = m
        self.num_probes = 0

    @abstractmethod
    def next(self) -> Optional[int]:
        """Return the next location to try, or None once every slot was tried."""


class LinearProber(Prober):
    """Probe consecutive slots: start, start+1, start+2, ..."""

    def next(self) -> Optional[int]:
        if self.num_probes == self.m:
            return None
        loc = (self.start + self.num_probes) % self.m
        self.num_probes += 1
        return loc


def _modulus_for_table_size(table_size: int) -> int:
    """Largest double-hash modulus below the table size (or the smallest one)."""
    modulus = DOUBLE_HASH_MOD_VALUES[0]
    for value in DOUBLE_HASH_MOD_VALUES:
        if value >= table_size:
            break
        modulus = value
    return modulus


class DoubleHashProber(Prober):
    """Probe with a step size derived from a second hash of the key."""

    def __init__(self, h2: Callable[[Hashable], int] | None = None) -> None:
        super().__init__()
        self.h2 = h2 if h2 is not None else StringHash()
        self.dhstep = 0

    def init(self, start: int, m: int, key: Hashable) -> None:
        super().init(start, m, key)
        modulus = _modulus_for_table_size(m)
        self.dhstep = modulus - self.h2(key) % modulus

    def next(self) -> Optional[int]:
        if self.num_probes == self.m:
            return None
        loc = (self.start + self.num_probes * self.dhstep) % self.m
        self.num_probes += 1
        return loc