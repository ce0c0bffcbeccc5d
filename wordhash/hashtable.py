"""Open-addressing hash table with tombstone deletion and prime resizing."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, Optional, TextIO

from .probing import DoubleHashProber, LinearProber, Prober
from .strhash import StringHash

CAPACITIES = (
    11, 23, 47, 97, 197, 397, 797, 1597, 3203, 6421, 12853, 25717, 51437, 102877,
    205759, 411527, 823117, 1646237, 3292489, 6584983, 13169977, 26339969, 52679969,
    105359969, 210719881, 421439783, 842879579, 1685759167,
)


@dataclass
class _HashItem:
    key: Any
    value: Any
    deleted: bool = False


class HashTable:
    """Map keys to values using a pluggable probing strategy."""

    def __init__(
        self,
        resize_alpha: float = 0.4,
        prober: Prober | None = None,
        hasher: Callable[[Any], int] | None = None,
        key_equal: Callable[[Any, Any], bool] | None = None,
    ) -> None:
        self.resize_alpha = resize_alpha
        self._prober = prober if prober is not None else LinearProber()
        self._hash = hasher if hasher is not None else hash
        self._equal = key_equal if key_equal is not None else operator.eq
        self._m_index = 0
        self._num_occupied = 0
        self._total_probes = 0
        self._table: list[Optional[_HashItem]] = [None] * CAPACITIES[0]

    def __len__(self) -> int:
        return sum(1 for item in self._table if item is not None and not item.deleted)

    def __bool__(self) -> bool:
        return len(self) != 0

    def __contains__(self, key: Hashable) -> bool:
        return self.find(key) is not None

    def __getitem__(self, key: Hashable) -> Any:
        return self.at(key)

    def __setitem__(self, key: Hashable, value: Any) -> None:
        self.insert(key, value)

    def insert(self, key: Hashable, value: Any) -> None:
        """Add the pair, or update the value if the key is already present."""
        self._insert(key, value, skip_resize=False)

    def _insert(self, key: Hashable, value: Any, skip_resize: bool) -> None:
        if not skip_resize and self._num_occupied / len(self._table) >= self.resize_alpha:
            self._resize()
        idx = self._probe(key)
        if idx is None:
            raise RuntimeError("No available location to insert")
        item = self._table[idx]
        if item is None:
            self._table[idx] = _HashItem(key, value)
            self._num_occupied += 1
        elif self._equal(item.key, key):
            item.value = value
            item.deleted = False

    def remove(self, key: Hashable) -> None:
        """Mark the item with this key deleted; do nothing if it is absent."""
        idx = self._probe(key)
        if idx is not None:
            item = self._table[idx]
            if item is not None and not item.deleted:
                item.deleted = True

    def find(self, key: Hashable) -> Optional[tuple[Any, Any]]:
        """Return the (key, value) pair for ``key``, or None."""
        item = self._internal_find(key)
        return None if item is None else (item.key, item.value)

    def at(self, key: Hashable) -> Any:
        """Return the value for ``key``; raise KeyError if it is absent."""
        item = self._internal_find(key)
        if item is None:
            raise KeyError(key)
        return item.value

    def report_all(self, out: TextIO) -> None:
        """Write every occupied bucket, deleted ones included."""
        for i, item in enumerate(self._table):
            if item is not None:
                out.write(f"Bucket {i}: {item.key} {item.value}\n")

    def clear_total_probes(self) -> None:
        self._total_probes = 0

    def total_probes(self) -> int:
        return self._total_probes

    def _internal_find(self, key: Hashable) -> Optional[_HashItem]:
        idx = self._probe(key)
        return None if idx is None else self._table[idx]

    def _probe(self, key: Hashable) -> Optional[int]:
        capacity = CAPACITIES[self._m_index]
        self._prober.init(self._hash(key) % capacity, capacity, key)
        loc = self._prober.next()
        self._total_probes += 1
        while loc is not None:
            item = self._table[loc]
            if item is None:
                return loc
            if not item.deleted and self._equal(item.key, key):
                return loc
            loc = self._prober.next()
            self._total_probes += 1
        return None

    def _resize(self) -> None:
        if self._m_index + 1 >= len(CAPACITIES):
            raise RuntimeError("No more capacities available")
        self._m_index += 1
        old_table = self._table
        self._table = [None] * CAPACITIES[self._m_index]
        self._num_occupied = 0
        for item in old_table:
            if item is not None and not item.deleted:
                self._insert(item.key, item.value, skip_resize=True)


def main(argv: list[str] | None = None) -> int:
    """Exercise a double-hashed table and print what happens."""
    ht = HashTable(0.7, DoubleHashProber(StringHash()))
    for i in range(10):
        ht.insert(f"hi{i}", i)
    if ht.find("hi1") is not None:
        print("Found hi1")
        ht["hi1"] += 1
        print(f"Incremented hi1's value to: {ht['hi1']}")
    if ht.find("doesnotexist") is None:
        print("Did not find: doesnotexist")
    print(f"HT size: {len(ht)}")
    ht.remove("hi7")
    ht.remove("hi9")
    print(f"HT size: {len(ht)}")
    if ht.find("hi9") is not None:
        print("Found hi9")
    else:
        print("Did not find hi9")
    ht.insert("hi7", 17)
    print(f"size: {len(ht)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())