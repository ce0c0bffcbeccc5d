# wordhash

A small collection of word and hashing utilities:

- **Boggle solver** (`wordhash.boggle`): builds a random square board using
  Scrabble letter frequencies. It then finds dictionary words that run in a
  straight line to the right, downwards, or along the down-right diagonal.
- **String hash** (`wordhash.strhash`): splits strings of letters and digits
  into base-36 groups of six characters, working from the end of the string,
  and combines the groups with five weights. Letter case is ignored. The
  default weights are fixed, so the results can be repeated.
- **Probers** (`wordhash.probing`): `LinearProber` and `DoubleHashProber`
  give the probe sequences for open addressing.
- **Hash table** (`wordhash.hashtable`): an open-addressing map that uses a
  pluggable prober. It marks removed entries as deleted and grows through a
  fixed list of prime capacities.
- **Mersenne Twister** (`wordhash.mt19937`): `MersenneTwister`, a 32-bit
  MT19937 generator. Each call returns the next 32-bit value.

No dependencies outside the standard library are needed.

## Installation

```
pip install .
```

## Command line

Generate a board and solve it:

```
wordhash-boggle 5 42 words.txt
```

The arguments are:

- the board size;
- the random seed;
- a dictionary file of whitespace-separated words.

The command prints the board. It then prints `Found N words:` and the words
in sorted order, separated by commas. If fewer than three arguments are
given, it prints a usage line and exits with status 1.

Hash a string with the fixed weights:

```
wordhash-strhash abc
```

This prints `h(abc)=9953503400`.

Run a short hash table demonstration:

```
wordhash-ht-demo
```

The demonstration inserts, looks up, updates and removes a few keys, and
prints the results.

## Library use

```python
from wordhash.boggle import gen_board, format_board, parse_dict, boggle
from wordhash.strhash import StringHash
from wordhash.probing import DoubleHashProber
from wordhash.hashtable import HashTable

board = gen_board(4, 7)
print(format_board(board), end="")
words, prefixes = parse_dict("words.txt")
print(sorted(boggle(words, prefixes, board)))

h = StringHash(debug=True)
assert h("abc") == 9953503400

table = HashTable(0.7, DoubleHashProber(StringHash(debug=True)))
table.insert("hi1", 1)
table["hi1"] += 1
print(table.at("hi1"), len(table), "hi1" in table)
table.remove("hi1")
```

### Boggle

- `parse_dict` returns two sets: the words, and every proper prefix of each
  word together with the empty string. It raises `ValueError` if the file
  cannot be read.
- On each straight path, `boggle` keeps the longest dictionary word it can
  reach. It does not also add the shorter words that are prefixes of that
  word.

### String hash

- `StringHash(debug=False)` draws new weights from a `MersenneTwister` that
  is seeded from the clock.
- Keys longer than 30 characters raise `ValueError`.
- Characters other than letters and digits count as 0.

### Hash table

- The constructor takes these arguments, all optional:
  - `resize_alpha`, 0.4 by default;
  - `prober`, a `LinearProber` by default;
  - `hasher`, the built-in `hash` by default;
  - `key_equal`, `==` by default.
- The table resizes before an insert when the share of occupied slots,
  deleted slots included, reaches `resize_alpha`.
- `at` and indexing raise `KeyError` when the key is missing.
- `find` returns the `(key, value)` pair, or `None` if the key is absent.
- `report_all(out)` writes every occupied bucket, including deleted ones,
  to a text stream.
- `total_probes()` and `clear_total_probes()` read and reset the probe
  counter.
- Inserting raises `RuntimeError` in two cases: when no slot can be found,
  and when the table would need to grow past its largest capacity.

## Limitations

- The Boggle search only follows straight lines in three directions: right,
  down and down-right. It does not follow paths that turn, and it does not
  read any line backwards.
- The string hash supports keys of at most 30 characters.

## Tests

```
pip install .[test]
pytest
```