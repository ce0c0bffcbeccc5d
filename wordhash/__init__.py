"""Straight-line Boggle search, base-36 string hashing, MT19937 and an open-addressing hash table."""

__version__ = "0.1.0"

__all__ = ["mt19937", "strhash", "boggle", "probing", "hashtable"]