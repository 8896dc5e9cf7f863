"""models.py

Dataclasses used by the hash table and its reporting:

- Entry: one key/value pair stored in a bucket chain.
- TableReport: a point-in-time summary of a table's shape and counters.

These are intentionally simple structures so the hashing logic lives in
hash_table.py and the derived statistics in util.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Entry:
    """A key/value pair in a chain. Frozen: the table swaps in a new Entry on update."""

    key: Any
    value: Any


@dataclass
class TableReport:
    """Summary of a HashTable, built by util.summarize()."""

    size: int
    capacity: int
    allocated_buckets: int          # buckets ever created (includes emptied ones)
    empty_allocated_buckets: int    # allocated but currently holding no entries
    longest_chain: int
    load_factor: float              # size / capacity
    collisions: int
    probes: int
