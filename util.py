"""util.py

Small, shared helpers used across the project.

This project intentionally uses the Python standard library only.
"""

from __future__ import annotations

import re

from models import TableReport


def bucket_index(key, capacity: int) -> int:
    """Map a key to a bucket slot: abs(hash(key)) mod capacity.

    Python ints are unbounded, so abs() never overflows and the result is
    always in range(capacity).
    """
    return abs(hash(key)) % capacity


def summarize(table) -> TableReport:
    """Build a TableReport from a HashTable's chains and counters."""
    lengths = [n for n in table.chain_lengths() if n is not None]
    size = len(table)
    return TableReport(
        size=size,
        capacity=table.capacity,
        allocated_buckets=len(lengths),
        empty_allocated_buckets=sum(1 for n in lengths if n == 0),
        longest_chain=max(lengths, default=0),
        load_factor=size / table.capacity,
        collisions=table.get_number_of_collisions(),
        probes=table.get_number_of_probes(),
    )


# -------------------------
# Input normalization helpers
# -------------------------

_INT = re.compile(r'^-?\d+$')


def parse_key(s: str):
    """Turn user/CSV text into a key.

    Integer-looking text becomes an int (stable hash, handy for engineering
    collisions); anything else is kept as a stripped string.
    """
    s = (s or '').strip()
    if _INT.match(s):
        return int(s)
    return s
