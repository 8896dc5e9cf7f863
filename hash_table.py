# Instrumented hash table (separate chaining, fixed capacity).
# Counters: collisions = puts that landed in an already-allocated bucket,
#           probes     = key comparisons made while scanning a chain during put.
# Note: a "collision" here is any put into an existing bucket, including updates
# of a key that is already present. It is not a distinct-key collision count.

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Tuple

from models import Entry
from util import bucket_index

logger = logging.getLogger(__name__)

CAPACITY = 997  # prime, never resized


def _same_key(stored, key) -> bool:
    # Identity first, then equality: float("nan") is not == itself.
    return stored is key or stored == key


def _pairs(source) -> Iterable[Tuple[Any, Any]]:
    """Yield (key, value) pairs from a mapping or an iterable of pairs."""
    items = getattr(source, 'items', None)
    if callable(items):
        return items()
    return source


class HashTable:
    def __init__(self, mapping=None, capacity: int = CAPACITY):
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity <= 0:
            raise ValueError(f'capacity must be a positive int, got {capacity!r}')
        # None until the first put into that slot; kept (possibly empty) afterwards.
        self._buckets: List[Optional[List[Entry]]] = [None] * capacity
        self._collisions = 0
        self._probes = 0
        if mapping is not None:
            self.put_all(mapping)

    def __len__(self):
        return sum(len(b) for b in self._buckets if b is not None)

    def __repr__(self):
        return (f'{type(self).__name__}(size={len(self)}, capacity={self.capacity}, '
                f'collisions={self._collisions}, probes={self._probes})')

    @property
    def capacity(self) -> int:
        return len(self._buckets)

    def _index(self, key) -> int:
        return bucket_index(key, len(self._buckets))

    @staticmethod
    def _require_key(key) -> None:
        if key is None:
            raise ValueError('key must not be None')

    def get_number_of_collisions(self) -> int:
        return self._collisions

    def get_number_of_probes(self) -> int:
        return self._probes

    def put(self, key, value):
        """Insert or update `key`. Returns the previous value, or None if the key was new."""
        self._require_key(key)
        i = self._index(key)
        bucket = self._buckets[i]
        if bucket is None:
            bucket = self._buckets[i] = []
            logger.debug('allocated bucket %d for key %r', i, key)
        else:
            self._collisions += 1
            logger.debug('collision in bucket %d (chain length %d) for key %r', i, len(bucket), key)

        for j, entry in enumerate(bucket):
            self._probes += 1
            if _same_key(entry.key, key):
                bucket[j] = Entry(entry.key, value)
                return entry.value
        bucket.append(Entry(key, value))
        return None

    def get(self, key):
        self._require_key(key)
        bucket = self._buckets[self._index(key)]
        if bucket is None:
            return None
        for entry in bucket:
            if _same_key(entry.key, key):
                return entry.value
        return None

    def remove(self, key):
        """Remove `key` and return its value; None if absent (or if key is None)."""
        if key is None:
            return None
        bucket = self._buckets[self._index(key)]
        if bucket is None:
            return None
        for j, entry in enumerate(bucket):
            if _same_key(entry.key, key):
                del bucket[j]  # keys are unique within a chain
                return entry.value
        return None

    def put_all(self, mapping) -> None:
        for key, value in _pairs(mapping):
            self.put(key, value)

    def entries(self) -> List[Tuple[Any, Any]]:
        """Snapshot of all (key, value) pairs. Order is unspecified."""
        return [(e.key, e.value) for b in self._buckets if b is not None for e in b]

    def clear(self) -> None:
        # Buckets stay allocated, so later puts into them still count as collisions.
        for bucket in self._buckets:
            if bucket is not None:
                bucket.clear()

    # Helpers for inspection/debug (no counter side effects; entries are frozen)
    def first_n_buckets(self, n=10):
        return [None if b is None else list(b) for b in self._buckets[:n]]

    def chain_lengths(self) -> List[Optional[int]]:
        return [None if b is None else len(b) for b in self._buckets]
