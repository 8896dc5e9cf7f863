"""Property tests: HashTable against a dict oracle and a chain-level counter model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from hypothesis import given, settings, strategies as st

from hash_table import HashTable
from util import bucket_index

CAPACITY = 7  # small, so chains actually form


@dataclass(frozen=True)
class CollidingKey:
    """Key whose hash always collides with its peers."""

    value: int

    def __hash__(self) -> int:
        return 0


class ChainModel:
    """Expected chains and counters, tracked by bucket index."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self.chains: Dict[int, List[Any]] = {}
        self.values: Dict[Any, int] = {}
        self.collisions = 0
        self.probes = 0

    def put(self, key: Any, value: int) -> Optional[int]:
        i = bucket_index(key, self.capacity)
        if i in self.chains:
            self.collisions += 1
        else:
            self.chains[i] = []
        chain = self.chains[i]
        if key in chain:
            self.probes += chain.index(key) + 1
        else:
            self.probes += len(chain)
            chain.append(key)
        old = self.values.get(key)
        self.values[key] = value
        return old

    def remove(self, key: Any) -> Optional[int]:
        chain = self.chains.get(bucket_index(key, self.capacity))
        if chain is not None and key in chain:
            chain.remove(key)
        return self.values.pop(key, None)

    def clear(self) -> None:
        for chain in self.chains.values():
            chain.clear()
        self.values.clear()


def _key_strategy() -> st.SearchStrategy[Any]:
    small_ints = st.integers(-30, 30)
    colliding = st.builds(CollidingKey, st.integers(-5, 5))
    return st.one_of(small_ints, colliding, st.text(max_size=3))


def _operation_strategy() -> st.SearchStrategy[Tuple[str, Any, Optional[int]]]:
    key = _key_strategy()
    value = st.integers(-1_000, 1_000)
    return st.one_of(
        st.tuples(st.just("put"), key, value),
        st.tuples(st.just("get"), key, st.none()),
        st.tuples(st.just("remove"), key, st.none()),
        st.tuples(st.just("clear"), st.none(), st.none()),
    )


@settings(max_examples=200, deadline=None)
@given(st.lists(_operation_strategy(), min_size=1, max_size=100))
def test_table_matches_model(operations: List[Tuple[str, Any, Optional[int]]]) -> None:
    table = HashTable(capacity=CAPACITY)
    model = ChainModel(CAPACITY)
    seen: set = set()

    for op, key, maybe_value in operations:
        collisions_before = table.get_number_of_collisions()
        probes_before = table.get_number_of_probes()

        if op == "put":
            seen.add(key)
            assert table.put(key, maybe_value) == model.put(key, maybe_value)
        elif op == "remove":
            assert table.remove(key) == model.remove(key)
        elif op == "clear":
            table.clear()
            model.clear()
        else:
            assert table.get(key) == model.values.get(key)

        # Only put moves the counters, and never backwards.
        if op != "put":
            assert table.get_number_of_collisions() == collisions_before
            assert table.get_number_of_probes() == probes_before
        assert table.get_number_of_collisions() >= collisions_before
        assert table.get_number_of_probes() >= probes_before
        assert table.get_number_of_collisions() == model.collisions
        assert table.get_number_of_probes() == model.probes

        assert len(table) == len(model.values)
        for candidate in seen:
            assert table.get(candidate) == model.values.get(candidate)
        assert dict(table.entries()) == model.values


@settings(max_examples=100, deadline=None)
@given(st.lists(st.tuples(st.integers(-50, 50), st.integers()), max_size=60))
def test_keys_are_unique_after_bulk_load(pairs: List[Tuple[int, int]]) -> None:
    table = HashTable(pairs, capacity=CAPACITY)
    keys = [k for k, _ in table.entries()]
    assert len(keys) == len(set(keys))
    assert dict(table.entries()) == dict(pairs)


@settings(max_examples=100, deadline=None)
@given(_key_strategy(), st.integers(), st.integers())
def test_put_get_remove_round_trip(key: Any, v1: int, v2: int) -> None:
    table = HashTable(capacity=CAPACITY)
    assert table.put(key, v1) is None
    assert table.get(key) == v1
    assert table.put(key, v2) == v1
    assert table.get(key) == v2
    assert table.remove(key) == v2
    assert table.get(key) is None
