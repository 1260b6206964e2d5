from __future__ import annotations

from typing import Dict, Optional, Tuple

from hypothesis import given, settings, strategies as st

from chaintable import HashTable
from chaintable.datastructures.hashing import bucket_index


def _key_strategy() -> st.SearchStrategy[str]:
    # A small alphabet keeps collisions and repeated keys frequent.
    return st.text(alphabet="abcdeé", max_size=4)


def _operation_strategy() -> st.SearchStrategy[Tuple[str, str, Optional[int]]]:
    key = _key_strategy()
    value = st.integers(-1_000, 1_000)
    put_op = st.tuples(st.just("put"), key, value)
    get_op = st.tuples(st.just("get"), key, st.none())
    remove_op = st.tuples(st.just("remove"), key, st.none())
    return st.one_of(put_op, get_op, remove_op)


def _check_invariants(table: HashTable) -> None:
    assert table.capacity >= table.floor_capacity
    assert sum(table.chain_lengths()) == len(table)
    keys = table.keys()
    assert len(set(keys)) == len(keys)
    for idx, bucket in enumerate(table._buckets):
        if bucket:
            for k, _ in bucket.items():
                assert bucket_index(k, table.capacity) == idx
    load = table.load_factor
    assert load < table.policy.grow_threshold
    assert table.capacity == table.floor_capacity or load > table.policy.shrink_threshold


@settings(max_examples=150, deadline=None)
@given(st.integers(1, 8), st.lists(_operation_strategy(), min_size=1, max_size=120))
def test_table_behaves_like_dict(floor_capacity: int, operations) -> None:
    table = HashTable(floor_capacity)
    model: Dict[str, int] = {}

    for op, key, maybe_value in operations:
        if op == "put":
            assert maybe_value is not None
            before = len(table)
            table.put(key, maybe_value)
            assert len(table) == before + (0 if key in model else 1)
            model[key] = maybe_value
        elif op == "remove":
            assert table.remove(key) is (key in model)
            model.pop(key, None)
            assert not table.contains(key)
        else:
            assert table.get(key) == model.get(key)

        assert len(table) == len(model)
        assert dict(table.items()) == model
        _check_invariants(table)


@settings(max_examples=50, deadline=None)
@given(st.dictionaries(_key_strategy(), st.integers(), max_size=40))
def test_copy_matches_original(pairs: Dict[str, int]) -> None:
    table = HashTable(2)
    for k, v in pairs.items():
        table.put(k, v)
    clone = table.copy()
    assert clone.items() == table.items()
    table.clear()
    assert dict(clone.items()) == pairs
