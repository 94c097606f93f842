import itertools
import random

import pytest

from disjoint_set.structures import DisjointSetStore


def _store(elements):
    store = DisjointSetStore()
    for element in elements:
        store.insert(element)
    return store


def _partition(store, elements):
    groups = {}
    for element in elements:
        groups.setdefault(store.find(element), set()).add(element)
    return sorted(sorted(group) for group in groups.values())


def test_star_unions_pick_head_as_representative():
    store = _store(range(1, 9))
    store.unions([1, 2, 5, 6, 8])
    store.unions([3, 4])
    store.unions([7])

    assert store.find(6) == 1
    assert store.find(3) == 3
    assert store.find(4) == 3
    assert store.find(7) == 7


def test_fresh_elements_are_their_own_representatives():
    names = ["carol", "alice", "bob"]
    store = _store(names)
    for name in names:
        assert store.find(name) == name
    assert len(store) == 3


def test_find_unknown_element_returns_none():
    store = _store([1, 2])
    assert store.find(99) is None
    assert 99 not in store
    assert store.class_size(99) is None


def test_find_is_idempotent():
    store = _store(range(10))
    store.unions([0, 3, 6, 9])
    first = [store.find(x) for x in range(10)]
    second = [store.find(x) for x in range(10)]
    assert first == second


def test_union_is_symmetric():
    forward = _store(range(6))
    backward = _store(range(6))
    for x, y in [(4, 1), (2, 5), (1, 2)]:
        assert forward.union(x, y)
        assert backward.union(y, x)
    assert _partition(forward, range(6)) == _partition(backward, range(6))
    assert [forward.find(x) for x in range(6)] == [backward.find(x) for x in range(6)]


def test_union_with_unknown_element_leaves_store_unchanged():
    store = _store([1, 2, 3])
    store.union(1, 2)

    assert not store.union(2, 42)
    assert not store.union(42, 3)
    assert not store.union(41, 42)

    assert store.find(3) == 3
    assert store.class_size(1) == 2
    assert store.class_size(3) == 1


def test_union_is_transitive():
    store = _store("abcd")
    assert store.union("a", "b")
    assert store.union("b", "c")
    assert store.find("a") == store.find("c")
    assert store.connected("a", "c")
    assert not store.connected("a", "d")


def test_union_of_same_class_succeeds_without_change():
    store = _store(range(3))
    store.union(0, 1)
    assert store.union(1, 0)
    assert store.class_size(0) == 2


def test_smaller_class_is_attached_under_larger_one():
    store = _store(range(1, 6))
    store.unions([3, 4, 5])
    assert store.union(1, 3)
    assert store.find(1) == 3
    assert store.class_size(1) == 4


def test_equal_sizes_keep_smaller_element_representative():
    store = _store([10, 20])
    assert store.union(20, 10)
    assert store.find(20) == 10


def test_unions_stop_at_first_unknown_element():
    store = _store(range(5))
    assert not store.unions([0, 1, 99, 2])
    assert store.find(1) == 0
    assert store.find(2) == 2


def test_unions_with_fewer_than_two_elements_succeed():
    store = DisjointSetStore()
    assert store.unions([])
    assert store.unions(["missing"])


def test_class_sizes_match_membership():
    store = _store(range(30))
    for x, y in [(0, 7), (7, 14), (3, 4), (21, 0), (4, 28), (15, 16), (16, 3)]:
        store.union(x, y)

    groups = {}
    for x in range(30):
        groups.setdefault(store.find(x), []).append(x)
    for representative, members in groups.items():
        assert store.class_size(representative) == len(members)
        assert all(store.class_size(member) == len(members) for member in members)


def test_repeated_unions_within_class_keep_find_stable():
    store = _store(range(12))
    store.unions([0, 2, 4, 6, 8, 10])
    store.unions([1, 3, 5])
    before = [store.find(x) for x in range(12)]

    for x, y in itertools.combinations([0, 2, 4, 6, 8, 10], 2):
        assert store.union(y, x)
    after = [store.find(x) for x in range(12)]
    assert before == after


def test_long_chain_resolves_to_single_representative():
    store = _store(range(1000))
    for x in range(999):
        store.union(x, x + 1)
    assert {store.find(x) for x in range(1000)} == {0}
    assert store.class_size(500) == 1000


def test_duplicate_insert_is_rejected():
    store = _store(["x", "y"])
    store.union("x", "y")
    with pytest.raises(ValueError):
        store.insert("x")
    assert len(store) == 2
    assert store.find("x") == "x"
    assert store.class_size("y") == 2


def test_constructor_inserts_initial_elements():
    store = DisjointSetStore([(0, 1), (0, 2), (1, 0)])
    assert len(store) == 3
    assert store.union((1, 0), (0, 2))
    assert store.find((1, 0)) == (0, 2)


def test_find_halves_the_path_it_walks():
    store = _store(range(5))
    for index in range(1, 5):
        store._nodes[index].parent = index - 1
    store._nodes[0].size = 5

    assert store.find(4) == 0
    assert [node.parent for node in store._nodes] == [0, 0, 0, 2, 2]


def test_random_unions_keep_a_forest_with_correct_sizes():
    rng = random.Random(7)
    store = _store(range(200))
    for _ in range(300):
        store.union(rng.randrange(200), rng.randrange(200))

    members = {}
    for x in range(200):
        members.setdefault(store.find(x), []).append(x)
    for representative, group in members.items():
        node = store._nodes[store._to_index[representative]]
        assert node.parent == store._to_index[representative]
        assert node.size == len(group)
