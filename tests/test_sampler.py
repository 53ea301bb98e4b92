import numpy as np
from scipy import stats

from sampler import SlotSet


def test_remove_random_on_empty_set_returns_none():
    rng = np.random.default_rng(0)

    assert SlotSet().remove_random(rng) is None


def test_remove_random_drains_every_member_once():
    rng = np.random.default_rng(0)
    items = set(range(100))
    slot_set = SlotSet(items)

    removed = []
    while slot_set:
        removed.append(slot_set.remove_random(rng))

    assert sorted(removed) == sorted(items)
    assert slot_set.remove_random(rng) is None


def test_set_operations():
    slot_set = SlotSet("abc")

    slot_set.add("a")
    slot_set.add("d")
    slot_set.discard("b")
    slot_set.discard("z")

    assert len(slot_set) == 3
    assert "b" not in slot_set
    assert list(slot_set) == ["a", "c", "d"]
    assert slot_set.capacity == 4


def test_remove_random_compacts_sparse_sets():
    rng = np.random.default_rng(0)
    slot_set = SlotSet(range(100))

    for item in range(90):
        slot_set.discard(item)

    assert slot_set.capacity == 100

    item = slot_set.remove_random(rng)

    assert item in range(90, 100)
    assert slot_set.capacity == 10
    assert len(slot_set) == 9


def test_compact_keeps_order():
    slot_set = SlotSet(range(10))
    slot_set.discard(3)
    slot_set.discard(7)

    slot_set.compact()

    assert list(slot_set) == [0, 1, 2, 4, 5, 6, 8, 9]
    assert slot_set.capacity == 8


def test_remove_random_is_uniform():
    rng = np.random.default_rng(1234)
    trials = 4000

    counts = {item: 0 for item in range(5, 20, 3)}

    for _ in range(trials):
        slot_set = SlotSet(range(20))

        # Leaves holes, while staying dense enough to not compact
        for item in range(20):
            if item not in counts:
                slot_set.discard(item)

        counts[slot_set.remove_random(rng)] += 1

    _, p_value = stats.chisquare(list(counts.values()))

    assert p_value > 0.001
