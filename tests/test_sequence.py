import random

import pytest

from bars import DisplayState, Element, Sequence, VALUE_RANGE


def test_from_values_assigns_positional_uids():
    seq = Sequence.from_values([7, 3, 9])

    assert seq.values() == [7, 3, 9]
    assert seq.uids() == [0, 1, 2]
    assert seq.states() == ["unsorted"] * 3


def test_swap_moves_identity_with_value():
    seq = Sequence.from_values([1, 2, 3])
    seq.swap(0, 2)

    assert seq.values() == [3, 2, 1]
    assert seq.uids() == [2, 1, 0]


def test_generate_random_respects_size_and_range():
    seq = Sequence.generate_random(100, seed=7)

    lo, hi = VALUE_RANGE
    assert len(seq) == 100
    assert all(lo <= v <= hi for v in seq.values())
    assert all(isinstance(v, int) for v in seq.values())


def test_generate_random_is_reproducible_with_seed():
    a = Sequence.generate_random(20, seed=42)
    b = Sequence.generate_random(20, seed=42)

    assert a.values() == b.values()


def test_generate_random_shares_rng():
    rng = random.Random(1)
    first = Sequence.generate_random(10, rng=rng)
    second = Sequence.generate_random(10, rng=rng)

    assert first.values() != second.values()


def test_generate_random_rejects_negative_size():
    with pytest.raises(ValueError):
        Sequence.generate_random(-1)


def test_generate_random_allows_empty():
    assert len(Sequence.generate_random(0)) == 0


def test_mark_all_and_reset_states():
    seq = Sequence.from_values([4, 5])
    seq.mark_all(DisplayState.SORTED)
    assert seq.states() == ["sorted", "sorted"]

    seq.reset_states()
    assert seq.states() == ["unsorted", "unsorted"]


def test_snapshot_is_detached():
    seq = Sequence.from_values([4, 5])
    snap = seq.snapshot()
    seq[0].state = DisplayState.PIVOT
    seq.swap(0, 1)

    assert snap == [
        {"value": 4, "state": "unsorted"},
        {"value": 5, "state": "unsorted"},
    ]


def test_element_copy_keeps_uid():
    el = Element(12, DisplayState.COMPARING, uid=3)
    clone = el.copy()

    assert clone is not el
    assert (clone.value, clone.state, clone.uid) == (12, DisplayState.COMPARING, 3)


def test_element_to_dict_drops_identity():
    el = Element(33, DisplayState.PIVOT, uid=5)

    assert el.to_dict() == {"value": 33, "state": "pivot"}
