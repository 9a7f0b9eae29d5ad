"""Element store tests."""

import numpy as np
import pytest

from environment import Element, ElementStore, SwapInstruction


def test_iter_yields_elements_in_id_order():
    store = ElementStore([2.5, 1.0, 7.0])
    elements = list(store.iter())
    assert elements == [Element(0, 2.5), Element(1, 1.0), Element(2, 7.0)]
    assert [e.id for e in store] == [0, 1, 2]
    assert len(store) == 3


def test_get_and_set_height():
    store = ElementStore([1.0, 2.0])
    store.set_height(1, 9.5)
    assert store.get(1) == 9.5
    assert store.get(0) == 1.0


@pytest.mark.parametrize("element_id", [-1, 2, 10])
def test_unknown_id_raises(element_id):
    store = ElementStore([1.0, 2.0])
    with pytest.raises(IndexError):
        store.get(element_id)
    with pytest.raises(IndexError):
        store.set_height(element_id, 1.0)


def test_non_finite_heights_rejected():
    with pytest.raises(ValueError):
        ElementStore([1.0, float('nan')])
    store = ElementStore([1.0, 2.0])
    with pytest.raises(ValueError):
        store.set_height(0, float('inf'))


def test_heights_is_a_copy():
    store = ElementStore([1.0, 2.0])
    heights = store.heights
    heights[0] = 100.0
    assert store.get(0) == 1.0


def test_apply_swap_exchanges_values_not_ids():
    store = ElementStore([5.0, 3.0, 1.0])
    store.apply(SwapInstruction(a_id=0, b_id=2, a_new_height=1.0, b_new_height=5.0))
    assert list(store.iter()) == [Element(0, 1.0), Element(1, 3.0), Element(2, 5.0)]


def test_apply_self_swap_leaves_store_unchanged():
    store = ElementStore([1.0, 3.0])
    swap = SwapInstruction(a_id=0, b_id=0, a_new_height=1.0, b_new_height=1.0)
    assert swap.is_noop
    store.apply(swap)
    assert list(store.heights) == [1.0, 3.0]


def test_is_sorted_and_sorted_prefix():
    assert ElementStore([1.0, 1.0, 2.0]).is_sorted()
    assert not ElementStore([2.0, 1.0]).is_sorted()
    assert ElementStore([1.0, 2.0, 0.5, 3.0]).sorted_prefix_length() == 2
    assert ElementStore([3.0, 1.0]).sorted_prefix_length() == 1
    assert ElementStore([1.0, 2.0, 3.0]).sorted_prefix_length() == 3


def test_from_random_range_and_reproducibility():
    a = ElementStore.from_random(500, 1.0, 1000.0, rng=np.random.default_rng(42))
    b = ElementStore.from_random(500, 1.0, 1000.0, rng=np.random.default_rng(42))
    np.testing.assert_array_equal(a.heights, b.heights)
    assert len(a) == 500
    assert a.heights.min() >= 1.0
    assert a.heights.max() < 1001.0
