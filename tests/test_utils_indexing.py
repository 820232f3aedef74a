"""Tests for mcxkit.utils.indexing."""

import numpy as np
import pytest

from mcxkit.utils.indexing import exp2i, log2i, strided_range, unit_mask


@pytest.mark.parametrize("k", range(21))
def test_log2i_inverts_powers_of_two(k):
    """Tests that log2i(2**k) returns k."""
    assert log2i(2**k) == k


def test_log2i_accepts_numpy_integers():
    """Tests that numpy integer sizes (e.g. array.size) are accepted."""
    assert log2i(np.int64(8)) == 3


@pytest.mark.parametrize("bad", [0, -4, 3, 6, 7, 12, 1023])
def test_log2i_rejects_non_powers_of_two(bad):
    """Tests that log2i raises ValueError when n is not an exact power of two."""
    with pytest.raises(ValueError):
        log2i(bad)


@pytest.mark.parametrize("bad", [4.0, "4", True])
def test_log2i_rejects_non_integers(bad):
    """Tests that log2i only accepts integers."""
    with pytest.raises(ValueError):
        log2i(bad)


def test_strided_range_lengths():
    """Tests that strided_range holds (stop - start) // step indices."""
    assert len(strided_range(0, 10, 2)) == 5
    assert len(strided_range(0, 10, 3)) == 3
    assert list(strided_range(0, 10, 3)) == [0, 3, 6]
    assert list(strided_range(2, 11, 3)) == [2, 5, 8]


def test_strided_range_is_restartable():
    """Tests that iterating twice yields the same indices."""
    r = strided_range(1, 8, 2)
    assert list(r) == list(r) == [1, 3, 5]


def test_strided_range_unit_step_covers_interval():
    """Tests that a unit stride enumerates every index below stop."""
    assert list(strided_range(3, 7, 1)) == [3, 4, 5, 6]


def test_strided_range_empty_when_stop_not_above_start():
    """Tests that an empty range is returned when stop <= start."""
    assert len(strided_range(5, 5, 1)) == 0
    assert len(strided_range(6, 2, 1)) == 0


@pytest.mark.parametrize("step", [0, -1])
def test_strided_range_rejects_non_positive_step(step):
    """Tests that a non-positive step raises ValueError."""
    with pytest.raises(ValueError):
        strided_range(0, 10, step)


def test_exp2i():
    """Tests powers of two and the negative-exponent error."""
    assert exp2i(0) == 1
    assert exp2i(10) == 1024
    with pytest.raises(ValueError):
        exp2i(-1)


def test_unit_mask_sets_requested_bits():
    """Tests that unit_mask sets one bit per unit position."""
    assert unit_mask([]) == 0
    assert unit_mask([0, 1, 2]) == 0b111
    assert unit_mask(strided_range(3, 5, 1)) == 0b11000
    with pytest.raises(ValueError):
        unit_mask([-1])
