import itertools

import numpy as np
import pytest

from enumerator import assignment_matrix
from errors import InvariantViolation
from simulate import expand, reduce_step, simulate, simulate_batch


def test_reduce_step_shrinks_by_two():
    window = [False, True, True, False, True]
    out = reduce_step(window)
    assert len(out) == 3
    # 011 -> 1, 110 -> 1, 101 -> 1
    assert out == [True, True, True]


def test_depth_zero_is_identity():
    assert simulate([True], 0) is True
    assert simulate([False], 0) is False


def test_single_cell_spreads_left():
    # a live cell makes its left neighbor and itself live, never its right neighbor
    assert simulate([False, False, True], 1) is True
    assert simulate([False, True, False], 1) is True
    assert simulate([True, False, False], 1) is False


def test_window_length_mismatch_is_fatal():
    with pytest.raises(InvariantViolation):
        simulate([True, False], 1)
    with pytest.raises(InvariantViolation):
        simulate([True] * 5, 1)
    with pytest.raises(AssertionError):
        expand([True] * 4, 2)


@pytest.mark.parametrize("depth", [0, 1, 2, 3])
def test_staged_matches_single_shot(depth):
    """Reducing row by row gives the same value as the recursive expansion."""
    for window in itertools.product((False, True), repeat=2 * depth + 1):
        assert simulate(window, depth) == expand(window, depth)


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_simulate_is_repeated_reduce_step(depth):
    for window in itertools.product((False, True), repeat=2 * depth + 1):
        curr = list(window)
        for _ in range(depth):
            curr = reduce_step(curr)
        assert simulate(window, depth) == curr[0]


@pytest.mark.parametrize("depth", [0, 1, 2, 3, 4])
def test_batch_matches_scalar(depth):
    matrix = assignment_matrix(2 * depth + 1)
    batch = simulate_batch(matrix, depth)
    assert batch.dtype == np.bool_
    assert batch.shape == (matrix.shape[0],)
    assert list(batch) == [simulate(row.tolist(), depth) for row in matrix]


def test_batch_shape_mismatch_is_fatal():
    with pytest.raises(InvariantViolation):
        simulate_batch(np.zeros((4, 4), dtype=bool), 2)
    with pytest.raises(InvariantViolation):
        simulate_batch(np.zeros(3, dtype=bool), 1)
