"""Tests for Hilbert ordering of float positions."""

import numpy as np
import pytest

from HilbertSort import HilbertCurve, sort_hilbert_order
from HilbertSort.utils import quantize


def test_one_dimension_sorts_by_value():
    order = sort_hilbert_order(np.array([3.0, 1.0, 2.0]))
    assert order.tolist() == [1, 2, 0]
    assert order.dtype == np.uint32


def test_square_corners_follow_the_curve():
    positions = np.array([[1.0, 0.0], [0.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
    order = sort_hilbert_order(positions, iterations=1)
    # (0,0) -> (0,1) -> (1,1) -> (1,0)
    assert order.tolist() == [1, 3, 2, 0]


def test_matches_sort_data_on_quantized_lattice(rng):
    positions = rng.normal(size=(300, 3))
    iterations = 8

    order = sort_hilbert_order(positions, iterations=iterations)

    lattice = np.column_stack([quantize(positions[:, j], iterations) for j in range(3)])
    curve = HilbertCurve(3, iterations)
    _, hilbert_values = curve.sort_data(range(300), lambda i: lattice[i].tolist())
    ordered = curve.hilbert_numbers_from_points(lattice[order])
    assert ordered.tolist() == hilbert_values
    assert sorted(order.tolist()) == list(range(300))


def test_custom_indices_are_permuted_not_mutated():
    positions = np.array([3.0, 1.0, 2.0])
    indices = np.array([10, 20, 30])

    order = sort_hilbert_order(positions, indices=indices)

    assert order.tolist() == [20, 30, 10]
    assert indices.tolist() == [10, 20, 30]


def test_identical_points_keep_order():
    positions = np.ones((5, 2))
    assert sort_hilbert_order(positions).tolist() == [0, 1, 2, 3, 4]


def test_non_finite_points_keep_order():
    positions = np.array([[0.0, 1.0], [np.nan, 2.0], [3.0, 0.0]])
    assert sort_hilbert_order(positions).tolist() == [0, 1, 2]


def test_empty():
    assert sort_hilbert_order(np.zeros((0, 3))).tolist() == []


def test_width_cap():
    with pytest.raises(ValueError, match="64"):
        sort_hilbert_order(np.zeros((4, 7)), iterations=10)


def test_index_count_mismatch():
    with pytest.raises(ValueError):
        sort_hilbert_order(np.zeros((4, 2)), indices=np.arange(3))


def test_bad_shape():
    with pytest.raises(ValueError):
        sort_hilbert_order(np.zeros((2, 2, 2)))


@pytest.mark.filterwarnings("error")
@pytest.mark.parametrize("iterations", [60, 64])
def test_high_precision_keeps_largest_point_last(iterations):
    order = sort_hilbert_order(np.array([0.0, 1.0, 2.0]), iterations=iterations)
    assert order.tolist() == [0, 1, 2]


def test_high_precision_two_dimensions():
    positions = np.array([[1.0, 0.0], [0.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
    # Corners land on the lattice corners and keep the 1-bit walk order
    assert sort_hilbert_order(positions, iterations=32).tolist() == [1, 3, 2, 0]
