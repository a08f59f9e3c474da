"""Hilbert order sorting of float positions for spatial coherence."""

import logging
from typing import Optional

import numpy as np

from .hilbert_curve import HilbertCurve
from .utils import quantize

logger = logging.getLogger(__name__)


def sort_hilbert_order(positions: np.ndarray, iterations: int = 10, indices: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Sort points into Hilbert order for better spatial coherence.

    Args:
        positions: (n_points, n_dims) or (n_points,) position array
        iterations: Bits of lattice precision per axis
        indices: Optional array of indices to sort (if None, creates 0..n-1)

    Returns:
        Sorted indices array
    """
    positions = np.asarray(positions, dtype=np.float64)
    if positions.ndim == 1:
        positions = positions.reshape(-1, 1)
    if positions.ndim != 2:
        raise ValueError(f"Expected positions of shape (n_points, n_dims), got {positions.shape}")

    n, n_dims = positions.shape
    if indices is None:
        indices = np.arange(n, dtype=np.uint32)
    else:
        indices = np.array(indices, copy=True)
        if len(indices) != n:
            raise ValueError(f"Got {len(indices)} indices for {n} positions")

    # Width cap applies even to degenerate input
    curve = HilbertCurve(n_dims, iterations)
    curve.check_word_width()

    if n == 0:
        return indices

    # Check for invalid or identical points
    extents = positions.max(axis=0) - positions.min(axis=0)
    if not np.all(np.isfinite(extents)):
        return indices
    if np.all(extents == 0):
        return indices

    lattice = np.column_stack([quantize(positions[:, j], iterations) for j in range(n_dims)])
    hilbert = curve.hilbert_numbers_from_points(lattice)

    order = np.argsort(hilbert, kind='stable')
    logger.debug("Hilbert ordered %d points in %d dimensions", n, n_dims)
    return indices[order]
