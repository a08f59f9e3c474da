"""Lattice utility functions for Hilbert ordering."""

import numpy as np


def quantize(values: np.ndarray, iterations: int) -> np.ndarray:
    """Map values onto integer lattice coordinates in [0, 2**iterations) by min/max scaling."""
    values = np.asarray(values, dtype=np.float64)
    size = 1 << iterations
    if values.size == 0:
        return np.zeros(0, dtype=np.uint64)

    lo, hi = values.min(), values.max()
    extent = hi - lo
    if not (np.isfinite(extent) and extent > 0):
        return np.zeros(values.shape, dtype=np.uint64)

    # Normalize first so subnormal extents stay finite
    scaled = (values - lo) / extent * float(size)

    # Past 53 bits float64 rounds size - 1 up to size; clamp as an integer
    top = scaled >= float(size)
    lattice = np.where(top, 0.0, scaled).astype(np.uint64)
    lattice[top] = np.uint64(size - 1)
    return lattice


def manhattan_distance(a: np.ndarray, b: np.ndarray) -> int:
    """L1 distance between two lattice points."""
    a = np.asarray(a, dtype=np.int64)
    b = np.asarray(b, dtype=np.int64)
    return int(np.abs(a - b).sum())
