"""Hilbert curve encoding and decoding in any dimension.

Uses Skilling's transpose method (J. Skilling, "Programming the Hilbert
curve", AIP Conf. Proc. 707, 2004) to map lattice points to their position
along the curve and back.
"""

import logging
from typing import Callable, Iterable, List, Sequence, Tuple, TypeVar

import numpy as np

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Bulk conversions work on fixed-width words
WORD_BITS = 64


class HilbertCurve:
    """
    Converter between points of the lattice [0, 2**iterations)**dimension
    and their Hilbert index in [0, 2**(dimension * iterations)).
    """

    def __init__(self, dimension: int, iterations: int):
        """
        Args:
            dimension: Number of lattice axes
            iterations: Bits of precision per axis (recursion depth of the curve)
        """
        for name, value in (('dimension', dimension), ('iterations', iterations)):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 1:
                raise ValueError(f"{name} must be at least 1, got {value}")

        self._dimension = int(dimension)
        self._iterations = int(iterations)
        logger.debug("Created %r", self)

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def iterations(self) -> int:
        return self._iterations

    @property
    def min_x(self) -> int:
        return 0

    @property
    def max_x(self) -> int:
        return (1 << self._iterations) - 1

    @property
    def min_h(self) -> int:
        return 0

    @property
    def max_h(self) -> int:
        return (1 << (self._dimension * self._iterations)) - 1

    def __repr__(self):
        return f"HilbertCurve(dimension={self._dimension}, iterations={self._iterations})"

    def _hilbert_integer_to_transpose(self, hilbert_integer: int) -> List[int]:
        """Split the index bits round-robin across the axes, most significant first."""
        size = self._dimension * self._iterations
        transpose = [0] * self._dimension

        for at in range(size):
            bit = (hilbert_integer >> (size - 1 - at)) & 1
            axis = at % self._dimension
            transpose[axis] = (transpose[axis] << 1) | bit

        return transpose

    def _transpose_to_hilbert_integer(self, transpose: Sequence[int]) -> int:
        """Interleave the transpose bits into one integer, most significant first."""
        hilbert_integer = 0
        for level in range(self._iterations - 1, -1, -1):
            for value in transpose:
                hilbert_integer = (hilbert_integer << 1) | ((value >> level) & 1)
        return hilbert_integer

    def point_from_hilbert_number(self, hilbert_number: int) -> List[int]:
        """
        Compute the lattice point at a given position along the curve.

        Args:
            hilbert_number: Index in [0, 2**(dimension * iterations)).
                Not range checked.

        Returns:
            List of `dimension` coordinates
        """
        n = self._dimension
        x = self._hilbert_integer_to_transpose(int(hilbert_number))
        z = 2 << (self._iterations - 1)

        # Gray decode by H ^ (H/2)
        t = x[n - 1] >> 1
        for i in range(n - 1, 0, -1):
            x[i] ^= x[i - 1]
        x[0] ^= t

        # Undo excess work
        q = 2
        while q != z:
            p = q - 1
            for i in range(n - 1, -1, -1):
                if x[i] & q:
                    x[0] ^= p
                else:
                    t = (x[0] ^ x[i]) & p
                    x[0] ^= t
                    x[i] ^= t
            q <<= 1

        return x

    def hilbert_number_from_point(self, point: Sequence[int]) -> int:
        """
        Compute the position of a lattice point along the curve.

        Args:
            point: `dimension` integers, each in [0, 2**iterations).
                Not range checked.

        Returns:
            Hilbert index of the point
        """
        n = self._dimension
        x = [int(c) for c in point]
        m = 1 << (self._iterations - 1)

        # Inverse undo
        q = m
        while q > 1:
            p = q - 1
            for i in range(n):
                if x[i] & q:
                    x[0] ^= p
                else:
                    t = (x[0] ^ x[i]) & p
                    x[0] ^= t
                    x[i] ^= t
            q >>= 1

        # Gray encode
        for i in range(1, n):
            x[i] ^= x[i - 1]
        t = 0
        q = m
        while q > 1:
            if x[n - 1] & q:
                t ^= q - 1
            q >>= 1
        for i in range(n):
            x[i] ^= t

        return self._transpose_to_hilbert_integer(x)

    def sort_data(self, data: Iterable[T], coords: Callable[[T], Sequence[int]]) -> Tuple[List[T], List[int]]:
        """
        Map each item to a lattice point and order the items by Hilbert index.

        Args:
            data: Items to sort. The collection itself is left untouched.
            coords: Maps one item to its lattice point

        Returns:
            Tuple of (sorted_items, hilbert_values)
            - sorted_items: New list with the items in ascending Hilbert order
            - hilbert_values: Hilbert index of each sorted item, aligned with it
        """
        records = [(self.hilbert_number_from_point(coords(item)), item) for item in data]
        records.sort(key=lambda record: record[0])
        logger.debug("Sorted %d items along %r", len(records), self)

        hilbert_values = [h for h, _ in records]
        sorted_items = [item for _, item in records]
        return sorted_items, hilbert_values

    def check_word_width(self) -> None:
        """Raise ValueError if an index does not fit the 64-bit words of the bulk conversions."""
        bits = self._dimension * self._iterations
        if bits > WORD_BITS:
            raise ValueError(
                f"Bulk conversion needs dimension * iterations <= {WORD_BITS}, "
                f"got {self._dimension} * {self._iterations} = {bits}"
            )

    def hilbert_numbers_from_points(self, points) -> np.ndarray:
        """
        Vectorized `hilbert_number_from_point` over the rows of an array.

        Args:
            points: (n_points, dimension) array of lattice coordinates

        Returns:
            (n_points,) uint64 array of Hilbert indices
        """
        self.check_word_width()
        n = self._dimension
        x = np.array(points, dtype=np.uint64)
        if x.size == 0:
            x = x.reshape(0, n)
        if x.ndim != 2 or x.shape[1] != n:
            raise ValueError(f"Expected an array of shape (n_points, {n}), got {x.shape}")

        m = 1 << (self._iterations - 1)
        zero = np.uint64(0)

        q = m
        while q > 1:
            p = np.uint64(q - 1)
            bit = np.uint64(q)
            for i in range(n):
                hit = (x[:, i] & bit) != 0
                t = np.where(hit, zero, (x[:, 0] ^ x[:, i]) & p)
                x[:, 0] ^= np.where(hit, p, t)
                x[:, i] ^= t
            q >>= 1

        for i in range(1, n):
            x[:, i] ^= x[:, i - 1]
        t = np.zeros(len(x), dtype=np.uint64)
        q = m
        while q > 1:
            hit = (x[:, n - 1] & np.uint64(q)) != 0
            t[hit] ^= np.uint64(q - 1)
            q >>= 1
        x ^= t[:, np.newaxis]

        # Interleave transpose bits
        h = np.zeros(len(x), dtype=np.uint64)
        one = np.uint64(1)
        for level in range(self._iterations - 1, -1, -1):
            shift = np.uint64(level)
            for i in range(n):
                h = (h << one) | ((x[:, i] >> shift) & one)
        return h

    def points_from_hilbert_numbers(self, hilbert_numbers) -> np.ndarray:
        """
        Vectorized `point_from_hilbert_number` over an array of indices.

        Args:
            hilbert_numbers: (n_points,) array of Hilbert indices

        Returns:
            (n_points, dimension) uint64 array of lattice coordinates
        """
        self.check_word_width()
        n = self._dimension
        h = np.array(hilbert_numbers, dtype=np.uint64)
        if h.ndim != 1:
            raise ValueError(f"Expected an array of shape (n_points,), got {h.shape}")

        size = n * self._iterations
        one = np.uint64(1)
        x = np.zeros((len(h), n), dtype=np.uint64)
        for at in range(size):
            bit = (h >> np.uint64(size - 1 - at)) & one
            axis = at % n
            x[:, axis] = (x[:, axis] << one) | bit

        t = x[:, n - 1] >> one
        for i in range(n - 1, 0, -1):
            x[:, i] ^= x[:, i - 1]
        x[:, 0] ^= t

        zero = np.uint64(0)
        z = 2 << (self._iterations - 1)
        q = 2
        while q != z:
            p = np.uint64(q - 1)
            bit = np.uint64(q)
            for i in range(n - 1, -1, -1):
                hit = (x[:, i] & bit) != 0
                t = np.where(hit, zero, (x[:, 0] ^ x[:, i]) & p)
                x[:, 0] ^= np.where(hit, p, t)
                x[:, i] ^= t
            q <<= 1

        return x
