"""
HilbertSort - Map lattice points to Hilbert curve indices and sort data by spatial locality.

Usage:
    from HilbertSort import HilbertCurve
    curve = HilbertCurve(dimension=3, iterations=10)
    h = curve.hilbert_number_from_point([30, 2, 1000])
    point = curve.point_from_hilbert_number(h)
    items, hilbert_values = curve.sort_data(items, coords)
"""

from .hilbert_curve import HilbertCurve
from .hilbert_order import sort_hilbert_order

__version__ = "1.0.0"
__all__ = ["HilbertCurve", "sort_hilbert_order"]
