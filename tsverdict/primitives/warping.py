"""
Warping cost engine.

Boundary to the external DTW implementation (dtaidistance). Everything
downstream only sees align(a, b, search_radius, metric) -> normalized cost.
"""

from enum import Enum

import numpy as np
from dtaidistance import dtw


class DistanceMetric(str, Enum):
    """Point-to-point distance used along the warping path."""
    EUCLIDEAN = "EUCLIDEAN"


def align(
    a: np.ndarray,
    b: np.ndarray,
    search_radius: int,
    metric: DistanceMetric = DistanceMetric.EUCLIDEAN,
) -> float:
    """
    Normalized warping cost between two aligned sequences.

    Args:
        a, b: 1D value sequences (timestamps already merged and sorted)
        search_radius: Allowed deviation from the diagonal, in samples
        metric: Point distance (only EUCLIDEAN)

    Returns:
        Sum of |a_i - b_j| along the warping path divided by its length,
        so a constant offset d costs d at any series length. inf if either
        side is empty.
    """
    if metric is not DistanceMetric.EUCLIDEAN:
        raise ValueError(f"Unsupported distance metric: {metric}")
    if search_radius < 0:
        raise ValueError(f"search_radius must be >= 0, got {search_radius}")

    a = np.ascontiguousarray(a, dtype=np.float64).ravel()
    b = np.ascontiguousarray(b, dtype=np.float64).ravel()
    if len(a) == 0 or len(b) == 0:
        return float("inf")

    # window=1 is the (length-adjusted) diagonal only
    _, paths = dtw.warping_paths(a, b, window=search_radius + 1, inner_dist="euclidean")
    path = np.asarray(dtw.best_path(paths))
    # sum of point distances along the path, per step
    cost = np.abs(a[path[:, 0]] - b[path[:, 1]]).sum()
    return float(cost) / len(path)
