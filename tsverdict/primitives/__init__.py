"""
Primitives.

Numbers in, numbers out. No time series types, no result sink.

    percentile   - rank-interpolated percentile
    warping      - DTW alignment engine boundary
"""

from .percentile import evaluate as evaluate_percentile
from .warping import DistanceMetric, align

__all__ = [
    'evaluate_percentile',
    'DistanceMetric',
    'align',
]
