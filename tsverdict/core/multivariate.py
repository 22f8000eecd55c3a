"""
Univariate -> multivariate conversion for the DTW analysis.

Sorts the series by timestamp and collapses runs of equal timestamps into a
single point holding their mean. Dimension is 1.
"""

import numpy as np

from tsverdict.core.timeseries import MetricTimeSeries, MultivariateTimeSeries


def build_multivariate(ts: MetricTimeSeries) -> MultivariateTimeSeries:
    """
    Build a gap-free, duplicate-free multivariate series.

    Note: sorts ts in place.

    Args:
        ts: Raw univariate series

    Returns:
        MultivariateTimeSeries with one point per distinct timestamp
    """
    result = MultivariateTimeSeries(1)
    if ts.is_empty():
        return result

    ts.sort()

    # times are sorted, so each unique timestamp is one contiguous run
    unique_times, starts, counts = np.unique(ts.times, return_index=True, return_counts=True)
    means = np.add.reduceat(ts.values, starts) / counts

    for t, v in zip(unique_times, means):
        result.add(t, [v])
    return result
