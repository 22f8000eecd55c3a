"""
Percentile primitive.

Rank-based statistic over an unordered sample. The estimator places the
p-th percentile at rank p * (n + 1) and linearly interpolates between the
bracketing order statistics (Hyndman & Fan type 6), clamping to the sample
minimum / maximum outside [1, n].
"""

import numpy as np


def evaluate(values, p: float) -> float:
    """
    Compute the p-th percentile of values.

    Args:
        values: Numeric sample, any order. Not modified.
        p: Quantile in [0, 1]

    Returns:
        Interpolated percentile (float)

    Raises:
        ValueError: empty sample or p outside [0, 1]
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"Percentile must be in [0, 1], got {p}")

    y = np.asarray(values, dtype=np.float64).ravel()
    if len(y) == 0:
        raise ValueError("Percentile of an empty sample is undefined")

    # np.percentile sorts a copy
    return float(np.percentile(y, p * 100.0, method="weibull"))
