"""
Outlier analysis (box-plot rule).

An outlier is any value above q3 + 1.5 * (q3 - q1). Only the upper tail is
checked. An empty series yields False.

Query: metric{outlier}
"""

from dataclasses import dataclass
from typing import Sequence

from tsverdict.core.base import AnalysisFunction, ConfigurationError
from tsverdict.primitives.percentile import evaluate as percentile

LOWER_QUARTILE = 0.25
UPPER_QUARTILE = 0.75
IQR_MULTIPLIER = 1.5


def upper_fence(values) -> float:
    """q3 + 1.5 * IQR for a non-empty sample."""
    q1 = percentile(values, LOWER_QUARTILE)
    q3 = percentile(values, UPPER_QUARTILE)
    return (q3 - q1) * IQR_MULTIPLIER + q3


@dataclass(frozen=True)
class Outlier(AnalysisFunction):
    """Parameterless; all instances are equal."""

    function_name = "outlier"

    @classmethod
    def from_arguments(cls, args: Sequence[str] = ()) -> "Outlier":
        if args:
            raise ConfigurationError(cls.function_name, f"takes no arguments, got {list(args)}")
        return cls()

    def execute(self, ts, ctx) -> None:
        # No data and no outlier are reported the same way
        if ts.is_empty():
            ctx.add(self, False, None)
            return

        values = ts.values
        threshold = upper_fence(values)

        # original order; first exceedance decides
        for value in values:
            if value > threshold:
                ctx.add(self, True, None)
                return

        ctx.add(self, False, None)
