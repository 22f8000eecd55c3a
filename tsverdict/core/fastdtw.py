"""
FastDTW similarity analysis.

Query: metric{fastdtw:compare(field=value;field=value),5,0.4}

The input series are split into a left group (matching the compare fields)
and a right group. Every left series is compared with every right series;
each pair yields its own verdict

    normalized warping cost <= max cost

keyed by the LEFT series' join key. Cost is O(|left| * |right|) DTW calls,
with no early exit.
"""

import logging
import math
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, List, Mapping, Sequence

from tsverdict.core.base import AnalysisFunction, ConfigurationError
from tsverdict.core.multivariate import build_multivariate
from tsverdict.core.partition import parse_field_match, split_time_series
from tsverdict.primitives.warping import DistanceMetric, align

logger = logging.getLogger(__name__)


_RADIUS = re.compile(r"\+?\d+", re.ASCII)
_COST = re.compile(r"\+?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def _parse_radius(token: str) -> int:
    if not _RADIUS.fullmatch(token):
        raise ConfigurationError("fastdtw", f"search radius is not a non-negative integer: '{token}'")
    return int(token)


def _parse_cost(token: str) -> float:
    if not _COST.fullmatch(token):
        raise ConfigurationError("fastdtw", f"max warping cost is not a non-negative number: '{token}'")
    cost = float(token)
    if not math.isfinite(cost):
        raise ConfigurationError("fastdtw", f"max warping cost must be finite, got {token}")
    return cost


@dataclass(frozen=True)
class FastDtw(AnalysisFunction):
    """
    Pairwise DTW classifier over a partitioned series collection.

    Attributes:
        left_side_values: Field spec selecting the left group
        search_radius: Warping window passed to the aligner
        max_normalized_warping_cost: Inclusive similarity threshold
        distance_metric: Point distance (EUCLIDEAN, not configurable from a query)
        aligner: align(a, b, radius, metric) -> cost; excluded from equality
    """

    function_name = "fastdtw"

    left_side_values: Mapping[str, str]
    search_radius: int
    max_normalized_warping_cost: float
    distance_metric: DistanceMetric = DistanceMetric.EUCLIDEAN
    aligner: Callable = field(default=align, compare=False, repr=False)

    def __post_init__(self):
        # read-only view over a private copy
        object.__setattr__(self, "left_side_values", MappingProxyType(dict(self.left_side_values)))

    def __hash__(self):
        return hash((
            frozenset(self.left_side_values.items()),
            self.search_radius,
            self.max_normalized_warping_cost,
            self.distance_metric,
        ))

    @classmethod
    def from_arguments(cls, args: Sequence[str], aligner: Callable = align) -> "FastDtw":
        """
        Parse [compare(...), radius, max cost].

        Raises:
            ConfigurationError: missing or malformed argument
        """
        if len(args) != 3:
            raise ConfigurationError(
                cls.function_name,
                f"expected 3 arguments (compare fields, search radius, max warping cost), got {len(args)}",
            )

        left_side_values = parse_field_match(args[0], cls.function_name)
        search_radius = _parse_radius(args[1])
        max_cost = _parse_cost(args[2])

        logger.debug(
            f"Configured fastdtw: fields={left_side_values}, "
            f"radius={search_radius}, max_cost={max_cost}"
        )
        return cls(
            left_side_values=left_side_values,
            search_radius=search_radius,
            max_normalized_warping_cost=max_cost,
            aligner=aligner,
        )

    def execute(self, series: Sequence, ctx) -> None:
        left, right = split_time_series(series, self.left_side_values)

        for left_ts in left:
            compare = build_multivariate(left_ts).column(0)
            for right_ts in right:
                other = build_multivariate(right_ts).column(0)

                cost = self.aligner(compare, other, self.search_radius, self.distance_metric)
                logger.debug(f"fastdtw {left_ts.join_key} vs {right_ts.join_key}: cost={cost:.6f}")

                ctx.add(self, cost <= self.max_normalized_warping_cost, left_ts.join_key)

    @property
    def arguments(self) -> List[str]:
        return [
            f"search radius={self.search_radius}",
            f"max warping cost={self.max_normalized_warping_cost}",
            f"distance function={self.distance_metric.value}",
        ]
