"""
Time series containers.

MetricTimeSeries       - univariate (timestamp, value) pairs with attributes and a join key
MultivariateTimeSeries - strictly increasing timestamps, fixed-width value vectors
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Tuple

import numpy as np


@dataclass(eq=False)
class MetricTimeSeries:
    """
    Raw series as handed over by the query layer.

    Timestamps are not required to be sorted or unique. Equality is identity.
    """
    times: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=np.int64))
    values: np.ndarray = field(default_factory=lambda: np.empty(0, dtype=np.float64))
    attributes: Dict[str, str] = field(default_factory=dict)
    join_key: Any = None

    def __post_init__(self):
        self.times = np.asarray(self.times, dtype=np.int64).ravel()
        self.values = np.asarray(self.values, dtype=np.float64).ravel()
        if len(self.times) != len(self.values):
            raise ValueError(
                f"times and values differ in length: "
                f"{len(self.times)} != {len(self.values)}"
            )

    @classmethod
    def from_points(cls, points, attributes: Optional[Dict[str, str]] = None, join_key: Any = None):
        """Build from an iterable of (timestamp, value) pairs."""
        points = list(points)
        times = [t for t, _ in points]
        values = [v for _, v in points]
        return cls(times, values, dict(attributes or {}), join_key)

    def __len__(self) -> int:
        return len(self.times)

    def size(self) -> int:
        return len(self.times)

    def is_empty(self) -> bool:
        return len(self.times) == 0

    def add(self, timestamp: int, value: float) -> None:
        self.times = np.append(self.times, np.int64(timestamp))
        self.values = np.append(self.values, np.float64(value))

    def sort(self) -> None:
        """Sort points by timestamp, in place. Equal timestamps keep their order."""
        order = np.argsort(self.times, kind="stable")
        self.times = self.times[order]
        self.values = self.values[order]

    def points(self) -> Iterator[Tuple[int, float]]:
        for t, v in zip(self.times, self.values):
            yield int(t), float(v)


class MultivariateTimeSeries:
    """Ordered (timestamp, vector) sequence without duplicate timestamps."""

    def __init__(self, dimension: int = 1):
        if dimension < 1:
            raise ValueError(f"dimension must be >= 1, got {dimension}")
        self.dimension = dimension
        self._times = []
        self._values = []

    def add(self, timestamp: int, values) -> None:
        row = np.asarray(values, dtype=np.float64).ravel()
        if len(row) != self.dimension:
            raise ValueError(
                f"Expected {self.dimension} values per point, got {len(row)}"
            )
        timestamp = int(timestamp)
        if self._times and timestamp <= self._times[-1]:
            raise ValueError(
                f"Timestamps must be strictly increasing: {timestamp} after {self._times[-1]}"
            )
        self._times.append(timestamp)
        self._values.append(row)

    def __len__(self) -> int:
        return len(self._times)

    def size(self) -> int:
        return len(self._times)

    def is_empty(self) -> bool:
        return not self._times

    @property
    def times(self) -> np.ndarray:
        return np.asarray(self._times, dtype=np.int64)

    @property
    def values(self) -> np.ndarray:
        """Values as an (n, dimension) array."""
        if not self._values:
            return np.empty((0, self.dimension), dtype=np.float64)
        return np.vstack(self._values)

    def column(self, i: int = 0) -> np.ndarray:
        return self.values[:, i]

    def points(self) -> Iterator[Tuple[int, np.ndarray]]:
        return zip(list(self._times), [row.copy() for row in self._values])
