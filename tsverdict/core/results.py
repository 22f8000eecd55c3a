"""
Result sink shared by all analysis functions evaluated for one query.

Append-only. Positional order is the append order; downstream consumers index
results by position, so nothing is ever reordered or deduplicated.
"""

import threading
from dataclasses import dataclass
from typing import Any, Iterator, List, Tuple

import polars as pl


@dataclass(frozen=True)
class AnalysisResult:
    """One verdict: (function, outcome, optional join key)."""
    function: Any
    value: bool
    join_key: Any = None


class FunctionCtx:
    """Ordered, lock-guarded collector of AnalysisResult entries."""

    def __init__(self):
        self._lock = threading.Lock()
        self._results: List[AnalysisResult] = []

    def add(self, function, value: bool, join_key=None) -> AnalysisResult:
        result = AnalysisResult(function, bool(value), join_key)
        with self._lock:
            self._results.append(result)
        return result

    @property
    def results(self) -> Tuple[AnalysisResult, ...]:
        """Snapshot in append order."""
        with self._lock:
            return tuple(self._results)

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)

    def __iter__(self) -> Iterator[AnalysisResult]:
        return iter(self.results)

    def __getitem__(self, index: int) -> AnalysisResult:
        with self._lock:
            return self._results[index]

    def for_join_key(self, join_key) -> List[AnalysisResult]:
        """All verdicts recorded against one series, in append order."""
        return [r for r in self.results if r.join_key == join_key]

    def join_keys(self) -> List[Any]:
        """Distinct join keys in first-seen order (None excluded)."""
        seen = []
        for r in self.results:
            if r.join_key is not None and r.join_key not in seen:
                seen.append(r.join_key)
        return seen

    def to_frame(self) -> pl.DataFrame:
        """
        Results as a DataFrame, one row per verdict.

        Columns: function, type, arguments, value, join_key
        """
        rows = [
            {
                'function': getattr(r.function, 'query_name', str(r.function)),
                'type': getattr(r.function, 'type', None),
                'arguments': ", ".join(getattr(r.function, 'arguments', [])),
                'value': r.value,
                'join_key': None if r.join_key is None else str(r.join_key),
            }
            for r in self.results
        ]
        schema = {
            'function': pl.Utf8,
            'type': pl.Utf8,
            'arguments': pl.Utf8,
            'value': pl.Boolean,
            'join_key': pl.Utf8,
        }
        return pl.DataFrame(rows, schema=schema)
