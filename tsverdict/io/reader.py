"""
Reader — builds MetricTimeSeries collections from long-format frames.

One row per observation:

    host | env  | timestamp | value
    a    | prod | 1000      | 0.5
"""

from pathlib import Path
from typing import List, Sequence

import polars as pl

from tsverdict.core.timeseries import MetricTimeSeries


def series_from_frame(
    df: pl.DataFrame,
    key_columns: Sequence[str],
    time_column: str = "timestamp",
    value_column: str = "value",
) -> List[MetricTimeSeries]:
    """
    Group a long-format frame into one series per distinct key tuple.

    Args:
        df: Observations
        key_columns: Columns identifying a series; become string attributes
        time_column: Integer timestamp column
        value_column: Numeric value column

    Returns:
        Series in first-seen key order. join_key is "col=value,col=value".
    """
    key_columns = list(key_columns)
    missing = [c for c in key_columns + [time_column, value_column] if c not in df.columns]
    if missing:
        raise ValueError(f"Missing columns: {missing}. Available: {df.columns}")

    if df.height == 0:
        return []

    if not key_columns:
        return [MetricTimeSeries(df[time_column].to_numpy(), df[value_column].to_numpy())]

    series = []
    for part in df.partition_by(key_columns, maintain_order=True):
        first = part.row(0, named=True)
        attributes = {c: str(first[c]) for c in key_columns}
        join_key = ",".join(f"{c}={attributes[c]}" for c in key_columns)
        series.append(MetricTimeSeries(
            part[time_column].cast(pl.Int64).to_numpy(),
            part[value_column].cast(pl.Float64).to_numpy(),
            attributes,
            join_key,
        ))
    return series


def load_series(
    data_path: str,
    key_columns: Sequence[str],
    time_column: str = "timestamp",
    value_column: str = "value",
) -> List[MetricTimeSeries]:
    """Read a parquet file and group it with series_from_frame()."""
    p = Path(data_path)
    if not p.is_file():
        raise FileNotFoundError(f"No parquet file at {data_path}")
    df = pl.read_parquet(str(p))
    return series_from_frame(df, key_columns, time_column, value_column)
