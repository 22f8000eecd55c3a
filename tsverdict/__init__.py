"""
tsverdict — analysis functions for a time series query engine.

Public API:
    from tsverdict import Outlier, FastDtw, FunctionCtx, MetricTimeSeries

    ctx = FunctionCtx()
    fn = FastDtw.from_arguments(["compare(env=prod)", "5", "0.4"])
    fn.execute(series, ctx)
    ctx.results

Layers:
    tsverdict.primitives  Math — numpy in, numbers out
    tsverdict.core        Functions — series in, verdicts into the sink
    tsverdict.io          polars frames / parquet -> series
"""

from tsverdict.core import (
    AnalysisFunction,
    AnalysisResult,
    ConfigurationError,
    FastDtw,
    FunctionCtx,
    MetricTimeSeries,
    MultivariateTimeSeries,
    Outlier,
)

__all__ = [
    'AnalysisFunction',
    'AnalysisResult',
    'ConfigurationError',
    'FastDtw',
    'FunctionCtx',
    'MetricTimeSeries',
    'MultivariateTimeSeries',
    'Outlier',
]
