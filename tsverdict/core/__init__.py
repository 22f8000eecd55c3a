"""
Analysis functions.

Structure:
    base.py          - AnalysisFunction contract, YAML descriptors, ConfigurationError
    results.py       - FunctionCtx result sink
    timeseries.py    - MetricTimeSeries, MultivariateTimeSeries
    partition.py     - field=value partitioner
    multivariate.py  - univariate -> multivariate aligner
    outlier.py       - box-plot outlier analysis   (+ outlier.yaml)
    fastdtw.py       - pairwise DTW analysis       (+ fastdtw.yaml)

Lifecycle: from_arguments() once, then execute() any number of times,
from any number of threads.
"""

from tsverdict.core.base import AnalysisFunction, ConfigurationError, FunctionConfig
from tsverdict.core.results import AnalysisResult, FunctionCtx
from tsverdict.core.timeseries import MetricTimeSeries, MultivariateTimeSeries
from tsverdict.core.partition import parse_field_match, split_time_series
from tsverdict.core.multivariate import build_multivariate
from tsverdict.core.outlier import Outlier
from tsverdict.core.fastdtw import FastDtw

__all__ = [
    'AnalysisFunction',
    'ConfigurationError',
    'FunctionConfig',
    'AnalysisResult',
    'FunctionCtx',
    'MetricTimeSeries',
    'MultivariateTimeSeries',
    'parse_field_match',
    'split_time_series',
    'build_multivariate',
    'Outlier',
    'FastDtw',
]
