"""Input adapters (polars)."""

from tsverdict.io.reader import series_from_frame, load_series

__all__ = ['series_from_frame', 'load_series']
