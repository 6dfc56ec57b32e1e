"""Pandas DataFrame adapters for fake_stats generators."""

from .correlation import (
    paired_series_to_dataframe,
    dataframe_to_paired_series,
    fake_correlation_df,
)

__all__ = [
    "paired_series_to_dataframe",
    "dataframe_to_paired_series",
    "fake_correlation_df",
]
