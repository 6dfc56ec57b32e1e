"""Pandas DataFrame adapters for correlated pair generation."""

from typing import Optional

import numpy as np
import pandas as pd  # type: ignore

from fake_stats.synthetic._utils import RandomSource
from fake_stats.synthetic.correlation import PairedSeries, fake_correlation

REQUIRED_COLUMNS = ("x", "y")


def paired_series_to_dataframe(pairs: PairedSeries) -> pd.DataFrame:
    """Convert a PairedSeries to a two-column DataFrame.

    Args:
        pairs: Generated x/y series

    Returns:
        DataFrame with float columns ``x`` and ``y``, one row per pair

    Example:
        >>> df = paired_series_to_dataframe(fake_correlation(n=10, seed=1))
        >>> list(df.columns)
        ['x', 'y']
    """
    return pd.DataFrame({"x": np.array(pairs.x), "y": np.array(pairs.y)})


def dataframe_to_paired_series(df: pd.DataFrame) -> PairedSeries:
    """Convert a DataFrame with ``x`` and ``y`` columns back to a PairedSeries.

    Raises:
        ValueError: If a required column is missing or contains nulls
    """
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise ValueError(f"DataFrame missing required columns: {missing}")
    if df[list(REQUIRED_COLUMNS)].isnull().any().any():
        raise ValueError("DataFrame columns x and y must not contain null values")

    x = df["x"].to_numpy(dtype=float, copy=True)
    y = df["y"].to_numpy(dtype=float, copy=True)
    x.setflags(write=False)
    y.setflags(write=False)
    return PairedSeries(x=x, y=y)


def fake_correlation_df(
    n: int = 100,
    correlation: float = 0.8,
    mean_x: float = 0.0,
    mean_y: float = 0.0,
    sd_x: float = 1.0,
    sd_y: float = 1.0,
    *,
    rng: RandomSource = None,
    seed: Optional[int] = None,
) -> pd.DataFrame:
    """DataFrame variant of :func:`fake_stats.synthetic.fake_correlation`."""
    pairs = fake_correlation(
        n=n,
        correlation=correlation,
        mean_x=mean_x,
        mean_y=mean_y,
        sd_x=sd_x,
        sd_y=sd_y,
        rng=rng,
        seed=seed,
    )
    return paired_series_to_dataframe(pairs)
