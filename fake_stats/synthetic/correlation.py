from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from fake_stats.errors import DegenerateInputError, InvalidArgumentError
from fake_stats.synthetic._utils import (
    RandomSource,
    check_finite_real,
    check_seed,
    resolve_rng,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CorrelationConfig:
    """Parameters for a correlated pair generation request.

    Attributes
    ----------
    n: Number of paired observations to generate (>= 1).
    correlation: Target Pearson correlation coefficient in [-1, 1].
    mean_x: Target mean of the x variable.
    mean_y: Target mean of the y variable.
    sd_x: Target standard deviation of x (>= 0; 0 yields a constant sequence).
    sd_y: Target standard deviation of y (>= 0; 0 yields a constant sequence).
    seed: Optional RNG seed for reproducibility.
    """

    n: int = 100
    correlation: float = 0.8
    mean_x: float = 0.0
    mean_y: float = 0.0
    sd_x: float = 1.0
    sd_y: float = 1.0
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.n, bool) or not isinstance(self.n, (int, np.integer)):
            raise InvalidArgumentError(f"n must be an integer, got {self.n!r}")
        if self.n < 1:
            raise InvalidArgumentError(f"n must be >= 1, got {self.n}")
        for name in ("correlation", "mean_x", "mean_y", "sd_x", "sd_y"):
            check_finite_real(getattr(self, name), name)
        if not -1.0 <= self.correlation <= 1.0:
            raise InvalidArgumentError(
                f"correlation must lie in [-1, 1], got {self.correlation}"
            )
        if self.sd_x < 0:
            raise InvalidArgumentError(f"sd_x must be >= 0, got {self.sd_x}")
        if self.sd_y < 0:
            raise InvalidArgumentError(f"sd_y must be >= 0, got {self.sd_y}")
        check_seed(self.seed)


@dataclass(frozen=True)
class PairedSeries:
    """Two equally long numeric sequences produced by one generation call."""

    x: np.ndarray
    y: np.ndarray

    def __post_init__(self) -> None:
        if len(self.x) != len(self.y):
            raise ValueError(
                f"x and y must have equal length (got {len(self.x)} and {len(self.y)})"
            )

    def __len__(self) -> int:
        return len(self.x)

    def as_dict(self) -> dict[str, list[float]]:
        """Return JSON-serialisable representation of the pair."""
        return {"x": self.x.tolist(), "y": self.y.tolist()}


def _standardize(values: np.ndarray) -> np.ndarray:
    # Sample moments (ddof=1); a constant sequence maps to all zeros.
    # Checked on the range because the rounded sample sd of a constant
    # sequence need not be exactly zero.
    if np.ptp(values) == 0:
        return np.zeros_like(values)
    return (values - values.mean()) / values.std(ddof=1)


def generate_correlated_pairs(
    config: CorrelationConfig,
    *,
    rng: RandomSource = None,
) -> PairedSeries:
    """Generate ``config.n`` pairs whose correlation approximates the target.

    ``x`` is drawn from a normal distribution with the requested mean and
    standard deviation. ``y`` mixes the sample-standardised ``x`` with fresh
    independent noise so that, for large ``n``::

        y = mean_y + sd_y * (r * z_x + sqrt(1 - r**2) * e)

    has sample correlation ``r`` with ``x``. Because ``z_x`` uses the sample
    mean and standard deviation, the realised correlation is approximate for
    finite ``n``.

    Parameters
    ----------
    config:
        Validated generation request.
    rng:
        Random source. Takes precedence over ``config.seed`` when given.

    Raises
    ------
    DegenerateInputError
        If ``config.n == 1``; a single observation cannot be standardised.
    """
    if config.n == 1:
        raise DegenerateInputError(
            "cannot standardise a single observation; n must be >= 2"
        )

    generator = resolve_rng(rng if rng is not None else config.seed)
    logger.debug(
        "Generating %d pairs with correlation=%s, mean=(%s, %s), sd=(%s, %s)",
        config.n,
        config.correlation,
        config.mean_x,
        config.mean_y,
        config.sd_x,
        config.sd_y,
    )

    x = config.mean_x + config.sd_x * generator.standard_normal(config.n)
    z_x = _standardize(x)
    noise = generator.standard_normal(config.n)

    r = config.correlation
    y = config.mean_y + config.sd_y * (r * z_x + math.sqrt(1.0 - r * r) * noise)

    x.setflags(write=False)
    y.setflags(write=False)
    return PairedSeries(x=x, y=y)


def fake_correlation(
    n: int = 100,
    correlation: float = 0.8,
    mean_x: float = 0.0,
    mean_y: float = 0.0,
    sd_x: float = 1.0,
    sd_y: float = 1.0,
    *,
    rng: RandomSource = None,
    seed: Optional[int] = None,
) -> PairedSeries:
    """Generate x/y data that shows ``correlation`` regardless of reality.

    Convenience wrapper building a :class:`CorrelationConfig` and calling
    :func:`generate_correlated_pairs`.

    Examples
    --------
    >>> pairs = fake_correlation(n=100, correlation=0.95, seed=1)
    >>> len(pairs)
    100
    """
    config = CorrelationConfig(
        n=n,
        correlation=correlation,
        mean_x=mean_x,
        mean_y=mean_y,
        sd_x=sd_x,
        sd_y=sd_y,
        seed=seed,
    )
    return generate_correlated_pairs(config, rng=rng)
