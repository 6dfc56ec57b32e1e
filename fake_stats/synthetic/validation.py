from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from scipy import stats

from .correlation import CorrelationConfig, PairedSeries


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    message: str = ""


def check_paired_lengths(pairs: PairedSeries, expected_n: int) -> ValidationResult:
    if len(pairs.x) != expected_n or len(pairs.y) != expected_n:
        return ValidationResult(
            False,
            f"expected {expected_n} pairs, got x={len(pairs.x)} y={len(pairs.y)}",
        )
    return ValidationResult(True, f"{expected_n} pairs generated")


def check_correlation_near_target(
    pairs: PairedSeries, target: float, *, tolerance: float = 0.1
) -> ValidationResult:
    """Validate that the sample Pearson correlation is close to ``target``.

    Parameters
    ----------
    pairs:
        Generated series.
    target:
        Requested correlation coefficient.
    tolerance:
        Maximum accepted absolute difference.

    Returns
    -------
    ValidationResult
        Validation result with the observed correlation.
    """
    if len(pairs) < 2:
        return ValidationResult(False, "need at least 2 pairs to measure correlation")
    if np.ptp(pairs.x) == 0 or np.ptp(pairs.y) == 0:
        return ValidationResult(False, "correlation undefined for a constant series")

    r = float(stats.pearsonr(pairs.x, pairs.y)[0])
    diff = abs(r - target)
    if diff > tolerance:
        return ValidationResult(
            False,
            f"correlation differs from target: r={r:.3f} vs {target:.3f} "
            f"(diff={diff:.3f} > {tolerance})",
        )
    return ValidationResult(True, f"correlation near target: r={r:.3f}")


def check_moments_near_target(
    pairs: PairedSeries, config: CorrelationConfig, *, tolerance: float = 0.1
) -> ValidationResult:
    """Validate sample means and standard deviations against the request.

    Differences are measured in units of the requested standard deviation
    (or absolutely when that deviation is zero).

    Parameters
    ----------
    pairs:
        Generated series.
    config:
        The request that produced ``pairs``.
    tolerance:
        Maximum accepted scaled difference for each moment.

    Returns
    -------
    ValidationResult
        Validation result naming the first moment that is off target.
    """
    if len(pairs) < 2:
        return ValidationResult(False, "need at least 2 pairs to measure moments")

    axes = (
        ("x", pairs.x, config.mean_x, config.sd_x),
        ("y", pairs.y, config.mean_y, config.sd_y),
    )
    for axis, values, mean, sd in axes:
        scale = sd if sd > 0 else 1.0
        observed_mean = float(np.mean(values))
        observed_sd = float(np.std(values, ddof=1))
        if abs(observed_mean - mean) / scale > tolerance:
            return ValidationResult(
                False,
                f"mean of {axis} off target: {observed_mean:.3f} vs {mean:.3f}",
            )
        if abs(observed_sd - sd) / scale > tolerance:
            return ValidationResult(
                False,
                f"sd of {axis} off target: {observed_sd:.3f} vs {sd:.3f}",
            )
    return ValidationResult(True, "means and standard deviations near target")


def check_p_values_significant(
    p_values: Sequence[float] | np.ndarray, *, alpha: float = 0.05
) -> ValidationResult:
    values = np.asarray(p_values, dtype=float)
    if values.size == 0:
        return ValidationResult(True, "no p-values to validate")
    if np.any((values < 0) | (values > 1)):
        return ValidationResult(False, "p-values must lie in [0, 1]")

    not_significant = int(np.sum(values >= alpha))
    if not_significant:
        return ValidationResult(
            False, f"{not_significant} of {values.size} p-values are >= {alpha}"
        )
    return ValidationResult(True, f"all {values.size} p-values are below {alpha}")


def check_effect_sizes_large(
    effect_sizes: Sequence[float] | np.ndarray,
    *,
    target_size: float = 0.8,
    original: Sequence[float] | np.ndarray | None = None,
) -> ValidationResult:
    """Validate that effect sizes reach ``target_size`` in magnitude.

    When ``original`` is given the check also requires that every value
    keeps the sign of its original counterpart.
    """
    values = np.asarray(effect_sizes, dtype=float)
    if values.size == 0:
        return ValidationResult(True, "no effect sizes to validate")

    small = int(np.sum(np.abs(values) < target_size))
    if small:
        return ValidationResult(
            False, f"{small} of {values.size} effect sizes are below {target_size}"
        )

    if original is not None:
        before = np.asarray(original, dtype=float)
        if before.shape != values.shape:
            return ValidationResult(
                False, f"shape mismatch: {before.shape} vs {values.shape}"
            )
        if np.any(np.sign(before) != np.sign(values)):
            return ValidationResult(False, "enhanced effect sizes changed sign")

    return ValidationResult(
        True, f"all {values.size} effect sizes are at least {target_size}"
    )
