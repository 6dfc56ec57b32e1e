"""Inflate effect sizes until they look practically significant."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Sequence

import numpy as np

from fake_stats.errors import InvalidArgumentError
from fake_stats.synthetic._utils import (
    RandomSource,
    as_float_array,
    check_finite_real,
    coerce_method,
    resolve_rng,
)

logger = logging.getLogger(__name__)

# Cohen's small / medium / large, plus a "very large" step
COHEN_BENCHMARKS = (0.2, 0.5, 0.8, 1.2)
MULTIPLIER_RANGE = (4.0, 8.0)
MAX_MULTIPLIED_SIZE = 2.0
MAX_REPLACED_SIZE = 1.5


class EffectSizeMethod(str, Enum):
    """Supported strategies for enhancing effect sizes."""

    MULTIPLY = "multiply"
    REPLACE = "replace"
    COHEN = "cohen"


def fake_effect_size(
    effect_sizes: Sequence[float] | np.ndarray,
    target_size: float = 0.8,
    method: EffectSizeMethod | str = EffectSizeMethod.MULTIPLY,
    *,
    rng: RandomSource = None,
) -> np.ndarray:
    """Make small effect sizes look impressive.

    The sign of every input is kept. Inputs that are exactly zero have no sign
    and stay at zero; an advisory is logged when that happens.

    Parameters
    ----------
    effect_sizes:
        Observed effect sizes (e.g. Cohen's d).
    target_size:
        Minimum desired magnitude, 0.8 being a "large" effect.
    method:
        - ``multiply``: scale each magnitude by an independent U(4, 8)
          factor, capped at 2.0.
        - ``replace``: draw each magnitude from U(target_size, 1.5).
        - ``cohen``: sample magnitudes with replacement from the benchmarks
          {0.2, 0.5, 0.8, 1.2} that are >= ``target_size``.
    rng:
        Random source.

    Raises
    ------
    InvalidArgumentError
        For an unknown method, non-finite input, a negative ``target_size``
        or a ``target_size`` the chosen method cannot reach.
    """
    method = coerce_method(EffectSizeMethod, method)
    target_size = check_finite_real(target_size, "target_size")
    if target_size < 0:
        raise InvalidArgumentError(
            f"target_size must be >= 0, got {target_size}"
        )
    if method is EffectSizeMethod.REPLACE and target_size > MAX_REPLACED_SIZE:
        raise InvalidArgumentError(
            f"target_size must be <= {MAX_REPLACED_SIZE} for the replace method, "
            f"got {target_size}"
        )
    benchmarks = np.array([b for b in COHEN_BENCHMARKS if b >= target_size])
    if method is EffectSizeMethod.COHEN and benchmarks.size == 0:
        raise InvalidArgumentError(
            f"no Cohen benchmark reaches target_size={target_size} "
            f"(largest is {COHEN_BENCHMARKS[-1]})"
        )
    effects = as_float_array(effect_sizes, "effect_sizes")

    if effects.size == 0:
        return effects

    if np.any(np.abs(effects) >= target_size):
        logger.warning("Some effect sizes are already large. Overachieving detected!")
    if np.any(effects == 0):
        logger.warning(
            "Zero effect sizes have no sign and will remain zero after enhancement"
        )

    sign = np.sign(effects)
    if method is EffectSizeMethod.MULTIPLY:
        multiplier = resolve_rng(rng).uniform(*MULTIPLIER_RANGE, size=effects.size)
        return sign * np.minimum(np.abs(effects) * multiplier, MAX_MULTIPLIED_SIZE)
    if method is EffectSizeMethod.REPLACE:
        return sign * resolve_rng(rng).uniform(
            target_size, MAX_REPLACED_SIZE, size=effects.size
        )
    return sign * resolve_rng(rng).choice(benchmarks, size=effects.size, replace=True)
