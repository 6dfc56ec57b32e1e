"""Remap p-values so that they fall below a significance threshold."""

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

P_VALUE_FLOOR = 0.001
DIVISOR_RANGE = (3.0, 10.0)


class SignificanceMethod(str, Enum):
    """Supported strategies for faking significance."""

    DIVIDE = "divide"
    REPLACE = "replace"
    CHEAT = "cheat"


def fake_significance(
    p_values: Sequence[float] | np.ndarray,
    target_alpha: float = 0.05,
    method: SignificanceMethod | str = SignificanceMethod.DIVIDE,
    *,
    rng: RandomSource = None,
) -> np.ndarray:
    """Turn disappointing p-values into significant ones.

    Parameters
    ----------
    p_values:
        Observed p-values, each in [0, 1].
    target_alpha:
        Desired significance level. Must exceed ``2 * P_VALUE_FLOOR`` so that
        the ``replace`` interval is non-empty.
    method:
        - ``divide``: divide each value by an independent U(3, 10) factor,
          floored at 0.001.
        - ``replace``: draw each value from U(0.001, target_alpha - 0.001).
        - ``cheat``: return 0.001 everywhere.
    rng:
        Random source: a numpy Generator, an int seed or None.

    Returns
    -------
    np.ndarray
        Array of the same length as ``p_values``. Empty input yields an
        empty array.

    Raises
    ------
    InvalidArgumentError
        For an unknown method, a p-value outside [0, 1] or an invalid
        ``target_alpha``.
    """
    method = coerce_method(SignificanceMethod, method)
    target_alpha = check_finite_real(target_alpha, "target_alpha")
    if not 2 * P_VALUE_FLOOR < target_alpha <= 1.0:
        raise InvalidArgumentError(
            f"target_alpha must lie in ({2 * P_VALUE_FLOOR}, 1], got {target_alpha}"
        )
    p = as_float_array(p_values, "p_values")
    if np.any((p < 0) | (p > 1)):
        raise InvalidArgumentError("p_values must lie in [0, 1]")

    if p.size == 0:
        return p

    if np.any(p < target_alpha):
        logger.warning(
            "Some p-values are already significant (< %s). "
            "Are you sure you need to fake them?",
            target_alpha,
        )

    if method is SignificanceMethod.DIVIDE:
        divisor = resolve_rng(rng).uniform(*DIVISOR_RANGE, size=p.size)
        return np.maximum(p / divisor, P_VALUE_FLOOR)
    if method is SignificanceMethod.REPLACE:
        return resolve_rng(rng).uniform(
            P_VALUE_FLOOR, target_alpha - P_VALUE_FLOOR, size=p.size
        )
    return np.full(p.size, P_VALUE_FLOOR)
