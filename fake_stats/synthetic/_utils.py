"""Shared helpers for the synthetic generators."""

from __future__ import annotations

import math
import numbers
from enum import Enum
from typing import Sequence, TypeVar

import numpy as np

from fake_stats.errors import InvalidArgumentError

RandomSource = np.random.Generator | int | None

MethodT = TypeVar("MethodT", bound=Enum)


def check_seed(seed: object, name: str = "seed") -> None:
    """Reject anything that is not ``None`` or a non-negative integer."""
    if seed is None:
        return
    if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
        raise InvalidArgumentError(f"{name} must be an integer or None, got {seed!r}")
    if seed < 0:
        raise InvalidArgumentError(f"{name} must be >= 0, got {seed}")


def resolve_rng(rng: RandomSource = None) -> np.random.Generator:
    """Return a ``numpy.random.Generator`` for a single call.

    A Generator is used as-is, a non-negative int seeds a fresh generator and
    ``None`` draws fresh OS entropy. The legacy global ``np.random`` state is
    never touched.
    """
    if isinstance(rng, np.random.Generator):
        return rng
    if rng is None or isinstance(rng, (int, np.integer)):
        check_seed(rng, "rng")
        return np.random.default_rng(rng)
    raise InvalidArgumentError(
        f"rng must be a numpy Generator, an int seed or None, got {type(rng).__name__}"
    )


def check_finite_real(value: object, name: str) -> float:
    """Return ``value`` as a float, rejecting non-real and non-finite input."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgumentError(f"{name} must be a real number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidArgumentError(f"{name} must be finite, got {value}")
    return float(value)


def coerce_method(method_type: type[MethodT], method: MethodT | str) -> MethodT:
    """Map a method tag (enum member or its string value) onto ``method_type``."""
    try:
        return method_type(method)
    except ValueError:
        choices = ", ".join(repr(m.value) for m in method_type)
        raise InvalidArgumentError(
            f"Unknown method {method!r}; choose from {choices}"
        ) from None


def as_float_array(values: Sequence[float] | np.ndarray, name: str) -> np.ndarray:
    """Copy ``values`` into a finite 1-D float array."""
    try:
        arr = np.array(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"{name} must be numeric: {exc}") from None
    if arr.ndim != 1:
        raise InvalidArgumentError(f"{name} must be one-dimensional, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise InvalidArgumentError(f"{name} must contain only finite values")
    return arr
