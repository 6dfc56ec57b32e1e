"""Exception types raised by the fake_stats generators."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A parameter lies outside its valid domain.

    Raised for correlations outside [-1, 1], negative standard deviations,
    non-positive sample sizes, out-of-range p-values and unknown method names.
    """


class DegenerateInputError(ValueError):
    """The inputs look valid but the requested computation is undefined.

    For example, sample standardisation of a single observation.
    """
