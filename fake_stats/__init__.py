"""Statistics that agree with you: correlations, p-values and effect sizes."""

from fake_stats.errors import DegenerateInputError, InvalidArgumentError
from fake_stats.synthetic import (
    CorrelationConfig,
    EffectSizeMethod,
    PairedSeries,
    SignificanceMethod,
    fake_correlation,
    fake_effect_size,
    fake_significance,
    generate_correlated_pairs,
)

__version__ = "0.1.0"

__all__ = [
    "DegenerateInputError",
    "InvalidArgumentError",
    "CorrelationConfig",
    "EffectSizeMethod",
    "PairedSeries",
    "SignificanceMethod",
    "fake_correlation",
    "fake_effect_size",
    "fake_significance",
    "generate_correlated_pairs",
]
