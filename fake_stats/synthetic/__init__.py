"""Synthetic statistics generation and validation utilities.

This package produces correlated data, significant-looking p-values and
large-looking effect sizes on demand, plus checks confirming the output
hits its target.
"""

from .correlation import (
    CorrelationConfig,
    PairedSeries,
    fake_correlation,
    generate_correlated_pairs,
)
from .significance import SignificanceMethod, fake_significance
from .effect_size import COHEN_BENCHMARKS, EffectSizeMethod, fake_effect_size
from .validation import (
    ValidationResult,
    check_paired_lengths,
    check_correlation_near_target,
    check_moments_near_target,
    check_p_values_significant,
    check_effect_sizes_large,
)
from .scenarios import (
    BASELINE_SCENARIO,
    STRONG_POSITIVE_SCENARIO,
    STRONG_NEGATIVE_SCENARIO,
    PERFECT_POSITIVE_SCENARIO,
    PERFECT_NEGATIVE_SCENARIO,
    NULL_SCENARIO,
    STUDY_HOURS_VS_SCORE_SCENARIO,
    SCENARIOS,
)

__all__ = [
    "CorrelationConfig",
    "PairedSeries",
    "fake_correlation",
    "generate_correlated_pairs",
    "SignificanceMethod",
    "fake_significance",
    "COHEN_BENCHMARKS",
    "EffectSizeMethod",
    "fake_effect_size",
    "ValidationResult",
    "check_paired_lengths",
    "check_correlation_near_target",
    "check_moments_near_target",
    "check_p_values_significant",
    "check_effect_sizes_large",
    "BASELINE_SCENARIO",
    "STRONG_POSITIVE_SCENARIO",
    "STRONG_NEGATIVE_SCENARIO",
    "PERFECT_POSITIVE_SCENARIO",
    "PERFECT_NEGATIVE_SCENARIO",
    "NULL_SCENARIO",
    "STUDY_HOURS_VS_SCORE_SCENARIO",
    "SCENARIOS",
]
