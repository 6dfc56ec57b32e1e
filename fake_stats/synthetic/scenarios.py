"""Pre-configured correlation requests for common demonstrations.

Each scenario is a :class:`CorrelationConfig` describing a relationship that
someone might want their data to show.

Examples
--------
>>> from fake_stats.synthetic.scenarios import STRONG_POSITIVE_SCENARIO
>>> from fake_stats.synthetic import generate_correlated_pairs
>>>
>>> pairs = generate_correlated_pairs(STRONG_POSITIVE_SCENARIO, rng=42)
"""

from fake_stats.synthetic.correlation import CorrelationConfig

# Default request, same as calling fake_correlation() without arguments
BASELINE_SCENARIO = CorrelationConfig(
    n=100,
    correlation=0.8,
    mean_x=0.0,
    mean_y=0.0,
    sd_x=1.0,
    sd_y=1.0,
    seed=None,
)

# "Our intervention clearly works"
STRONG_POSITIVE_SCENARIO = CorrelationConfig(
    n=100,
    correlation=0.95,
    mean_x=0.0,
    mean_y=0.0,
    sd_x=1.0,
    sd_y=1.0,
    seed=None,
)

# Strong inverse relationship on a smaller sample
STRONG_NEGATIVE_SCENARIO = CorrelationConfig(
    n=50,
    correlation=-0.8,
    mean_x=0.0,
    mean_y=0.0,
    sd_x=1.0,
    sd_y=1.0,
    seed=None,
)

# y is an exact affine function of x
PERFECT_POSITIVE_SCENARIO = CorrelationConfig(
    n=100,
    correlation=1.0,
    mean_x=0.0,
    mean_y=0.0,
    sd_x=1.0,
    sd_y=1.0,
    seed=None,
)

PERFECT_NEGATIVE_SCENARIO = CorrelationConfig(
    n=100,
    correlation=-1.0,
    mean_x=0.0,
    mean_y=0.0,
    sd_x=1.0,
    sd_y=1.0,
    seed=None,
)

# Independent variables, useful as a control
NULL_SCENARIO = CorrelationConfig(
    n=100,
    correlation=0.0,
    mean_x=0.0,
    mean_y=0.0,
    sd_x=1.0,
    sd_y=1.0,
    seed=None,
)

# Realistic-looking units: hours studied vs exam score
STUDY_HOURS_VS_SCORE_SCENARIO = CorrelationConfig(
    n=250,
    correlation=0.7,
    mean_x=12.0,  # hours per week
    mean_y=72.0,  # exam score
    sd_x=4.0,
    sd_y=10.0,
    seed=None,
)

SCENARIOS = {
    "baseline": BASELINE_SCENARIO,
    "strong-positive": STRONG_POSITIVE_SCENARIO,
    "strong-negative": STRONG_NEGATIVE_SCENARIO,
    "perfect-positive": PERFECT_POSITIVE_SCENARIO,
    "perfect-negative": PERFECT_NEGATIVE_SCENARIO,
    "null": NULL_SCENARIO,
    "study-hours-vs-score": STUDY_HOURS_VS_SCORE_SCENARIO,
}
