import numpy as np
import pytest

from fake_stats.synthetic import (
    BASELINE_SCENARIO,
    NULL_SCENARIO,
    PERFECT_NEGATIVE_SCENARIO,
    PERFECT_POSITIVE_SCENARIO,
    SCENARIOS,
    STRONG_NEGATIVE_SCENARIO,
    CorrelationConfig,
    check_paired_lengths,
    generate_correlated_pairs,
)


@pytest.mark.parametrize("name", sorted(SCENARIOS))
def test_every_scenario_generates(name: str) -> None:
    scenario = SCENARIOS[name]
    pairs = generate_correlated_pairs(scenario, rng=42)
    assert check_paired_lengths(pairs, scenario.n).ok


def test_baseline_matches_default_config() -> None:
    assert BASELINE_SCENARIO == CorrelationConfig()


def test_perfect_scenarios_are_exact() -> None:
    positive = generate_correlated_pairs(PERFECT_POSITIVE_SCENARIO, rng=1)
    negative = generate_correlated_pairs(PERFECT_NEGATIVE_SCENARIO, rng=1)
    assert np.corrcoef(positive.x, positive.y)[0, 1] > 0.999999
    assert np.corrcoef(negative.x, negative.y)[0, 1] < -0.999999


def test_strong_negative_scenario_is_negative() -> None:
    pairs = generate_correlated_pairs(STRONG_NEGATIVE_SCENARIO, rng=8)
    assert np.corrcoef(pairs.x, pairs.y)[0, 1] < -0.5


def test_null_scenario_has_zero_target() -> None:
    assert NULL_SCENARIO.correlation == 0.0
