"""Unit tests for effect size enhancement."""

import logging

import numpy as np
import pytest

from fake_stats.errors import InvalidArgumentError
from fake_stats.synthetic import (
    COHEN_BENCHMARKS,
    EffectSizeMethod,
    fake_effect_size,
)

LOGGER = "fake_stats.synthetic.effect_size"


class TestMultiplyMethod:
    def test_multiply_hits_cap_exactly(self):
        result = fake_effect_size([0.5], method="multiply", rng=1)
        assert result.tolist() == [2.0]

    def test_multiply_is_default(self):
        effects = [0.05, -0.12]
        assert np.array_equal(
            fake_effect_size(effects, rng=5),
            fake_effect_size(effects, method="multiply", rng=5),
        )

    def test_multiply_bounds_and_sign(self):
        effects = np.array([0.05, -0.12, 0.08, -0.03, 0.15, 0.6, -1.0])
        result = fake_effect_size(effects, method=EffectSizeMethod.MULTIPLY, rng=7)
        magnitude = np.abs(result)
        assert np.all(magnitude >= np.minimum(np.abs(effects) * 4, 2.0))
        assert np.all(magnitude <= np.minimum(np.abs(effects) * 8, 2.0))
        assert np.array_equal(np.sign(result), np.sign(effects))


class TestReplaceMethod:
    def test_replace_bounds_and_sign(self):
        effects = np.array([0.1, -0.2, 0.3, -0.05])
        result = fake_effect_size(effects, target_size=0.8, method="replace", rng=2)
        assert np.all(np.abs(result) >= 0.8)
        assert np.all(np.abs(result) <= 1.5)
        assert np.array_equal(np.sign(result), np.sign(effects))

    def test_replace_target_above_ceiling_raises(self):
        with pytest.raises(InvalidArgumentError, match="replace"):
            fake_effect_size([0.1], target_size=1.6, method="replace")


class TestCohenMethod:
    def test_cohen_uses_large_benchmarks_only(self):
        effects = [0.1, -0.1]
        result = fake_effect_size(effects, method="cohen", target_size=0.8, rng=3)
        assert all(abs(v) in (0.8, 1.2) for v in result)
        assert np.array_equal(np.sign(result), np.sign(effects))

    def test_cohen_draws_from_every_eligible_benchmark(self):
        result = fake_effect_size(
            np.full(500, 0.05), method="cohen", target_size=0.0, rng=11
        )
        assert set(np.abs(result).tolist()) == set(COHEN_BENCHMARKS)

    def test_cohen_without_eligible_benchmark_raises(self):
        with pytest.raises(InvalidArgumentError, match="Cohen benchmark"):
            fake_effect_size([0.1], method="cohen", target_size=1.3)


class TestEdgeCases:
    def test_empty_input_returns_empty(self):
        for method in EffectSizeMethod:
            assert fake_effect_size([], method=method).tolist() == []

    def test_zero_stays_zero(self, caplog):
        with caplog.at_level(logging.WARNING, logger=LOGGER):
            result = fake_effect_size([0.0, 0.2], method="replace", rng=1)
        assert result[0] == 0.0
        assert abs(result[1]) >= 0.8
        assert "remain zero" in caplog.text

    def test_unknown_method_raises(self):
        with pytest.raises(InvalidArgumentError, match="Unknown method"):
            fake_effect_size([0.2], method="exaggerate")

    def test_negative_target_raises(self):
        with pytest.raises(InvalidArgumentError, match="target_size"):
            fake_effect_size([0.2], target_size=-0.5)

    def test_non_finite_effects_raise(self):
        with pytest.raises(InvalidArgumentError, match="finite"):
            fake_effect_size([0.2, float("nan")])

    def test_non_numeric_target_raises(self):
        with pytest.raises(InvalidArgumentError, match="target_size must be a real number"):
            fake_effect_size([0.2], target_size=None)

    def test_negative_seed_raises(self):
        with pytest.raises(InvalidArgumentError, match="rng must be >= 0"):
            fake_effect_size([0.2], method="cohen", rng=-7)

    def test_seeded_calls_are_identical(self):
        effects = [0.1, -0.3, 0.2]
        for method in EffectSizeMethod:
            first = fake_effect_size(effects, method=method, rng=21)
            second = fake_effect_size(effects, method=method, rng=21)
            assert np.array_equal(first, second)


class TestAdvisory:
    def test_warns_when_already_large(self, caplog):
        with caplog.at_level(logging.WARNING, logger=LOGGER):
            fake_effect_size([0.9, 0.1], method="cohen", rng=1)
        assert "already large" in caplog.text

    def test_silent_when_all_small(self, caplog):
        with caplog.at_level(logging.WARNING, logger=LOGGER):
            fake_effect_size([0.1, -0.2], method="cohen", rng=1)
        assert caplog.records == []
