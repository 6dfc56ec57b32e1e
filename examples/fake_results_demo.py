"""Demonstration of the fake_stats generators.

This script demonstrates:
1. Correlated data that shows exactly the relationship you wanted
2. P-values that clear the 0.05 bar
3. Effect sizes that look practically significant

Run with: python examples/fake_results_demo.py
"""

import numpy as np

from fake_stats.pandas import fake_correlation_df
from fake_stats.synthetic import (
    STUDY_HOURS_VS_SCORE_SCENARIO,
    check_correlation_near_target,
    check_effect_sizes_large,
    check_p_values_significant,
    fake_effect_size,
    fake_significance,
    generate_correlated_pairs,
)


def demo_correlation():
    """Generate pairs with a chosen correlation and confirm it."""
    print("\n" + "=" * 80)
    print("DEMO 1: Fake Correlation")
    print("=" * 80)

    pairs = generate_correlated_pairs(STUDY_HOURS_VS_SCORE_SCENARIO, rng=42)
    r = np.corrcoef(pairs.x, pairs.y)[0, 1]
    print(f"Requested r = {STUDY_HOURS_VS_SCORE_SCENARIO.correlation}, observed r = {r:.3f}")
    print(f"  {check_correlation_near_target(pairs, 0.7).message}")

    df = fake_correlation_df(n=50, correlation=-0.8, seed=7)
    print("\nAs a DataFrame:")
    print(df.describe().round(3))


def demo_significance():
    """Make disappointing p-values significant with every method."""
    print("\n" + "=" * 80)
    print("DEMO 2: Fake Significance")
    print("=" * 80)

    real_p_values = [0.12, 0.34, 0.67, 0.89, 0.23]
    print(f"Real p-values: {real_p_values}")
    for method in ("divide", "replace", "cheat"):
        faked = fake_significance(real_p_values, method=method, rng=1)
        check = check_p_values_significant(faked)
        print(f"  {method:>8}: {np.round(faked, 4).tolist()}  ({check.message})")


def demo_effect_size():
    """Inflate small effect sizes."""
    print("\n" + "=" * 80)
    print("DEMO 3: Fake Effect Sizes")
    print("=" * 80)

    real_effects = [0.05, 0.12, -0.08, 0.03, 0.15]
    print(f"Real effect sizes: {real_effects}")
    for method in ("multiply", "replace", "cohen"):
        faked = fake_effect_size(real_effects, method=method, rng=1)
        check = check_effect_sizes_large(faked, original=real_effects)
        print(f"  {method:>8}: {np.round(faked, 3).tolist()}  ({check.message})")


def main():
    demo_correlation()
    demo_significance()
    demo_effect_size()

    print("\n" + "=" * 80)
    print("ALL DEMONSTRATIONS COMPLETED")
    print("=" * 80)


if __name__ == "__main__":
    main()
