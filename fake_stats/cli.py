"""Command line entry points for the fakestats toolkit."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable

from fake_stats.errors import DegenerateInputError, InvalidArgumentError
from fake_stats.synthetic import (
    SCENARIOS,
    CorrelationConfig,
    EffectSizeMethod,
    SignificanceMethod,
    fake_effect_size,
    fake_significance,
    generate_correlated_pairs,
)

logger = logging.getLogger(__name__)

EXIT_INVALID_ARGUMENT = 2


def _write_json(payload: dict[str, Any], output: Path | None) -> None:
    if output:
        output_path = output.resolve()
        cwd = Path.cwd().resolve()
        try:
            output_path.relative_to(cwd)
        except ValueError:
            raise ValueError(
                f"Output path {output_path} must reside within the current working directory"
            )
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8") as fh:
            json.dump(payload, fh, indent=2)
        logger.info(f"Wrote results to {output_path}")
    else:  # stdout fallback enables piping in shell usage.
        json.dump(payload, fp=sys.stdout, indent=2)
        print()


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--seed", type=int, help="Optional RNG seed for reproducible output."
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional path for writing the results as JSON (defaults to stdout).",
    )


def fake_correlation_cli(argv: list[str] | None = None) -> int:
    """Generate x/y pairs with a requested correlation and print them as JSON."""

    parser = argparse.ArgumentParser(description=fake_correlation_cli.__doc__)
    parser.add_argument(
        "--scenario",
        choices=sorted(SCENARIOS),
        help="Start from a preset; explicit options below override its values.",
    )
    parser.add_argument("--n", type=int, help="Number of pairs (default: 100)")
    parser.add_argument(
        "--correlation", type=float, help="Target correlation in [-1, 1] (default: 0.8)"
    )
    parser.add_argument("--mean-x", type=float, help="Mean of x (default: 0)")
    parser.add_argument("--mean-y", type=float, help="Mean of y (default: 0)")
    parser.add_argument("--sd-x", type=float, help="Standard deviation of x (default: 1)")
    parser.add_argument("--sd-y", type=float, help="Standard deviation of y (default: 1)")
    _add_common_arguments(parser)

    args = parser.parse_args(argv)
    base = SCENARIOS[args.scenario] if args.scenario else CorrelationConfig()
    overrides = {
        "n": args.n,
        "correlation": args.correlation,
        "mean_x": args.mean_x,
        "mean_y": args.mean_y,
        "sd_x": args.sd_x,
        "sd_y": args.sd_y,
        "seed": args.seed,
    }
    try:
        config = CorrelationConfig(
            **{
                field: getattr(base, field) if value is None else value
                for field, value in overrides.items()
            }
        )
        pairs = generate_correlated_pairs(config)
    except (InvalidArgumentError, DegenerateInputError) as exc:
        logger.error(str(exc))
        return EXIT_INVALID_ARGUMENT

    logger.info(f"Generated {len(pairs)} pairs (target correlation {config.correlation})")
    _write_json(pairs.as_dict(), args.output)
    return 0


def fake_significance_cli(argv: list[str] | None = None) -> int:
    """Make p-values significant and print them as JSON."""

    parser = argparse.ArgumentParser(description=fake_significance_cli.__doc__)
    parser.add_argument("p_values", type=float, nargs="*", help="Observed p-values")
    parser.add_argument(
        "--target-alpha",
        type=float,
        default=0.05,
        help="Desired significance level (default: 0.05)",
    )
    parser.add_argument(
        "--method",
        choices=[item.value for item in SignificanceMethod],
        default=SignificanceMethod.DIVIDE.value,
        help="Faking strategy (default: divide)",
    )
    _add_common_arguments(parser)

    args = parser.parse_args(argv)
    try:
        faked = fake_significance(
            args.p_values, args.target_alpha, args.method, rng=args.seed
        )
    except InvalidArgumentError as exc:
        logger.error(str(exc))
        return EXIT_INVALID_ARGUMENT

    _write_json({"p_values": faked.tolist()}, args.output)
    return 0


def fake_effect_size_cli(argv: list[str] | None = None) -> int:
    """Enlarge effect sizes and print them as JSON."""

    parser = argparse.ArgumentParser(description=fake_effect_size_cli.__doc__)
    parser.add_argument(
        "effect_sizes", type=float, nargs="*", help="Observed effect sizes"
    )
    parser.add_argument(
        "--target-size",
        type=float,
        default=0.8,
        help="Minimum desired effect size (default: 0.8)",
    )
    parser.add_argument(
        "--method",
        choices=[item.value for item in EffectSizeMethod],
        default=EffectSizeMethod.MULTIPLY.value,
        help="Enhancement strategy (default: multiply)",
    )
    _add_common_arguments(parser)

    args = parser.parse_args(argv)
    try:
        enhanced = fake_effect_size(
            args.effect_sizes, args.target_size, args.method, rng=args.seed
        )
    except InvalidArgumentError as exc:
        logger.error(str(exc))
        return EXIT_INVALID_ARGUMENT

    _write_json({"effect_sizes": enhanced.tolist()}, args.output)
    return 0


COMMANDS: dict[str, Callable[[list[str] | None], int]] = {
    "correlation": fake_correlation_cli,
    "significance": fake_significance_cli,
    "effect-size": fake_effect_size_cli,
}


def run(argv: list[str] | None = None) -> int:
    """Dispatch ``fakestats <command> [options]`` to the matching entry point."""

    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] not in COMMANDS:
        print(
            f"usage: fakestats {{{','.join(COMMANDS)}}} [options]", file=sys.stderr
        )
        return EXIT_INVALID_ARGUMENT
    return COMMANDS[argv[0]](argv[1:])


def main() -> None:
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=logging.INFO)
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main()
