"""Command line entry point: evolve a program for the quadratic demo dataset."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .config import GeneticProperties, ReproductionSelection
from .demos import example_quadratic_discovery
from .errors import ConfigurationError

_DEFAULTS = GeneticProperties()


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="stackgp",
        description="Evolve integer stack programs approximating y = 2*x^2.",
    )
    p.add_argument("--rangeup", type=int, default=_DEFAULTS.range_up, help="Maximum size of initial program (exclusive)")
    p.add_argument("--rangedown", type=int, default=_DEFAULTS.range_down, help="Minimum size of initial program")
    p.add_argument("--pop", type=int, default=_DEFAULTS.population_size, help="Size of population")
    p.add_argument("--gen", type=int, default=200, help="Number of generations")
    p.add_argument("--reproduction", type=float, default=_DEFAULTS.reproduction_rate, help="Reproduction rate")
    p.add_argument("--crossover", type=float, default=_DEFAULTS.cross_over_rate, help="Crossover rate")
    p.add_argument(
        "--addition-mutation",
        type=float,
        default=_DEFAULTS.addition_mutation_rate,
        help="Addition mutation rate",
    )
    p.add_argument(
        "--removal-mutation",
        type=float,
        default=_DEFAULTS.removal_mutation_rate,
        help="Removal mutation rate",
    )
    p.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible run")
    p.add_argument("--elitist", action="store_true", help="Reproduce the best individuals instead of the worst")
    p.add_argument(
        "--max-population",
        type=int,
        default=None,
        help="Keep only the best N individuals after each generation",
    )
    p.add_argument("--samples", type=int, default=100, help="Number of dataset rows")
    verbosity = p.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log every generation")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return p


def props_from_args(args: argparse.Namespace) -> GeneticProperties:
    return GeneticProperties(
        range_up=args.rangeup,
        range_down=args.rangedown,
        population_size=args.pop,
        removal_mutation_rate=args.removal_mutation,
        addition_mutation_rate=args.addition_mutation,
        cross_over_rate=args.crossover,
        reproduction_rate=args.reproduction,
        reproduction_selection=ReproductionSelection.BEST if args.elitist else ReproductionSelection.WORST,
        max_population=args.max_population,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose:
        level = logging.INFO
    elif args.quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.gen < 0:
        parser.error("--gen must be >= 0")
    if args.samples <= 0:
        parser.error("--samples must be > 0")
    try:
        props = props_from_args(args)
    except ConfigurationError as exc:
        parser.error(str(exc))

    example_quadratic_discovery(props, generations=args.gen, seed=args.seed, samples=args.samples)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
