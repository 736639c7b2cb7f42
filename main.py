#!/usr/bin/env python3
"""sortbench: compare two elementary sorting algorithms on random floats."""

import argparse
import logging
import random
import sys

from benchmark import NotSortedError, compare
from config import load_config, setup_logging
from sorts import Algorithm, UnknownAlgorithmError

log = logging.getLogger(__name__)


def algorithm_arg(value: str) -> Algorithm:
    try:
        return Algorithm.parse(value)
    except UnknownAlgorithmError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="sortbench: compare two sorting algorithms on random floats")
    names = ", ".join(alg.value for alg in Algorithm)
    parser.add_argument("alg1", type=algorithm_arg, help=f"First algorithm ({names})")
    parser.add_argument("alg2", type=algorithm_arg, help="Second algorithm")
    parser.add_argument("n", type=positive_int, metavar="N", help="Number of random floats per trial")
    parser.add_argument("trials", type=positive_int, metavar="T", help="Number of trials per algorithm")
    parser.add_argument("--config", "-c", default=None, help="Config YAML path")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (overrides config)")
    parser.add_argument("--show", action="store_true", help="Print every sorted sequence")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log every trial")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = load_config(parser, args.config)

    log_file = setup_logging(config.log, verbose=args.verbose)
    if log_file:
        log.info("Logging to %s", log_file)

    seed = args.seed if args.seed is not None else config.seed
    rng = random.Random(seed)
    log.info("Comparing %s and %s: N=%d T=%d seed=%s", args.alg1, args.alg2, args.n, args.trials, seed)

    try:
        result = compare(args.alg1, args.alg2, args.n, args.trials, rng=rng, display=config.show or args.show)
    except NotSortedError as e:
        log.error("%s", e)
        return 1

    print(result.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
