#!/usr/bin/env python3
"""Time each configured algorithm on whitespace-delimited words read from stdin."""

import argparse
import logging
import sys
from typing import TextIO

from benchmark import NotSortedError, measure_time
from config import Config, load_config, setup_logging
from sortable import Words
from sorts import Algorithm

log = logging.getLogger(__name__)


def read_words(stream: TextIO) -> list[str]:
    """Split the whole stream on whitespace. Read errors propagate to the caller."""
    words = []
    for line in stream:
        words.extend(line.split())
    return words


def measure_words(words: Words, alg: Algorithm, display: bool = False) -> str:
    """Sort a copy of `words` and return the report line(s) for it."""
    try:
        elapsed = measure_time(alg, words.copy(), display)
    except NotSortedError as e:
        log.error("%s", e)
        return f"{alg}: {e.elapsed:.6f}s\nError: not sorted"
    return f"{alg}: {elapsed:.6f}s"


def run(config: Config, stream: TextIO) -> int:
    try:
        words = Words(read_words(stream))
    except (OSError, UnicodeDecodeError) as e:
        log.error("Could not read words: %s", e)
        return 1

    print(f"Len: {len(words)}")
    for alg in config.word_algorithms:
        print(measure_words(words, alg, config.show))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Time sorting algorithms on words read from stdin")
    parser.add_argument("--config", "-c", default=None, help="Config YAML path")
    parser.add_argument("--algorithms", "-a", nargs="+", default=None, help="Algorithms to run (overrides config)")
    parser.add_argument("--show", action="store_true", help="Print the sorted words")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)
    config = load_config(parser, args.config)
    if args.algorithms:
        try:
            config.word_algorithms = [Algorithm.parse(name) for name in args.algorithms]
        except ValueError as e:
            parser.error(str(e))
    config.show = config.show or args.show

    setup_logging(config.log, verbose=args.verbose)
    return run(config, sys.stdin)


if __name__ == "__main__":
    sys.exit(main())
