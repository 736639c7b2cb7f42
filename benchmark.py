"""Time sorting algorithms on random floats and compare them."""

import logging
import random
import time
from dataclasses import dataclass

from check import is_sorted
from sortable import Floats, Sortable, show
from sorts import Algorithm

log = logging.getLogger(__name__)


class NotSortedError(RuntimeError):
    """An algorithm returned without leaving its input in order."""

    def __init__(self, algorithm: Algorithm, elapsed: float = 0.0):
        self.algorithm = algorithm
        self.elapsed = elapsed
        super().__init__(f"{algorithm} is not sorted")


@dataclass
class Trial:
    algorithm: Algorithm
    n: int
    trials: int
    total: float = 0.0  # seconds, summed over all trials


@dataclass
class Comparison:
    first: Trial
    second: Trial

    @property
    def ratio(self) -> float:
        """How many times longer the second algorithm took than the first."""
        if self.first.total == 0:
            return float("inf") if self.second.total > 0 else 1.0
        return self.second.total / self.first.total

    def report(self) -> str:
        return (
            f"For {self.first.n} random floats\n"
            f"{self.first.algorithm} is faster than {self.second.algorithm} {self.ratio:.3f}"
        )


def measure_time(alg: Algorithm, a: Sortable, display: bool = False) -> float:
    """Sort `a` in place with `alg`, check the result and return elapsed seconds."""
    start = time.perf_counter()
    alg.sort(a)
    elapsed = time.perf_counter() - start
    if not is_sorted(a):
        raise NotSortedError(alg, elapsed)
    if display:
        print(show(a))
    return elapsed


def random_floats(n: int, rng: random.Random) -> Floats:
    return Floats([rng.random() for _ in range(n)])


def measure_random_floats(
    alg: Algorithm,
    n: int,
    trials: int,
    rng: random.Random | None = None,
    display: bool = False,
) -> Trial:
    """Run `trials` sorts of `n` fresh random floats and sum their times."""
    if n <= 0:
        raise ValueError(f"element count must be positive, got {n}")
    if trials <= 0:
        raise ValueError(f"trial count must be positive, got {trials}")
    rng = rng or random.Random()

    result = Trial(algorithm=alg, n=n, trials=trials)
    for t in range(trials):
        elapsed = measure_time(alg, random_floats(n, rng), display)
        result.total += elapsed
        log.debug("%s trial %d/%d: %.6fs", alg, t + 1, trials, elapsed)
    log.info("%s: %d trials of %d floats in %.6fs", alg, trials, n, result.total)
    return result


def compare(
    alg1: str | Algorithm,
    alg2: str | Algorithm,
    n: int,
    trials: int,
    rng: random.Random | None = None,
    display: bool = False,
) -> Comparison:
    """Time both algorithms on the same kind of data. Names are resolved before any sorting."""
    first = Algorithm.parse(alg1)
    second = Algorithm.parse(alg2)
    rng = rng or random.Random()
    return Comparison(
        first=measure_random_floats(first, n, trials, rng, display),
        second=measure_random_floats(second, n, trials, rng, display),
    )
