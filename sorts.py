"""Elementary in-place sorts over a Sortable, and the closed set of names they run under."""

from enum import Enum
from typing import Callable, Iterator

from sortable import Sortable


def selection_sort(a: Sortable) -> None:
    n = len(a)
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            if a.less(j, smallest):
                smallest = j
        a.exchange(i, smallest)


def insertion_sort(a: Sortable) -> None:
    n = len(a)
    for i in range(1, n):
        j = i
        while j > 0 and a.less(j, j - 1):
            a.exchange(j, j - 1)
            j -= 1


def bubble_sort(a: Sortable) -> None:
    """Bubble sort that stops after the first pass without an exchange."""
    n = len(a)
    for i in range(n, 1, -1):
        exchanged = False
        for j in range(i - 1):
            if a.less(j + 1, j):
                a.exchange(j + 1, j)
                exchanged = True
        if not exchanged:
            break


def shell_gaps(n: int) -> Iterator[int]:
    """
    Yield the gaps shell_sort uses for n elements, largest first.

    The first gap is the largest term of 1, 4, 13, 40, ... below n / 3 (1 if none is),
    then each gap is the previous one floor-divided by 3, ending with 1.
    """
    h = 1
    # 3h+1 < n/3, kept in integers
    while 3 * (3 * h + 1) < n:
        h = 3 * h + 1
    while h >= 1:
        yield h
        h //= 3


def shell_sort(a: Sortable) -> None:
    n = len(a)
    for h in shell_gaps(n):
        for i in range(h, n):
            j = i
            while j >= h and a.less(j, j - h):
                a.exchange(j, j - h)
                j -= h


class UnknownAlgorithmError(ValueError):
    """Raised for an algorithm name outside the supported set."""

    def __init__(self, name: str):
        self.name = name
        choices = ", ".join(alg.value for alg in Algorithm)
        super().__init__(f"{name} is not implemented (choose from: {choices})")


class Algorithm(Enum):
    SELECTION = "SelectionSort"
    INSERTION = "InsertionSort"
    BUBBLE = "BubbleSort"
    SHELL = "ShellSort"

    @property
    def sort(self) -> Callable[[Sortable], None]:
        return _SORTS[self]

    @classmethod
    def parse(cls, name: "str | Algorithm") -> "Algorithm":
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            raise UnknownAlgorithmError(str(name)) from None

    def __str__(self) -> str:
        return self.value


_SORTS: dict[Algorithm, Callable[[Sortable], None]] = {
    Algorithm.SELECTION: selection_sort,
    Algorithm.INSERTION: insertion_sort,
    Algorithm.BUBBLE: bubble_sort,
    Algorithm.SHELL: shell_sort,
}
