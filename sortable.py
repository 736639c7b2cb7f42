"""Sortable sequences: the capability set the sorting algorithms work through."""

from dataclasses import dataclass, field
from typing import Any, Generic, Protocol, TypeVar


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=SupportsLessThan)


class Sortable(Protocol[T]):
    """Length, strict less-than, swap and read by index. Indices must be in [0, len)."""

    def __len__(self) -> int: ...

    def less(self, i: int, j: int) -> bool: ...

    def exchange(self, i: int, j: int) -> None: ...

    def get(self, i: int) -> T: ...


@dataclass
class SortableList(Generic[T]):
    """A Sortable backed by a plain list. Mutations happen on `items` in place."""

    items: list[T] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def less(self, i: int, j: int) -> bool:
        return self.items[i] < self.items[j]

    def exchange(self, i: int, j: int) -> None:
        self.items[i], self.items[j] = self.items[j], self.items[i]

    def get(self, i: int) -> T:
        return self.items[i]

    def copy(self) -> "SortableList[T]":
        return type(self)(list(self.items))


class Words(SortableList[str]):
    """Strings in lexicographic order."""


class Floats(SortableList[float]):
    """Floats in numeric order."""


def show(seq: Sortable) -> str:
    """Render elements separated by spaces, using each element's own str()."""
    return " ".join(str(seq.get(i)) for i in range(len(seq)))
