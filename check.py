"""Verify sort results."""

from sortable import Sortable


def is_sorted(seq: Sortable) -> bool:
    """True unless some element is strictly less than its predecessor."""
    for i in range(1, len(seq)):
        if seq.less(i, i - 1):
            return False
    return True
