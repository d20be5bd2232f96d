"""Reordering operations on sequences: sorting, shuffling, permutations."""

from __future__ import annotations

import random
from typing import Any, Callable, Iterable, Optional, TypeVar

from sequekit.sequence import Seque

V = TypeVar("V")


def _replace(seq: Seque, values: Iterable[Any]) -> None:
    """Overwrite the contents of ``seq`` with ``values``."""
    items = list(values)
    seq.resize(len(items))
    for position, value in enumerate(items):
        seq[position] = value


def order(seq: Seque[V]) -> Seque[int]:
    """Return the positions of ``seq`` arranged so their values ascend.

    Equal values keep their original relative order.
    """
    return Seque(sorted(range(len(seq)), key=seq.__getitem__))


def sample(seq: Seque[V], size: int, rng: Optional[random.Random] = None) -> Seque[V]:
    """Pick ``size`` distinct positions at random, keeping their relative order.

    A ``size`` larger than the sequence is clamped to its length.
    """
    if size < 0:
        raise ValueError(f"sample size must be non-negative, got {size}")
    rng = rng if rng is not None else random.Random()
    size = min(size, len(seq))
    chosen = sorted(rng.sample(range(len(seq)), size))
    return Seque(seq[i] for i in chosen)


def sort(seq: Seque[V], key: Optional[Callable[[V], Any]] = None) -> None:
    """Sort ``seq`` in place, stably, optionally by ``key``."""
    _replace(seq, sorted(seq, key=key))


def shuffle(seq: Seque[V], rng: Optional[random.Random] = None) -> None:
    """Shuffle ``seq`` in place."""
    rng = rng if rng is not None else random.Random()
    items = list(seq)
    rng.shuffle(items)
    _replace(seq, items)


def reverse(seq: Seque[V]) -> None:
    """Reverse ``seq`` in place."""
    _replace(seq, reversed(list(seq)))


def rotate(seq: Seque[V], index: int) -> None:
    """Rotate ``seq`` left so that the element at ``index`` comes first.

    An ``index`` past the end is clamped to the length, leaving ``seq`` as it is.
    """
    if index < 0:
        raise IndexError(f"sek: index {index} is negative.")
    items = list(seq)
    index = min(index, len(items))
    _replace(seq, items[index:] + items[:index])


def next_permutation(seq: Seque[V]) -> bool:
    """Advance ``seq`` to its next lexicographic permutation.

    Returns False, leaving the elements in ascending order, when ``seq`` was
    already the last permutation.
    """
    items = list(seq)
    pivot = len(items) - 2
    while pivot >= 0 and not items[pivot] < items[pivot + 1]:
        pivot -= 1
    if pivot < 0:
        items.reverse()
        _replace(seq, items)
        return False
    successor = len(items) - 1
    while not items[pivot] < items[successor]:
        successor -= 1
    items[pivot], items[successor] = items[successor], items[pivot]
    items[pivot + 1:] = reversed(items[pivot + 1:])
    _replace(seq, items)
    return True


def prev_permutation(seq: Seque[V]) -> bool:
    """Step ``seq`` back to its previous lexicographic permutation.

    Returns False, leaving the elements in descending order, when ``seq`` was
    already the first permutation.
    """
    items = list(seq)
    pivot = len(items) - 2
    while pivot >= 0 and not items[pivot + 1] < items[pivot]:
        pivot -= 1
    if pivot < 0:
        items.reverse()
        _replace(seq, items)
        return False
    predecessor = len(items) - 1
    while not items[predecessor] < items[pivot]:
        predecessor -= 1
    items[pivot], items[predecessor] = items[predecessor], items[pivot]
    items[pivot + 1:] = reversed(items[pivot + 1:])
    _replace(seq, items)
    return True


def unique(sorted_seq: Seque[V]) -> None:
    """Remove consecutive repeated elements in place, keeping the first of each run."""
    kept: list[V] = []
    for value in sorted_seq:
        if not kept or not kept[-1] == value:
            kept.append(value)
    _replace(sorted_seq, kept)


def sort_unique(seq: Seque[V]) -> None:
    """Sort ``seq`` and drop duplicate values, in place."""
    sort(seq)
    unique(seq)