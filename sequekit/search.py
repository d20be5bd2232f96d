"""Searching sequences by predicate, by value and by sort order."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Callable, TypeVar

from sequekit.sequence import Seque

V = TypeVar("V")


def all_satisfy(seq: Seque[V], predicate: Callable[[V], bool]) -> bool:
    """Return True when ``predicate`` holds for every element (or there are none)."""
    return all(predicate(value) for value in seq)


def indices_where(seq: Seque[V], predicate: Callable[[V], bool]) -> Seque[int]:
    """Return, in ascending order, the positions whose elements satisfy ``predicate``."""
    return Seque(position for position, value in enumerate(seq) if predicate(value))


def indices_of_value(seq: Seque[V], value: V, order: Seque[int]) -> Seque[int]:
    """Find every position of ``value`` in ``seq`` using its sort ``order``.

    ``order`` lists the positions of ``seq`` so that their values ascend, as
    produced by :func:`sequekit.ordering.order`. The matching positions are
    returned in the order they appear in ``order``.
    """
    if not len(seq):
        return Seque()
    positions = list(order)[: len(seq)]
    key = seq.__getitem__
    low = bisect_left(positions, value, key=key)
    high = bisect_right(positions, value, lo=low, key=key)
    return Seque(positions[low:high])


def indices_of_sorted_value(sorted_seq: Seque[V], value: V) -> Seque[int]:
    """Return the positions holding ``value`` in an ascending sequence."""
    items = list(sorted_seq)
    low = bisect_left(items, value)
    high = bisect_right(items, value, lo=low)
    return Seque(range(low, high))


def duplicate_indices(seq: Seque[V], order: Seque[int]) -> Seque[int]:
    """Return the positions of repeated values, walking ``seq`` in sort ``order``.

    Within each run of equal values along ``order`` the first position is
    kept out; every later position of the run is reported.
    """
    duplicates: Seque[int] = Seque()
    positions = iter(order)
    first = next(positions, None)
    if first is None:
        return duplicates
    last_value = seq[first]
    for position in positions:
        current = seq[position]
        if current == last_value:
            duplicates.append(position)
        else:
            last_value = current
    return duplicates


def indices_from_order(
    seq: Seque[V], order: Seque[int]
) -> tuple[Seque[int], Seque[int]]:
    """Number the distinct values of ``seq`` using its sort ``order``.

    Returns ``(old_from_new, new_from_old)``. ``new_from_old`` lists, in
    ascending position, one representative position per distinct value: the
    first position of each run of equal values along ``order``.
    ``old_from_new[i]`` is the number of the distinct value at position ``i``,
    that is, the index in ``new_from_old`` of its representative.
    """
    total = len(seq)
    if not total:
        return Seque(), Seque()
    representative = [0] * total
    positions = list(order)[:total]
    first = positions[0]
    representative[first] = first
    for previous, current in zip(positions, positions[1:]):
        if seq[current] == seq[previous]:
            representative[current] = first
        else:
            representative[current] = current
            first = current
    new_from_old = Seque(
        position for position, rep in enumerate(representative) if rep == position
    )
    number_of = {rep: number for number, rep in enumerate(new_from_old)}
    old_from_new = Seque(number_of[rep] for rep in representative)
    return old_from_new, new_from_old


def insertion_index(sorted_seq: Seque[V], value: V) -> int:
    """Return the first position at which ``value`` keeps ``sorted_seq`` ascending."""
    return bisect_left(list(sorted_seq), value)


def insert_sorted(sorted_seq: Seque[V], value: V) -> int:
    """Insert ``value`` into an ascending sequence and return where it went."""
    position = insertion_index(sorted_seq, value)
    sorted_seq.insert(position, value)
    return position