"""Set algebra on sorted sequences, element-wise mapping and folding."""

from __future__ import annotations

import operator
from functools import reduce as _fold
from typing import Any, Callable, Iterator, TypeVar

from sequekit.sequence import Seque

V = TypeVar("V")
R = TypeVar("R")


def _merge(
    a: Seque[V],
    b: Seque[V],
    *,
    keep_left: bool,
    keep_right: bool,
    keep_common: bool,
) -> Seque[V]:
    """Walk two ascending sequences together, choosing what to keep.

    ``keep_left`` keeps elements found only in ``a`` (including its tail),
    ``keep_right`` those found only in ``b``, and ``keep_common`` one copy,
    taken from ``a``, of each element matched in both. Repeated values are
    matched one for one, so the operations act on multisets.
    """
    left, right = list(a), list(b)
    result: list[V] = []
    i = j = 0
    while i < len(left) and j < len(right):
        x, y = left[i], right[j]
        if x < y:
            if keep_left:
                result.append(x)
            i += 1
        elif y < x:
            if keep_right:
                result.append(y)
            j += 1
        else:
            if keep_common:
                result.append(x)
            i += 1
            j += 1
    if keep_left:
        result.extend(left[i:])
    if keep_right:
        result.extend(right[j:])
    return Seque(result)


def intersection(a: Seque[V], b: Seque[V]) -> Seque[V]:
    """Return the ascending elements present in both ascending sequences."""
    return _merge(a, b, keep_left=False, keep_right=False, keep_common=True)


def union(a: Seque[V], b: Seque[V]) -> Seque[V]:
    """Return the ascending elements present in either ascending sequence."""
    return _merge(a, b, keep_left=True, keep_right=True, keep_common=True)


def difference(a: Seque[V], b: Seque[V]) -> Seque[V]:
    """Return the ascending elements of ``a`` that are not matched in ``b``."""
    return _merge(a, b, keep_left=True, keep_right=False, keep_common=False)


def symmetric_difference(a: Seque[V], b: Seque[V]) -> Seque[V]:
    """Return the ascending elements found in exactly one of the sequences."""
    return _merge(a, b, keep_left=True, keep_right=True, keep_common=False)


def includes(superset: Seque[V], subset: Seque[V]) -> bool:
    """Return True when every element of ``subset`` is matched in ``superset``.

    Both sequences must be ascending; repeated values must be matched as
    many times as they occur in ``subset``.
    """
    outer: Iterator[V] = iter(superset)
    for wanted in subset:
        for candidate in outer:
            if wanted < candidate:
                return False
            if not candidate < wanted:
                break
        else:
            return False
    return True


def mapped(seq: Seque[V], func: Callable[[V], R]) -> Seque[R]:
    """Return a new sequence holding ``func`` applied to each element."""
    return Seque(func(value) for value in seq)


def mapped_pairs(a: Seque[V], b: Seque[V], func: Callable[[V, V], R]) -> Seque[R]:
    """Apply ``func`` to elements of ``a`` and ``b`` pairwise.

    The result is as long as the shorter of the two sequences.
    """
    return Seque(func(x, y) for x, y in zip(a, b))


def reduce(seq: Seque[V], init: Any, func: Callable[[Any, V], Any]) -> Any:
    """Fold the elements of ``seq`` into ``init`` with ``func``, left to right."""
    return _fold(func, seq, init)


def dot_product(
    a: Seque[V],
    b: Seque[V],
    init: Any = 0,
    sum_func: Callable[[Any, Any], Any] = operator.add,
    prod_func: Callable[[V, V], Any] = operator.mul,
) -> Any:
    """Accumulate ``sum_func(acc, prod_func(a[i], b[i]))`` over all of ``a``.

    ``b`` must hold at least as many elements as ``a``.
    """
    if len(b) < len(a):
        raise ValueError(
            f"second sequence has {len(b)} elements, needs at least {len(a)}"
        )
    accumulator = init
    for x, y in zip(a, b):
        accumulator = sum_func(accumulator, prod_func(x, y))
    return accumulator