"""Canonical labelings of index sequences under a group of permutations."""

from __future__ import annotations

from typing import Iterable, Sequence

from sequekit.sequence import Seque

UNSET = -1

Permutation = Sequence[int]
Group = Iterable[Permutation]


def is_valid_full_permutation(position: Sequence[int], group: Group) -> bool:
    """Return True when ``position`` equals one of the permutations of ``group``."""
    wanted = list(position)
    return any(
        len(perm) == len(wanted) and list(perm) == wanted for perm in group
    )


def can_extend(position: Sequence[int], up_to: int, group: Group) -> bool:
    """Return True when some permutation agrees with ``position`` up to ``up_to``.

    Slots holding :data:`UNSET` match anything; permutations whose length
    differs from ``position`` are ignored.
    """
    assigned = list(position)
    prefix = assigned[: up_to + 1]
    for perm in group:
        if len(perm) != len(assigned):
            continue
        if all(slot == UNSET or slot == perm[k] for k, slot in enumerate(prefix)):
            return True
    return False


def _assign_slot(
    level: int,
    position: list[int],
    sorted_indices: list[int],
    used: list[bool],
    group: list[list[int]],
) -> bool:
    """Fill ``position`` from ``level`` onward with the first consistent choice."""
    if level == len(position):
        return is_valid_full_permutation(position, group)
    for idx in sorted_indices:
        if used[idx]:
            continue
        position[level] = idx
        if can_extend(position, level, group):
            used[idx] = True
            if _assign_slot(level + 1, position, sorted_indices, used, group):
                return True
            used[idx] = False
        position[level] = UNSET
    return False


def canonical_form(labels: Seque[int], group: Group) -> Seque[int]:
    """Return the canonical arrangement of ``labels`` under ``group``.

    Among the permutations of ``group``, the one chosen is found by trying
    positions in the order of their ascending labels. If the group is empty
    or its permutations do not match the number of labels, a copy of
    ``labels`` is returned unchanged.

    Raises ValueError when no permutation of the group can be assigned.
    """
    perms = [list(perm) for perm in group]
    values = list(labels)
    n = len(values)
    if not perms or len(perms[0]) != n:
        return Seque(values)

    sorted_indices = sorted(range(n), key=values.__getitem__)
    position = [UNSET] * n
    used = [False] * n
    if not _assign_slot(0, position, sorted_indices, used, perms):
        raise ValueError("No valid labeling found for the group.")
    return Seque(values[idx] for idx in position)