import pytest

from sequekit.sequence import Seque
from sequekit.symmetries import (
    UNSET,
    can_extend,
    canonical_form,
    is_valid_full_permutation,
)

T3 = [[0, 1, 2], [1, 2, 0], [2, 0, 1]]
Q4 = [[0, 1, 2, 3], [1, 2, 3, 0], [2, 3, 0, 1], [3, 0, 1, 2]]
WEDGE6 = [
    [0, 1, 2, 3, 4, 5],
    [1, 2, 0, 4, 5, 3],
    [2, 0, 1, 5, 3, 4],
    [0, 2, 1, 3, 5, 4],
    [2, 1, 0, 5, 4, 3],
    [1, 0, 2, 4, 3, 5],
]


def _apply(labels, perm):
    return Seque(labels[i] for i in perm)


def test_full_permutation_found():
    assert is_valid_full_permutation(Seque([1, 2, 0]), T3) is True


def test_full_permutation_missing():
    assert is_valid_full_permutation(Seque([0, 2, 1]), T3) is False


def test_full_permutation_length_mismatch():
    assert is_valid_full_permutation(Seque([0, 1]), T3) is False


def test_can_extend_with_unset_slots():
    assert can_extend(Seque([1, UNSET, UNSET]), 2, T3) is True


def test_can_extend_prefix_rejected():
    assert can_extend(Seque([1, 0, UNSET]), 1, T3) is False


def test_can_extend_only_checks_up_to():
    assert can_extend(Seque([1, 0, UNSET]), 0, T3) is True


def test_empty_group_returns_labels():
    labels = Seque([5, 3, 9])
    result = canonical_form(labels, [])
    assert result == labels


def test_size_mismatch_returns_labels():
    labels = Seque([5, 3, 9])
    assert canonical_form(labels, [[]]) == labels


def test_returned_copy_is_independent():
    labels = Seque([5, 3, 9])
    result = canonical_form(labels, [])
    result[0] = 100
    assert labels[0] == 5


def test_triangle_rotation_starts_with_smallest():
    result = canonical_form(Seque([5, 3, 9]), T3)
    assert result == Seque([3, 9, 5])


@pytest.mark.parametrize("group", [T3, Q4, WEDGE6])
def test_canonical_form_is_invariant_under_group(group):
    labels = Seque([40, 17, 23, 8, 31, 12][: len(group[0])])
    expected = canonical_form(labels, group)
    for perm in group:
        assert canonical_form(_apply(labels, perm), group) == expected


@pytest.mark.parametrize("group", [T3, Q4, WEDGE6])
def test_canonical_form_is_a_group_image(group):
    labels = Seque([40, 17, 23, 8, 31, 12][: len(group[0])])
    result = canonical_form(labels, group)
    images = [_apply(labels, perm) for perm in group]
    assert result in images
    assert sorted(result) == sorted(labels)


def test_canonical_form_is_idempotent():
    labels = Seque([7, 2, 6, 4])
    once = canonical_form(labels, Q4)
    assert canonical_form(once, Q4) == once


def test_no_valid_labeling_raises():
    with pytest.raises(ValueError, match="No valid labeling"):
        canonical_form(Seque([1, 2]), [[0, 0]])