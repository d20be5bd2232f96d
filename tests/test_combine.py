import operator

import pytest

from sequekit.combine import (
    difference,
    dot_product,
    includes,
    intersection,
    mapped,
    mapped_pairs,
    reduce,
    symmetric_difference,
    union,
)
from sequekit.sequence import Seque

PAIRS = [
    (Seque([1, 2, 2, 3, 5]), Seque([2, 3, 3, 4])),
    (Seque([0, 1, 1, 1]), Seque([1, 1, 7])),
    (Seque([]), Seque([4, 6])),
    (Seque([3, 8, 9]), Seque([])),
    (Seque([1, 2, 3]), Seque([1, 2, 3])),
]


def test_intersection_pinned_example():
    assert intersection(Seque([1, 2, 3]), Seque([2, 3, 4])) == Seque([2, 3])


def test_union_pinned_example():
    assert union(Seque([1, 2, 3]), Seque([2, 3, 4])) == Seque([1, 2, 3, 4])


@pytest.mark.parametrize("op", [intersection, union, difference, symmetric_difference])
@pytest.mark.parametrize("a,b", PAIRS)
def test_results_are_ascending(op, a, b):
    result = list(op(a, b))
    assert result == sorted(result)


@pytest.mark.parametrize("a,b", PAIRS)
def test_intersection_is_included_in_both(a, b):
    common = intersection(a, b)
    assert includes(a, common)
    assert includes(b, common)


@pytest.mark.parametrize("a,b", PAIRS)
def test_union_includes_both(a, b):
    joined = union(a, b)
    assert includes(joined, a)
    assert includes(joined, b)


@pytest.mark.parametrize("a,b", PAIRS)
def test_symmetric_difference_is_union_of_differences(a, b):
    assert symmetric_difference(a, b) == union(difference(a, b), difference(b, a))
    assert symmetric_difference(a, b) == symmetric_difference(b, a)


@pytest.mark.parametrize("a,b", PAIRS)
def test_union_size_is_intersection_plus_symmetric_difference(a, b):
    assert len(union(a, b)) == len(intersection(a, b)) + len(symmetric_difference(a, b))


def test_self_operations():
    a = Seque([1, 1, 4, 9])
    assert intersection(a, a) == a
    assert union(a, a) == a
    assert difference(a, a) == Seque()
    assert symmetric_difference(a, a) == Seque()


def test_operations_with_empty():
    a = Seque([2, 5, 5])
    empty = Seque()
    assert intersection(a, empty) == empty
    assert union(a, empty) == a
    assert union(empty, a) == a
    assert difference(a, empty) == a
    assert difference(empty, a) == empty


def test_repeated_values_counted_as_multiset():
    a = Seque([1, 1, 1])
    b = Seque([1])
    assert includes(a, b)
    assert not includes(b, a)
    assert intersection(a, b) == b
    assert union(a, b) == a


def test_includes_cases():
    superset = Seque([1, 3, 5, 7])
    assert includes(superset, Seque([3, 7]))
    assert includes(superset, Seque())
    assert not includes(superset, Seque([4]))
    assert not includes(superset, Seque([7, 8]))
    assert not includes(Seque(), Seque([1]))


def test_mapped_identity_and_length():
    seq = Seque([3, 1, 4])
    assert mapped(seq, lambda x: x) == seq
    assert len(mapped(seq, str)) == len(seq)


def test_mapped_round_trip():
    seq = Seque([10, 20, 30])
    assert mapped(mapped(seq, str), int) == seq


def test_mapped_does_not_modify_source():
    seq = Seque([1, 2])
    mapped(seq, lambda x: x + 1)
    assert seq == Seque([1, 2])


def test_mapped_pairs_truncates_to_shorter():
    a = Seque([1, 2, 3, 4])
    b = Seque([9, 8])
    assert mapped_pairs(a, b, lambda x, y: x) == a[:2]
    assert mapped_pairs(b, a, lambda x, y: y) == a[:2]


def test_mapped_pairs_passes_both_in_order():
    a = Seque(["a", "b"])
    b = Seque(["c", "d"])
    result = mapped_pairs(a, b, lambda x, y: (x, y))
    assert list(result) == list(zip(a, b))


def test_reduce_keeps_left_to_right_order():
    seq = Seque([5, 3, 8])
    assert reduce(seq, [], lambda acc, x: acc + [x]) == list(seq)


def test_reduce_empty_returns_init():
    assert reduce(Seque(), "start", lambda acc, x: acc + x) == "start"


def test_reduce_sum_matches_builtin():
    seq = Seque([4, 7, 1])
    assert reduce(seq, 0, operator.add) == sum(seq)


def test_dot_product_pinned_example():
    assert dot_product(Seque([1, 2, 3]), Seque([4, 5, 6]), 0, operator.add, operator.mul) == 32


def test_dot_product_with_ones_is_sum():
    seq = Seque([2, 9, 4])
    ones = Seque.filled(len(seq), 1)
    assert dot_product(seq, ones) == reduce(seq, 0, operator.add)


def test_dot_product_custom_functions():
    a = Seque([1, 2])
    b = Seque([3, 4])
    pairs = dot_product(a, b, [], lambda acc, p: acc + [p], lambda x, y: (x, y))
    assert pairs == list(zip(a, b))


def test_dot_product_allows_longer_second():
    a = Seque([1, 2])
    assert dot_product(a, Seque([1, 1, 99])) == dot_product(a, Seque([1, 1]))


def test_dot_product_short_second_raises():
    with pytest.raises(ValueError):
        dot_product(Seque([1, 2, 3]), Seque([1]))