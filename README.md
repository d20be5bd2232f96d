# sequekit

Small building blocks for working with index-based data such as
connectivity tables: a growable sequence type, ordering and searching
helpers, set algebra over sorted sequences, canonical labelling under a
group of permutations, and a registry that keeps one sequence per
registered type.

The package has no runtime dependencies.

## Installation

```
pip install sequekit
```

For running the test suite:

```
pip install "sequekit[test]"
pytest
```

## The sequence

`sequekit.sequence.Seque` is a list-like container with a few extra
operations. It supports `len`, indexing and slicing, `del`, iteration and
lexicographic comparison with other `Seque` objects.

```python
from sequekit.sequence import Seque

s = Seque([4, 2, 6, 0])
s.append(3)              # returns the new position, 4
s.extend([7, 8])         # returns the position of the first added element
s.insert(1, 9)           # shifts the tail right; positions past the end append
s.insert_all(2, [5, 5])  # inserts several values before position 2
s.erase_swap(0)          # removes position 0 by moving the last element into it
s.add_swap(0, 1)         # puts 1 at position 0, moving the old element to the end
s.erase_range(1, 2)      # removes up to 2 elements from position 1, keeping order
s.remove_last()
s.ensure(10)             # grows the sequence (filling with None) so position 10 exists
s.checked(2)             # raises IndexError when outside [0, len)
s.take([0, 2])           # a new sequence of the picked elements
s.resize(3)              # truncates or grows to exactly 3 elements
s.fill(0)                # sets every element to 0
s.clear()
```

`Seque.filled(size, value)` builds a sequence of repeated values.

`str(s)` gives the length followed by the elements, separated by spaces.
`s.save(stream)` writes that text (and a trailing space) to a text stream, and
`Seque.load(stream, convert=int)` reads it back, converting each token with
`convert`. A missing or malformed size, or running out of tokens, raises
`ValueError`.

## Ordering

Functions in `sequekit.ordering` work in place on a `Seque`, except `order`
and `sample`, which return new sequences.

```python
from sequekit import ordering

labels = Seque([3, 1, 2, 1])
ordering.order(labels)        # stable argsort: Seque([1, 3, 2, 0])
ordering.sort(labels)         # optional key=...
ordering.reverse(labels)
ordering.rotate(labels, 1)    # element at position 1 comes first
ordering.next_permutation(labels)   # False when it wrapped around
ordering.prev_permutation(labels)
ordering.unique(labels)       # drops consecutive repeats
ordering.sort_unique(labels)
```

`shuffle(seq, rng=None)` and `sample(seq, size, rng=None)` take an optional
`random.Random`; `sample` keeps the picked elements in their original order
and clamps `size` to the length of the sequence.

## Searching

```python
from sequekit import search

labels = Seque([3, 1, 2, 1])
perm = ordering.order(labels)
search.indices_of_value(labels, 1, perm)           # Seque([1, 3])
search.indices_of_sorted_value(Seque([1, 2, 2]), 2)  # Seque([1, 2])
search.insertion_index(Seque([1, 2, 4]), 3)        # 2
search.insert_sorted(Seque([1, 2, 4]), 3)          # inserts, returns 2
search.all_satisfy(labels, lambda v: v > 0)        # True
search.indices_where(labels, lambda v: v == 1)     # Seque([1, 3])
search.duplicate_indices(labels, perm)             # Seque([3])
old_from_new, new_from_old = search.indices_from_order(labels, perm)
```

`indices_from_order` numbers the distinct values: `new_from_old` holds one
representative position per distinct value, and `old_from_new[i]` is the
number of the distinct value found at position `i`.

## Sorted-set algebra and mapping

The set operations expect ascending sequences and treat repeated values as a
multiset, matching them one for one.

```python
from sequekit import combine

a, b = Seque([1, 2, 3]), Seque([2, 3, 4])
combine.intersection(a, b)          # Seque([2, 3])
combine.union(a, b)                 # Seque([1, 2, 3, 4])
combine.difference(a, b)            # Seque([1])
combine.symmetric_difference(a, b)  # Seque([1, 4])
combine.includes(a, Seque([1, 3]))  # True
combine.mapped(a, lambda x: x * 10)
combine.mapped_pairs(a, b, max)     # as long as the shorter input
combine.reduce(a, 0, lambda acc, x: acc + x)
combine.dot_product(a, b)           # 0 + 1*2 + 2*3 + 3*4 = 20
```

`dot_product(a, b, init=0, sum_func=operator.add, prod_func=operator.mul)`
raises `ValueError` when `b` is shorter than `a`.

## Canonical forms under symmetry groups

`sequekit.symmetries.canonical_form(labels, group)` picks a permutation from
`group` by assigning positions in the order of their ascending labels,
taking the first choice that some permutation of the group still allows, and
returns the labels rearranged by it. With an empty group, or one whose
permutations have a different length from `labels`, a copy of the labels
comes back unchanged; when no permutation can be assigned, `ValueError` is
raised.

```python
from sequekit.symmetries import canonical_form

cyclic = [[0, 1, 2], [1, 2, 0], [2, 0, 1]]
canonical_form(Seque([7, 3, 5]), cyclic)   # Seque([3, 5, 7])
```

The helpers `is_valid_full_permutation(position, group)` and
`can_extend(position, up_to, group)` are also public; slots holding
`UNSET` (-1) match anything in `can_extend`.

## Type registry

`sequekit.registry.TypeRegistry` keeps one `Seque` for each registered class
and numbers the classes in registration order. Registering a class twice
raises `ValueError`; looking up an unregistered class raises `KeyError`.

```python
from sequekit.registry import TypeRegistry, merge_type_lists

class Node: ...
class Edge: ...

reg = TypeRegistry(Node, Edge)
len(reg)                   # 2
reg.index_of(Edge)         # 1
reg.nth(0), reg.first(), reg.last()
reg.append_node(Node)      # constructs Node(), stores it, returns 0
reg.sequence(Node)         # the Seque holding all Nodes
merge_type_lists((Node,), (Edge,))   # (Node, Edge)
```

`reg.save(stream)` writes every sequence, in registration order, as
space-separated text.

## What the package does not do

- It has no command-line program; everything is used as a library.
- `TypeRegistry` can be saved as text but there is no matching loader.
- It does not build or analyse meshes itself; it only offers the sequence,
  search, set and symmetry tools such work would use.