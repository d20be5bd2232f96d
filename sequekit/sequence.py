"""A growable sequence with explicit sizing, swap-erase and text persistence."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, TextIO, TypeVar, overload

V = TypeVar("V")


def _read_token(stream: TextIO) -> str:
    """Read one whitespace-delimited token from a text stream."""
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)
    if not char:
        raise ValueError("unexpected end of input while reading a sequence")
    chars = []
    while char and not char.isspace():
        chars.append(char)
        char = stream.read(1)
    return "".join(chars)


class Seque(Generic[V]):
    """An ordered, mutable sequence of values."""

    __slots__ = ("_items",)

    def __init__(self, values: Iterable[V] = ()) -> None:
        self._items: list[V] = list(values)

    @classmethod
    def filled(cls, size: int, value: V) -> "Seque[V]":
        """Build a sequence of ``size`` copies of ``value``."""
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        return cls([value] * size)

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> V: ...

    @overload
    def __getitem__(self, index: slice) -> "Seque[V]": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self)(self._items[index])
        return self._items[index]

    def __setitem__(self, index: int, value: V) -> None:
        self._items[index] = value

    def __delitem__(self, index) -> None:
        """Remove the element at ``index`` (or a slice), keeping order."""
        if isinstance(index, slice):
            del self._items[index]
            return
        size = len(self._items)
        position = index + size if index < 0 else index
        if not 0 <= position < size:
            raise IndexError(f"sek: index {index} out of range [0, {size}).")
        self._items.pop(position)

    def __iter__(self) -> Iterator[V]:
        return iter(self._items)

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Seque):
            return NotImplemented
        return self._items == other._items

    def __lt__(self, other: "Seque[V]") -> bool:
        if not isinstance(other, Seque):
            return NotImplemented
        return self._items < other._items

    def __le__(self, other: "Seque[V]") -> bool:
        if not isinstance(other, Seque):
            return NotImplemented
        return self._items <= other._items

    def __gt__(self, other: "Seque[V]") -> bool:
        if not isinstance(other, Seque):
            return NotImplemented
        return self._items > other._items

    def __ge__(self, other: "Seque[V]") -> bool:
        if not isinstance(other, Seque):
            return NotImplemented
        return self._items >= other._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def __str__(self) -> str:
        """Size followed by the elements, separated by spaces."""
        return " ".join([str(len(self._items)), *(str(v) for v in self._items)])

    # sizing

    def resize(self, new_size: int, fill: Any = None) -> None:
        """Grow with ``fill`` or truncate to exactly ``new_size`` elements."""
        if new_size < 0:
            raise ValueError(f"size must be non-negative, got {new_size}")
        current = len(self._items)
        if new_size < current:
            del self._items[new_size:]
        elif new_size > current:
            self._items.extend([fill] * (new_size - current))

    def fill(self, value: V) -> None:
        """Set every element to ``value``."""
        self._items[:] = [value] * len(self._items)

    def ensure(self, index: int, fill: Any = None) -> V:
        """Return the element at ``index``, growing the sequence to reach it."""
        if index < 0:
            raise IndexError(f"sek: index {index} is negative.")
        if index >= len(self._items):
            self.resize(index + 1, fill)
        return self._items[index]

    def checked(self, index: int) -> V:
        """Return the element at ``index``, which must lie in ``[0, size)``."""
        if index < 0 or index >= len(self._items):
            raise IndexError(
                f"sek: index {index} out of range [0, {len(self._items)})."
            )
        return self._items[index]

    def take(self, indices: Iterable[int]) -> "Seque[V]":
        """Gather the elements at the given positions."""
        if not self._items:
            return type(self)()
        return type(self)(self.checked(i) for i in indices)

    # removal

    def clear(self) -> None:
        self._items.clear()

    def erase_swap(self, index: int) -> None:
        """Remove ``index`` by moving the last element into its place.

        Indices outside the sequence are ignored.
        """
        if 0 <= index < len(self._items):
            last = self._items.pop()
            if index < len(self._items):
                self._items[index] = last

    def remove_last(self) -> None:
        """Drop the last element, if there is one."""
        if self._items:
            self._items.pop()

    def erase_range(self, start: int, count: int = 1) -> None:
        """Remove up to ``count`` elements from ``start``, keeping order."""
        if not count or start >= len(self._items):
            return
        if start < 0:
            raise IndexError(f"sek: index {start} is negative.")
        del self._items[start:start + count]

    # insertion

    def add_swap(self, index: int, value: V) -> None:
        """Put ``value`` at ``index`` and move the displaced element to the end."""
        displaced = self.checked(index)
        self._items.append(displaced)
        self._items[index] = value

    def insert(self, index: int, value: V) -> None:
        """Insert ``value`` before ``index``; indices past the end append."""
        if index < 0:
            raise IndexError(f"sek: index {index} is negative.")
        self._items.insert(min(index, len(self._items)), value)

    def insert_all(self, index: int, values: Iterable[V]) -> None:
        """Insert all ``values`` before ``index``, keeping their order.

        The position before the insertion point must exist, so inserting into
        an empty sequence is an error.
        """
        index = min(index, len(self._items))
        self.checked(0 if index == 0 else index - 1)
        self._items[index:index] = list(values)

    def append(self, value: V) -> int:
        """Add ``value`` at the end and return its position."""
        self._items.append(value)
        return len(self._items) - 1

    def extend(self, values: Iterable[V]) -> int:
        """Add all ``values`` at the end and return the position of the first."""
        start = len(self._items)
        self._items.extend(values)
        return start

    # persistence

    def save(self, stream: TextIO) -> None:
        """Write the size and the elements as space-separated text."""
        stream.write(str(self))
        stream.write(" ")

    @classmethod
    def load(cls, stream: TextIO, convert: Callable[[str], V] = int) -> "Seque[V]":
        """Read a sequence written by :meth:`save`."""
        token = _read_token(stream)
        try:
            size = int(token)
        except ValueError as exc:
            raise ValueError(f"invalid sequence size {token!r}") from exc
        if size < 0:
            raise ValueError(f"invalid sequence size {size}")
        return cls(convert(_read_token(stream)) for _ in range(size))