"""A registry of entity types, each owning a sequence of instances."""

from __future__ import annotations

from typing import Any, Iterable, TextIO

from sequekit.sequence import Seque


def merge_type_lists(*args: Iterable[type]) -> tuple[type, ...]:
    """Concatenate several lists of types, keeping their order."""
    return tuple(cls for types in args for cls in types)


class TypeRegistry:
    """A fixed, ordered set of types with one sequence of instances per type."""

    def __init__(self, *args: type) -> None:
        if len(set(args)) != len(args):
            raise ValueError("a type may be registered only once")
        self._types: tuple[type, ...] = tuple(args)
        self._index = {cls: number for number, cls in enumerate(self._types)}
        self._sequences: dict[type, Seque[Any]] = {cls: Seque() for cls in self._types}

    def __len__(self) -> int:
        return len(self._types)

    def __repr__(self) -> str:
        names = ", ".join(cls.__name__ for cls in self._types)
        return f"{type(self).__name__}({names})"

    def types(self) -> tuple[type, ...]:
        """Return the registered types in order."""
        return self._types

    def first(self) -> type:
        """Return the first registered type."""
        if not self._types:
            raise IndexError("the registry holds no types")
        return self._types[0]

    def last(self) -> type:
        """Return the last registered type."""
        if not self._types:
            raise IndexError("the registry holds no types")
        return self._types[-1]

    def nth(self, n: int) -> type:
        """Return the type registered at position ``n``."""
        if not 0 <= n < len(self._types):
            raise IndexError(f"type number {n} out of range [0, {len(self._types)})")
        return self._types[n]

    def index_of(self, cls: type) -> int:
        """Return the position at which ``cls`` is registered."""
        try:
            return self._index[cls]
        except KeyError:
            raise KeyError(f"type {cls!r} is not registered") from None

    def sequence(self, cls: type) -> Seque[Any]:
        """Return the sequence holding the instances of ``cls``."""
        self.index_of(cls)
        return self._sequences[cls]

    def append_node(self, cls: type, *args: Any, **kwargs: Any) -> int:
        """Construct ``cls(*args, **kwargs)``, store it, and return its position."""
        return self.sequence(cls).append(cls(*args, **kwargs))

    def save(self, stream: TextIO) -> None:
        """Write every sequence, in registration order, as space-separated text."""
        for cls in self._types:
            self._sequences[cls].save(stream)
            stream.write(" ")