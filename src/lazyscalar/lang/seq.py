from collections.abc import Iterable, Iterator
from typing import Callable, Generic, TypeVar

from pyrsistent import PVector, pvector

T = TypeVar("T")
U = TypeVar("U")


class IterableOf(Generic[T]):
    """An immutable, re-iterable collection of the given elements in the order
    they were given."""

    __slots__ = ("_elems",)

    def __init__(self, *elems: T) -> None:
        self._elems: PVector = pvector(elems)

    def __repr__(self):
        return f"IterableOf({', '.join(repr(e) for e in self._elems)})"

    def __eq__(self, other):
        if isinstance(other, IterableOf):
            return self._elems == other._elems
        return NotImplemented

    def __hash__(self):
        return hash(self._elems)

    def __iter__(self) -> Iterator[T]:
        return iter(self._elems)

    def __len__(self) -> int:
        return len(self._elems)


class Mapped(Generic[T, U]):
    """A lazy view of `iterable` with `fn` applied to each element.

    `fn` is only called for an element when iteration reaches it, and is called
    again on every new iteration. The view can be iterated as many times as the
    underlying iterable allows."""

    __slots__ = ("_fn", "_iterable")

    def __init__(self, fn: Callable[[T], U], iterable: Iterable[T]) -> None:
        self._fn = fn
        self._iterable = iterable

    def __iter__(self) -> Iterator[U]:
        for e in self._iterable:
            yield self._fn(e)
