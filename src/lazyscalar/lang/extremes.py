"""Scalars which find the lowest or highest of a sequence of values.

Both reducers accept their inputs in one of three shapes, all of which are
evaluated lazily:

    LowestOf.of_items("Banana", "Apple", "Orange").value()      # => "Apple"
    LowestOf.of_scalars(lambda: 3, Constant(1)).value()         # => 1
    LowestOf(Mapped(Constant, range(10, 0, -1))).value()        # => 1

When two candidates compare equal, the one later in the sequence is kept."""

from abc import abstractmethod
from collections.abc import Iterable
from typing import Callable, Optional, TypeVar

from typing_extensions import Self

from lazyscalar.lang.interfaces import Scalar
from lazyscalar.lang.reduced import Reduced, ScalarLike
from lazyscalar.lang.scalar import Constant
from lazyscalar.lang.seq import IterableOf, Mapped

T = TypeVar("T")

Comparator = Callable[[T, T], int]


def natural_compare(a, b) -> int:
    """Three-way comparison of `a` and `b` using their natural ordering. Return a
    negative number if `a` sorts first, a positive number if `b` sorts first, and
    zero otherwise."""
    return (a > b) - (a < b)


class _ExtremeOf(Scalar[T]):
    __slots__ = ("_result",)

    def __init__(
        self,
        scalars: Iterable[ScalarLike[T]],
        *,
        compare: Optional[Comparator] = None,
    ) -> None:
        self._result: Scalar[T] = Reduced(
            self._picker(compare or natural_compare), scalars
        )

    @staticmethod
    @abstractmethod
    def _picker(compare: Comparator) -> Callable[[T, T], T]:
        raise NotImplementedError()

    @classmethod
    def of_items(cls, *items: T, compare: Optional[Comparator] = None) -> Self:
        """Create a new instance from concrete values."""
        return cls(Mapped(Constant, IterableOf(*items)), compare=compare)

    @classmethod
    def of_scalars(
        cls, *scalars: ScalarLike[T], compare: Optional[Comparator] = None
    ) -> Self:
        """Create a new instance from Scalars or zero-argument functions."""
        return cls(IterableOf(*scalars), compare=compare)

    def value(self) -> T:
        return self._result.value()


class LowestOf(_ExtremeOf[T]):
    """Find the lowest item.

    There is no thread-safety guarantee."""

    __slots__ = ()

    @staticmethod
    def _picker(compare: Comparator) -> Callable[[T, T], T]:
        def lower(first: T, second: T) -> T:
            if compare(first, second) < 0:
                return first
            return second

        return lower


class HighestOf(_ExtremeOf[T]):
    """Find the highest item.

    There is no thread-safety guarantee."""

    __slots__ = ()

    @staticmethod
    def _picker(compare: Comparator) -> Callable[[T, T], T]:
        def higher(first: T, second: T) -> T:
            if compare(first, second) > 0:
                return first
            return second

        return higher


def lowest(*items: T, compare: Optional[Comparator] = None) -> T:
    """Return the lowest of `items`."""
    return LowestOf.of_items(*items, compare=compare).value()


def highest(*items: T, compare: Optional[Comparator] = None) -> T:
    """Return the highest of `items`."""
    return HighestOf.of_items(*items, compare=compare).value()
