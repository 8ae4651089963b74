from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Scalar(Generic[T], ABC):
    """``Scalar`` types are deferred computations which produce their value only
    when :py:meth:`value` is called.

    Implementations should not evaluate anything at construction time. Unless a
    type states otherwise (see :py:class:`IPending`), every call to ``value()``
    performs the computation again and any exception it raises is propagated to
    the caller unchanged."""

    __slots__ = ()

    @abstractmethod
    def value(self) -> T:
        raise NotImplementedError()


class IPending(ABC):
    """``IPending`` types are scalars which may cache their computed value. Such
    types can report whether the value has been computed yet."""

    __slots__ = ()

    @property
    @abstractmethod
    def is_realized(self) -> bool:
        raise NotImplementedError()
