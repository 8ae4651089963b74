import functools
import threading
from typing import Callable, Generic, Optional, TypeVar

import attr

from lazyscalar.lang.interfaces import IPending, Scalar

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@attr.frozen
class Constant(Scalar[T]):
    """A Scalar which always returns the value it was created with."""

    const: T

    def value(self) -> T:
        return self.const


@attr.frozen
class ScalarOf(Scalar[T]):
    """A Scalar which calls the zero-argument function `fn` every time its value
    is requested."""

    fn: Callable[[], T]

    def value(self) -> T:
        return self.fn()


class Sticky(Scalar[T], IPending, Generic[T]):
    """A Scalar which computes the value of `origin` at most once.

    Only a successful result is remembered. If `origin` raises, the exception is
    propagated and the next call to `value` will try again."""

    __slots__ = ("_origin", "_lock", "_value", "_computed")

    def __init__(self, origin: Scalar[T]) -> None:
        self._origin = origin
        self._lock = threading.RLock()
        self._value: Optional[T] = None
        self._computed = False

    def value(self) -> T:
        with self._lock:
            if not self._computed:
                self._value = self._origin.value()
                self._computed = True
            return self._value  # type: ignore[return-value]

    @property
    def is_realized(self) -> bool:
        with self._lock:
            return self._computed


@attr.frozen
class Checked(Scalar[T], Generic[T, E]):
    """A Scalar which converts any exception raised by `origin` into another
    exception by calling `wrap` with it. The new exception is chained to the
    original one."""

    origin: Scalar[T]
    wrap: Callable[[Exception], E]

    def value(self) -> T:
        try:
            return self.origin.value()
        except Exception as e:
            raise self.wrap(e) from e


@attr.frozen
class Fallback(Scalar[T]):
    """A Scalar which returns the result of `fallback` (called with the exception)
    if `origin` raises."""

    origin: Scalar[T]
    fallback: Callable[[Exception], T]

    def value(self) -> T:
        try:
            return self.origin.value()
        except Exception as e:
            return self.fallback(e)


@functools.singledispatch
def scalar(o) -> Scalar:
    """Coerce the argument `o` to a Scalar.

    Scalars are returned unchanged and zero-argument callables are wrapped in a
    :py:class:`ScalarOf`. Any other argument is a `TypeError`; use
    :py:class:`Constant` to lift a plain value."""
    if callable(o):
        return ScalarOf(o)
    raise TypeError(f"Cannot coerce object of type {type(o).__name__} to a Scalar")


@scalar.register(Scalar)
def _scalar_scalar(o: Scalar) -> Scalar:
    return o
