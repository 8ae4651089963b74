import logging
from collections.abc import Iterable
from typing import Callable, TypeVar, Union

import attr
from pyrsistent import pmap

from lazyscalar.lang.exception import EmptySequenceError
from lazyscalar.lang.interfaces import Scalar
from lazyscalar.lang.scalar import scalar
from lazyscalar.logconfig import TRACE

logger = logging.getLogger(__name__)

T = TypeVar("T")

ScalarLike = Union[Scalar[T], Callable[[], T]]


@attr.frozen
class Reduced(Scalar[T]):
    """A Scalar which left-folds the values of `scalars` with the binary function
    `fn`.

    The value of the first element becomes the initial accumulator and each
    following element is evaluated and combined as ``fn(acc, elem)``. Elements
    are evaluated one at a time in iteration order, so the first exception
    raised by an element stops the fold and is propagated unchanged; later
    elements are never evaluated.

    `scalars` is iterated anew on every call to :py:meth:`value` and nothing is
    cached between calls, so it must be re-iterable: one-shot iterators such as
    generators are rejected with a `TypeError` (wrap the source in
    :py:class:`lazyscalar.lang.seq.Mapped` or
    :py:class:`lazyscalar.lang.seq.IterableOf` instead). An empty `scalars`
    raises :py:class:`lazyscalar.lang.exception.EmptySequenceError`."""

    fn: Callable[[T, T], T]
    scalars: Iterable[ScalarLike[T]] = attr.field()

    @scalars.validator
    def _check_reiterable(self, _, scalars) -> None:
        if iter(scalars) is scalars:
            raise TypeError(
                f"Cannot reduce a one-shot iterator of type {type(scalars).__name__}; "
                "use Mapped or IterableOf for a re-iterable source"
            )

    def value(self) -> T:
        it = iter(self.scalars)
        try:
            first = next(it)
        except StopIteration:
            logger.debug("Attempted to reduce an empty sequence")
            raise EmptySequenceError(
                "Cannot reduce an empty sequence",
                pmap({"fn": getattr(self.fn, "__name__", repr(self.fn))}),
            ) from None

        acc = scalar(first).value()
        for i, elem in enumerate(it, start=1):
            acc = self.fn(acc, scalar(elem).value())
            if logger.isEnabledFor(TRACE):
                logger.log(TRACE, f"Accumulator after element {i}: {acc!r}")
        return acc
