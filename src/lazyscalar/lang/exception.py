import attr
from pyrsistent import PMap, pmap


def _to_pmap(data) -> PMap:
    return data if isinstance(data, PMap) else pmap(data)


@attr.define(repr=False, str=False)
class ScalarError(Exception):
    """Base type for errors raised by lazyscalar itself.

    Errors raised by user computations are never wrapped in this type; it only
    covers conditions the library detects on its own. ``data`` is a map of
    contextual information about the error."""

    message: str
    data: PMap = attr.field(factory=pmap, converter=_to_pmap)

    def __repr__(self):
        tp = type(self)
        return f"{tp.__module__}.{tp.__name__}({self.message!r}, {dict(self.data)!r})"

    def __str__(self):
        if not self.data:
            return self.message
        return f"{self.message} {dict(self.data)}"


class EmptySequenceError(ScalarError, ValueError):
    """Raised when a reduction is requested over a sequence with no elements."""
