import threading

from lazyscalar import logconfig
from lazyscalar.lang.exception import EmptySequenceError, ScalarError
from lazyscalar.lang.extremes import HighestOf, LowestOf, highest, lowest
from lazyscalar.lang.interfaces import IPending, Scalar
from lazyscalar.lang.reduced import Reduced
from lazyscalar.lang.scalar import (
    Checked,
    Constant,
    Fallback,
    ScalarOf,
    Sticky,
    scalar,
)
from lazyscalar.lang.seq import IterableOf, Mapped

_INIT_LOCK = threading.Lock()
_is_initialized = False


def init(force_reload: bool = False) -> None:
    """
    Configure logging for lazyscalar.

    ``init()`` may be called more than once. Only the first invocation will attach
    a handler to the ``lazyscalar`` logger unless ``force_reload=True``.
    """
    global _is_initialized

    with _INIT_LOCK:
        if _is_initialized and not force_reload:
            return

        logconfig.configure_root_logger()
        _is_initialized = True


__all__ = [
    "Checked",
    "Constant",
    "EmptySequenceError",
    "Fallback",
    "HighestOf",
    "IPending",
    "IterableOf",
    "LowestOf",
    "Mapped",
    "Reduced",
    "Scalar",
    "ScalarError",
    "ScalarOf",
    "Sticky",
    "highest",
    "init",
    "lowest",
    "scalar",
]
