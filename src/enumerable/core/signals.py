"""Control-flow results returned by traversal visitors."""

import typing as tp
from dataclasses import dataclass

__all__ = ["Stop", "STOP"]


@dataclass(frozen=True)
class Stop:
    """Ends a traversal early when returned from a visitor or an ``each`` callback.

    Any other return value means "continue with the next element". The
    traversal hands the ``Stop`` back to its caller, which lets short-circuit
    operations carry the matching element out without a second pass.

    Attributes:
        value: Optional payload, e.g. the element detect() found.
    """

    value: tp.Any = None


STOP = Stop()
