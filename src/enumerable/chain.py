"""Fluent chaining of enumerable operations.

A :class:`Chain` holds one intermediate result. Each chained call feeds that
result to the operation of the same name as its first argument and stores the
return value, so a pipeline reads left to right without temporary names::

    chain([1, 2, 3, 4]).filter(lambda n: n % 2 == 0).map(lambda n: n * 10).values()
    # [20, 40]

Only the operations in ``CHAINABLE_METHODS`` are available on a chain.
"""

import logging
import typing as tp

from enumerable import functional
from enumerable.core.dispatch import classify
from enumerable.core.enums import ContainerKind

__all__ = [
    "CHAINABLE_METHODS",
    "Chain",
    "auto_chain",
    "chain",
]

logger = logging.getLogger(__name__)

CHAINABLE_METHODS = (
    "map",
    "collect",
    "detect",
    "filter",
    "select",
    "reduce",
    "inject",
    "each",
    "tail",
    "rest",
    "reject",
    "pluck",
    "any",
    "some",
    "all",
    "every",
)


class Chain:
    """Wrapper composing enumerable operations on a single result slot.

    Attributes:
        _results: The current intermediate result. Read it with values().
    """

    __slots__ = ("_results",)

    def __init__(self, values: tp.Any):
        self._results = values

    def values(self) -> tp.Any:
        """Return the current result, unwrapped."""
        return self._results

    def __repr__(self) -> str:
        return f"Chain({self._results!r})"


def _chained(name: str) -> tp.Callable[..., Chain]:
    operation = getattr(functional, name)

    def method(self: Chain, *args, **kwargs) -> Chain:
        self._results = operation(self._results, *args, **kwargs)
        return self

    method.__name__ = name
    method.__qualname__ = f"Chain.{name}"
    method.__doc__ = (
        f"Apply ``{operation.__name__}`` to the current result and keep chaining."
    )
    return method


for _name in CHAINABLE_METHODS:
    setattr(Chain, _name, _chained(_name))


def chain(enumerable: tp.Any) -> Chain:
    """Start a chain of operations on ``enumerable``.

    Example:
        >>> chain([1, 2, 3]).map(lambda n: n * 2).tail().values()
        [4, 6]
    """
    logger.debug(f"Starting chain on {type(enumerable).__name__}")
    return Chain(enumerable)


def auto_chain(value: tp.Any) -> tp.Optional[Chain]:
    """Wrap ``value`` in a Chain if it can be traversed.

    Adapter for collaborators (such as query layers returning result sets)
    that want their results chainable without calling chain() explicitly.
    Strings and bytes are never wrapped, even though they are sequences.

    Args:
        value: Any value.

    Returns:
        A Chain around ``value``, or None if it is a string or not enumerable.
    """
    if isinstance(value, (str, bytes)):
        logger.debug("auto_chain: refusing to wrap a string")
        return None
    if classify(value) is ContainerKind.UNSUPPORTED:
        logger.debug(f"auto_chain: {type(value).__name__} is not enumerable")
        return None
    return chain(value)
