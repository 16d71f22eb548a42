"""Traversal engine.

``walk`` is the single iteration primitive every operation in
:mod:`enumerable.functional.operations` is built on. It visits the elements
of an enumerable in container order and calls a visitor with
``(value, index_or_key, collection)``. A visitor ends the traversal early by
returning a :class:`~enumerable.core.signals.Stop`; ``walk`` hands that
``Stop`` back to its caller, so short-circuiting operations (detect, some,
all, include) need no second traversal routine and no exception.

Example:
    Print each element, stopping at the first negative one::

        from enumerable import each, STOP

        each([3, 1, -4, 1], lambda n: STOP if n < 0 else print(n))

See Also:
    - :mod:`enumerable.core.dispatch`: How containers are classified.
"""

import typing as tp

from enumerable.core.callbacks import bind
from enumerable.core.config import settings
from enumerable.core.dispatch import classify, keyed_items
from enumerable.core.enums import ContainerKind
from enumerable.core.signals import Stop

__all__ = [
    "each",
    "native",
    "walk",
]

Visitor = tp.Callable[[tp.Any, tp.Any, tp.Any], tp.Any]


def native(kind: ContainerKind) -> bool:
    """Whether the built-in fast path applies to a container of ``kind``.

    Args:
        kind: Classification of the input.

    Returns:
        True for exact lists and tuples while ``settings.FAST_PATH`` is on.
    """
    return kind is ContainerKind.NATIVE and settings.FAST_PATH


def walk(
    enumerable: tp.Any,
    visitor: Visitor,
    kind: tp.Optional[ContainerKind] = None,
) -> tp.Optional[Stop]:
    """Visit every element of ``enumerable`` in order.

    Args:
        enumerable: The container to traverse.
        visitor: Called as ``visitor(value, index_or_key, enumerable)``.
        kind: Classification of ``enumerable`` if the caller already has it.

    Returns:
        The Stop that ended the traversal early, or None if every element was
        visited. Unsupported inputs are visited zero times and return None.
    """
    kind = kind or classify(enumerable)

    if native(kind):
        for index, value in enumerate(enumerable):
            outcome = visitor(value, index, enumerable)
            if isinstance(outcome, Stop):
                return outcome
    elif kind.is_indexed:
        # Length is read once, like the built-in iterators do
        for index in range(len(enumerable)):
            outcome = visitor(enumerable[index], index, enumerable)
            if isinstance(outcome, Stop):
                return outcome
    elif kind.is_keyed:
        for key, value in keyed_items(enumerable):
            outcome = visitor(value, key, enumerable)
            if isinstance(outcome, Stop):
                return outcome

    return None


def each(enumerable: tp.Any, callback: tp.Callable, context: tp.Any = None) -> tp.Any:
    """Iterate over a collection, calling ``callback`` for each element.

    The callback may return ``STOP`` (or any ``Stop``) to end the iteration
    early. Other return values are ignored.

    The receiver seen through :func:`~enumerable.core.callbacks.receiver`
    depends on the traversal path: native lists/tuples and keyed containers
    see ``context``, generic sequences see the collection itself and ignore
    ``context``.

    Args:
        enumerable: A sequence, mapping or plain object.
        callback: Called as ``callback(value, index_or_key, enumerable)``.
        context: Optional receiver for the callback.

    Returns:
        The ``enumerable`` that was passed in.

    Example:
        >>> seen = []
        >>> each({"a": 1, "b": 2}, lambda value, key: seen.append(key))
        {'a': 1, 'b': 2}
        >>> seen
        ['a', 'b']
    """
    kind = classify(enumerable)
    bound_to = context if native(kind) or kind.is_keyed else enumerable

    walk(enumerable, bind(callback, bound_to), kind)
    return enumerable
