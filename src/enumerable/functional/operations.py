"""Transform and query operations over enumerables.

Every operation resolves the container kind once and then takes one of two
paths:

    - **Fast path**: exact ``list``/``tuple`` inputs are handed to Python's
      built-in machinery (comprehensions, ``functools.reduce``, ``any``,
      ``all``) while ``settings.FAST_PATH`` is enabled.
    - **Fallback**: everything else is traversed with
      :func:`~enumerable.functional.traversal.walk` and the result is built
      incrementally.

Both paths visit elements in the same order, pass callbacks the same
``(value, index, collection)`` arguments and return equal results.
Callbacks see ``context`` as their receiver on both paths.

Exceptions raised by callbacks are never caught. They abort the operation
and the partially built result is discarded.

Example:
    >>> from enumerable import filter, map, reduce
    >>> map([1, 2, 3], lambda n: n + 1)
    [2, 3, 4]
    >>> filter({"a": 1, "b": 2}, lambda value: value > 1)
    [('b', 2)]
    >>> reduce([1, 2, 3], 0, lambda memo, n: memo + n)
    6
"""

import builtins
import functools
import typing as tp

from enumerable.core.callbacks import bind
from enumerable.core.dispatch import classify, equals, is_array, is_truthy
from enumerable.core.signals import STOP, Stop
from enumerable.functional.traversal import native, walk

__all__ = [
    "map",
    "collect",
    "filter",
    "select",
    "reject",
    "detect",
    "reduce",
    "inject",
    "flatten",
    "tail",
    "rest",
    "invoke",
    "pluck",
    "some",
    "any",
    "all",
    "every",
    "include",
]

# =============================================================================
# Transforms
# =============================================================================


def map(enumerable: tp.Any, callback: tp.Callable, context: tp.Any = None) -> list:
    """Transform each element with ``callback``.

    Args:
        enumerable: A sequence, mapping or plain object.
        callback: Called as ``callback(value, index_or_key, enumerable)``.
        context: Optional receiver for the callback.

    Returns:
        A list of callback results in traversal order.
    """
    kind = classify(enumerable)
    bound = bind(callback, context)
    if native(kind):
        return [bound(value, index, enumerable) for index, value in enumerate(enumerable)]

    results = []
    walk(
        enumerable,
        lambda value, index, collection: results.append(bound(value, index, collection)),
        kind,
    )
    return results


def filter(enumerable: tp.Any, callback: tp.Callable, context: tp.Any = None) -> list:
    """Keep the elements for which ``callback`` returns a truthy value.

    Keyed inputs (mappings, pandas containers, plain objects) produce
    ``(key, value)`` tuples so the key of each kept element is not lost.
    Sequences produce the bare values.

    Args:
        enumerable: A sequence, mapping or plain object.
        callback: Predicate called as ``callback(value, index_or_key, enumerable)``.
        context: Optional receiver for the callback.

    Returns:
        A list of kept values, or of ``(key, value)`` pairs for keyed inputs.

    Example:
        >>> filter([1, 2, 3, 4, 5, 6, 7, 8], lambda n: n % 2 == 0)
        [2, 4, 6, 8]
    """
    kind = classify(enumerable)
    bound = bind(callback, context)
    if native(kind):
        return [
            value
            for index, value in enumerate(enumerable)
            if bound(value, index, enumerable)
        ]

    results = []

    def keep(value, index, collection):
        if bound(value, index, collection):
            results.append((index, value) if kind.is_keyed else value)

    walk(enumerable, keep, kind)
    return results


def reject(enumerable: tp.Any, callback: tp.Callable, context: tp.Any = None) -> list:
    """The opposite of filter(): keep the elements the predicate rejects.

    Example:
        >>> reject([1, 2, 3, 4, 5, 6, 7, 8], lambda n: n % 2 == 0)
        [1, 3, 5, 7]
    """
    bound = bind(callback, context)
    return filter(
        enumerable,
        lambda value, index, collection: not bound(value, index, collection),
        context,
    )


def reduce(
    enumerable: tp.Any,
    memo: tp.Any,
    callback: tp.Callable,
    context: tp.Any = None,
) -> tp.Any:
    """Fold the elements from left to right into an accumulator.

    Args:
        enumerable: A sequence, mapping or plain object.
        memo: Initial accumulator value.
        callback: Called as ``callback(memo, value, index_or_key, enumerable)``
            and returns the next accumulator.
        context: Optional receiver for the callback.

    Returns:
        The final accumulator, or ``memo`` unchanged for an empty input.
    """
    kind = classify(enumerable)
    bound = bind(callback, context, limit=4)
    if native(kind):
        return functools.reduce(
            lambda acc, item: bound(acc, item[1], item[0], enumerable),
            enumerate(enumerable),
            memo,
        )

    def fold(value, index, collection):
        nonlocal memo
        memo = bound(memo, value, index, collection)

    walk(enumerable, fold, kind)
    return memo


def flatten(enumerable: tp.Any) -> list:
    """Flatten nested lists, tuples and numpy arrays to any depth.

    Example:
        >>> flatten([[2, 4], [[6], 8]])
        [2, 4, 6, 8]
    """

    def fold(memo, value):
        if is_array(value):
            memo.extend(flatten(value))
        else:
            memo.append(value)
        return memo

    return reduce(enumerable, [], fold)


def tail(enumerable: tp.Any, start: tp.Optional[int] = 1) -> list:
    """Return the elements from ``start`` to the end.

    Follows slice semantics: negative values count from the end and ``None``
    keeps every element. Keyed and unsupported inputs have no positions and
    give an empty list.

    Example:
        >>> tail([1, 2, 3, 4, 5], 3)
        [4, 5]
    """
    kind = classify(enumerable)
    if not kind.is_indexed:
        return []
    if native(kind):
        return list(enumerable[start:])
    return [enumerable[index] for index in range(*slice(start, None).indices(len(enumerable)))]


def invoke(enumerable: tp.Any, method_name: tp.Optional[str], *args) -> list:
    """Call the method ``method_name`` on every element.

    Args:
        enumerable: A sequence, mapping or plain object.
        method_name: Name of the method to call. If falsy, each element is
            called directly instead.
        *args: Positional arguments forwarded to every call.

    Returns:
        A list of the call results.

    Raises:
        AttributeError: If an element has no attribute ``method_name``.

    Example:
        >>> invoke(["hello", "world"], "upper")
        ['HELLO', 'WORLD']
    """
    arguments = tail((enumerable, method_name, *args), 2)

    def call(value):
        target = getattr(value, method_name) if method_name else value
        return target(*arguments)

    return map(enumerable, call)


def pluck(enumerable: tp.Any, key: tp.Any) -> list:
    """Pick ``element[key]`` from every element.

    Elements that do not support subscription (dataclasses, pydantic models,
    plain objects) are read with ``getattr`` instead.

    Example:
        >>> pluck([{"name": "a"}, {"name": "b"}], "name")
        ['a', 'b']
    """

    def pick(value):
        if hasattr(value, "__getitem__"):
            return value[key]
        return getattr(value, key)

    return map(enumerable, pick)


# =============================================================================
# Queries
# =============================================================================


def detect(enumerable: tp.Any, callback: tp.Callable, context: tp.Any = None) -> tp.Any:
    """Find the first element for which ``callback`` returns a truthy value.

    The traversal stops right after the match.

    Returns:
        The matching element, or None if nothing matched.

    Example:
        >>> detect([1, 2, 3, 4], lambda n: n > 2)
        3
    """
    bound = bind(callback, context)
    outcome = walk(
        enumerable,
        lambda value, index, collection: Stop(value) if bound(value, index, collection) else None,
    )
    return outcome.value if outcome is not None else None


def some(
    enumerable: tp.Any,
    callback: tp.Optional[tp.Callable] = None,
    context: tp.Any = None,
) -> bool:
    """Check whether any element satisfies ``callback``.

    Stops at the first truthy result.

    Args:
        enumerable: A sequence, mapping or plain object.
        callback: Predicate. Defaults to the truthiness of the element itself,
            where arrays and pandas containers count as true.
        context: Optional receiver for the callback.

    Returns:
        True if an element matched.
    """
    kind = classify(enumerable)
    bound = bind(callback or is_truthy, context)
    if native(kind):
        return builtins.any(
            bound(value, index, enumerable) for index, value in enumerate(enumerable)
        )

    outcome = walk(
        enumerable,
        lambda value, index, collection: STOP if bound(value, index, collection) else None,
        kind,
    )
    return outcome is not None


def all(
    enumerable: tp.Any,
    callback: tp.Optional[tp.Callable] = None,
    context: tp.Any = None,
) -> bool:
    """Check whether every element satisfies ``callback``.

    Stops at the first falsy result. An empty input is True.

    Args:
        enumerable: A sequence, mapping or plain object.
        callback: Predicate. Defaults to the truthiness of the element itself,
            where arrays and pandas containers count as true.
        context: Optional receiver for the callback.

    Returns:
        True if all elements matched.
    """
    kind = classify(enumerable)
    bound = bind(callback or is_truthy, context)
    if native(kind):
        return builtins.all(
            bound(value, index, enumerable) for index, value in enumerate(enumerable)
        )

    outcome = walk(
        enumerable,
        lambda value, index, collection: None if bound(value, index, collection) else STOP,
        kind,
    )
    return outcome is None


def include(enumerable: tp.Any, target: tp.Any) -> bool:
    """Check whether some element equals ``target``.

    An element matches when it is ``target`` or compares equal to it.
    Element-wise comparisons (numpy arrays, pandas Series) never match.

    Example:
        >>> include([1, 2, 3], 3)
        True
    """
    kind = classify(enumerable)
    if native(kind):
        return builtins.any(equals(value, target) for value in enumerable)

    outcome = walk(
        enumerable,
        lambda value, key, collection: STOP if equals(value, target) else None,
        kind,
    )
    return outcome is not None


# Aliases
collect = map
select = filter
inject = reduce
rest = tail
any = some
every = all
