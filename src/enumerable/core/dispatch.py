"""Container classification for traversal dispatch.

Every public operation resolves the kind of its input exactly once, at the
call boundary, and then follows one of three traversal strategies:

    - **NATIVE**: exact ``list`` and ``tuple`` instances. Operations may hand
      these to Python's own iteration machinery (comprehensions,
      ``functools.reduce``, ``any``, ``all``, ``in``).
    - **SEQUENCE**: anything else with an integer length and positional
      indexing, e.g. ``str``, ``range``, ``numpy.ndarray`` or a user-defined
      array-like. Traversed by index from ``0`` to ``len - 1``.
    - **MAPPING**: keyed containers. ``collections.abc.Mapping`` instances,
      pandas ``Series``/``DataFrame`` (label -> value, column -> Series) and
      plain objects, whose keys are their own instance attributes.

Values that fit none of these (``None``, numbers, sets, bare ``object()``)
are ``UNSUPPORTED`` and traverse as if empty.
"""

import logging
import typing as tp
from collections.abc import Mapping

import numpy as np
import pandas as pd

from .enums import ContainerKind

__all__ = [
    "NATIVE_TYPES",
    "classify",
    "keyed_items",
    "is_array",
    "is_truthy",
    "equals",
]

logger = logging.getLogger(__name__)

NATIVE_TYPES = (list, tuple)

# Keyed pandas containers, traversed label -> value
PANDAS_TYPES = (pd.Series, pd.DataFrame)


def _has_length(value: tp.Any) -> bool:
    try:
        len(value)
    except TypeError:
        # 0-d arrays and unsized objects
        return False
    return True


def classify(enumerable: tp.Any) -> ContainerKind:
    """Resolve how ``enumerable`` should be traversed.

    Args:
        enumerable: Any value passed to a public operation.

    Returns:
        The ContainerKind that selects the traversal strategy.
    """
    if type(enumerable) in NATIVE_TYPES:
        kind = ContainerKind.NATIVE
    elif isinstance(enumerable, (Mapping, *PANDAS_TYPES)):
        kind = ContainerKind.MAPPING
    elif hasattr(type(enumerable), "__getitem__") and _has_length(enumerable):
        kind = ContainerKind.SEQUENCE
    # Classes expose their whole namespace through __dict__, not own state
    elif hasattr(enumerable, "__dict__") and not isinstance(enumerable, type):
        kind = ContainerKind.MAPPING
    else:
        kind = ContainerKind.UNSUPPORTED

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Dispatching {type(enumerable).__name__} as {kind.value}")
    return kind


def keyed_items(enumerable: tp.Any) -> tp.Iterable[tp.Tuple[tp.Any, tp.Any]]:
    """Iterate the own ``(key, value)`` pairs of a keyed container.

    Args:
        enumerable: A value classified as ``ContainerKind.MAPPING``.

    Returns:
        A live view over the container's items. For plain objects these are
        the instance attributes only, class attributes are not included.
    """
    if isinstance(enumerable, (Mapping, *PANDAS_TYPES)):
        return enumerable.items()
    return vars(enumerable).items()


def is_array(value: tp.Any) -> bool:
    """Check whether ``value`` is a nested array that flatten() descends into.

    0-d numpy arrays are scalars and are not descended into.
    """
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    return isinstance(value, NATIVE_TYPES)


def is_truthy(value: tp.Any) -> bool:
    """Truthiness of an element, used when no predicate is given.

    Non-scalar numpy arrays and pandas containers count as true, like any
    other object reference, whatever their contents.

    Args:
        value: Any element.

    Returns:
        True if ``value`` counts as true.
    """
    if isinstance(value, PANDAS_TYPES):
        return True
    if isinstance(value, np.ndarray) and value.ndim > 0:
        return True
    return bool(value)


def equals(value: tp.Any, target: tp.Any) -> bool:
    """Identity-or-equality check used by include().

    Element-wise comparisons (arrays, Series) never count as a match.

    Returns:
        True if ``value`` is ``target`` or compares equal to it as a scalar.
    """
    if value is target:
        return True
    outcome = value == target
    return isinstance(outcome, (bool, np.bool_)) and bool(outcome)
