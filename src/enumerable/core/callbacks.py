"""Callback binding.

Callbacks are written against the full ``(value, index, collection)`` calling
convention, but most only care about the value. ``bind`` inspects the
callback once and forwards only the leading positional arguments it accepts,
so ``lambda n: n > 2`` and ``lambda value, index, collection: ...`` are both
valid callbacks for the same operation.

The invocation context of a callback (its receiver) is published through a
context variable for the duration of every call and read with ``receiver()``.
"""

import inspect
import typing as tp
from contextvars import ContextVar

__all__ = [
    "bind",
    "identity",
    "positional_arity",
    "receiver",
]

_receiver: ContextVar[tp.Any] = ContextVar("enumerable_receiver", default=None)

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def receiver() -> tp.Any:
    """Return the receiver of the callback that is currently running.

    Returns:
        The context bound for the current callback, or None outside of one.
    """
    return _receiver.get()


def identity(value: tp.Any) -> tp.Any:
    """Return ``value`` unchanged. Default predicate of some() and all()."""
    return value


def positional_arity(callback: tp.Callable, limit: int) -> int:
    """Count how many positional arguments ``callback`` can take.

    Args:
        callback: Any callable.
        limit: Maximum number of arguments the caller will ever pass.

    Returns:
        Number of leading arguments to forward, capped at ``limit``. Callables
        taking ``*args`` get ``limit``. Callables whose signature cannot be
        inspected (some builtins) get one.
    """
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        return 1

    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return limit
        if parameter.kind in _POSITIONAL:
            count += 1
    return min(count, limit)


def bind(
    callback: tp.Callable, context: tp.Any = None, limit: int = 3
) -> tp.Callable[..., tp.Any]:
    """Adapt ``callback`` to the engine's calling convention.

    Args:
        callback: User-supplied callback.
        context: Receiver published through ``receiver()`` while it runs.
        limit: Number of arguments the engine passes (3, or 4 for reduce).

    Returns:
        A function taking the full argument list and forwarding the part
        ``callback`` accepts. Exceptions raised by ``callback`` propagate.
    """
    arity = positional_arity(callback, limit)

    def bound(*args):
        token = _receiver.set(context)
        try:
            return callback(*args[:arity])
        finally:
            _receiver.reset(token)

    return bound
