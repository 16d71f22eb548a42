"""Core building blocks: container classification, callbacks and settings."""

from enumerable.core.callbacks import bind, identity, receiver
from enumerable.core.config import Settings, settings
from enumerable.core.dispatch import classify, equals, is_array, is_truthy, keyed_items
from enumerable.core.enums import ContainerKind
from enumerable.core.signals import STOP, Stop

__all__ = [
    "ContainerKind",
    "Settings",
    "settings",
    "classify",
    "keyed_items",
    "is_array",
    "is_truthy",
    "equals",
    "bind",
    "identity",
    "receiver",
    "Stop",
    "STOP",
]
