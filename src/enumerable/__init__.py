"""Functional iteration utilities for sequences, mappings and plain objects."""

from enumerable.logger.logger import setup_logger
from enumerable.core import STOP, ContainerKind, Stop, identity, receiver, settings
from enumerable.functional import (
    all,
    any,
    collect,
    detect,
    each,
    every,
    filter,
    flatten,
    include,
    inject,
    invoke,
    map,
    pluck,
    reduce,
    reject,
    rest,
    select,
    some,
    tail,
)
from enumerable.chain import CHAINABLE_METHODS, Chain, auto_chain, chain

__all__ = [
    "each",
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
    "identity",
    "chain",
    "auto_chain",
    "Chain",
    "CHAINABLE_METHODS",
    "Stop",
    "STOP",
    "receiver",
    "ContainerKind",
    "settings",
    "setup_logger",
]
