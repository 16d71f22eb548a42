"""Functional primitives for enumerable.

This module provides the traversal engine and the transform/query operations
built on it. Operations are stateless and work on lists, tuples, generic
sequences, mappings, pandas containers and plain objects alike.
"""

from enumerable.functional.operations import (
    all,
    any,
    collect,
    detect,
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
from enumerable.functional.traversal import each, walk

__all__ = [
    "each",
    "walk",
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
