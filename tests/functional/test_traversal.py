"""Tests for the traversal engine (each / walk)."""

import numpy as np
import pandas as pd
import pytest

from enumerable.core.callbacks import receiver
from enumerable.core.config import settings
from enumerable.core.signals import STOP, Stop
from enumerable.functional.traversal import each, walk


class Point:
    dimensions = 2

    def __init__(self, x, y):
        self.x = x
        self.y = y


class TaggedList(list):
    pass


@pytest.fixture
def no_fast_path(monkeypatch):
    monkeypatch.setattr(settings, "FAST_PATH", False)


def test_each_visits_in_order():
    values = [10, 20, 30]
    seen = []
    each(values, lambda value, index, collection: seen.append((value, index, collection)))
    assert seen == [(10, 0, values), (20, 1, values), (30, 2, values)]


def test_each_returns_same_reference():
    values = [1, 2, 3]
    mapping = {"a": 1}
    assert each(values, lambda value: None) is values
    assert each(mapping, lambda value: None) is mapping
    # Also when stopped early
    assert each(values, lambda value: STOP) is values


def test_each_stop():
    seen = []
    each([1, 2, 3, 4], lambda n: STOP if n == 3 else seen.append(n))
    assert seen == [1, 2]


def test_each_mapping_keys():
    seen = []
    each({"a": 1, "b": 2}, lambda value, key: seen.append((key, value)))
    assert seen == [("a", 1), ("b", 2)]


def test_each_object_own_attributes():
    seen = []
    each(Point(3, 4), lambda value, key: seen.append(key))
    assert seen == ["x", "y"]


def test_each_generic_sequences():
    seen = []
    each("abc", lambda char, index: seen.append((index, char)))
    assert seen == [(0, "a"), (1, "b"), (2, "c")]

    seen = []
    each(np.array([1, 2, 3]), lambda value: seen.append(int(value)))
    assert seen == [1, 2, 3]


def test_each_pandas_series_labels():
    seen = []
    series = pd.Series([1.5, 2.5], index=["AAPL", "MSFT"])
    each(series, lambda value, label: seen.append((label, float(value))))
    assert seen == [("AAPL", 1.5), ("MSFT", 2.5)]


@pytest.mark.parametrize("value", [None, 5, object(), {1, 2}])
def test_each_unsupported_is_noop(value):
    calls = []
    assert each(value, lambda *args: calls.append(args)) is value
    assert calls == []


def test_each_propagates_callback_errors():
    def boom(value):
        if value == 2:
            raise ValueError("two")

    with pytest.raises(ValueError, match="two"):
        each([1, 2, 3], boom)

    with pytest.raises(KeyError):
        each({"a": 1}, lambda value: {}["missing"])


def test_each_receiver_native_uses_context():
    receivers = []
    each([1, 2], lambda value: receivers.append(receiver()), "context")
    assert receivers == ["context", "context"]


def test_each_receiver_generic_sequence_uses_collection():
    # The supplied context is ignored on the index-loop branch
    values = TaggedList([1, 2])
    receivers = []
    each(values, lambda value: receivers.append(receiver()), "context")
    assert receivers == [values, values]


def test_each_receiver_mapping_uses_context():
    receivers = []
    each({"a": 1}, lambda value: receivers.append(receiver()), "context")
    assert receivers == ["context"]


def test_each_receiver_without_fast_path(no_fast_path):
    values = [1, 2]
    receivers = []
    each(values, lambda value: receivers.append(receiver()), "context")
    assert receivers == [values, values]


def test_walk_returns_stop():
    outcome = walk([1, 2, 3], lambda value, index, collection: Stop(index) if value == 2 else None)
    assert outcome == Stop(1)

    assert walk([1, 2, 3], lambda value, index, collection: None) is None
    assert walk(None, lambda value, index, collection: STOP) is None


def test_walk_reads_length_once():
    values = TaggedList([1, 2])
    seen = []

    def grow(value, index, collection):
        seen.append(value)
        collection.append(value)

    walk(values, grow)
    assert seen == [1, 2]
