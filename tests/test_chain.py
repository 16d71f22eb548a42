import pandas as pd
import pytest

import enumerable
from enumerable.chain import CHAINABLE_METHODS, Chain, auto_chain, chain


def test_chain_filter_map():
    result = (
        chain([1, 2, 3, 4])
        .filter(lambda n: n % 2 == 0)
        .map(lambda n: n * 10)
        .values()
    )
    assert result == [20, 40]


def test_values_is_idempotent():
    wrapper = chain([1, 2, 3]).map(lambda n: n + 1)
    first = wrapper.values()
    assert wrapper.values() is first


def test_chained_calls_return_wrapper():
    wrapper = chain([3, 1, 2])
    assert wrapper.map(lambda n: n) is wrapper
    assert wrapper.each(lambda n: None) is wrapper


def test_chain_each_keeps_results():
    values = [1, 2]
    seen = []
    assert chain(values).each(seen.append).values() is values
    assert seen == [1, 2]


def test_chain_terminal_operations():
    assert chain([1, 2, 3]).reduce(0, lambda memo, n: memo + n).values() == 6
    assert chain([1, 2, 3]).detect(lambda n: n > 1).values() == 2
    assert chain([1, 2, 3]).any(lambda n: n > 2).values() is True
    assert chain([1, 2, 3]).all(lambda n: n > 2).values() is False


def test_chain_aliases_and_context():
    result = (
        chain(["a", "bb", "ccc"])
        .collect(len)
        .select(lambda n, index: n > index)
        .inject(0, lambda memo, n: memo + n * enumerable.receiver(), 2)
        .values()
    )
    assert result == 12


def test_chain_tail_rest_pluck_reject():
    rows = [{"id": 1}, {"id": 2}, {"id": 3}, {"id": 4}]
    assert chain(rows).rest().pluck("id").reject(lambda n: n == 3).tail(1).values() == [4]


def test_chain_mapping_pairs():
    result = (
        chain({"a": 1, "b": 2, "c": 3})
        .filter(lambda value: value > 1)
        .map(lambda pair: pair[0])
        .values()
    )
    assert result == ["b", "c"]


def test_chainable_set_is_closed():
    for name in CHAINABLE_METHODS:
        assert callable(getattr(Chain, name))

    wrapper = chain([[1], [2]])
    for name in ("flatten", "invoke", "include", "chain"):
        with pytest.raises(AttributeError):
            getattr(wrapper, name)


def test_chain_errors_propagate():
    def boom(value):
        raise RuntimeError("stop")

    with pytest.raises(RuntimeError, match="stop"):
        chain([1]).map(boom)


def test_auto_chain():
    wrapped = auto_chain([1])
    assert isinstance(wrapped, Chain)
    assert wrapped.values() == [1]

    assert auto_chain({"a": 1}).filter(lambda value: value).values() == [("a", 1)]
    assert auto_chain(pd.Series([1, 2])) is not None


@pytest.mark.parametrize("value", ["abc", b"abc", 5, None, object()])
def test_auto_chain_rejects(value):
    assert auto_chain(value) is None


def test_repr():
    assert repr(chain([1])) == "Chain([1])"
