"""Tests for input classification by the Some/Ok/Err constructors."""

import asyncio
import math

import pytest
from hypothesis import given

from eventual import (
    AsyncOption,
    AsyncResult,
    Err,
    ErrValue,
    Nothing,
    NothingValue,
    Ok,
    OkValue,
    Option,
    Result,
    Some,
    SomeValue,
    collect,
    configure,
    is_async_option,
    is_async_result,
    is_option,
    is_pending,
    is_result,
    is_sentinel,
    option_from,
    result_from,
)
from tests.strategies import plain_values, sentinels


async def _value(value):
    return value


class TestSentinels:
    """Tests for sentinel detection and collapse."""

    @pytest.mark.parametrize('value', [None, math.nan, math.inf, float('nan'), float('inf')])
    def test_is_sentinel(self, value):
        """None, NaN and positive infinity are sentinels."""
        assert is_sentinel(value)

    @pytest.mark.parametrize('value', [0, 0.0, -math.inf, '', False, [], 'None'])
    def test_is_not_sentinel(self, value):
        """Falsy values and negative infinity are not sentinels."""
        assert not is_sentinel(value)

    @given(sentinels)
    def test_some_collapses_sentinels(self, value):
        """Some of a sentinel is Nothing."""
        assert Some(value) == Nothing()

    @given(plain_values)
    def test_some_keeps_plain_values(self, value):
        """Some of a non-sentinel is Some."""
        assert Some(value).is_some()

    def test_some_negative_infinity_is_present(self):
        """Negative infinity is an ordinary value."""
        assert Some(-math.inf) == Some(-math.inf)

    def test_collapse_can_be_disabled(self):
        """With collapse disabled Some(None) holds None."""
        configure(collapse_sentinels=False)
        option = Some(None)
        assert option.is_some()
        assert option.unwrap() is None

    def test_option_from_always_collapses(self):
        """option_from ignores the collapse setting."""
        configure(collapse_sentinels=False)
        assert option_from(None) == Nothing()
        assert option_from(math.nan) == Nothing()
        assert option_from(3) == Some(3)


class TestIdempotentWrapping:
    """Constructors pass containers through and wrap raw variants."""

    def test_some_of_option_is_same_object(self):
        """Some(option) returns the option itself."""
        option = Some(1)
        assert Some(option) is option
        nothing = Nothing()
        assert Some(nothing) is nothing

    def test_some_of_raw_variant(self):
        """Some wraps a raw variant without nesting."""
        assert Some(SomeValue(1)) == Some(1)
        assert Some(NothingValue()) == Nothing()

    def test_ok_of_result_is_same_object(self):
        """Ok(result) and Err(result) return the result itself."""
        result = Err('e')
        assert Ok(result) is result
        assert Err(Ok(1)) == Ok(1)

    def test_ok_of_raw_variant(self):
        """Ok and Err wrap raw variants as they are."""
        assert Ok(ErrValue('e')) == Err('e')
        assert Err(OkValue(1)) == Ok(1)

    @pytest.mark.asyncio
    async def test_some_of_async_option_is_same_object(self):
        """Some(async_option) returns it unchanged."""
        pending = AsyncOption.from_some(1)
        assert Some(pending) is pending
        assert await pending == Some(1)

    @pytest.mark.asyncio
    async def test_ok_of_async_result_is_same_object(self):
        """Ok(async_result) returns it unchanged."""
        pending = AsyncResult.from_ok(1)
        assert Ok(pending) is pending
        assert Err(pending) is pending
        assert await pending == Ok(1)


class TestPendingInputs:
    """Awaitable inputs produce asynchronous containers."""

    @pytest.mark.asyncio
    async def test_some_of_coroutine(self):
        """Some(coroutine) is an AsyncOption of the classified value."""
        option = Some(_value(5))
        assert isinstance(option, AsyncOption)
        assert await option == Some(5)

    @pytest.mark.asyncio
    async def test_some_of_coroutine_returning_sentinel(self):
        """The settled value is classified like a sync input."""
        assert await Some(_value(None)) == Nothing()

    @pytest.mark.asyncio
    async def test_some_of_future(self):
        """Any awaitable counts as pending, not only coroutines."""
        future = asyncio.get_running_loop().create_future()
        future.set_result(3)
        assert await Some(future) == Some(3)

    @pytest.mark.asyncio
    async def test_ok_of_coroutine(self):
        """Ok(coroutine) settles to Ok of the value."""
        result = Ok(_value(5))
        assert isinstance(result, AsyncResult)
        assert await result == Ok(5)

    @pytest.mark.asyncio
    async def test_err_of_coroutine(self):
        """Err(coroutine) settles to Err of the plain value."""
        assert await Err(_value('late')) == Err('late')

    @pytest.mark.asyncio
    async def test_err_of_coroutine_returning_ok(self):
        """A settled container is kept as it is."""
        assert await Err(_value(Ok(1))) == Ok(1)

    @pytest.mark.asyncio
    async def test_ok_of_coroutine_returning_err(self):
        """Ok(coroutine) keeps an Err outcome."""
        assert await Ok(_value(Err('e'))) == Err('e')


class TestPredicates:
    """Tests for the is_* predicates."""

    @pytest.mark.asyncio
    async def test_container_predicates(self):
        """Each predicate recognizes exactly its container."""
        pending_option = AsyncOption.from_some(1)
        pending_result = AsyncResult.from_ok(1)

        assert is_option(Some(1))
        assert is_option(Nothing())
        assert not is_option(Ok(1))
        assert not is_option(pending_option)

        assert is_result(Ok(1))
        assert is_result(Err('e'))
        assert not is_result(Some(1))
        assert not is_result(pending_result)

        assert is_async_option(pending_option)
        assert not is_async_option(pending_result)
        assert is_async_result(pending_result)
        assert not is_async_result(pending_option)

        await pending_option
        await pending_result

    @pytest.mark.asyncio
    async def test_is_pending(self):
        """is_pending detects awaitables."""
        coroutine = _value(1)
        assert is_pending(coroutine)
        assert is_pending(AsyncOption.from_nothing())
        assert not is_pending(1)
        assert not is_pending(Some(1))
        assert await coroutine == 1

    def test_raw_variants_are_not_containers(self):
        """Raw variants are not Option or Result containers."""
        assert not is_option(SomeValue(1))
        assert not is_result(OkValue(1))
        assert isinstance(Option(SomeValue(1)), Option)
        assert isinstance(Result(OkValue(1)), Result)


class TestResultFrom:
    """Tests for result_from."""

    def test_plain_value_is_ok(self):
        """Plain values become Ok by default."""
        assert result_from(1) == Ok(1)

    def test_error_flag(self):
        """error=True builds Err."""
        assert result_from('bad', error=True) == Err('bad')

    def test_container_passthrough(self):
        """Existing Results pass through."""
        assert result_from(Err('e')) == Err('e')


class TestCollect:
    """Tests for collect."""

    def test_all_ok(self):
        """All Ok collects into Ok of list."""
        assert collect([Ok(1), Ok(2), Ok(3)]) == Ok([1, 2, 3])

    def test_first_err_wins(self):
        """The first Err short-circuits."""
        assert collect([Ok(1), Err('first'), Err('second')]) == Err('first')

    def test_empty(self):
        """An empty iterable collects to Ok([])."""
        assert collect([]) == Ok([])

    def test_plain_values_count_as_ok(self):
        """Plain items are classified like Ok()."""
        assert collect([1, Ok(2)]) == Ok([1, 2])

    def test_stops_consuming_after_err(self):
        """collect does not pull items past the first Err."""
        pulled = []

        def items():
            for item in (Ok(1), Err('e'), Ok(3)):
                pulled.append(item)
                yield item

        assert collect(items()) == Err('e')
        assert len(pulled) == 2

    @pytest.mark.asyncio
    async def test_pending_item_raises(self):
        """A pending item is rejected."""
        pending = AsyncResult.from_ok(1)
        with pytest.raises(TypeError, match='await it first'):
            collect([Ok(1), pending])
        await pending
