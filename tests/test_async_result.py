"""Tests for AsyncResult: pending Results and their combinators."""

import asyncio

import pytest

from eventual import AsyncOption, AsyncResult, Err, Nothing, Ok, Result, Some, UnwrapError


async def _value(value):
    await asyncio.sleep(0)
    return value


class TestAsyncResult:
    """Tests for building and awaiting AsyncResult."""

    @pytest.mark.asyncio
    async def test_await_ok(self):
        """Can await AsyncResult to get Ok."""

        async def get_ok() -> Result[int, str]:
            return Ok(42)

        result = await AsyncResult(get_ok())
        assert isinstance(result, Result)
        assert result == Ok(42)

    @pytest.mark.asyncio
    async def test_await_err(self):
        """Can await AsyncResult to get Err."""

        async def get_err() -> Result[int, str]:
            return Err('error')

        assert await AsyncResult(get_err()) == Err('error')

    @pytest.mark.asyncio
    async def test_plain_value_is_ok(self):
        """A plain settled value is classified by Ok."""
        assert await AsyncResult(_value(5)) == Ok(5)
        assert await AsyncResult(_value(None)) == Ok(None)

    @pytest.mark.asyncio
    async def test_from_constructors(self):
        """from_ok, from_err and from_result settle as named."""
        assert await AsyncResult.from_ok(42) == Ok(42)
        assert await AsyncResult.from_err('error') == Err('error')
        assert await AsyncResult.from_result(Ok(1)) == Ok(1)
        assert await AsyncResult.from_result(Err('e')) == Err('e')

    @pytest.mark.asyncio
    async def test_await_twice(self):
        """The same AsyncResult can be awaited repeatedly."""
        result = AsyncResult.from_ok(3)
        assert await result == Ok(3)
        assert await result == Ok(3)

    @pytest.mark.asyncio
    async def test_async_iteration(self):
        """async for yields the Ok value and nothing for Err."""
        assert [v async for v in AsyncResult.from_ok(1)] == [1]
        assert [v async for v in AsyncResult.from_err('e')] == []


class TestAsyncResultChains:
    """Tests for combinator chains on pending Results."""

    @pytest.mark.asyncio
    async def test_map_ok(self):
        """map transforms Ok value."""
        assert await AsyncResult.from_ok(5).map(lambda x: x * 2) == Ok(10)

    @pytest.mark.asyncio
    async def test_map_err_preserved(self):
        """map preserves Err."""
        assert await AsyncResult.from_err('error').map(lambda x: x * 2) == Err('error')

    @pytest.mark.asyncio
    async def test_map_async_function(self):
        """map accepts an async function."""

        async def double(x: int) -> int:
            await asyncio.sleep(0)
            return x * 2

        assert await AsyncResult.from_ok(5).map(double) == Ok(10)
        assert await Ok(5).map(double) == Ok(10)

    @pytest.mark.asyncio
    async def test_map_err_transforms_error(self):
        """map_err transforms Err value."""
        assert await AsyncResult.from_err('error').map_err(str.upper) == Err('ERROR')
        assert await AsyncResult.from_ok(42).map_err(str.upper) == Ok(42)

    @pytest.mark.asyncio
    async def test_map_err_async_function(self):
        """An async map_err keeps the Err channel."""

        async def describe(error):
            return f'wrapped: {error}'

        assert await Err('io').map_err(describe) == Err('wrapped: io')

    @pytest.mark.asyncio
    async def test_and_then(self):
        """and_then chains sync and async Result functions."""

        def validate(x: int) -> Result[int, str]:
            return Ok(x) if x > 0 else Err('not positive')

        async def fetch(x: int) -> Result[int, str]:
            return Ok(x * 10)

        assert await AsyncResult.from_ok(5).and_then(validate).and_then(fetch) == Ok(50)
        assert await AsyncResult.from_ok(-5).and_then(validate).and_then(fetch) == Err('not positive')
        assert await AsyncResult.from_err('original').and_then(validate) == Err('original')

    @pytest.mark.asyncio
    async def test_mixed_chain(self):
        """A sync Ok chained with async steps settles to the product."""
        result = (
            Ok(12)
            .and_then(lambda n: Ok(n * 2))
            .and_then(lambda n: AsyncResult.from_ok(n * 3))
            .and_then(lambda n: Ok(_value(n * 4)))
            .and_then(lambda n: Ok(n * 5))
        )
        assert isinstance(result, AsyncResult)
        assert await result == Ok(12 * 2 * 3 * 4 * 5)

    @pytest.mark.asyncio
    async def test_and_and_or(self):
        """and_ and or_ with pending operands."""
        assert await AsyncResult.from_ok(1).and_(Ok(2)) == Ok(2)
        assert await AsyncResult.from_err('e').and_(Ok(2)) == Err('e')
        assert await AsyncResult.from_err('e').or_(Ok(2)) == Ok(2)
        assert await Err('e').or_(AsyncResult.from_ok(3)) == Ok(3)

    @pytest.mark.asyncio
    async def test_or_else_async_recovery(self):
        """or_else recovers with an async function."""

        async def retry(error):
            return Ok(f'recovered from {error}')

        assert await AsyncResult.from_err('timeout').or_else(retry) == Ok('recovered from timeout')
        assert await AsyncResult.from_ok(1).or_else(retry) == Ok(1)

    @pytest.mark.asyncio
    async def test_flatten(self):
        """flatten removes one level of nesting after settlement."""
        assert await AsyncResult.from_ok(Ok(1)).flatten() == Ok(1)
        assert await AsyncResult.from_err('e').flatten() == Err('e')

    @pytest.mark.asyncio
    async def test_zip(self):
        """zip waits for both sides and keeps the first Err."""
        assert await AsyncResult.from_ok(1).zip(Ok(2)) == Ok((1, 2))
        assert await AsyncResult.from_ok(1).zip(AsyncResult.from_ok(2)) == Ok((1, 2))
        assert await AsyncResult.from_err('a').zip(AsyncResult.from_err('b')) == Err('a')
        assert await AsyncResult.from_ok(1).zip(AsyncResult.from_err('b')) == Err('b')

    @pytest.mark.asyncio
    async def test_ok_and_err_cross_to_option(self):
        """ok and err produce pending Options."""
        option = AsyncResult.from_ok(1).ok()
        assert isinstance(option, AsyncOption)
        assert await option == Some(1)
        assert await AsyncResult.from_err('e').ok() == Nothing()
        assert await AsyncResult.from_err('e').err() == Some('e')
        assert await AsyncResult.from_ok(1).err() == Nothing()

    @pytest.mark.asyncio
    async def test_map_option_and_map_result(self):
        """map_option and map_result coerce after settlement."""
        assert await AsyncResult.from_ok(2).map_option(lambda e: None, lambda x: x) == Some(2)
        assert await AsyncResult.from_err('e').map_option(lambda e: None, lambda x: x) == Nothing()
        assert await AsyncResult.from_ok(2).map_result(Err, lambda x: x + 1) == Ok(3)
        assert await AsyncResult.from_err('e').map_result(Err, lambda x: x) == Err('e')


class TestAsyncResultTerminals:
    """Tests for terminal operations, which are coroutines."""

    @pytest.mark.asyncio
    async def test_is_ok_and_is_err(self):
        """Predicates are awaited."""
        assert await AsyncResult.from_ok(1).is_ok()
        assert await AsyncResult.from_err('e').is_err()

    @pytest.mark.asyncio
    async def test_unwrap(self):
        """unwrap returns the Ok value or raises UnwrapError."""
        assert await AsyncResult.from_ok(1).unwrap() == 1
        with pytest.raises(UnwrapError) as exc_info:
            await AsyncResult.from_err('bad').unwrap()
        assert exc_info.value.value == 'bad'

    @pytest.mark.asyncio
    async def test_expect(self):
        """expect raises with the given message."""
        with pytest.raises(UnwrapError, match='needed data'):
            await AsyncResult.from_err('bad').expect('needed data')

    @pytest.mark.asyncio
    async def test_unwrap_err_and_expect_err(self):
        """unwrap_err and expect_err mirror unwrap."""
        assert await AsyncResult.from_err('bad').unwrap_err() == 'bad'
        assert await AsyncResult.from_err('bad').expect_err('wanted failure') == 'bad'
        with pytest.raises(UnwrapError, match='wanted failure'):
            await AsyncResult.from_ok(1).expect_err('wanted failure')

    @pytest.mark.asyncio
    async def test_unwrap_or(self):
        """unwrap_or returns the default on Err."""
        assert await AsyncResult.from_err('e').unwrap_or(0) == 0

    @pytest.mark.asyncio
    async def test_unwrap_or_else(self):
        """unwrap_or_else computes the fallback from the error, awaiting if needed."""

        async def fallback(error):
            return len(error)

        assert await AsyncResult.from_err('abc').unwrap_or_else(len) == 3
        assert await AsyncResult.from_err('abcd').unwrap_or_else(fallback) == 4
        assert await AsyncResult.from_ok(1).unwrap_or_else(fallback) == 1

    @pytest.mark.asyncio
    async def test_map_or_else(self):
        """map_or_else returns a plain value from one branch."""
        assert await AsyncResult.from_ok(2).map_or_else(len, lambda x: x * 10) == 20
        assert await AsyncResult.from_err('abc').map_or_else_async(len, lambda x: x * 10) == 3


class TestAsyncResultFaults:
    """A fault in the source is never turned into Err."""

    @pytest.mark.asyncio
    async def test_fault_propagates(self):
        """Awaiting a faulted source raises the original exception."""

        async def broken():
            raise ConnectionError('reset')

        chain = Ok(broken()).map(lambda x: x).or_else(lambda e: Ok('recovered'))
        with pytest.raises(ConnectionError, match='reset'):
            await chain

    @pytest.mark.asyncio
    async def test_caller_folds_fault_into_err(self):
        """Callers choose to turn faults into Err explicitly."""

        async def broken():
            raise ConnectionError('reset')

        async def guarded():
            try:
                return Ok(await broken())
            except ConnectionError as exc:
                return Err(str(exc))

        assert await AsyncResult(guarded()) == Err('reset')

    @pytest.mark.asyncio
    async def test_shared_source_runs_once(self):
        """Two chains from one AsyncResult share the settled value."""
        calls = []

        async def source():
            calls.append(1)
            return Ok(3)

        shared = AsyncResult(source())
        first = shared.map(lambda x: x + 1)
        second = shared.and_then(lambda x: Err(x))
        assert await first == Ok(4)
        assert await second == Err(3)
        assert calls == [1]
