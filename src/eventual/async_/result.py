"""AsyncResult: a Result whose value is the outcome of a pending computation.

AsyncResult wraps an awaitable that settles to a Result (or to a plain value
classified by its ``wrap`` constructor, ``Ok`` unless built through ``Err``)
and exposes the same combinators as Result. Combinators return new
AsyncResult instances, so a chain of async operations is written like a chain
of sync ones and only runs when awaited.

Example:
    ```python
    async def fetch_user(id: int) -> Result[User, Error]:
        ...

    result = await (
        Ok(fetch_user(1))
        .and_then(validate_user)
        .map(format_response)
    )
    ```
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Generator
from typing import TYPE_CHECKING, Any

import anyio

from eventual.async_.pending import Pending, settle
from eventual.types.classify import is_pending
from eventual.types.result import Err, Ok, Result

if TYPE_CHECKING:
    from eventual.async_.option import AsyncOption

__all__ = ['AsyncResult', 'is_async_result']


class AsyncResult[T, E]:
    """Pending Result.

    The source settles once; the same AsyncResult may be awaited or chained
    from any number of places. A fault raised by the source propagates to the
    consumer unchanged. Folding faults into the Err channel is up to the
    caller, for example with a coroutine that catches and returns Err.

    Attributes:
        pending: The settle-once source.
        wrap: Constructor applied to the settled value (``Ok`` or ``Err``).

    Example:
        ```python
        async def get_data() -> Result[int, str]:
            return Ok(42)

        async def main():
            result = await AsyncResult(get_data()).map(lambda x: x * 2)
            assert result == Ok(84)
        ```
    """

    __slots__ = ('_pending', '_wrap')

    def __init__(self, awaitable: Awaitable[Any], wrap: Callable[[Any], Any] = Ok) -> None:
        """Create an AsyncResult from an awaitable.

        Args:
            awaitable: An awaitable producing a Result, a raw variant, another
                pending computation or a plain value.
            wrap: Constructor classifying the settled value.
        """
        self._pending = awaitable if isinstance(awaitable, Pending) else Pending(awaitable)
        self._wrap = wrap

    @property
    def pending(self) -> Pending[Any]:
        return self._pending

    @property
    def wrap(self) -> Callable[[Any], Any]:
        return self._wrap

    def __await__(self) -> Generator[Any, Any, Result[T, E]]:
        return self.resolve().__await__()

    async def resolve(self) -> Result[T, E]:
        """Wait for the source to settle and return the synchronous Result."""
        return await settle(self._pending, self._wrap, Result)

    async def __aiter__(self) -> AsyncIterator[T]:
        for value in await self:
            yield value

    def __repr__(self) -> str:
        return f'AsyncResult({self._pending!r})'

    @classmethod
    def from_ok(cls, value: T) -> AsyncResult[T, E]:
        """Create an AsyncResult settling to ``Ok(value)``."""

        async def _ok() -> T:
            return value

        return cls(_ok())

    @classmethod
    def from_err(cls, error: E) -> AsyncResult[T, E]:
        """Create an AsyncResult settling to ``Err(error)``."""

        async def _err() -> E:
            return error

        return cls(_err(), wrap=Err)

    @classmethod
    def from_result(cls, result: Result[T, E]) -> AsyncResult[T, E]:
        """Create an AsyncResult settling to an existing Result."""

        async def _result() -> Result[T, E]:
            return result

        return cls(_result())

    def _then(self, op: Callable[[Result[T, E]], Any]) -> AsyncResult[Any, Any]:
        async def _chained() -> Any:
            return op(await self)

        return AsyncResult(_chained())

    def _then_option(self, op: Callable[[Result[T, E]], Any]) -> AsyncOption[Any]:
        from eventual.async_.option import AsyncOption

        async def _chained() -> Any:
            return op(await self)

        return AsyncOption(_chained())

    # --- Combinators ---

    def and_[U](self, other: Result[U, E] | AsyncResult[U, E]) -> AsyncResult[U, E]:
        return self._then(lambda result: result.and_(other))

    def and_then[U](self, f: Callable[[T], Any]) -> AsyncResult[U, E]:
        """Chain f after the source settles.

        f may return a Result, an AsyncResult or an awaitable of a Result;
        the chain flattens it.

        Example:
            ```python
            def validate(x: int) -> Result[int, str]:
                return Ok(x) if x > 0 else Err('not positive')

            async def example():
                result = await AsyncResult.from_ok(5).and_then(validate)
                assert result == Ok(5)
            ```
        """
        return self._then(lambda result: result.and_then(f))

    def or_[F](self, other: Result[T, F] | AsyncResult[T, F]) -> AsyncResult[T, F]:
        return self._then(lambda result: result.or_(other))

    def or_else[F](self, f: Callable[[E], Any]) -> AsyncResult[T, F]:
        """Recover from an Err with a sync or async function."""
        return self._then(lambda result: result.or_else(f))

    def map[U](self, f: Callable[[T], U | Awaitable[U]]) -> AsyncResult[U, E]:
        """Apply f (sync or async) to the Ok value, leaving an Err untouched."""
        return self._then(lambda result: result.map(f))

    def map_err[F](self, f: Callable[[E], F | Awaitable[F]]) -> AsyncResult[T, F]:
        """Apply f (sync or async) to the Err value, leaving an Ok untouched."""
        return self._then(lambda result: result.map_err(f))

    def flatten(self) -> AsyncResult[Any, Any]:
        return self._then(lambda result: result.flatten())

    def zip[U](self, other: Result[U, E] | AsyncResult[U, E]) -> AsyncResult[tuple[T, U], E]:
        """Combine two results into a tuple, waiting for both concurrently.

        If both are Ok, returns Ok((self.value, other.value)). If either is
        Err, returns the first Err by position: self first, then other.
        """
        other = Ok(other)
        if isinstance(other, Result):
            return self._then(lambda result: result.zip(other))

        async def _zipped() -> Result[tuple[T, U], E]:
            settled: dict[str, Result[Any, Any]] = {}
            faults: dict[str, Exception] = {}

            async def run(key: str, source: AsyncResult[Any, Any]) -> None:
                try:
                    settled[key] = await source
                except Exception as exc:
                    faults[key] = exc

            async with anyio.create_task_group() as tg:
                tg.start_soon(run, 'self', self)
                tg.start_soon(run, 'other', other)

            for key in ('self', 'other'):
                if key in faults:
                    raise faults[key]
            return settled['self'].zip(settled['other'])

        return AsyncResult(_zipped())

    def ok(self) -> AsyncOption[T]:
        """Convert to a pending Option of the Ok value."""
        return self._then_option(lambda result: result.ok())

    def err(self) -> AsyncOption[E]:
        """Convert to a pending Option of the Err value."""
        return self._then_option(lambda result: result.err())

    def map_option(self, default: Callable[[E], Any], f: Callable[[T], Any]) -> AsyncOption[Any]:
        """Apply f or default once settled and coerce the outcome into an Option."""
        return self._then_option(lambda result: result.map_option(default, f))

    def map_result(self, default: Callable[[E], Any], f: Callable[[T], Any]) -> AsyncResult[Any, Any]:
        """Apply f or default once settled and coerce the outcome into a Result."""
        return self._then(lambda result: result.map_result(default, f))

    # --- Terminal operations ---

    async def map_or_else[U](self, default: Callable[[E], U | Awaitable[U]], f: Callable[[T], U | Awaitable[U]]) -> U:
        """Settle, then return f(value) or default(error) as a plain value."""
        result = await self
        return await result.map_or_else_async(default, f)

    async def map_or_else_async[U](self, default: Callable[[E], U | Awaitable[U]], f: Callable[[T], U | Awaitable[U]]) -> U:
        return await self.map_or_else(default, f)

    async def is_ok(self) -> bool:
        return (await self).is_ok()

    async def is_err(self) -> bool:
        return (await self).is_err()

    async def unwrap(self) -> T:
        """Settle and return the Ok value.

        Raises:
            UnwrapError: If the source settled to Err.
        """
        return (await self).unwrap()

    async def expect(self, msg: str) -> T:
        return (await self).expect(msg)

    async def unwrap_err(self) -> E:
        return (await self).unwrap_err()

    async def expect_err(self, msg: str) -> E:
        return (await self).expect_err(msg)

    async def unwrap_or(self, default: T) -> T:
        return (await self).unwrap_or(default)

    async def unwrap_or_else(self, f: Callable[[E], T | Awaitable[T]]) -> T:
        value = (await self).unwrap_or_else(f)
        if is_pending(value):
            return await value
        return value


def is_async_result(value: object) -> bool:
    """Return True if value is a pending Result container."""
    return isinstance(value, AsyncResult)
