"""AsyncOption: an Option whose value is the outcome of a pending computation.

AsyncOption wraps an awaitable that settles to an Option (or to anything
``Some`` can classify) and re-exposes every Option combinator. Each
combinator returns a new AsyncOption (or AsyncResult when it crosses into the
Result family) that waits for the source, runs the same combinator on the
settled Option, and flattens whatever that produced.

Example:
    ```python
    async def fetch_user(id: int) -> Option[User]:
        ...

    name = await (
        Some(fetch_user(1))
        .filter(lambda user: user.active)
        .map(lambda user: user.name)
        .unwrap_or('anonymous')
    )
    ```
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Generator
from typing import Any

import anyio

from eventual.async_.pending import Pending, settle
from eventual.async_.result import AsyncResult
from eventual.types.classify import is_pending
from eventual.types.option import Nothing, Option, Some

__all__ = ['AsyncOption', 'is_async_option']


class AsyncOption[T]:
    """Pending Option.

    Nothing runs until the chain is awaited. The source settles once, so the
    same AsyncOption can start any number of chains. A fault raised by the
    source (as opposed to a Nothing outcome) propagates to whoever awaits the
    chain and is never turned into Nothing.

    Example:
        ```python
        async def main():
            option = await Some(asyncio.sleep(0, 12)).and_then(lambda n: Some(n * 2))
            assert option == Some(24)
        ```
    """

    __slots__ = ('_pending',)

    def __init__(self, awaitable: Awaitable[Any]) -> None:
        """Create an AsyncOption from an awaitable.

        Args:
            awaitable: An awaitable producing an Option, a raw variant, a plain
                value (classified by ``Some``) or another pending computation.
        """
        self._pending = awaitable if isinstance(awaitable, Pending) else Pending(awaitable)

    @property
    def pending(self) -> Pending[Any]:
        return self._pending

    @property
    def wrap(self) -> Callable[[Any], Any]:
        """The constructor that classifies the settled value."""
        return Some

    def __await__(self) -> Generator[Any, Any, Option[T]]:
        return self.resolve().__await__()

    async def resolve(self) -> Option[T]:
        """Wait for the source to settle and return the synchronous Option."""
        return await settle(self._pending, Some, Option)

    async def __aiter__(self) -> AsyncIterator[T]:
        for value in await self:
            yield value

    def __repr__(self) -> str:
        return f'AsyncOption({self._pending!r})'

    @classmethod
    def from_some(cls, value: T) -> AsyncOption[T]:
        """Create an AsyncOption settling to ``Some(value)``."""

        async def _some() -> T:
            return value

        return cls(_some())

    @classmethod
    def from_nothing(cls) -> AsyncOption[Any]:
        """Create an AsyncOption settling to Nothing."""

        async def _nothing() -> Option[Any]:
            return Nothing()

        return cls(_nothing())

    @classmethod
    def from_option(cls, option: Option[T]) -> AsyncOption[T]:
        """Create an AsyncOption settling to an existing Option."""

        async def _option() -> Option[T]:
            return option

        return cls(_option())

    def _then(self, op: Callable[[Option[T]], Any]) -> AsyncOption[Any]:
        async def _chained() -> Any:
            return op(await self)

        return AsyncOption(_chained())

    def _then_result(self, op: Callable[[Option[T]], Any]) -> AsyncResult[Any, Any]:
        async def _chained() -> Any:
            return op(await self)

        return AsyncResult(_chained())

    # --- Combinators ---

    def and_[U](self, other: Option[U] | AsyncOption[U]) -> AsyncOption[U]:
        return self._then(lambda option: option.and_(other))

    def and_then[U](self, f: Callable[[T], Any]) -> AsyncOption[U]:
        """Chain f after the source settles.

        f may return an Option, an AsyncOption or an awaitable of an Option;
        the chain flattens it.
        """
        return self._then(lambda option: option.and_then(f))

    def or_(self, other: Option[T] | AsyncOption[T]) -> AsyncOption[T]:
        return self._then(lambda option: option.or_(other))

    def or_else(self, f: Callable[[], Any]) -> AsyncOption[T]:
        return self._then(lambda option: option.or_else(f))

    def map[U](self, f: Callable[[T], U | Awaitable[U]]) -> AsyncOption[U]:
        """Apply f (sync or async) to the value once it is available."""
        return self._then(lambda option: option.map(f))

    def filter(self, predicate: Callable[[T], bool]) -> AsyncOption[T]:
        return self._then(lambda option: option.filter(predicate))

    def xor(self, other: Option[T] | AsyncOption[T]) -> AsyncOption[T]:
        return self._then(lambda option: option.xor(other))

    def flatten(self) -> AsyncOption[Any]:
        return self._then(lambda option: option.flatten())

    def zip[U](self, other: Option[U] | AsyncOption[U]) -> AsyncOption[tuple[T, U]]:
        """Combine with another option, waiting for both sources concurrently.

        If both settle to Some, the result is Some((self, other)). If a source
        faults, the fault of ``self`` wins over the fault of ``other``.
        """
        other = Some(other)
        if isinstance(other, Option):
            return self._then(lambda option: option.zip(other))

        async def _zipped() -> Option[tuple[T, U]]:
            settled: dict[str, Option[Any]] = {}
            faults: dict[str, Exception] = {}

            async def run(key: str, source: AsyncOption[Any]) -> None:
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

        return AsyncOption(_zipped())

    def ok_or[E](self, err: E) -> AsyncResult[T, E]:
        return self._then_result(lambda option: option.ok_or(err))

    def ok_or_else[E](self, f: Callable[[], E | Awaitable[E]]) -> AsyncResult[T, E]:
        return self._then_result(lambda option: option.ok_or_else(f))

    def map_option(self, default: Callable[[], Any], f: Callable[[T], Any]) -> AsyncOption[Any]:
        """Apply f or default once settled and coerce the outcome into an Option."""
        return self._then(lambda option: option.map_option(default, f))

    def map_result(self, default: Callable[[], Any], f: Callable[[T], Any]) -> AsyncResult[Any, Any]:
        """Apply f or default once settled and coerce the outcome into a Result."""
        return self._then_result(lambda option: option.map_result(default, f))

    # --- Terminal operations ---

    async def map_or_else[U](self, default: Callable[[], U | Awaitable[U]], f: Callable[[T], U | Awaitable[U]]) -> U:
        """Settle, then return f(value) or default() as a plain value."""
        option = await self
        return await option.map_or_else_async(default, f)

    async def map_or_else_async[U](self, default: Callable[[], U | Awaitable[U]], f: Callable[[T], U | Awaitable[U]]) -> U:
        return await self.map_or_else(default, f)

    async def is_some(self) -> bool:
        return (await self).is_some()

    async def is_none(self) -> bool:
        return (await self).is_none()

    async def unwrap(self) -> T:
        """Settle and return the value.

        Raises:
            EmptyValueError: If the source settled to Nothing.
        """
        return (await self).unwrap()

    async def expect(self, msg: str) -> T:
        return (await self).expect(msg)

    async def unwrap_or(self, default: T) -> T:
        return (await self).unwrap_or(default)

    async def unwrap_or_else(self, f: Callable[[], T | Awaitable[T]]) -> T:
        value = (await self).unwrap_or_else(f)
        if is_pending(value):
            return await value
        return value


def is_async_option(value: object) -> bool:
    """Return True if value is a pending Option container."""
    return isinstance(value, AsyncOption)
