"""Result container: a handle around OkValue | ErrValue."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any

from eventual.types.classify import is_pending
from eventual.types.variants import ErrValue, OkValue

if TYPE_CHECKING:
    from eventual.async_.option import AsyncOption
    from eventual.async_.result import AsyncResult
    from eventual.types.option import Option

__all__ = ['Err', 'Ok', 'Result', 'collect', 'is_result', 'result_from']


class Result[T, E]:
    """Success or failure: holds exactly one OkValue or ErrValue.

    The error side is caller-defined data. It travels unchanged through
    ``map``, ``and_then`` and friends until ``map_err``, ``or_else`` or a
    terminal call consumes it.

    Build Results with ``Ok`` and ``Err`` rather than calling the class
    directly.

    Examples:
        >>> Ok(5).map(lambda x: x * 2)
        Ok(10)
        >>> Err('boom').map(lambda x: x * 2)
        Err('boom')
        >>> Err('boom').unwrap_or(0)
        0
    """

    __slots__ = ('_variant',)

    def __init__(self, variant: OkValue[T] | ErrValue[E]) -> None:
        self._variant = variant

    @property
    def variant(self) -> OkValue[T] | ErrValue[E]:
        """The variant currently held, usable in ``match`` statements."""
        return self._variant

    def __repr__(self) -> str:
        if isinstance(self._variant, OkValue):
            return f'Ok({self._variant.value!r})'
        return f'Err({self._variant.error!r})'

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Result):
            return self._variant == other._variant
        if isinstance(other, OkValue | ErrValue):
            return self._variant == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[T]:
        return iter(self._variant)

    def is_ok(self) -> bool:
        return self._variant.is_ok()

    def is_err(self) -> bool:
        return self._variant.is_err()

    def unwrap(self) -> T:
        """Return the Ok value.

        Raises:
            UnwrapError: If the result is Err; the error is on ``.value``.
        """
        return self._variant.unwrap()

    def expect(self, msg: str) -> T:
        return self._variant.expect(msg)

    def unwrap_err(self) -> E:
        """Return the Err value.

        Raises:
            UnwrapError: If the result is Ok.
        """
        return self._variant.unwrap_err()

    def expect_err(self, msg: str) -> E:
        return self._variant.expect_err(msg)

    def unwrap_or(self, default: T) -> T:
        return self._variant.unwrap_or(default)

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Return the Ok value or compute one from the error."""
        return self._variant.unwrap_or_else(f)

    def and_[U](self, other: Result[U, E] | AsyncResult[U, E]) -> Result[U, E] | AsyncResult[U, E]:
        return self._variant.and_(other)

    def and_then[U](self, f: Callable[[T], Any]) -> Result[U, E] | AsyncResult[U, E]:
        """Chain a computation that returns a Result (or an awaitable of one)."""
        return self._variant.and_then(f)

    def or_[F](self, other: Result[T, F] | AsyncResult[T, F]) -> Result[T, F] | AsyncResult[T, F]:
        return self._variant.or_(other)

    def or_else[F](self, f: Callable[[E], Any]) -> Result[T, F] | AsyncResult[T, F]:
        """Recover from an Err by calling f with the error."""
        return self._variant.or_else(f)

    def zip[U](self, other: Result[U, E] | AsyncResult[U, E]) -> Result[tuple[T, U], E] | AsyncResult[tuple[T, U], E]:
        return self._variant.zip(other)

    def map[U](self, f: Callable[[T], U]) -> Result[U, E] | AsyncResult[U, E]:
        return self._variant.map(f)

    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F] | AsyncResult[T, F]:
        return self._variant.map_err(f)

    def flatten(self) -> Result[Any, Any] | AsyncResult[Any, Any]:
        return self._variant.flatten()

    def map_or_else[U](self, default: Callable[[E], U], f: Callable[[T], U]) -> U:
        """Apply f to the Ok value, or default to the error.

        The callback's return is handed back as a plain value. Use
        ``map_option`` or ``map_result`` when the callbacks build containers.
        """
        return self._variant.map_or_else(default, f)

    async def map_or_else_async[U](self, default: Callable[[E], U | Awaitable[U]], f: Callable[[T], U | Awaitable[U]]) -> U:
        """Like ``map_or_else`` but always awaitable, awaiting async callbacks."""
        value = self._variant.map_or_else(default, f)
        if is_pending(value):
            return await value
        return value

    def map_option(self, default: Callable[[E], Any], f: Callable[[T], Any]) -> Option[Any] | AsyncOption[Any]:
        """Apply f or default and coerce the outcome into an Option."""
        return self._variant.map_option(default, f)

    def map_result(self, default: Callable[[E], Any], f: Callable[[T], Any]) -> Result[Any, Any] | AsyncResult[Any, Any]:
        """Apply f or default and coerce the outcome into a Result."""
        return self._variant.map_result(default, f)

    def ok(self) -> Option[T]:
        """Convert to Option, discarding the error."""
        return self._variant.ok()

    def err(self) -> Option[E]:
        """Convert to Option of the error, discarding the success value."""
        return self._variant.err()


def Ok[T](value: T) -> Result[T, Any] | AsyncResult[T, Any]:  # noqa: N802
    """Build a Result from ``value``, treating plain values as success.

    A Result or AsyncResult is returned unchanged, a raw OkValue/ErrValue is
    wrapped, and an awaitable becomes an AsyncResult whose outcome is
    classified by ``Ok`` once it settles.

    Examples:
        >>> Ok(1)
        Ok(1)
        >>> Ok(Err('e'))
        Err('e')
    """
    from eventual.async_.result import AsyncResult

    if isinstance(value, Result | AsyncResult):
        return value
    if isinstance(value, OkValue | ErrValue):
        return Result(value)
    if is_pending(value):
        return AsyncResult(value)
    return Result(OkValue(value))


def Err[E](error: E) -> Result[Any, E] | AsyncResult[Any, E]:  # noqa: N802
    """Build a Result from ``error``, treating plain values as failure.

    Containers and raw variants are handled as in ``Ok``. An awaitable
    becomes an AsyncResult whose plain outcome is wrapped as Err.

    Examples:
        >>> Err('boom')
        Err('boom')
        >>> Err(Ok(1))
        Ok(1)
    """
    from eventual.async_.result import AsyncResult

    if isinstance(error, Result | AsyncResult):
        return error
    if isinstance(error, OkValue | ErrValue):
        return Result(error)
    if is_pending(error):
        return AsyncResult(error, wrap=Err)
    return Result(ErrValue(error))


def result_from(value: Any, *, error: bool = False) -> Result[Any, Any] | AsyncResult[Any, Any]:
    """Classify ``value`` into the Result family.

    Plain values become Ok, or Err when ``error`` is True.
    """
    return Err(value) if error else Ok(value)


def is_result(value: object) -> bool:
    """Return True if value is a synchronous Result container."""
    return isinstance(value, Result)


def collect[T, E](results: Iterable[Any]) -> Result[list[T], E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

    Raises:
        TypeError: If an item is still pending; await it first.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok([1, 2, 3])
        >>> collect([Ok(1), Err('fail'), Ok(3)])
        Err('fail')
    """
    values: list[T] = []
    for item in results:
        result = Ok(item)
        if not isinstance(result, Result):
            msg = 'collect() got a pending result; await it first'
            raise TypeError(msg)
        if result.is_err():
            return result
        values.append(result.unwrap())
    return Result(OkValue(values))
