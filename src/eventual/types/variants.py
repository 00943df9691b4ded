"""Variant core: SomeValue | NothingValue and OkValue | ErrValue.

Variants are the immutable tagged values held by a container. Each one
implements the full combinator contract of its family against its own payload.
Combinators return containers: everything a callback produces is routed
through the ``Some``/``Ok``/``Err`` constructors so plain values, raw variants,
containers and awaitables are classified the same way everywhere.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn

import msgspec

from eventual.errors import EmptyValueError, UnwrapError

if TYPE_CHECKING:
    from eventual.async_.option import AsyncOption
    from eventual.async_.result import AsyncResult
    from eventual.types.option import Option
    from eventual.types.result import Result

__all__ = ['ErrValue', 'NothingValue', 'OkValue', 'SomeValue']


class SomeValue[T](msgspec.Struct, frozen=True, gc=False):
    """Present variant of Option holding a value of type T.

    Examples:
        >>> SomeValue(42).unwrap()
        42
        >>> SomeValue(2).map(lambda x: x * 2)
        Some(4)
    """

    value: T

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def is_some(self) -> bool:
        """Return True since this is Some."""
        return True

    def is_none(self) -> bool:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def unwrap_or(self, _default: T) -> T:
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, _f: Callable[[], T]) -> T:
        """Return the contained value without calling the fallback."""
        return self.value

    def and_[U](self, other: Option[U] | AsyncOption[U]) -> Option[U] | AsyncOption[U]:
        """Return other since this is Some.

        Arguments passed to ``and_`` are eagerly evaluated; use ``and_then``
        to defer building the other option.
        """
        from eventual.types.option import Some

        return Some(other)

    def and_then[U](self, f: Callable[[T], Any]) -> Option[U] | AsyncOption[U]:
        """Call f with the contained value and return its option.

        Also known as flatmap or bind. ``f`` may return an Option, a raw
        variant, an AsyncOption or any awaitable producing one of those.
        """
        from eventual.types.option import Some

        return Some(f(self.value))

    def or_(self, _other: Option[T] | AsyncOption[T]) -> Option[T]:
        """Return self since this is Some."""
        from eventual.types.option import Option

        return Option(self)

    def or_else(self, _f: Callable[[], Any]) -> Option[T]:
        """Return self without calling f since this is Some."""
        from eventual.types.option import Option

        return Option(self)

    def map[U](self, f: Callable[[T], U]) -> Option[U] | AsyncOption[U]:
        """Apply f to the contained value.

        f's return is classified by ``Some`` like any other input: a sentinel
        becomes Nothing, and a returned Option is used as it is, so
        ``Some(1).map(lambda _: Nothing())`` is Nothing, the same as with
        ``and_then``. If f returns an awaitable the result is an AsyncOption
        settling to ``Some`` of the awaited value.
        """
        from eventual.types.option import Some

        return Some(f(self.value))

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """Return Some if the predicate holds for the value, else Nothing."""
        from eventual.types.option import Nothing, Option

        if predicate(self.value):
            return Option(self)
        return Nothing()

    def xor(self, other: Option[T] | AsyncOption[T]) -> Option[T] | AsyncOption[T]:
        """Return Some if exactly one of self and other is Some.

        Since this is Some, the outcome is self when other is Nothing and
        Nothing otherwise.
        """
        from eventual.async_.option import AsyncOption
        from eventual.types.option import Nothing, Option, Some

        other = Some(other)
        if isinstance(other, AsyncOption):
            # xor is symmetric, let the pending side wait for itself.
            return other.xor(Option(self))
        if other.is_none():
            return Option(self)
        return Nothing()

    def zip[U](self, other: Option[U] | AsyncOption[U]) -> Option[tuple[T, U]] | AsyncOption[tuple[T, U]]:
        """Combine two Some values into a Some of a tuple."""
        from eventual.types.option import Some

        other = Some(other)
        return other.map(lambda value: (self.value, value))

    def flatten(self) -> Option[Any] | AsyncOption[Any]:
        """Remove one level of nesting from ``Some(Some(x))``."""
        from eventual.async_.option import AsyncOption
        from eventual.types.option import Option

        inner = self.value
        if isinstance(inner, Option):
            return Option(inner.variant)
        if isinstance(inner, SomeValue | NothingValue):
            return Option(inner)
        if isinstance(inner, AsyncOption):
            return inner
        return Option(self)

    def ok_or[E](self, _err: E) -> Result[T, E]:
        """Convert to Result, returning Ok(value)."""
        from eventual.types.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, _f: Callable[[], E]) -> Result[T, E]:
        """Convert to Result, returning Ok(value) without calling f."""
        from eventual.types.result import Ok

        return Ok(self.value)

    def map_or_else[U](self, _default: Callable[[], U], f: Callable[[T], U]) -> U:
        """Return f(value) as a plain value.

        If f needs to produce an Option or a Result, use ``map_option`` or
        ``map_result`` instead.
        """
        return f(self.value)

    def map_option(self, _default: Callable[[], Any], f: Callable[[T], Any]) -> Option[Any] | AsyncOption[Any]:
        """Return f(value) coerced into the Option family."""
        from eventual.types.option import Some

        return Some(f(self.value))

    def map_result(self, _default: Callable[[], Any], f: Callable[[T], Any]) -> Result[Any, Any] | AsyncResult[Any, Any]:
        """Return f(value) coerced into the Result family."""
        from eventual.types.result import Ok

        return Ok(f(self.value))


class NothingValue(msgspec.Struct, frozen=True, gc=False):
    """Absent variant of Option.

    All NothingValue instances are equal. It never exposes a value: forcing
    one out raises EmptyValueError.
    """

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def is_some(self) -> bool:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> bool:
        """Return True since this is Nothing."""
        return True

    def unwrap(self) -> NoReturn:
        """Raise EmptyValueError since Nothing has no value.

        Raises:
            EmptyValueError: Always.
        """
        raise EmptyValueError

    def expect(self, msg: str) -> NoReturn:
        """Raise EmptyValueError with a custom message.

        Raises:
            EmptyValueError: Always, with ``msg``.
        """
        raise EmptyValueError(msg)

    def unwrap_or[T](self, default: T) -> T:
        """Return the default since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return the fallback since this is Nothing."""
        return f()

    def and_(self, _other: Any) -> Option[Any]:
        """Return Nothing since self is Nothing."""
        from eventual.types.option import Option

        return Option(self)

    def and_then(self, _f: Callable[[Any], Any]) -> Option[Any]:
        """Return Nothing without calling f."""
        from eventual.types.option import Option

        return Option(self)

    def or_[T](self, other: Option[T] | AsyncOption[T]) -> Option[T] | AsyncOption[T]:
        """Return other since self is Nothing."""
        from eventual.types.option import Some

        return Some(other)

    def or_else[T](self, f: Callable[[], Any]) -> Option[T] | AsyncOption[T]:
        """Call f and return the option it produces."""
        from eventual.types.option import Some

        return Some(f())

    def map(self, _f: Callable[[Any], Any]) -> Option[Any]:
        """Return Nothing since there is no value to map."""
        from eventual.types.option import Option

        return Option(self)

    def filter(self, _predicate: Callable[[Any], bool]) -> Option[Any]:
        """Return Nothing since there is no value to test."""
        from eventual.types.option import Option

        return Option(self)

    def xor[T](self, other: Option[T] | AsyncOption[T]) -> Option[T] | AsyncOption[T]:
        """Return other, which is Some exactly when the pair is mixed."""
        from eventual.types.option import Some

        return Some(other)

    def zip(self, _other: Any) -> Option[Any]:
        """Return Nothing since self is Nothing."""
        from eventual.types.option import Option

        return Option(self)

    def flatten(self) -> Option[Any]:
        """Return Nothing since there is nothing to flatten."""
        from eventual.types.option import Option

        return Option(self)

    def ok_or[E](self, err: E) -> Result[Any, E] | AsyncResult[Any, E]:
        """Convert to Result, returning Err(err)."""
        from eventual.types.result import Err

        return Err(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Result[Any, E] | AsyncResult[Any, E]:
        """Convert to Result, returning Err of the computed error.

        An awaitable error yields an AsyncResult that settles to Err.
        """
        from eventual.types.result import Err

        return Err(f())

    def map_or_else[U](self, default: Callable[[], U], _f: Callable[[Any], U]) -> U:
        """Return default() as a plain value."""
        return default()

    def map_option(self, default: Callable[[], Any], _f: Callable[[Any], Any]) -> Option[Any] | AsyncOption[Any]:
        """Return default() coerced into the Option family."""
        from eventual.types.option import Some

        return Some(default())

    def map_result(self, default: Callable[[], Any], _f: Callable[[Any], Any]) -> Result[Any, Any] | AsyncResult[Any, Any]:
        """Return default() coerced into the Result family."""
        from eventual.types.result import Ok

        return Ok(default())


class OkValue[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result holding a value of type T.

    Examples:
        >>> OkValue(42).unwrap()
        42
        >>> OkValue(2).map(lambda x: x * 2)
        Ok(4)
    """

    value: T

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def is_ok(self) -> bool:
        """Return True since this is Ok."""
        return True

    def is_err(self) -> bool:
        """Return False since this is Ok."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise UnwrapError since this is Ok.

        Raises:
            UnwrapError: Always, carrying the Ok value.
        """
        raise UnwrapError(f'Called unwrap_err on Ok: {self.value!r}', self.value)

    def expect_err(self, msg: str) -> NoReturn:
        """Raise UnwrapError with a custom message."""
        raise UnwrapError(f'{msg}: {self.value!r}', self.value)

    def unwrap_or(self, _default: T) -> T:
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, _f: Callable[[Any], T]) -> T:
        """Return the contained value without calling the fallback."""
        return self.value

    def and_(self, other: Any) -> Result[Any, Any] | AsyncResult[Any, Any]:
        """Return other since this is Ok."""
        from eventual.types.result import Ok

        return Ok(other)

    def and_then(self, f: Callable[[T], Any]) -> Result[Any, Any] | AsyncResult[Any, Any]:
        """Call f with the contained value and return its result.

        ``f`` may return a Result, a raw variant, an AsyncResult or any
        awaitable producing one of those.
        """
        from eventual.types.result import Ok

        return Ok(f(self.value))

    def or_(self, _other: Any) -> Result[T, Any]:
        """Return self since this is Ok."""
        from eventual.types.result import Result

        return Result(self)

    def or_else(self, _f: Callable[[Any], Any]) -> Result[T, Any]:
        """Return self without calling f since this is Ok."""
        from eventual.types.result import Result

        return Result(self)

    def map[U](self, f: Callable[[T], U]) -> Result[U, Any] | AsyncResult[U, Any]:
        """Apply f to the contained value, leaving errors untouched.

        f's return is classified by ``Ok``: a returned Result is used as it
        is, so ``Ok(1).map(lambda _: Err('x'))`` is ``Err('x')``, the same as
        with ``and_then``. An awaitable return gives an AsyncResult.
        """
        from eventual.types.result import Ok

        return Ok(f(self.value))

    def map_err(self, _f: Callable[[Any], Any]) -> Result[T, Any]:
        """Return self unchanged since this is Ok."""
        from eventual.types.result import Result

        return Result(self)

    def ok(self) -> Option[T]:
        """Convert to Option, returning Some(value)."""
        from eventual.types.option import Some

        return Some(self.value)

    def err(self) -> Option[Any]:
        """Convert to Option, returning Nothing since this is Ok."""
        from eventual.types.option import Nothing

        return Nothing()

    def zip(self, other: Any) -> Result[tuple[T, Any], Any] | AsyncResult[tuple[T, Any], Any]:
        """Combine two Ok values into an Ok of a tuple, else the Err."""
        from eventual.types.result import Ok

        other = Ok(other)
        return other.map(lambda value: (self.value, value))

    def flatten(self) -> Result[Any, Any] | AsyncResult[Any, Any]:
        """Remove one level of nesting from ``Ok(Ok(x))``."""
        from eventual.async_.result import AsyncResult
        from eventual.types.result import Result

        inner = self.value
        if isinstance(inner, Result):
            return Result(inner.variant)
        if isinstance(inner, OkValue | ErrValue):
            return Result(inner)
        if isinstance(inner, AsyncResult):
            return inner
        return Result(self)

    def map_or_else[U](self, _default: Callable[[Any], U], f: Callable[[T], U]) -> U:
        """Return f(value) as a plain value."""
        return f(self.value)

    def map_option(self, _default: Callable[[Any], Any], f: Callable[[T], Any]) -> Option[Any] | AsyncOption[Any]:
        """Return f(value) coerced into the Option family."""
        from eventual.types.option import Some

        return Some(f(self.value))

    def map_result(self, _default: Callable[[Any], Any], f: Callable[[T], Any]) -> Result[Any, Any] | AsyncResult[Any, Any]:
        """Return f(value) coerced into the Result family."""
        from eventual.types.result import Ok

        return Ok(f(self.value))


class ErrValue[E](msgspec.Struct, frozen=True, gc=False):
    """Failure variant of Result holding an error of type E.

    The error is caller-defined data, propagated unchanged until it is
    mapped with ``map_err`` or consumed.
    """

    error: E

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raise UnwrapError since Err has no success value.

        Raises:
            UnwrapError: Always, carrying the error.
        """
        raise UnwrapError(f'Called unwrap on Err: {self.error!r}', self.error)

    def expect(self, msg: str) -> NoReturn:
        raise UnwrapError(f'{msg}: {self.error!r}', self.error)

    def unwrap_err(self) -> E:
        return self.error

    def expect_err(self, _msg: str) -> E:
        return self.error

    def unwrap_or[T](self, default: T) -> T:
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute the fallback from the error."""
        return f(self.error)

    def and_(self, _other: Any) -> Result[Any, E]:
        from eventual.types.result import Result

        return Result(self)

    def and_then(self, _f: Callable[[Any], Any]) -> Result[Any, E]:
        from eventual.types.result import Result

        return Result(self)

    def or_(self, other: Any) -> Result[Any, Any] | AsyncResult[Any, Any]:
        from eventual.types.result import Ok

        return Ok(other)

    def or_else(self, f: Callable[[E], Any]) -> Result[Any, Any] | AsyncResult[Any, Any]:
        """Recover by calling f with the error and returning its result."""
        from eventual.types.result import Ok

        return Ok(f(self.error))

    def map(self, _f: Callable[[Any], Any]) -> Result[Any, E]:
        from eventual.types.result import Result

        return Result(self)

    def map_err[F](self, f: Callable[[E], F]) -> Result[Any, F] | AsyncResult[Any, F]:
        """Apply f to the contained error.

        If f returns an awaitable the result is an AsyncResult settling to
        ``Err`` of the awaited value.
        """
        from eventual.types.result import Err

        return Err(f(self.error))

    def ok(self) -> Option[Any]:
        from eventual.types.option import Nothing

        return Nothing()

    def err(self) -> Option[E]:
        from eventual.types.option import Some

        return Some(self.error)

    def zip(self, _other: Any) -> Result[Any, E]:
        from eventual.types.result import Result

        return Result(self)

    def flatten(self) -> Result[Any, E]:
        from eventual.types.result import Result

        return Result(self)

    def map_or_else[U](self, default: Callable[[E], U], _f: Callable[[Any], U]) -> U:
        """Return default(error) as a plain value."""
        return default(self.error)

    def map_option(self, default: Callable[[E], Any], _f: Callable[[Any], Any]) -> Option[Any] | AsyncOption[Any]:
        from eventual.types.option import Some

        return Some(default(self.error))

    def map_result(self, default: Callable[[E], Any], _f: Callable[[Any], Any]) -> Result[Any, Any] | AsyncResult[Any, Any]:
        from eventual.types.result import Ok

        return Ok(default(self.error))
