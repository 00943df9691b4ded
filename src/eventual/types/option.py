"""Option container: a mutable handle around SomeValue | NothingValue."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterator
from typing import TYPE_CHECKING, Any

from eventual._config import get_config
from eventual.types.classify import is_pending, is_sentinel
from eventual.types.variants import NothingValue, SomeValue

if TYPE_CHECKING:
    from eventual.async_.option import AsyncOption
    from eventual.async_.result import AsyncResult
    from eventual.types.result import Result

__all__ = ['Nothing', 'Option', 'Some', 'is_option', 'option_from']

_NOTHING = NothingValue()


class Option[T]:
    """Optional value: holds exactly one SomeValue or NothingValue.

    An Option is a mutable single-owner cell. The combinators never change it
    and always return a new container, but ``insert``, ``get_or_insert``,
    ``get_or_insert_with``, ``replace`` and ``take`` swap the held variant in
    place, and every holder of the handle sees the change. Options are
    therefore not hashable.

    Build Options with ``Some`` and ``Nothing`` rather than calling the
    class directly.

    Examples:
        >>> Some(3).map(lambda x: x + 1).unwrap_or(0)
        4
        >>> Nothing().unwrap_or(0)
        0
        >>> x = Some(2)
        >>> x.replace(5)
        Some(2)
        >>> x
        Some(5)
    """

    __slots__ = ('_variant',)

    def __init__(self, variant: SomeValue[T] | NothingValue) -> None:
        self._variant = variant

    @property
    def variant(self) -> SomeValue[T] | NothingValue:
        """The variant currently held, usable in ``match`` statements."""
        return self._variant

    def __repr__(self) -> str:
        if isinstance(self._variant, SomeValue):
            return f'Some({self._variant.value!r})'
        return 'Nothing'

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Option):
            return self._variant == other._variant
        if isinstance(other, SomeValue | NothingValue):
            return self._variant == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self) -> Iterator[T]:
        return iter(self._variant)

    # --- Querying ---

    def is_some(self) -> bool:
        return self._variant.is_some()

    def is_none(self) -> bool:
        return self._variant.is_none()

    # --- Extracting ---

    def unwrap(self) -> T:
        """Return the contained value.

        Raises:
            EmptyValueError: If the option is Nothing.
        """
        return self._variant.unwrap()

    def expect(self, msg: str) -> T:
        """Return the contained value, or raise EmptyValueError(msg)."""
        return self._variant.expect(msg)

    def unwrap_or(self, default: T) -> T:
        return self._variant.unwrap_or(default)

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """Return the contained value or compute one with f.

        If f is async, the awaitable it returns is handed back as-is.
        """
        return self._variant.unwrap_or_else(f)

    # --- Combining ---

    def and_[U](self, other: Option[U] | AsyncOption[U]) -> Option[U] | AsyncOption[U]:
        return self._variant.and_(other)

    def and_then[U](self, f: Callable[[T], Any]) -> Option[U] | AsyncOption[U]:
        return self._variant.and_then(f)

    def or_(self, other: Option[T] | AsyncOption[T]) -> Option[T] | AsyncOption[T]:
        return self._variant.or_(other)

    def or_else(self, f: Callable[[], Any]) -> Option[T] | AsyncOption[T]:
        return self._variant.or_else(f)

    def xor(self, other: Option[T] | AsyncOption[T]) -> Option[T] | AsyncOption[T]:
        return self._variant.xor(other)

    def zip[U](self, other: Option[U] | AsyncOption[U]) -> Option[tuple[T, U]] | AsyncOption[tuple[T, U]]:
        return self._variant.zip(other)

    # --- Transforming ---

    def map[U](self, f: Callable[[T], U]) -> Option[U] | AsyncOption[U]:
        return self._variant.map(f)

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        return self._variant.filter(predicate)

    def flatten(self) -> Option[Any] | AsyncOption[Any]:
        return self._variant.flatten()

    def map_or_else[U](self, default: Callable[[], U], f: Callable[[T], U]) -> U:
        """Apply f to the value, or call default when Nothing.

        The callback's return is handed back as a plain value. Use
        ``map_option`` or ``map_result`` when the callbacks build containers.
        """
        return self._variant.map_or_else(default, f)

    async def map_or_else_async[U](self, default: Callable[[], U | Awaitable[U]], f: Callable[[T], U | Awaitable[U]]) -> U:
        """Like ``map_or_else`` but always awaitable, awaiting async callbacks."""
        value = self._variant.map_or_else(default, f)
        if is_pending(value):
            return await value
        return value

    def map_option(self, default: Callable[[], Any], f: Callable[[T], Any]) -> Option[Any] | AsyncOption[Any]:
        """Apply f or default and coerce the outcome into an Option."""
        return self._variant.map_option(default, f)

    def map_result(self, default: Callable[[], Any], f: Callable[[T], Any]) -> Result[Any, Any] | AsyncResult[Any, Any]:
        """Apply f or default and coerce the outcome into a Result."""
        return self._variant.map_result(default, f)

    def ok_or[E](self, err: E) -> Result[T, E] | AsyncResult[T, E]:
        return self._variant.ok_or(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Result[T, E] | AsyncResult[T, E]:
        return self._variant.ok_or_else(f)

    # --- Mutating ---

    def insert(self, value: T) -> T:
        """Store Some(value), dropping any previous value, and return value."""
        self._variant = SomeValue(value)
        return value

    def get_or_insert(self, value: T) -> T:
        """Store Some(value) if Nothing, then return the contained value.

        Examples:
            >>> x = Nothing()
            >>> x.get_or_insert(41)
            41
            >>> x
            Some(41)
        """
        if isinstance(self._variant, NothingValue):
            self._variant = SomeValue(value)
        return self._variant.value

    def get_or_insert_with(self, f: Callable[[], T]) -> T:
        """Store Some(f()) if Nothing, then return the contained value."""
        if isinstance(self._variant, NothingValue):
            self._variant = SomeValue(f())
        return self._variant.value

    def replace(self, value: T) -> Option[T]:
        """Store Some(value) and return the previous contents as a new Option."""
        old = Option(self._variant)
        self._variant = SomeValue(value)
        return old

    def take(self) -> Option[T]:
        """Move the contents into a new Option, leaving Nothing in their place."""
        taken = Option(self._variant)
        self._variant = _NOTHING
        return taken


def Some[T](value: T) -> Option[T] | AsyncOption[T]:  # noqa: N802
    """Build an Option from ``value``.

    Classification, in order:

    1. An Option or AsyncOption is returned unchanged.
    2. A raw SomeValue or NothingValue is wrapped in an Option.
    3. An awaitable becomes an AsyncOption whose outcome is classified the
       same way once it settles.
    4. A sentinel (see ``is_sentinel``) becomes Nothing, unless sentinel
       collapse is disabled in the configuration.
    5. Anything else becomes Some(value).

    Examples:
        >>> Some(42)
        Some(42)
        >>> Some(None)
        Nothing
        >>> Some(Some(1))
        Some(1)
    """
    from eventual.async_.option import AsyncOption

    if isinstance(value, Option | AsyncOption):
        return value
    if isinstance(value, SomeValue | NothingValue):
        return Option(value)
    if is_pending(value):
        return AsyncOption(value)
    if get_config().collapse_sentinels and is_sentinel(value):
        return Option(_NOTHING)
    return Option(SomeValue(value))


def Nothing() -> Option[Any]:  # noqa: N802
    """Build an empty Option."""
    return Option(_NOTHING)


def option_from[T](value: T | None) -> Option[T] | AsyncOption[T]:
    """Build an Option from a nullable value, always collapsing sentinels.

    Unlike ``Some``, this ignores the ``collapse_sentinels`` setting: it is
    the explicit bridge for values where None, NaN or infinity mean "absent".

    Examples:
        >>> option_from(None)
        Nothing
        >>> option_from(float('nan'))
        Nothing
        >>> option_from(3)
        Some(3)
    """
    if is_sentinel(value):
        return Option(_NOTHING)
    return Some(value)


def is_option(value: object) -> bool:
    """Return True if value is a synchronous Option container."""
    return isinstance(value, Option)
