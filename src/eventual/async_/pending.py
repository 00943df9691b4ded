"""Pending computations: settle once, replay to every consumer.

A coroutine object can only be awaited once, but an asynchronous container
may feed several chains. ``Pending`` starts the source the first time it is
asked, stores the outcome (value or fault), and hands the same outcome to
every later consumer. aiologic's lock keeps concurrent first consumers from
starting the source twice, on asyncio and trio alike.

The source belongs to the cell, not to the consumer that started it. On
asyncio it runs in a task owned by the cell and consumers wait on it through
``asyncio.shield``; elsewhere it runs in a shielded anyio cancel scope.
Cancelling one consumer, for example with a timeout, never cancels the
source, so sibling chains still get its outcome.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from types import TracebackType
from typing import Any

import aiologic
import anyio

from eventual._config import get_config
from eventual._logging import get_logger
from eventual.errors import PendingDepthError

__all__ = ['Pending', 'settle']

logger = get_logger(__name__)


class Pending[T]:
    """A computation that settles exactly once.

    Examples:
        >>> async def answer() -> int:
        ...     return 42
        >>> pending = Pending(answer())
        >>> # await pending.get() -> 42, as many times as needed
    """

    __slots__ = ('_awaitable', '_driver', '_fault', '_lock', '_settled', '_traceback', '_value')

    def __init__(self, awaitable: Awaitable[T]) -> None:
        self._awaitable: Awaitable[T] | None = awaitable
        self._lock = aiologic.Lock()
        self._settled = False
        self._value: T | None = None
        self._fault: Exception | None = None
        self._traceback: TracebackType | None = None
        self._driver: asyncio.Future[None] | None = None

    def is_settled(self) -> bool:
        """Check whether the computation has settled (value or fault)."""
        return self._settled

    async def get(self) -> T:
        """Wait for the computation and return its value.

        Raises:
            Exception: Whatever the computation raised. The fault is replayed
                to every consumer; it is never turned into a domain value.
        """
        if not self._settled:
            async with self._lock:
                if not self._settled:
                    await self._run()
        if self._fault is not None:
            raise self._fault.with_traceback(self._traceback)
        return self._value  # type: ignore[return-value]

    async def _run(self) -> None:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            # Not on asyncio: the shielded scope keeps the source running.
            with anyio.CancelScope(shield=True):
                await self._drive()
            return
        if self._driver is None:
            self._driver = asyncio.ensure_future(self._drive())
        await asyncio.shield(self._driver)

    async def _drive(self) -> None:
        try:
            value = await self._awaitable  # type: ignore[misc]
        except Exception as exc:
            logger.debug('pending_computation_failed', error=repr(exc))
            self._fault = exc
            self._traceback = exc.__traceback__
        else:
            self._value = value
        self._settled = True
        self._awaitable = None

    def __repr__(self) -> str:
        if not self._settled:
            return 'Pending(<unsettled>)'
        if self._fault is not None:
            return f'Pending(fault={self._fault!r})'
        return f'Pending(value={self._value!r})'


async def settle(pending: Pending[Any], wrap: Callable[[Any], Any], container_type: type) -> Any:
    """Await ``pending`` and classify its value until a ``container_type`` appears.

    ``wrap`` is the constructor that classifies each settled value. When it
    produces another asynchronous container (a pending computation that
    resolved to a pending computation), that container is awaited in turn,
    one level at a time, up to the configured ``max_pending_depth``.

    Raises:
        PendingDepthError: If the bound is exceeded.
    """
    limit = get_config().max_pending_depth
    depth = 0
    while True:
        container = wrap(await pending.get())
        if isinstance(container, container_type):
            return container
        depth += 1
        if depth > limit:
            raise PendingDepthError(depth)
        logger.debug('flattening_pending_container', depth=depth)
        pending, wrap = container.pending, container.wrap
