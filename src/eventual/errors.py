"""Error types raised by eventual.

Domain absence (``Nothing``) and domain failure (``Err``) are values and never
raise. The exceptions here signal programming errors: forcing a value out of
the wrong variant, or an unbounded chain of pending computations.
"""

from __future__ import annotations

__all__ = [
    'EmptyValueError',
    'EventualError',
    'PendingDepthError',
    'UnwrapError',
]


class EventualError(Exception):
    """Base class for all eventual errors."""


class UnwrapError(EventualError):
    """Raised when a value is forced out of the wrong variant.

    ``unwrap()`` on an Err, or ``unwrap_err()`` on an Ok. The payload that was
    found instead is kept on ``value``.
    """

    def __init__(self, message: str, value: object = None) -> None:
        self.value = value
        super().__init__(message)


class EmptyValueError(UnwrapError):
    """Raised when a value is forced out of Nothing."""

    def __init__(self, message: str = 'Called unwrap on Nothing') -> None:
        super().__init__(message)


class PendingDepthError(EventualError):
    """A pending computation kept resolving to further pending computations."""

    def __init__(self, depth: int) -> None:
        self.depth = depth
        super().__init__(f'Pending computation still unresolved after {depth} levels')
