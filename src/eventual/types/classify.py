"""Shape predicates shared by the constructors.

The constructors (``Some``, ``Ok``, ``Err``) decide what to do with an input
by asking, in order: is it already a container, a raw variant, a pending
computation, a sentinel, or a plain value. The last two questions are
answered here.
"""

from __future__ import annotations

import inspect
import math
from collections.abc import Awaitable
from typing import Any, TypeGuard

__all__ = ['is_pending', 'is_sentinel']


def is_sentinel(value: object) -> bool:
    """Return True if ``value`` stands for "no value" when building an Option.

    The sentinels are ``None``, a float NaN and positive float infinity.
    Negative infinity is an ordinary value.

    Examples:
        >>> is_sentinel(None), is_sentinel(float('nan')), is_sentinel(float('inf'))
        (True, True, True)
        >>> is_sentinel(0), is_sentinel(float('-inf')), is_sentinel('')
        (False, False, False)
    """
    if value is None:
        return True
    if isinstance(value, float):
        return math.isnan(value) or value == math.inf
    return False


def is_pending(value: Any) -> TypeGuard[Awaitable[Any]]:
    """Return True if ``value`` is a pending computation (any awaitable)."""
    return inspect.isawaitable(value)
