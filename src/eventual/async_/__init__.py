"""Pending containers: AsyncOption and AsyncResult.

Constructors hand these out whenever they are given an awaitable:

    >>> from eventual import Some
    >>>
    >>> async def fetch(id: int) -> int:
    ...     return id
    >>>
    >>> async def main():
    ...     option = await Some(fetch(1)).map(lambda n: n + 1)
    ...     assert option == Some(2)
"""

from eventual.async_.option import AsyncOption, is_async_option
from eventual.async_.pending import Pending
from eventual.async_.result import AsyncResult, is_async_result

__all__ = [
    'AsyncOption',
    'AsyncResult',
    'Pending',
    'is_async_option',
    'is_async_result',
]
