"""eventual: Option and Result containers that work the same now or later.

Flat imports (preferred):
    from eventual import Some, Nothing, Ok, Err, Option, Result
    from eventual import AsyncOption, AsyncResult

Submodule imports (for organization):
    from eventual.types import Option, SomeValue
    from eventual.async_ import AsyncOption

Every constructor accepts a plain value, a container, a raw variant or an
awaitable. Awaitables produce AsyncOption/AsyncResult, whose combinators have
the same names as the synchronous ones and are resolved with ``await``.
"""

# Configuration and logging
from eventual._config import EventualConfig, configure, get_config, reset_config
from eventual._logging import configure_logging, get_logger

# Async
from eventual.async_ import AsyncOption, AsyncResult, is_async_option, is_async_result

# Errors
from eventual.errors import EmptyValueError, EventualError, PendingDepthError, UnwrapError

# Types
from eventual.types import (
    Err,
    ErrValue,
    Nothing,
    NothingValue,
    Ok,
    OkValue,
    Option,
    Result,
    Some,
    SomeValue,
    collect,
    is_option,
    is_pending,
    is_result,
    is_sentinel,
    option_from,
    result_from,
)

__all__ = [
    'AsyncOption',
    'AsyncResult',
    'EmptyValueError',
    'Err',
    'ErrValue',
    'EventualConfig',
    'EventualError',
    'Nothing',
    'NothingValue',
    'Ok',
    'OkValue',
    'Option',
    'PendingDepthError',
    'Result',
    'Some',
    'SomeValue',
    'UnwrapError',
    'collect',
    'configure',
    'configure_logging',
    'get_config',
    'get_logger',
    'is_async_option',
    'is_async_result',
    'is_option',
    'is_pending',
    'is_result',
    'is_sentinel',
    'option_from',
    'reset_config',
    'result_from',
]
