"""Core types: Option, Result, their variants and constructors."""

from eventual.types.classify import is_pending, is_sentinel
from eventual.types.option import Nothing, Option, Some, is_option, option_from
from eventual.types.result import Err, Ok, Result, collect, is_result, result_from
from eventual.types.variants import ErrValue, NothingValue, OkValue, SomeValue

__all__ = [
    'Err',
    'ErrValue',
    'Nothing',
    'NothingValue',
    'Ok',
    'OkValue',
    'Option',
    'Result',
    'Some',
    'SomeValue',
    'collect',
    'is_option',
    'is_pending',
    'is_result',
    'is_sentinel',
    'option_from',
    'result_from',
]
