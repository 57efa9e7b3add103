"""
Argument guards shared by the Evaluator operations.

Every guard runs before the operation has any observable effect, so a
missing argument aborts the call without touching the wrapped value or
the condition flag.
"""

from __future__ import annotations

from typing import Any, TypeVar

from .errors import NullReferenceError


T = TypeVar("T")

NOT_CALLABLE_MESSAGE = "{argument} must be callable, got {type_name}"


def require_not_null(value: T, argument: str) -> T:
    """
    Return value unchanged if it is not None.
    
    Raises:
        NullReferenceError: If value is None
    """
    if value is None:
        raise NullReferenceError(argument)
    return value


def require_callable(func: Any, argument: str) -> Any:
    """
    Return func unchanged if it is a non-None callable.
    
    Raises:
        NullReferenceError: If func is None
        TypeError: If func cannot be called
    """
    require_not_null(func, argument)
    if not callable(func):
        raise TypeError(
            NOT_CALLABLE_MESSAGE.format(
                argument=argument, type_name=type(func).__name__
            )
        )
    return func
