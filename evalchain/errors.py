"""
Error taxonomy for the Evaluator.

    NullReferenceError  — A required argument was None
    NoSuchValueError    — The wrapped value was already extracted or discarded

Errors produced by caller-supplied exception factories are raised as-is
and are not part of this hierarchy.
"""

from __future__ import annotations


# =============================================================================
# MESSAGES
# =============================================================================

NULL_ARGUMENT_MESSAGE = "{argument} must not be None"
NO_SUCH_VALUE_MESSAGE = "No value present: evaluator is spent"


class EvaluateError(Exception):
    """Base class for errors raised by the evaluator itself."""
    pass


class NullReferenceError(EvaluateError, ValueError):
    """Raised when a required argument is None."""
    
    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(NULL_ARGUMENT_MESSAGE.format(argument=argument))


class NoSuchValueError(EvaluateError, LookupError):
    """Raised by get() once the evaluator is spent."""
    
    def __init__(self, message: str = NO_SUCH_VALUE_MESSAGE):
        super().__init__(message)
