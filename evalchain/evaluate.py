"""
Evaluator — Fluent conditional execution over a single wrapped value.

An Evaluator holds one non-None value and a global condition flag. The
flag records the outcome of the most recent when() call and drives
otherwise() and or_else_throw(). Every chaining method mutates the
instance and returns it.

Lifecycle:
    evaluate(value)        — wrap a value (None is refused)
    .when(...)/.otherwise  — run actions depending on predicates
    .or_else_throw(...)    — raise a caller error if the last when() failed
    .get()                 — extract the value exactly once

Once the value is extracted or discarded by a throwing path the instance
is spent: get() fails and no callback sees the value again.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, TypeVar

from .errors import NoSuchValueError
from .validation import require_callable, require_not_null


logger = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V")

ExceptionSupplier = Callable[[], BaseException]

# Marks a consumed value; callers can never wrap None themselves
_SPENT = None


class Evaluator(Generic[T]):
    """
    Wraps a value and runs side-effecting actions on it conditionally.
    
    Invariants enforced:
    1. The wrapped value is never None at construction
    2. last_condition_result is only written by when()
    3. After extraction or a throwing path the value is gone for good
    
    Instances are not thread-safe. A chain is expected to run on the
    thread that created it; share one across threads only under an
    external lock.
    """
    
    __slots__ = ("_value", "_last_condition_result")
    
    def __init__(self, value: T):
        self._value = require_not_null(value, "value")
        self._last_condition_result = False
    
    @classmethod
    def create(cls, value: T) -> Evaluator[T]:
        """
        Wrap value for evaluation.
        
        Raises:
            NullReferenceError: If value is None
        """
        return cls(value)
    
    # =========================================================================
    # STATE
    # =========================================================================
    
    @property
    def last_condition_result(self) -> bool:
        """Outcome of the most recent when() call; False before any."""
        return self._last_condition_result
    
    @property
    def is_spent(self) -> bool:
        return self._value is _SPENT
    
    def __repr__(self) -> str:
        shown = "<spent>" if self.is_spent else repr(self._value)
        return (
            f"Evaluator({shown}, "
            f"last_condition_result={self._last_condition_result})"
        )
    
    # =========================================================================
    # CONDITIONAL EXECUTION
    # =========================================================================
    
    def when(
        self,
        predicate: Callable[[T], bool],
        action: Callable[[T], Any],
    ) -> Evaluator[T]:
        """
        Evaluate predicate against the value and run action if it holds.
        
        The predicate is called once; its result is stored as the global
        condition flag and reused to decide whether action runs.
        
        Raises:
            NullReferenceError: If predicate is None, or if the predicate
                holds and action is None
        """
        require_callable(predicate, "predicate")
        if self.is_spent:
            return self
        
        matched = bool(predicate(self._value))
        self._last_condition_result = matched
        if matched:
            require_callable(action, "action")
            action(self._value)
        return self
    
    def when_true(
        self,
        condition: bool,
        action: Callable[[T], Any],
    ) -> Evaluator[T]:
        """
        Run action if condition is true. Leaves the global flag alone.
        
        Raises:
            NullReferenceError: If condition is true and action is None
        """
        if condition and not self.is_spent:
            require_callable(action, "action")
            action(self._value)
        return self
    
    def otherwise(self, action: Callable[[T], Any]) -> Evaluator[T]:
        """
        Run action if the last when() did not match, or none was run.
        
        Raises:
            NullReferenceError: If the branch is taken and action is None
        """
        if not self._last_condition_result and not self.is_spent:
            require_callable(action, "action")
            action(self._value)
        return self
    
    # =========================================================================
    # THROWING PATHS
    # =========================================================================
    
    def or_else_throw(self, exception_supplier: ExceptionSupplier) -> None:
        """
        Raise the supplied error if the last when() did not match.
        
        The value is discarded before raising. When the last when()
        matched this is a no-op and the value stays retrievable.
        
        Raises:
            NullReferenceError: If the last when() did not match and
                exception_supplier is None
            Exception: Whatever exception_supplier() returns
        """
        if self._last_condition_result:
            return
        require_callable(exception_supplier, "exception_supplier")
        self._discard("last condition did not match")
        raise exception_supplier()
    
    def throw_if_true(
        self,
        predicate: Callable[[T], bool],
        exception_supplier: ExceptionSupplier,
    ) -> None:
        """
        Raise the supplied error if predicate holds for the value.
        
        Independent of the global condition flag, which is left untouched.
        The value is discarded before raising.
        
        Raises:
            NullReferenceError: If predicate or exception_supplier is None
            Exception: Whatever exception_supplier() returns
        """
        require_callable(predicate, "predicate")
        require_callable(exception_supplier, "exception_supplier")
        if self.is_spent:
            return
        if predicate(self._value):
            self._discard("predicate matched")
            raise exception_supplier()
    
    # =========================================================================
    # SECONDARY HELPERS
    # =========================================================================
    
    def finally_(self, extra: V, action: Callable[[V], Any]) -> None:
        """
        Run action on extra while the evaluator still holds its value.
        
        Note: action receives extra, not the wrapped value.
        
        Raises:
            NullReferenceError: If extra or action is None
        """
        require_callable(action, "action")
        require_not_null(extra, "extra")
        if not self.is_spent:
            action(extra)
    
    # =========================================================================
    # EXTRACTION
    # =========================================================================
    
    def get(self) -> T:
        """
        Return the wrapped value and spend the evaluator.
        
        Raises:
            NoSuchValueError: If the value was already extracted or discarded
        """
        if self.is_spent:
            raise NoSuchValueError()
        value = self._value
        self._value = _SPENT
        logger.debug("Extracted value from evaluator")
        return value
    
    def _discard(self, reason: str) -> None:
        self._value = _SPENT
        logger.debug("Discarded evaluator value before raising: %s", reason)


def evaluate(value: T) -> Evaluator[T]:
    """
    Factory function to wrap a value in an Evaluator.
    
    Raises:
        NullReferenceError: If value is None
    """
    return Evaluator.create(value)
