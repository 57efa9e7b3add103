# evalchain
# Fluent conditional evaluation over a single wrapped value

"""
Wrap a value once, branch on predicates, raise caller-defined errors on
failed conditions, and extract the value exactly once.

    evaluate(5).when(lambda x: x > 3, print).or_else_throw(
        lambda: ValueError("too small")
    )
"""

import logging

from .errors import EvaluateError, NoSuchValueError, NullReferenceError
from .evaluate import Evaluator, evaluate

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "EvaluateError",
    "Evaluator",
    "NoSuchValueError",
    "NullReferenceError",
    "evaluate",
]
