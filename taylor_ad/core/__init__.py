# taylor_ad/core/__init__.py

"""
Core of the Taylor engine: coefficient storage, the expression graph, the
recurrence evaluator and derivative extraction.

Keep this surface small; the operations that build graphs live in
`taylor_ad.ops`.
"""

from .store import CoefficientStore
from .node import Node, OpKind
from .series import TSeries
from .evaluator import evaluate
from .extract import (
    nth_derivative,
    derivatives,
    coefficients,
    highest_valid_order,
    valid_orders,
    reset,
)

__all__ = [
    "CoefficientStore",
    "Node",
    "OpKind",
    "TSeries",
    "evaluate",
    "nth_derivative",
    "derivatives",
    "coefficients",
    "highest_valid_order",
    "valid_orders",
    "reset",
]
