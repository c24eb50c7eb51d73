# taylor_ad/core/extract.py
"""
Turning cached Taylor coefficients into derivative values, and resetting a
graph so it can be re-seeded.
"""

from __future__ import annotations
import logging

import numpy as np

from .evaluator import check_order, evaluate
from .graph_utils import topological_order
from .node import Node, OpKind

logger = logging.getLogger(__name__)


def _times_factorial(c: float, n: int) -> float:
    # multiply 1*2*...*n into c step by step; n! alone overflows at n = 171
    for k in range(2, n + 1):
        c *= k
    return float(c)


def nth_derivative(node: Node, n: int) -> float:
    """
    n-th derivative of the series at its expansion point: c[n] * n!.
    Forces evaluation through order n.
    """
    n = check_order(n)
    evaluate(node, n)
    return _times_factorial(node.coeff(n), n)


def coefficients(node: Node, order: int) -> np.ndarray:
    """Taylor coefficients c[0..order] as a float64 array (evaluates first)."""
    order = check_order(order)
    evaluate(node, order)
    if node.kind is OpKind.CONST:
        out = np.zeros(order + 1)
        out[0] = node.value
        return out
    return node.store.as_array(order)


def derivatives(node: Node, order: int) -> np.ndarray:
    """Derivatives f(x0), f'(x0), ..., f^(order)(x0) as a float64 array."""
    c = coefficients(node, order)
    return np.array([_times_factorial(c[n], n) for n in range(order + 1)])


def highest_valid_order(node: Node) -> int:
    """Highest cached order of `node` (-1 if none); never triggers evaluation."""
    return node.valid_through


def valid_orders(node: Node) -> int:
    """Number of orders currently usable, i.e. highest_valid_order + 1."""
    return max(node.valid_through + 1, 0)


def reset(node: Node) -> None:
    """
    Forget every cached coefficient of `node` and of the operations it is
    built from, so that the graph can be re-evaluated after its inputs are
    re-seeded. Leaves below `node` keep their values: constants always, and
    variables unless `node` itself is the variable being reset. Operation
    kinds and operand links are untouched.
    """
    nodes = topological_order(node, include_inner=True)
    for nd in nodes:
        if nd.kind is OpKind.CONST:
            continue
        if nd.kind is OpKind.VAR and nd is not node:
            continue
        nd.store.reset()
        if nd.aux is not None:
            nd.aux.reset()
    logger.debug("reset %d node(s)", len(nodes))
