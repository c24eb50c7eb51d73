# taylor_ad/taylor.py
# Function-level drivers: seed a variable, run f, read the expansion.

import numbers
from typing import Any, Callable, Optional, Union

import numpy as np

from .core import extract as _extract
from .core.evaluator import evaluate as _evaluate
from .core.node import Node
from .core.series import TSeries

SeriesLike = Union[TSeries, float]


def _node(x: Any) -> Node:
    if isinstance(x, TSeries):
        return x.node
    if isinstance(x, numbers.Real) and not isinstance(x, bool):
        return Node.constant(float(x))
    raise TypeError(f"expected a TSeries or a real number, got {type(x)}")


def value(x: Any) -> float:
    """Value at the expansion point of a TSeries; plain numbers pass through."""
    return x.value if isinstance(x, TSeries) else float(x)


def variable(x0: float, direction: float = 1.0, name: Optional[str] = None) -> TSeries:
    """
    Free variable expanded about `x0` with the standard seeding
    [x0, direction, 0, 0, ...].
    """
    x = TSeries(x0, name=name)
    x[1] = direction
    return x


# ----- operations on handles (accept plain numbers as constants) -----
def evaluate(x: SeriesLike, order: int) -> None:
    """Force evaluation of `x` through `order`. Returns nothing; see valid_orders()."""
    _evaluate(_node(x), order)


def nth_derivative(x: SeriesLike, n: int) -> float:
    """n-th derivative of `x` at its expansion point, as a float."""
    return _extract.nth_derivative(_node(x), n)


def highest_valid_order(x: TSeries) -> int:
    return _extract.highest_valid_order(x.node)


def valid_orders(x: TSeries) -> int:
    """Count of usable orders of `x` (no evaluation is triggered)."""
    return _extract.valid_orders(x.node)


def reset(x: TSeries) -> None:
    _extract.reset(x.node)


# ----- whole-function drivers -----
def taylor_coefficients(f: Callable[[TSeries], SeriesLike], x0: float, order: int) -> np.ndarray:
    """
    Taylor coefficients of f about x0 up to `order`.

    Args:
        f: Function receiving one TSeries and returning a TSeries (or a number)
        x0: Expansion point
        order: Highest order of the returned coefficients

    Returns:
        np.ndarray [c0, c1, ..., c_order] with f(x0 + h) ≈ Σ c_k h^k

    Examples:
        >>> def p(x): return 5*x**6 + 9*x**3 + 2.5*x**2 + 1.5*x + 8
        >>> taylor_coefficients(p, 0.0, 6).tolist()
        [8.0, 1.5, 2.5, 9.0, 0.0, 0.0, 5.0]
    """
    x = variable(x0)
    return _extract.coefficients(_node(f(x)), order)


def taylor_derivatives(f: Callable[[TSeries], SeriesLike], x0: float, order: int) -> np.ndarray:
    """Derivatives [f(x0), f'(x0), ..., f^(order)(x0)]."""
    x = variable(x0)
    return _extract.derivatives(_node(f(x)), order)


class TaylorExpander:
    """
    Builds the expression graph of `f` once and expands it about any number
    of points by resetting the graph and re-seeding its variable.

    Example:
        >>> ex = TaylorExpander(lambda x: x * x)
        >>> ex.derivatives(2.0, 3).tolist()
        [4.0, 4.0, 2.0, 0.0]
        >>> ex.derivatives(3.0, 1).tolist()
        [9.0, 6.0]
    """

    def __init__(self, f: Callable[[TSeries], SeriesLike]):
        self.f = f
        self.x = variable(0.0, name="x")
        self.y = TSeries.from_node(_node(f(self.x)))

    def seed(self, x0: float, direction: float = 1.0) -> TSeries:
        """Reset the graph and seed the variable with [x0, direction, 0, ...]."""
        self.y.reset()
        self.x.reset()
        self.x[0] = x0
        self.x[1] = direction
        return self.y

    def coefficients(self, x0: float, order: int) -> np.ndarray:
        return self.seed(x0).coefficients(order)

    def derivatives(self, x0: float, order: int) -> np.ndarray:
        return self.seed(x0).derivatives(order)
