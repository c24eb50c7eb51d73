# taylor_ad/core/series.py
from __future__ import annotations
import numbers
from typing import Any, Optional

import numpy as np

from .node import Node, OpKind
from .evaluator import check_order, evaluate
from . import extract as _extract


class TSeries:
    """
    Truncated Taylor series of one real variable, evaluated on demand.

    A TSeries is a handle on a Node of the expression graph. Arithmetic on
    handles builds new nodes that reference the operands' nodes (no copies),
    so a sub-expression used twice is evaluated once. Nothing is computed
    until a coefficient or derivative is requested.

    Attributes
    ----------
    node : Node
        The graph node this handle refers to.
    name : Optional[str]
        Optional debug/pretty-print name.

    Examples
    --------
    >>> x = TSeries(1.0)      # expansion point x0 = 1
    >>> x[1] = 1.0            # differentiate along x
    >>> y = x * x + 3.0
    >>> y.derivative(1)
    2.0
    """

    __array_priority__ = 1000  # make numpy scalars defer to our reflected operators
    __array_ufunc__ = None
    __slots__ = ("node", "name")

    def __init__(self, value: Any = 0.0, *, name: Optional[str] = None):
        # A TSeries argument is wrapped (identity); a real number starts a
        # free variable with c[0] = value.
        if isinstance(value, TSeries):
            node = Node(OpKind.POS, (value.node,))
        elif isinstance(value, numbers.Real) and not isinstance(value, bool):
            node = Node.variable(float(value))
        else:
            raise TypeError(
                f"TSeries only accepts real numbers or TSeries, but got {type(value)}"
            )
        self.node = node
        self.name = name

    @classmethod
    def from_node(cls, node: Node, name: Optional[str] = None) -> "TSeries":
        """Wrap an existing graph node without creating a new one."""
        obj = cls.__new__(cls)
        obj.node = node
        obj.name = name
        return obj

    @classmethod
    def constant(cls, value: float, name: Optional[str] = None) -> "TSeries":
        """Series of a constant: c[0] = value, every other coefficient 0."""
        return cls.from_node(Node.constant(value), name=name)

    def __repr__(self):
        label = f", name={self.name!r}" if self.name else ""
        if self.node.kind is OpKind.CONST:
            return f"TSeries(const {self.node.value!r}{label})"
        vt = self.node.valid_through
        coeffs = self.node.store.as_array() if vt >= 0 else np.zeros(0)
        return f"TSeries({self.node.kind.value}, coeffs={coeffs.tolist()!r}{label})"

    # ---- coefficient access ----
    def __getitem__(self, order: int) -> float:
        order = _subscript(order)
        return float(self.node.coeff(order))

    def __setitem__(self, order: int, value: float):
        order = _subscript(order)
        if self.node.kind is not OpKind.VAR:
            raise TypeError(
                f"only free variables can be seeded; this series is a {self.node.kind.value} node"
            )
        self.node.store.seed(order, float(value))

    @property
    def kind(self) -> OpKind:
        return self.node.kind

    @property
    def is_variable(self) -> bool:
        return self.node.kind is OpKind.VAR

    @property
    def value(self) -> float:
        """Function value at the expansion point, c[0]."""
        evaluate(self.node, 0)
        return float(self.node.coeff(0))

    def __float__(self):
        return self.value

    # ---- evaluation ----
    def evaluate(self, order: int) -> None:
        """Compute (and cache) all coefficients through `order`."""
        evaluate(self.node, order)

    @property
    def highest_valid_order(self) -> int:
        return _extract.highest_valid_order(self.node)

    @property
    def valid_orders(self) -> int:
        """How many orders (0, 1, ...) are currently usable; no evaluation."""
        return _extract.valid_orders(self.node)

    def derivative(self, n: int) -> float:
        """n-th derivative at the expansion point (coefficient n times n!)."""
        return _extract.nth_derivative(self.node, n)

    def derivatives(self, order: int) -> np.ndarray:
        return _extract.derivatives(self.node, order)

    def coefficients(self, order: int) -> np.ndarray:
        return _extract.coefficients(self.node, order)

    def reset(self) -> None:
        """Discard cached coefficients of this series and the operations below it; input variables keep their seeds."""
        _extract.reset(self.node)

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pos__(self):
        from ..ops.arithmetic import pos
        return pos(self)

    def __pow__(self, other):
        from ..ops.arithmetic import pow
        return pow(self, other)

    def __rpow__(self, other):
        from ..ops.arithmetic import pow
        return pow(other, self)


def _subscript(order) -> int:
    try:
        return check_order(order)
    except ValueError:
        raise IndexError(f"Taylor order must be non-negative, got {order}") from None
