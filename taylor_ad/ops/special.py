# taylor_ad/ops/special.py
import math

from ..core.node import Node, OpKind
from ..core.series import TSeries
from .arithmetic import _as_node, add, div, mul

SQRT_TWO = math.sqrt(2.0)


def erf(x):
    """
    Error function: erf(x) = (2/√π) ∫₀ˣ e^(-t²) dt

    Derivative: d/dx erf(x) = (2/√π) * e^(-x²). The series of e^(-x²) is
    the inner graph of the erf node and shares x with it.
    """
    a = _as_node(x)
    gauss = Node(OpKind.EXP, (Node(OpKind.NEG, (Node(OpKind.SQUARE, (a,)),)),))
    return TSeries.from_node(Node(OpKind.ERF, (a,), inner=gauss))


def norm_cdf(x):
    """Standard normal CDF N(x) = 0.5 * (1 + erf(x / sqrt(2)))."""
    return mul(0.5, add(1.0, erf(div(x, SQRT_TWO))))
