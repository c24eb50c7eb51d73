# taylor_ad/ops/transcendental.py
from ..core.node import OpKind
from .arithmetic import _unary


def exp(x):
    return _unary(OpKind.EXP, x)


def log(x):
    """Natural logarithm; needs x[0] > 0."""
    return _unary(OpKind.LOG, x)


def sqrt(x):
    """Square root; needs x[0] >= 0 (and x[0] > 0 beyond order 0)."""
    return _unary(OpKind.SQRT, x)
