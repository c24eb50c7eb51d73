# taylor_ad/ops/trig.py
"""
Trigonometric functions and their inverses.

sin and cos carry each other as companion series; tan carries 1 + tan^2,
asin/acos carry sqrt(1 - x^2) and atan carries 1 + x^2.
"""
from ..core.node import OpKind
from .arithmetic import _unary


def sin(x): return _unary(OpKind.SIN, x)
def cos(x): return _unary(OpKind.COS, x)
def tan(x): return _unary(OpKind.TAN, x)


def asin(x):
    """Inverse sine; needs |x[0]| <= 1 (and < 1 beyond order 0)."""
    return _unary(OpKind.ASIN, x)


def acos(x):
    """Inverse cosine; needs |x[0]| <= 1 (and < 1 beyond order 0)."""
    return _unary(OpKind.ACOS, x)


def atan(x): return _unary(OpKind.ATAN, x)
