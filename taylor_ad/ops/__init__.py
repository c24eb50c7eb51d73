# taylor_ad/ops/__init__.py

# Convenience re-exports so users can do: from taylor_ad.ops import mul, exp, ...
from .arithmetic import add, sub, mul, div, neg, pos, pow, square
from .transcendental import exp, log, sqrt
from .trig import sin, cos, tan, asin, acos, atan
from .special import erf, norm_cdf

__all__ = [
    "add", "sub", "mul", "div", "neg", "pos", "pow", "square",
    "exp", "log", "sqrt",
    "sin", "cos", "tan", "asin", "acos", "atan",
    "erf", "norm_cdf",
]
