# taylor_ad/core/recurrences.py
"""
Per-order Taylor coefficient recurrences.

Every entry of RECURRENCES has the signature ``step(node, n)``: given that the
node's operands are valid through order n and the node itself (and its
auxiliary series, if any) through n-1, it computes coefficient n and appends
it to ``node.store`` (and ``node.aux``).

Notation: c = result, a, b = operands, all as plain Taylor coefficients
(derivative / n!). The recursive forms never build n!, so nothing overflows
while coefficients propagate.
"""

from __future__ import annotations
import math
from typing import Callable, Dict

import numpy as np
from scipy.special import erf as scipy_erf

from ..errors import DomainError, SingularExpansion
from .node import Node, OpKind

TWO_OVER_SQRT_PI = 2.0 / math.sqrt(math.pi)


def _series(node: Node, n: int) -> np.ndarray:
    """Coefficients a[0..n] of an operand (constants expanded on the fly)."""
    if node.kind is OpKind.CONST:
        out = np.zeros(n + 1)
        out[0] = node.value
        return out
    return node.store.view(n)


def _weighted(v: np.ndarray, n: int) -> np.ndarray:
    """[1*v[1], 2*v[2], ..., n*v[n]]"""
    return np.arange(1, n + 1) * v[1:n + 1]


def _self_conv(v: np.ndarray, n: int) -> float:
    """sum_{i=0..n} v[i]*v[n-i], folded by symmetry."""
    m = (n + 1) // 2
    s = 2.0 * float(np.dot(v[:m], v[n:n - m:-1])) if m else 0.0
    if n % 2 == 0:
        s += v[n // 2] * v[n // 2]
    return s


# ----- linear -----
def _add(node: Node, n: int):
    a, b = node.operands
    node.store.set(n, a.coeff(n) + b.coeff(n))


def _sub(node: Node, n: int):
    a, b = node.operands
    node.store.set(n, a.coeff(n) - b.coeff(n))


def _neg(node: Node, n: int):
    node.store.set(n, -node.operands[0].coeff(n))


def _pos(node: Node, n: int):
    node.store.set(n, node.operands[0].coeff(n))


# ----- products and quotients -----
def _mul(node: Node, n: int):
    a, b = node.operands
    if b.is_constant:
        c = a.coeff(n) * b.value
    elif a.is_constant:
        c = a.value * b.coeff(n)
    else:
        # Leibniz: c[n] = sum_i a[i] * b[n-i]
        c = float(np.dot(a.store.view(n), b.store.view(n)[::-1]))
    node.store.set(n, c)


def _div(node: Node, n: int):
    a, b = node.operands
    if b.is_constant:
        if b.value == 0.0:
            raise SingularExpansion("division by the constant 0")
        node.store.set(n, a.coeff(n) / b.value)
        return
    b0 = b.store.get(0)
    if b0 == 0.0:
        raise SingularExpansion("division by a series whose order-0 coefficient is 0")
    if n == 0:
        node.store.set(0, a.coeff(0) / b0)
        return
    # c[n] = (a[n] - sum_{i<n} c[i] * b[n-i]) / b[0]
    c = node.store.view(n - 1)
    bv = b.store.view(n)
    s = float(np.dot(c, bv[n:0:-1]))
    node.store.set(n, (a.coeff(n) - s) / b0)


def _square(node: Node, n: int):
    node.store.set(n, _self_conv(_series(node.operands[0], n), n))


def _sqrt(node: Node, n: int):
    a = node.operands[0]
    if n == 0:
        a0 = a.coeff(0)
        if a0 < 0.0:
            raise DomainError(f"sqrt of a series with negative order-0 coefficient {a0}")
        node.store.set(0, math.sqrt(a0))
        return
    c = node.store.view(n - 1)
    if c[0] == 0.0:
        raise SingularExpansion("sqrt is not expandable beyond order 0 at 0")
    s = float(np.dot(c[1:n], c[n - 1:0:-1])) if n > 1 else 0.0
    node.store.set(n, (a.coeff(n) - s) / (2.0 * c[0]))


# ----- exp / log -----
def _exp(node: Node, n: int):
    a = node.operands[0]
    if n == 0:
        node.store.set(0, math.exp(a.coeff(0)))
        return
    # n c[n] = sum_{k=1..n} k a[k] c[n-k]
    av = _series(a, n)
    c = node.store.view(n - 1)
    node.store.set(n, float(np.dot(_weighted(av, n), c[::-1])) / n)


def _log(node: Node, n: int):
    a = node.operands[0]
    a0 = a.coeff(0)
    if n == 0:
        if a0 <= 0.0:
            raise DomainError(f"log of a series with non-positive order-0 coefficient {a0}")
        node.store.set(0, math.log(a0))
        return
    # c[n] = (a[n] - (1/n) sum_{i=1..n-1} i c[i] a[n-i]) / a[0]
    s = 0.0
    if n > 1:
        av = _series(a, n)
        c = node.store.view(n - 1)
        s = float(np.dot(_weighted(c, n - 1), av[n - 1:0:-1]))
    node.store.set(n, (a.coeff(n) - s / n) / a0)


# ----- trigonometric -----
def _sincos_step(a: Node, s_store, k_store, n: int):
    if n == 0:
        a0 = a.coeff(0)
        s_store.set(0, math.sin(a0))
        k_store.set(0, math.cos(a0))
        return
    ia = _weighted(_series(a, n), n)
    s_rev = s_store.view(n - 1)[::-1]
    k_rev = k_store.view(n - 1)[::-1]
    s_n = float(np.dot(ia, k_rev)) / n
    k_n = -float(np.dot(ia, s_rev)) / n
    s_store.set(n, s_n)
    k_store.set(n, k_n)


def _sin(node: Node, n: int):
    # own store holds sin, aux holds cos
    _sincos_step(node.operands[0], node.store, node.aux, n)


def _cos(node: Node, n: int):
    _sincos_step(node.operands[0], node.aux, node.store, n)


def _tan(node: Node, n: int):
    # t' = (1 + t^2) a', aux u = 1 + t^2
    a = node.operands[0]
    t, u = node.store, node.aux
    if n == 0:
        t0 = math.tan(a.coeff(0))
        t.set(0, t0)
        u.set(0, 1.0 + t0 * t0)
        return
    ia = _weighted(_series(a, n), n)
    t.set(n, float(np.dot(ia, u.view(n - 1)[::-1])) / n)
    u.set(n, _self_conv(t.view(n), n))


def _inverse_step(c, w, a: Node, n: int, sign: float):
    """
    Solve c' * w = sign * a' for c[n], given w through n-1:
        n c[n] w[0] + sum_{i=1..n-1} i c[i] w[n-i] = sign * n a[n]
    """
    w0 = w.get(0)
    s = 0.0
    if n > 1:
        s = float(np.dot(_weighted(c.view(n - 1), n - 1), w.view(n - 1)[n - 1:0:-1]))
    return (sign * n * a.coeff(n) - s) / (n * w0)


def _arcsin_like(node: Node, n: int, sign: float):
    # c' * r = sign * a', aux r = sqrt(1 - a^2)
    a = node.operands[0]
    c, r = node.store, node.aux
    if n == 0:
        a0 = a.coeff(0)
        if abs(a0) > 1.0:
            name = "asin" if sign > 0 else "acos"
            raise DomainError(f"{name} of a series with order-0 coefficient {a0} outside [-1, 1]")
        c.set(0, math.asin(a0) if sign > 0 else math.acos(a0))
        r.set(0, math.sqrt(1.0 - a0 * a0))
        return
    r0 = r.get(0)
    if r0 == 0.0:
        raise SingularExpansion("inverse sine/cosine is not expandable beyond order 0 at |x| = 1")
    c_n = _inverse_step(c, r, a, n, sign)
    # r[n] from r^2 = 1 - a^2
    w_n = -_self_conv(_series(a, n), n)
    rv = r.view(n - 1)
    s = float(np.dot(rv[1:n], rv[n - 1:0:-1])) if n > 1 else 0.0
    c.set(n, c_n)
    r.set(n, (w_n - s) / (2.0 * r0))


def _asin(node: Node, n: int):
    _arcsin_like(node, n, 1.0)


def _acos(node: Node, n: int):
    _arcsin_like(node, n, -1.0)


def _atan(node: Node, n: int):
    # c' * w = a', aux w = 1 + a^2
    a = node.operands[0]
    c, w = node.store, node.aux
    if n == 0:
        a0 = a.coeff(0)
        c.set(0, math.atan(a0))
        w.set(0, 1.0 + a0 * a0)
        return
    c.set(n, _inverse_step(c, w, a, n, 1.0))
    w.set(n, _self_conv(_series(a, n), n))


# ----- composites (expressed through node.inner) -----
def _pull_inner(node: Node, n: int):
    from .evaluator import evaluate  # local import to avoid cycles
    evaluate(node.inner, n)
    node.store.set(n, node.inner.coeff(n))


def _pow(node: Node, n: int):
    a, p = node.operands
    integer_exponent = p.is_constant and float(p.value).is_integer()
    if n == 0 and not integer_exponent:
        # exp(p * log(a)) needs a[0] > 0
        a0 = a.coeff(0)
        if a0 == 0.0:
            raise SingularExpansion("power of a series whose order-0 coefficient is 0")
        if a0 < 0.0:
            raise DomainError(f"non-integer power of a series with negative order-0 coefficient {a0}")
    _pull_inner(node, n)


def _erf(node: Node, n: int):
    # c' = (2/sqrt(pi)) g a', inner g = exp(-a^2)
    a = node.operands[0]
    if n == 0:
        node.store.set(0, float(scipy_erf(a.coeff(0))))
        return
    from .evaluator import evaluate  # local import to avoid cycles
    evaluate(node.inner, n - 1)
    g = _series(node.inner, n - 1)
    ia = _weighted(_series(a, n), n)
    node.store.set(n, TWO_OVER_SQRT_PI * float(np.dot(ia, g[::-1])) / n)


RECURRENCES: Dict[OpKind, Callable[[Node, int], None]] = {
    OpKind.ADD: _add,
    OpKind.SUB: _sub,
    OpKind.MUL: _mul,
    OpKind.DIV: _div,
    OpKind.POW: _pow,
    OpKind.NEG: _neg,
    OpKind.POS: _pos,
    OpKind.SQUARE: _square,
    OpKind.SQRT: _sqrt,
    OpKind.EXP: _exp,
    OpKind.LOG: _log,
    OpKind.SIN: _sin,
    OpKind.COS: _cos,
    OpKind.TAN: _tan,
    OpKind.ASIN: _asin,
    OpKind.ACOS: _acos,
    OpKind.ATAN: _atan,
    OpKind.ERF: _erf,
}
