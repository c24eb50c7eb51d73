# taylor_ad/ops/arithmetic.py
import numbers

from ..core.node import Node, OpKind
from ..core.series import TSeries


def _as_node(x) -> Node:
    """Node of a TSeries; plain real numbers become constant leaves."""
    if isinstance(x, TSeries):
        return x.node
    if isinstance(x, numbers.Real) and not isinstance(x, bool):
        return Node.constant(float(x))
    raise TypeError(
        f"Taylor operations accept TSeries or real numbers, but got {type(x)}"
    )


def _unary(kind: OpKind, x, inner: Node = None) -> TSeries:
    return TSeries.from_node(Node(kind, (_as_node(x),), inner=inner))


def _binary(kind: OpKind, x, y) -> TSeries:
    """
    Generic binary primitive. Either side may be a plain number: it becomes a
    constant leaf that recurrences read as a scalar.
    """
    return TSeries.from_node(Node(kind, (_as_node(x), _as_node(y))))


def add(x, y): return _binary(OpKind.ADD, x, y)
def sub(x, y): return _binary(OpKind.SUB, x, y)
def mul(x, y): return _binary(OpKind.MUL, x, y)
def div(x, y): return _binary(OpKind.DIV, x, y)

def neg(x): return _unary(OpKind.NEG, x)
def pos(x): return _unary(OpKind.POS, x)


def square(x):
    """x*x, evaluating x only once per order."""
    return _unary(OpKind.SQUARE, x)


def _integer_power(a: Node, p: int) -> Node:
    """a**p as a product chain (exponentiation by squaring)."""
    if p == 0:
        return Node.constant(1.0)
    q = abs(p)
    result = None
    base = a
    while q:
        if q & 1:
            result = base if result is None else Node(OpKind.MUL, (result, base))
        q >>= 1
        if q:
            base = Node(OpKind.SQUARE, (base,))
    if p < 0:
        result = Node(OpKind.DIV, (Node.constant(1.0), result))
    return result


def pow(x, y):
    """
    Power x**y.

    Integer constant exponents expand as products of x (so x may vanish at
    the expansion point); any other exponent goes through exp(y * log(x)),
    which needs x[0] > 0.
    """
    a = _as_node(x)
    p = _as_node(y)
    if p.is_constant and float(p.value).is_integer():
        inner = _integer_power(a, int(p.value))
    else:
        inner = Node(OpKind.EXP, (Node(OpKind.MUL, (p, Node(OpKind.LOG, (a,)))),))
    return TSeries.from_node(Node(OpKind.POW, (a, p), inner=inner))
