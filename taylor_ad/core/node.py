# taylor_ad/core/node.py
from __future__ import annotations
from enum import Enum
from typing import Optional, Tuple

from .store import CoefficientStore


class OpKind(Enum):
    """Closed set of ways a series can be produced."""
    # leaves
    CONST = "const"
    VAR = "var"
    # unary
    NEG = "neg"
    POS = "pos"
    SQRT = "sqrt"
    EXP = "exp"
    LOG = "log"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    ASIN = "asin"
    ACOS = "acos"
    ATAN = "atan"
    SQUARE = "square"
    ERF = "erf"
    # binary
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    POW = "pow"


LEAF_KINDS = frozenset({OpKind.CONST, OpKind.VAR})
UNARY_KINDS = frozenset({
    OpKind.NEG, OpKind.POS, OpKind.SQRT, OpKind.EXP, OpKind.LOG,
    OpKind.SIN, OpKind.COS, OpKind.TAN, OpKind.ASIN, OpKind.ACOS,
    OpKind.ATAN, OpKind.SQUARE, OpKind.ERF,
})
BINARY_KINDS = frozenset({OpKind.ADD, OpKind.SUB, OpKind.MUL, OpKind.DIV, OpKind.POW})

# Kinds that advance a companion series in lock-step with their own
AUX_KINDS = frozenset({OpKind.SIN, OpKind.COS, OpKind.TAN, OpKind.ASIN, OpKind.ACOS, OpKind.ATAN})


class Node:
    """
    One series in an expression DAG.

    Attributes
    ----------
    kind     : OpKind
        Operation that produced this series.
    operands : Tuple[Node, ...]
        Input series (empty for leaves). Shared, never modified.
    store    : CoefficientStore
        Cached coefficients of this series.
    value    : Optional[float]
        The scalar of a CONST leaf, None otherwise.
    aux      : Optional[CoefficientStore]
        Companion series for sin/cos/tan/asin/acos/atan recurrences.
    inner    : Optional[Node]
        Sub-graph a composite kind (pow, erf) is expressed through. It is
        built over the same operands, so it shares their caches.
    """
    __slots__ = ("kind", "operands", "store", "value", "aux", "inner")

    def __init__(self, kind: OpKind, operands: Tuple["Node", ...] = (),
                 value: Optional[float] = None, inner: Optional["Node"] = None):
        n_expected = 0 if kind in LEAF_KINDS else 1 if kind in UNARY_KINDS else 2
        if len(operands) != n_expected:
            raise ValueError(f"{kind.value} takes {n_expected} operand(s), got {len(operands)}")
        self.kind = kind
        self.operands = tuple(operands)
        self.store = CoefficientStore()
        self.value = None
        self.aux = CoefficientStore() if kind in AUX_KINDS else None
        self.inner = inner
        if kind is OpKind.CONST:
            self.value = float(value)
            self.store.set(0, self.value)
        elif kind is OpKind.VAR and value is not None:
            self.store.seed(0, float(value))

    # ---- constructors ----
    @classmethod
    def constant(cls, value: float) -> "Node":
        return cls(OpKind.CONST, value=value)

    @classmethod
    def variable(cls, value: Optional[float] = None) -> "Node":
        return cls(OpKind.VAR, value=value)

    # ---- introspection ----
    @property
    def is_leaf(self) -> bool:
        return self.kind in LEAF_KINDS

    @property
    def is_constant(self) -> bool:
        return self.kind is OpKind.CONST

    @property
    def valid_through(self) -> int:
        return self.store.valid_through

    def coeff(self, order: int) -> float:
        """
        Coefficient at `order`. Constants answer for any order without
        touching their store (c[0] = value, 0 beyond).
        """
        if self.kind is OpKind.CONST:
            if order < 0:
                raise IndexError(f"Taylor order must be non-negative, got {order}")
            return self.value if order == 0 else 0.0
        return self.store.get(order)

    def __repr__(self):
        if self.kind is OpKind.CONST:
            return f"Node(const {self.value!r})"
        return f"Node({self.kind.value}, valid_through={self.valid_through})"
