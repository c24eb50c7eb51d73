# taylor_ad/core/evaluator.py
from __future__ import annotations
import logging
import operator
import warnings

from ..config import get_config
from ..errors import OrderNotComputed, TaylorWarning
from .graph_utils import topological_order
from .node import Node, OpKind
from .recurrences import RECURRENCES

logger = logging.getLogger(__name__)


def check_order(order) -> int:
    """Validate a Taylor order argument and return it as a plain int."""
    try:
        order = operator.index(order)
    except TypeError:
        raise TypeError(f"Taylor order must be an integer, got {type(order).__name__}") from None
    if order < 0:
        raise ValueError(f"Taylor order must be non-negative, got {order}")
    return order


def evaluate(node: Node, order: int) -> None:
    """
    Make every coefficient of `node` through `order` valid.

    Idempotent: orders already cached are not recomputed. Operands are
    brought to `order` before the node itself, each shared sub-expression
    exactly once. Errors (SingularExpansion, DomainError) propagate from the
    first faulting recurrence; all coefficients computed before it stay valid.
    """
    order = check_order(order)
    if node.valid_through >= order:
        return

    threshold = get_config().order_warning
    if threshold is not None and order > threshold:
        warnings.warn(
            f"Evaluating Taylor series to order {order} (> {threshold}); "
            f"cost grows quadratically with the order.",
            TaylorWarning, stacklevel=2,
        )

    schedule = topological_order(node, prune=lambda nd: nd.valid_through >= order)
    logger.debug("evaluating %d node(s) to order %d", len(schedule), order)

    for nd in schedule:
        if nd.is_leaf:
            if nd.kind is OpKind.VAR and nd.valid_through < 0:
                raise OrderNotComputed(
                    "a variable of this expression has no coefficients; seed at least x[0]"
                )
            # constants are 0 beyond order 0; a variable is 0 beyond its seeds
            nd.store.extend_zeros(order)
            continue
        step = RECURRENCES[nd.kind]
        for n in range(nd.valid_through + 1, order + 1):
            step(nd, n)
