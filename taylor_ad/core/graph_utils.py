"""
Expression graph utilities.

Traversal of the series DAG (topological order, used by evaluation and
reset) and printing/analysis of its structure.
"""

from __future__ import annotations
from collections import Counter
from typing import Callable, Dict, List, Optional

import numpy as np

from .node import Node


def _children(node: Node, include_inner: bool):
    if include_inner and node.inner is not None:
        return node.operands + (node.inner,)
    return node.operands


def topological_order(root: Node, *, include_inner: bool = False,
                      prune: Optional[Callable[[Node], bool]] = None) -> List[Node]:
    """
    Nodes reachable from `root`, every node listed after all of its operands.

    Shared sub-expressions appear once. Nodes for which `prune(node)` is true
    are left out together with everything only reachable through them.
    Iterative, so graph depth is not bounded by the interpreter stack.
    """
    order: List[Node] = []
    seen = set()
    if prune is not None and prune(root):
        return order
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            order.append(node)
            continue
        if id(node) in seen:
            continue
        seen.add(id(node))
        stack.append((node, True))
        for child in reversed(_children(node, include_inner)):
            if id(child) in seen:
                continue
            if prune is not None and prune(child):
                continue
            stack.append((child, False))
    return order


def get_graph_stats(root: Node, include_inner: bool = False) -> Dict:
    """
    Statistics of the graph below `root` (without printing).

    Returns
        dict with node/edge counts, fan-in/fan-out and operation counts.
    """
    nodes = topological_order(root, include_inner=include_inner)
    n_nodes = len(nodes)
    fan_ins = [len(_children(nd, include_inner)) for nd in nodes]
    fan_out = Counter()
    for nd in nodes:
        for child in _children(nd, include_inner):
            fan_out[id(child)] += 1
    fan_outs = [fan_out[id(nd)] for nd in nodes]
    op_counter = Counter(nd.kind.value for nd in nodes)

    return {
        'nodes': n_nodes,
        'edges': sum(fan_ins),
        'depth': _depth(nodes, include_inner),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter),
    }


def _depth(nodes: List[Node], include_inner: bool) -> int:
    # nodes is topologically sorted, so operands are already measured
    depth = {}
    for nd in nodes:
        children = _children(nd, include_inner)
        depth[id(nd)] = 1 + max((depth[id(ch)] for ch in children), default=0)
    return depth[id(nodes[-1])]


def print_graph_summary(root: Node, detailed: bool = False) -> Dict:
    """
    Print a summary of the graph below `root`.

    Args:
        root: output node of the expression
        detailed: also list the nodes (only for graphs of up to 100 nodes)

    Returns:
        the dictionary of get_graph_stats()
    """
    stats = get_graph_stats(root)

    print("\n" + "="*70)
    print("TAYLOR EXPRESSION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Depth:              {stats['depth']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / stats['nodes']
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and stats['nodes'] <= 100:
        nodes = topological_order(root)
        index = {id(nd): i for i, nd in enumerate(nodes)}
        print()
        for i, nd in enumerate(nodes):
            if nd.operands:
                parent_info = ", ".join(f"Node{index[id(op)]}" for op in nd.operands)
                print(f"Node {i:3d}: {nd.kind.value:8s} valid<={nd.valid_through:<4d} <- [{parent_info}]")
            else:
                print(f"Node {i:3d}: {nd.kind.value:8s} valid<={nd.valid_through:<4d} [leaf]")

    print("="*70 + "\n")
    return stats
