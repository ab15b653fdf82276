"""
Graph inspection utilities.
Print and analyse the structure of a computation graph.

Everything here is read-only: nodes are walked through the same operand
edges the engine uses, and only `value`, `grad`, `label` and `op_kind` are
read.
"""

import numpy as np
from typing import Dict, List, Tuple
from collections import Counter

from .node import Node
from .engine import topo_sort


def trace(root: Node) -> Tuple[List[Node], List[Tuple[Node, Node]]]:
    """
    Collect the graph below root.

    Returns:
        nodes: every reachable node, in topological order (operands first)
        edges: (operand, consumer) pairs; an operand used twice by the same
               node (e.g. x * x) is listed once
    """
    nodes = topo_sort(root)
    edges = []
    for node in nodes:
        seen = set()
        for child in node.operands:
            if id(child) not in seen:
                seen.add(id(child))
                edges.append((child, node))
    return nodes, edges


def _node_name(node: Node, index: Dict[int, int]) -> str:
    return node.label or f"Node{index[id(node)]}"


def get_graph_stats(root: Node) -> Dict:
    """
    Compute graph statistics (no printing).

    Returns:
        dict with node/edge counts, fan-in/fan-out, depth and op-kind counts
    """
    nodes, edges = trace(root)
    n_nodes = len(nodes)
    index = {id(n): i for i, n in enumerate(nodes)}

    # Fan-in
    fan_ins = [len(n.operands) for n in nodes]

    # Fan-out (number of distinct consumers)
    fan_outs = [0] * n_nodes
    for child, _ in edges:
        fan_outs[index[id(child)]] += 1

    # Longest operand chain; operands come first in topological order
    depth = [0] * n_nodes
    for i, n in enumerate(nodes):
        if n.operands:
            depth[i] = 1 + max(depth[index[id(c)]] for c in n.operands)

    op_counter = Counter(n.op_kind for n in nodes)

    return {
        'nodes': n_nodes,
        'edges': len(edges),
        'leaves': sum(1 for n in nodes if n.is_leaf),
        'max_fan_in': max(fan_ins),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'depth': depth[-1],
        'operations': dict(op_counter),
    }


def print_graph_summary(root: Node, detailed: bool = False) -> Dict:
    """
    Print a summary of the graph below root.

    Args:
        root: output node
        detailed: also list every node (graphs of up to 100 nodes)

    Returns:
        the statistics dict from get_graph_stats
    """
    stats = get_graph_stats(root)
    n_nodes = stats['nodes']

    print("\n" + "=" * 70)
    print("COMPUTATION GRAPH SUMMARY")
    print("=" * 70)
    print(f"Total nodes:        {n_nodes:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Depth:              {stats['depth']}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_kind, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / n_nodes
        print(f"  {op_kind:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and n_nodes <= 100:
        print()
        print_computation_graph(root, max_nodes=100)
    else:
        print("=" * 70 + "\n")

    return stats


def print_computation_graph(root: Node, max_nodes: int = 20) -> None:
    """
    Print the graph structure, one node per line, operands first.

    Args:
        root: output node
        max_nodes: print at most this many nodes
    """
    nodes, _ = trace(root)
    index = {id(n): i for i, n in enumerate(nodes)}

    print("=" * 70)
    print("COMPUTATION GRAPH STRUCTURE")
    print("=" * 70)

    for node in nodes[:max_nodes]:
        name = _node_name(node, index)
        head = f"{name:>10s}: {node.op_kind:6s} value={node.value: .6f} grad={node.grad: .6f}"
        if node.operands:
            operand_info = ", ".join(_node_name(c, index) for c in node.operands)
            print(f"{head} <- [{operand_info}]")
        else:
            print(f"{head} [leaf]")

    if len(nodes) > max_nodes:
        print(f"... ({len(nodes) - max_nodes} more nodes)")

    print("=" * 70 + "\n")
