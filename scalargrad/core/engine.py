# scalargrad/core/engine.py
from __future__ import annotations
import warnings
import numpy as np
from typing import List

from .node import Node
from .registry import get_backward_rule
from .errors import MissingBackwardRuleError


def topo_sort(root: Node) -> List[Node]:
    """
    Postorder of every node reachable from `root` through operand edges.

    Each node appears after all of its operands, so the list is a valid
    topological order and its reverse places every node after all of its
    consumers.

    Notes:
        - Visited nodes are tracked by identity (`id`), never by value: two
          leaves holding the same scalar are distinct nodes.
        - The depth-first walk uses an explicit work stack of
          (node, expanded) pairs, so long chains do not hit the recursion limit.
        - Operands are expanded in their stored order, which makes the result
          deterministic for structurally identical graphs.
    """
    if not isinstance(root, Node):
        raise TypeError(f"topo_sort expects a Node, got {type(root)}")

    order: List[Node] = []
    visited = set()
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            # All operands are finished
            order.append(node)
            continue
        if id(node) in visited:
            continue
        visited.add(id(node))
        stack.append((node, True))
        # Reversed so the first operand is popped (and emitted) first
        for child in reversed(node.operands):
            if id(child) not in visited:
                stack.append((child, False))
    return order


def backward(root: Node, seed: float = 1.0) -> None:
    """
    Run a single reverse pass from `root`.

    Afterwards every node reachable from `root` has had d(root)/d(node)
    (times `seed`) added to its `grad`.

    Args:
        root: output node to differentiate.
        seed: adjoint planted at the root, dy/dy = 1 by default.

    Notes:
        - Gradients accumulate. Nothing is reset, so calling `backward` twice
          on the same graph doubles every gradient; use `zero_grad` between
          passes when that is not wanted.
        - Only this pass's contribution is propagated through the graph:
          gradients the nodes already held are set aside during the sweep and
          added back afterwards, so stale intermediate gradients are never
          pushed down a second time.
        - Nodes are processed in reverse postorder: when a node's rule runs,
          every consumer of that node has already contributed to its grad, so
          nodes shared by several paths (diamonds) receive the full sum.
    """
    topo = topo_sort(root)

    if not np.isfinite(root.value):
        warnings.warn(
            f"backward() called on a non-finite root (value={root.value}); "
            f"gradients may be nan/inf",
            RuntimeWarning,
        )

    carried = [node.grad for node in topo]
    for node in topo:
        node.grad = 0.0

    try:
        # Seed adjoint
        root.grad += float(seed)

        # Backward sweep
        for node in reversed(topo):
            if node.is_leaf:
                continue  # leaves have nothing to propagate
            rule = get_backward_rule(node.op_kind)
            if rule is None:
                raise MissingBackwardRuleError(node.op_kind, node.label)
            rule(node)
    finally:
        for node, g in zip(topo, carried):
            node.grad += g


def zero_grad(*roots: Node) -> None:
    """
    Set `grad = 0.0` on every node reachable from the given roots.
    """
    for root in roots:
        for node in topo_sort(root):
            node.grad = 0.0
