# scalargrad/core/__init__.py

"""
Core public API for scalargrad.

Exports:
    Node          : The differentiable scalar recorded in the computation graph.
    topo_sort     : Postorder of all nodes reachable from a root.
    backward      : Run a single reverse pass to accumulate gradients.
    zero_grad     : Reset gradients of every node reachable from given roots.
    register_backward / get_backward_rule : Per-op-kind backward rules.
    grad, grads, grads_list, value : Convenience gradient drivers.
    check_grads   : Compare reverse-mode gradients with finite differences.
"""

from .node import Node
from .errors import (
    ScalarGradError,
    InvalidOperandError,
    DivisionByZeroError,
    MissingBackwardRuleError,
)
from .registry import register_backward, get_backward_rule, registered_op_kinds
from .engine import topo_sort, backward, zero_grad
from .seeds import grad, grads, grads_list, value
from .gradcheck import GradCheckConfig, GradCheckResult, check_grads, numerical_grads

__all__ = [
    "Node",
    "ScalarGradError", "InvalidOperandError",
    "DivisionByZeroError", "MissingBackwardRuleError",
    "register_backward", "get_backward_rule", "registered_op_kinds",
    "topo_sort", "backward", "zero_grad",
    "grad", "grads", "grads_list", "value",
    "GradCheckConfig", "GradCheckResult", "check_grads", "numerical_grads",
]
