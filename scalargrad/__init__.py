# scalargrad/__init__.py
# Reverse-mode automatic differentiation over scalar computation graphs

from .core.node import Node
from .core.errors import (
    ScalarGradError,
    InvalidOperandError,
    DivisionByZeroError,
    MissingBackwardRuleError,
)
from .core.engine import topo_sort, backward, zero_grad
from .core.registry import register_backward, get_backward_rule

# Importing ops registers the backward rules of the primitives
from . import ops
from .ops import add, sub, mul, div, neg, pow, tanh, exp

from .core.seeds import grad, grads, grads_list, value
from .core.gradcheck import GradCheckConfig, check_grads

from . import nn

__version__ = "0.1.0"

__all__ = [
    # Core
    'Node',
    'topo_sort',
    'backward',
    'zero_grad',
    'register_backward',
    'get_backward_rule',
    # Errors
    'ScalarGradError',
    'InvalidOperandError',
    'DivisionByZeroError',
    'MissingBackwardRuleError',
    # Ops
    'ops',
    'add', 'sub', 'mul', 'div', 'neg', 'pow', 'tanh', 'exp',
    # Drivers
    'grad',
    'grads',
    'grads_list',
    'value',
    'GradCheckConfig',
    'check_grads',
    # Composition layer
    'nn',
]
