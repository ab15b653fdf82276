# scalargrad/ops/transcendental.py
import math
import warnings
from ..core.node import Node, TANH, EXP
from ..core.registry import register_backward
from .arithmetic import _as_node


def tanh(x):
    x = _as_node(x)
    return Node(math.tanh(x.value), operands=(x,), op_kind=TANH)


def exp(x):
    x = _as_node(x)
    try:
        e = math.exp(x.value)
    except OverflowError:
        warnings.warn(f"overflow encountered in exp({x.value})", RuntimeWarning)
        e = math.inf
    return Node(e, operands=(x,), op_kind=EXP)


@register_backward(TANH)
def _tanh_backward(out):
    # d tanh(a)/da = 1 - tanh(a)^2, reusing the forward value
    (a,) = out.operands
    a.grad += (1.0 - out.value ** 2) * out.grad


@register_backward(EXP)
def _exp_backward(out):
    (a,) = out.operands
    a.grad += out.value * out.grad
