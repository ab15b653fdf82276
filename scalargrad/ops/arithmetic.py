# scalargrad/ops/arithmetic.py
import numpy as np
from ..core.node import Node, ADD, MUL, POW, is_scalar
from ..core.registry import register_backward
from ..core.errors import InvalidOperandError, DivisionByZeroError


def _as_node(x):
    """Ensure x is a Node; otherwise lift the plain number into a fresh leaf."""
    return x if isinstance(x, Node) else Node(x)


# ------------------------------- primitives -------------------------------- #
def add(x, y):
    x = _as_node(x)
    y = _as_node(y)
    return Node(x.value + y.value, operands=(x, y), op_kind=ADD)


def mul(x, y):
    x = _as_node(x)
    y = _as_node(y)
    return Node(x.value * y.value, operands=(x, y), op_kind=MUL)


def pow(x, k):
    """
    Power by a plain scalar exponent:
      out.value = x.value ** k

    Node-valued exponents are not supported; `k` must be an int/float (or a
    numpy real scalar) and anything else raises InvalidOperandError before a
    node is built. Outside the real domain (negative base with a fractional
    exponent, zero base with a negative exponent) numpy's nan/inf results and
    RuntimeWarnings are passed through.
    """
    if isinstance(k, Node) or not is_scalar(k):
        raise InvalidOperandError(
            f"pow() exponent must be a plain real number, got {type(k).__name__}"
        )
    try:
        k = float(k)
    except OverflowError:
        raise InvalidOperandError(f"pow() exponent {k} is out of float range") from None
    x = _as_node(x)
    return Node(np.power(x.value, k), operands=(x,), op_kind=POW, exponent=k)


# ------------------------- derived (no own rules) -------------------------- #
def neg(x):
    return mul(x, -1.0)


def sub(x, y):
    return add(x, neg(y))


def div(x, y):
    """
    x / y expressed as x * y**-1.

    The zero check on the denominator runs first, so a failing division
    leaves the graph untouched.
    """
    y_val = y.value if isinstance(y, Node) else y
    if is_scalar(y_val) and y_val == 0.0:
        raise DivisionByZeroError("division by zero")
    return mul(x, pow(y, -1.0))


# ----------------------------- backward rules ------------------------------ #
@register_backward(ADD)
def _add_backward(out):
    a, b = out.operands
    a.grad += out.grad
    b.grad += out.grad


@register_backward(MUL)
def _mul_backward(out):
    a, b = out.operands
    a.grad += b.value * out.grad
    b.grad += a.value * out.grad


@register_backward(POW)
def _pow_backward(out):
    (a,) = out.operands
    k = out.exponent
    a.grad += float(k * np.power(a.value, k - 1.0) * out.grad)
