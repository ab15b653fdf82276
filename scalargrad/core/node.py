# scalargrad/core/node.py
from __future__ import annotations
import numpy as np
from typing import Optional, Sequence

# Op kinds understood by the engine
LEAF = "leaf"
ADD = "add"
MUL = "mul"
POW = "pow"
TANH = "tanh"
EXP = "exp"

# Operand count required by each built-in op kind
ARITY = {LEAF: 0, ADD: 2, MUL: 2, POW: 1, TANH: 1, EXP: 1}


def is_scalar(x) -> bool:
    """True for plain real numbers (int, float, numpy real scalars), False for bool."""
    if isinstance(x, (bool, np.bool_)):
        return False
    return isinstance(x, (int, float, np.integer, np.floating))


class Node:
    """
    A scalar in a dynamically built computation graph.

    Attributes
    ----------
    value : float
        Forward (primal) value, computed eagerly when the node is created.
    grad : float
        Reverse-mode gradient accumulator. Starts at 0.0 and is only ever
        added to by backward rules (the root is seeded by `backward`).
    operands : tuple[Node, ...]
        The nodes this one was computed from (empty for leaves). A node may
        be an operand of several consumers; the relation is acyclic.
    op_kind : str
        Tag of the producing operation ("leaf", "add", "mul", "pow", "tanh",
        "exp"); selects the backward rule.
    exponent : float | None
        Scalar exponent of a "pow" node, None otherwise.
    label : str
        Optional debug/pretty-print name.
    """

    __slots__ = ("value", "grad", "operands", "op_kind", "exponent", "label")

    def __init__(self, value, operands: Sequence[Node] = (), op_kind: str = LEAF,
                 label: Optional[str] = None, exponent: Optional[float] = None):
        if not is_scalar(value):
            raise TypeError(
                f"Node only accepts real scalars (int, float, numpy scalar), "
                f"but got {type(value)}"
            )
        operands = tuple(operands)
        for op in operands:
            if not isinstance(op, Node):
                raise TypeError(f"Node operands must be Nodes, got {type(op)}")
        expected = ARITY.get(op_kind)
        if expected is not None and len(operands) != expected:
            raise ValueError(
                f"op kind {op_kind!r} takes {expected} operand(s), got {len(operands)}"
            )

        self.value = float(value)
        self.grad = 0.0
        self.operands = operands
        self.op_kind = op_kind
        self.exponent = exponent
        self.label = label or ""

    @property
    def is_leaf(self) -> bool:
        return not self.operands

    def __repr__(self):
        return (f"Node(value={self.value!r}, grad={self.grad!r}, "
                f"op={self.op_kind!r}, label={self.label!r})")

    # Operator overloading; the arithmetic surface lives in scalargrad.ops
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, other):
        from ..ops.arithmetic import pow
        return pow(self, other)

    def __rpow__(self, other):
        # number ** node would need a node-valued exponent
        from ..ops.arithmetic import pow
        return pow(other, self)

    def tanh(self):
        from ..ops.transcendental import tanh
        return tanh(self)

    def exp(self):
        from ..ops.transcendental import exp
        return exp(self)

    def backward(self, seed: float = 1.0):
        from .engine import backward
        backward(self, seed=seed)

    # Comparators look at the value only and record nothing in the graph
    def _cmp_value(self, other):
        if isinstance(other, Node):
            return other.value
        if is_scalar(other):
            return float(other)
        return NotImplemented

    def __eq__(self, other):
        v = self._cmp_value(other)
        return v if v is NotImplemented else self.value == v

    def __ne__(self, other):
        v = self._cmp_value(other)
        return v if v is NotImplemented else self.value != v

    def __lt__(self, other):
        v = self._cmp_value(other)
        return v if v is NotImplemented else self.value < v

    def __le__(self, other):
        v = self._cmp_value(other)
        return v if v is NotImplemented else self.value <= v

    def __gt__(self, other):
        v = self._cmp_value(other)
        return v if v is NotImplemented else self.value > v

    def __ge__(self, other):
        v = self._cmp_value(other)
        return v if v is NotImplemented else self.value >= v

    # Identity hashing: two nodes holding equal values stay distinct in sets/dicts
    __hash__ = object.__hash__
