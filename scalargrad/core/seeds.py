# scalargrad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List, Union

from .node import Node, is_scalar
from .engine import backward, zero_grad

Number = Union[int, float]


def value(x: Any) -> Any:
    """Return the numeric value of a Node; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Node) else x


def _ensure_node(v: Any, *, label: str) -> Node:
    """Wrap a plain value as a labelled leaf if needed; otherwise return the Node itself."""
    if isinstance(v, Node):
        # Inputs the function ignores are not reached by zero_grad below
        v.grad = 0.0
        return v
    return Node(v, label=label)


def _run(y: Any, caller: str) -> None:
    if isinstance(y, Node):
        zero_grad(y)
        backward(y, seed=1.0)
    elif not is_scalar(y):
        raise ValueError(f"{caller} expects scalar output, got {type(y).__name__}.")
    # A plain number is a constant function: every gradient stays 0.


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Node], Node], x0: Union[Number, Node]) -> float:
    """
    Derivative of a scalar function y=f(x) at x0.
    Builds a fresh graph on every call, so gradients never leak between calls.
    """
    x = _ensure_node(x0, label="x")
    _run(f(x), "grad(f, x0)")
    return x.grad


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Node]], Node],
          inputs: Dict[str, Union[Number, Node]]) -> Dict[str, float]:
    """
    Gradient of y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE reverse pass to obtain all dy/dvar simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Node} and returning a scalar Node
    inputs  : dict {name: number}

    Returns
    -------
    dict {name: float}  # gradients in the same key order as `inputs`
    """
    nodes: Dict[str, Node] = {k: _ensure_node(v, label=k) for k, v in inputs.items()}
    _run(f(nodes), "grads(f, inputs)")
    return {k: nodes[k].grad for k in inputs.keys()}


def grads_list(f: Callable[[List[Node]], Node],
               x0_list: Iterable[Union[Number, Node]]) -> List[float]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs: List[Node] = [_ensure_node(v, label=f"x{i}") for i, v in enumerate(x0_list)]
    _run(f(xs), "grads_list(f, x0_list)")
    return [x.grad for x in xs]
