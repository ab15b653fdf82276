# scalargrad/nn/neuron.py
import numpy as np
from typing import List, Optional, Sequence

from ..core.node import Node
from ..ops.arithmetic import _as_node
from ..ops.transcendental import tanh
from .module import Module


class Neuron(Module):
    """
    Single tanh unit: out = tanh(b + Σ wᵢ·xᵢ).

    Args:
        n_inputs: number of inputs
        rng: numpy Generator used for initialisation (fresh default_rng() if None)
        weights: explicit initial weights; drawn uniformly from [-1, 1] if None
        bias: explicit initial bias; drawn uniformly from [-1, 1] if None
    """

    def __init__(self, n_inputs: int, rng: Optional[np.random.Generator] = None,
                 weights: Optional[Sequence[float]] = None, bias: Optional[float] = None):
        rng = rng if rng is not None else np.random.default_rng()
        if weights is not None:
            if len(weights) != n_inputs:
                raise ValueError(
                    f"Got {len(weights)} weights for a neuron with {n_inputs} inputs"
                )
            self.w = [Node(w) for w in weights]
        else:
            self.w = [Node(w) for w in rng.uniform(-1.0, 1.0, size=n_inputs)]
        self.b = Node(bias if bias is not None else rng.uniform(-1.0, 1.0))

    def __call__(self, x) -> Node:
        if len(x) != len(self.w):
            raise ValueError(f"Expected {len(self.w)} inputs, got {len(x)}")
        act = self.b
        for wi, xi in zip(self.w, x):
            act = act + wi * _as_node(xi)
        return tanh(act)

    @property
    def weights(self) -> List[Node]:
        return self.w

    @property
    def bias(self) -> Node:
        return self.b

    def parameters(self) -> List[Node]:
        return self.w + [self.b]

    def __repr__(self):
        return f"TanhNeuron({len(self.w)})"
