# scalargrad/nn/layer.py
import numpy as np
from typing import List, Optional

from ..core.node import Node
from .module import Module
from .neuron import Neuron


class Layer(Module):

    def __init__(self, n_inputs: int, n_outputs: int, rng: Optional[np.random.Generator] = None):
        rng = rng if rng is not None else np.random.default_rng()
        self.neurons = [Neuron(n_inputs, rng=rng) for _ in range(n_outputs)]

    def __call__(self, x):
        out = [n(x) for n in self.neurons]
        return out[0] if len(out) == 1 else out

    def parameters(self) -> List[Node]:
        return [p for n in self.neurons for p in n.parameters()]

    def __repr__(self):
        return f"Layer of [{', '.join(str(n) for n in self.neurons)}]"


class MLP(Module):
    """
    Stack of layers; sizes = [n_inputs] + layer_sizes.

    A layer with a single neuron yields a bare Node, which the next layer
    cannot consume, so only the last layer should have size 1.
    """

    def __init__(self, n_inputs: int, layer_sizes: List[int],
                 rng: Optional[np.random.Generator] = None):
        rng = rng if rng is not None else np.random.default_rng()
        sz = [n_inputs] + list(layer_sizes)
        self.layers = [Layer(sz[i], sz[i + 1], rng=rng) for i in range(len(layer_sizes))]

    def __call__(self, x):
        for layer in self.layers:
            x = layer(x)
        return x

    def parameters(self) -> List[Node]:
        return [p for layer in self.layers for p in layer.parameters()]

    def __repr__(self):
        return f"MLP of [{', '.join(str(layer) for layer in self.layers)}]"
