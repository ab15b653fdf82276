# scalargrad/nn/module.py
from typing import List

from ..core.node import Node


class Module:

    def zero_grad(self):
        for p in self.parameters():
            p.grad = 0.0

    def parameters(self) -> List[Node]:
        return []
