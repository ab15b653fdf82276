# scalargrad/ops/__init__.py

# Importing the modules registers their backward rules
from . import arithmetic
from . import transcendental

# Convenience re-exports so users can do: from scalargrad.ops import mul, exp, ...
from .arithmetic import add, sub, mul, div, neg, pow
from .transcendental import tanh, exp

__all__ = [
    "add", "sub", "mul", "div", "neg", "pow",
    "tanh", "exp",
]
