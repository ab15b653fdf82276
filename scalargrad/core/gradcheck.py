# scalargrad/core/gradcheck.py
"""
Finite-difference gradient checking.

The reverse pass is compared against a numerical estimate of the same partial
derivatives:

    ∂f/∂xᵢ ≈ (f(x + ε·eᵢ) - f(x)) / ε

evaluated with `scipy.optimize.approx_fprime` on plain floats. Every
evaluation builds a fresh graph from new leaves, so the check never disturbs
gradients already accumulated elsewhere.
"""

import numpy as np
from typing import Callable, List, Optional, Sequence
from dataclasses import dataclass
from scipy.optimize import approx_fprime

from .node import Node
from .seeds import grads_list, value


@dataclass
class GradCheckConfig:
    """Configuration for gradient checking."""
    epsilon: float = 1e-6  # Finite-difference step
    rtol: float = 1e-4
    atol: float = 1e-4

    # Logging
    verbose: bool = False


@dataclass
class GradCheckResult:
    """Outcome of a single gradient check."""
    analytic: np.ndarray
    numeric: np.ndarray
    max_abs_error: float
    passed: bool


def numerical_grads(f: Callable[[List[Node]], Node],
                    x0_list: Sequence[float],
                    epsilon: float = 1e-6) -> np.ndarray:
    """
    Forward-difference estimate of the gradient of f at x0_list.

    Args:
        f: function taking a list of Nodes and returning a scalar Node
           (or a plain number for constant functions)
        x0_list: evaluation point
        epsilon: finite-difference step

    Returns:
        np.ndarray of partials in input order
    """
    x0 = np.asarray(x0_list, dtype=np.float64)

    def f_scalar(x: np.ndarray) -> float:
        return float(value(f([Node(xi) for xi in x])))

    return approx_fprime(x0, f_scalar, epsilon)


def check_grads(f: Callable[[List[Node]], Node],
                x0_list: Sequence[float],
                config: Optional[GradCheckConfig] = None) -> GradCheckResult:
    """
    Compare reverse-mode gradients of f against finite differences.

    Usage:
        >>> result = check_grads(lambda xs: (xs[0] * xs[1]).tanh(), [0.3, -1.2])
        >>> result.passed
        True
    """
    config = config or GradCheckConfig()
    x0 = [float(x) for x in x0_list]

    analytic = np.asarray(grads_list(f, x0), dtype=np.float64)
    numeric = numerical_grads(f, x0, config.epsilon)

    err = np.abs(analytic - numeric)
    max_abs_error = float(err.max()) if err.size else 0.0
    passed = bool(np.allclose(analytic, numeric, rtol=config.rtol, atol=config.atol))

    if config.verbose:
        print("Gradient check:")
        for i, (a, n) in enumerate(zip(analytic, numeric)):
            print(f"  x{i}: analytic={a: .8e}  numeric={n: .8e}  |diff|={abs(a - n):.2e}")
        print(f"  max |diff| = {max_abs_error:.2e}  -> {'OK' if passed else 'FAILED'}")

    return GradCheckResult(analytic=analytic, numeric=numeric,
                           max_abs_error=max_abs_error, passed=passed)
