# revad/check.py
"""
Reverse-mode gradient vs. finite-difference bumping.

A verification aid for user functions: the tape gradient is compared
against scipy's forward-difference approximation at the same point.
"""

from typing import Callable, NamedTuple, Sequence

import numpy as np
from scipy.optimize import approx_fprime

from .core.seeds import derivative_at


class GradientCheck(NamedTuple):
    value: float
    analytic: np.ndarray     # reverse-mode gradient
    numeric: np.ndarray      # finite-difference gradient
    max_abs_error: float

    def passed(self, tol: float = 1e-5) -> bool:
        return bool(self.max_abs_error <= tol)


def check_gradient(f: Callable, xs: Sequence[float], epsilon: float = 1.4901161193847656e-08) -> GradientCheck:
    """
    Compare derivative_at(f, *xs) with approx_fprime at the same point.

    Args:
        f       : function of N Coduals, as accepted by derivative_at
        xs      : evaluation point
        epsilon : bump size for the finite differences

    Returns:
        GradientCheck(value, analytic, numeric, max_abs_error)
    """
    x0 = np.asarray(xs, dtype=np.float64)
    res = derivative_at(f, *x0)

    def bumped(x):
        return float(derivative_at(f, *x).value)

    if len(x0) == 0:
        return GradientCheck(float(res.value), np.zeros(0), np.zeros(0), 0.0)

    numeric = approx_fprime(x0, bumped, epsilon)
    analytic = np.array(res.derivatives)
    err = float(np.max(np.abs(analytic - numeric)))
    return GradientCheck(float(res.value), analytic, numeric, err)
