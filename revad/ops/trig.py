# revad/ops/trig.py
import numpy as np

from ..core.node import Op
from .transcendental import _unary


def _sin_deg(x):
    return np.sin(x * np.pi / 180.0)


def _cos_deg(x):
    return np.cos(x * np.pi / 180.0)


def sin(x):
    return _unary(x, np.sin, Op.SIN)


def cos(x):
    return _unary(x, np.cos, Op.COS)


def sin_deg(x):
    """Sine of an angle in degrees."""
    return _unary(x, _sin_deg, Op.SIN_DEG)


def cos_deg(x):
    """Cosine of an angle in degrees."""
    return _unary(x, _cos_deg, Op.COS_DEG)
