# revad/ops/__init__.py

# Convenience re-exports so users can do: from revad.ops import mul, exp, ...
from .arithmetic import add, sub, mul, div, neg, pow
from .transcendental import exp, log, absolute
from .trig import sin, cos, sin_deg, cos_deg

__all__ = [
    "add", "sub", "mul", "div", "neg", "pow",
    "exp", "log", "absolute",
    "sin", "cos", "sin_deg", "cos_deg",
]
