# revad/core/__init__.py

"""
Core public API of the reverse-mode engine.

Exports:
    Codual             : The recording number users compute with.
    Tape, Node, Op     : The node arena and its records.
    reverse            : Reverse pass returning the gradient w.r.t. the seeds.
    adjoints           : Reverse pass returning every node's adjoint.
    derivative_at      : Value and gradient of f(x0, x1, ...) at a point.
    derivative_at_list : Same, for f taking a list of Coduals.
    differentiate      : Curried derivative_at.
    grad, value        : Single-input convenience helpers.
    record             : Forward pass only, returns (tape, output).
    Result             : Value plus derivative vector.
"""

from .node import IGNORE, Node, Op
from .tape import Tape, create
from .var import Codual
from .engine import adjoints, reverse
from .result import Result
from .seeds import (
    derivative_at,
    derivative_at_list,
    differentiate,
    differentiate_list,
    grad,
    record,
    value,
)

__all__ = [
    "IGNORE", "Node", "Op",
    "Tape", "create",
    "Codual",
    "adjoints", "reverse",
    "Result",
    "derivative_at", "derivative_at_list",
    "differentiate", "differentiate_list",
    "grad", "record", "value",
]
