# revad/ops/transcendental.py
import numbers

import numpy as np

from ..core.node import IGNORE, NONE, Op
from ..core.var import Codual


def _unary(x, f, op: Op):
    """
    Generic unary primitive. Coduals record one node holding the operand
    magnitude; plain reals are evaluated directly; anything else (Dual,
    Number) is dispatched to its method named after the op.
    """
    if isinstance(x, Codual):
        idx = x.tape.push_node(x.idx, x.val, IGNORE, NONE, op)
        return Codual(f(x.val), x.tape, idx)
    if isinstance(x, numbers.Real):
        return f(np.float64(x))
    method = getattr(x, op.value, None)
    if method is None:
        raise TypeError(f"{op.value}() does not support {type(x).__name__}")
    return method()


def exp(x):
    return _unary(x, np.exp, Op.EXP)


def log(x):
    return _unary(x, np.log, Op.LOG)


def absolute(x):
    """|x|; the recorded gradient is sign(x), with +1 at zero."""
    return _unary(x, np.abs, Op.ABS)
