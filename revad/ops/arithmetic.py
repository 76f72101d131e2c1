# revad/ops/arithmetic.py
import numbers
import operator

import numpy as np

from ..core.node import IGNORE, NONE, Op
from ..core.var import Codual


def _as_const(x):
    """Coerce a plain real number into a float64 constant."""
    if isinstance(x, numbers.Real):
        return np.float64(x)
    raise TypeError(f"unsupported operand type for Codual arithmetic: {type(x).__name__}")


def _plain(x):
    # Real numbers become float64 so x / 0.0 follows IEEE; forward-mode
    # numbers are passed through to their own operators.
    return np.float64(x) if isinstance(x, numbers.Real) else x


def _shared_tape(x: Codual, y: Codual):
    if x.tape is not y.tape:
        raise ValueError("Cannot combine Coduals recorded on different tapes")
    return x.tape


def _binary(x, y, f, op: Op):
    """
    Generic binary primitive:
      - computes out.val = f(x.val, y.val)
      - pushes one node holding both operand indices and magnitudes
    A plain number on either side is recorded as a constant: its value goes
    into the operand slot and its index is IGNORE.
    """
    if isinstance(x, Codual) and isinstance(y, Codual):
        tape = _shared_tape(x, y)
        idx = tape.push_node(x.idx, x.val, y.idx, y.val, op)
        return Codual(f(x.val, y.val), tape, idx)
    if isinstance(x, Codual):
        c = _as_const(y)
        idx = x.tape.push_node(x.idx, x.val, IGNORE, c, op)
        return Codual(f(x.val, c), x.tape, idx)
    if isinstance(y, Codual):
        c = _as_const(x)
        idx = y.tape.push_node(IGNORE, c, y.idx, y.val, op)
        return Codual(f(c, y.val), y.tape, idx)
    # Neither side is recording: plain or forward-mode arithmetic
    return f(_plain(x), _plain(y))


def add(x, y): return _binary(x, y, operator.add,     Op.ADD)
def sub(x, y): return _binary(x, y, operator.sub,     Op.SUB)
def mul(x, y): return _binary(x, y, operator.mul,     Op.MUL)
def div(x, y): return _binary(x, y, operator.truediv, Op.DIV)


def neg(x):
    """Unary negation: out.val = -x.val"""
    if not isinstance(x, Codual):
        return -_plain(x)
    idx = x.tape.push_node(x.idx, NONE, IGNORE, NONE, Op.NEG)
    return Codual(-x.val, x.tape, idx)


def pow(x, k):
    """
    Integer power: out.val = x.val ** k

    The exponent is a constant fixed at call time, never a differentiated
    quantity: floats and Coduals are rejected with TypeError. The node stores
    the base in val1 and k in val2.
    """
    if isinstance(k, Codual):
        raise TypeError("Exponent must be a constant integer, not a Codual")
    k = operator.index(k)
    if not isinstance(x, Codual):
        return _plain(x) ** k
    idx = x.tape.push_node(x.idx, x.val, IGNORE, np.float64(k), Op.POW)
    return Codual(x.val ** k, x.tape, idx)
