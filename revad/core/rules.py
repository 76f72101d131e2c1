# revad/core/rules.py
"""
Local gradient rules for every recorded primitive.

A rule receives the accumulated output adjoint `dy` together with the operand
values stored on the node, and returns the contributions to add to the
adjoints of operand 1 and operand 2 (in that order). Rules are pure: they never
look at the tape outside the node being propagated. Contributions for slots
that hold a constant are computed anyway and dropped by the engine.

All arithmetic is numpy float64, so a zero divisor yields inf/nan instead of
raising (subject to `numpy.errstate`).
"""

from typing import Callable, Dict, Tuple

import numpy as np

from .node import Node, Op

Rule = Callable[[float, float, float], Tuple[float, float]]

GRADIENT_RULES: Dict[Op, Rule] = {}


def def_rule(op: Op) -> Callable[[Rule], Rule]:
    """Register the decorated function as the gradient rule for `op`."""
    def register(fn: Rule) -> Rule:
        GRADIENT_RULES[op] = fn
        return fn
    return register


@def_rule(Op.NEG)
def _neg(dy, x, _):
    return -dy, 0.0


@def_rule(Op.ADD)
def _add(dy, x, y):
    return dy, dy


@def_rule(Op.SUB)
def _sub(dy, x, y):
    return dy, -dy


@def_rule(Op.MUL)
def _mul(dy, x, y):
    # d(x*y) = y dx + x dy
    return dy * y, dy * x


@def_rule(Op.DIV)
def _div(dy, x, y):
    # d(x/y) = dx / y - x dy / y^2
    return dy / y, -x * dy / (y * y)


@def_rule(Op.POW)
def _pow(dy, x, k):
    k = int(k)
    if k == 0:
        return 0.0, 0.0
    return dy * k * x ** (k - 1), 0.0


@def_rule(Op.EXP)
def _exp(dy, x, _):
    return dy * np.exp(x), 0.0


@def_rule(Op.LOG)
def _log(dy, x, _):
    return dy / x, 0.0


@def_rule(Op.ABS)
def _abs(dy, x, _):
    return (-dy if x < 0 else dy), 0.0


@def_rule(Op.SIN)
def _sin(dy, x, _):
    return dy * np.cos(x), 0.0


@def_rule(Op.SIN_DEG)
def _sin_deg(dy, x, _):
    return dy * np.cos(x * np.pi / 180.0), 0.0


@def_rule(Op.COS)
def _cos(dy, x, _):
    return dy * -np.sin(x), 0.0


@def_rule(Op.COS_DEG)
def _cos_deg(dy, x, _):
    return dy * -np.sin(x * np.pi / 180.0), 0.0


def contributions(node: Node, dy: float) -> Tuple[float, float]:
    """Apply the rule registered for `node.op`."""
    try:
        rule = GRADIENT_RULES[node.op]
    except KeyError:
        raise ValueError(f"No gradient rule for op {node.op!r}") from None
    return rule(dy, node.val1, node.val2)
